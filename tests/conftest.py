"""Shared test fixtures for swarm-fleet."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def multi_swarm_config_dict() -> dict:
    """Two declared swarms, neither keyed 'default'."""
    return {
        "swarms": {
            "cloud": {
                "name": "Cloud",
                "agents": {
                    "coder": {"model": "anthropic/claude-opus-4", "temperature": 0.3},
                    "_specialist": {"model": "openai/gpt-4o"},
                },
            },
            "local": {
                "name": "Local",
                "agents": {
                    "coder": {"model": "ollama/qwen2.5-coder"},
                    "sme_network": {"disabled": True},
                },
            },
        }
    }


@pytest.fixture()
def prompts_dir(tmp_path: Path) -> Path:
    """Empty custom prompts directory."""
    d = tmp_path / "prompts"
    d.mkdir()
    return d
