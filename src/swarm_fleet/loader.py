"""Load plugin configuration and custom agent prompts from disk.

User config lives at ``$XDG_CONFIG_HOME/swarm-fleet/swarm-fleet.json``
(``~/.config/swarm-fleet`` by default); a project may add
``<project>/.swarm-fleet.json``, which is deep-merged over it.
Custom prompts are ``<name>.md`` (replaces the built-in text) and
``<name>_append.md`` (appended to it) in a prompts directory.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, NamedTuple

from swarm_fleet.config import PluginConfig
from swarm_fleet.errors import ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "swarm-fleet.json"
PROJECT_CONFIG_FILENAME = ".swarm-fleet.json"
PROMPTS_DIRNAME = "prompts"


class AgentPrompt(NamedTuple):
    """Operator-supplied instructional text for one agent."""

    prompt: str | None = None
    append_prompt: str | None = None


def default_user_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "swarm-fleet"


def _read_json_object(path: Path) -> dict[str, Any] | None:
    """Read *path* as a JSON object. Missing files yield None."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigLoadError(f"Config file {path} is not valid UTF-8: {e}", path=path) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config file {path} must contain a JSON object", path=path)
    logger.debug("Loaded config from %s", path)
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge *override* into a copy of *base*; nested dicts merge recursively."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_plugin_config(
    project_dir: Path | None = None,
    user_config_dir: Path | None = None,
) -> PluginConfig:
    """Load and merge the user and project config files.

    Raises ConfigLoadError if a file exists but is not a JSON object.
    """
    config_dir = user_config_dir if user_config_dir is not None else default_user_config_dir()
    data = _read_json_object(config_dir / CONFIG_FILENAME) or {}
    if project_dir is not None:
        project_data = _read_json_object(project_dir / PROJECT_CONFIG_FILENAME)
        if project_data:
            data = deep_merge(data, project_data)
    return PluginConfig.model_validate(data)


def _read_prompt_file(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable prompt file %s: %s", path, e)
        return None


def load_agent_prompt(base_name: str, prompts_dir: Path | None) -> AgentPrompt:
    """Load custom prompt files for *base_name* from *prompts_dir*."""
    if prompts_dir is None:
        return AgentPrompt()
    return AgentPrompt(
        prompt=_read_prompt_file(prompts_dir / f"{base_name}.md"),
        append_prompt=_read_prompt_file(prompts_dir / f"{base_name}_append.md"),
    )


def prompt_source(prompts_dir: Path | None):
    """Return a callable the assembler uses to look up custom prompts.

    Files are read once per agent name and reused across swarms.
    """
    cache: dict[str, AgentPrompt] = {}

    def _lookup(base_name: str) -> AgentPrompt:
        if base_name not in cache:
            cache[base_name] = load_agent_prompt(base_name, prompts_dir)
        return cache[base_name]

    return _lookup
