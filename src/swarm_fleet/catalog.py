"""Static agent catalog: names, categories and built-in defaults.

Everything here is module-level and read-only. Categories are never
stored on a config record; they are always derived from the base name
through :func:`classify`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from swarm_fleet.models import AgentCategory

ORCHESTRATOR_NAME = "architect"

SPECIALIST_PREFIX = "sme_"

SPECIALIST_AGENTS: tuple[str, ...] = (
    "sme_windows",
    "sme_powershell",
    "sme_python",
    "sme_oracle",
    "sme_network",
    "sme_security",
    "sme_linux",
    "sme_vmware",
    "sme_azure",
    "sme_active_directory",
    "sme_ui_ux",
    "sme_web",
    "sme_database",
    "sme_devops",
    "sme_api",
    "sme_ai",
    "sme_mobile",
    "sme_swift",
)

REVIEWER_AGENTS: tuple[str, ...] = ("security_reviewer", "auditor")

PIPELINE_AGENTS: tuple[str, ...] = ("explorer", "coder", "test_engineer")

ALL_SUBAGENT_NAMES: tuple[str, ...] = SPECIALIST_AGENTS + REVIEWER_AGENTS + PIPELINE_AGENTS

ALL_AGENT_NAMES: tuple[str, ...] = (ORCHESTRATOR_NAME,) + ALL_SUBAGENT_NAMES

_SPECIALIST_SET = frozenset(SPECIALIST_AGENTS)
_REVIEWER_SET = frozenset(REVIEWER_AGENTS)

# Reserved override-map keys meaning "every agent of this category".
CATEGORY_KEYS: Mapping[AgentCategory, str] = MappingProxyType({
    AgentCategory.SPECIALIST: "_specialist",
    AgentCategory.QUALITY_REVIEWER: "_reviewer",
    AgentCategory.PIPELINE_WORKER: "_pipeline",
})

DEFAULT_SWARM_ID = "default"

FALLBACK_MODEL = "google/gemini-2.0-flash"

DEFAULT_MODELS: Mapping[str, str] = MappingProxyType({
    # Orchestrator
    "architect": "anthropic/claude-sonnet-4-5",
    # Discovery runs often and wide; keep it on a fast model
    "explorer": "google/gemini-2.0-flash",
    "coder": "anthropic/claude-sonnet-4-5",
    "test_engineer": "google/gemini-2.0-flash",
})

CATEGORY_DEFAULT_MODELS: Mapping[AgentCategory, str] = MappingProxyType({
    AgentCategory.SPECIALIST: "google/gemini-2.0-flash",
    AgentCategory.QUALITY_REVIEWER: "google/gemini-2.0-flash",
})

TUNABLE_PARAMETERS: tuple[str, ...] = ("temperature",)

DEFAULT_PARAMETERS: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    "architect": MappingProxyType({"temperature": 0.1}),
    "explorer": MappingProxyType({"temperature": 0.1}),
    "coder": MappingProxyType({"temperature": 0.2}),
    "test_engineer": MappingProxyType({"temperature": 0.2}),
    "security_reviewer": MappingProxyType({"temperature": 0.1}),
    "auditor": MappingProxyType({"temperature": 0.1}),
})

CATEGORY_DEFAULT_PARAMETERS: Mapping[AgentCategory, Mapping[str, Any]] = MappingProxyType({
    AgentCategory.SPECIALIST: MappingProxyType({"temperature": 0.2}),
})

FALLBACK_PARAMETERS: Mapping[str, Any] = MappingProxyType({"temperature": 0.1})


def classify(base_name: str) -> AgentCategory:
    """Return the category of *base_name*.

    Names outside the catalog are treated as pipeline workers, so this
    never fails.
    """
    if base_name == ORCHESTRATOR_NAME:
        return AgentCategory.ORCHESTRATOR
    if base_name in _SPECIALIST_SET:
        return AgentCategory.SPECIALIST
    if base_name in _REVIEWER_SET:
        return AgentCategory.QUALITY_REVIEWER
    return AgentCategory.PIPELINE_WORKER


def is_specialist(name: str) -> bool:
    return name in _SPECIALIST_SET


def is_reviewer(name: str) -> bool:
    return name in _REVIEWER_SET


def is_subagent(name: str) -> bool:
    return name in ALL_SUBAGENT_NAMES


def category_key(category: AgentCategory) -> str | None:
    """Return the reserved override key for *category*, if it has one."""
    return CATEGORY_KEYS.get(category)
