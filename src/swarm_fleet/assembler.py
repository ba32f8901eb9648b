"""Assemble effective agent definitions for each swarm and for the fleet."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from swarm_fleet.catalog import DEFAULT_SWARM_ID, ORCHESTRATOR_NAME, classify
from swarm_fleet.config import AgentOverride, PluginConfig, SwarmDefinition
from swarm_fleet.domains import DOMAIN_PATTERNS, domain_to_agent_name
from swarm_fleet.loader import AgentPrompt
from swarm_fleet.models import AgentCategory, AgentDefinition
from swarm_fleet.naming import qualify, rewrite_references, swarm_prefix
from swarm_fleet.prompts import builtin_description, builtin_prompt
from swarm_fleet.resolver import is_disabled, resolve_model, resolve_parameters

logger = logging.getLogger(__name__)

PromptSource = Callable[[str], AgentPrompt]

LEGACY_SWARM_NAME = "Default"


@dataclass(frozen=True)
class AgentSpec:
    """One entry of the per-swarm build roster."""

    base_name: str
    category: AgentCategory


def _roster() -> tuple[AgentSpec, ...]:
    names = [
        ORCHESTRATOR_NAME,
        "explorer",
        *(domain_to_agent_name(domain) for domain in DOMAIN_PATTERNS),
        "coder",
        "security_reviewer",
        "auditor",
        "test_engineer",
    ]
    return tuple(AgentSpec(name, classify(name)) for name in names)


# Build order for every swarm; output order follows it.
AGENT_ROSTER: tuple[AgentSpec, ...] = _roster()


def _no_custom_prompts(base_name: str) -> AgentPrompt:
    return AgentPrompt()


def _resolve_prompt(
    spec: AgentSpec,
    override: AgentOverride | None,
    custom: AgentPrompt,
    swarm_id: str,
    is_default: bool,
) -> str:
    """Pick replacement or built-in text, then add any append text.

    Operator text is opaque, so orchestrator mentions in it are rewritten;
    the built-in orchestrator template is rendered with the prefix instead.
    """
    is_orchestrator = spec.category is AgentCategory.ORCHESTRATOR

    def _operator_text(text: str) -> str:
        if is_orchestrator:
            return rewrite_references(text, swarm_id, is_default)
        return text

    replacement = (override.prompt if override else None) or custom.prompt
    if replacement:
        return _operator_text(replacement)

    text = builtin_prompt(spec.base_name, swarm_prefix(swarm_id, is_default))
    append = (override.append_prompt if override else None) or custom.append_prompt
    if append:
        text = f"{text}\n\n{_operator_text(append)}"
    return text


def build_agent(
    spec: AgentSpec,
    swarm_id: str,
    swarm: SwarmDefinition,
    is_default: bool,
    prompts: PromptSource = _no_custom_prompts,
) -> AgentDefinition | None:
    """Build one agent for a swarm, or None when it is disabled there."""
    overrides = swarm.agents
    if is_disabled(spec.base_name, overrides):
        logger.debug("Skipping disabled agent %s in swarm %s", spec.base_name, swarm_id)
        return None

    description = builtin_description(spec.base_name)
    if spec.category is AgentCategory.ORCHESTRATOR and not is_default:
        description = f"[{swarm.name or swarm_id}] {description}"

    return AgentDefinition(
        name=qualify(swarm_id, is_default, spec.base_name),
        base_name=spec.base_name,
        swarm_id=swarm_id,
        category=spec.category,
        description=description,
        model=resolve_model(spec.base_name, overrides),
        parameters=resolve_parameters(spec.base_name, overrides),
        prompt=_resolve_prompt(
            spec, overrides.get(spec.base_name), prompts(spec.base_name), swarm_id, is_default,
        ),
    )


def assemble_swarm(
    swarm_id: str,
    swarm: SwarmDefinition,
    is_default: bool,
    *,
    prompts: PromptSource | None = None,
) -> list[AgentDefinition]:
    """Build every enabled agent of one swarm, in roster order."""
    source = prompts or _no_custom_prompts
    agents: list[AgentDefinition] = []
    for spec in AGENT_ROSTER:
        agent = build_agent(spec, swarm_id, swarm, is_default, source)
        if agent is not None:
            agents.append(agent)
    logger.debug(
        "Assembled swarm %s (%s): %d agent(s)",
        swarm_id, "default" if is_default else "prefixed", len(agents),
    )
    return agents


def select_default_swarm(swarm_ids: list[str]) -> str | None:
    """The swarm keyed ``default`` wins; otherwise the first declared one."""
    if not swarm_ids:
        return None
    if DEFAULT_SWARM_ID in swarm_ids:
        return DEFAULT_SWARM_ID
    return swarm_ids[0]


def _as_config(config: PluginConfig | Mapping[str, Any] | None) -> PluginConfig:
    if config is None:
        return PluginConfig()
    if isinstance(config, PluginConfig):
        return config
    return PluginConfig.model_validate(dict(config))


def build_fleet(
    config: PluginConfig | Mapping[str, Any] | None = None,
    *,
    prompts: PromptSource | None = None,
) -> list[AgentDefinition]:
    """Build the effective agent definitions for every configured swarm.

    With no swarms declared, a single implicit default swarm is built
    from the top-level ``agents`` overrides.
    """
    plugin_config = _as_config(config)

    if not plugin_config.swarms:
        legacy = SwarmDefinition(name=LEGACY_SWARM_NAME, agents=plugin_config.agents)
        return assemble_swarm(DEFAULT_SWARM_ID, legacy, True, prompts=prompts)

    swarm_ids = list(plugin_config.swarms)
    default_id = select_default_swarm(swarm_ids)
    logger.debug("Default swarm: %s (of %s)", default_id, ", ".join(swarm_ids))

    fleet: list[AgentDefinition] = []
    for swarm_id in swarm_ids:
        fleet.extend(
            assemble_swarm(
                swarm_id,
                plugin_config.swarms[swarm_id],
                swarm_id == default_id,
                prompts=prompts,
            )
        )
    return fleet


def get_agent_configs(
    config: PluginConfig | Mapping[str, Any] | None = None,
    *,
    prompts: PromptSource | None = None,
) -> dict[str, dict[str, Any]]:
    """Return the host handoff map: effective name -> host config record."""
    return {agent.name: agent.to_host_config() for agent in build_fleet(config, prompts=prompts)}
