"""Hand a resolved fleet to a Claude Agent SDK host.

Nothing here talks to a model backend; it only builds the SDK option
objects a host would pass to ``query()``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from claude_agent_sdk import AgentDefinition as SdkAgentDefinition
from claude_agent_sdk import ClaudeAgentOptions

from swarm_fleet.errors import FleetError
from swarm_fleet.models import AgentCategory, AgentDefinition

READ_ONLY_TOOLS = ["Read", "Glob", "Grep"]
WRITE_TOOLS = ["Read", "Write", "Edit", "Bash", "Glob", "Grep"]

_SDK_MODEL_ALIASES = ("opus", "sonnet", "haiku")

# Family name as its own token: "claude-opus-4", not "magnumopus"
_ALIAS_TOKENS = [(alias, re.compile(rf"(?<![a-z]){alias}(?![a-z])")) for alias in _SDK_MODEL_ALIASES]


def sdk_model_alias(model_id: str) -> str:
    """Reduce a provider model id to an SDK alias, or ``inherit``."""
    lowered = model_id.lower()
    for alias, token in _ALIAS_TOKENS:
        if token.search(lowered):
            return alias
    return "inherit"


def tools_for(category: AgentCategory) -> list[str]:
    # Specialists and reviewers are advisory and must not alter artifacts
    if category is AgentCategory.PIPELINE_WORKER:
        return list(WRITE_TOOLS)
    return list(READ_ONLY_TOOLS)


def to_sdk_agents(definitions: Iterable[AgentDefinition]) -> dict[str, SdkAgentDefinition]:
    """Map every subagent in *definitions* to an SDK agent definition."""
    return {
        d.name: SdkAgentDefinition(
            description=d.description,
            prompt=d.prompt,
            tools=tools_for(d.category),
            model=sdk_model_alias(d.model),
        )
        for d in definitions
        if d.category is not AgentCategory.ORCHESTRATOR
    }


def orchestrator_options(definitions: Iterable[AgentDefinition], swarm_id: str) -> ClaudeAgentOptions:
    """Build host options for one swarm: orchestrator prompt plus its subagents.

    Raises FleetError if the swarm has no enabled orchestrator.
    """
    members = [d for d in definitions if d.swarm_id == swarm_id]
    orchestrator = next((d for d in members if d.category is AgentCategory.ORCHESTRATOR), None)
    if orchestrator is None:
        raise FleetError(f"Swarm '{swarm_id}' has no enabled orchestrator")
    model = sdk_model_alias(orchestrator.model)
    return ClaudeAgentOptions(
        system_prompt=orchestrator.prompt,
        model=None if model == "inherit" else model,
        agents=to_sdk_agents(members),
    )
