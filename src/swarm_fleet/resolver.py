"""Model and parameter resolution through the override precedence chain.

For the model and for each tunable parameter, the first tier with a
value wins:

1. explicit override for the agent's base name in this swarm
2. category override under the category pseudo-key in this swarm
3. built-in default (per agent, then per category, then global fallback)

All functions take the *base* name. Qualification with a swarm prefix
happens afterwards and never feeds back into resolution.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from swarm_fleet.catalog import (
    CATEGORY_DEFAULT_MODELS,
    CATEGORY_DEFAULT_PARAMETERS,
    DEFAULT_MODELS,
    DEFAULT_PARAMETERS,
    FALLBACK_MODEL,
    FALLBACK_PARAMETERS,
    TUNABLE_PARAMETERS,
    category_key,
    classify,
)
from swarm_fleet.config import AgentOverride

SwarmOverrides = Mapping[str, AgentOverride]


def _override_for(overrides: SwarmOverrides | None, key: str | None) -> AgentOverride | None:
    if not overrides or key is None:
        return None
    return overrides.get(key)


def resolve_model(base_name: str, overrides: SwarmOverrides | None = None) -> str:
    """Return the effective model identifier for *base_name*."""
    explicit = _override_for(overrides, base_name)
    if explicit is not None and explicit.model:
        return explicit.model

    category = classify(base_name)
    category_override = _override_for(overrides, category_key(category))
    if category_override is not None and category_override.model:
        return category_override.model

    return DEFAULT_MODELS.get(base_name) or CATEGORY_DEFAULT_MODELS.get(category) or FALLBACK_MODEL


def resolve_parameter(
    base_name: str,
    param_name: str,
    overrides: SwarmOverrides | None = None,
) -> Any:
    """Return the effective value of tunable parameter *param_name*."""
    explicit = _override_for(overrides, base_name)
    if explicit is not None:
        value = explicit.parameter(param_name)
        if value is not None:
            return value

    category = classify(base_name)
    category_override = _override_for(overrides, category_key(category))
    if category_override is not None:
        value = category_override.parameter(param_name)
        if value is not None:
            return value

    for table in (
        DEFAULT_PARAMETERS.get(base_name),
        CATEGORY_DEFAULT_PARAMETERS.get(category),
        FALLBACK_PARAMETERS,
    ):
        if table is not None and table.get(param_name) is not None:
            return table[param_name]
    return None


def resolve_parameters(base_name: str, overrides: SwarmOverrides | None = None) -> dict[str, Any]:
    """Resolve every tunable parameter for *base_name*."""
    return {name: resolve_parameter(base_name, name, overrides) for name in TUNABLE_PARAMETERS}


def is_disabled(base_name: str, overrides: SwarmOverrides | None = None) -> bool:
    """Only an explicit per-agent ``disabled: true`` disables an agent."""
    explicit = _override_for(overrides, base_name)
    return explicit is not None and explicit.disabled is True
