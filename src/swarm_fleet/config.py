"""Plugin configuration schema: swarms and per-agent overrides.

Parsing is fail-soft. Each override field is checked on its own and a
bad value is dropped (with a warning) while its siblings are kept, so a
partially malformed swarm still builds.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swarm_fleet.catalog import TUNABLE_PARAMETERS

logger = logging.getLogger(__name__)

MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


class AgentOverride(BaseModel):
    """Overrides for one agent, or for a whole category via a pseudo-key."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    model: str | None = None
    temperature: float | None = None
    disabled: bool | None = None
    prompt: str | None = None
    append_prompt: str | None = None

    @field_validator("model", mode="before")
    @classmethod
    def _validate_model(cls, v: Any) -> str | None:
        if v is None:
            return None
        if isinstance(v, str) and v.strip():
            return v.strip()
        logger.warning("Ignoring invalid model override: %r", v)
        return None

    @field_validator("temperature", mode="before")
    @classmethod
    def _validate_temperature(cls, v: Any) -> float | None:
        if v is None:
            return None
        # bool is an int subclass; "true" is not a temperature
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            logger.warning("Ignoring non-numeric temperature override: %r", v)
            return None
        if not MIN_TEMPERATURE <= v <= MAX_TEMPERATURE:
            logger.warning("Ignoring out-of-range temperature override: %r", v)
            return None
        return float(v)

    @field_validator("disabled", mode="before")
    @classmethod
    def _validate_disabled(cls, v: Any) -> bool | None:
        if v is None or isinstance(v, bool):
            return v
        logger.warning("Ignoring non-boolean disabled flag: %r", v)
        return None

    @field_validator("prompt", "append_prompt", mode="before")
    @classmethod
    def _validate_text(cls, v: Any) -> str | None:
        if v is None or isinstance(v, str):
            return v
        logger.warning("Ignoring non-text prompt override: %r", v)
        return None

    def parameter(self, name: str) -> Any | None:
        """Return the override for tunable parameter *name*, if set."""
        if name not in TUNABLE_PARAMETERS:
            return None
        return getattr(self, name, None)


def _coerce_overrides(value: Any) -> dict[str, Any]:
    """Normalize an ``agents`` map, replacing malformed records with empty ones."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        logger.warning("Ignoring agents override map of type %s", type(value).__name__)
        return {}
    result: dict[str, Any] = {}
    for key, record in value.items():
        if not isinstance(key, str):
            logger.warning("Ignoring override with non-string key: %r", key)
            continue
        if isinstance(record, AgentOverride):
            result[key] = record
        elif isinstance(record, Mapping):
            result[key] = dict(record)
        else:
            logger.warning("Ignoring malformed override for %r: %r", key, record)
            result[key] = {}
    return result


class SwarmDefinition(BaseModel):
    """One isolated agent fleet with its own overrides."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = None
    agents: dict[str, AgentOverride] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str | None:
        if v is None or (isinstance(v, str) and v.strip()):
            return v
        logger.warning("Ignoring invalid swarm display name: %r", v)
        return None

    @field_validator("agents", mode="before")
    @classmethod
    def _validate_agents(cls, v: Any) -> dict[str, Any]:
        return _coerce_overrides(v)


class PluginConfig(BaseModel):
    """Top-level configuration consumed by the fleet builder."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Legacy single-swarm overrides, used only when no swarms are declared
    agents: dict[str, AgentOverride] = Field(default_factory=dict)
    swarms: dict[str, SwarmDefinition] = Field(default_factory=dict)

    @field_validator("agents", mode="before")
    @classmethod
    def _validate_agents(cls, v: Any) -> dict[str, Any]:
        return _coerce_overrides(v)

    @field_validator("swarms", mode="before")
    @classmethod
    def _validate_swarms(cls, v: Any) -> dict[str, Any]:
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            logger.warning("Ignoring swarms map of type %s", type(v).__name__)
            return {}
        result: dict[str, Any] = {}
        for swarm_id, definition in v.items():
            if not isinstance(swarm_id, str) or not swarm_id:
                logger.warning("Ignoring swarm with invalid id: %r", swarm_id)
                continue
            if isinstance(definition, SwarmDefinition):
                result[swarm_id] = definition
            elif isinstance(definition, Mapping):
                result[swarm_id] = dict(definition)
            else:
                logger.warning("Ignoring malformed swarm %r: %r", swarm_id, definition)
                result[swarm_id] = {}
        return result
