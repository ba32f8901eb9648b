"""Pydantic models for resolved agent definitions."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator


class AgentCategory(str, Enum):
    """Behavioral category of an agent, derived from its base name."""

    ORCHESTRATOR = "orchestrator"
    SPECIALIST = "specialist"
    QUALITY_REVIEWER = "quality_reviewer"
    PIPELINE_WORKER = "pipeline_worker"


class AgentMode(str, Enum):
    """How the host runs an agent."""

    PRIMARY = "primary"
    SUBAGENT = "subagent"


class AgentDefinition(BaseModel):
    """A fully resolved agent, ready to hand to the orchestration host."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Effective identifier, unique within a fleet")
    base_name: str = Field(description="Unqualified catalog name (e.g., 'coder')")
    swarm_id: str = Field(description="Swarm this agent belongs to")
    category: AgentCategory
    description: str = ""
    model: str
    parameters: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    prompt: str = ""

    @field_validator("parameters", mode="after")
    @classmethod
    def _freeze_parameters(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @field_serializer("parameters")
    def _serialize_parameters(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mode(self) -> AgentMode:
        if self.category is AgentCategory.ORCHESTRATOR:
            return AgentMode.PRIMARY
        return AgentMode.SUBAGENT

    def to_host_config(self) -> dict[str, Any]:
        """Flatten into the record the orchestration host consumes."""
        return {
            "description": self.description,
            "mode": self.mode.value,
            "model": self.model,
            **self.parameters,
            "prompt": self.prompt,
        }
