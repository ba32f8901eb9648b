"""Error hierarchy for swarm-fleet."""

from __future__ import annotations

from pathlib import Path


class FleetError(Exception):
    """Base error for all swarm-fleet operations."""


class ConfigLoadError(FleetError):
    """A configuration file exists but could not be parsed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path
