"""Data models for dcsdash."""

from dcsdash.models.input_log import InputLogEntry
from dcsdash.models.telemetry import (
    Acceleration,
    Attitude,
    EngineBlock,
    MechBlock,
    SidePair,
    TelemetryRecord,
)

__all__ = [
    "Acceleration",
    "Attitude",
    "EngineBlock",
    "InputLogEntry",
    "MechBlock",
    "SidePair",
    "TelemetryRecord",
]
