"""Input log entry model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dcsdash.state.navigation import PadAction, Side


def split_timestamp(timestamp: float) -> tuple[int, int]:
    """Return ``(seconds % 1000, microseconds)`` for an epoch timestamp."""
    if timestamp < 0 or math.isnan(timestamp):
        return 0, 0
    whole = int(timestamp)
    micros = int(round((timestamp - whole) * 1_000_000))
    if micros >= 1_000_000:
        whole += 1
        micros -= 1_000_000
    return whole % 1000, micros


@dataclass(frozen=True, slots=True)
class InputLogEntry:
    """One mapped pad event, as shown in the Inputs pane."""

    timestamp: float
    code: int
    label: str
    action: PadAction
    side: Side | None = None
    misc_value: int = 0

    @property
    def text(self) -> str:
        seconds, micros = split_timestamp(self.timestamp)
        side = self.side.label if self.side is not None else "?"
        return (
            f"[{seconds:>3}.{micros:06}] {self.label} (code={self.code}, ABS_MISC={self.misc_value})"
            f" -> {self.action.label} ({side} side)"
        )

    def __str__(self) -> str:
        return self.text
