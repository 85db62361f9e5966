"""Render-ready dashboard snapshot."""

from __future__ import annotations

import dataclasses

from dcsdash._constants import HISTORY_CAPACITY, INPUT_LOG_CAPACITY
from dcsdash.models.telemetry import TelemetryRecord
from dcsdash.state.history import HistoryBuffer, InputLog
from dcsdash.state.navigation import NavigationState


@dataclasses.dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything the renderer needs, as one immutable value.

    ``version`` is assigned by :class:`dcsdash.state.hub.StateHub` on
    install; update functions never need to touch it.
    """

    telemetry: TelemetryRecord
    ias_history: HistoryBuffer
    alt_history: HistoryBuffer
    navigation: NavigationState
    input_log: InputLog
    version: int = 0

    @classmethod
    def initial(
        cls,
        *,
        history_size: int = HISTORY_CAPACITY,
        input_log_size: int = INPUT_LOG_CAPACITY,
    ) -> Snapshot:
        return cls(
            telemetry=TelemetryRecord(),
            ias_history=HistoryBuffer(history_size),
            alt_history=HistoryBuffer(history_size),
            navigation=NavigationState(),
            input_log=InputLog(input_log_size),
        )
