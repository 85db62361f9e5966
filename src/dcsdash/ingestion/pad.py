"""Pad event mapping and ingestion.

Two physical button strips (left and right of the tablet) send
distinct codes for the same five logical actions, so navigation never
depends on which strip was pressed.

Side labelling is kept apart from action mapping: :func:`map_action`
looks at the code alone, while :class:`SideHint` and
:func:`resolve_side` only decorate log lines.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import time
from collections.abc import Callable
from enum import StrEnum

from dcsdash._constants import SIDE_HINT_TIMEOUT_S
from dcsdash.models.input_log import InputLogEntry
from dcsdash.state.hub import StateHub
from dcsdash.state.navigation import PadAction, Side
from dcsdash.state.snapshot import Snapshot

_logger = logging.getLogger(__name__)

KEY_DOWN = 1
ABS_MISC = 40

_LEFT_STRIP: dict[int, PadAction] = {
    264: PadAction.UP,
    259: PadAction.DOWN,
    258: PadAction.SELECT,
    256: PadAction.LEFT,
    257: PadAction.RIGHT,
}
_RIGHT_STRIP: dict[int, PadAction] = {
    265: PadAction.UP,
    263: PadAction.DOWN,
    262: PadAction.SELECT,
    260: PadAction.LEFT,
    261: PadAction.RIGHT,
}
_ACTIONS: dict[int, PadAction] = {**_LEFT_STRIP, **_RIGHT_STRIP}
_SIDES: dict[int, Side] = {
    **{code: Side.LEFT for code in _LEFT_STRIP},
    **{code: Side.RIGHT for code in _RIGHT_STRIP},
}


def map_action(code: int) -> PadAction:
    """Map a raw button code to its logical action."""
    return _ACTIONS.get(code, PadAction.UNKNOWN)


def infer_side(code: int) -> Side | None:
    """Return the strip a mapped code belongs to, for logging."""
    return _SIDES.get(code)


def codes_for(action: PadAction) -> dict[Side, int]:
    """Return the raw code for *action* on each strip."""
    result: dict[Side, int] = {}
    for code, mapped in _ACTIONS.items():
        if mapped is action:
            result[_SIDES[code]] = code
    return result


def key_label(code: int) -> str:
    """Fallback name for a code the device layer could not name."""
    return f"CODE_{code}"


class EventCategory(StrEnum):
    KEY = "key"
    AXIS = "axis"
    OTHER = "other"


@dataclasses.dataclass(frozen=True, slots=True)
class PadEvent:
    """Device-independent input event.

    ``name`` is the key name reported by the device layer, if any.
    """

    category: EventCategory
    code: int
    value: int
    timestamp: float
    name: str = ""


@dataclasses.dataclass
class SideHint:
    """Most recent ``ABS_MISC`` reading, valid for a short window.

    An expired hint is not erased; it is simply ignored until a new
    axis reading arrives.
    """

    timeout: float = SIDE_HINT_TIMEOUT_S
    side: Side = Side.LEFT
    misc_value: int = 0
    observed_at: float | None = None

    def observe(self, code: int, value: int, now: float) -> None:
        if code != ABS_MISC:
            return
        self.misc_value = value
        self.side = Side.RIGHT if value > 0 else Side.LEFT
        self.observed_at = now

    def current(self, now: float) -> Side | None:
        if self.observed_at is None or now - self.observed_at > self.timeout:
            return None
        return self.side


def resolve_side(code: int, hint: SideHint, now: float) -> Side | None:
    """Side label for a log line: the code's own strip, else a fresh hint."""
    side = infer_side(code)
    if side is not None:
        return side
    return hint.current(now)


def apply_pad_action(snapshot: Snapshot, action: PadAction, entry: InputLogEntry) -> Snapshot:
    return dataclasses.replace(
        snapshot,
        navigation=snapshot.navigation.apply(action),
        input_log=snapshot.input_log.append(entry),
    )


class InputIngestor:
    """Apply key-down events to navigation and the input log."""

    def __init__(
        self,
        hub: StateHub,
        *,
        side_timeout: float = SIDE_HINT_TIMEOUT_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._hub = hub
        self._clock = clock
        self._hint = SideHint(timeout=side_timeout)
        self.handled = 0

    @property
    def hint(self) -> SideHint:
        return self._hint

    def handle(self, event: PadEvent) -> Snapshot | None:
        """Process one event; returns the installed snapshot for key-downs."""
        now = self._clock()
        if event.category is EventCategory.AXIS:
            self._hint.observe(event.code, event.value, now)
            return None
        if event.category is not EventCategory.KEY or event.value != KEY_DOWN:
            return None

        action = map_action(event.code)
        entry = InputLogEntry(
            timestamp=event.timestamp,
            code=event.code,
            label=event.name or key_label(event.code),
            action=action,
            side=resolve_side(event.code, self._hint, now),
            misc_value=self._hint.misc_value,
        )
        snapshot = self._hub.publish(functools.partial(apply_pad_action, action=action, entry=entry))
        self.handled += 1
        _logger.debug("Pad %s -> %s focus=%s", entry.label, action, snapshot.navigation.focused)
        return snapshot
