"""Pane focus and fullscreen state machine.

The display has a top row of three panes and a vertical stack of two
charts. Focus moves cyclically along the top row, Down enters the
chart stack and Up climbs back out of it. ``INPUTS`` is not part of
either region; if focus ever lands there, any directional action or
Select brings it back into the visible layout.
"""

from __future__ import annotations

import dataclasses
from enum import StrEnum


class Pane(StrEnum):
    FLIGHT = "flight"
    ATTITUDE = "attitude"
    SYSTEMS = "systems"
    INPUTS = "inputs"
    IAS_CHART = "ias_chart"
    ALT_CHART = "alt_chart"

    @property
    def caption(self) -> str:
        return _PANE_CAPTIONS[self]


_PANE_CAPTIONS: dict[Pane, str] = {
    Pane.FLIGHT: "Flight",
    Pane.ATTITUDE: "Att/Accel",
    Pane.SYSTEMS: "Systems",
    Pane.INPUTS: "Inputs",
    Pane.IAS_CHART: "IAS (kt)",
    Pane.ALT_CHART: "Altitude MSL (m)",
}

TOP_ROW: tuple[Pane, ...] = (Pane.FLIGHT, Pane.ATTITUDE, Pane.SYSTEMS)
CHART_STACK: tuple[Pane, ...] = (Pane.IAS_CHART, Pane.ALT_CHART)
DEFAULT_PANE = Pane.FLIGHT


class PadAction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Side(StrEnum):
    """Which physical pad surface produced an event. Diagnostic only."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _rotate(pane: Pane, step: int) -> Pane:
    index = TOP_ROW.index(pane)
    return TOP_ROW[(index + step) % len(TOP_ROW)]


# Directional moves, one complete row per action so every pane is covered.
_FOCUS_MOVES: dict[PadAction, dict[Pane, Pane]] = {
    PadAction.LEFT: {
        Pane.FLIGHT: _rotate(Pane.FLIGHT, -1),
        Pane.ATTITUDE: _rotate(Pane.ATTITUDE, -1),
        Pane.SYSTEMS: _rotate(Pane.SYSTEMS, -1),
        Pane.IAS_CHART: Pane.IAS_CHART,
        Pane.ALT_CHART: Pane.ALT_CHART,
        Pane.INPUTS: DEFAULT_PANE,
    },
    PadAction.RIGHT: {
        Pane.FLIGHT: _rotate(Pane.FLIGHT, 1),
        Pane.ATTITUDE: _rotate(Pane.ATTITUDE, 1),
        Pane.SYSTEMS: _rotate(Pane.SYSTEMS, 1),
        Pane.IAS_CHART: Pane.IAS_CHART,
        Pane.ALT_CHART: Pane.ALT_CHART,
        Pane.INPUTS: DEFAULT_PANE,
    },
    PadAction.UP: {
        Pane.FLIGHT: Pane.FLIGHT,
        Pane.ATTITUDE: Pane.ATTITUDE,
        Pane.SYSTEMS: Pane.SYSTEMS,
        Pane.IAS_CHART: DEFAULT_PANE,
        Pane.ALT_CHART: Pane.IAS_CHART,
        Pane.INPUTS: DEFAULT_PANE,
    },
    PadAction.DOWN: {
        Pane.FLIGHT: Pane.IAS_CHART,
        Pane.ATTITUDE: Pane.IAS_CHART,
        Pane.SYSTEMS: Pane.IAS_CHART,
        Pane.IAS_CHART: Pane.ALT_CHART,
        Pane.ALT_CHART: Pane.ALT_CHART,
        Pane.INPUTS: Pane.IAS_CHART,
    },
}


def move_focus(focused: Pane, action: PadAction) -> Pane:
    """Return the pane focused after a directional *action*.

    Select and Unknown never move focus.
    """
    moves = _FOCUS_MOVES.get(action)
    if moves is None:
        return focused
    return moves[focused]


@dataclasses.dataclass(frozen=True, slots=True)
class NavigationState:
    focused: Pane = DEFAULT_PANE
    fullscreen: Pane | None = None

    def toggle_fullscreen(self) -> NavigationState:
        if self.fullscreen == self.focused:
            return dataclasses.replace(self, fullscreen=None)
        return dataclasses.replace(self, fullscreen=self.focused)

    def apply(self, action: PadAction) -> NavigationState:
        """Return the state after *action*; the machine is total over all pairs."""
        if action is PadAction.UNKNOWN:
            return self
        if self.focused is Pane.INPUTS and action is PadAction.SELECT:
            return dataclasses.replace(self, focused=DEFAULT_PANE)
        if action is PadAction.SELECT:
            return self.toggle_fullscreen()
        return dataclasses.replace(self, focused=move_focus(self.focused, action))
