"""Tests for pad mapping, side hints and the input ingestor."""

from __future__ import annotations

import pytest

from dcsdash.ingestion.pad import (
    ABS_MISC,
    EventCategory,
    InputIngestor,
    PadEvent,
    SideHint,
    codes_for,
    infer_side,
    key_label,
    map_action,
    resolve_side,
)
from dcsdash.state.hub import StateHub
from dcsdash.state.navigation import PadAction, Pane, Side
from dcsdash.state.snapshot import Snapshot


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _key(code: int, value: int = 1, timestamp: float = 1700000123.456789, name: str = "") -> PadEvent:
    return PadEvent(category=EventCategory.KEY, code=code, value=value, timestamp=timestamp, name=name)


def _axis(value: int, code: int = ABS_MISC) -> PadEvent:
    return PadEvent(category=EventCategory.AXIS, code=code, value=value, timestamp=0.0)


class TestMapping:
    @pytest.mark.parametrize(
        ("left_code", "right_code", "action"),
        [
            (264, 265, PadAction.UP),
            (259, 263, PadAction.DOWN),
            (258, 262, PadAction.SELECT),
            (256, 260, PadAction.LEFT),
            (257, 261, PadAction.RIGHT),
        ],
    )
    def test_both_strips_map_to_the_same_action(self, left_code: int, right_code: int, action: PadAction) -> None:
        assert map_action(left_code) is action
        assert map_action(right_code) is action
        assert infer_side(left_code) is Side.LEFT
        assert infer_side(right_code) is Side.RIGHT

    @pytest.mark.parametrize("code", [0, 40, 255, 266, 330, 1000])
    def test_unmapped_code_is_unknown(self, code: int) -> None:
        assert map_action(code) is PadAction.UNKNOWN
        assert infer_side(code) is None

    def test_codes_for_select(self) -> None:
        assert codes_for(PadAction.SELECT) == {Side.LEFT: 258, Side.RIGHT: 262}

    def test_fallback_key_label(self) -> None:
        assert key_label(330) == "CODE_330"
        assert key_label(256) == "CODE_256"


class TestSideHint:
    def test_hint_valid_only_inside_window(self) -> None:
        hint = SideHint(timeout=0.25)
        hint.observe(ABS_MISC, 15, now=10.0)

        assert hint.current(10.2) is Side.RIGHT
        assert hint.current(10.3) is None
        # expired, not erased
        assert hint.side is Side.RIGHT
        assert hint.misc_value == 15

    def test_zero_value_hints_left(self) -> None:
        hint = SideHint()
        hint.observe(ABS_MISC, 0, now=1.0)

        assert hint.current(1.0) is Side.LEFT

    def test_other_axes_are_ignored(self) -> None:
        hint = SideHint()
        hint.observe(0, 99, now=1.0)

        assert hint.current(1.0) is None

    def test_code_side_wins_over_hint(self) -> None:
        hint = SideHint()
        hint.observe(ABS_MISC, 5, now=1.0)

        assert resolve_side(256, hint, 1.0) is Side.LEFT
        assert resolve_side(999, hint, 1.0) is Side.RIGHT
        assert resolve_side(999, hint, 5.0) is None

    def test_hint_never_changes_the_action(self) -> None:
        hub = StateHub()
        clock = _Clock()
        ingestor = InputIngestor(hub, clock=clock)

        ingestor.handle(_axis(7))
        snapshot = ingestor.handle(_key(257))

        assert snapshot is not None
        assert snapshot.navigation.focused is Pane.ATTITUDE
        assert snapshot.input_log.entries[-1].side is Side.LEFT


class TestInputIngestor:
    def test_key_down_moves_focus_and_logs_once(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        snapshot = ingestor.handle(_key(261))

        assert snapshot is not None
        assert snapshot.navigation.focused is Pane.ATTITUDE
        assert len(snapshot.input_log) == 1
        assert hub.version == 1
        assert ingestor.handled == 1

    def test_key_up_and_repeat_are_ignored(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        assert ingestor.handle(_key(261, value=0)) is None
        assert ingestor.handle(_key(261, value=2)) is None
        assert hub.version == 0

    def test_axis_event_updates_hint_only(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        assert ingestor.handle(_axis(3)) is None
        assert hub.version == 0
        assert ingestor.hint.misc_value == 3

    def test_other_categories_are_ignored(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        assert ingestor.handle(PadEvent(category=EventCategory.OTHER, code=0, value=1, timestamp=0.0)) is None
        assert hub.version == 0

    def test_select_from_either_strip_toggles_fullscreen(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        ingestor.handle(_key(258))
        assert hub.current().navigation.fullscreen is Pane.FLIGHT
        ingestor.handle(_key(262))
        assert hub.current().navigation.fullscreen is None

    def test_unknown_code_is_logged_without_navigation_change(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())
        before = hub.current().navigation

        snapshot = ingestor.handle(_key(330))

        assert snapshot is not None
        assert snapshot.navigation == before
        entry = snapshot.input_log.entries[-1]
        assert entry.action is PadAction.UNKNOWN
        assert entry.side is None

    def test_log_line_format(self) -> None:
        hub = StateHub()
        clock = _Clock()
        ingestor = InputIngestor(hub, clock=clock)
        ingestor.handle(_axis(12))

        snapshot = ingestor.handle(_key(260, timestamp=1700000123.456789, name="BTN_4"))

        assert snapshot is not None
        assert snapshot.input_log.entries[-1].text == "[123.456789] BTN_4 (code=260, ABS_MISC=12) -> Left (Right side)"

    def test_unnamed_event_falls_back_to_code_label(self) -> None:
        hub = StateHub()
        ingestor = InputIngestor(hub, clock=_Clock())

        snapshot = ingestor.handle(_key(261))

        assert snapshot is not None
        assert snapshot.input_log.entries[-1].label == "CODE_261"

    def test_unknown_code_uses_fresh_hint_for_side(self) -> None:
        hub = StateHub()
        clock = _Clock()
        ingestor = InputIngestor(hub, clock=clock, side_timeout=0.25)

        ingestor.handle(_axis(1))
        clock.now += 0.1
        fresh = ingestor.handle(_key(330))
        clock.now += 1.0
        stale = ingestor.handle(_key(330))

        assert fresh is not None and stale is not None
        assert fresh.input_log.entries[-1].side is Side.RIGHT
        assert stale.input_log.entries[-1].side is None
        assert stale.input_log.entries[-1].text.endswith("-> Unknown (? side)")

    def test_input_log_is_bounded(self) -> None:
        hub = StateHub(Snapshot.initial(input_log_size=3))
        ingestor = InputIngestor(hub, clock=_Clock())

        for _ in range(5):
            ingestor.handle(_key(257))

        assert len(hub.current().input_log) == 3
