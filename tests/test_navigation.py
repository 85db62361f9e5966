from __future__ import annotations

import itertools

import pytest

from dcsdash.state.navigation import (
    CHART_STACK,
    DEFAULT_PANE,
    TOP_ROW,
    NavigationState,
    PadAction,
    Pane,
    move_focus,
)

# Expected focus after each directional action, for every pane.
EXPECTED_MOVES: dict[tuple[Pane, PadAction], Pane] = {
    (Pane.FLIGHT, PadAction.LEFT): Pane.SYSTEMS,
    (Pane.ATTITUDE, PadAction.LEFT): Pane.FLIGHT,
    (Pane.SYSTEMS, PadAction.LEFT): Pane.ATTITUDE,
    (Pane.IAS_CHART, PadAction.LEFT): Pane.IAS_CHART,
    (Pane.ALT_CHART, PadAction.LEFT): Pane.ALT_CHART,
    (Pane.INPUTS, PadAction.LEFT): Pane.FLIGHT,
    (Pane.FLIGHT, PadAction.RIGHT): Pane.ATTITUDE,
    (Pane.ATTITUDE, PadAction.RIGHT): Pane.SYSTEMS,
    (Pane.SYSTEMS, PadAction.RIGHT): Pane.FLIGHT,
    (Pane.IAS_CHART, PadAction.RIGHT): Pane.IAS_CHART,
    (Pane.ALT_CHART, PadAction.RIGHT): Pane.ALT_CHART,
    (Pane.INPUTS, PadAction.RIGHT): Pane.FLIGHT,
    (Pane.FLIGHT, PadAction.UP): Pane.FLIGHT,
    (Pane.ATTITUDE, PadAction.UP): Pane.ATTITUDE,
    (Pane.SYSTEMS, PadAction.UP): Pane.SYSTEMS,
    (Pane.IAS_CHART, PadAction.UP): Pane.FLIGHT,
    (Pane.ALT_CHART, PadAction.UP): Pane.IAS_CHART,
    (Pane.INPUTS, PadAction.UP): Pane.FLIGHT,
    (Pane.FLIGHT, PadAction.DOWN): Pane.IAS_CHART,
    (Pane.ATTITUDE, PadAction.DOWN): Pane.IAS_CHART,
    (Pane.SYSTEMS, PadAction.DOWN): Pane.IAS_CHART,
    (Pane.IAS_CHART, PadAction.DOWN): Pane.ALT_CHART,
    (Pane.ALT_CHART, PadAction.DOWN): Pane.ALT_CHART,
    (Pane.INPUTS, PadAction.DOWN): Pane.IAS_CHART,
}


def test_initial_state() -> None:
    state = NavigationState()

    assert state.focused is DEFAULT_PANE
    assert DEFAULT_PANE in TOP_ROW
    assert state.fullscreen is None


def test_every_pane_and_action_pair_is_handled() -> None:
    for pane, action in itertools.product(Pane, PadAction):
        result = NavigationState(focused=pane).apply(action)

        assert isinstance(result.focused, Pane), (pane, action)
        if (pane, action) in EXPECTED_MOVES:
            assert result.focused is EXPECTED_MOVES[pane, action], (pane, action)
            assert result.fullscreen is None


def test_expected_table_covers_all_directional_pairs() -> None:
    directional = [PadAction.UP, PadAction.DOWN, PadAction.LEFT, PadAction.RIGHT]
    assert set(EXPECTED_MOVES) == set(itertools.product(Pane, directional))


def test_right_three_times_returns_to_default() -> None:
    state = NavigationState()
    for _ in range(3):
        state = state.apply(PadAction.RIGHT)

    assert state.focused is DEFAULT_PANE


def test_left_three_times_returns_to_default() -> None:
    state = NavigationState()
    for _ in range(3):
        state = state.apply(PadAction.LEFT)

    assert state.focused is DEFAULT_PANE


@pytest.mark.parametrize("pane", [p for p in Pane if p is not Pane.INPUTS])
def test_select_twice_clears_fullscreen(pane: Pane) -> None:
    state = NavigationState(focused=pane)

    once = state.apply(PadAction.SELECT)
    twice = once.apply(PadAction.SELECT)

    assert once.fullscreen is pane
    assert twice.fullscreen is None


def test_select_moves_fullscreen_to_newly_focused_pane() -> None:
    state = NavigationState(focused=Pane.ATTITUDE, fullscreen=Pane.FLIGHT)

    assert state.apply(PadAction.SELECT).fullscreen is Pane.ATTITUDE


def test_down_is_absorbing_at_last_chart() -> None:
    state = NavigationState()
    for _ in range(5):
        state = state.apply(PadAction.DOWN)

    assert state.focused is CHART_STACK[-1]


def test_up_walks_back_through_chart_stack_to_top_row() -> None:
    state = NavigationState(focused=Pane.ALT_CHART)

    state = state.apply(PadAction.UP)
    assert state.focused is Pane.IAS_CHART
    state = state.apply(PadAction.UP)
    assert state.focused is Pane.FLIGHT


def test_unknown_never_changes_state() -> None:
    for pane in Pane:
        state = NavigationState(focused=pane, fullscreen=pane)
        assert state.apply(PadAction.UNKNOWN) == state


def test_select_on_inputs_recovers_focus() -> None:
    state = NavigationState(focused=Pane.INPUTS)

    result = state.apply(PadAction.SELECT)

    assert result.focused is Pane.FLIGHT
    assert result.fullscreen is None


def test_move_focus_ignores_non_directional_actions() -> None:
    assert move_focus(Pane.SYSTEMS, PadAction.SELECT) is Pane.SYSTEMS
    assert move_focus(Pane.SYSTEMS, PadAction.UNKNOWN) is Pane.SYSTEMS


def test_pane_captions() -> None:
    assert Pane.IAS_CHART.caption == "IAS (kt)"
    assert all(pane.caption for pane in Pane)
