"""rich renderables for the dashboard.

Normal mode shows the status header, the three top panes side by side
and the two charts at full width. Fullscreen mode shows the header and
one pane filling the rest of the screen.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from dcsdash._constants import INPUT_PANE_LINES, MS_TO_KT
from dcsdash.render.formatting import format_attitude, format_flight, format_systems, header_text
from dcsdash.state.history import HistoryBuffer
from dcsdash.state.navigation import Pane
from dcsdash.state.snapshot import Snapshot

BAR_BLOCKS = " ▁▂▃▄▅▆▇█"
FOCUS_STYLE = "yellow"


def render_bars(values: Sequence[float], height: int) -> list[str]:
    """Render *values* as a column chart *height* rows tall, top row first.

    Bars are scaled against the largest value with zero as baseline, one
    column per value.
    """
    if height <= 0:
        return []
    if not values:
        return [""] * height
    steps = len(BAR_BLOCKS) - 1
    peak = max(values)
    if peak <= 0:
        return [" " * len(values)] * height
    levels = [round(max(0.0, value) / peak * height * steps) for value in values]
    rows: list[str] = []
    for row in range(height - 1, -1, -1):
        floor = row * steps
        rows.append("".join(BAR_BLOCKS[min(steps, max(0, level - floor))] for level in levels))
    return rows


class Sparkline:
    """Chart of the most recent samples that fit the available width."""

    def __init__(self, history: HistoryBuffer, *, scale: float = 1.0, style: str = "cyan") -> None:
        self._history = history
        self._scale = scale
        self._style = style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height or 1
        data = self._history.tail(options.max_width, scale=self._scale)
        for line in render_bars(data, height):
            yield Text(line, style=self._style, no_wrap=True, overflow="crop")


def _pane_body(snapshot: Snapshot, pane: Pane) -> RenderableType:
    record = snapshot.telemetry
    if pane is Pane.FLIGHT:
        return Text(format_flight(record))
    if pane is Pane.ATTITUDE:
        return Text(format_attitude(record))
    if pane is Pane.SYSTEMS:
        return Text(format_systems(record))
    if pane is Pane.INPUTS:
        return Text("\n".join(snapshot.input_log.lines(INPUT_PANE_LINES)), overflow="fold")
    if pane is Pane.IAS_CHART:
        return Sparkline(snapshot.ias_history, scale=MS_TO_KT)
    return Sparkline(snapshot.alt_history)


def pane_panel(snapshot: Snapshot, pane: Pane, *, fullscreen: bool = False) -> Panel:
    focused = snapshot.navigation.focused is pane and not fullscreen
    return Panel(
        _pane_body(snapshot, pane),
        title=pane.caption,
        title_align="left",
        border_style=FOCUS_STYLE if focused else "none",
    )


def header_panel(snapshot: Snapshot) -> Panel:
    return Panel(Text(header_text(snapshot.telemetry), no_wrap=True, overflow="ellipsis"), title="Status", title_align="left")


def build_dashboard(snapshot: Snapshot) -> Layout:
    """Build the full-screen layout for one snapshot."""
    root = Layout(name="root")
    header = Layout(header_panel(snapshot), name="header", size=3)

    fullscreen = snapshot.navigation.fullscreen
    if fullscreen is not None:
        root.split_column(header, Layout(pane_panel(snapshot, fullscreen, fullscreen=True), name="fullscreen"))
        return root

    top = Layout(name="top", size=12)
    top.split_row(
        Layout(pane_panel(snapshot, Pane.FLIGHT), name=Pane.FLIGHT.value, ratio=33),
        Layout(pane_panel(snapshot, Pane.ATTITUDE), name=Pane.ATTITUDE.value, ratio=34),
        Layout(pane_panel(snapshot, Pane.SYSTEMS), name=Pane.SYSTEMS.value, ratio=33),
    )
    root.split_column(
        header,
        top,
        Layout(pane_panel(snapshot, Pane.IAS_CHART), name=Pane.IAS_CHART.value, minimum_size=6),
        Layout(pane_panel(snapshot, Pane.ALT_CHART), name=Pane.ALT_CHART.value, minimum_size=6),
    )
    return root
