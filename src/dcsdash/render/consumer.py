"""Fixed-cadence render loop.

The loop owns the exit decision: it polls keys every few milliseconds,
redraws from the hub's latest snapshot once per tick, and returns when
a quit key arrives.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Protocol

from dcsdash._constants import INPUT_POLL_INTERVAL_S, RENDER_INTERVAL_S
from dcsdash.render.terminal import is_quit_key
from dcsdash.state.hub import StateHub
from dcsdash.state.snapshot import Snapshot

_logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def draw(self, snapshot: Snapshot) -> None: ...


class KeySource(Protocol):
    def poll_keys(self) -> list[str]: ...


class RenderConsumer:
    def __init__(
        self,
        hub: StateHub,
        renderer: Renderer,
        keys: KeySource,
        *,
        interval: float = RENDER_INTERVAL_S,
        poll_interval: float = INPUT_POLL_INTERVAL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._hub = hub
        self._renderer = renderer
        self._keys = keys
        self._interval = interval
        self._poll_interval = poll_interval
        self._clock = clock
        self.frames = 0

    def render_once(self) -> Snapshot:
        """Read the hub once and hand that snapshot to the renderer."""
        snapshot = self._hub.current()
        self._renderer.draw(snapshot)
        self.frames += 1
        return snapshot

    def quit_requested(self) -> bool:
        return any(is_quit_key(key) for key in self._keys.poll_keys())

    async def run(self) -> None:
        """Render until a quit key is pressed."""
        last_draw: float | None = None
        while True:
            if self.quit_requested():
                _logger.debug("Quit key received after %d frames", self.frames)
                return
            now = self._clock()
            if last_draw is None or now - last_draw >= self._interval:
                self.render_once()
                last_draw = now
            await asyncio.sleep(self._poll_interval)
