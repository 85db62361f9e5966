"""Dashboard runtime wiring.

One process runs a small fixed set of tasks: the UDP telemetry
listener, an optional pad reader, and the render loop. The render loop
decides when to exit; producer tasks are cancelled afterwards.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Protocol

from dcsdash.config import DashConfig
from dcsdash.ingestion.pad import InputIngestor
from dcsdash.ingestion.telemetry import TelemetryIngestor, UdpTelemetryListener
from dcsdash.render.consumer import RenderConsumer
from dcsdash.render.terminal import TerminalSession
from dcsdash.state.hub import StateHub
from dcsdash.state.snapshot import Snapshot

_logger = logging.getLogger(__name__)


class PadCapability(Protocol):
    async def run(self) -> None: ...


class NoPad:
    """Pad capability when no device is usable; the dashboard runs without it."""

    async def run(self) -> None:
        return None


def resolve_pad_capability(config: DashConfig, ingestor: InputIngestor) -> PadCapability:
    """Decide once, at startup, whether pad input is available."""
    if not config.pad_enabled:
        _logger.info("Pad controls disabled by configuration")
        return NoPad()
    try:
        from dcsdash.ingestion.device import EvdevPadReader, find_pad
    except ImportError:
        _logger.warning("evdev is not available; running dashboard without pad controls")
        return NoPad()

    device = find_pad(override=config.pad_device, name_hint=config.pad_name)
    if device is None:
        _logger.warning("No pad found (or no permission); running dashboard without pad controls")
        return NoPad()
    reader = EvdevPadReader(device, ingestor, retry_delay=config.pad_retry_delay)
    _logger.info("Using pad at %s", reader.path)
    return reader


SessionFactory = Callable[[], AbstractContextManager[TerminalSession]]


async def run_dashboard(
    config: DashConfig,
    *,
    session_factory: SessionFactory = TerminalSession,
    pad: PadCapability | None = None,
) -> StateHub:
    """Run until the user quits; returns the hub for inspection."""
    hub = StateHub(Snapshot.initial(history_size=config.history_size, input_log_size=config.input_log_size))
    listener = UdpTelemetryListener(
        TelemetryIngestor(hub),
        config.bind_address,
        buffer_size=config.recv_buffer_size,
        retry_delay=config.recv_retry_delay,
    )
    if pad is None:
        pad = resolve_pad_capability(config, InputIngestor(hub, side_timeout=config.side_hint_timeout))

    producers = [
        asyncio.create_task(listener.run(), name="telemetry"),
        asyncio.create_task(pad.run(), name="pad"),
    ]

    try:
        with session_factory() as session:
            await RenderConsumer(hub, session, session, interval=config.render_interval).run()
    finally:
        for task in producers:
            task.cancel()
        results = await asyncio.gather(*producers, return_exceptions=True)
        for task, result in zip(producers, results):
            if isinstance(result, Exception):
                _logger.error("Task %s failed: %r", task.get_name(), result)
    return hub
