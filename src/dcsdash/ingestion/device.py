"""evdev pad adapter.

Finds the tablet pad once at startup and feeds its events to an
:class:`~dcsdash.ingestion.pad.InputIngestor`. The device handle is
owned by the reader task alone.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import evdev
from evdev import ecodes

from dcsdash._constants import PAD_NAME_HINT, PAD_READ_RETRY_DELAY_S
from dcsdash.exceptions import DashDeviceError
from dcsdash.ingestion.pad import EventCategory, InputIngestor, PadEvent, key_label

_logger = logging.getLogger(__name__)

_BY_ID_DIR = Path("/dev/input/by-id")
_INPUT_DIR = Path("/dev/input")


def open_device(path: str) -> evdev.InputDevice:
    """Open an event device.

    Raises
    ------
    DashDeviceError
        The device is missing or not readable.
    """
    try:
        return evdev.InputDevice(path)
    except OSError as exc:
        raise DashDeviceError(f"open failed: {exc}", path=path) from exc


def _scan_by_id(name_hint: str, by_id_dir: Path) -> evdev.InputDevice | None:
    try:
        entries = sorted(by_id_dir.iterdir())
    except OSError:
        return None
    for link in entries:
        name = link.name
        if name_hint not in name or "pad" not in name.lower() or "event" not in name:
            continue
        target = link.resolve()
        try:
            device = open_device(str(target))
        except DashDeviceError as exc:
            _logger.info("Found %s but %s", target, exc)
            continue
        _logger.info("Pad (by-id): %s -> %s", name, target)
        return device
    return None


def _scan_event_nodes(name_hint: str, input_dir: Path) -> evdev.InputDevice | None:
    try:
        nodes = sorted(p for p in input_dir.iterdir() if p.name.startswith("event"))
    except OSError:
        return None
    for node in nodes:
        try:
            device = open_device(str(node))
        except DashDeviceError as exc:
            _logger.debug("Skip %s (%s)", node, exc)
            continue
        if name_hint in device.name and "Pad" in device.name:
            _logger.info("Pad: %s (%s)", device.name, node)
            return device
        device.close()
    return None


def find_pad(
    *,
    override: str | None = None,
    name_hint: str = PAD_NAME_HINT,
    by_id_dir: Path = _BY_ID_DIR,
    input_dir: Path = _INPUT_DIR,
) -> evdev.InputDevice | None:
    """Locate the pad: explicit path, then by-id symlinks, then event nodes."""
    if override:
        try:
            device = open_device(override)
        except DashDeviceError as exc:
            _logger.warning("Pad override %s: %s", override, exc)
        else:
            _logger.info("Using pad override %s", override)
            return device
    return _scan_by_id(name_hint, by_id_dir) or _scan_event_nodes(name_hint, input_dir)


def key_name(code: int) -> str:
    """Kernel name of a key or button code, e.g. ``BTN_4`` for 260.

    Codes with aliases (256 is both ``BTN_0`` and ``BTN_MISC``) resolve
    to the alphabetically first name.
    """
    names = ecodes.BTN.get(code) or ecodes.KEY.get(code)
    if not names:
        return key_label(code)
    if isinstance(names, str):
        return names
    return sorted(names)[0]


def to_pad_event(event: evdev.InputEvent) -> PadEvent:
    name = ""
    if event.type == ecodes.EV_KEY:
        category = EventCategory.KEY
        name = key_name(event.code)
    elif event.type == ecodes.EV_ABS:
        category = EventCategory.AXIS
    else:
        category = EventCategory.OTHER
    return PadEvent(
        category=category,
        code=event.code,
        value=event.value,
        timestamp=event.timestamp(),
        name=name,
    )


class EvdevPadReader:
    """Pad capability backed by an evdev device."""

    def __init__(
        self,
        device: evdev.InputDevice,
        ingestor: InputIngestor,
        *,
        retry_delay: float = PAD_READ_RETRY_DELAY_S,
    ) -> None:
        self._device = device
        self._ingestor = ingestor
        self._retry_delay = retry_delay

    @property
    def path(self) -> str:
        return self._device.path

    async def run(self) -> None:
        """Read events until cancelled; read errors back off and retry."""
        try:
            while True:
                try:
                    async for event in self._device.async_read_loop():
                        self._ingestor.handle(to_pad_event(event))
                except OSError as exc:
                    _logger.warning("Pad read error (%s): %s", self.path, exc)
                await asyncio.sleep(self._retry_delay)
        finally:
            self._device.close()
