"""dcsdash - Live terminal dashboard for DCS flight telemetry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dcsdash")
except PackageNotFoundError:
    __version__ = "0+local"
from dcsdash.config import DashConfig
from dcsdash.exceptions import (
    DashConfigError,
    DashDeviceError,
    DashError,
    DashTerminalError,
    DashTransportError,
    TelemetryDecodeError,
)
from dcsdash.models import TelemetryRecord
from dcsdash.state.hub import StateHub
from dcsdash.state.navigation import NavigationState, PadAction, Pane, Side
from dcsdash.state.snapshot import Snapshot

__all__ = [
    "__version__",
    "DashConfig",
    "DashConfigError",
    "DashDeviceError",
    "DashError",
    "DashTerminalError",
    "DashTransportError",
    "NavigationState",
    "PadAction",
    "Pane",
    "Side",
    "Snapshot",
    "StateHub",
    "TelemetryDecodeError",
    "TelemetryRecord",
]
