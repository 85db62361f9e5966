"""Custom exception hierarchy for dcsdash."""

from __future__ import annotations


class DashError(Exception):
    """Base exception for all dcsdash errors."""


class DashConfigError(DashError):
    """Invalid configuration value."""


class TelemetryDecodeError(DashError):
    """A telemetry line could not be parsed into a record."""

    def __init__(self, message: str, *, line: str = "") -> None:
        self.line = line
        super().__init__(message)


class DashTransportError(DashError):
    """Telemetry socket could not be set up."""

    def __init__(self, message: str, *, address: str = "") -> None:
        self.address = address
        super().__init__(message)


class DashDeviceError(DashError):
    """Input device could not be opened or read."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class DashTerminalError(DashError):
    """Terminal could not be switched into dashboard mode.

    This is the only error that aborts the process at startup.
    """
