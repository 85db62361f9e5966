"""Runtime configuration for dcsdash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from dcsdash._constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    HISTORY_CAPACITY,
    INPUT_LOG_CAPACITY,
    PAD_NAME_HINT,
    PAD_READ_RETRY_DELAY_S,
    RECV_BUFFER_SIZE,
    RECV_RETRY_DELAY_S,
    RENDER_INTERVAL_S,
    SIDE_HINT_TIMEOUT_S,
)
from dcsdash.exceptions import DashConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise DashConfigError(f"{env_key} must be an integer, got {value!r}") from None


@dataclasses.dataclass(frozen=True)
class DashConfig:
    """Dashboard configuration.

    Parameters
    ----------
    host : str
        Local address the telemetry socket binds to.
    port : int
        Local UDP port for telemetry datagrams.
    recv_buffer_size : int
        Maximum datagram size read in one receive call.
    recv_retry_delay : float
        Seconds to wait after a transient receive error.
    render_interval : float
        Seconds between two redraws.
    history_size : int
        Samples kept per chart history.
    input_log_size : int
        Pad events kept in the input log.
    side_hint_timeout : float
        Seconds an auxiliary-axis side hint stays valid for log labelling.
    pad_enabled : bool
        Look for an input pad at startup.
    pad_device : str or None
        Explicit event device path, bypassing discovery.
    pad_name : str
        Substring identifying the pad during discovery.
    pad_retry_delay : float
        Seconds to wait after a device read error.
    log_file : str or None
        Write logs to this file instead of stderr.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    recv_buffer_size: int = RECV_BUFFER_SIZE
    recv_retry_delay: float = RECV_RETRY_DELAY_S
    render_interval: float = RENDER_INTERVAL_S
    history_size: int = HISTORY_CAPACITY
    input_log_size: int = INPUT_LOG_CAPACITY
    side_hint_timeout: float = SIDE_HINT_TIMEOUT_S
    pad_enabled: bool = True
    pad_device: str | None = None
    pad_name: str = PAD_NAME_HINT
    pad_retry_delay: float = PAD_READ_RETRY_DELAY_S
    log_file: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise DashConfigError(f"port out of range: {self.port}")
        if self.history_size <= 0:
            raise DashConfigError("history_size must be positive")
        if self.input_log_size <= 0:
            raise DashConfigError("input_log_size must be positive")
        if self.render_interval <= 0:
            raise DashConfigError("render_interval must be positive")

    @property
    def bind_address(self) -> tuple[str, int]:
        return self.host, self.port

    @classmethod
    def from_env(cls, **overrides: Any) -> DashConfig:
        """Create configuration from environment variables.

        Reads ``PORT`` and ``WACOM_EVENT`` plus the ``DCSDASH_*`` family.
        ``DCSDASH_PORT`` wins over ``PORT``. Explicit keyword arguments
        override environment values; ``None`` overrides are ignored so
        unset CLI flags fall through to the environment.

        Raises
        ------
        DashConfigError
            A value could not be parsed or is out of range.
        """
        env = os.environ
        overrides = {key: value for key, value in overrides.items() if value is not None}
        config_kwargs: dict[str, Any] = {}

        for env_key in ("PORT", "DCSDASH_PORT"):
            val = env.get(env_key)
            if val is not None and val.strip():
                config_kwargs["port"] = _env_int(env_key, val)

        _ENV_STR_MAP = {
            "DCSDASH_HOST": "host",
            "WACOM_EVENT": "pad_device",
            "DCSDASH_PAD_NAME": "pad_name",
            "DCSDASH_LOG_FILE": "log_file",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        _ENV_INT_MAP = {
            "DCSDASH_HISTORY_SIZE": "history_size",
            "DCSDASH_INPUT_LOG_SIZE": "input_log_size",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = _env_int(env_key, val)

        tick_env = env.get("DCSDASH_TICK_MS")
        if tick_env is not None:
            config_kwargs["render_interval"] = _env_int("DCSDASH_TICK_MS", tick_env) / 1000.0

        config_kwargs["pad_enabled"] = _env_bool(env.get("DCSDASH_PAD_ENABLED"), True)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
