from __future__ import annotations

import pytest

from dcsdash.config import DashConfig
from dcsdash.exceptions import DashConfigError

_ENV_KEYS = (
    "PORT",
    "DCSDASH_PORT",
    "DCSDASH_HOST",
    "WACOM_EVENT",
    "DCSDASH_PAD_NAME",
    "DCSDASH_PAD_ENABLED",
    "DCSDASH_HISTORY_SIZE",
    "DCSDASH_INPUT_LOG_SIZE",
    "DCSDASH_TICK_MS",
    "DCSDASH_LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = DashConfig.from_env()

    assert config.bind_address == ("127.0.0.1", 5010)
    assert config.history_size == 300
    assert config.input_log_size == 200
    assert config.render_interval == pytest.approx(0.1)
    assert config.side_hint_timeout == pytest.approx(0.25)
    assert config.pad_enabled is True
    assert config.pad_device is None


def test_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "6000")

    assert DashConfig.from_env().port == 6000


def test_prefixed_port_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "6000")
    monkeypatch.setenv("DCSDASH_PORT", "7000")

    assert DashConfig.from_env().port == 7000


def test_env_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DCSDASH_HOST", "0.0.0.0")
    monkeypatch.setenv("WACOM_EVENT", "/dev/input/event7")
    monkeypatch.setenv("DCSDASH_HISTORY_SIZE", "50")
    monkeypatch.setenv("DCSDASH_TICK_MS", "250")
    monkeypatch.setenv("DCSDASH_PAD_ENABLED", "off")

    config = DashConfig.from_env()

    assert config.host == "0.0.0.0"
    assert config.pad_device == "/dev/input/event7"
    assert config.history_size == 50
    assert config.render_interval == pytest.approx(0.25)
    assert config.pad_enabled is False


def test_overrides_beat_env_and_none_falls_through(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "6000")
    monkeypatch.setenv("WACOM_EVENT", "/dev/input/event7")

    config = DashConfig.from_env(port=6100, pad_device=None)

    assert config.port == 6100
    assert config.pad_device == "/dev/input/event7"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("PORT", "not-a-port"),
        ("DCSDASH_PORT", "70000"),
        ("DCSDASH_HISTORY_SIZE", "0"),
        ("DCSDASH_INPUT_LOG_SIZE", "x"),
        ("DCSDASH_TICK_MS", "0"),
    ],
)
def test_invalid_env_raises(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(DashConfigError):
        DashConfig.from_env()


def test_config_is_frozen() -> None:
    config = DashConfig()

    with pytest.raises(AttributeError):
        config.port = 1  # type: ignore[misc]
