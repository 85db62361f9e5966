"""Text for the individual dashboard panes.

Missing values never fail: scalar fields fall back to zero, labels to
``?``/``-`` and system lines to ``---``.
"""

from __future__ import annotations

from dcsdash._constants import MS_TO_KMH, MS_TO_KT, RAD_TO_DEG
from dcsdash.models.telemetry import SidePair, TelemetryRecord

_MISSING = "---"


def _or_zero(value: float | None) -> float:
    return value if value is not None else 0.0


def header_text(record: TelemetryRecord) -> str:
    name = record.name or "?"
    lat = f"{record.lat:.5f}" if record.lat is not None else "-"
    lon = f"{record.lon:.5f}" if record.lon is not None else "-"
    return f" DCS Dash | Airframe: {name}   POS: {lat}, {lon}   Ctrl+C / q / Esc to exit "


def format_flight(record: TelemetryRecord) -> str:
    ias_ms = _or_zero(record.ias_ms)
    tas_ms = _or_zero(record.tas_ms)
    return "\n".join(
        [
            f"IAS: {ias_ms * MS_TO_KT:>6.1f} kt ({ias_ms * MS_TO_KMH:>6.1f} km/h)",
            f"TAS: {tas_ms * MS_TO_KT:>6.1f} kt",
            f"ALT MSL: {_or_zero(record.alt_msl):>8.0f} m   AGL: {_or_zero(record.alt_agl):>7.0f} m",
            f"Mach: {_or_zero(record.mach):>4.2f}   VV: {_or_zero(record.vv_ms):>6.1f} m/s",
        ]
    )


def format_attitude(record: TelemetryRecord) -> str:
    pitch = bank = yaw = 0.0
    if record.att is not None:
        pitch = _or_zero(record.att.pitch) * RAD_TO_DEG
        bank = _or_zero(record.att.bank) * RAD_TO_DEG
        yaw = _or_zero(record.att.yaw) * RAD_TO_DEG
    ax = ay = az = 0.0
    if record.accel is not None:
        ax, ay, az = _or_zero(record.accel.x), _or_zero(record.accel.y), _or_zero(record.accel.z)
    return "\n".join(
        [
            f"AoA: {_or_zero(record.aoa_rad) * RAD_TO_DEG:>5.2f}°",
            f"Pitch: {pitch:>6.2f}°  Bank: {bank:>6.2f}°  Yaw: {yaw:>6.2f}°",
            f"Accel G: X {ax:>5.2f}  Y {ay:>5.2f}  Z {az:>5.2f}",
        ]
    )


def format_pair(label: str, pair: SidePair | None, *, percent: bool = False) -> str | None:
    """Format an engine pair, or ``None`` when neither side reports."""
    if pair is None or pair.is_empty:
        return None
    scale = 100.0 if percent else 1.0

    def _fmt(value: float | None) -> str:
        return f"{value * scale:>6.1f}" if value is not None else f"   {_MISSING}"

    return f"{label}: L {_fmt(pair.left)}  R {_fmt(pair.right)}"


def _placeholder_pair(label: str) -> str:
    return f"{label}: L   {_MISSING}  R   {_MISSING}"


def _mech_line(label: str, value: float | None, guessed: bool = False) -> str:
    if guessed:
        label = f"{label} (guess)"
    if value is None:
        return f"{label}:   {_MISSING}"
    return f"{label}: {value:>5.2f}"


def format_systems(record: TelemetryRecord) -> str:
    lines: list[str] = []

    engine = record.engine
    if engine is not None:
        rpm_line = format_pair("RPM %", engine.rpm)
        if rpm_line is not None:
            lines.append(rpm_line)
        thr_label = "THR % (est)" if engine.throttle_estimated else "THR %"
        lines.append(format_pair(thr_label, engine.throttle, percent=True) or _placeholder_pair(thr_label))
        if engine.nozzle_present:
            lines.append(format_pair("NOZ %", engine.nozzle, percent=True) or _placeholder_pair("NOZ %"))
        for label, pair in (("TEMP", engine.temperature), ("FF", engine.fuel_flow)):
            pair_line = format_pair(label, pair)
            if pair_line is not None:
                lines.append(pair_line)
        if engine.manifold_present:
            lines.append(format_pair("MAP", engine.manifold) or _placeholder_pair("MAP"))

    lines.append("")

    mech = record.mech
    if mech is None:
        lines.extend(f"{label + ':':<7} {_MISSING}" for label in ("Gear", "Flaps", "Airbrk", "Hook", "Wing", "WoW"))
    else:
        lines.extend(
            [
                _mech_line("Gear", mech.gear),
                _mech_line("Flaps", mech.flaps),
                _mech_line("Airbrk", mech.airbrake),
                _mech_line("Hook", mech.hook),
                _mech_line("Wing", mech.wing),
                _mech_line("WoW", mech.wow, bool(mech.wow_guess)),
            ]
        )
    return "\n".join(lines)
