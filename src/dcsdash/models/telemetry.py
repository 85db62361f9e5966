"""Telemetry record model.

One record is a sparse snapshot of a single aircraft. Field names on
the wire follow the exporter script (``ias_ms``, ``alt_msl``,
``engine.thrtl`` ...); nested blocks use descriptive attribute names
bound to those keys through aliases.
"""

from __future__ import annotations

from pydantic import Field

from dcsdash.models._base import DashBaseModel


class Attitude(DashBaseModel):
    """Aircraft attitude in radians."""

    pitch: float | None = None
    bank: float | None = None
    yaw: float | None = None


class Acceleration(DashBaseModel):
    """Linear acceleration in G."""

    x: float | None = None
    y: float | None = None
    z: float | None = None


class SidePair(DashBaseModel):
    """Left/right engine value pair."""

    left: float | None = Field(default=None, alias="L")
    right: float | None = Field(default=None, alias="R")

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.right is None


class EngineBlock(DashBaseModel):
    """Engine systems block.

    Parameters
    ----------
    rpm : SidePair or None
        RPM in percent.
    throttle : SidePair or None
        Throttle position, 0..1.
    throttle_estimated : bool or None
        ``True`` when throttle was synthesized from RPM by the exporter.
    nozzle : SidePair or None
        Nozzle position, 0..1.
    nozzle_present : bool or None
        ``True`` when the airframe reports nozzle data at all.
    temperature : SidePair or None
        Exhaust/turbine temperature.
    fuel_flow : SidePair or None
        Fuel flow.
    manifold : SidePair or None
        Manifold pressure (piston airframes).
    manifold_present : bool or None
        ``True`` when the airframe reports manifold pressure at all.
    """

    rpm: SidePair | None = None
    throttle: SidePair | None = Field(default=None, alias="thrtl")
    throttle_estimated: bool | None = Field(default=None, alias="thrtl_est")
    nozzle: SidePair | None = Field(default=None, alias="noz")
    nozzle_present: bool | None = Field(default=None, alias="noz_present")
    temperature: SidePair | None = Field(default=None, alias="temp")
    fuel_flow: SidePair | None = Field(default=None, alias="fuelf")
    manifold: SidePair | None = Field(default=None, alias="map")
    manifold_present: bool | None = Field(default=None, alias="map_present")


class MechBlock(DashBaseModel):
    """Mechanical systems block, each value a 0..1 ratio."""

    gear: float | None = None
    flaps: float | None = None
    airbrake: float | None = None
    hook: float | None = None
    wing: float | None = None
    wow: float | None = None
    wow_guess: bool | None = None


class TelemetryRecord(DashBaseModel):
    """Instantaneous aircraft state.

    A new record fully replaces the previous one; fields are never
    merged across messages.
    """

    name: str | None = None
    lat: float | None = None
    lon: float | None = None
    alt_msl: float | None = None
    alt_agl: float | None = None
    ias_ms: float | None = None
    tas_ms: float | None = None
    mach: float | None = None
    aoa_rad: float | None = None
    vv_ms: float | None = None
    att: Attitude | None = None
    accel: Acceleration | None = None
    engine: EngineBlock | None = None
    mech: MechBlock | None = None
