"""Text and gauge views of stored readings.

Two modes, as on the monitor screen:
  - text:   raw values, one block per reading
  - visual: altitude bar, compass (HIS) and horizon (ADI) per reading

Only the geometry is computed here; drawing is left to whatever shows it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from flightmon.db.models import ALTITUDE_RANGE
from flightmon.schemas.telemetry import TelemetryOut

ALTITUDE_TICKS = (0, 1000, 2000, 3000)
BAR_HEIGHT = 200
ASCII_BAR_WIDTH = 20
RULE = "-" * 24

_CARDINALS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


@dataclass(frozen=True)
class AltitudeBar:
    fill: float  # filled height, in the same units as height
    height: float
    ticks: Tuple[Tuple[int, float], ...]  # (label, offset from bottom)


@dataclass(frozen=True)
class GaugeView:
    altitude: AltitudeBar
    rotation: float
    horizon: str


def altitude_bar(altitude: float, height: float = BAR_HEIGHT) -> AltitudeBar:
    top = ALTITUDE_RANGE[1]
    fill = max(0.0, min(altitude / top, 1.0)) * height
    ticks = tuple((t, t / top * height) for t in ALTITUDE_TICKS)
    return AltitudeBar(fill=fill, height=height, ticks=ticks)


def compass_rotation(heading: float) -> float:
    return heading % 360.0


def cardinal(heading: float) -> str:
    return _CARDINALS[int((compass_rotation(heading) + 22.5) // 45) % 8]


def horizon_color(attitude: float) -> str:
    if attitude == 100:
        return "blue"
    if attitude == 0:
        return "green"
    return "white"


def gauge_view(reading: TelemetryOut) -> GaugeView:
    return GaugeView(
        altitude=altitude_bar(reading.altitude),
        rotation=compass_rotation(reading.heading),
        horizon=horizon_color(reading.attitude),
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


def render_text(readings: Sequence[TelemetryOut]) -> str:
    if not readings:
        return "No readings."
    lines: List[str] = []
    for r in readings:
        lines.append(f"Altitude: {_fmt(r.altitude)}")
        lines.append(f"HIS: {_fmt(r.heading)}")
        lines.append(f"ADI: {_fmt(r.attitude)}")
        lines.append(RULE)
    return "\n".join(lines)


def render_gauges(readings: Sequence[TelemetryOut]) -> str:
    if not readings:
        return "No readings."
    lines: List[str] = []
    for r in readings:
        view = gauge_view(r)
        filled = round(view.altitude.fill / view.altitude.height * ASCII_BAR_WIDTH)
        bar = "#" * filled + "-" * (ASCII_BAR_WIDTH - filled)
        lines.append(f"ALT [{bar}] {_fmt(r.altitude)}")
        lines.append(f"HIS {_fmt(view.rotation)}° {cardinal(view.rotation)}")
        lines.append(f"ADI {_fmt(r.attitude)} ({view.horizon})")
        lines.append(RULE)
    return "\n".join(lines)
