import pytest

from flightmon.schemas.telemetry import TelemetryOut
from flightmon.ui.display import (
    altitude_bar,
    cardinal,
    compass_rotation,
    gauge_view,
    horizon_color,
    render_gauges,
    render_text,
)


def _out(id, altitude, heading, attitude) -> TelemetryOut:
    return TelemetryOut(id=id, altitude=altitude, heading=heading, attitude=attitude)


def test_altitude_bar_scales_to_height():
    bar = altitude_bar(1500)
    assert bar.fill == pytest.approx(100.0)
    assert bar.height == 200
    assert [label for label, _ in bar.ticks] == [0, 1000, 2000, 3000]
    assert bar.ticks[-1][1] == pytest.approx(200.0)


def test_altitude_bar_clamps():
    assert altitude_bar(5000).fill == 200
    assert altitude_bar(-10).fill == 0


def test_compass():
    assert compass_rotation(90) == 90
    assert compass_rotation(450) == 90
    assert cardinal(0) == "N"
    assert cardinal(350) == "N"
    assert cardinal(90) == "E"
    assert cardinal(225) == "SW"


def test_horizon_color():
    assert horizon_color(100) == "blue"
    assert horizon_color(0) == "green"
    assert horizon_color(-40) == "white"


def test_gauge_view():
    view = gauge_view(_out(1, 3000, 180, 0))
    assert view.altitude.fill == 200
    assert view.rotation == 180
    assert view.horizon == "green"


def test_render_text():
    text = render_text([_out(2, 200, 90, 5), _out(1, 100, 0, -5)])
    lines = text.splitlines()
    assert lines[:3] == ["Altitude: 200", "HIS: 90", "ADI: 5"]
    assert lines[4:7] == ["Altitude: 100", "HIS: 0", "ADI: -5"]


def test_render_empty():
    assert render_text([]) == "No readings."
    assert render_gauges([]) == "No readings."


def test_render_gauges():
    text = render_gauges([_out(1, 1500, 90, 100)])
    assert "ALT [##########----------] 1500" in text
    assert "HIS 90° E" in text
    assert "ADI 100 (blue)" in text


def test_module_docstrings():
    from flightmon import cli
    from flightmon.ui import display

    assert display.__doc__.startswith("Text and gauge views")
    assert cli.__doc__.startswith("Command-line monitor")
