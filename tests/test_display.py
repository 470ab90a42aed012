from orrery.data_models import CelestialBody
from orrery.display import format_body
from orrery.registry import default_registry


def test_earth_fields():
    info = format_body(default_registry().get("earth"))
    assert info.distance_au == 1.0
    assert "Distance from Sun: 1.00 AU" in info.lines()
    assert info.orbit_period_years == 1.0
    assert info.diameter == 2.0
    assert info.moon_names == ("Moon",)
    assert info.moon_count == 1
    assert not info.retrograde


def test_star_suppresses_distance_and_orbit():
    info = format_body(default_registry().star)
    assert info.distance_au is None
    assert info.orbit_period_years is None
    lines = info.lines()
    assert not any(line.startswith("Distance from Sun") for line in lines)
    assert not any(line.startswith("Orbital Period") for line in lines)
    assert "Rotation Period: 27.00 Earth days" in lines


def test_retrograde_tag_uses_magnitude():
    info = format_body(default_registry().get("venus"))
    assert info.retrograde
    assert info.rotation_period_days == 243.0
    assert "Rotation Period: 243.00 Earth days (retrograde)" in info.lines()


def test_rounding_to_two_places():
    body = CelestialBody(name="Odd", radius=0.3333, distance=12.3456, rotation_period=1.23456,
                         orbit_period=2.71828)
    info = format_body(body)
    assert info.diameter == 1.33
    assert info.distance_au == 1.23
    assert info.orbit_period_years == 2.72
    assert info.rotation_period_days == 1.23


def test_moon_listing():
    lines = format_body(default_registry().get("mars")).lines()
    assert "Moons: 2" in lines
    assert lines[-2:] == ["  - Phobos", "  - Deimos"]


def test_body_without_moons_has_no_moon_lines():
    lines = format_body(default_registry().get("mercury")).lines()
    assert not any(line.startswith("Moons") for line in lines)
    assert lines[0] == "Mercury"


def test_custom_scales():
    body = CelestialBody(name="Far", radius=1.0, distance=50.0, rotation_period=1, orbit_period=3)
    info = format_body(body, distance_scale=25.0, earth_radius_unit=1.0)
    assert info.distance_au == 2.0
    assert info.diameter == 2.0
