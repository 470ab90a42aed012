import json

import pytest

from orrery.data_models import CelestialBody
from orrery.errors import LookupFailure, MalformedBody
from orrery.presets_loader import body_from_dict, coerce_color, list_systems, load_system
from orrery.registry import BodyRegistry, body_key, default_registry

SUN = CelestialBody(name="Sun", radius=54.5, distance=0, rotation_period=27, orbit_period=0)
EARTH = CelestialBody(name="Earth", radius=0.5, distance=10, rotation_period=1, orbit_period=1)


def test_key_derivation():
    assert body_key("Pluto (Dwarf Planet)") == "pluto"
    assert body_key("Earth") == "earth"
    assert body_key("Anything", is_star=True) == "sun"


def test_default_registry_contents_and_order():
    registry = default_registry()
    keys = [key for key, _ in registry.get_all()]
    assert keys == ["sun", "mercury", "venus", "earth", "mars", "jupiter",
                    "saturn", "uranus", "neptune", "pluto"]
    assert registry.star.name == "Sun"
    assert registry.get("pluto").name == "Pluto (Dwarf Planet)"
    assert [m.name for m in registry.get("jupiter").moons] == ["Io", "Europa", "Ganymede", "Callisto"]
    assert registry.get("saturn").has_rings and registry.get("uranus").has_rings
    assert registry.get("venus").is_retrograde
    assert registry.get("earth").color == (0x22, 0x22, 0xDD)


def test_resolve_key():
    registry = default_registry()
    assert registry.resolve_key("Pluto (Dwarf Planet)") == "pluto"
    assert registry.resolve_key("Sun") == "sun"
    with pytest.raises(LookupFailure):
        registry.resolve_key("Vulcan")
    with pytest.raises(LookupFailure):
        registry.resolve_key("   ")


def test_get_unknown_key():
    with pytest.raises(LookupFailure) as excinfo:
        default_registry().get("vulcan")
    assert isinstance(excinfo.value, KeyError)
    assert "vulcan" in str(excinfo.value)


def test_explicit_keys_matching_the_name_are_accepted():
    registry = BodyRegistry([("sun", SUN), ("earth", EARTH)])
    assert registry.keys() == ["sun", "earth"]
    assert "earth" in registry and len(registry) == 2
    assert registry.resolve_key(EARTH.name) == "earth"


def test_explicit_key_differing_from_name_rejected():
    with pytest.raises(MalformedBody):
        BodyRegistry([("sun", SUN), ("home", EARTH)])


def test_system_file_with_mismatched_key_rejected(tmp_path):
    path = tmp_path / "renamed.json"
    path.write_text(json.dumps({"bodies": [
        {"name": "Sun", "radius": 10, "distance": 0, "rotation_period": 25, "orbit_period": 0},
        {"key": "home", "name": "Earth", "radius": 0.5, "distance": 10, "rotation_period": 1,
         "orbit_period": 1},
    ]}), encoding="utf-8")
    with pytest.raises(MalformedBody):
        BodyRegistry.from_file(str(path))


@pytest.mark.parametrize("params", [
    dict(radius=-1.0),
    dict(radius=0.0),
    dict(eccentricity=1.0),
    dict(eccentricity=-0.1),
    dict(axial_tilt=181.0),
    dict(orbit_period=-1.0),
    dict(distance=float("nan")),
])
def test_malformed_body_fails_at_construction(params):
    base = dict(name="Bad", radius=1.0, distance=5.0, rotation_period=1.0, orbit_period=1.0)
    base.update(params)
    with pytest.raises(MalformedBody):
        CelestialBody(**base)


def test_non_star_with_zero_distance_rejected():
    rogue = CelestialBody(name="Rogue", radius=1.0, distance=0, rotation_period=1, orbit_period=1)
    with pytest.raises(MalformedBody):
        BodyRegistry([SUN, rogue])


def test_missing_star_rejected():
    with pytest.raises(MalformedBody):
        BodyRegistry([EARTH])


def test_star_key_must_be_sun():
    with pytest.raises(MalformedBody):
        BodyRegistry([("sol", SUN), EARTH])
    with pytest.raises(MalformedBody):
        BodyRegistry([SUN, ("sun", EARTH)])


def test_duplicate_keys_rejected():
    twin = CelestialBody(name="Earth Two", radius=0.5, distance=12, rotation_period=1, orbit_period=1)
    with pytest.raises(MalformedBody):
        BodyRegistry([SUN, EARTH, twin])


def test_moon_constraints():
    moon = CelestialBody(name="Moon", radius=0.1, distance=0.1, rotation_period=1, orbit_period=1)
    with pytest.raises(MalformedBody):
        CelestialBody(name="X", radius=1, distance=1, rotation_period=1, orbit_period=1,
                      moons=(CelestialBody(name="Stuck", radius=0.1, distance=0, rotation_period=1,
                                           orbit_period=1),))
    parent = CelestialBody(name="P", radius=1, distance=1, rotation_period=1, orbit_period=1, moons=[moon])
    assert isinstance(parent.moons, tuple)
    with pytest.raises(MalformedBody):
        CelestialBody(name="Q", radius=1, distance=1, rotation_period=1, orbit_period=1, moons=(parent,))


def test_coerce_color_forms():
    assert coerce_color(0xFF8000) == (255, 128, 0)
    assert coerce_color("#ff8000") == (255, 128, 0)
    assert coerce_color("#f80") == (255, 136, 0)
    assert coerce_color([300, -5, 10]) == (255, 0, 10)
    with pytest.raises(MalformedBody):
        coerce_color("not a color")


def test_body_from_dict_requires_fields():
    with pytest.raises(MalformedBody):
        body_from_dict({"name": "Half", "radius": 1.0})
    with pytest.raises(MalformedBody):
        body_from_dict({"name": "Bad", "radius": "big", "distance": 1, "rotation_period": 1,
                        "orbit_period": 1})


def test_load_system_file(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({
        "name": "Tiny",
        "bodies": [
            {"name": "Sun", "radius": 10, "distance": 0, "rotation_period": 25, "orbit_period": 0},
            {"name": "Rock One", "radius": 0.5, "distance": 3, "rotation_period": -2,
             "orbit_period": 0.5, "eccentricity": 0.1, "color": "#123456"},
        ],
    }), encoding="utf-8")
    registry = BodyRegistry.from_file(str(path))
    assert registry.name == "Tiny"
    assert registry.keys() == ["sun", "rock"]
    assert registry.get("rock").color == (0x12, 0x34, 0x56)


def test_load_system_file_with_bad_body(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"bodies": [
        {"name": "Sun", "radius": 10, "distance": 0, "rotation_period": 25, "orbit_period": 0},
        {"name": "Comet", "radius": 0.1, "distance": 3, "rotation_period": 1, "orbit_period": 1,
         "eccentricity": 1.2},
    ]}), encoding="utf-8")
    with pytest.raises(MalformedBody):
        load_system(str(path))


def test_bundled_system_loads():
    assert "inner_planets.json" in list_systems()
    registry = BodyRegistry.from_file("inner_planets.json")
    assert registry.keys() == ["sun", "mercury", "venus", "earth", "mars"]
    assert registry.get("earth").moons[0].name == "Moon"
