import math

import pytest

from orrery.constants import ORBIT_TIME_SCALE, ROTATION_TIME_SCALE, TWO_PI
from orrery.data_models import CelestialBody, SimulationSettings
from orrery.kinematics import (
    KinematicsUpdater,
    moon_orbit_path,
    moon_orbit_step,
    orbit_angle,
    planet_position,
    rotation_step,
)
from orrery.orbits import position_at_phase
from orrery.registry import BodyRegistry, default_registry

SUN = CelestialBody(name="Sun", radius=54.5, distance=0, rotation_period=27, orbit_period=0, axial_tilt=7.25)


def earth_like(**overrides):
    params = dict(name="Earth", radius=0.5, distance=10.0, rotation_period=1, orbit_period=1,
                  axial_tilt=23.44, eccentricity=0.017)
    params.update(overrides)
    return CelestialBody(**params)


def test_earth_completes_one_orbit_in_twenty_seconds():
    assert ORBIT_TIME_SCALE == 20
    angle = orbit_angle(elapsed=20, orbit_speed=1, orbit_period=1)
    assert angle == TWO_PI
    earth = earth_like()
    position, _ = planet_position(earth, angle)
    start, _ = planet_position(earth, 0.0)
    assert position == pytest.approx(start, abs=1e-9)


def test_star_never_orbits():
    assert orbit_angle(123.0, 5.0, 0) is None
    updater = KinematicsUpdater(BodyRegistry([SUN, earth_like()]))
    for delta, elapsed in [(0.0, 0.0), (0.5, 0.5), (10.0, 1000.0)]:
        updater.update(delta, elapsed, SimulationSettings(orbit_speed=5))
        state = updater.state("sun")
        assert state.phase_angle == 0.0
        assert state.position == (0.0, 0.0, 0.0)


def test_retrograde_sign_law():
    forward = rotation_step(0.016, 1.5, 243)
    backward = rotation_step(0.016, 1.5, -243)
    assert forward > 0
    assert backward == -forward


def test_rotation_step_formula_and_zero_guard():
    assert rotation_step(1.0, 1.0, 1.0) == pytest.approx(ROTATION_TIME_SCALE)
    assert rotation_step(0.5, 2.0, 27.0) == pytest.approx(0.5 * 2.0 / (27.0 / 10.0))
    assert rotation_step(1.0, 1.0, 0) == 0.0


def test_moon_orbit_step_formula_and_zero_guard():
    assert moon_orbit_step(0.1, 1.0, 27.3) == pytest.approx(0.1 / (27.3 / 2))
    assert moon_orbit_step(0.1, 3.0, 0) == 0.0


def test_eccentric_body_pivot_and_absolute_position():
    earth = earth_like()
    angle = 1.234
    position, pivot = planet_position(earth, angle)
    x, z = position_at_phase(10.0, 0.017, angle)
    assert position == pytest.approx((x, 0.0, z))
    assert pivot == pytest.approx((0.17, 0.0, 0.0))


def test_circular_body_has_no_pivot():
    body = earth_like(eccentricity=None)
    position, pivot = planet_position(body, math.pi / 2)
    assert pivot == (0.0, 0.0, 0.0)
    assert position == pytest.approx((0.0, 0.0, 10.0), abs=1e-12)


def test_local_position_plus_pivot_is_world_position():
    updater = KinematicsUpdater(BodyRegistry([SUN, earth_like()]))
    updater.update(0.1, 7.0, SimulationSettings())
    state = updater.state("earth")
    recombined = tuple(p + l for p, l in zip(state.pivot, state.local_position))
    assert recombined == pytest.approx(state.position)


def test_spin_accumulates_and_tilt_is_static():
    updater = KinematicsUpdater(BodyRegistry([SUN, earth_like(rotation_period=-2.0)]))
    settings = SimulationSettings(rotation_speed=2.0)
    for _ in range(3):
        updater.update(0.5, 1.0, settings)
    state = updater.state("earth")
    assert state.spin_angle == pytest.approx(-3 * 0.5 * 2.0 / (2.0 / ROTATION_TIME_SCALE))
    assert state.tilt == pytest.approx(math.radians(23.44))
    assert state.rotation == (state.tilt, state.spin_angle, 0.0)


def test_zero_rotation_period_never_spins():
    updater = KinematicsUpdater(BodyRegistry([SUN, earth_like(rotation_period=0)]))
    updater.update(1.0, 1.0, SimulationSettings(rotation_speed=5))
    assert updater.state("earth").spin_angle == 0.0


def test_same_elapsed_gives_same_phase_regardless_of_frame_count():
    coarse = KinematicsUpdater(default_registry())
    fine = KinematicsUpdater(default_registry())
    settings = SimulationSettings()
    coarse.update(3.0, 3.0, settings)
    for i in range(1, 31):
        fine.update(0.1, i * 0.1, settings)
    for key in ("mercury", "earth", "pluto"):
        assert fine.state(key).position == pytest.approx(coarse.state(key).position)
        assert fine.state(key).spin_angle == pytest.approx(coarse.state(key).spin_angle)


def test_moons_follow_parent_at_their_distance():
    updater = KinematicsUpdater(default_registry())
    updater.update(0.25, 4.0, SimulationSettings())
    mars = updater.state("mars")
    for moon, moon_state in zip(default_registry().get("mars").moons, updater.moon_states("mars")):
        offset = [m - p for m, p in zip(moon_state.position, mars.position)]
        assert math.sqrt(sum(c * c for c in offset)) == pytest.approx(moon.distance)
        assert moon_state.phase_angle == pytest.approx(0.25 / (moon.orbit_period / 2))


def test_moon_orbit_path_is_centered_on_parent():
    registry = default_registry()
    updater = KinematicsUpdater(registry)
    updater.update(0.1, 2.0, SimulationSettings())
    earth_state = updater.state("earth")
    path = moon_orbit_path(earth_state, registry.get("earth").moons[0])
    for point in path:
        d = math.sqrt(sum((a - b) ** 2 for a, b in zip(point, earth_state.position)))
        assert d == pytest.approx(0.1)


def test_orbit_visibility_follows_setting():
    updater = KinematicsUpdater(default_registry())
    updater.update(0.1, 0.1, SimulationSettings(show_orbits=False))
    assert not updater.state("earth").orbit_visible
    assert not updater.moon_state("earth", 0).orbit_visible
    assert not updater.state("sun").orbit_visible
    updater.update(0.1, 0.2, SimulationSettings(show_orbits=True))
    assert updater.state("jupiter").orbit_visible
    assert not updater.state("sun").orbit_visible


def test_zero_orbit_period_body_still_hides_its_orbit():
    parked = earth_like(name="Parked", distance=5.0, orbit_period=0)
    updater = KinematicsUpdater(BodyRegistry([SUN, parked]))
    updater.update(0.1, 1.0, SimulationSettings(show_orbits=False))
    state = updater.state("parked")
    assert not state.orbit_visible
    assert state.phase_angle == 0.0
    updater.update(0.1, 2.0, SimulationSettings(show_orbits=True))
    assert updater.state("parked").orbit_visible


def test_negative_time_rejected():
    updater = KinematicsUpdater(default_registry())
    with pytest.raises(ValueError):
        updater.update(-0.1, 1.0, SimulationSettings())


def test_reset_restores_initial_state():
    updater = KinematicsUpdater(default_registry())
    initial = updater.state("venus").position
    updater.update(1.0, 9.0, SimulationSettings())
    assert updater.state("venus").position != initial
    updater.reset()
    assert updater.state("venus").position == initial
    assert updater.state("venus").spin_angle == 0.0


def test_moon_position_ignores_parent_spin():
    moon = CelestialBody(name="Moon", radius=0.135, distance=0.1, rotation_period=27.3, orbit_period=27.3)
    slow = KinematicsUpdater(BodyRegistry([SUN, earth_like(rotation_period=100.0, moons=(moon,))]))
    fast = KinematicsUpdater(BodyRegistry([SUN, earth_like(rotation_period=0.1, moons=(moon,))]))
    for updater in (slow, fast):
        updater.update(0.5, 2.0, SimulationSettings())
    assert slow.state("earth").spin_angle != fast.state("earth").spin_angle
    assert slow.moon_state("earth", 0).position == pytest.approx(fast.moon_state("earth", 0).position)
