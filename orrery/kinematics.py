#!/usr/bin/env python3
"""
Kinematics Updater for the Solar System Orrery

Responsibilities
- Advance each body's orbital phase from the total elapsed time.
- Accumulate axial rotation from the frame delta, with the sign of rotation_period giving the
  spin direction (the only retrograde mechanism).
- Advance moons on circular sub-orbits around their parent.

Units and conventions
- delta and elapsed are wall-clock seconds; speed multipliers come from SimulationSettings.
- Planet phase: (elapsed * orbit_speed) / (orbit_period * ORBIT_TIME_SCALE) turns.
- Spin step: sign(P) * delta * rotation_speed / (|P| / ROTATION_TIME_SCALE) radians.
- Moon step: delta * orbit_speed / (orbit_period / 2) radians.
- A period of 0 short-circuits before any division: the star never orbits, and a body with
  rotation_period 0 never spins.

Hierarchy
- Depth is fixed at two levels: star -> planet -> moon.
- Moons orbit in their parent's equatorial plane (the parent's tilt is applied to the offset).
  Unlike a scene graph where the moon group hangs off the spinning planet mesh, the parent's
  spin is not composed in: a moon's phase comes from its own period only, so a fast-spinning
  parent does not whip its moons around.

Threading
- Pure compute plus the OrbitState objects it owns. It is driven by SimulationController,
  which guards it with a lock and hands it a settings snapshot per frame.
"""

import math
from typing import Dict, List, Optional, Tuple

from .constants import ORBIT_TIME_SCALE, ROTATION_TIME_SCALE, TWO_PI
from .data_models import CelestialBody, OrbitState, SimulationSettings
from .errors import LookupFailure
from .orbits import focal_offset, orbit_path, position_at_phase
from .registry import BodyRegistry
from .vector_utils import Vec3, rotate_x, vec_add

ZERO: Vec3 = (0.0, 0.0, 0.0)


def orbit_angle(elapsed: float, orbit_speed: float, orbit_period: float) -> Optional[float]:
    """
    Orbital angle in radians after elapsed seconds.

    Returns None for orbit_period == 0 (the star does not orbit).
    """
    if orbit_period == 0:
        return None
    phase = (elapsed * orbit_speed) / (orbit_period * ORBIT_TIME_SCALE)
    return phase * TWO_PI


def rotation_step(delta: float, rotation_speed: float, rotation_period: float) -> float:
    """Signed spin increment for one frame; 0 when rotation_period == 0."""
    if rotation_period == 0:
        return 0.0
    step = (delta * rotation_speed) / (abs(rotation_period) / ROTATION_TIME_SCALE)
    return step if rotation_period > 0 else -step


def moon_orbit_step(delta: float, orbit_speed: float, orbit_period: float) -> float:
    """Moon orbital increment for one frame; 0 when orbit_period == 0."""
    if orbit_period == 0:
        return 0.0
    return (delta * orbit_speed) / (orbit_period / 2.0)


def planet_position(body: CelestialBody, angle: float) -> Tuple[Vec3, Vec3]:
    """
    World position and orbit-group pivot for a planet at a parametric angle.

    Eccentric orbits get a pivot of (+c, 0, 0); the body's absolute position is the
    focus-corrected ellipse point so the star stays at a focus.
    """
    x, z = position_at_phase(body.distance, body.eccentricity, angle)
    if body.eccentricity:
        pivot = (focal_offset(body.distance, body.eccentricity), 0.0, 0.0)
    else:
        pivot = ZERO
    return (x, 0.0, z), pivot


def moon_position(parent: OrbitState, moon: CelestialBody, angle: float) -> Vec3:
    """Moon world position: circular offset in the parent's tilted equatorial plane."""
    offset = (moon.distance * math.cos(angle), 0.0, moon.distance * math.sin(angle))
    return vec_add(parent.position, rotate_x(offset, parent.tilt))


class KinematicsUpdater:
    """
    Owns one OrbitState per body and per moon and advances them every frame.

    States are created at construction (phase 0, spin 0); update() is the only writer.
    """

    def __init__(self, registry: BodyRegistry):
        self.registry = registry
        self.elapsed = 0.0
        self._states: Dict[str, OrbitState] = {}
        self._moon_states: Dict[str, List[OrbitState]] = {}
        self.reset()

    def reset(self) -> None:
        """Put every body back at phase 0 with no accumulated spin."""
        self.elapsed = 0.0
        for key, body in self.registry.get_all():
            state = OrbitState(tilt=body.tilt_radians, orbit_visible=not body.is_star)
            if not body.is_star:
                state.position, state.pivot = planet_position(body, 0.0)
            self._states[key] = state
            moons = []
            for moon in body.moons:
                moon_state = OrbitState(tilt=moon.tilt_radians)
                moon_state.position = moon_position(state, moon, 0.0)
                moons.append(moon_state)
            self._moon_states[key] = moons

    def update(self, delta: float, elapsed: float, settings: SimulationSettings) -> None:
        """
        Advance all bodies for one frame.

        Args:
            delta: Seconds since the previous frame (>= 0)
            elapsed: Seconds since the start (>= 0)
            settings: Snapshot of the user settings for this frame
        """
        if delta < 0 or elapsed < 0:
            raise ValueError(f"delta and elapsed must be >= 0, got {delta}, {elapsed}")
        for key, body in self.registry.get_all():
            state = self._states[key]
            self._update_orbit(body, state, elapsed, settings)
            self._update_rotation(body, state, delta, settings)
            self._update_moons(key, body, state, delta, settings)
        self.elapsed = elapsed

    def _update_orbit(self, body: CelestialBody, state: OrbitState, elapsed: float,
                      settings: SimulationSettings) -> None:
        state.orbit_visible = settings.show_orbits and not body.is_star
        angle = orbit_angle(elapsed, settings.orbit_speed, body.orbit_period)
        if angle is None:
            return
        state.phase_angle = angle
        state.position, state.pivot = planet_position(body, angle)

    def _update_rotation(self, body: CelestialBody, state: OrbitState, delta: float,
                         settings: SimulationSettings) -> None:
        state.spin_angle += rotation_step(delta, settings.rotation_speed, body.rotation_period)
        state.tilt = body.tilt_radians

    def _update_moons(self, key: str, body: CelestialBody, parent: OrbitState, delta: float,
                      settings: SimulationSettings) -> None:
        for moon, moon_state in zip(body.moons, self._moon_states[key]):
            moon_state.phase_angle += moon_orbit_step(delta, settings.orbit_speed, moon.orbit_period)
            moon_state.position = moon_position(parent, moon, moon_state.phase_angle)
            self._update_rotation(moon, moon_state, delta, settings)
            moon_state.orbit_visible = settings.show_orbits

    # Read accessors

    def state(self, key: str) -> OrbitState:
        try:
            return self._states[key]
        except KeyError:
            raise LookupFailure(key) from None

    def moon_states(self, key: str) -> List[OrbitState]:
        if key not in self._moon_states:
            raise LookupFailure(key)
        return list(self._moon_states[key])

    def moon_state(self, key: str, index: int) -> OrbitState:
        return self.moon_states(key)[index]

    def world_position(self, key: str) -> Vec3:
        return self.state(key).position

    def states(self) -> Dict[str, OrbitState]:
        return dict(self._states)


def moon_orbit_path(parent: OrbitState, moon: CelestialBody) -> List[Vec3]:
    """World-space circular path of a moon around its parent's current position."""
    return [vec_add(parent.position, rotate_x(p, parent.tilt)) for p in orbit_path(moon, moon=True)]
