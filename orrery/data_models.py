#!/usr/bin/env python3
"""
Data models for the Solar System Orrery.

This module defines the records shared between the registry, the kinematics updater,
the selection controller, and the application shell.

Units and usage
- radius is in Earth radii scaled by EARTH_RADIUS_UNIT; distance is the semi-major axis in
  scene units (DISTANCE_SCALE per AU). Moon distances are relative to the parent.
- rotation_period is in Earth days and signed: a negative value means retrograde spin.
- orbit_period is in Earth years; 0 only for the central star.
- CelestialBody records are frozen and validated on construction; OrbitState is the only
  per-frame mutable state and is owned by KinematicsUpdater.
"""
import copy
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import DEFAULT_CAMERA_POSITION, DEFAULT_CAMERA_TARGET, SIZE_SCALE
from .errors import MalformedBody

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class CelestialBody:
    """
    Represents one physical body: the star, a planet, or a moon.

    Fields:
    - name: Display name, e.g. "Pluto (Dwarf Planet)"
    - radius: Radius in scaled Earth-radius units (> 0)
    - distance: Semi-major axis in scene units (0 for the star)
    - rotation_period: Earth days, negative for retrograde rotation
    - orbit_period: Earth years (0 for the star)
    - axial_tilt: Degrees in [0, 180]; > 90 means tipped past sideways
    - eccentricity: None for circular orbits, else in [0, 1)
    - color: RGB tuple used for rendering
    - has_rings: Whether a ring is drawn around the body
    - description: Free text shown in the info panel
    - moons: Ordered moons; their distances are parent-relative
    """
    name: str
    radius: float
    distance: float
    rotation_period: float
    orbit_period: float
    axial_tilt: float = 0.0
    eccentricity: Optional[float] = None
    color: Tuple[int, int, int] = (200, 200, 255)
    has_rings: bool = False
    description: str = ""
    moons: Tuple["CelestialBody", ...] = ()

    def __post_init__(self):
        for attr in ("radius", "distance", "rotation_period", "orbit_period", "axial_tilt"):
            if not math.isfinite(getattr(self, attr)):
                raise MalformedBody(self.name, f"{attr} must be finite")
        if self.radius <= 0:
            raise MalformedBody(self.name, f"radius must be positive, got {self.radius}")
        if self.distance < 0:
            raise MalformedBody(self.name, f"distance must be >= 0, got {self.distance}")
        if self.orbit_period < 0:
            raise MalformedBody(self.name, f"orbit period must be >= 0, got {self.orbit_period}")
        if not 0.0 <= self.axial_tilt <= 180.0:
            raise MalformedBody(self.name, f"axial tilt must be within 0-180 degrees, got {self.axial_tilt}")
        if self.eccentricity is not None and not 0.0 <= self.eccentricity < 1.0:
            raise MalformedBody(self.name, f"eccentricity must be in [0, 1), got {self.eccentricity}")
        for moon in self.moons:
            if moon.distance <= 0:
                raise MalformedBody(moon.name, "moon distance must be positive (parent-relative)")
            if moon.moons:
                raise MalformedBody(moon.name, "moons cannot have moons of their own")
        # Moons may arrive as a list.
        if not isinstance(self.moons, tuple):
            object.__setattr__(self, "moons", tuple(self.moons))

    @property
    def is_star(self) -> bool:
        return self.distance == 0

    @property
    def is_retrograde(self) -> bool:
        return self.rotation_period < 0

    @property
    def tilt_radians(self) -> float:
        return math.radians(self.axial_tilt)

    def scaled_radius(self, minimum: float = 0.0) -> float:
        """Drawn radius in scene units, never below minimum."""
        return max(self.radius * SIZE_SCALE, minimum)


@dataclass
class OrbitState:
    """
    Per-body render state advanced every frame.

    - phase_angle: current orbital angle in radians (parametric angle for planets)
    - spin_angle: accumulated axial rotation in radians
    - tilt: static axial tilt in radians, re-applied every frame
    - position: absolute world position (x, y, z)
    - pivot: orbit group offset; (+c, 0, 0) for eccentric orbits, else zero
    - orbit_visible: whether the orbit path overlay is drawn
    """
    phase_angle: float = 0.0
    spin_angle: float = 0.0
    tilt: float = 0.0
    position: Vec3 = (0.0, 0.0, 0.0)
    pivot: Vec3 = (0.0, 0.0, 0.0)
    orbit_visible: bool = True

    @property
    def local_position(self) -> Vec3:
        """Position relative to the orbit group; pivot + local_position == position."""
        return (
            self.position[0] - self.pivot[0],
            self.position[1] - self.pivot[1],
            self.position[2] - self.pivot[2],
        )

    @property
    def rotation(self) -> Vec3:
        """Euler angles (x, y, z): tilt about x, spin about y."""
        return (self.tilt, self.spin_angle, 0.0)


@dataclass
class SimulationSettings:
    """User-facing settings; written by the control surface, read by the frame update."""
    show_orbits: bool = True
    rotation_speed: float = 1.0
    orbit_speed: float = 1.0
    follow_selected: bool = False
    show_labels: bool = True

    def snapshot(self) -> "SimulationSettings":
        """Independent copy read by a single frame."""
        return copy.copy(self)


@dataclass(frozen=True)
class FocusTarget:
    target_position: Vec3
    camera_position: Vec3


DEFAULT_FOCUS = FocusTarget(target_position=DEFAULT_CAMERA_TARGET, camera_position=DEFAULT_CAMERA_POSITION)


@dataclass(frozen=True)
class BodyInfo:
    """
    Display fields derived from a CelestialBody.

    distance_au and orbit_period_years are None when the body has no distance/orbit
    (the star); every other field is always present.
    """
    name: str
    description: str
    diameter: float
    distance_au: Optional[float]
    orbit_period_years: Optional[float]
    rotation_period_days: float
    retrograde: bool
    moon_names: Tuple[str, ...] = ()

    @property
    def moon_count(self) -> int:
        return len(self.moon_names)

    def lines(self) -> List[str]:
        """Human-readable lines for an info panel."""
        out = [self.name]
        if self.description:
            out.append(self.description)
        out.append(f"Diameter: {self.diameter:.2f} Earth diameters")
        if self.distance_au is not None:
            out.append(f"Distance from Sun: {self.distance_au:.2f} AU")
        if self.orbit_period_years is not None:
            out.append(f"Orbital Period: {self.orbit_period_years:.2f} Earth years")
        rotation = f"Rotation Period: {self.rotation_period_days:.2f} Earth days"
        if self.retrograde:
            rotation += " (retrograde)"
        out.append(rotation)
        if self.moon_names:
            out.append(f"Moons: {self.moon_count}")
            out.extend(f"  - {name}" for name in self.moon_names)
        return out


@dataclass
class LabelPlacement:
    key: str
    name: str
    x: float
    y: float
    visible: bool
    changed: bool = False


@dataclass
class FrameReport:
    """What one frame produced for the renderer."""
    elapsed: float
    follow_target: Optional[Vec3] = None
    states: dict = field(default_factory=dict)
    moon_states: dict = field(default_factory=dict)
