#!/usr/bin/env python3
"""
Orbit Geometry for the Solar System Orrery

Responsibilities
- Sample closed elliptical orbit paths for the orbit overlays.
- Evaluate a body's position on its ellipse at a given parametric angle.
- Provide small helpers for conic quantities (focal offset, semi-minor axis, anomalies).

Units and conventions
- Orbits lie in the x-z plane; y is up. Angles are in radians.
- a is the semi-major axis (the body's distance), e the eccentricity, b = a*sqrt(1 - e^2)
  the semi-minor axis and c = a*e the focal offset.
- The star sits at the world origin, which is one focus of every planet ellipse. Points are
  generated as (a cos θ - c, b sin θ): the ellipse center is shifted to (-c, 0) so the origin
  lands exactly on the focus.

Numerical notes
- θ here is the parametric angle (eccentric anomaly), not the true anomaly. The distance from
  the focus is r = a(1 - e cos θ); the conic law r = a(1 - e^2)/(1 + e cos ν) holds for the
  true anomaly ν, see eccentric_anomaly().
- eccentricity None or 0 degenerates to a circle of radius a centered on the origin.

This module is pure compute and stateless.
"""

import math
from typing import List, Optional, Tuple

from .constants import MOON_ORBIT_SEGMENTS, PLANET_ORBIT_SEGMENTS, TWO_PI
from .data_models import CelestialBody


def semi_minor_axis(distance: float, eccentricity: Optional[float]) -> float:
    """b = a * sqrt(1 - e^2)."""
    e = eccentricity or 0.0
    return distance * math.sqrt(1.0 - e * e)


def focal_offset(distance: float, eccentricity: Optional[float]) -> float:
    """c = a * e, the distance from the ellipse center to the focus."""
    return distance * (eccentricity or 0.0)


def position_at_phase(distance: float, eccentricity: Optional[float],
                      phase_angle: float) -> Tuple[float, float]:
    """
    Position (x, z) on a focus-centered ellipse at a parametric angle.

    Used every frame instead of resampling the whole curve.

    Args:
        distance: Semi-major axis a in scene units
        eccentricity: e in [0, 1), or None for a circle
        phase_angle: Parametric angle θ in radians

    Returns:
        (a cos θ - c, b sin θ)
    """
    b = semi_minor_axis(distance, eccentricity)
    c = focal_offset(distance, eccentricity)
    return (distance * math.cos(phase_angle) - c, b * math.sin(phase_angle))


def ellipse_points(distance: float, eccentricity: Optional[float],
                   segments: int) -> List[Tuple[float, float]]:
    """
    Sample a closed elliptical path.

    Returns segments + 1 (x, z) pairs for θ spanning [0, 2π]; the first and last point
    coincide so the path can be drawn as a closed line strip.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")
    points = [position_at_phase(distance, eccentricity, (i / segments) * TWO_PI)
              for i in range(segments)]
    # Close the loop exactly rather than relying on cos(2π) rounding.
    points.append(points[0])
    return points


def orbit_path(body: CelestialBody, segments: Optional[int] = None,
               moon: bool = False) -> List[Tuple[float, float, float]]:
    """
    3D orbit overlay points for a body, in the x-z plane.

    Planets use their eccentricity and PLANET_ORBIT_SEGMENTS; moons are always circular and
    use MOON_ORBIT_SEGMENTS. Moon paths are relative to the parent.
    """
    if segments is None:
        segments = MOON_ORBIT_SEGMENTS if moon else PLANET_ORBIT_SEGMENTS
    eccentricity = None if moon else body.eccentricity
    return [(x, 0.0, z) for x, z in ellipse_points(body.distance, eccentricity, segments)]


def radius_at_true_anomaly(distance: float, eccentricity: Optional[float],
                           true_anomaly: float) -> float:
    """Conic-section distance law r = a(1 - e^2) / (1 + e cos ν)."""
    e = eccentricity or 0.0
    return distance * (1.0 - e * e) / (1.0 + e * math.cos(true_anomaly))


def eccentric_anomaly(true_anomaly: float, eccentricity: Optional[float]) -> float:
    """
    Convert a true anomaly ν to the parametric angle E used by position_at_phase.

    tan(E/2) = sqrt((1 - e)/(1 + e)) tan(ν/2), evaluated with atan2 so the result keeps
    the quadrant of ν.
    """
    e = eccentricity or 0.0
    half = true_anomaly / 2.0
    return 2.0 * math.atan2(math.sqrt(1.0 - e) * math.sin(half),
                            math.sqrt(1.0 + e) * math.cos(half))
