#!/usr/bin/env python3
"""
Display formatting for the info panel.

Derives human-readable quantities from raw body data. Only two fields are ever omitted:
the distance (when distance is 0) and the orbital period (when it is 0), so the star shows
neither instead of showing zeros.
"""
from .constants import DISTANCE_SCALE, EARTH_RADIUS_UNIT
from .data_models import BodyInfo, CelestialBody


def format_body(body: CelestialBody, distance_scale: float = DISTANCE_SCALE,
                earth_radius_unit: float = EARTH_RADIUS_UNIT) -> BodyInfo:
    """
    Structured display fields for a body, numbers rounded to 2 decimals.

    Args:
        body: The body to describe
        distance_scale: Scene units per AU
        earth_radius_unit: Scene radius of one Earth radius
    """
    distance_au = None
    if body.distance > 0:
        distance_au = round(body.distance / distance_scale, 2)
    orbit_period = None
    if body.orbit_period > 0:
        orbit_period = round(body.orbit_period, 2)
    return BodyInfo(
        name=body.name,
        description=body.description,
        diameter=round(2 * body.radius / earth_radius_unit, 2),
        distance_au=distance_au,
        orbit_period_years=orbit_period,
        rotation_period_days=round(abs(body.rotation_period), 2),
        retrograde=body.rotation_period < 0,
        moon_names=tuple(m.name for m in body.moons),
    )
