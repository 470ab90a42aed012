#!/usr/bin/env python3
"""
Shared constants for the Solar System Orrery (scene units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.

Scene units
- One Earth radius is EARTH_RADIUS_UNIT scene units; meshes are drawn at SIZE_SCALE of that.
- One AU is DISTANCE_SCALE scene units.
- Periods are given in Earth days (rotation) and Earth years (orbits).
"""
import math

# Scene scaling
EARTH_RADIUS_UNIT = 0.5  # scene units per Earth radius
DISTANCE_SCALE = 10.0  # scene units per AU
SIZE_SCALE = 0.1  # mesh radius = radius * SIZE_SCALE
MIN_PLANET_RADIUS = 0.1  # smallest drawn planet radius
MIN_MOON_RADIUS = 0.05  # smallest drawn moon radius

# Visual pacing; no physical meaning
ORBIT_TIME_SCALE = 20.0  # seconds per orbit_period unit at orbit speed 1
ROTATION_TIME_SCALE = 10.0  # divisor applied to |rotation_period|
TWO_PI = 2.0 * math.pi

# Settings bounds
MIN_SPEED_MULTIPLIER = 0.0
MAX_SPEED_MULTIPLIER = 5.0

# Registry
STAR_KEY = "sun"

# Orbit paths
PLANET_ORBIT_SEGMENTS = 64
MOON_ORBIT_SEGMENTS = 50

# Rings: radii relative to the drawn planet radius
RING_INNER_FACTOR = 1.4
RING_OUTER_FACTOR = 2.5
RING_STYLES = {
    "saturn": ((240, 228, 194), 0.7),
    "uranus": ((153, 204, 255), 0.5),
}
DEFAULT_RING_STYLE = ((200, 200, 200), 0.5)

# Focus
FOCUS_DISTANCE_FACTOR = 10.0
FOCUS_DIRECTION = (1.0, 0.5, 1.0)  # unnormalized on purpose; y is half of x/z

# Camera defaults
DEFAULT_CAMERA_POSITION = (0.0, 20.0, 50.0)
DEFAULT_CAMERA_TARGET = (0.0, 0.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)
CAMERA_FOV_DEG = 60.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
MIN_CAMERA_DISTANCE = 0.2
MAX_CAMERA_DISTANCE = 800.0

# Labels
LABEL_OFFSET_PX = 20

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
BACKGROUND_COLOR = (0, 0, 0)
ORBIT_COLOR = (68, 68, 68)
MOON_ORBIT_COLOR = (48, 48, 48)
LABEL_COLOR = (255, 255, 255)
SELECTION_COLOR = (255, 255, 0)
STAR_FIELD_COUNT = 1500

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
