#!/usr/bin/env python3
"""
Built-in solar system dataset.

Values are relative to Earth where applicable:
- radius: Earth radii times EARTH_RADIUS_UNIT
- distance: AU times DISTANCE_SCALE (moons: parent-relative scene units)
- rotation_period: Earth days (negative = retrograde)
- orbit_period: Earth years (moons: the same number as their rotation period)
- tilt: axial tilt in degrees
- eccentricity: orbital eccentricity, omitted for the star

Edit this list to change the model in one place; registry.default_registry() converts it
into validated CelestialBody records.
"""
from .constants import DISTANCE_SCALE, EARTH_RADIUS_UNIT

R = EARTH_RADIUS_UNIT
D = DISTANCE_SCALE

SOLAR_SYSTEM_BODIES = [
    {
        "key": "sun",
        "name": "Sun",
        "radius": R * 109,
        "distance": 0,
        "color": 0xFFFF00,
        "rotation_period": 27,
        "orbit_period": 0,
        "tilt": 7.25,
        "description": (
            "The Sun is the star at the center of the Solar System. It is a nearly perfect "
            "sphere of hot plasma, heated to incandescence by nuclear fusion reactions in its core."
        ),
    },
    {
        "key": "mercury",
        "name": "Mercury",
        "radius": R * 0.38,
        "distance": 0.39 * D,
        "color": 0x888888,
        "rotation_period": 58.6,
        "orbit_period": 0.24,
        "tilt": 0.03,
        "eccentricity": 0.205,
        "description": (
            "Mercury is the smallest and innermost planet in the Solar System. It has no "
            "natural satellites and no substantial atmosphere."
        ),
    },
    {
        "key": "venus",
        "name": "Venus",
        "radius": R * 0.95,
        "distance": 0.72 * D,
        "color": 0xE39E1C,
        "rotation_period": -243,
        "orbit_period": 0.62,
        "tilt": 177.3,
        "eccentricity": 0.007,
        "description": (
            "Venus is the second planet from the Sun. It is named after the Roman goddess of "
            "love and beauty and is the second-brightest natural object in Earth's night sky "
            "after the Moon."
        ),
    },
    {
        "key": "earth",
        "name": "Earth",
        "radius": R,
        "distance": 1 * D,
        "color": 0x2222DD,
        "rotation_period": 1,
        "orbit_period": 1,
        "tilt": 23.44,
        "eccentricity": 0.017,
        "description": (
            "Earth is the third planet from the Sun and the only astronomical object known to "
            "harbor life. About 71% of Earth's surface is water-covered."
        ),
        "moons": [
            {"name": "Moon", "radius": R * 0.27, "distance": 0.1, "color": 0xBBBBBB,
             "rotation_period": 27.3, "orbit_period": 27.3},
        ],
    },
    {
        "key": "mars",
        "name": "Mars",
        "radius": R * 0.53,
        "distance": 1.52 * D,
        "color": 0xAA4444,
        "rotation_period": 1.03,
        "orbit_period": 1.88,
        "tilt": 25.19,
        "eccentricity": 0.094,
        "description": (
            "Mars is the fourth planet from the Sun. The surface of Mars is reddish due to "
            "iron oxide (rust) prevalent on its surface."
        ),
        "moons": [
            {"name": "Phobos", "radius": R * 0.005, "distance": 0.06, "color": 0x888888,
             "rotation_period": 0.32, "orbit_period": 0.32},
            {"name": "Deimos", "radius": R * 0.003, "distance": 0.1, "color": 0x777777,
             "rotation_period": 1.26, "orbit_period": 1.26},
        ],
    },
    {
        "key": "jupiter",
        "name": "Jupiter",
        "radius": R * 11.2,
        "distance": 5.2 * D,
        "color": 0xD19C7C,
        "rotation_period": 0.41,
        "orbit_period": 11.86,
        "tilt": 3.13,
        "eccentricity": 0.049,
        "description": (
            "Jupiter is the fifth planet from the Sun and the largest in the Solar System. It "
            "is a gas giant with a mass one-thousandth that of the Sun, but two-and-a-half "
            "times that of all the other planets combined."
        ),
        "moons": [
            {"name": "Io", "radius": R * 0.29, "distance": 0.28, "color": 0xFFFF00,
             "rotation_period": 1.77, "orbit_period": 1.77},
            {"name": "Europa", "radius": R * 0.25, "distance": 0.44, "color": 0xCCDDEE,
             "rotation_period": 3.55, "orbit_period": 3.55},
            {"name": "Ganymede", "radius": R * 0.41, "distance": 0.7, "color": 0xBBBBAA,
             "rotation_period": 7.15, "orbit_period": 7.15},
            {"name": "Callisto", "radius": R * 0.38, "distance": 1.2, "color": 0x777777,
             "rotation_period": 16.69, "orbit_period": 16.69},
        ],
    },
    {
        "key": "saturn",
        "name": "Saturn",
        "radius": R * 9.45,
        "distance": 9.54 * D,
        "color": 0xEAD6B8,
        "rotation_period": 0.44,
        "orbit_period": 29.46,
        "tilt": 26.73,
        "eccentricity": 0.057,
        "has_rings": True,
        "description": (
            "Saturn is the sixth planet from the Sun and the second-largest in the Solar "
            "System, after Jupiter. It is a gas giant with an average radius about nine times "
            "that of Earth. It has only one-eighth the average density of Earth, but its "
            "greater volume means it is over 95 times more massive."
        ),
        "moons": [
            {"name": "Titan", "radius": R * 0.4, "distance": 0.8, "color": 0xCCCC99,
             "rotation_period": 15.95, "orbit_period": 15.95},
            {"name": "Enceladus", "radius": R * 0.04, "distance": 0.3, "color": 0xFFFFFF,
             "rotation_period": 1.37, "orbit_period": 1.37},
            {"name": "Mimas", "radius": R * 0.03, "distance": 0.2, "color": 0xBBBBBB,
             "rotation_period": 0.94, "orbit_period": 0.94},
        ],
    },
    {
        "key": "uranus",
        "name": "Uranus",
        "radius": R * 4.01,
        "distance": 19.18 * D,
        "color": 0x7CA6C0,
        "rotation_period": -0.72,
        "orbit_period": 84.01,
        "tilt": 97.77,
        "eccentricity": 0.046,
        "has_rings": True,
        "description": (
            "Uranus is the seventh planet from the Sun. It has the third-largest planetary "
            "radius and fourth-largest planetary mass in the Solar System. Uranus is similar "
            "in composition to Neptune, and both have bulk chemical compositions which differ "
            "from that of the larger gas giants Jupiter and Saturn."
        ),
    },
    {
        "key": "neptune",
        "name": "Neptune",
        "radius": R * 3.88,
        "distance": 30.07 * D,
        "color": 0x3355FF,
        "rotation_period": 0.67,
        "orbit_period": 164.8,
        "tilt": 28.32,
        "eccentricity": 0.011,
        "description": (
            "Neptune is the eighth and farthest known planet from the Sun in the Solar "
            "System. It is the fourth-largest planet by diameter, the third-most-massive "
            "planet, and the densest giant planet. Neptune is 17 times the mass of Earth, "
            "slightly more massive than its near-twin Uranus."
        ),
        "moons": [
            # Triton orbits retrograde; only its spin carries the sign.
            {"name": "Triton", "radius": R * 0.21, "distance": 0.5, "color": 0xCCCCDD,
             "rotation_period": -5.88, "orbit_period": 5.88},
        ],
    },
    {
        "key": "pluto",
        "name": "Pluto (Dwarf Planet)",
        "radius": R * 0.19,
        "distance": 39.48 * D,
        "color": 0xAA9988,
        "rotation_period": 6.39,
        "orbit_period": 248.59,
        "tilt": 122.53,
        "eccentricity": 0.244,
        "description": (
            "Pluto is a dwarf planet in the Kuiper belt, a ring of bodies beyond the orbit of "
            "Neptune. It was the first and the largest Kuiper belt object to be discovered. "
            "After Pluto was discovered, it was declared to be the ninth planet from the Sun. "
            "Beginning in the 1990s, its status as a planet was questioned, and in 2006, Pluto "
            "was reclassified as a dwarf planet."
        ),
    },
]
