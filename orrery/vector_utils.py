#!/usr/bin/env python3
"""
Vector helper functions for 3D operations.

These are small, fast functions for vector math used throughout the app.
Vectors are plain (x, y, z) tuples; the orbital plane is x-z with y up.
"""
import math
from typing import Tuple

Vec3 = Tuple[float, float, float]


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def vec_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def vec_scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def vec_len(a: Vec3) -> float:
    return math.sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def vec_norm(a: Vec3) -> Vec3:
    l = vec_len(a)
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def vec_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def vec_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def rotate_x(a: Vec3, angle: float) -> Vec3:
    """Rotate a about the x axis by angle radians (right-handed)."""
    c, s = math.cos(angle), math.sin(angle)
    return (a[0], a[1] * c - a[2] * s, a[1] * s + a[2] * c)


def rotate_y(a: Vec3, angle: float) -> Vec3:
    """Rotate a about the y axis by angle radians (right-handed)."""
    c, s = math.cos(angle), math.sin(angle)
    return (a[0] * c + a[2] * s, a[1], -a[0] * s + a[2] * c)
