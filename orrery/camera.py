#!/usr/bin/env python3
"""
Perspective camera for 3D world-to-screen transforms.

The camera looks from position toward target with y up. Projection follows the usual
OpenGL convention: camera space looks down -z, normalized device coordinates are in [-1, 1]
and ndc z > 1 means the point is behind the camera or beyond the far plane.
"""
import math
from typing import Optional, Tuple

from .constants import (
    CAMERA_FAR,
    CAMERA_FOV_DEG,
    CAMERA_NEAR,
    CAMERA_UP,
    DEFAULT_CAMERA_POSITION,
    DEFAULT_CAMERA_TARGET,
    MAX_CAMERA_DISTANCE,
    MIN_CAMERA_DISTANCE,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .vector_utils import Vec3, clamp, vec_add, vec_cross, vec_dot, vec_len, vec_norm, vec_scale, vec_sub


class PerspectiveCamera:
    """
    Simple perspective camera that maps world coordinates (scene units) to screen pixels.
    """

    def __init__(self, position=DEFAULT_CAMERA_POSITION, target=DEFAULT_CAMERA_TARGET,
                 fov_deg=CAMERA_FOV_DEG, near=CAMERA_NEAR, far=CAMERA_FAR):
        self.position: Vec3 = tuple(position)
        self.target: Vec3 = tuple(target)
        self.fov_deg = fov_deg
        self.near = near
        self.far = far
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    @property
    def aspect(self) -> float:
        w, h = self.viewport_size
        return w / max(h, 1)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def set_pose(self, position: Vec3, target: Vec3) -> None:
        self.position = tuple(position)
        self.target = tuple(target)

    def look_at(self, target: Vec3) -> None:
        """Aim at target and keep the current viewing offset (used when following a body)."""
        offset = vec_sub(self.position, self.target)
        self.target = tuple(target)
        self.position = vec_add(self.target, offset)

    def distance(self) -> float:
        return vec_len(vec_sub(self.position, self.target))

    def basis(self) -> Tuple[Vec3, Vec3, Vec3]:
        """(right, up, forward) unit vectors in world space."""
        forward = vec_norm(vec_sub(self.target, self.position))
        right = vec_norm(vec_cross(forward, CAMERA_UP))
        if right == (0.0, 0.0, 0.0):
            # Looking straight along the up axis.
            right = (1.0, 0.0, 0.0)
        up = vec_cross(right, forward)
        return right, up, forward

    def to_camera_space(self, point: Vec3) -> Vec3:
        right, up, forward = self.basis()
        d = vec_sub(point, self.position)
        return (vec_dot(d, right), vec_dot(d, up), -vec_dot(d, forward))

    def project(self, point: Vec3) -> Vec3:
        """World point -> normalized device coordinates (x, y, z)."""
        xc, yc, zc = self.to_camera_space(point)
        w = -zc
        if w == 0:
            return (0.0, 0.0, math.inf)
        f = 1.0 / math.tan(math.radians(self.fov_deg) / 2.0)
        n, fa = self.near, self.far
        ndc_z = ((fa + n) / (n - fa) * zc + 2.0 * fa * n / (n - fa)) / w
        return (f / self.aspect * xc / w, f * yc / w, ndc_z)

    def world_to_screen(self, point: Vec3) -> Tuple[float, float, float]:
        """World point -> (pixel x, pixel y, ndc depth)."""
        x, y, z = self.project(point)
        w, h = self.viewport_size
        return ((x * 0.5 + 0.5) * w, (-y * 0.5 + 0.5) * h, z)

    def pixels_per_unit(self, point: Vec3) -> float:
        """Approximate on-screen size of one scene unit at point's depth."""
        depth = -self.to_camera_space(point)[2]
        if depth <= 0:
            return 0.0
        f = 1.0 / math.tan(math.radians(self.fov_deg) / 2.0)
        return f * self.viewport_size[1] / (2.0 * depth)

    def zoom(self, factor: float, pivot: Optional[Vec3] = None):
        """Dolly toward the target (factor > 1 moves closer)."""
        factor = clamp(factor, 0.05, 20.0)
        if pivot is not None:
            self.look_at(pivot)
        offset = vec_sub(self.position, self.target)
        dist = clamp(vec_len(offset) / factor, MIN_CAMERA_DISTANCE, MAX_CAMERA_DISTANCE)
        self.position = vec_add(self.target, vec_scale(vec_norm(offset), dist))

    def orbit(self, yaw: float, pitch: float):
        """Rotate the camera around its target by yaw/pitch radians."""
        ox, oy, oz = vec_sub(self.position, self.target)
        dist = math.sqrt(ox * ox + oy * oy + oz * oz)
        if dist == 0:
            return
        theta = math.atan2(ox, oz) + yaw
        phi = clamp(math.acos(clamp(oy / dist, -1.0, 1.0)) - pitch, 0.01, math.pi - 0.01)
        offset = (dist * math.sin(phi) * math.sin(theta),
                  dist * math.cos(phi),
                  dist * math.sin(phi) * math.cos(theta))
        self.position = vec_add(self.target, offset)

    def pan_pixels(self, dx_pixels, dy_pixels):
        right, up, _ = self.basis()
        units_per_pixel = 1.0 / max(self.pixels_per_unit(self.target), 1e-9)
        shift = vec_add(vec_scale(right, -dx_pixels * units_per_pixel),
                        vec_scale(up, dy_pixels * units_per_pixel))
        self.position = vec_add(self.position, shift)
        self.target = vec_add(self.target, shift)
