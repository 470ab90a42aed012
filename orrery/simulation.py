#!/usr/bin/env python3
"""
Simulation controller: the state shared between the renderer thread and the control UI.

What this module does
- Owns the registry, settings, selection and kinematics updater as explicit objects.
- Exposes command functions (set_show_orbits, focus, ...) for the control surface and query
  functions for the renderer; there is no callback registration.
- Runs one frame: copies the settings at frame start, advances kinematics, and reports the
  follow target and a copy of every body's state.

Threading model
- The renderer thread calls tick()/step(); the UI thread calls the setters and focus().
  All access is guarded by a re-entrant lock so commands can call each other.
- Phase and spin use wall-clock delta/elapsed from FrameClock, so frame-rate changes only
  affect smoothness, never simulated speed.
"""
import copy
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from .camera import PerspectiveCamera
from .constants import MAX_SPEED_MULTIPLIER, MIN_SPEED_MULTIPLIER
from .data_models import BodyInfo, CelestialBody, FocusTarget, FrameReport, LabelPlacement, SimulationSettings
from .kinematics import KinematicsUpdater
from .labels import LabelProjector
from .logging_utils import get_logger
from .orbits import orbit_path
from .registry import BodyRegistry, default_registry
from .selection import SelectionController
from .vector_utils import Vec3, clamp

log = get_logger(__name__)

NO_FOCUS = "None"


class FrameClock:
    """
    Wall-clock source of (delta, elapsed) seconds.

    elapsed only accumulates while running, so pausing freezes orbital phase as well as spin.
    """

    def __init__(self, time_fn: Callable[[], float] = time.perf_counter):
        self._time = time_fn
        self._last: Optional[float] = None
        self.elapsed = 0.0
        self.running = True

    def tick(self) -> Tuple[float, float]:
        now = self._time()
        if self._last is None:
            self._last = now
        delta = max(0.0, now - self._last) if self.running else 0.0
        self._last = now
        self.elapsed += delta
        return delta, self.elapsed


class SimulationController:
    """
    Shared state between the UI thread (Dear PyGui) and the rendering thread (Pygame).
    Includes thread-safe operations guarded by a lock.
    """

    def __init__(self, registry: Optional[BodyRegistry] = None, clock: Optional[FrameClock] = None):
        self.lock = threading.RLock()
        self.registry = registry if registry is not None else default_registry()
        self.settings = SimulationSettings()
        self.kinematics = KinematicsUpdater(self.registry)
        self.selection = SelectionController(self.registry, self.kinematics)
        self.labels = LabelProjector()
        self.clock = clock if clock is not None else FrameClock()
        self.running = True  # app running
        self.playing = True  # simulation running
        # Camera pose requested by the last focus command; consumed by the renderer.
        self._camera_request: Optional[FocusTarget] = None
        self._orbit_paths = {
            key: orbit_path(body)
            for key, body in self.registry.get_all() if not body.is_star
        }

    # -----------------------
    # Settings commands
    # -----------------------

    def set_show_orbits(self, value: bool):
        with self.lock:
            self.settings.show_orbits = bool(value)
            log.debug("show_orbits=%s", self.settings.show_orbits)

    def set_rotation_speed(self, value: float):
        with self.lock:
            self.settings.rotation_speed = clamp(float(value), MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER)
            log.debug("rotation_speed=%.2f", self.settings.rotation_speed)

    def set_orbit_speed(self, value: float):
        with self.lock:
            self.settings.orbit_speed = clamp(float(value), MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER)
            log.debug("orbit_speed=%.2f", self.settings.orbit_speed)

    def set_follow_selected(self, value: bool):
        with self.lock:
            self.settings.follow_selected = bool(value)
            log.debug("follow_selected=%s", self.settings.follow_selected)

    def set_show_labels(self, value: bool):
        with self.lock:
            self.settings.show_labels = bool(value)
            log.debug("show_labels=%s", self.settings.show_labels)

    def set_playing(self, value: bool):
        with self.lock:
            self.playing = bool(value)
            self.clock.running = self.playing

    def toggle_play(self) -> bool:
        with self.lock:
            self.set_playing(not self.playing)
            return self.playing

    # -----------------------
    # Selection commands
    # -----------------------

    def focus(self, key: Optional[str]) -> Optional[FocusTarget]:
        """
        "Focus on" command. None or "None" clears the focus; unknown keys are ignored
        (logged) and leave the selection unchanged.
        """
        with self.lock:
            if key is None or key == NO_FOCUS:
                return self.clear_focus()
            target = self.selection.try_focus(key)
            if target is not None:
                self._camera_request = target
            return target

    def pick(self, name: str) -> Optional[FocusTarget]:
        """Focus on the body the renderer picked, by display name."""
        with self.lock:
            target = self.selection.pick(name)
            if target is not None:
                self._camera_request = target
            return target

    def clear_focus(self) -> FocusTarget:
        with self.lock:
            target = self.selection.clear_focus()
            self._camera_request = target
            return target

    def take_camera_request(self) -> Optional[FocusTarget]:
        with self.lock:
            request, self._camera_request = self._camera_request, None
            return request

    # -----------------------
    # Frame update
    # -----------------------

    def step(self, delta: float, elapsed: float) -> FrameReport:
        """Advance one frame with explicit times and report the new state."""
        with self.lock:
            settings = self.settings.snapshot()
            self.kinematics.update(delta, elapsed, settings)
            follow = self.selection.follow_target() if settings.follow_selected else None
            states = {key: copy.copy(s) for key, s in self.kinematics.states().items()}
            moon_states = {
                key: [copy.copy(s) for s in self.kinematics.moon_states(key)]
                for key, body in self.registry.get_all() if body.moons
            }
            return FrameReport(elapsed=elapsed, follow_target=follow, states=states, moon_states=moon_states)

    def tick(self) -> FrameReport:
        """Advance one frame using the wall clock."""
        with self.lock:
            delta, elapsed = self.clock.tick()
            return self.step(delta, elapsed)

    # -----------------------
    # Queries
    # -----------------------

    def focus_options(self) -> List[str]:
        return [NO_FOCUS] + self.registry.keys()

    def info(self) -> Optional[BodyInfo]:
        with self.lock:
            return self.selection.info

    @property
    def selected_key(self) -> Optional[str]:
        with self.lock:
            return self.selection.selected_key

    @property
    def selection_revision(self) -> int:
        with self.lock:
            return self.selection.revision

    def settings_snapshot(self) -> SimulationSettings:
        with self.lock:
            return self.settings.snapshot()

    def orbit_paths(self) -> Dict[str, List[Vec3]]:
        """Static planet orbit overlays in world space (focus-corrected)."""
        return self._orbit_paths

    def bodies(self) -> List[Tuple[str, CelestialBody]]:
        return self.registry.get_all()

    def project_labels(self, camera: PerspectiveCamera) -> List[LabelPlacement]:
        """Screen placements for the star and planet labels."""
        with self.lock:
            show = self.settings.show_labels
            entries = [(key, body.name, self.kinematics.world_position(key))
                       for key, body in self.registry.get_all()]
            return self.labels.project(camera, entries, show)
