#!/usr/bin/env python3
"""
Solar System Orrery application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Maintains a shared SimulationController that owns the bodies, settings and selection;
  all access is guarded by a re-entrant lock for thread-safety.
- The renderer projects bodies, orbit paths, rings and labels through a perspective camera;
  the UI exposes the simulation settings, a "Focus on" menu and the info panel.

Threading model
- PygameRenderer runs in a background thread and performs: input handling (for the viewport),
  advancing the frame, and drawing. It only talks to SimulationController commands/queries.
- The UI class runs in the main thread via Dear PyGui. It polls the controller on a periodic
  frame callback and calls its command functions.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python solar_sim.py [--system systems/my_system.json] [--log-level DEBUG]`
3) List bundled systems: `python solar_sim.py --list-systems`

Controls (viewport)
- Left click: focus on a body | Right-drag: orbit camera | Middle-drag: pan | Wheel: zoom
- Arrows: orbit camera | Space: Pause/Play | Esc: clear focus
"""

import argparse
import json
import math
import random
import sys
import threading
import time
from typing import Dict, List, Optional, Sequence, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from orrery.camera import PerspectiveCamera
from orrery.constants import (
    BACKGROUND_COLOR,
    DEFAULT_RING_STYLE,
    LABEL_COLOR,
    MAX_SPEED_MULTIPLIER,
    MIN_MOON_RADIUS,
    MIN_PLANET_RADIUS,
    MIN_SPEED_MULTIPLIER,
    MOON_ORBIT_COLOR,
    ORBIT_COLOR,
    RING_INNER_FACTOR,
    RING_OUTER_FACTOR,
    RING_STYLES,
    SAFE_COORD_LIMIT,
    SELECTION_COLOR,
    STAR_FIELD_COUNT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from orrery.errors import MalformedBody
from orrery.kinematics import moon_orbit_path
from orrery.logging_utils import get_logger, set_level
from orrery.presets_loader import list_systems
from orrery.registry import BodyRegistry, default_registry
from orrery.simulation import NO_FOCUS, SimulationController

log = get_logger("app")

# ============================================================
# Pygame Renderer Thread
# ============================================================


class PygameRenderer(threading.Thread):
    """
    Pygame loop: draws the star field, orbit paths, bodies, rings and labels.
    Handles picking, camera orbit/pan/zoom and the follow-selected camera step.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.camera = PerspectiveCamera()
        self.surface = None
        self.clock = None
        self.dragging_orbit = False
        self.dragging_pan = False
        self.last_mouse_screen = (0, 0)
        self.orbit_speed_keys = 1.5  # radians per second
        self.running = True
        self.report = None
        rng = random.Random(7)
        self.stars = [(rng.uniform(-1000, 1000), rng.uniform(-1000, 1000), rng.uniform(-1000, 1000))
                      for _ in range(STAR_FIELD_COUNT)]
        # (key, display name, screen x, screen y, pixel radius) of the last drawn bodies
        self._drawn: List[Tuple[str, str, int, int, int]] = []
        # Pre-rendered name images of the labels currently shown, by key
        self._label_images: Dict[str, "pygame.Surface"] = {}

    def run(self):
        pygame.init()
        pygame.display.set_caption("Solar System Orrery - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.sim.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            # Input handling
            self.handle_events(real_dt)

            # Kinematics step (wall clock inside the controller)
            self.report = self.sim.tick()

            # Camera requests from focus commands, then follow
            request = self.sim.take_camera_request()
            if request is not None:
                self.camera.set_pose(request.camera_position, request.target_position)
            if self.report.follow_target is not None:
                self.camera.look_at(self.report.follow_target)

            # Draw
            self.draw()

            # Limit FPS
            self.clock.tick(60)

        pygame.quit()

    def handle_events(self, real_dt):
        keys = pygame.key.get_pressed()
        step = self.orbit_speed_keys * real_dt
        if keys[pygame.K_LEFT]:
            self.camera.orbit(-step, 0.0)
        if keys[pygame.K_RIGHT]:
            self.camera.orbit(step, 0.0)
        if keys[pygame.K_UP]:
            self.camera.orbit(0.0, step)
        if keys[pygame.K_DOWN]:
            self.camera.orbit(0.0, -step)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                factor = 1.1 if event.y > 0 else 1.0 / 1.1
                self.camera.zoom(factor)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.sim.toggle_play()
                elif event.key == pygame.K_ESCAPE:
                    self.sim.clear_focus()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # left click
                    name = self.pick_at(pygame.mouse.get_pos())
                    if name is not None:
                        self.sim.pick(name)
                elif event.button == 3:
                    self.dragging_orbit = True
                elif event.button == 2:
                    self.dragging_pan = True

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 3:
                    self.dragging_orbit = False
                if event.button == 2:
                    self.dragging_pan = False

            elif event.type == pygame.MOUSEMOTION:
                dx, dy = event.rel
                if self.dragging_orbit:
                    self.camera.orbit(dx * 0.005, dy * 0.005)
                elif self.dragging_pan:
                    self.camera.pan_pixels(dx, dy)

        self.last_mouse_screen = pygame.mouse.get_pos()

    def pick_at(self, mouse) -> Optional[str]:
        """Display name of the front-most drawn body under the cursor, if any."""
        best = None
        for key, name, x, y, r in reversed(self._drawn):
            if math.hypot(mouse[0] - x, mouse[1] - y) <= max(r, 6):
                best = name
                break
        return best

    def _screen(self, point) -> Optional[Tuple[int, int]]:
        x, y, depth = self.camera.world_to_screen(point)
        if depth > 1.0:
            return None
        return _safe_point((x, y))

    def draw_polyline(self, surf, points, color):
        pts = []
        for p in points:
            sp = self._screen(p)
            if sp is None:
                if len(pts) > 1:
                    pygame.draw.aalines(surf, color, False, pts)
                pts = []
                continue
            pts.append(sp)
        if len(pts) > 1:
            pygame.draw.aalines(surf, color, False, pts)

    def draw_ring(self, surf, key, state, center, planet_px):
        color, opacity = RING_STYLES.get(key, DEFAULT_RING_STYLE)
        faded = tuple(int(c * opacity) for c in color)
        squash = max(abs(math.cos(state.tilt)), 0.15)
        for factor in (RING_INNER_FACTOR, RING_OUTER_FACTOR):
            rx = int(planet_px * factor)
            ry = max(1, int(rx * squash))
            rect = pygame.Rect(center[0] - rx, center[1] - ry, 2 * rx, 2 * ry)
            if rx < SAFE_COORD_LIMIT:
                pygame.draw.ellipse(surf, faded, rect, 1)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        report = self.report
        settings = self.sim.settings_snapshot()
        selected = self.sim.selected_key

        for star in self.stars:
            sp = self._screen(star)
            if sp:
                surf.set_at(sp, (170, 170, 170))

        # Orbit paths
        for key, path in self.sim.orbit_paths().items():
            if report.states[key].orbit_visible:
                self.draw_polyline(surf, path, ORBIT_COLOR)

        # Bodies, far to near
        drawables = []
        for key, body in self.sim.bodies():
            state = report.states[key]
            drawables.append((key, body, state, MIN_PLANET_RADIUS))
            for moon, moon_state in zip(body.moons, report.moon_states.get(key, [])):
                if moon_state.orbit_visible:
                    self.draw_polyline(surf, moon_orbit_path(state, moon), MOON_ORBIT_COLOR)
                drawables.append((None, moon, moon_state, MIN_MOON_RADIUS))
        drawables.sort(key=lambda d: self.camera.to_camera_space(d[2].position)[2])

        drawn = []
        for key, body, state, minimum in drawables:
            sp = self._screen(state.position)
            if sp is None:
                continue
            radius = body.scaled_radius(0.0 if body.is_star else minimum)
            px = max(1, min(int(radius * self.camera.pixels_per_unit(state.position)), 400))
            try:
                gfxdraw.filled_circle(surf, sp[0], sp[1], px, body.color)
                gfxdraw.aacircle(surf, sp[0], sp[1], px, body.color)
            except OverflowError:
                continue
            if body.has_rings and key is not None:
                self.draw_ring(surf, key, state, sp, px)
            if key is not None:
                drawn.append((key, body.name, sp[0], sp[1], px))
                if key == selected:
                    gfxdraw.aacircle(surf, sp[0], sp[1], px + 4, SELECTION_COLOR)
        self._drawn = drawn

        # Labels: text images are rendered when a label appears and dropped when it hides
        for label in self.sim.project_labels(self.camera):
            if label.changed:
                if label.visible:
                    self._label_images[label.key] = render_text(label.name, LABEL_COLOR)
                else:
                    self._label_images.pop(label.key, None)
            img = self._label_images.get(label.key)
            pos = _safe_point((label.x, label.y))
            if img is not None and pos:
                surf.blit(img, (pos[0] - img.get_width() // 2, pos[1]))

        # HUD text
        draw_text(surf, "Click: focus | Right-drag: orbit | Middle-drag: pan | Wheel: zoom | Space: Pause/Play | Esc: clear", 10, 10, (200, 200, 200))
        state = "Playing" if self.sim.playing else "Paused"
        draw_text(surf, f"t={report.elapsed:7.1f}s  orbit x{settings.orbit_speed:.1f}  spin x{settings.rotation_speed:.1f}  [{state}]", 10, 30, (200, 200, 200))

        pygame.display.flip()


_cached_font = None


def render_text(text, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("arial", 14, bold=True)
        except (OSError, pygame.error):
            _cached_font = pygame.font.Font(None, 16)
    return _cached_font.render(text, True, color)


def draw_text(surface, text, x, y, color, centered=False):
    img = render_text(text, color)
    if centered:
        x -= img.get_width() // 2
    surface.blit(img, (x, y))


def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (OverflowError, ValueError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================


class UI:
    """
    Dear PyGui interface: display/speed settings, "Focus on" menu and the info panel.
    """
    def __init__(self, sim: SimulationController):
        self.sim = sim
        self.info_text_id = None
        self.status_msg_id = None
        self._last_revision = -1

        self._build_ui()

        # Periodic UI sync using frame callbacks (for wider DPG version support)
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        current = dpg.get_frame_count()
        # schedule next sync ~ every 6 frames (~100ms at 60 FPS)
        dpg.set_frame_callback(current + 6, self._sync_ui_with_sim)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Solar System Orrery - Controls', width=460, height=640)

        settings = self.sim.settings_snapshot()
        with dpg.window(label="Controls", width=440, height=620, pos=(10, 10), tag="main_window"):
            dpg.add_text(self.sim.registry.name)
            dpg.add_separator()

            dpg.add_text("Display")
            with dpg.group(horizontal=True):
                dpg.add_checkbox(label="Show Orbits", default_value=settings.show_orbits,
                                 callback=lambda s, a, u: self.sim.set_show_orbits(a))
                dpg.add_checkbox(label="Show Labels", default_value=settings.show_labels,
                                 callback=lambda s, a, u: self.sim.set_show_labels(a))
            dpg.add_slider_float(label="Rotation Speed", min_value=MIN_SPEED_MULTIPLIER,
                                 max_value=MAX_SPEED_MULTIPLIER, default_value=settings.rotation_speed,
                                 width=250, callback=lambda s, a, u: self.sim.set_rotation_speed(a))
            dpg.add_slider_float(label="Orbit Speed", min_value=MIN_SPEED_MULTIPLIER,
                                 max_value=MAX_SPEED_MULTIPLIER, default_value=settings.orbit_speed,
                                 width=250, callback=lambda s, a, u: self.sim.set_orbit_speed(a))

            dpg.add_separator()

            dpg.add_text("Camera")
            dpg.add_checkbox(label="Follow Selected Planet", default_value=settings.follow_selected,
                             callback=lambda s, a, u: self.sim.set_follow_selected(a))
            dpg.add_combo(self.sim.focus_options(), label="Focus on", default_value=NO_FOCUS,
                          width=200, callback=self._on_focus_selected, tag="focus_combo")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Reset View", callback=self._reset_view)
            self.status_msg_id = dpg.add_text("")

            dpg.add_separator()

            dpg.add_text("Body Info")
            self.info_text_id = dpg.add_text("Select a body to see its details.", wrap=420)

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _on_focus_selected(self, sender, app_data, user_data=None):
        if app_data == NO_FOCUS:
            self.sim.clear_focus()
            self._set_status("Focus cleared.")
            return
        if self.sim.focus(app_data) is None:
            self._set_status(f"Unknown body '{app_data}'.", color=(255, 120, 120))
        else:
            self._set_status(f"Focused on {app_data}.")

    def _toggle_play(self):
        playing = self.sim.toggle_play()
        self._set_status(f"Simulation {'Playing' if playing else 'Paused'}.")

    def _reset_view(self):
        self.sim.clear_focus()
        dpg.set_value("focus_combo", NO_FOCUS)
        self._set_status("View reset.")

    def _sync_ui_with_sim(self):
        """
        Periodic UI update: refresh the info panel when the selection changed (including
        selections made by clicking in the viewport).
        """
        revision = self.sim.selection_revision
        if revision != self._last_revision:
            self._last_revision = revision
            info = self.sim.info()
            if info is None:
                dpg.set_value(self.info_text_id, "Select a body to see its details.")
                dpg.set_value("focus_combo", NO_FOCUS)
            else:
                dpg.set_value(self.info_text_id, "\n".join(info.lines()))
                dpg.set_value("focus_combo", self.sim.selected_key)
        # Reschedule next sync
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================


def build_registry(system_path: Optional[str]) -> BodyRegistry:
    if system_path:
        return BodyRegistry.from_file(system_path)
    return default_registry()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive scaled model of the solar system.")
    parser.add_argument("--system", help="Path to a system JSON file (default: built-in solar system).")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--list-systems", action="store_true",
                        help="List the system files bundled in systems/ and exit.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    set_level(args.log_level)

    if args.list_systems:
        for fn in list_systems():
            print(fn)
        return 0

    try:
        registry = build_registry(args.system)
    except (MalformedBody, OSError, json.JSONDecodeError) as exc:
        log.error("Cannot load system: %s", exc)
        return 1

    sim = SimulationController(registry)
    renderer = PygameRenderer(sim)

    # Start Pygame renderer thread
    renderer.start()

    ui = UI(sim)

    # Keyboard shortcut in UI window to toggle play/pause (Space)
    with dpg.handler_registry():
        def key_down(sender, app_data):
            if app_data == dpg.mvKey_Spacebar:
                ui._toggle_play()
        dpg.add_key_press_handler(callback=key_down)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()
    return 0


if __name__ == "__main__":
    sys.exit(main())
