#!/usr/bin/env python3
"""
Selection and focus control.

Maps a picked body to its key, computes a camera target/position from the body's current
world position and size, and keeps the formatted info for the info panel.

The camera offset grows with the body: distance = radius * SIZE_SCALE * FOCUS_DISTANCE_FACTOR
along FOCUS_DIRECTION (1, 0.5, 1), so larger bodies are viewed from further away.
"""
from typing import Optional

from .constants import FOCUS_DIRECTION, FOCUS_DISTANCE_FACTOR, SIZE_SCALE
from .data_models import DEFAULT_FOCUS, BodyInfo, FocusTarget
from .display import format_body
from .errors import LookupFailure
from .kinematics import KinematicsUpdater
from .logging_utils import get_logger
from .registry import BodyRegistry
from .vector_utils import Vec3, vec_add, vec_scale

log = get_logger(__name__)


class SelectionController:
    """
    Single writer of the selection. Readers use selected_key, info and revision.

    revision increases on every selection change so a polling UI can detect new selections.
    """

    def __init__(self, registry: BodyRegistry, updater: KinematicsUpdater):
        self.registry = registry
        self.updater = updater
        self._selected: Optional[str] = None
        self._info: Optional[BodyInfo] = None
        self.revision = 0

    @property
    def selected_key(self) -> Optional[str]:
        return self._selected

    @property
    def info(self) -> Optional[BodyInfo]:
        return self._info

    def resolve_key(self, picked_name: str) -> str:
        return self.registry.resolve_key(picked_name)

    def focus_target(self, key: str) -> FocusTarget:
        """Camera target/position for a body without changing the selection."""
        body = self.registry.get(key)
        target = self.updater.world_position(key)
        distance = body.radius * SIZE_SCALE * FOCUS_DISTANCE_FACTOR
        offset = vec_scale(FOCUS_DIRECTION, distance)
        return FocusTarget(target_position=target, camera_position=vec_add(target, offset))

    def focus(self, key: str) -> FocusTarget:
        """
        Select a body and return where the camera should look from.

        Raises LookupFailure when key is not registered; the selection is left unchanged.
        """
        focus = self.focus_target(key)
        if key != self._selected:
            log.info("Focus on %s", key)
        self._selected = key
        self._info = format_body(self.registry.get(key))
        self.revision += 1
        return focus

    def try_focus(self, key: str) -> Optional[FocusTarget]:
        """focus() for command paths: unknown keys are logged and ignored."""
        try:
            return self.focus(key)
        except LookupFailure as exc:
            log.warning("Ignoring focus request: %s", exc)
            return None

    def pick(self, picked_name: str) -> Optional[FocusTarget]:
        """Focus on the body a renderer picked by display name."""
        try:
            key = self.resolve_key(picked_name)
        except LookupFailure as exc:
            log.warning("Ignoring pick: %s", exc)
            return None
        return self.try_focus(key)

    def clear_focus(self) -> FocusTarget:
        if self._selected is not None:
            log.info("Focus cleared")
        self._selected = None
        self._info = None
        self.revision += 1
        return DEFAULT_FOCUS

    def follow_target(self) -> Optional[Vec3]:
        """Current world position of the selected body, or None."""
        if self._selected is None:
            return None
        return self.updater.world_position(self._selected)
