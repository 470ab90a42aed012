#!/usr/bin/env python3
"""
Label projection for the name overlay.

Each frame every labelled body's world position is projected through the camera to pixel
coordinates. A label is hidden when the body is behind the camera (ndc z > 1) or when labels
are switched off. The only state kept between frames is the last visibility flag per key,
so the overlay toggles a label only when it changes.
"""
from typing import Dict, Iterable, List, Tuple

from .camera import PerspectiveCamera
from .constants import LABEL_OFFSET_PX
from .data_models import LabelPlacement
from .vector_utils import Vec3


class LabelProjector:

    def __init__(self, offset_px: float = LABEL_OFFSET_PX):
        self.offset_px = offset_px
        self._last_visible: Dict[str, bool] = {}

    def project(self, camera: PerspectiveCamera, entries: Iterable[Tuple[str, str, Vec3]],
                show_labels: bool) -> List[LabelPlacement]:
        """
        Args:
            camera: Current camera transform and viewport
            entries: (key, display name, world position) per labelled body
            show_labels: The show_labels setting for this frame

        Returns:
            One LabelPlacement per entry, lifted offset_px above the body.
        """
        placements = []
        for key, name, position in entries:
            x, y, depth = camera.world_to_screen(position)
            visible = show_labels and depth <= 1.0
            changed = self._last_visible.get(key) != visible
            self._last_visible[key] = visible
            placements.append(LabelPlacement(key=key, name=name, x=x, y=y - self.offset_px,
                                             visible=visible, changed=changed))
        return placements

    def last_visible(self, key: str) -> bool:
        return self._last_visible.get(key, False)
