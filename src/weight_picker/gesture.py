"""Drag-to-rotate handling for the weight scale."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from .models import DragPhase, Point, RotationState, WeightRange
from .utils import clamp, touch_angle

logger = logging.getLogger(__name__)

WeightCallback = Callable[[int], None]


def weight_for_angle(initial_weight: int, angle: float) -> int:
    """Weight under the indicator when the scale is rotated by ``angle`` degrees.

    Halves round up, so the interpreter and the renderer always agree on
    which tick sits under the indicator.
    """
    return int(math.floor(initial_weight - angle + 0.5))


class GestureInterpreter:
    """Turns drag positions into a clamped rotation angle and a weight.

    The host owns the instance and must keep :attr:`circle_center` in sync
    with the layout. A drag is ``on_drag_start`` followed by any number of
    ``on_drag_move`` calls and a final ``on_drag_end``; the angle reached at
    the end becomes the baseline for the next drag.
    """

    def __init__(
        self,
        weight_range: WeightRange,
        on_weight_change: Optional[WeightCallback] = None,
    ) -> None:
        self.weight_range = weight_range
        self.on_weight_change = on_weight_change
        self.state = RotationState()
        self.circle_center = Point(0.0, 0.0)

    # ----------------------------- Properties ---------------------------------

    @property
    def angle(self) -> float:
        return self.state.current_angle

    @property
    def weight(self) -> int:
        return weight_for_angle(self.weight_range.initial_weight, self.angle)

    @property
    def dragging(self) -> bool:
        return self.state.phase is DragPhase.DRAGGING

    # ----------------------------- Interaction --------------------------------

    def _angle_of(self, position: Point) -> float:
        c = self.circle_center
        return touch_angle(c.x, c.y, position.x, position.y)

    def on_drag_start(self, position: Point) -> None:
        self.state.drag_start_angle = self._angle_of(position)
        self.state.phase = DragPhase.DRAGGING
        logger.debug(
            "drag start at %s (angle %.2f°)", position, self.state.drag_start_angle
        )

    def on_drag_move(self, position: Point) -> int:
        if not self.dragging:
            return self.weight
        delta = self._angle_of(position) - self.state.drag_start_angle
        lo, hi = self.weight_range.angle_bounds()
        self.state.current_angle = clamp(
            self.state.angle_at_last_release + delta, lo, hi
        )
        weight = self.weight
        if self.on_weight_change is not None:
            self.on_weight_change(weight)
        return weight

    def on_drag_end(self) -> None:
        if not self.dragging:
            return
        self.state.angle_at_last_release = self.state.current_angle
        self.state.phase = DragPhase.IDLE
        logger.debug(
            "drag end: angle %.2f°, weight %d", self.state.current_angle, self.weight
        )


__all__ = ["GestureInterpreter", "WeightCallback", "weight_for_angle"]
