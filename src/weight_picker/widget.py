"""Qt host for the rotatable weight scale."""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from .gesture import GestureInterpreter, WeightCallback
from .models import Point, ScaleStyle, WeightRange
from .painter import paint_commands
from .render import DrawCommand, build_scale, circle_center

logger = logging.getLogger(__name__)


class ScaleWidget(QtWidgets.QWidget):
    """Drag-rotatable ruler reporting the weight under its fixed indicator.

    ``on_weight_change`` and :attr:`weightChanged` both fire on every drag
    move, after the angle has been clamped to the weight range.
    """

    weightChanged = QtCore.Signal(int)

    def __init__(
        self,
        style: Optional[ScaleStyle] = None,
        weight_range: Optional[WeightRange] = None,
        on_weight_change: Optional[WeightCallback] = None,
        density: float = 1.0,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._style = style or ScaleStyle()
        self._range = weight_range or WeightRange()
        self._density = float(density)
        self._on_weight_change = on_weight_change
        if not self._range.is_valid():
            logger.warning(
                "initial weight %d outside [%d, %d]",
                self._range.initial_weight,
                self._range.min_weight,
                self._range.max_weight,
            )

        self._gesture = GestureInterpreter(self._range, self._emit_weight)
        self.setMinimumSize(200, 200)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )
        self._sync_center()

    # ----------------------------- Properties ---------------------------------

    def scale_style(self) -> ScaleStyle:
        return self._style

    def weight_range(self) -> WeightRange:
        return self._range

    def angle(self) -> float:
        return self._gesture.angle

    def weight(self) -> int:
        return self._gesture.weight

    def circle_center(self) -> Point:
        self._sync_center()
        return self._gesture.circle_center

    def render_commands(self) -> List[DrawCommand]:
        return build_scale(
            self._gesture.angle,
            self._range,
            self._style,
            (float(self.width()), float(self.height())),
            self._density,
        )

    # ----------------------------- Interaction --------------------------------

    def _emit_weight(self, weight: int) -> None:
        if self._on_weight_change is not None:
            self._on_weight_change(weight)
        self.weightChanged.emit(weight)

    def _sync_center(self) -> None:
        self._gesture.circle_center = circle_center(
            (float(self.width()), float(self.height())), self._style, self._density
        )

    @staticmethod
    def _point(e: QtGui.QMouseEvent) -> Point:
        pos = e.position()
        return Point(float(pos.x()), float(pos.y()))

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            super().mousePressEvent(e)
            return
        self._sync_center()
        self._gesture.on_drag_start(self._point(e))
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if not self._gesture.dragging:
            super().mouseMoveEvent(e)
            return
        self._gesture.on_drag_move(self._point(e))
        self.update()
        e.accept()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(e)
            return
        self._gesture.on_drag_end()
        self.update()
        e.accept()

    # ----------------------------- Painting -----------------------------------

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        self._sync_center()
        super().resizeEvent(e)

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        self._sync_center()
        painter = QtGui.QPainter(self)
        try:
            paint_commands(painter, self.render_commands())
        finally:
            painter.end()


__all__ = ["ScaleWidget"]
