"""Replay draw commands from :mod:`weight_picker.render` on a QPainter."""

from __future__ import annotations

from typing import Iterable

from PySide6 import QtCore, QtGui

from .models import Color
from .render import DrawCommand, Indicator, Label, Ring, Tick

SHADOW_STEPS = 12


def to_qcolor(color: Color) -> QtGui.QColor:
    """Convert a ``#RRGGBB`` string or an RGBA tuple into a QColor."""
    if isinstance(color, str):
        return QtGui.QColor(color)
    return QtGui.QColor(*color)


def _qpoint(p) -> QtCore.QPointF:
    return QtCore.QPointF(float(p.x), float(p.y))


def _paint_ring(painter: QtGui.QPainter, ring: Ring) -> None:
    painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
    center = _qpoint(ring.center)

    # Soft shadow: stacked translucent strokes, widest and faintest first
    if ring.shadow_blur > 0:
        shadow = to_qcolor(ring.shadow_color)
        alpha = max(1, shadow.alpha() // SHADOW_STEPS)
        for k in range(SHADOW_STEPS, 0, -1):
            c = QtGui.QColor(shadow)
            c.setAlpha(alpha)
            pen = QtGui.QPen(c)
            pen.setWidthF(ring.width + 2.0 * ring.shadow_blur * k / SHADOW_STEPS)
            painter.setPen(pen)
            painter.drawEllipse(center, ring.radius, ring.radius)

    pen = QtGui.QPen(to_qcolor(ring.color))
    pen.setWidthF(ring.width)
    painter.setPen(pen)
    painter.drawEllipse(center, ring.radius, ring.radius)


def _paint_tick(painter: QtGui.QPainter, tick: Tick) -> None:
    pen = QtGui.QPen(to_qcolor(tick.color))
    pen.setWidthF(tick.width)
    painter.setPen(pen)
    painter.drawLine(_qpoint(tick.start), _qpoint(tick.end))


def _paint_label(painter: QtGui.QPainter, label: Label) -> None:
    painter.save()
    font = QtGui.QFont(painter.font())
    font.setPixelSize(max(1, int(round(label.size))))
    painter.setFont(font)
    painter.setPen(QtGui.QPen(to_qcolor(label.color)))
    painter.translate(_qpoint(label.anchor))
    painter.rotate(label.rotation_deg)
    advance = QtGui.QFontMetricsF(font).horizontalAdvance(label.text)
    painter.drawText(QtCore.QPointF(-advance / 2.0, 0.0), label.text)
    painter.restore()


def _paint_indicator(painter: QtGui.QPainter, indicator: Indicator) -> None:
    painter.setPen(QtCore.Qt.PenStyle.NoPen)
    painter.setBrush(QtGui.QBrush(to_qcolor(indicator.color)))
    painter.drawPolygon(QtGui.QPolygonF([_qpoint(p) for p in indicator.points]))


def paint_commands(painter: QtGui.QPainter, commands: Iterable[DrawCommand]) -> None:
    """Draw ``commands`` in order with ``painter``."""
    painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
    for cmd in commands:
        if isinstance(cmd, Tick):
            _paint_tick(painter, cmd)
        elif isinstance(cmd, Label):
            _paint_label(painter, cmd)
        elif isinstance(cmd, Ring):
            _paint_ring(painter, cmd)
        elif isinstance(cmd, Indicator):
            _paint_indicator(painter, cmd)
        else:
            raise TypeError(f"unknown draw command: {cmd!r}")


__all__ = ["SHADOW_STEPS", "paint_commands", "to_qcolor"]
