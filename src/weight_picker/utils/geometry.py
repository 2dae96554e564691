"""Geometry helpers shared by the gesture and rendering layers."""

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def touch_angle(cx: float, cy: float, x: float, y: float) -> float:
    """Angle in degrees of ``(x, y)`` around ``(cx, cy)``, clockwise from the top.

    A point straight above the centre is 0°, to the right is 90°. The
    centre itself has no direction and maps to 0°.
    """
    dx = cx - x
    dy = cy - y
    if dx == 0.0 and dy == 0.0:
        return 0.0
    return -math.degrees(math.atan2(dx, dy))


__all__ = ["clamp", "touch_angle"]
