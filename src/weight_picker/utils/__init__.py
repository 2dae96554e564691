"""Utility helpers for weight_picker."""

from .geometry import clamp, touch_angle

__all__ = ["clamp", "touch_angle"]
