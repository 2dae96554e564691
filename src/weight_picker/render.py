"""Geometry of the scale as a list of backend-neutral draw commands.

:func:`build_scale` is the whole renderer: given the rotation angle, the
weight range, the style and the size of the drawing surface it returns the
ring, one tick per weight, a label under every tenth tick and the fixed
indicator, all in surface pixels. Nothing here touches Qt; see
:mod:`weight_picker.painter` for the backend.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List, Tuple, Union

import numpy as np

from .models import Color, LineType, Point, ScaleStyle, WeightRange

INDICATOR_HALF_WIDTH_PX = 4.0


@dataclass(frozen=True)
class Ring:
    center: Point
    radius: float
    width: float
    color: Color
    shadow_blur: float
    shadow_color: Color


@dataclass(frozen=True)
class Tick:
    weight: int
    kind: LineType
    start: Point
    end: Point
    color: Color
    width: float


@dataclass(frozen=True)
class Label:
    """Text centred horizontally on ``anchor``, which lies on its baseline."""

    text: str
    anchor: Point
    rotation_deg: float
    size: float
    color: Color


@dataclass(frozen=True)
class Indicator:
    points: Tuple[Point, Point, Point]  # apex, base left, base right
    color: Color


DrawCommand = Union[Ring, Tick, Label, Indicator]


def circle_center(
    size: Tuple[float, float], style: ScaleStyle, density: float = 1.0
) -> Point:
    """Centre of the scale circle: its top edge sits on the surface centre."""
    width, height = size
    offset = (style.radius + style.scale_width / 2.0) * density
    return Point(width / 2.0, height / 2.0 + offset)


def tick_angle(
    weight: Union[int, np.ndarray], initial_weight: int, angle: float
) -> Union[float, np.ndarray]:
    """Angle in radians of the tick for ``weight``; -90° puts it at the top."""
    return (weight - initial_weight + angle - 90.0) * (math.pi / 180.0)


def build_scale(
    angle: float,
    weight_range: WeightRange,
    style: ScaleStyle,
    size: Tuple[float, float],
    density: float = 1.0,
) -> List[DrawCommand]:
    """Compute every primitive of one frame of the scale."""
    center = circle_center(size, style, density)
    radius = style.radius * density
    half_width = style.scale_width * density / 2.0
    outer_radius = radius + half_width
    inner_radius = radius - half_width

    commands: List[DrawCommand] = [
        Ring(
            center=center,
            radius=radius,
            width=style.scale_width * density,
            color=style.ring_color,
            shadow_blur=style.shadow_blur,
            shadow_color=style.shadow_color,
        )
    ]

    weights = np.fromiter(weight_range.weights(), dtype=np.int64)
    if weights.size:
        rads = np.asarray(
            tick_angle(weights, weight_range.initial_weight, angle), dtype=np.float64
        )
        kinds = [LineType.for_weight(int(w)) for w in weights]
        lengths = np.array([style.line_length(k) for k in kinds]) * density
        cos_a = np.cos(rads)
        sin_a = np.sin(rads)
        start_r = outer_radius - lengths
        xs0 = start_r * cos_a + center.x
        ys0 = start_r * sin_a + center.y
        xs1 = outer_radius * cos_a + center.x
        ys1 = outer_radius * sin_a + center.y

        text_px = style.text_size * density
        gap_px = style.label_gap * density
        line_px = style.line_width * density
        for i, weight in enumerate(weights.tolist()):
            kind = kinds[i]
            if kind is LineType.TEN_STEP:
                text_radius = outer_radius - float(lengths[i]) - gap_px - text_px
                commands.append(
                    Label(
                        text=str(abs(weight)),
                        anchor=Point.from_polar(center, text_radius, float(rads[i])),
                        rotation_deg=math.degrees(float(rads[i])) + 90.0,
                        size=text_px,
                        color=style.label_color,
                    )
                )
            commands.append(
                Tick(
                    weight=weight,
                    kind=kind,
                    start=Point(float(xs0[i]), float(ys0[i])),
                    end=Point(float(xs1[i]), float(ys1[i])),
                    color=style.line_color(kind),
                    width=line_px,
                )
            )

    apex = Point(
        center.x, center.y - inner_radius - style.scale_indicator_length * density
    )
    base_y = center.y - inner_radius
    commands.append(
        Indicator(
            points=(
                apex,
                Point(center.x - INDICATOR_HALF_WIDTH_PX, base_y),
                Point(center.x + INDICATOR_HALF_WIDTH_PX, base_y),
            ),
            color=style.scale_indicator_color,
        )
    )
    return commands


__all__ = [
    "DrawCommand",
    "INDICATOR_HALF_WIDTH_PX",
    "Indicator",
    "Label",
    "Ring",
    "Tick",
    "build_scale",
    "circle_center",
    "tick_angle",
]
