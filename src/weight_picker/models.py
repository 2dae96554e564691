"""Dataclasses describing the scale's style, range and rotation state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
import json
import math
from typing import Any, Dict, Iterator, NamedTuple, Tuple, Union

Color = Union[str, Tuple[int, int, int, int]]


class Point(NamedTuple):
    """2D coordinate in drawing-surface pixels."""

    x: float
    y: float

    @classmethod
    def from_polar(cls, origin: "Point", radius: float, theta: float) -> "Point":
        return cls(
            radius * math.cos(theta) + origin.x, radius * math.sin(theta) + origin.y
        )


class LineType(Enum):
    """Tick classification for a single weight on the ruler."""

    NORMAL = "normal"
    FIVE_STEP = "five_step"
    TEN_STEP = "ten_step"

    @classmethod
    def for_weight(cls, weight: int) -> "LineType":
        if weight % 10 == 0:
            return cls.TEN_STEP
        if weight % 5 == 0:
            return cls.FIVE_STEP
        return cls.NORMAL


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class ScaleStyle:
    """Visual configuration of the scale. Lengths in dp, text size in sp."""

    scale_width: float = 100.0
    radius: float = 555.0
    normal_line_color: Color = "#D3D3D3"
    five_step_line_color: Color = "#00FF00"
    ten_step_line_color: Color = "#000000"
    normal_line_length: float = 15.0
    five_step_line_length: float = 25.0
    ten_step_line_length: float = 35.0
    scale_indicator_color: Color = "#00FF00"
    scale_indicator_length: float = 60.0
    text_size: float = 18.0
    ring_color: Color = "#FFFFFF"
    shadow_blur: float = 60.0  # px
    shadow_color: Color = (0, 0, 0, 50)
    line_width: float = 1.0
    label_color: Color = "#000000"
    label_gap: float = 5.0

    def line_length(self, kind: LineType) -> float:
        if kind is LineType.TEN_STEP:
            return self.ten_step_line_length
        if kind is LineType.FIVE_STEP:
            return self.five_step_line_length
        return self.normal_line_length

    def line_color(self, kind: LineType) -> Color:
        if kind is LineType.TEN_STEP:
            return self.ten_step_line_color
        if kind is LineType.FIVE_STEP:
            return self.five_step_line_color
        return self.normal_line_color


@dataclass(frozen=True)
class WeightRange:
    """Selectable weights and the weight shown under the indicator at rest."""

    min_weight: int = 20
    max_weight: int = 250
    initial_weight: int = 80

    def is_valid(self) -> bool:
        return self.min_weight <= self.initial_weight <= self.max_weight

    def angle_bounds(self) -> Tuple[float, float]:
        """Allowed rotation in degrees; larger weights sit at smaller angles."""
        return (
            float(self.initial_weight - self.max_weight),
            float(self.initial_weight - self.min_weight),
        )

    def weights(self) -> Iterator[int]:
        return iter(range(self.min_weight, self.max_weight + 1))


@dataclass
class RotationState:
    """Rotation of the scale for the lifetime of one widget."""

    current_angle: float = 0.0
    drag_start_angle: float = 0.0
    angle_at_last_release: float = 0.0
    phase: DragPhase = DragPhase.IDLE


def _style_from_dict(data: Dict[str, Any]) -> ScaleStyle:
    kwargs: Dict[str, Any] = {}
    for f in fields(ScaleStyle):
        if f.name not in data:
            continue
        value = data[f.name]
        # JSON has no tuples
        kwargs[f.name] = tuple(value) if isinstance(value, list) else value
    return ScaleStyle(**kwargs)


@dataclass
class AppConfig:
    """Settings for the demo application window."""

    weight_range: WeightRange = field(default_factory=WeightRange)
    style: ScaleStyle = field(default_factory=lambda: ScaleStyle(scale_width=150.0))
    density: float = 1.0
    log_level: str = "INFO"

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        r = data.get("weight_range", {})
        s = data.get("style", {})
        return AppConfig(
            weight_range=WeightRange(
                min_weight=int(r.get("min_weight", 20)),
                max_weight=int(r.get("max_weight", 250)),
                initial_weight=int(r.get("initial_weight", 80)),
            ),
            style=_style_from_dict({"scale_width": 150.0, **s}),
            density=float(data.get("density", 1.0)),
            log_level=str(data.get("log_level", "INFO")),
        )


__all__ = [
    "AppConfig",
    "Color",
    "DragPhase",
    "LineType",
    "Point",
    "RotationState",
    "ScaleStyle",
    "WeightRange",
]
