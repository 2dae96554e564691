"""Geometry of the rendered scale."""

from __future__ import annotations

import math
from typing import List, Type, TypeVar

from hypothesis import given
from hypothesis import strategies as st
import pytest

from weight_picker.models import LineType, Point, ScaleStyle, WeightRange
from weight_picker.render import (
    INDICATOR_HALF_WIDTH_PX,
    DrawCommand,
    Indicator,
    Label,
    Ring,
    Tick,
    build_scale,
    circle_center,
    tick_angle,
)

SIZE = (400.0, 600.0)
T = TypeVar("T")


def _only(commands: List[DrawCommand], kind: Type[T]) -> List[T]:
    return [c for c in commands if isinstance(c, kind)]


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        (100, LineType.TEN_STEP),
        (85, LineType.FIVE_STEP),
        (83, LineType.NORMAL),
        (0, LineType.TEN_STEP),
        (-10, LineType.TEN_STEP),
        (-15, LineType.FIVE_STEP),
        (-7, LineType.NORMAL),
    ],
)
def test_line_type_for_weight(weight: int, expected: LineType) -> None:
    assert LineType.for_weight(weight) is expected


def test_circle_top_edge_sits_on_surface_center() -> None:
    style = ScaleStyle()
    center = circle_center(SIZE, style)
    assert center == Point(200.0, 300.0 + 555.0 + 50.0)
    assert center.y - (style.radius + style.scale_width / 2) == 300.0


def test_circle_center_scales_with_density() -> None:
    center = circle_center(SIZE, ScaleStyle(radius=100, scale_width=20), density=2.0)
    assert center == Point(200.0, 300.0 + 220.0)


def test_one_tick_per_weight_and_label_per_decade() -> None:
    commands = build_scale(0.0, WeightRange(20, 250, 80), ScaleStyle(), SIZE)
    ticks = _only(commands, Tick)
    labels = _only(commands, Label)

    assert [t.weight for t in ticks] == list(range(20, 251))
    assert len(labels) == 24
    assert labels[0].text == "20"
    assert labels[-1].text == "250"


def test_draw_order_ring_first_indicator_last() -> None:
    commands = build_scale(0.0, WeightRange(), ScaleStyle(), SIZE)
    assert isinstance(commands[0], Ring)
    assert isinstance(commands[-1], Indicator)
    assert len(_only(commands, Ring)) == 1
    assert len(_only(commands, Indicator)) == 1


def test_degenerate_range_draws_no_ticks() -> None:
    commands = build_scale(0.0, WeightRange(100, 50, 80), ScaleStyle(), SIZE)
    assert _only(commands, Tick) == []
    assert _only(commands, Label) == []
    assert len(commands) == 2


@pytest.mark.parametrize(
    "rng", [WeightRange(80, 80, 80), WeightRange(-12, 3, 0), WeightRange(0, 9, 4)]
)
def test_ticks_follow_weight_range_weights(rng: WeightRange) -> None:
    ticks = _only(build_scale(0.0, rng, ScaleStyle(), SIZE), Tick)
    assert [t.weight for t in ticks] == list(rng.weights())
    assert all(type(t.weight) is int for t in ticks)


def test_initial_weight_tick_points_at_indicator() -> None:
    style = ScaleStyle()
    commands = build_scale(0.0, WeightRange(20, 250, 80), style, SIZE)
    tick = next(t for t in _only(commands, Tick) if t.weight == 80)
    center = circle_center(SIZE, style)
    outer = style.radius + style.scale_width / 2

    assert tick.end.x == pytest.approx(center.x)
    assert tick.end.y == pytest.approx(center.y - outer)
    assert tick.start.y == pytest.approx(center.y - outer + style.ten_step_line_length)


def test_rotation_brings_other_weight_to_top() -> None:
    style = ScaleStyle()
    commands = build_scale(10.0, WeightRange(20, 250, 80), style, SIZE)
    tick = next(t for t in _only(commands, Tick) if t.weight == 70)
    assert tick.end.x == pytest.approx(circle_center(SIZE, style).x)


def test_tick_lengths_and_colors_follow_line_type() -> None:
    style = ScaleStyle()
    commands = build_scale(0.0, WeightRange(80, 85, 80), style, SIZE)
    for tick in _only(commands, Tick):
        length = math.dist(tick.start, tick.end)
        assert length == pytest.approx(style.line_length(tick.kind))
        assert tick.color == style.line_color(tick.kind)
        assert tick.width == style.line_width


def test_label_sits_inside_tick_and_reads_tangentially() -> None:
    style = ScaleStyle()
    commands = build_scale(0.0, WeightRange(80, 80, 80), style, SIZE)
    (label,) = _only(commands, Label)
    center = circle_center(SIZE, style)
    outer = style.radius + style.scale_width / 2
    expected_r = outer - style.ten_step_line_length - style.label_gap - style.text_size

    assert label.anchor.x == pytest.approx(center.x)
    assert label.anchor.y == pytest.approx(center.y - expected_r)
    assert label.rotation_deg == pytest.approx(0.0)
    assert label.size == style.text_size


def test_negative_weights_are_labelled_by_magnitude() -> None:
    commands = build_scale(0.0, WeightRange(-20, 20, 0), ScaleStyle(), SIZE)
    assert [lbl.text for lbl in _only(commands, Label)] == ["20", "10", "0", "10", "20"]


def test_indicator_does_not_rotate() -> None:
    style = ScaleStyle()
    rng = WeightRange()
    still = _only(build_scale(0.0, rng, style, SIZE), Indicator)[0]
    turned = _only(build_scale(-42.5, rng, style, SIZE), Indicator)[0]
    assert still == turned

    center = circle_center(SIZE, style)
    inner = style.radius - style.scale_width / 2
    apex, left, right = still.points
    assert apex == Point(center.x, center.y - inner - style.scale_indicator_length)
    assert left == Point(center.x - INDICATOR_HALF_WIDTH_PX, center.y - inner)
    assert right == Point(center.x + INDICATOR_HALF_WIDTH_PX, center.y - inner)
    assert still.color == style.scale_indicator_color


def test_ring_geometry() -> None:
    style = ScaleStyle(scale_width=150.0)
    (ring,) = _only(build_scale(0.0, WeightRange(), style, SIZE), Ring)
    assert ring.radius == style.radius
    assert ring.width == 150.0
    assert ring.shadow_blur == style.shadow_blur
    assert ring.shadow_color == (0, 0, 0, 50)


def test_build_is_repeatable() -> None:
    args = (17.25, WeightRange(), ScaleStyle(), SIZE)
    assert build_scale(*args) == build_scale(*args)


@given(
    weight=st.integers(min_value=-1000, max_value=1000),
    angle=st.floats(min_value=-360.0, max_value=360.0),
)
def test_next_weight_is_one_degree_further_clockwise(
    weight: int, angle: float
) -> None:
    step = tick_angle(weight + 1, 80, angle) - tick_angle(weight, 80, angle)
    assert step == pytest.approx(math.pi / 180.0)
