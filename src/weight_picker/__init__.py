"""weight_picker package: a drag-rotatable weight scale widget for Qt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .gesture import GestureInterpreter, weight_for_angle
from .models import LineType, Point, RotationState, ScaleStyle, WeightRange
from .render import build_scale

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m weight_picker`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "GestureInterpreter",
    "LineType",
    "Point",
    "RotationState",
    "ScaleStyle",
    "WeightRange",
    "build_scale",
    "get_version",
    "main",
    "weight_for_angle",
    "__version__",
]
