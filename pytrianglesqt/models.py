"""Data models for triangle data items, canvas configuration and styling.

Configuration objects are frozen dataclasses; ``DataItem`` is the only
mutable model because swaps exchange ``base`` and ``height`` in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

Point = Tuple[float, float]  # (x, y) in canvas pixels, y grows downward

FIELDS: Tuple[str, ...] = ("x", "y", "base", "height", "hue")
DATASET_SIZE = 10


class DatasetError(ValueError):
    """Raised when the triangle dataset cannot be loaded or scaled."""


@dataclass
class DataItem:
    """One data case: five positive quantitative variables.

    Identity is the item's index in its collection, never its values.
    """

    x: float
    y: float
    base: float
    height: float
    hue: float


@dataclass(frozen=True)
class Triangle:
    """Isosceles triangle with its apex on top and base at the bottom."""

    apex: Point
    left: Point
    right: Point

    def points(self) -> Tuple[Point, Point, Point]:
        """Vertices in drawing order (apex, left, right)."""
        return (self.apex, self.left, self.right)

    @property
    def base_width(self) -> float:
        return self.right[0] - self.left[0]

    @property
    def height(self) -> float:
        return self.left[1] - self.apex[1]


@dataclass(frozen=True)
class Margins:
    """Drawing-area margins in pixels."""

    top: float = 20.0
    right: float = 20.0
    bottom: float = 30.0
    left: float = 40.0


@dataclass(frozen=True)
class CanvasConfig:
    """Fixed-size drawing surface.

    ``width``/``height`` are the inner drawing area that the x and y scales
    map onto; shapes are translated by ``(margins.left, margins.top)``.
    """

    outer_width: float = 1600.0
    outer_height: float = 600.0
    margins: Margins = field(default_factory=Margins)

    @property
    def width(self) -> float:
        return self.outer_width - self.margins.left - self.margins.right

    @property
    def height(self) -> float:
        return self.outer_height - self.margins.top - self.margins.bottom

    @property
    def offset(self) -> Point:
        return (self.margins.left, self.margins.top)


@dataclass(frozen=True)
class ScaleRanges:
    """Output ranges for the size and color scales."""

    size: Tuple[float, float] = (10.0, 150.0)  # base and height, pixels
    hue: Tuple[float, float] = (0.0, 360.0)  # degrees


@dataclass(frozen=True)
class ShapeStyle:
    """Stroke, fill and transition styling for triangles."""

    stroke_color: str = "#000000"
    stroke_width: float = 3.0
    selected_stroke_color: str = "#00FFFF"  # cyan highlight
    selected_stroke_width: float = 7.0
    saturation: float = 0.9
    hover_saturation: float = 0.4
    lightness: float = 0.5
    transition_ms: int = 1000
