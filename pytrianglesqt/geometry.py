"""Triangle geometry and fill colors derived from scaled data items."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .models import DataItem, ShapeStyle, Triangle
from .scales import ScaleSet
from .utils import clamp


def build_triangle(item: DataItem, scales: ScaleSet) -> Triangle:
    """Compute the vertices of the triangle drawn for ``item``.

    The apex sits at the scaled (x, y) position; the base is
    ``scales.base(item.base)`` wide and lies ``scales.height(item.height)``
    pixels below the apex.
    """
    apex_x = float(scales.x(item.x))
    apex_y = float(scales.y(item.y))
    half_base = float(scales.base(item.base)) / 2.0
    base_y = apex_y + float(scales.height(item.height))
    return Triangle(
        apex=(apex_x, apex_y),
        left=(apex_x - half_base, base_y),
        right=(apex_x + half_base, base_y),
    )


def hsl_css(hue: float, saturation: float, lightness: float) -> str:
    """Format an ``hsl(...)`` CSS color string."""
    return f"hsl({hue:g}, {saturation * 100:g}%, {lightness * 100:g}%)"


def fill_hsl(
    item: DataItem, scales: ScaleSet, style: ShapeStyle = ShapeStyle(), hovered: bool = False
) -> Tuple[float, float, float]:
    """Return (hue degrees, saturation, lightness) for an item's fill."""
    saturation = style.hover_saturation if hovered else style.saturation
    return (float(scales.hue(item.hue)), saturation, style.lightness)


def fill_color(
    item: DataItem, scales: ScaleSet, style: ShapeStyle = ShapeStyle(), hovered: bool = False
) -> str:
    """CSS fill color; hovered shapes use the reduced saturation."""
    return hsl_css(*fill_hsl(item, scales, style, hovered))


def triangle_array(triangle: Triangle) -> np.ndarray:
    """Vertices as a (3, 2) float array."""
    return np.array(triangle.points(), dtype=np.float64)


def interpolate_triangle(start: Triangle, end: Triangle, t: float) -> Triangle:
    """Linearly interpolate every vertex; ``t`` is clamped to [0, 1].

    The endpoints are returned unchanged at t=0 and t=1.
    """
    t = clamp(t)
    if t <= 0.0:
        return start
    if t >= 1.0:
        return end
    a = triangle_array(start)
    b = triangle_array(end)
    pts = a + (b - a) * t
    return Triangle(
        apex=(float(pts[0, 0]), float(pts[0, 1])),
        left=(float(pts[1, 0]), float(pts[1, 1])),
        right=(float(pts[2, 0]), float(pts[2, 1])),
    )
