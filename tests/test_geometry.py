"""Tests for triangle geometry, fill colors and vertex interpolation."""

import pytest

from pytrianglesqt.geometry import (
    build_triangle,
    fill_color,
    fill_hsl,
    hsl_css,
    interpolate_triangle,
)
from pytrianglesqt.models import ShapeStyle, Triangle
from pytrianglesqt.scales import ScaleSet


class TestBuildTriangle:
    """Tests for build_triangle."""

    def test_apex_at_scaled_position(self, two_items):
        scales = ScaleSet.from_items(two_items)
        tri = build_triangle(two_items[1], scales)
        assert tri.apex == (scales.x(10.0), scales.y(10.0))

    def test_vertex_ordering(self, sample_items):
        """left.x < apex.x < right.x and the base is flat below the apex."""
        scales = ScaleSet.from_items(sample_items)
        for item in sample_items:
            tri = build_triangle(item, scales)
            scaled_height = scales.height(item.height)
            assert tri.left[0] < tri.apex[0] < tri.right[0]
            assert tri.left[1] == tri.right[1] == tri.apex[1] + scaled_height

    def test_base_width_and_height(self, two_items):
        scales = ScaleSet.from_items(two_items)
        tri = build_triangle(two_items[1], scales)
        # item 1 holds the maximum base and height
        assert tri.base_width == pytest.approx(150.0)
        assert tri.height == pytest.approx(150.0)

    def test_isosceles(self, sample_items):
        scales = ScaleSet.from_items(sample_items)
        tri = build_triangle(sample_items[3], scales)
        assert tri.apex[0] - tri.left[0] == pytest.approx(tri.right[0] - tri.apex[0])

    def test_points_order(self):
        tri = Triangle(apex=(1.0, 0.0), left=(0.0, 2.0), right=(2.0, 2.0))
        assert tri.points() == ((1.0, 0.0), (0.0, 2.0), (2.0, 2.0))


class TestFillColor:
    """Tests for the hsl fill helpers."""

    def test_normal_fill(self, two_items):
        scales = ScaleSet.from_items(two_items)
        assert fill_color(two_items[1], scales) == "hsl(360, 90%, 50%)"
        assert fill_color(two_items[0], scales) == "hsl(0, 90%, 50%)"

    def test_hover_fill_reduces_saturation(self, two_items):
        scales = ScaleSet.from_items(two_items)
        assert fill_color(two_items[1], scales, hovered=True) == "hsl(360, 40%, 50%)"

    def test_fill_hsl_tuple(self, two_items):
        scales = ScaleSet.from_items(two_items)
        hue, sat, light = fill_hsl(two_items[1], scales, ShapeStyle(), hovered=False)
        assert hue == 360.0
        assert sat == 0.9
        assert light == 0.5

    def test_custom_style(self, two_items):
        scales = ScaleSet.from_items(two_items)
        style = ShapeStyle(saturation=0.5, lightness=0.25)
        assert fill_color(two_items[0], scales, style) == "hsl(0, 50%, 25%)"

    def test_hsl_css_formats_fractions(self):
        assert hsl_css(123.5, 0.9, 0.5) == "hsl(123.5, 90%, 50%)"


class TestInterpolateTriangle:
    """Tests for interpolate_triangle."""

    START = Triangle(apex=(0.0, 0.0), left=(-10.0, 20.0), right=(10.0, 20.0))
    END = Triangle(apex=(0.0, 0.0), left=(-30.0, 60.0), right=(30.0, 60.0))

    def test_endpoints(self):
        assert interpolate_triangle(self.START, self.END, 0.0) == self.START
        assert interpolate_triangle(self.START, self.END, 1.0) == self.END

    def test_halfway(self):
        mid = interpolate_triangle(self.START, self.END, 0.5)
        assert mid.left == pytest.approx((-20.0, 40.0))
        assert mid.right == pytest.approx((20.0, 40.0))

    def test_t_is_clamped(self):
        assert interpolate_triangle(self.START, self.END, 2.0) == self.END
        assert interpolate_triangle(self.START, self.END, -1.0) == self.START

    def test_endpoint_exact_for_inexact_floats(self):
        start = Triangle(apex=(0.1, 0.2), left=(0.3, 0.7), right=(1.1, 0.7))
        end = Triangle(apex=(1e-3, 97.3), left=(-12.7, 330.1), right=(14.9, 330.1))
        assert interpolate_triangle(start, end, 1.0) is end
        assert interpolate_triangle(start, end, 0.0) is start
