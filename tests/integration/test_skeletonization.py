"""End-to-end skeletonization tests on realistic stroke shapes.

These run the full pipeline: contour or blob -> color buffer -> raster ->
Zhang-Suen thinning -> skeleton, and check the properties a stroke matcher
downstream relies on.
"""

import math

import pytest

from strokeskel.config import SkeletonSettings
from strokeskel.core import SkeletonProcessor, ZhangSuenThinning, extract_skeleton
from strokeskel.domain import BinaryRaster, StrokeContour, StrokePoint
from strokeskel.io import raster_to_color_buffer


def disk(size: int, radius: float) -> BinaryRaster:
    """Filled disk centered in a square raster."""
    raster = BinaryRaster.blank(size, size)
    c = (size - 1) / 2
    for y in range(size):
        for x in range(size):
            if (x - c) ** 2 + (y - c) ** 2 <= radius**2:
                raster.data[y * size + x] = 1
    return raster


def ellipse(width: int, height: int, rx: float, ry: float) -> BinaryRaster:
    """Filled axis-aligned ellipse centered in the raster."""
    raster = BinaryRaster.blank(width, height)
    cx, cy = (width - 1) / 2, (height - 1) / 2
    for y in range(height):
        for x in range(width):
            if ((x - cx) / rx) ** 2 + ((y - cy) / ry) ** 2 <= 1:
                raster.data[y * width + x] = 1
    return raster


def thick_arc_contour(radius: float, thickness: float, steps: int = 40) -> StrokeContour:
    """Outline of a half-ring, like a handwritten 'c' stroke."""
    outer = [
        StrokePoint(radius * math.cos(t), radius * math.sin(t))
        for t in (math.pi / 2 + math.pi * i / steps for i in range(steps + 1))
    ]
    inner_r = radius - thickness
    inner = [
        StrokePoint(inner_r * math.cos(t), inner_r * math.sin(t))
        for t in (3 * math.pi / 2 - math.pi * i / steps for i in range(steps + 1))
    ]
    return StrokeContour(points=outer + inner, name="arc")


class TestTermination:
    """Well-formed blobs always reach a fixed point."""

    @pytest.mark.parametrize("size", [20, 64, 120])
    def test_disk_converges(self, size: int):
        raster = disk(size, size / 2 - 3)
        result = ZhangSuenThinning().thin(raster)

        assert result.converged
        assert result.iterations < 1000
        assert raster.foreground_count() <= size * size

    def test_large_disk_converges(self):
        raster = disk(200, 95)
        start = raster.foreground_count()
        result = ZhangSuenThinning().thin(raster)

        assert result.converged
        assert result.iterations <= 1000
        assert raster.foreground_count() < start

    def test_ellipse_thins_along_major_axis(self):
        raster = ellipse(80, 40, 34, 12)
        original = raster.copy()
        result = ZhangSuenThinning().thin(raster)
        skeleton = extract_skeleton(raster)

        assert result.converged
        xs = [c.x for c in skeleton]
        ys = [c.y for c in skeleton]
        assert max(xs) - min(xs) > max(ys) - min(ys)
        assert all(original.get(c.x, c.y) == 1 for c in skeleton)


class TestStrokePipeline:
    """Contour strokes through the whole processor."""

    @pytest.fixture
    def processor(self) -> SkeletonProcessor:
        return SkeletonProcessor(SkeletonSettings())

    def test_arc_stroke(self, processor):
        contour = thick_arc_contour(radius=30, thickness=7)
        result = processor.process_contour(contour)

        assert result.converged
        assert not any(result.raster.border_values())
        # a thin line along the arc, far fewer pixels than the filled stroke
        assert 20 < result.point_count < 200

    def test_bar_stroke(self, processor):
        contour = StrokeContour(
            points=[
                StrokePoint(0, 0),
                StrokePoint(60, 0),
                StrokePoint(60, 8),
                StrokePoint(0, 8),
            ],
            name="bar",
        )
        result = processor.process_contour(contour)

        assert result.converged
        assert 30 < result.point_count < 100
        # filled area spans rows 10..18 of the margin-padded raster
        assert all(10 <= c.y <= 18 for c in result.skeleton)

    def test_deterministic_across_runs(self, processor):
        raster = ellipse(50, 30, 20, 9)
        pixels = raster_to_color_buffer(raster)

        first = processor.process_buffer(pixels, raster.width, raster.height)
        second = processor.process_buffer(pixels, raster.width, raster.height)

        assert first.raster.data == second.raster.data
        assert first.skeleton == second.skeleton
        assert first.iteration == second.iteration

    def test_result_owns_its_data(self, processor):
        raster = ellipse(30, 20, 10, 5)
        pixels = raster_to_color_buffer(raster)
        result = processor.process_buffer(pixels, raster.width, raster.height)

        skeleton_before = list(result.skeleton)
        result.raster.data[:] = bytearray(len(result.raster.data))

        assert result.skeleton == skeleton_before
