"""Tests for pipeline orchestration and skeleton extraction."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from strokeskel.config import SkeletonSettings, ThinningConfig, ThinningMethod
from strokeskel.core.extractor import extract_skeleton, render_skeleton
from strokeskel.core.processor import SkeletonProcessor, skeletonize_raster
from strokeskel.core.thinning import ZhangSuenThinning
from strokeskel.domain import BinaryRaster, Coordinate, StrokeContour, StrokePoint
from strokeskel.exceptions import ImageLoadError, InvalidInputError, NonConvergenceError
from strokeskel.io import raster_to_color_buffer, save_raster

BAR_ROWS = [
    ".........",
    ".........",
    "...###...",
    "...###...",
    "...###...",
    "...###...",
    "...###...",
    "...###...",
    ".........",
    ".........",
]


@pytest.fixture
def bar() -> BinaryRaster:
    return BinaryRaster.from_rows(BAR_ROWS)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def processor(logger: MagicMock) -> SkeletonProcessor:
    return SkeletonProcessor(SkeletonSettings(), logger=logger)


class TestExtractor:
    """Tests for extract_skeleton and render_skeleton."""

    def test_row_major_order(self):
        raster = BinaryRaster.from_rows(
            [
                "..#",
                "#.#",
                ".#.",
            ]
        )
        assert extract_skeleton(raster) == [
            Coordinate(2, 0),
            Coordinate(0, 1),
            Coordinate(2, 1),
            Coordinate(1, 2),
        ]

    def test_empty(self):
        assert extract_skeleton(BinaryRaster.blank(3, 3)) == []

    def test_repeatable(self, bar):
        assert extract_skeleton(bar) == extract_skeleton(bar)

    def test_render_round_trip(self, bar):
        points = extract_skeleton(bar)
        assert render_skeleton(points, bar.width, bar.height) == bar

    def test_render_skips_out_of_bounds(self):
        raster = render_skeleton([(1, 1), (5, 0), (-1, 2)], 3, 3)
        assert raster.to_rows() == [[0, 0, 0], [0, 1, 0], [0, 0, 0]]


class TestSkeletonizeRaster:
    """Tests for skeletonize_raster."""

    def test_result_fields(self, bar):
        result = skeletonize_raster(bar, ZhangSuenThinning())
        assert result.raster is bar
        assert result.converged
        assert result.skeleton == extract_skeleton(bar)
        assert result.elapsed_ms >= 0


class TestSkeletonProcessor:
    """Tests for SkeletonProcessor."""

    def test_process_buffer(self, processor, bar):
        pixels = raster_to_color_buffer(bar)
        result = processor.process_buffer(pixels, bar.width, bar.height, source="bar")

        assert result.converged
        assert result.source == "bar"
        assert result.point_count > 0
        assert all(c.x == 4 for c in result.skeleton)

    def test_process_raster_leaves_input(self, processor, bar):
        before = bar.copy()
        result = processor.process_raster(bar)
        assert bar == before
        assert result.raster is not bar
        assert result.raster.foreground_count() < bar.foreground_count()

    def test_invalid_buffer_logged_and_raised(self, processor, logger):
        with pytest.raises(InvalidInputError):
            processor.process_buffer([(0, 0, 0)] * 3, 2, 2)
        logger.error.assert_called_once()
        assert processor.thinning_logger.stats.run_count == 0

    def test_missing_buffer(self, processor):
        with pytest.raises(InvalidInputError):
            processor.process_buffer(None, 2, 2)

    def test_stats_recorded(self, processor, bar, logger):
        processor.process_raster(bar)
        processor.process_raster(bar)

        stats = processor.thinning_logger.stats
        assert stats.run_count == 2
        assert stats.nonconverged_count == 0
        assert stats.avg_run_time_ms is not None
        assert logger.info.call_count == 2

    def test_nonconvergence_reported(self, bar, logger):
        settings = SkeletonSettings(thinning=ThinningConfig(max_iterations=1))
        processor = SkeletonProcessor(settings, logger=logger)

        result = processor.process_raster(bar)

        assert not result.converged
        assert processor.thinning_logger.stats.nonconverged_count == 1
        logger.warning.assert_called_once()

    def test_nonconvergence_strict(self, bar, logger):
        settings = SkeletonSettings(
            thinning=ThinningConfig(max_iterations=1, fail_on_nonconvergence=True)
        )
        processor = SkeletonProcessor(settings, logger=logger)

        with pytest.raises(NonConvergenceError) as exc_info:
            processor.process_raster(bar)
        assert exc_info.value.result.iterations == 1
        assert not exc_info.value.result.converged

    def test_cancel_is_not_nonconvergence(self, bar, logger):
        settings = SkeletonSettings(thinning=ThinningConfig(fail_on_nonconvergence=True))
        processor = SkeletonProcessor(settings, logger=logger)

        result = processor.process_raster(bar, should_continue=lambda _n: False)

        assert result.iteration.cancelled
        assert processor.thinning_logger.stats.cancelled_count == 1

    def test_center_strategy(self, bar, logger):
        settings = SkeletonSettings(thinning=ThinningConfig(method=ThinningMethod.CENTER))
        processor = SkeletonProcessor(settings, logger=logger)

        result = processor.process_raster(bar)

        assert result.iteration.strategy == "center"
        assert result.iteration.iterations == 1

    def test_threshold_setting(self, logger):
        settings = SkeletonSettings(thinning=ThinningConfig(threshold=200))
        processor = SkeletonProcessor(settings, logger=logger)
        pixels = [(0, 0, 0)] * 4 + [(150, 150, 150)] + [(0, 0, 0)] * 4

        result = processor.process_buffer(pixels, 3, 3)

        assert result.skeleton == []

    def test_process_image(self, processor, bar, tmp_path: Path):
        path = save_raster(bar, tmp_path / "bar.png")
        result = processor.process_image(path)
        assert result.converged
        assert result.source == str(path)
        assert all(c.x == 4 for c in result.skeleton)

    def test_process_image_missing(self, processor, tmp_path: Path):
        with pytest.raises(ImageLoadError):
            processor.process_image(tmp_path / "missing.png")

    def test_process_contour(self, processor):
        contour = StrokeContour(
            points=[
                StrokePoint(0, 0),
                StrokePoint(30, 0),
                StrokePoint(30, 4),
                StrokePoint(0, 4),
            ],
            name="dash",
        )
        result = processor.process_contour(contour)

        assert result.converged
        assert result.source == "dash"
        assert result.point_count > 0
        assert not any(result.raster.border_values())
        assert result.point_count < 31 * 5 // 2
        for c in result.skeleton:
            assert 10 <= c.x <= 40
            assert 10 <= c.y <= 14

    def test_process_empty_contour(self, processor, logger):
        with pytest.raises(InvalidInputError):
            processor.process_contour(StrokeContour(points=[], name="empty"))
        logger.error.assert_called_once()
