"""Unit tests for the center approximation and strategy selection."""

import pytest

from strokeskel.config import ThinningConfig, ThinningMethod
from strokeskel.core.center import CenterApproximation
from strokeskel.core.strategy import available_strategies, get_strategy
from strokeskel.core.thinning import ZhangSuenThinning
from strokeskel.domain import BinaryRaster
from strokeskel.exceptions import InvalidInputError, UnknownStrategyError


@pytest.fixture
def square() -> BinaryRaster:
    """9x9 raster with a 5x5 square at (2..6, 2..6)."""
    return BinaryRaster.from_rows(
        [
            ".........",
            ".........",
            "..#####..",
            "..#####..",
            "..#####..",
            "..#####..",
            "..#####..",
            ".........",
            ".........",
        ]
    )


class TestCenterApproximation:
    """Tests for CenterApproximation."""

    def test_corners_removed(self, square):
        """Corners see only 4 of 9 foreground cells and are dropped."""
        result = CenterApproximation().thin(square)

        assert result.strategy == "center"
        assert result.iterations == 1
        assert result.converged
        assert result.sub_pass_changes == (4,)
        assert square.foreground_count() == 21
        for x, y in [(2, 2), (6, 2), (2, 6), (6, 6)]:
            assert square.get(x, y) == 0

    def test_edges_kept(self, square):
        """Edge pixels see 6 of 9 cells, which meets the 60% ratio."""
        CenterApproximation().thin(square)
        assert square.get(4, 2) == 1
        assert square.get(2, 4) == 1
        assert square.get(4, 4) == 1

    def test_background_never_set(self):
        """Background pixels stay background even when surrounded."""
        raster = BinaryRaster.from_rows(
            [
                ".....",
                ".###.",
                ".#.#.",
                ".###.",
                ".....",
            ]
        )
        CenterApproximation().thin(raster)
        assert raster.get(2, 2) == 0

    def test_decisions_use_unmodified_input(self):
        """Clearing one pixel does not influence its neighbors in the same pass."""
        raster = BinaryRaster.from_rows(
            [
                "......",
                ".####.",
                ".####.",
                "......",
            ]
        )
        CenterApproximation().thin(raster)
        # Every pixel of a 4x2 block sees at most 6 cells, inner ones exactly 6
        assert raster.to_rows()[1] == [0, 0, 1, 1, 0, 0]
        assert raster.to_rows()[2] == [0, 0, 1, 1, 0, 0]

    def test_border_unchanged(self):
        """Border pixels pass through."""
        raster = BinaryRaster.from_rows(
            [
                "#####",
                "#...#",
                "#...#",
                "#####",
            ]
        )
        before = raster.border_values()
        CenterApproximation().thin(raster)
        assert raster.border_values() == before

    def test_result_not_one_pixel_wide(self):
        """The approximation leaves thick strokes thick."""
        raster = BinaryRaster.from_rows(
            [
                ".........",
                "...###...",
                "...###...",
                "...###...",
                "...###...",
                "...###...",
                ".........",
            ]
        )
        CenterApproximation().thin(raster)
        assert raster.to_rows()[3] == [0, 0, 0, 1, 1, 1, 0, 0, 0]

    def test_cancelled_before_pass(self, square):
        """Stopping before the pass leaves the raster untouched."""
        before = square.copy()
        result = CenterApproximation().thin(square, should_continue=lambda _n: False)
        assert result.cancelled
        assert result.iterations == 0
        assert square == before

    def test_invalid_ratio(self):
        """Ratio must lie within [0, 1]."""
        with pytest.raises(InvalidInputError):
            CenterApproximation(ratio=1.5)


class TestStrategySelection:
    """Tests for get_strategy."""

    def test_default_is_zhang_suen(self):
        strategy = get_strategy(ThinningMethod.ZHANG_SUEN)
        assert isinstance(strategy, ZhangSuenThinning)
        assert strategy.max_iterations == 1000

    def test_config_applied(self):
        config = ThinningConfig(max_iterations=42, center_ratio=0.5)
        zhang = get_strategy("zhang_suen", config)
        center = get_strategy("center", config)
        assert zhang.max_iterations == 42
        assert isinstance(center, CenterApproximation)
        assert center.ratio == 0.5

    def test_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError, match="skeletor"):
            get_strategy("skeletor")

    def test_available_strategies(self):
        assert available_strategies() == ["zhang_suen", "center"]
