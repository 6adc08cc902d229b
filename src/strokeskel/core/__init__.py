"""Core algorithms for strokeskel.

This module contains:

- Zhang-Suen thinning (the iterative, topology-preserving engine)
- The single-pass center approximation
- The strategy interface selecting between them
- Skeleton extraction and re-rendering
- Pipeline orchestration and strategy comparison

All strategies are deterministic and mutate only the raster handed to them.

Key functions:
- extract_skeleton: Row-major list of surviving foreground pixels
- render_skeleton: Draw skeleton points onto a blank raster
- get_strategy: Build a strategy from configuration
- skeletonize_raster: Thin a raster and extract its skeleton
- compare_strategies: Time strategies side by side on one input

Key classes:
- ZhangSuenThinning: The iterative thinning engine
- CenterApproximation: Fast approximate alternative
- SkeletonProcessor: Pipeline entry points for buffers, images and contours
"""

from strokeskel.core.center import CenterApproximation
from strokeskel.core.comparison import (
    ComparisonEntry,
    compare_raster,
    compare_strategies,
    save_comparison_images,
    time_budget,
)
from strokeskel.core.extractor import extract_skeleton, render_skeleton
from strokeskel.core.processor import SkeletonProcessor, skeletonize_raster
from strokeskel.core.strategy import ThinningStrategy, available_strategies, get_strategy
from strokeskel.core.thinning import (
    DEFAULT_MAX_ITERATIONS,
    ZhangSuenThinning,
    apply_deletions,
)

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "CenterApproximation",
    "ComparisonEntry",
    "SkeletonProcessor",
    "ThinningStrategy",
    "ZhangSuenThinning",
    "apply_deletions",
    "available_strategies",
    "compare_raster",
    "compare_strategies",
    "extract_skeleton",
    "get_strategy",
    "render_skeleton",
    "save_comparison_images",
    "skeletonize_raster",
    "time_budget",
]
