"""Side-by-side comparison of thinning strategies.

Each strategy runs on its own copy of the same thresholded input, is timed,
and may be held to a time budget. The budget is enforced cooperatively:
before every iteration the strategy asks whether it may continue, so a run
that overshoots stops with a valid, non-converged raster instead of being
killed.
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from strokeskel.config import ComparisonConfig, ThinningConfig, ThinningMethod
from strokeskel.core.processor import skeletonize_raster
from strokeskel.core.strategy import get_strategy
from strokeskel.core.thinning import ShouldContinue
from strokeskel.domain import BinaryRaster, SkeletonResult
from strokeskel.io import color_buffer_to_raster, save_raster


@dataclass
class ComparisonEntry:
    """Outcome of one strategy in a comparison.

    Attributes:
        method: Strategy that was run
        result: Its pipeline result
        relative_time: Elapsed time relative to the first strategy compared
    """

    method: ThinningMethod
    result: SkeletonResult
    relative_time: float | None = None

    @property
    def point_count(self) -> int:
        return self.result.point_count

    @property
    def elapsed_ms(self) -> float:
        return self.result.elapsed_ms

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for reports."""
        return {
            "method": self.method.value,
            "points": self.point_count,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "relative_time": self.relative_time,
            **self.result.iteration.to_dict(),
        }


def time_budget(budget_ms: float | None) -> ShouldContinue | None:
    """Build a ``should_continue`` hook that expires after ``budget_ms``.

    The clock starts when the hook is created.
    """
    if budget_ms is None:
        return None

    deadline = time.perf_counter() + budget_ms / 1000

    def should_continue(_completed: int) -> bool:
        return time.perf_counter() < deadline

    return should_continue


def compare_raster(
    raster: BinaryRaster,
    config: ComparisonConfig | None = None,
    thinning: ThinningConfig | None = None,
) -> list[ComparisonEntry]:
    """Run every configured strategy on independent copies of ``raster``.

    Args:
        raster: Input raster; never modified
        config: Strategies and time budget (defaults if None)
        thinning: Strategy parameters (defaults if None)

    Returns:
        One entry per strategy in configured order
    """
    config = config if config is not None else ComparisonConfig()
    thinning = thinning if thinning is not None else ThinningConfig()
    logger = structlog.get_logger("strokeskel")

    entries: list[ComparisonEntry] = []
    baseline_ms: float | None = None

    for method in config.methods:
        strategy = get_strategy(method, thinning)
        result = skeletonize_raster(
            raster.copy(),
            strategy,
            max_iterations=thinning.max_iterations,
            should_continue=time_budget(config.time_budget_ms),
        )
        result.source = method.value

        if baseline_ms is None:
            baseline_ms = result.elapsed_ms
        relative = result.elapsed_ms / baseline_ms if baseline_ms > 0 else None

        entries.append(ComparisonEntry(method=method, result=result, relative_time=relative))
        logger.info(
            "Strategy compared",
            method=method.value,
            points=result.point_count,
            iterations=result.iteration.iterations,
            converged=result.converged,
            cancelled=result.iteration.cancelled,
            duration_ms=round(result.elapsed_ms, 2),
        )

    return entries


def compare_strategies(
    pixels: Sequence[Any],
    width: int,
    height: int,
    config: ComparisonConfig | None = None,
    thinning: ThinningConfig | None = None,
) -> list[ComparisonEntry]:
    """Threshold a color buffer once and compare strategies on it.

    Raises:
        InvalidInputError: If the buffer is missing or mis-sized
    """
    thinning = thinning if thinning is not None else ThinningConfig()
    raster = color_buffer_to_raster(pixels, width, height, threshold=thinning.threshold)
    return compare_raster(raster, config=config, thinning=thinning)


def save_comparison_images(
    raster: BinaryRaster,
    entries: list[ComparisonEntry],
    output_dir: Path,
    prefix: str = "stroke",
) -> list[Path]:
    """Write the input mask and every strategy's result as PNG files.

    Files are named ``{prefix}_input.png`` and ``{prefix}_{method}.png``.

    Returns:
        Paths written, input first
    """
    written = [save_raster(raster, output_dir / f"{prefix}_input.png")]
    for entry in entries:
        path = output_dir / f"{prefix}_{entry.method.value}.png"
        written.append(save_raster(entry.result.raster, path))
    return written
