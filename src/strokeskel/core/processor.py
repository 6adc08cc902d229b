"""Skeletonization pipeline orchestration.

This module ties the layers together for one input shape:
color buffer -> binary raster -> thinning strategy -> skeleton points.

Key components:
- skeletonize_raster: Thin an existing raster and extract its skeleton
- SkeletonProcessor: Pipeline entry points for buffers, images and contours
"""

import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from strokeskel.config import SkeletonSettings
from strokeskel.core.extractor import extract_skeleton
from strokeskel.core.strategy import ThinningStrategy, get_strategy
from strokeskel.core.thinning import ShouldContinue
from strokeskel.domain import BinaryRaster, SkeletonResult, StrokeContour
from strokeskel.exceptions import InvalidInputError, NonConvergenceError
from strokeskel.io import (
    color_buffer_to_raster,
    image_to_color_buffer,
    load_color_buffer,
    rasterize_contour,
)
from strokeskel.utils import ThinningLogger


def skeletonize_raster(
    raster: BinaryRaster,
    strategy: ThinningStrategy,
    max_iterations: int | None = None,
    should_continue: ShouldContinue | None = None,
) -> SkeletonResult:
    """Thin a raster in place and extract its skeleton.

    Args:
        raster: Raster to thin; owned by the run until it returns
        strategy: Thinning strategy to apply
        max_iterations: Override of the strategy's iteration bound
        should_continue: Optional early-stop hook passed to the strategy

    Returns:
        SkeletonResult holding the raster, skeleton and diagnostics
    """
    start_time = time.perf_counter()
    iteration = strategy.thin(
        raster,
        max_iterations=max_iterations,
        should_continue=should_continue,
    )
    skeleton = extract_skeleton(raster)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    return SkeletonResult(
        raster=raster,
        skeleton=skeleton,
        iteration=iteration,
        elapsed_ms=elapsed_ms,
    )


class SkeletonProcessor:
    """Runs the skeletonization pipeline with configured settings.

    Example:
        processor = SkeletonProcessor(SkeletonSettings())
        result = processor.process_image(Path("stroke.png"))
        print(result.point_count, result.converged)
    """

    def __init__(
        self,
        config: SkeletonSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.config = config if config is not None else SkeletonSettings()
        self.logger = logger if logger is not None else structlog.get_logger("strokeskel")
        self.thinning_logger = ThinningLogger(self.logger)
        self.strategy = get_strategy(self.config.thinning.method, self.config.thinning)

    def process_buffer(
        self,
        pixels: Sequence[Any] | None,
        width: int,
        height: int,
        source: str = "buffer",
        should_continue: ShouldContinue | None = None,
    ) -> SkeletonResult:
        """Skeletonize a color pixel buffer.

        Args:
            pixels: Row-major pixels (packed ARGB ints or channel tuples)
            width: Buffer width
            height: Buffer height
            source: Label used in log records
            should_continue: Optional early-stop hook

        Returns:
            SkeletonResult for the buffer

        Raises:
            InvalidInputError: If the buffer is missing or mis-sized
            NonConvergenceError: If the bound was hit and strict convergence
                is configured
        """
        start_time = time.perf_counter()

        try:
            raster = color_buffer_to_raster(
                pixels, width, height, threshold=self.config.thinning.threshold
            )
        except InvalidInputError as e:
            self.thinning_logger.log_invalid_input(source, e)
            raise

        return self._run(raster, source, start_time, should_continue)

    def process_raster(
        self,
        raster: BinaryRaster,
        source: str = "raster",
        should_continue: ShouldContinue | None = None,
    ) -> SkeletonResult:
        """Skeletonize a copy of an existing raster.

        The caller's raster is left untouched.
        """
        return self._run(raster.copy(), source, time.perf_counter(), should_continue)

    def process_image(self, path: Path) -> SkeletonResult:
        """Skeletonize an image file.

        Raises:
            ImageLoadError: If the image cannot be read
        """
        pixels, width, height = load_color_buffer(path)
        return self.process_buffer(pixels, width, height, source=str(path))

    def process_contour(self, contour: StrokeContour) -> SkeletonResult:
        """Rasterize a stroke contour and skeletonize it.

        Skeleton coordinates are in raster space; the raster's top-left pixel
        sits at the contour bounding box minus the configured margin.
        """
        try:
            image = rasterize_contour(contour, margin=self.config.raster.margin)
        except InvalidInputError as e:
            self.thinning_logger.log_invalid_input(contour.name, e)
            raise

        pixels, width, height = image_to_color_buffer(image)
        return self.process_buffer(pixels, width, height, source=contour.name)

    def _run(
        self,
        raster: BinaryRaster,
        source: str,
        start_time: float,
        should_continue: ShouldContinue | None,
    ) -> SkeletonResult:
        """Thin, extract, log and enforce the convergence policy."""
        self.thinning_logger.log_run_start(
            source, raster.width, raster.height, self.strategy.name
        )

        result = skeletonize_raster(
            raster,
            self.strategy,
            max_iterations=self.config.thinning.max_iterations,
            should_continue=should_continue,
        )
        result.elapsed_ms = (time.perf_counter() - start_time) * 1000
        result.source = source

        self.thinning_logger.log_run_complete(
            source, result.iteration, result.point_count, result.elapsed_ms
        )

        if (
            self.config.thinning.fail_on_nonconvergence
            and not result.converged
            and not result.iteration.cancelled
        ):
            raise NonConvergenceError(result.iteration)

        return result
