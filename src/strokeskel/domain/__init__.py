"""Domain models for strokeskel.

This module contains the data types shared by every layer: the binary raster
the thinning strategies operate on, the stroke contours that get rasterized
into it, and the result records that carry diagnostics back to callers.

Key classes:
- Coordinate: An integer pixel position
- BinaryRaster: A flat row-major grid of 0/1 pixels
- StrokePoint: A point on a stroke outline
- StrokeContour: A closed stroke outline
- IterationResult: Per-run thinning diagnostics
- SkeletonResult: Raster, skeleton and diagnostics of one pipeline run
"""

from strokeskel.domain.contour import StrokeContour, StrokePoint
from strokeskel.domain.raster import BinaryRaster, Coordinate
from strokeskel.domain.result import IterationResult, SkeletonResult

__all__: list[str] = [
    "BinaryRaster",
    "Coordinate",
    "IterationResult",
    "SkeletonResult",
    "StrokeContour",
    "StrokePoint",
]
