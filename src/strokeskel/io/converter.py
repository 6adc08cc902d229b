"""Conversion between color pixel buffers and binary rasters.

This is the only place where colors are interpreted. A buffer is a flat,
row-major sequence of pixels where each pixel is either:
- a packed ``0xAARRGGBB`` integer, or
- a sequence of at least three channels ``(r, g, b[, a])``

Classification uses luma = 0.299 R + 0.587 G + 0.114 B; a pixel is foreground
iff its luma is strictly greater than the threshold (128 by default). The sum
is evaluated in fixed point so the threshold boundary is exact.
"""

from collections.abc import Sequence
from typing import Any

from strokeskel.domain import BinaryRaster
from strokeskel.exceptions import InvalidInputError

DEFAULT_THRESHOLD = 128

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)

# Luma weights scaled by 1000
_R_WEIGHT = 299
_G_WEIGHT = 587
_B_WEIGHT = 114


def pixel_channels(pixel: Any) -> tuple[int, int, int]:
    """Extract (r, g, b) from a packed int or a channel sequence.

    Raises:
        InvalidInputError: If the pixel has neither form
    """
    if isinstance(pixel, int):
        return ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)

    try:
        return (int(pixel[0]), int(pixel[1]), int(pixel[2]))
    except (TypeError, IndexError, ValueError) as e:
        raise InvalidInputError(f"cannot read RGB channels from pixel {pixel!r}") from e


def luma(pixel: Any) -> float:
    """Perceived brightness of a pixel in [0, 255]."""
    r, g, b = pixel_channels(pixel)
    return (_R_WEIGHT * r + _G_WEIGHT * g + _B_WEIGHT * b) / 1000


def is_foreground(pixel: Any, threshold: int = DEFAULT_THRESHOLD) -> bool:
    """Check whether a pixel's luma is strictly above ``threshold``."""
    r, g, b = pixel_channels(pixel)
    return _R_WEIGHT * r + _G_WEIGHT * g + _B_WEIGHT * b > threshold * 1000


def color_buffer_to_raster(
    pixels: Sequence[Any] | None,
    width: int,
    height: int,
    threshold: int = DEFAULT_THRESHOLD,
) -> BinaryRaster:
    """Threshold a color buffer into a binary raster.

    Args:
        pixels: Row-major pixels, ``width * height`` of them
        width: Buffer width in pixels
        height: Buffer height in pixels
        threshold: Luma threshold; strictly brighter pixels are foreground

    Returns:
        New BinaryRaster of identical dimensions

    Raises:
        InvalidInputError: If the buffer is missing, the size is not positive
            or the buffer length does not match the size
    """
    if pixels is None:
        raise InvalidInputError("pixel buffer is missing")
    if width <= 0 or height <= 0:
        raise InvalidInputError(f"size must be positive, got {width}x{height}")
    if len(pixels) != width * height:
        raise InvalidInputError(
            f"buffer has {len(pixels)} pixels, expected {width}x{height}={width * height}"
        )

    data = bytearray(1 if is_foreground(p, threshold) else 0 for p in pixels)
    return BinaryRaster(width=width, height=height, data=data)


def raster_to_color_buffer(raster: BinaryRaster) -> list[tuple[int, int, int, int]]:
    """Render a raster as opaque white-on-black RGBA pixels.

    Returns:
        New row-major list of ``(r, g, b, a)`` tuples
    """
    return [WHITE if value else BLACK for value in raster.data]
