"""Boundary I/O layer for strokeskel.

This module converts between the outside world and the domain models.
Nothing below it knows about colors, files or Pillow.

Key responsibilities:
- Threshold color pixel buffers into binary rasters and render them back
- Load images into color buffers and save rasters as images (Pillow)
- Fill stroke contours into images with a background margin
- Load and save contour files
"""

from strokeskel.io.contour_file import load_contour, save_contour
from strokeskel.io.converter import (
    DEFAULT_THRESHOLD,
    color_buffer_to_raster,
    is_foreground,
    luma,
    raster_to_color_buffer,
)
from strokeskel.io.image import (
    image_to_color_buffer,
    load_color_buffer,
    raster_to_image,
    save_raster,
)
from strokeskel.io.rasterizer import DEFAULT_MARGIN, rasterize_contour

__all__ = [
    "DEFAULT_MARGIN",
    "DEFAULT_THRESHOLD",
    "color_buffer_to_raster",
    "image_to_color_buffer",
    "is_foreground",
    "load_color_buffer",
    "load_contour",
    "luma",
    "raster_to_color_buffer",
    "raster_to_image",
    "rasterize_contour",
    "save_contour",
    "save_raster",
]
