"""Fill stroke contours into pixel images.

The image is sized to the contour's bounding box plus a background margin on
every side, so the filled shape never touches the image border. Anti-aliasing
is off: every pixel is either pure white (inside) or pure black.
"""

import math

from PIL import Image, ImageDraw

from strokeskel.domain import StrokeContour
from strokeskel.exceptions import InvalidInputError

DEFAULT_MARGIN = 10


def raster_origin(contour: StrokeContour, margin: int = DEFAULT_MARGIN) -> tuple[int, int]:
    """Drawing-space position of the image's top-left pixel."""
    min_x, min_y, _, _ = contour.bounding_box()
    return math.floor(min_x) - margin, math.floor(min_y) - margin


def rasterize_contour(contour: StrokeContour, margin: int = DEFAULT_MARGIN) -> Image.Image:
    """Fill a closed contour white on a black background.

    Args:
        contour: Stroke outline; closed implicitly from last point to first
        margin: Background pixels added around the bounding box

    Returns:
        RGB image spanning ceil(max) - floor(min) + 2 * margin + 1 pixels
        on each axis

    Raises:
        InvalidInputError: If the contour is empty, has non-finite points or
            the margin is negative
    """
    if contour.is_empty():
        raise InvalidInputError(f"contour '{contour.name}' has no points")
    if not contour.is_finite():
        raise InvalidInputError(f"contour '{contour.name}' has non-finite points")
    if margin < 0:
        raise InvalidInputError(f"margin must not be negative, got {margin}")

    min_x, min_y, max_x, max_y = contour.bounding_box()
    offset_x, offset_y = raster_origin(contour, margin)
    width = math.ceil(max_x) - math.floor(min_x) + 2 * margin + 1
    height = math.ceil(max_y) - math.floor(min_y) + 2 * margin + 1

    image = Image.new("RGB", (width, height), (0, 0, 0))
    draw = ImageDraw.Draw(image)
    polygon = [(p.x - offset_x, p.y - offset_y) for p in contour.points]

    if len(polygon) == 1:
        draw.point(polygon, fill=(255, 255, 255))
    elif len(polygon) == 2:
        draw.line(polygon, fill=(255, 255, 255))
    else:
        draw.polygon(polygon, fill=(255, 255, 255))

    return image
