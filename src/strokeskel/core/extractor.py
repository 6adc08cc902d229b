"""Skeleton point extraction and re-rendering."""

from collections.abc import Iterable

from strokeskel.domain import BinaryRaster, Coordinate


def extract_skeleton(raster: BinaryRaster) -> list[Coordinate]:
    """Collect foreground pixels in row-major order (y, then x).

    Pure function of the raster; the returned list shares nothing with it.

    Args:
        raster: Converged raster

    Returns:
        Skeleton coordinates
    """
    return list(raster.foreground())


def render_skeleton(
    points: Iterable[Coordinate | tuple[int, int]],
    width: int,
    height: int,
) -> BinaryRaster:
    """Draw skeleton points onto a blank raster.

    Points outside the raster are skipped.

    Args:
        points: Coordinates or (x, y) tuples
        width: Raster width
        height: Raster height

    Returns:
        New raster with the points set to foreground
    """
    raster = BinaryRaster.blank(width, height)
    for point in points:
        x, y = point.to_tuple() if isinstance(point, Coordinate) else point
        if 0 <= x < width and 0 <= y < height:
            raster.data[y * width + x] = 1
    return raster
