"""Image file adapters built on Pillow.

Images are turned into color buffers at the boundary so the rest of the
pipeline never touches Pillow objects.
"""

from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from strokeskel.domain import BinaryRaster
from strokeskel.exceptions import ImageLoadError, ImageSaveError


def image_to_color_buffer(image: Image.Image) -> tuple[list[Any], int, int]:
    """Read an image into a row-major RGB buffer.

    Args:
        image: Pillow image in any mode

    Returns:
        Tuple of (pixels, width, height)
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    width, height = image.size
    raw = image.tobytes()
    pixels = [tuple(raw[i:i + 3]) for i in range(0, len(raw), 3)]
    return pixels, width, height


def load_color_buffer(path: Path) -> tuple[list[Any], int, int]:
    """Load an image file into a row-major RGB buffer.

    Raises:
        ImageLoadError: If the file is missing or not a readable image
    """
    try:
        with Image.open(path) as opened:
            return image_to_color_buffer(opened)
    except FileNotFoundError as e:
        raise ImageLoadError(str(path), "file not found") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(str(path), str(e)) from e


def raster_to_image(raster: BinaryRaster) -> Image.Image:
    """Render a raster as a white-on-black grayscale image."""
    values = bytes(255 if v else 0 for v in raster.data)
    return Image.frombytes("L", (raster.width, raster.height), values)


def save_raster(raster: BinaryRaster, path: Path) -> Path:
    """Persist a raster as an image, format chosen by file extension.

    Parent directories are created as needed.

    Raises:
        ImageSaveError: If the image cannot be written
    """
    path = path.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        raster_to_image(raster).save(path)
    except (OSError, ValueError) as e:
        raise ImageSaveError(str(path), str(e)) from e
    return path
