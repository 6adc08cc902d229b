"""Contour file loading.

Contours are stored as JSON documents of the form::

    {"name": "stroke-3", "points": [[12.0, 40.5], [13.5, 41.0], ...]}
"""

import json
from pathlib import Path

from strokeskel.domain import StrokeContour
from strokeskel.exceptions import ContourLoadError


def load_contour(path: Path) -> StrokeContour:
    """Load a stroke contour from a JSON file.

    A missing ``name`` defaults to the file stem.

    Raises:
        ContourLoadError: If the file is missing, malformed or has no points
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContourLoadError(str(path), "file not found") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ContourLoadError(str(path), str(e)) from e

    if not isinstance(data, dict) or "points" not in data:
        raise ContourLoadError(str(path), "expected an object with a 'points' list")

    data.setdefault("name", path.stem)
    try:
        contour = StrokeContour.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ContourLoadError(str(path), f"invalid point data: {e}") from e

    if contour.is_empty():
        raise ContourLoadError(str(path), "contour has no points")

    return contour


def save_contour(contour: StrokeContour, path: Path) -> Path:
    """Write a stroke contour as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(contour.to_dict(), indent=2), encoding="utf-8")
    return path
