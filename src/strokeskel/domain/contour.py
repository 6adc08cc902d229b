"""Stroke contour types.

A handwritten stroke reaches strokeskel as the ordered outline of its filled
shape:
- StrokePoint: A 2D point on the outline
- StrokeContour: A closed outline, implicitly joined from last point to first
"""

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class StrokePoint:
    """A point in 2D drawing space.

    Attributes:
        x: X coordinate (grows to the right)
        y: Y coordinate (grows downwards, as on screen)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class StrokeContour:
    """A closed outline of a filled stroke.

    Attributes:
        points: Outline points in drawing order
        name: Optional stroke identifier used in logs and file names
    """

    points: list[StrokePoint]
    name: str = "stroke"
    _cached_bbox: tuple[float, float, float, float] | None = field(
        default=None, repr=False, init=False
    )

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        """Check whether the contour has no points."""
        return not self.points

    def is_finite(self) -> bool:
        """Check that every coordinate is a finite number."""
        return all(math.isfinite(p.x) and math.isfinite(p.y) for p in self.points)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Result is cached for efficiency.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.points:
            self._cached_bbox = (0.0, 0.0, 0.0, 0.0)
            return self._cached_bbox

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the stroke name and [x, y] point pairs
        """
        return {
            "name": self.name,
            "points": [[p.x, p.y] for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeContour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with ``points`` as [x, y] pairs and optional ``name``

        Returns:
            StrokeContour instance

        Raises:
            ValueError: If a point is malformed or not finite
        """
        points = [StrokePoint(float(x), float(y)) for x, y in data["points"]]
        contour = cls(points=points, name=data.get("name", "stroke"))
        if not contour.is_finite():
            raise ValueError("non-finite point")
        return contour
