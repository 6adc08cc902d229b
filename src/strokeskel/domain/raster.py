"""Binary raster and coordinate types.

This module defines the pixel-level types the thinning strategies work on:
- Coordinate: An integer (x, y) pixel position
- BinaryRaster: A width x height grid of 0/1 values stored row-major
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from strokeskel.exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """An integer pixel position.

    Attributes:
        x: Column index, 0 <= x < width
        y: Row index, 0 <= y < height
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class BinaryRaster:
    """A binary pixel grid.

    Pixels are stored in a flat, row-major ``bytearray`` of length
    ``width * height`` whose values are always 0 (background) or 1
    (foreground). The thinning strategies mutate ``data`` in place.

    Attributes:
        width: Number of columns
        height: Number of rows
        data: Row-major pixel values
    """

    width: int
    height: int
    data: bytearray = field(repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidInputError(
                f"raster size must be positive, got {self.width}x{self.height}"
            )
        if not isinstance(self.data, bytearray):
            try:
                self.data = bytearray(self.data)
            except (TypeError, ValueError) as e:
                raise InvalidInputError("raster values must be 0 or 1") from e
        if len(self.data) != self.width * self.height:
            raise InvalidInputError(
                f"raster data has {len(self.data)} values, "
                f"expected {self.width * self.height}"
            )
        if self.data.translate(None, b"\x00\x01"):
            raise InvalidInputError("raster values must be 0 or 1")

    @classmethod
    def blank(cls, width: int, height: int) -> "BinaryRaster":
        """Create an all-background raster."""
        if width <= 0 or height <= 0:
            raise InvalidInputError(
                f"raster size must be positive, got {width}x{height}"
            )
        return cls(width=width, height=height, data=bytearray(width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int] | str]) -> "BinaryRaster":
        """Build a raster from rows of 0/1 values.

        Rows may also be strings where ``#`` or ``1`` marks foreground and
        any other character background, which keeps test fixtures readable.

        Args:
            rows: Rows from top to bottom, all the same length

        Returns:
            BinaryRaster instance

        Raises:
            InvalidInputError: If rows are empty, ragged or hold non-binary values
        """
        if not rows or not rows[0]:
            raise InvalidInputError("raster needs at least one row and column")

        width = len(rows[0])
        data = bytearray()
        for row in rows:
            if len(row) != width:
                raise InvalidInputError("all raster rows must have the same length")
            if isinstance(row, str):
                data.extend(1 if ch in "#1" else 0 for ch in row)
            else:
                try:
                    data.extend(row)
                except (TypeError, ValueError) as e:
                    raise InvalidInputError("raster values must be 0 or 1") from e

        return cls(width=width, height=len(rows), data=data)

    def to_rows(self) -> list[list[int]]:
        """Return the pixel values as a list of rows."""
        w = self.width
        return [list(self.data[y * w:(y + 1) * w]) for y in range(self.height)]

    def index(self, x: int, y: int) -> int:
        """Flat index of pixel (x, y)."""
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """Value of pixel (x, y).

        Raises:
            IndexError: If the position lies outside the raster
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} raster")
        return self.data[y * self.width + x]

    def is_border(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the outermost row or column."""
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def border_values(self) -> list[int]:
        """Values of all border pixels, clockwise from the top-left corner."""
        w, h = self.width, self.height
        positions: list[tuple[int, int]] = [(x, 0) for x in range(w)]
        positions += [(w - 1, y) for y in range(1, h)]
        if h > 1:
            positions += [(x, h - 1) for x in range(w - 2, -1, -1)]
        if w > 1:
            positions += [(0, y) for y in range(h - 2, 0, -1)]
        return [self.data[y * w + x] for x, y in positions]

    def foreground_count(self) -> int:
        """Number of foreground pixels."""
        return self.data.count(1)

    def foreground(self) -> Iterable[Coordinate]:
        """Iterate foreground pixels in row-major order."""
        w = self.width
        for idx, value in enumerate(self.data):
            if value:
                yield Coordinate(idx % w, idx // w)

    def copy(self) -> "BinaryRaster":
        """Independent copy sharing no storage with this raster."""
        return BinaryRaster(width=self.width, height=self.height, data=bytearray(self.data))
