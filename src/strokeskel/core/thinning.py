"""Zhang-Suen morphological thinning.

The engine peels foreground pixels off a binary raster in two alternating
sub-passes until a full iteration removes nothing. Each sub-pass first marks
every deletable interior pixel against the unmodified raster and only then
clears the marked pixels, so the outcome never depends on scan order.

For a foreground pixel with neighbors P2..P9 taken clockwise from north
(N, NE, E, SE, S, SW, W, NW):

- A: number of 0 -> 1 transitions around the circular sequence
- B: number of foreground neighbors
- sub-pass 0 guards: N*E*S == 0 and E*S*W == 0
- sub-pass 1 guards: N*E*W == 0 and N*S*W == 0

The pixel is deleted iff A == 1, 2 <= B <= 6 and both guards hold. Pixels on
the outermost rows and columns are never evaluated.
"""

from collections.abc import Callable

from strokeskel.domain import BinaryRaster, IterationResult
from strokeskel.exceptions import InvalidInputError

DEFAULT_MAX_ITERATIONS = 1000

ShouldContinue = Callable[[int], bool]


class ZhangSuenThinning:
    """Iterative two-sub-pass thinning operating in place on a raster.

    The engine is deterministic and keeps no state between runs, so one
    instance can be reused for any number of rasters.

    Example:
        engine = ZhangSuenThinning()
        result = engine.thin(raster)
        if not result.converged:
            ...
    """

    name = "zhang_suen"

    def __init__(self, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> None:
        """Initialize the engine.

        Args:
            max_iterations: Default safety bound on full iterations
        """
        if max_iterations < 1:
            raise InvalidInputError(
                f"max_iterations must be at least 1, got {max_iterations}"
            )
        self.max_iterations = max_iterations

    def thin(
        self,
        raster: BinaryRaster,
        max_iterations: int | None = None,
        should_continue: ShouldContinue | None = None,
    ) -> IterationResult:
        """Thin ``raster`` in place until it stops changing.

        Args:
            raster: Raster to thin; mutated in place
            max_iterations: Override of the engine's iteration bound
            should_continue: Optional hook called with the number of completed
                iterations before each new one; returning False stops the run
                and leaves the raster as of the last full iteration

        Returns:
            IterationResult describing the run
        """
        bound = self.max_iterations if max_iterations is None else max_iterations
        if bound < 1:
            raise InvalidInputError(f"max_iterations must be at least 1, got {bound}")

        changes: list[int] = []
        iterations = 0
        converged = False
        cancelled = False

        while iterations < bound:
            if should_continue is not None and not should_continue(iterations):
                cancelled = True
                break

            changed = 0
            for sub_pass in (0, 1):
                removed = self.run_sub_pass(raster, sub_pass)
                changes.append(removed)
                changed += removed
            iterations += 1

            if changed == 0:
                converged = True
                break

        return IterationResult(
            strategy=self.name,
            iterations=iterations,
            converged=converged,
            cancelled=cancelled,
            sub_pass_changes=tuple(changes),
        )

    def run_sub_pass(self, raster: BinaryRaster, sub_pass: int) -> int:
        """Mark and then clear deletable pixels for one sub-pass.

        Args:
            raster: Raster to update in place
            sub_pass: 0 or 1

        Returns:
            Number of pixels cleared
        """
        marked = self.mark(raster, sub_pass)
        return apply_deletions(raster, marked)

    def mark(self, raster: BinaryRaster, sub_pass: int) -> list[int]:
        """Collect flat indices of pixels deletable in this sub-pass.

        Reads the raster only. Marks never overlap with already-background
        pixels, so the number of marks equals the number of changes once they
        are applied.

        Args:
            raster: Raster to inspect
            sub_pass: 0 or 1

        Returns:
            Flat indices in row-major order
        """
        if sub_pass not in (0, 1):
            raise ValueError(f"sub_pass must be 0 or 1, got {sub_pass}")

        width, height = raster.width, raster.height
        if width < 3 or height < 3:
            return []

        data = raster.data
        marked: list[int] = []

        for y in range(1, height - 1):
            row = y * width
            for x in range(1, width - 1):
                i = row + x
                if not data[i]:
                    continue

                above = i - width
                below = i + width
                n = data[above]
                ne = data[above + 1]
                e = data[i + 1]
                se = data[below + 1]
                s = data[below]
                sw = data[below - 1]
                w = data[i - 1]
                nw = data[above - 1]

                b = n + ne + e + se + s + sw + w + nw
                if b < 2 or b > 6:
                    continue

                a = (
                    (n == 0 and ne == 1)
                    + (ne == 0 and e == 1)
                    + (e == 0 and se == 1)
                    + (se == 0 and s == 1)
                    + (s == 0 and sw == 1)
                    + (sw == 0 and w == 1)
                    + (w == 0 and nw == 1)
                    + (nw == 0 and n == 1)
                )
                if a != 1:
                    continue

                if sub_pass == 0:
                    m1 = n * e * s
                    m2 = e * s * w
                else:
                    m1 = n * e * w
                    m2 = n * s * w

                if m1 == 0 and m2 == 0:
                    marked.append(i)

        return marked


def apply_deletions(raster: BinaryRaster, marked: list[int]) -> int:
    """Clear every marked pixel.

    Args:
        raster: Raster to update in place
        marked: Flat indices to clear

    Returns:
        Number of pixels that changed
    """
    data = raster.data
    changed = 0
    for i in marked:
        if data[i]:
            data[i] = 0
            changed += 1
    return changed
