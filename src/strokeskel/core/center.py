"""Single-pass center approximation.

A fast, low-fidelity alternative to Zhang-Suen thinning: a foreground pixel
survives only if most of its 3x3 neighborhood (itself included) is foreground,
which strips the outer rim of a shape in one pass.

The result is approximate. It is not guaranteed to be one pixel wide nor to
stay connected, so it is meant for previews and throughput-sensitive paths,
never as a substitute for the iterative engine.
"""

from strokeskel.core.thinning import ShouldContinue, apply_deletions
from strokeskel.domain import BinaryRaster, IterationResult
from strokeskel.exceptions import InvalidInputError

DEFAULT_CENTER_RATIO = 0.6


class CenterApproximation:
    """Keep foreground pixels whose neighborhood is mostly foreground."""

    name = "center"

    def __init__(self, ratio: float = DEFAULT_CENTER_RATIO) -> None:
        if not 0.0 <= ratio <= 1.0:
            raise InvalidInputError(f"ratio must be within [0, 1], got {ratio}")
        self.ratio = ratio

    def thin(
        self,
        raster: BinaryRaster,
        max_iterations: int | None = None,  # noqa: ARG002
        should_continue: ShouldContinue | None = None,
    ) -> IterationResult:
        """Run the single pass in place.

        ``max_iterations`` is accepted for interface compatibility and ignored.

        Args:
            raster: Raster to update in place
            max_iterations: Unused
            should_continue: Optional hook; returning False before the pass
                leaves the raster untouched

        Returns:
            IterationResult with one iteration and one sub-pass entry
        """
        if should_continue is not None and not should_continue(0):
            return IterationResult(
                strategy=self.name, iterations=0, converged=False, cancelled=True
            )

        removed = apply_deletions(raster, self.mark(raster))
        return IterationResult(
            strategy=self.name,
            iterations=1,
            converged=True,
            sub_pass_changes=(removed,),
        )

    def mark(self, raster: BinaryRaster) -> list[int]:
        """Collect flat indices of interior foreground pixels to clear."""
        width, height = raster.width, raster.height
        data = raster.data
        needed = self.ratio * 9
        marked: list[int] = []

        for y in range(1, height - 1):
            row = y * width
            for x in range(1, width - 1):
                i = row + x
                if not data[i]:
                    continue

                count = (
                    sum(data[i - width - 1:i - width + 2])
                    + sum(data[i - 1:i + 2])
                    + sum(data[i + width - 1:i + width + 2])
                )
                if count < needed:
                    marked.append(i)

        return marked
