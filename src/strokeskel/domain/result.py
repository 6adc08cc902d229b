"""Result records returned by thinning runs.

Diagnostics are plain data: every run hands back an ``IterationResult`` instead
of logging or bumping shared counters, and the processor wraps it together with
the converged raster and extracted skeleton in a ``SkeletonResult``.
"""

from dataclasses import dataclass, field
from typing import Any

from strokeskel.domain.raster import BinaryRaster, Coordinate


@dataclass(frozen=True, slots=True)
class IterationResult:
    """Outcome of one thinning run.

    Attributes:
        strategy: Name of the strategy that produced the result
        iterations: Full iterations executed, including the final one that
            changed nothing
        converged: True if a fixed point was reached
        cancelled: True if the caller stopped the run early
        sub_pass_changes: Pixels changed by each executed sub-pass, in order
    """

    strategy: str
    iterations: int
    converged: bool
    cancelled: bool = False
    sub_pass_changes: tuple[int, ...] = ()

    @property
    def total_changes(self) -> int:
        """Total number of pixels cleared during the run."""
        return sum(self.sub_pass_changes)

    def changes_per_iteration(self, passes_per_iteration: int = 2) -> list[int]:
        """Group sub-pass counts into per-iteration totals.

        Args:
            passes_per_iteration: Sub-passes making up one full iteration

        Returns:
            Changed pixel count of each iteration
        """
        counts = self.sub_pass_changes
        return [
            sum(counts[i:i + passes_per_iteration])
            for i in range(0, len(counts), passes_per_iteration)
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for logging and reports."""
        return {
            "strategy": self.strategy,
            "iterations": self.iterations,
            "converged": self.converged,
            "cancelled": self.cancelled,
            "sub_pass_changes": list(self.sub_pass_changes),
        }


@dataclass
class SkeletonResult:
    """Full pipeline output for one input shape.

    Attributes:
        raster: Converged (or best-effort) raster, owned by the caller
        skeleton: Surviving foreground pixels in row-major order
        iteration: Diagnostics of the thinning run
        elapsed_ms: Wall time of thresholding, thinning and extraction
    """

    raster: BinaryRaster
    skeleton: list[Coordinate]
    iteration: IterationResult
    elapsed_ms: float = 0.0
    source: str | None = field(default=None)

    @property
    def converged(self) -> bool:
        """Whether the thinning reached a fixed point."""
        return self.iteration.converged

    @property
    def point_count(self) -> int:
        """Number of skeleton pixels."""
        return len(self.skeleton)

    def points(self) -> list[tuple[int, int]]:
        """Skeleton as plain (x, y) tuples."""
        return [c.to_tuple() for c in self.skeleton]
