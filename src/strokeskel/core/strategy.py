"""Thinning strategy interface and registry.

Every thinning implementation exposes the same ``thin`` signature so callers
pick one by configuration instead of by class.
"""

from typing import Protocol

from strokeskel.config import ThinningConfig, ThinningMethod
from strokeskel.core.center import CenterApproximation
from strokeskel.core.thinning import ShouldContinue, ZhangSuenThinning
from strokeskel.domain import BinaryRaster, IterationResult
from strokeskel.exceptions import UnknownStrategyError


class ThinningStrategy(Protocol):
    """A raster thinning algorithm operating in place."""

    name: str

    def thin(
        self,
        raster: BinaryRaster,
        max_iterations: int | None = None,
        should_continue: ShouldContinue | None = None,
    ) -> IterationResult: ...


def get_strategy(
    method: ThinningMethod | str,
    config: ThinningConfig | None = None,
) -> ThinningStrategy:
    """Build the strategy for ``method``.

    Args:
        method: Strategy enum member or its string value
        config: Thinning configuration (defaults if None)

    Returns:
        A ready-to-use strategy instance

    Raises:
        UnknownStrategyError: If ``method`` names no known strategy
    """
    if config is None:
        config = ThinningConfig()

    try:
        method = ThinningMethod(method)
    except ValueError:
        raise UnknownStrategyError(str(method)) from None

    if method is ThinningMethod.ZHANG_SUEN:
        return ZhangSuenThinning(max_iterations=config.max_iterations)
    return CenterApproximation(ratio=config.center_ratio)


def available_strategies() -> list[str]:
    """Names of all registered strategies."""
    return [m.value for m in ThinningMethod]
