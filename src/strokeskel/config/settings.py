"""Configuration settings for strokeskel."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ThinningMethod(str, Enum):
    """Available thinning strategies."""

    ZHANG_SUEN = "zhang_suen"
    CENTER = "center"


class ThinningConfig(BaseModel):
    """Configuration for the thinning strategies."""

    method: ThinningMethod = Field(
        default=ThinningMethod.ZHANG_SUEN,
        description="Thinning strategy to run",
    )
    max_iterations: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Safety bound on full thinning iterations",
    )
    threshold: int = Field(
        default=128,
        ge=0,
        le=254,
        description="Luma threshold; pixels strictly brighter are foreground",
    )
    center_ratio: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Minimum foreground share of the 3x3 neighborhood kept by the center approximation",
    )
    fail_on_nonconvergence: bool = Field(
        default=False,
        description="Raise instead of returning a best-effort result when the bound is hit",
    )


class RasterConfig(BaseModel):
    """Configuration for contour rasterization."""

    margin: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Background margin around the contour bounding box, in pixels",
    )


class ComparisonConfig(BaseModel):
    """Configuration for strategy comparison runs."""

    methods: list[ThinningMethod] = Field(
        default_factory=lambda: [ThinningMethod.ZHANG_SUEN, ThinningMethod.CENTER],
        description="Strategies to compare, first one is the speed baseline",
    )
    time_budget_ms: float | None = Field(
        default=None,
        gt=0,
        description="Per-strategy time budget (None = unlimited)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SkeletonSettings(BaseModel):
    """Main application settings."""

    thinning: ThinningConfig = Field(default_factory=ThinningConfig)
    raster: RasterConfig = Field(default_factory=RasterConfig)
    comparison: ComparisonConfig = Field(default_factory=ComparisonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SkeletonSettings:
    """Get default application settings."""
    return SkeletonSettings()
