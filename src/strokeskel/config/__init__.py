"""Configuration management for strokeskel.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ThinningConfig: Strategy selection, iteration bound and threshold
- RasterConfig: Contour rasterization settings
- ComparisonConfig: Strategy comparison settings
- LoggingConfig: Logging settings
- SkeletonSettings: Main application settings
"""

from strokeskel.config.settings import (
    ComparisonConfig,
    LoggingConfig,
    RasterConfig,
    SkeletonSettings,
    ThinningConfig,
    ThinningMethod,
    get_default_settings,
)

__all__ = [
    "ComparisonConfig",
    "LoggingConfig",
    "RasterConfig",
    "SkeletonSettings",
    "ThinningConfig",
    "ThinningMethod",
    "get_default_settings",
]
