"""Exception hierarchy for strokeskel."""

from typing import Any


class StrokeSkelError(Exception):
    """Base exception for all strokeskel errors."""

    pass


class InvalidInputError(StrokeSkelError):
    """Input rejected before any processing took place."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class NonConvergenceError(StrokeSkelError):
    """Thinning exhausted its iteration bound without reaching a fixed point.

    Only raised when the caller asked for strict convergence. The best-effort
    result is kept on the exception.
    """

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(
            f"Thinning did not converge after {result.iterations} iterations"
        )


class UnknownStrategyError(StrokeSkelError):
    """Requested thinning strategy does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown thinning strategy '{name}'")


class ImageError(StrokeSkelError):
    """Errors related to image loading or saving."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageSaveError(ImageError):
    """Error saving an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")


class ContourError(StrokeSkelError):
    """Errors related to stroke contour data."""

    pass


class ContourLoadError(ContourError):
    """Error loading a contour file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load contour '{path}': {reason}")
