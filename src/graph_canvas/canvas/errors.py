"""
Exceptions raised by the canvas package.
"""


class CanvasError(Exception):
    """Base class for canvas errors."""
    pass


class SurfaceUnavailableError(CanvasError):
    """Raised when the drawing surface or its paint context cannot be obtained."""
    pass


class InvalidTransformError(CanvasError, ValueError):
    """Raised when a view transform is constructed with unusable parameters."""
    pass
