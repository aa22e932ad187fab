"""Position types for the two coordinate spaces of the canvas.

World space is the unbounded logical plane the grid lives in.
Viewport space is the bounded pixel plane of the drawing surface.
Both are plain (x, y) pairs, but they are distinct types so that a
viewport point can never be passed where a world point is expected.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class WorldPosition:
    """Point in world (logical grid) coordinates."""

    x: float
    y: float

    @staticmethod
    def origin() -> "WorldPosition":
        return WorldPosition(0.0, 0.0)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, other: object) -> "WorldPosition":
        if not isinstance(other, WorldPosition):
            return NotImplemented
        return WorldPosition(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "WorldPosition":
        if not isinstance(other, WorldPosition):
            return NotImplemented
        return WorldPosition(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class ViewportPosition:
    """Point in viewport (pixel) coordinates, origin at the top-left corner."""

    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, other: object) -> "ViewportPosition":
        if not isinstance(other, ViewportPosition):
            return NotImplemented
        return ViewportPosition(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "ViewportPosition":
        if not isinstance(other, ViewportPosition):
            return NotImplemented
        return ViewportPosition(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class ViewportSize:
    """Pixel size of the drawing surface."""

    width: float
    height: float

    @property
    def center(self) -> ViewportPosition:
        """Viewport position of the middle of the surface."""
        return ViewportPosition(self.width / 2, self.height / 2)
