"""Coordinate transformations between world and viewport space.

This module holds the affine view state of the canvas (center, scale,
step) and converts points between the unbounded world plane and the
pixel viewport. Zoom and pan mutate the state in place and reject any
update that would leave it non-finite or non-positive.
"""

import logging
import math
from dataclasses import dataclass, field, replace

from .errors import InvalidTransformError
from .numeric import is_positive_finite, lattice_index
from .positions import ViewportPosition, ViewportSize, WorldPosition

logger = logging.getLogger(__name__)

DEFAULT_STEP = 150.0
DEFAULT_ZOOM_RATIO = 1.1
DEFAULT_MIN_GRID_SIZE = 100.0
DEFAULT_MAX_GRID_SIZE = 200.0


@dataclass
class ViewTransform:
    """Affine mapping between world and viewport coordinates.

    The effective pixel-per-world-unit density is ``step / scale``.
    ``step`` is kept inside ``[min_grid_size, max_grid_size]`` after every
    zoom, with ``scale`` absorbing the overflow, so on-screen grid spacing
    stays bounded while the logical zoom is unbounded.

    Attributes:
        center: World point shown at the middle of the viewport
        scale: Accumulated zoom multiplier, also the world spacing of grid lines
        step: Pixel spacing of grid lines before the next renormalization
        zoom_ratio: Multiplicative zoom increment per wheel tick
        min_grid_size: Lower bound for step in pixels
        max_grid_size: Upper bound for step in pixels
    """

    center: WorldPosition = field(default_factory=WorldPosition.origin)
    scale: float = 1.0
    step: float = DEFAULT_STEP
    zoom_ratio: float = DEFAULT_ZOOM_RATIO
    min_grid_size: float = DEFAULT_MIN_GRID_SIZE
    max_grid_size: float = DEFAULT_MAX_GRID_SIZE

    def __post_init__(self) -> None:
        if not self.center.is_finite():
            raise InvalidTransformError(f"Center must be finite, got {self.center}")
        if not is_positive_finite(self.scale, self.step):
            raise InvalidTransformError(
                f"Scale and step must be positive and finite, got scale={self.scale}, step={self.step}"
            )
        if not is_positive_finite(self.zoom_ratio) or self.zoom_ratio <= 1:
            raise InvalidTransformError(f"Zoom ratio must be greater than 1, got {self.zoom_ratio}")
        if not is_positive_finite(self.min_grid_size, self.max_grid_size):
            raise InvalidTransformError(
                f"Grid sizes must be positive and finite, got {self.min_grid_size}..{self.max_grid_size}"
            )
        if self.min_grid_size >= self.max_grid_size:
            raise InvalidTransformError(
                f"Minimum grid size {self.min_grid_size} must be below maximum {self.max_grid_size}"
            )
        if not self.min_grid_size <= self.step <= self.max_grid_size:
            raise InvalidTransformError(
                f"Step {self.step} outside grid band {self.min_grid_size}..{self.max_grid_size}"
            )
        if not is_positive_finite(self.density):
            raise InvalidTransformError(
                f"Density step/scale must be finite, got {self.step}/{self.scale}"
            )

        # Values restored by reset()
        self._initial_center = self.center
        self._initial_scale = self.scale
        self._initial_step = self.step

    @property
    def density(self) -> float:
        """Effective pixels per world unit."""
        return self.step / self.scale

    @property
    def band_ratio(self) -> float:
        """Factor applied to step (and scale) when step leaves its band."""
        return self.max_grid_size / self.min_grid_size

    # === CONVERSIONS ===

    def world_to_viewport(self, position: WorldPosition, size: ViewportSize) -> ViewportPosition:
        """Convert a world point to viewport pixels.

        Args:
            position: Point in world coordinates
            size: Current viewport size in pixels

        Returns:
            Matching point in viewport coordinates
        """
        density = self.density
        return ViewportPosition(
            (position.x - self.center.x) * density + size.width / 2,
            (position.y - self.center.y) * density + size.height / 2,
        )

    def viewport_to_world(self, position: ViewportPosition, size: ViewportSize) -> WorldPosition:
        """Convert a viewport pixel to world coordinates.

        Args:
            position: Point in viewport coordinates
            size: Current viewport size in pixels

        Returns:
            Matching point in world coordinates
        """
        density = self.density
        return WorldPosition(
            (position.x - size.width / 2) / density + self.center.x,
            (position.y - size.height / 2) / density + self.center.y,
        )

    # === MUTATIONS ===

    def pan(self, previous: ViewportPosition, current: ViewportPosition, size: ViewportSize) -> bool:
        """Shift the center so the world point under the pointer follows it.

        Args:
            previous: Pointer position before the move
            current: Pointer position after the move
            size: Current viewport size in pixels

        Returns:
            True if the center changed
        """
        delta = self.viewport_to_world(current, size) - self.viewport_to_world(previous, size)
        new_center = self.center - delta
        if not self._is_drawable(new_center, self.step, self.scale, size):
            logger.warning(f"Rejected pan to undrawable center {new_center}")
            return False
        if new_center == self.center:
            return False
        self.center = new_center
        return True

    def zoom_at(self, cursor: ViewportPosition, delta_y: float, size: ViewportSize) -> bool:
        """Zoom one tick keeping the world point under the cursor in place.

        A positive ``delta_y`` zooms out, a negative one zooms in, zero
        carries no direction and is ignored.

        Args:
            cursor: Cursor position in viewport coordinates
            delta_y: Wheel delta, only its sign is used
            size: Current viewport size in pixels

        Returns:
            True if the view changed
        """
        if delta_y == 0 or not math.isfinite(delta_y):
            return False

        modifier = 1 / self.zoom_ratio if delta_y > 0 else self.zoom_ratio

        before = self.viewport_to_world(cursor, size)

        new_step = self.step * modifier
        new_scale = self.scale
        if not is_positive_finite(new_step, new_step / new_scale):
            logger.warning(f"Rejected zoom: step {self.step} * {modifier} is degenerate")
            return False

        new_density = new_step / new_scale
        after = WorldPosition(
            (cursor.x - size.width / 2) / new_density + self.center.x,
            (cursor.y - size.height / 2) / new_density + self.center.y,
        )
        new_center = self.center + (before - after)

        new_step, new_scale = self._renormalized(new_step, new_scale)

        if not is_positive_finite(new_step, new_scale) or not self._is_drawable(
            new_center, new_step, new_scale, size
        ):
            logger.warning(
                f"Rejected zoom: step={new_step}, scale={new_scale}, center={new_center}"
            )
            return False

        self.center = new_center
        self.step = new_step
        self.scale = new_scale
        return True

    def zoom_in(self, size: ViewportSize) -> bool:
        """Zoom in one tick around the viewport center."""
        return self.zoom_at(size.center, -1, size)

    def zoom_out(self, size: ViewportSize) -> bool:
        """Zoom out one tick around the viewport center."""
        return self.zoom_at(size.center, 1, size)

    def _renormalized(self, step: float, scale: float) -> tuple[float, float]:
        """Fold step back into the grid band, moving the excess into scale.

        Loops so that zoom ratios larger than the band still converge.
        Both values move by the same factor, so the density
        ``step / scale`` is unchanged and only the world spacing of the
        grid lines (``scale``) changes.
        """
        ratio = self.band_ratio
        while step < self.min_grid_size and math.isfinite(scale) and scale > 0:
            step *= ratio
            scale *= ratio
        while step > self.max_grid_size and math.isfinite(scale) and scale > 0:
            step /= ratio
            scale /= ratio
        return step, scale

    def _is_drawable(
        self, center: WorldPosition, step: float, scale: float, size: ViewportSize
    ) -> bool:
        """Check that a candidate state can be converted and drawn.

        The density must be finite, the lattice index of the center must
        stay small enough to step from, and the world positions of the
        viewport corners (widened by the largest overdraw of the grid
        walk) must be finite in both directions.
        """
        if not center.is_finite():
            return False
        density = step / scale
        if not is_positive_finite(density):
            return False
        if lattice_index(center.x, scale) is None or lattice_index(center.y, scale) is None:
            return False

        margin = max(size.width, size.height) + self.max_grid_size
        for px, py in (
            (-margin, -margin),
            (size.width + margin, size.height + margin),
        ):
            world_x = (px - size.width / 2) / density + center.x
            world_y = (py - size.height / 2) / density + center.y
            if not (math.isfinite(world_x) and math.isfinite(world_y)):
                return False
            # Round trip back to pixels must not overflow either
            if not (
                math.isfinite((world_x - center.x) * density)
                and math.isfinite((world_y - center.y) * density)
            ):
                return False
        return True

    def reset(self) -> None:
        """Restore the center, scale and step the transform was created with."""
        self.center = self._initial_center
        self.scale = self._initial_scale
        self.step = self._initial_step

    def copy(self) -> "ViewTransform":
        """Independent snapshot of the current state."""
        clone = replace(self)
        clone._initial_center = self._initial_center
        clone._initial_scale = self._initial_scale
        clone._initial_step = self._initial_step
        return clone
