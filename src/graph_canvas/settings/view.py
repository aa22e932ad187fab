"""
View-related settings for graph_canvas.

Holds the construction parameters of the canvas (initial step, zoom
ratio, grid band, colors). The live view state itself is never stored.
"""

import logging

from ..canvas.errors import InvalidTransformError
from ..canvas.grid_renderer import GridStyle, WalkTermination
from ..canvas.view_transform import (
    DEFAULT_MAX_GRID_SIZE,
    DEFAULT_MIN_GRID_SIZE,
    DEFAULT_STEP,
    DEFAULT_ZOOM_RATIO,
    ViewTransform,
)
from .base import SettingsSection

logger = logging.getLogger(__name__)

_DEFAULT_STYLE = GridStyle()


class ViewSettings(SettingsSection):
    """Manages canvas view settings."""

    def _set_positive(self, key: str, value: float) -> None:
        if value > 0:
            self._store(key, float(value))
        else:
            logger.warning(f"Invalid value for {key}: {value}, keeping current")

    # === GRID GEOMETRY ===

    @property
    def initial_step(self) -> float:
        """Get initial grid spacing in pixels."""
        return self._get_float("view/initial_step", DEFAULT_STEP)

    @initial_step.setter
    def initial_step(self, value: float) -> None:
        """Set initial grid spacing in pixels."""
        self._set_positive("view/initial_step", value)

    @property
    def zoom_ratio(self) -> float:
        """Get multiplicative zoom increment per wheel tick."""
        return self._get_float("view/zoom_ratio", DEFAULT_ZOOM_RATIO)

    @zoom_ratio.setter
    def zoom_ratio(self, value: float) -> None:
        """Set multiplicative zoom increment per wheel tick (must exceed 1)."""
        if value > 1:
            self._store("view/zoom_ratio", float(value))
        else:
            logger.warning(f"Invalid zoom ratio: {value}, keeping current: {self.zoom_ratio}")

    @property
    def min_grid_size(self) -> float:
        """Get lower bound of grid spacing in pixels."""
        return self._get_float("view/min_grid_size", DEFAULT_MIN_GRID_SIZE)

    @min_grid_size.setter
    def min_grid_size(self, value: float) -> None:
        """Set lower bound of grid spacing in pixels."""
        self._set_positive("view/min_grid_size", value)

    @property
    def max_grid_size(self) -> float:
        """Get upper bound of grid spacing in pixels."""
        return self._get_float("view/max_grid_size", DEFAULT_MAX_GRID_SIZE)

    @max_grid_size.setter
    def max_grid_size(self, value: float) -> None:
        """Set upper bound of grid spacing in pixels."""
        self._set_positive("view/max_grid_size", value)

    @property
    def grid_walk(self) -> WalkTermination:
        """Get grid walk termination policy."""
        value = self._get_str("view/grid_walk", WalkTermination.JOINT.value)
        try:
            return WalkTermination(value)
        except ValueError:
            logger.warning(f"Unknown grid walk policy: {value}, using joint")
            return WalkTermination.JOINT

    @grid_walk.setter
    def grid_walk(self, value: WalkTermination) -> None:
        """Set grid walk termination policy."""
        self._store("view/grid_walk", value.value)

    # === COLORS ===

    @property
    def background_color(self) -> str:
        """Get background color."""
        return self._get_str("view/background_color", _DEFAULT_STYLE.background_color)

    @background_color.setter
    def background_color(self, value: str) -> None:
        """Set background color."""
        self._store("view/background_color", value)

    @property
    def axis_color(self) -> str:
        """Get axis line color."""
        return self._get_str("view/axis_color", _DEFAULT_STYLE.axis_color)

    @axis_color.setter
    def axis_color(self, value: str) -> None:
        """Set axis line color."""
        self._store("view/axis_color", value)

    @property
    def line_color(self) -> str:
        """Get regular grid line color."""
        return self._get_str("view/line_color", _DEFAULT_STYLE.line_color)

    @line_color.setter
    def line_color(self, value: str) -> None:
        """Set regular grid line color."""
        self._store("view/line_color", value)

    # === FACTORIES ===

    def create_transform(self) -> ViewTransform:
        """Build a view transform from the stored parameters.

        Falls back to the built-in defaults if the stored combination
        is unusable.
        """
        try:
            return ViewTransform(
                step=self.initial_step,
                zoom_ratio=self.zoom_ratio,
                min_grid_size=self.min_grid_size,
                max_grid_size=self.max_grid_size,
            )
        except InvalidTransformError as e:
            logger.warning(f"Stored view parameters rejected ({e}), using defaults")
            return ViewTransform()

    def create_style(self) -> GridStyle:
        """Build the grid style from the stored colors."""
        return GridStyle(
            background_color=self.background_color,
            axis_color=self.axis_color,
            axis_width=_DEFAULT_STYLE.axis_width,
            line_color=self.line_color,
            line_width=_DEFAULT_STYLE.line_width,
        )

    def reset_to_defaults(self) -> None:
        """Remove all stored view parameters."""
        self.settings.remove("view")
        self.settings.sync()
