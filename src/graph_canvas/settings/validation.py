"""
Settings validation system for graph_canvas.
"""

import logging
from typing import List, TYPE_CHECKING

from PySide6.QtGui import QColor

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)

# Below this spacing the grid turns into a solid fill
MIN_SENSIBLE_GRID_SIZE = 4.0


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        view = self.settings.view
        min_size = view.min_grid_size
        max_size = view.max_grid_size
        step = view.initial_step
        zoom_ratio = view.zoom_ratio

        # Validate grid band
        if min_size <= 0 or max_size <= 0:
            errors.append(f"Grid sizes must be positive: {min_size}..{max_size}")
        elif min_size >= max_size:
            errors.append(
                f"Minimum grid size {min_size} must be below maximum grid size {max_size}"
            )
        else:
            if not min_size <= step <= max_size:
                errors.append(f"Initial step {step} is outside grid band {min_size}..{max_size}")
            if min_size < MIN_SENSIBLE_GRID_SIZE:
                warnings.append(f"Minimum grid size {min_size}px will draw a very dense grid")
            if zoom_ratio > max_size / min_size:
                warnings.append(
                    f"Zoom ratio {zoom_ratio} jumps across the whole grid band in one wheel tick"
                )

        # Validate zoom ratio
        if zoom_ratio <= 1:
            errors.append(f"Zoom ratio must be greater than 1: {zoom_ratio}")

        # Validate colors
        for name, value in (
            ("background", view.background_color),
            ("axis", view.axis_color),
            ("line", view.line_color),
        ):
            if not QColor(value).isValid():
                warnings.append(f"Invalid {name} color: {value}")

        if errors:
            logger.debug(f"Settings validation found {len(errors)} error(s)")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
