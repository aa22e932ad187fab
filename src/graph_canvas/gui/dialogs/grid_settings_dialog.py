"""
Grid settings dialog for graph_canvas.
"""

from typing import Optional
from PySide6.QtWidgets import (
    QVBoxLayout,
    QFormLayout,
    QLabel,
    QDoubleSpinBox,
    QComboBox,
    QWidget,
)

from ...canvas import WalkTermination
from ...settings import AppSettings
from .base_dialog import BaseDialog

WALK_LABELS = {
    WalkTermination.JOINT: "Joint (draw while any axis is visible)",
    WalkTermination.PER_AXIS: "Per axis (draw only visible lines)",
}


class GridSettingsDialog(BaseDialog):
    """Dialog for configuring grid geometry and walk policy."""

    invalid_title = "Invalid Grid Settings"

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(settings, parent, title="Grid Settings")

    def _spinbox(self, minimum: float, maximum: float, decimals: int, suffix: str = "") -> QDoubleSpinBox:
        spinbox = QDoubleSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setDecimals(decimals)
        if suffix:
            spinbox.setSuffix(suffix)
        return spinbox

    def _setup_ui(self):
        """Setup the user interface."""
        main_vbox = QVBoxLayout(self)

        form_layout = QFormLayout()

        self.step_spinbox = self._spinbox(1.0, 10000.0, 1, " px")
        self.step_spinbox.setToolTip("Grid spacing at startup, must lie within the band")
        form_layout.addRow("Initial step:", self.step_spinbox)

        self.zoom_ratio_spinbox = self._spinbox(1.01, 10.0, 2)
        self.zoom_ratio_spinbox.setSingleStep(0.05)
        self.zoom_ratio_spinbox.setToolTip("Zoom multiplier per wheel tick")
        form_layout.addRow("Zoom ratio:", self.zoom_ratio_spinbox)

        self.min_grid_spinbox = self._spinbox(1.0, 10000.0, 1, " px")
        form_layout.addRow("Minimum grid size:", self.min_grid_spinbox)

        self.max_grid_spinbox = self._spinbox(1.0, 10000.0, 1, " px")
        form_layout.addRow("Maximum grid size:", self.max_grid_spinbox)

        self.walk_combo = QComboBox()
        for policy, label in WALK_LABELS.items():
            self.walk_combo.addItem(label, policy.value)
        form_layout.addRow("Line walk:", self.walk_combo)

        info_label = QLabel(
            "The grid spacing is kept between the minimum and maximum size "
            "while zooming. Changes apply to newly created canvases."
        )
        info_label.setWordWrap(True)
        form_layout.addRow(info_label)

        main_vbox.addLayout(form_layout)

        self._add_button_box(main_vbox, with_defaults=True)

    def _load_settings(self):
        """Load current settings into UI."""
        view = self.settings.view
        self.step_spinbox.setValue(view.initial_step)
        self.zoom_ratio_spinbox.setValue(view.zoom_ratio)
        self.min_grid_spinbox.setValue(view.min_grid_size)
        self.max_grid_spinbox.setValue(view.max_grid_size)
        self.walk_combo.setCurrentIndex(self.walk_combo.findData(view.grid_walk.value))

    def restore_defaults(self):
        self.settings.view.reset_to_defaults()

    def validation_errors(self) -> list[str]:
        """Check the entered values for a usable grid band."""
        step = self.step_spinbox.value()
        minimum = self.min_grid_spinbox.value()
        maximum = self.max_grid_spinbox.value()

        errors = []
        if minimum >= maximum:
            errors.append("Minimum grid size must be smaller than maximum grid size")
        elif not minimum <= step <= maximum:
            errors.append(f"Initial step must be between {minimum:g} and {maximum:g}")
        return errors

    def apply_settings(self):
        view = self.settings.view
        view.initial_step = self.step_spinbox.value()
        view.zoom_ratio = self.zoom_ratio_spinbox.value()
        view.min_grid_size = self.min_grid_spinbox.value()
        view.max_grid_size = self.max_grid_spinbox.value()
        view.grid_walk = WalkTermination(self.walk_combo.currentData())
