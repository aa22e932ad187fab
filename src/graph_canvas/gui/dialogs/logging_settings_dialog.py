"""
Logging settings dialog for graph_canvas.

Edits the console and file switches of LoggingSettings. Handlers are
installed once at startup, so changes apply on the next launch.
"""

from typing import Optional

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...settings import AppSettings
from ...settings.logging import VALID_LEVELS
from .base_dialog import BaseDialog


class LoggingSettingsDialog(BaseDialog):
    """Console and file logging switches."""

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(settings, parent, title="Logging Settings")

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.addWidget(self._console_group())
        layout.addWidget(self._file_group())

        note = QLabel("Changes take effect after restarting graph_canvas")
        note.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(note)

        self._add_button_box(layout)

    def _console_group(self) -> QGroupBox:
        group = QGroupBox("Console")
        form = QFormLayout(group)

        self.console_enabled_check = QCheckBox("Write log messages to the console")
        self.console_level_combo = QComboBox()
        self.console_level_combo.addItems(VALID_LEVELS)
        self.console_colors_check = QCheckBox("Color level names")

        form.addRow(self.console_enabled_check)
        form.addRow("Level:", self.console_level_combo)
        form.addRow(self.console_colors_check)

        # Level and colors only matter while the console handler is on
        self.console_enabled_check.toggled.connect(self.console_level_combo.setEnabled)
        self.console_enabled_check.toggled.connect(self.console_colors_check.setEnabled)
        return group

    def _file_group(self) -> QGroupBox:
        group = QGroupBox("File")
        form = QFormLayout(group)

        self.file_enabled_check = QCheckBox("Record DEBUG and above to a CSV file")
        form.addRow(self.file_enabled_check)

        path_row = QHBoxLayout()
        self.log_path_label = QLabel(str(self.settings.logging.log_file_path))
        self.log_path_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        path_row.addWidget(self.log_path_label, 1)
        self.open_folder_button = QPushButton("Open Folder")
        self.open_folder_button.clicked.connect(self.open_log_folder)
        path_row.addWidget(self.open_folder_button)
        form.addRow("Location:", path_row)
        return group

    def _load_settings(self):
        log = self.settings.logging
        self.console_enabled_check.setChecked(log.console_logging)
        self.console_level_combo.setCurrentText(log.console_log_level)
        self.console_colors_check.setChecked(log.console_use_colors)
        self.console_level_combo.setEnabled(log.console_logging)
        self.console_colors_check.setEnabled(log.console_logging)
        self.file_enabled_check.setChecked(log.file_logging)

    def apply_settings(self):
        log = self.settings.logging
        log.console_logging = self.console_enabled_check.isChecked()
        log.console_log_level = self.console_level_combo.currentText()
        log.console_use_colors = self.console_colors_check.isChecked()
        log.file_logging = self.file_enabled_check.isChecked()

    def open_log_folder(self) -> bool:
        """Show the log folder in the system file manager.

        Returns:
            True if the desktop accepted the request
        """
        folder = self.settings.logging.log_folder
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Cannot create log folder {folder}: {e}")
            return False

        opened = QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder)))
        if not opened:
            self.logger.warning(f"No file manager could open {folder}")
        return opened
