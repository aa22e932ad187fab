"""
Base class for the settings dialogs of graph_canvas.

A settings dialog builds its form, loads the stored values, and on OK
validates the form, applies it to AppSettings and closes. Invalid input
keeps the dialog open behind a warning box.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QShowEvent
from PySide6.QtWidgets import QBoxLayout, QDialog, QDialogButtonBox, QMessageBox, QWidget

from ...settings import AppSettings


class BaseDialog(QDialog):
    """Modal form bound to AppSettings.

    Subclasses implement ``_setup_ui``, ``_load_settings`` and
    ``apply_settings``, and may override ``validation_errors`` and
    ``restore_defaults``.
    """

    # Title of the warning shown for invalid input
    invalid_title = "Invalid Settings"

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None, title: str = "Settings"):
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        self.setWindowTitle(title)
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
        )
        self.setModal(True)

        self._setup_ui()
        self._load_settings()

    def _setup_ui(self) -> None:
        raise NotImplementedError

    def _load_settings(self) -> None:
        raise NotImplementedError

    def apply_settings(self) -> None:
        """Write the form values to settings."""
        raise NotImplementedError

    def validation_errors(self) -> list[str]:
        """Problems with the current form values, empty if none."""
        return []

    def restore_defaults(self) -> None:
        """Reset the stored values behind this form."""

    def _add_button_box(self, layout: QBoxLayout, with_defaults: bool = False) -> QDialogButtonBox:
        """Append OK/Cancel (and optionally Restore Defaults) to ``layout``."""
        buttons = QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        if with_defaults:
            buttons |= QDialogButtonBox.StandardButton.RestoreDefaults
        button_box = QDialogButtonBox(buttons)
        button_box.accepted.connect(self._save_and_accept)
        button_box.rejected.connect(self.reject)
        if with_defaults:
            button_box.button(QDialogButtonBox.StandardButton.RestoreDefaults).clicked.connect(
                self._restore_and_reload
            )
        layout.addWidget(button_box)
        self.button_box = button_box
        return button_box

    def _restore_and_reload(self) -> None:
        self.restore_defaults()
        self._load_settings()
        self.logger.info(f"{self.windowTitle()} restored to defaults")

    def _save_and_accept(self) -> None:
        """Validate, apply and close; stay open with a warning on errors."""
        errors = self.validation_errors()
        if errors:
            self.logger.debug(f"Rejected input: {errors}")
            QMessageBox.warning(self, self.invalid_title, "\n".join(errors))
            return

        self.apply_settings()
        self.logger.info(f"{self.windowTitle()} updated")
        self.accept()

    def showEvent(self, arg__1: QShowEvent) -> None:
        super().showEvent(arg__1)
        self.adjustSize()
