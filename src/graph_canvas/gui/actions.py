"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction/layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QDialog, QFileDialog

from .. import __version__
from ..canvas import EditorMode, SurfaceUnavailableError
from .dialogs import GridSettingsDialog, LoggingSettingsDialog, show_about_dialog

if TYPE_CHECKING:
    from .main_window import MainWindow


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _canvas_or_report(self):
        mw = self.main_window
        canvas = mw.canvas
        if canvas is None:
            mw.status_bar.showMessage("Canvas not available", 3000)
        return canvas

    def zoom_in(self) -> None:
        """Zoom in around the view center."""
        canvas = self._canvas_or_report()
        if canvas is not None:
            canvas.zoom_in()

    def zoom_out(self) -> None:
        """Zoom out around the view center."""
        canvas = self._canvas_or_report()
        if canvas is not None:
            canvas.zoom_out()

    def reset_view(self) -> None:
        """Return to the initial view."""
        canvas = self._canvas_or_report()
        if canvas is not None:
            canvas.reset_view()
            self.main_window.status_bar.showMessage("View reset", 2000)

    def set_edit_mode(self, enabled: bool) -> None:
        """Switch the canvas between view and edit mode."""
        canvas = self._canvas_or_report()
        if canvas is not None:
            canvas.set_mode(EditorMode.EDIT if enabled else EditorMode.VIEW)

    def export_image(self) -> None:
        """Save the current view as an image file."""
        mw = self.main_window
        canvas = self._canvas_or_report()
        if canvas is None:
            return

        file_path, _ = QFileDialog.getSaveFileName(
            mw,
            "Export Image",
            str(Path.cwd() / "grid.png"),
            "PNG Images (*.png);;All Files (*)",
        )
        if not file_path:
            return

        try:
            image = canvas.renderer.render_image(canvas.transform, canvas.viewport_size())
        except SurfaceUnavailableError as e:
            self.logger.error(f"Failed to render image: {e}", exc_info=True)
            mw.status_bar.showMessage(f"Export failed: {e}", 5000)
            return

        if image.save(file_path):
            self.logger.info(f"View exported to {file_path}")
            mw.status_bar.showMessage(f"Exported {Path(file_path).name}", 3000)
        else:
            self.logger.error(f"Could not write image to {file_path}")
            mw.status_bar.showMessage(f"Could not write {Path(file_path).name}", 5000)

    def grid_settings(self) -> None:
        """Show grid settings dialog."""
        mw = self.main_window
        dialog = GridSettingsDialog(mw.settings, mw)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            mw.status_bar.showMessage(
                "Grid settings saved. Restart to apply them to the canvas.", 5000
            )

    def logging_settings(self) -> None:
        """Show logging settings dialog."""
        mw = self.main_window
        dialog = LoggingSettingsDialog(mw.settings, mw)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            mw.status_bar.showMessage(
                "Logging settings saved. Restart application to apply changes.", 5000
            )

    def about(self) -> None:
        """Show about dialog."""
        mw = self.main_window
        show_about_dialog(
            version=__version__,
            settings_path=mw.settings.get_settings_file_path(),
            parent=mw,
        )
