"""
About dialog for graph_canvas.
"""

from typing import Optional
from PySide6.QtWidgets import QMessageBox, QWidget, QApplication
from PySide6.QtCore import Qt


def show_about_dialog(
    version: str,
    settings_path: Optional[str] = None,
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show about dialog with application information.

    Args:
        version: Application version string
        settings_path: Location of the settings file (optional)
        parent: Parent widget
    """
    msg = QMessageBox(parent)
    msg.setWindowTitle("")

    settings_display = settings_path if settings_path else "Not available"

    msg.setText(
        f"<h3>graph_canvas v{version}</h3>"
        "<p>Infinite cartesian grid canvas</p>"
        "<p>Drag with the left mouse button to pan, use the wheel to zoom at the cursor.</p>"
        f"<p><b>Configuration:</b><br>"
        f"settings: {settings_display}<br>"
    )

    msg.setIconPixmap(QApplication.windowIcon().pixmap(64, 64))

    msg.setWindowFlags(
        Qt.WindowType.Dialog
        | Qt.WindowType.CustomizeWindowHint
        | Qt.WindowType.MSWindowsFixedSizeDialogHint
    )

    msg.exec()
