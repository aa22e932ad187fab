"""
Main application window for graph_canvas.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget
from PySide6.QtGui import QAction, QCloseEvent

from ..canvas import GraphCanvas
from ..canvas.numeric import round_to
from ..client import GraphClient
from ..resources import get_app_icon
from ..settings import AppSettings
from .actions import MainWindowActions
from .menu import MenuBuilder

CONTAINER_ID = "graph_container"


class MainWindow(QMainWindow):
    """Main application window."""

    # Menu actions (created by MenuBuilder)
    action_export_image: QAction
    action_exit: QAction
    action_zoom_in: QAction
    action_zoom_out: QAction
    action_reset_view: QAction
    action_edit_mode: QAction
    action_grid_settings: QAction
    action_logging_settings: QAction
    action_about: QAction

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings

        # Initialize managers
        self.menu_builder = MenuBuilder(self)
        self.main_window_actions = MainWindowActions(self)

        # Setup UI components
        self.setup_central_widget()
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.setup_status_bar()

        # The canvas is attached to the container by object name
        self.client = GraphClient(CONTAINER_ID, self, settings)
        self.connect_canvas()

        if not self.settings.ui.restore_window_geometry(self):
            self.resize(1000, 700)

        self.setWindowTitle("graph_canvas - Infinite Grid")
        self.setWindowIcon(get_app_icon())

        self.logger.info("Main window initialized")

    @property
    def canvas(self) -> Optional[GraphCanvas]:
        """Attached canvas, or None if the client failed to initialize."""
        return self.client.canvas

    def setup_central_widget(self) -> None:
        """Create the container the canvas is placed into."""
        container = QWidget(self)
        container.setObjectName(CONTAINER_ID)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(container)

    def setup_status_bar(self) -> None:
        """Setup the status bar with mode, cursor and zoom readouts."""
        self.status_bar = self.statusBar()

        self.mode_label = QLabel("Mode: view")
        self.cursor_label = QLabel("x: -, y: -")
        self.scale_label = QLabel("Scale: 1")
        for label in (self.mode_label, self.cursor_label, self.scale_label):
            self.status_bar.addPermanentWidget(label)

        self.status_bar.showMessage("Ready", 5000)

        self.logger.debug("Status bar created")

    def connect_canvas(self) -> None:
        """Wire canvas signals to the status bar readouts."""
        canvas = self.canvas
        if canvas is None:
            self.status_bar.showMessage(self.client.error or "Canvas not available")
            for action in (
                self.action_zoom_in,
                self.action_zoom_out,
                self.action_reset_view,
                self.action_edit_mode,
                self.action_export_image,
            ):
                action.setEnabled(False)
            return

        canvas.cursorMoved.connect(self.update_cursor_position)
        canvas.viewChanged.connect(self.update_scale)
        canvas.modeChanged.connect(self.update_mode)
        self.update_scale()

    def update_cursor_position(self, x: float, y: float) -> None:
        """Show the world position under the cursor."""
        self.cursor_label.setText(f"x: {round_to(x, 1, 1000):g}, y: {round_to(y, 1, 1000):g}")

    def update_scale(self) -> None:
        """Show the current zoom scale and grid step."""
        canvas = self.canvas
        if canvas is None:
            return
        step = round_to(canvas.transform.step, 1, 10)
        self.scale_label.setText(f"Scale: {canvas.get_scale():.4g} (step {step:g} px)")

    def update_mode(self, mode: str) -> None:
        """Show the current editor mode."""
        self.mode_label.setText(f"Mode: {mode}")
        self.action_edit_mode.setChecked(mode == "edit")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event to save settings."""
        self.settings.ui.save_window_geometry(self)

        self.logger.info("Window geometry saved")
        super().closeEvent(event)
