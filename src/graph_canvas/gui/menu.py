"""
Menu builder for main application window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QMenuBar
from PySide6.QtGui import QAction, QKeySequence

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar."""

    def __init__(self, main_window: "MainWindow") -> None:
        """
        Initialize menu builder.

        Args:
            main_window: MainWindow instance that owns the menus
        """
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_actions(self) -> None:
        """Create all actions for menus."""
        self._setup_file_actions()
        self._setup_view_actions()
        self._setup_settings_actions()
        self._setup_help_actions()

        self.logger.debug("Actions created")

    def _setup_file_actions(self) -> None:
        """Create File menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_export_image = QAction("&Export Image...", mw)
        mw.action_export_image.setShortcut(QKeySequence("Ctrl+E"))
        mw.action_export_image.setStatusTip("Save the current view as a PNG image")
        mw.action_export_image.triggered.connect(actions.export_image)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.setStatusTip("Exit the application")
        mw.action_exit.triggered.connect(mw.close)

    def _setup_view_actions(self) -> None:
        """Create View menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_zoom_in = QAction("Zoom &In", mw)
        mw.action_zoom_in.setShortcuts([QKeySequence("Ctrl++"), QKeySequence("Ctrl+=")])
        mw.action_zoom_in.setStatusTip("Zoom in around the view center")
        mw.action_zoom_in.triggered.connect(actions.zoom_in)

        mw.action_zoom_out = QAction("Zoom &Out", mw)
        mw.action_zoom_out.setShortcut(QKeySequence("Ctrl+-"))
        mw.action_zoom_out.setStatusTip("Zoom out around the view center")
        mw.action_zoom_out.triggered.connect(actions.zoom_out)

        mw.action_reset_view = QAction("&Reset View", mw)
        mw.action_reset_view.setShortcut(QKeySequence("Ctrl+0"))
        mw.action_reset_view.setStatusTip("Return to the origin at the initial zoom")
        mw.action_reset_view.triggered.connect(actions.reset_view)

        mw.action_edit_mode = QAction("&Edit Mode", mw)
        mw.action_edit_mode.setShortcut(QKeySequence("E"))
        mw.action_edit_mode.setCheckable(True)
        mw.action_edit_mode.setStatusTip("Toggle edit mode (dragging does not pan)")
        mw.action_edit_mode.toggled.connect(actions.set_edit_mode)

    def _setup_settings_actions(self) -> None:
        """Create Settings menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_grid_settings = QAction("&Grid Settings...", mw)
        mw.action_grid_settings.setStatusTip("Configure grid spacing and zoom behaviour")
        mw.action_grid_settings.triggered.connect(actions.grid_settings)

        mw.action_logging_settings = QAction("&Logging Settings...", mw)
        mw.action_logging_settings.setStatusTip("Configure logging settings")
        mw.action_logging_settings.triggered.connect(actions.logging_settings)

    def _setup_help_actions(self) -> None:
        """Create Help menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_about = QAction("&About", mw)
        mw.action_about.setStatusTip("About graph_canvas")
        mw.action_about.triggered.connect(actions.about)

    def setup_menus(self) -> None:
        """Setup the menu bar."""
        menubar = self.main_window.menuBar()

        self._setup_file_menu(menubar)
        self._setup_view_menu(menubar)
        self._setup_settings_menu(menubar)
        self._setup_help_menu(menubar)

        self.logger.debug("Menus created")

    def _setup_file_menu(self, menubar: QMenuBar) -> None:
        """Setup File menu."""
        mw = self.main_window
        file_menu = menubar.addMenu("&File")
        file_menu.addAction(mw.action_export_image)  # type: ignore[arg-type]
        file_menu.addSeparator()
        file_menu.addAction(mw.action_exit)  # type: ignore[arg-type]

    def _setup_view_menu(self, menubar: QMenuBar) -> None:
        """Setup View menu."""
        mw = self.main_window
        view_menu = menubar.addMenu("&View")
        view_menu.addAction(mw.action_zoom_in)  # type: ignore[arg-type]
        view_menu.addAction(mw.action_zoom_out)  # type: ignore[arg-type]
        view_menu.addAction(mw.action_reset_view)  # type: ignore[arg-type]
        view_menu.addSeparator()
        view_menu.addAction(mw.action_edit_mode)  # type: ignore[arg-type]

    def _setup_settings_menu(self, menubar: QMenuBar) -> None:
        """Setup Settings menu."""
        mw = self.main_window
        settings_menu = menubar.addMenu("&Settings")
        settings_menu.addAction(mw.action_grid_settings)  # type: ignore[arg-type]
        settings_menu.addSeparator()
        settings_menu.addAction(mw.action_logging_settings)  # type: ignore[arg-type]

    def _setup_help_menu(self, menubar: QMenuBar) -> None:
        """Setup Help menu."""
        mw = self.main_window
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)  # type: ignore[arg-type]
