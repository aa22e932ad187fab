"""
Dialog components for graph_canvas GUI.

Provides base dialog class and specific dialog implementations.
"""

from .base_dialog import BaseDialog
from .about_dialog import show_about_dialog
from .logging_settings_dialog import LoggingSettingsDialog
from .grid_settings_dialog import GridSettingsDialog

__all__ = [
    "BaseDialog",
    "show_about_dialog",
    "LoggingSettingsDialog",
    "GridSettingsDialog",
]
