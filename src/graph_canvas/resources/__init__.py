"""
Resources for graph_canvas.

Provides helpers to access shared assets such as the application icon.
"""

from functools import lru_cache

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QIcon


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon.

    Requires a running QApplication, since the icon font is loaded lazily.
    """
    return qta.icon("mdi.grid", color="#2b6cb0")
