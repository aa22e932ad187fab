"""
GUI components for graph_canvas.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
