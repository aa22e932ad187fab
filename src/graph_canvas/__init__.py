"""
graph_canvas: Infinite cartesian grid with pan and zoom

A desktop canvas that draws an unbounded grid, keeps the world point under
the cursor fixed while zooming and keeps the grid spacing readable.
"""

__version__ = "0.1.0"
__author__ = "graph_canvas Contributors"

from .canvas import (
    GraphCanvas,
    GridRenderer,
    ViewTransform,
    ViewportPosition,
    WorldPosition,
    ZoomPanController,
)
from .client import GraphClient

__all__ = [
    "GraphCanvas",
    "GraphClient",
    "GridRenderer",
    "ViewTransform",
    "ViewportPosition",
    "WorldPosition",
    "ZoomPanController",
]
