"""Canvas package for the infinite grid.

This package provides the components of the drawing surface:
- WorldPosition / ViewportPosition: Points in the two coordinate spaces
- ViewTransform: World/viewport conversions, zoom and pan
- ZoomPanController: Pointer and wheel interaction state machine
- GridRenderer: Grid line computation and painting
- GraphCanvas: QWidget orchestrating all components
"""

from .positions import WorldPosition, ViewportPosition, ViewportSize
from .errors import CanvasError, SurfaceUnavailableError, InvalidTransformError
from .view_transform import ViewTransform
from .controller import (
    EditorMode,
    InteractionPhase,
    InteractionState,
    PointerEvent,
    WheelEvent,
    ZoomPanController,
)
from .grid_renderer import GridLine, GridRenderer, GridStyle, Orientation, WalkTermination
from .graph_canvas import GraphCanvas

__all__ = [
    "WorldPosition",
    "ViewportPosition",
    "ViewportSize",
    "CanvasError",
    "SurfaceUnavailableError",
    "InvalidTransformError",
    "ViewTransform",
    "EditorMode",
    "InteractionPhase",
    "InteractionState",
    "PointerEvent",
    "WheelEvent",
    "ZoomPanController",
    "GridLine",
    "GridRenderer",
    "GridStyle",
    "Orientation",
    "WalkTermination",
    "GraphCanvas",
]
