"""Drawing surface widget for the infinite grid.

This module provides the GraphCanvas widget that owns the view
transform, the interaction controller and the grid renderer, and
repaints whenever the view changes.
"""

import logging
from typing import TYPE_CHECKING, Optional

import qtawesome as qta  # type: ignore
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter, QPaintEvent
from PySide6.QtWidgets import QApplication, QPushButton, QWidget

from .controller import EditorMode, ZoomPanController
from .errors import SurfaceUnavailableError
from .events import GraphCanvasEventHandlers
from .grid_renderer import GridRenderer
from .positions import ViewportSize, WorldPosition
from .view_transform import ViewTransform

if TYPE_CHECKING:
    from graph_canvas.settings import AppSettings


class GraphCanvas(GraphCanvasEventHandlers, QWidget):
    """Widget showing a pannable, zoomable cartesian grid.

    The view state lives for the lifetime of the widget and is never
    persisted. Only the construction parameters come from settings.
    """

    viewChanged = Signal()
    cursorMoved = Signal(float, float)
    modeChanged = Signal(str)

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        transform: Optional[ViewTransform] = None,
        renderer: Optional[GridRenderer] = None,
        parent: Optional[QWidget] = None,
    ):
        """Initialize the canvas.

        Args:
            settings: Application settings providing view parameters and style
            transform: Explicit transform (overrides settings)
            renderer: Explicit renderer (overrides settings)
            parent: Parent widget

        Raises:
            SurfaceUnavailableError: If no QApplication is running
        """
        if QApplication.instance() is None:
            raise SurfaceUnavailableError("No QApplication instance - cannot create drawing surface")

        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        if transform is None:
            transform = settings.view.create_transform() if settings else ViewTransform()
        if renderer is None:
            renderer = (
                GridRenderer(settings.view.create_style(), settings.view.grid_walk)
                if settings
                else GridRenderer()
            )

        self.transform = transform
        self.renderer = renderer
        self.controller = ZoomPanController(self.transform)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(200, 150)

        self._setup_overlay_ui()

        self.logger.debug(
            f"Graph canvas initialized: step={self.transform.step}, "
            f"zoom ratio={self.transform.zoom_ratio}, "
            f"grid band={self.transform.min_grid_size}..{self.transform.max_grid_size}"
        )

    def _setup_overlay_ui(self) -> None:
        """Setup overlay button for resetting the view."""
        self.reset_button = QPushButton("", self)
        self.reset_button.setIcon(qta.icon("mdi.crosshairs-gps", color="white"))  # type: ignore[arg-type]
        self.reset_button.setFixedSize(32, 32)
        self.reset_button.setIconSize(self.reset_button.size() * 0.8)
        self.reset_button.setFlat(True)
        self.reset_button.setProperty("class", "canvas-overlay-button")
        self.reset_button.setToolTip("Reset view [ Ctrl+0 ]")
        self.reset_button.clicked.connect(self.reset_view)
        self.reset_button.raise_()

    # === VIEW STATE ===

    def viewport_size(self) -> ViewportSize:
        """Current surface size in pixels, read on every call."""
        return ViewportSize(float(self.width()), float(self.height()))

    def get_size(self) -> dict[str, int]:
        """Current surface size as width/height."""
        return {"width": self.width(), "height": self.height()}

    def get_center(self) -> WorldPosition:
        """World point at the middle of the viewport."""
        return self.transform.center

    def get_scale(self) -> float:
        """Accumulated zoom multiplier."""
        return self.transform.scale

    def get_mode(self) -> EditorMode:
        return self.controller.mode

    def set_mode(self, mode: EditorMode) -> None:
        """Switch between view and edit mode."""
        if mode == self.controller.mode:
            return
        self.controller.set_mode(mode)
        self.modeChanged.emit(mode.value)

    # === VIEW OPERATIONS ===

    def reset_view(self) -> None:
        """Return to the initial center, scale and step."""
        self.transform.reset()
        self.logger.debug("View reset")
        self._view_changed()

    def zoom_in(self) -> None:
        """Zoom in one tick around the viewport center."""
        if self.transform.zoom_in(self.viewport_size()):
            self._view_changed()

    def zoom_out(self) -> None:
        """Zoom out one tick around the viewport center."""
        if self.transform.zoom_out(self.viewport_size()):
            self._view_changed()

    def _view_changed(self) -> None:
        self.update()
        self.viewChanged.emit()

    # === PAINTING ===

    def paintEvent(self, event: QPaintEvent) -> None:
        """Clear the surface and draw the grid."""
        painter = QPainter(self)
        if not painter.isActive():
            self.logger.error("Paint context unavailable, skipping frame")
            return
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
            self.renderer.draw(painter, self.transform, self.viewport_size())
        finally:
            painter.end()
