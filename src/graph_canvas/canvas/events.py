"""Event handlers for GraphCanvas.

This module provides event handling functionality for GraphCanvas,
translating Qt mouse, wheel and resize events into controller events.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QMouseEvent, QResizeEvent, QWheelEvent

from .controller import PointerEvent, WheelEvent
from .positions import ViewportPosition


class GraphCanvasEventHandlers:
    """Mixin class for GraphCanvas event handling.

    Handles:
    - Left button drag for panning
    - Mouse wheel for zooming at the cursor
    - Cursor tracking for the world position readout
    - Window resize (repositioning overlay UI and redrawing)
    """

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Handle resize event to reposition overlay UI and redraw."""
        super().resizeEvent(event)  # type: ignore

        margin = 10
        button_x = self.width() - self.reset_button.width() - margin  # type: ignore
        button_y = self.height() - self.reset_button.height() - margin  # type: ignore
        self.reset_button.move(button_x, button_y)  # type: ignore

        self.update()  # type: ignore

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Handle mouse press events to start panning."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_down(PointerEvent(_position_of(event)))  # type: ignore
            self.setCursor(Qt.CursorShape.ClosedHandCursor)  # type: ignore
            event.accept()
        else:
            super().mousePressEvent(event)  # type: ignore

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Handle mouse move events for panning and cursor tracking."""
        position = _position_of(event)
        size = self.viewport_size()  # type: ignore

        if self.controller.pointer_move(PointerEvent(position), size):  # type: ignore
            self._view_changed()  # type: ignore

        world = self.transform.viewport_to_world(position, size)  # type: ignore
        self.cursorMoved.emit(world.x, world.y)  # type: ignore
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Handle mouse release events to stop panning."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_up(PointerEvent(_position_of(event)))  # type: ignore
            self.setCursor(Qt.CursorShape.ArrowCursor)  # type: ignore
            event.accept()
        else:
            super().mouseReleaseEvent(event)  # type: ignore

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Handle wheel events for zooming.

        Qt reports a positive angle delta when the wheel turns away from
        the user; that zooms in, so the sign is flipped.
        """
        angle = event.angleDelta().y()
        wheel = WheelEvent(
            delta_y=float(-angle),
            cursor_position=ViewportPosition(event.position().x(), event.position().y()),
        )
        if self.controller.wheel(wheel, self.viewport_size()):  # type: ignore
            self._view_changed()  # type: ignore
        event.accept()


def _position_of(event: QMouseEvent) -> ViewportPosition:
    point = event.position()
    return ViewportPosition(point.x(), point.y())
