"""Pointer and wheel interaction for the canvas.

ZoomPanController is a pure state machine: it receives toolkit-neutral
events, mutates the shared ViewTransform and reports whether a redraw
is needed. Qt event translation lives in events.py.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .positions import ViewportPosition, ViewportSize
from .view_transform import ViewTransform


class EditorMode(Enum):
    """Interaction mode of the canvas."""
    VIEW = "view"
    EDIT = "edit"


class InteractionPhase(Enum):
    """Pointer phase derived from the button state."""
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class InteractionState:
    """Pointer state in viewport pixel space."""

    mouse_down: bool = False
    current_mouse_position: ViewportPosition = field(default_factory=lambda: ViewportPosition(0.0, 0.0))
    previous_mouse_position: ViewportPosition = field(default_factory=lambda: ViewportPosition(0.0, 0.0))
    mode: EditorMode = EditorMode.VIEW

    @property
    def phase(self) -> InteractionPhase:
        return InteractionPhase.DRAGGING if self.mouse_down else InteractionPhase.IDLE


@dataclass(frozen=True)
class PointerEvent:
    """Pointer press, move or release. ``position`` is None when the host could not supply one."""
    position: Optional[ViewportPosition]


@dataclass(frozen=True)
class WheelEvent:
    """Wheel rotation. Positive ``delta_y`` scrolls towards the user (zoom out)."""
    delta_y: Optional[float]
    cursor_position: Optional[ViewportPosition]


class ZoomPanController:
    """Drives a ViewTransform from pointer and wheel events.

    Every handler returns True when the view changed and the surface
    should be redrawn.
    """

    def __init__(self, transform: ViewTransform, state: Optional[InteractionState] = None):
        """Initialize the controller.

        Args:
            transform: Transform mutated by pan and zoom
            state: Initial interaction state (fresh idle state by default)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.transform = transform
        self.state = state if state is not None else InteractionState()

    @property
    def mode(self) -> EditorMode:
        return self.state.mode

    def set_mode(self, mode: EditorMode) -> None:
        """Switch interaction mode."""
        if mode != self.state.mode:
            self.state.mode = mode
            self.logger.debug(f"Editor mode set to: {mode.value}")

    def pointer_down(self, event: PointerEvent) -> bool:
        """Start dragging from the pressed position."""
        position = event.position
        if position is None or not position.is_finite():
            self.logger.debug("Ignored pointer down without a usable position")
            return False
        self.state.current_mouse_position = position
        self.state.previous_mouse_position = position
        self.state.mouse_down = True
        return False

    def pointer_move(self, event: PointerEvent, size: ViewportSize) -> bool:
        """Pan while dragging in view mode; no-op otherwise."""
        if not self.state.mouse_down:
            return False
        position = event.position
        if position is None or not position.is_finite():
            self.logger.debug("Ignored pointer move without a usable position")
            return False

        if self.state.mode is EditorMode.VIEW:
            self.state.previous_mouse_position = self.state.current_mouse_position
            self.state.current_mouse_position = position
            return self.transform.pan(
                self.state.previous_mouse_position,
                self.state.current_mouse_position,
                size,
            )
        elif self.state.mode is EditorMode.EDIT:
            # Edit interactions are not defined yet
            return False
        raise AssertionError(f"Unhandled editor mode: {self.state.mode}")

    def pointer_up(self, event: PointerEvent) -> bool:
        """Stop dragging."""
        self.state.mouse_down = False
        return False

    def wheel(self, event: WheelEvent, size: ViewportSize) -> bool:
        """Zoom one tick anchored at the cursor."""
        delta_y = event.delta_y
        if delta_y is None or not math.isfinite(delta_y) or delta_y == 0:
            return False
        cursor = event.cursor_position
        if cursor is None or not cursor.is_finite():
            self.logger.debug("Ignored wheel event without a usable cursor position")
            return False
        return self.transform.zoom_at(cursor, delta_y, size)
