"""
Client bootstrap that attaches a GraphCanvas to a container widget.
"""

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget

from .canvas import GraphCanvas, SurfaceUnavailableError

if TYPE_CHECKING:
    from .settings import AppSettings


class GraphClient:
    """Finds a container by object name and places a canvas inside it.

    A missing container or drawing surface leaves the client
    uninitialized (``canvas is None``) instead of raising, so the host
    window keeps running.
    """

    def __init__(
        self,
        container_id: str,
        window: QWidget,
        settings: Optional["AppSettings"] = None,
    ):
        """
        Initialize the client.

        Args:
            container_id: objectName of the container widget
            window: Top-level widget to search for the container
            settings: Application settings passed to the canvas
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.window = window
        self.canvas: Optional[GraphCanvas] = None
        self.error: Optional[str] = None

        self.container: Optional[QWidget] = window.findChild(QWidget, container_id)
        if self.container is None:
            self.error = f"Container with id {container_id} not found - Client not initialized."
            self.logger.warning(self.error)
            return

        try:
            self.canvas = GraphCanvas(settings=settings, parent=self.container)
        except SurfaceUnavailableError as e:
            self.error = f"Drawing surface unavailable - Client not initialized: {e}"
            self.logger.error(self.error)
            return

        layout = self.container.layout()
        if layout is None:
            layout = QVBoxLayout(self.container)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)

        self.canvas.update()
        self.logger.debug(f"Canvas attached to container '{container_id}'")

    @property
    def is_initialized(self) -> bool:
        """True if a canvas was attached."""
        return self.canvas is not None
