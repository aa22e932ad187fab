"""Grid rendering for the infinite canvas.

This module computes the lattice of grid lines visible through a
ViewTransform and paints them with QPainter. Line computation is
separate from painting so the emitted set and order can be checked
without a paint device.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QLineF, QRectF
from PySide6.QtGui import QColor, QImage, QPainter, QPen

from .errors import SurfaceUnavailableError
from .numeric import lattice_index
from .positions import ViewportSize, WorldPosition
from .view_transform import ViewTransform


class Orientation(Enum):
    """Direction of a grid line on screen."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class WalkTermination(Enum):
    """How the outward walk decides that it has left the viewport.

    JOINT keeps emitting both lines until the vertical and the horizontal
    walk have both left, which over-draws on non-square viewports.
    PER_AXIS stops emitting each orientation as soon as it leaves.
    """
    JOINT = "joint"
    PER_AXIS = "per_axis"


@dataclass(frozen=True)
class GridLine:
    """A single line to draw.

    Attributes:
        orientation: Vertical (constant x) or horizontal (constant y)
        viewport_coordinate: Pixel x of a vertical line, pixel y of a horizontal one
        world_coordinate: World x or y the line passes through
        is_axis: True for the line through world coordinate 0
    """
    orientation: Orientation
    viewport_coordinate: float
    world_coordinate: float
    is_axis: bool


@dataclass(frozen=True)
class GridStyle:
    """Colors and widths used when painting the grid.

    Colors are Qt color names, ``#AARRGGBB`` carries transparency.
    """
    background_color: str = "#ff000000"
    axis_color: str = "#ffffffff"
    axis_width: float = 2.0
    line_color: str = "#a8ffffff"
    line_width: float = 1.0


class GridRenderer:
    """Computes and paints cartesian grid lines."""

    def __init__(
        self,
        style: GridStyle | None = None,
        termination: WalkTermination = WalkTermination.JOINT,
    ):
        """Initialize the grid renderer.

        Args:
            style: Colors and pen widths (defaults to white lines on black)
            termination: Outward walk termination policy
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.termination = termination
        self.set_style(style or GridStyle())

    def set_style(self, style: GridStyle) -> None:
        """Set colors and pen widths."""
        self.style = style
        self.background = QColor(style.background_color)
        self.axis_pen = QPen(QColor(style.axis_color), style.axis_width)
        self.line_pen = QPen(QColor(style.line_color), style.line_width)

    def compute_lines(self, transform: ViewTransform, size: ViewportSize) -> list[GridLine]:
        """Compute the grid lines visible in the viewport.

        The lattice is anchored at the multiple of ``scale`` nearest the
        view center, so it does not drift while panning. The anchor lines
        come first (horizontal, then vertical), followed by one vertical
        and one horizontal line per step walking towards positive world
        coordinates, then the same walking towards negative coordinates.

        Args:
            transform: Current view transform
            size: Viewport size in pixels

        Returns:
            Ordered list of lines to draw
        """
        scale = transform.scale
        index_x = lattice_index(transform.center.x, scale)
        index_y = lattice_index(transform.center.y, scale)
        if index_x is None or index_y is None:
            self.logger.warning(f"No grid for center {transform.center} at scale {scale}")
            return []

        lines = [
            self._horizontal_line(transform, size, index_y * scale),
            self._vertical_line(transform, size, index_x * scale),
        ]

        joint = self.termination is WalkTermination.JOINT

        # Positive direction
        offset = 1
        while True:
            x = (index_x + offset) * scale
            y = (index_y + offset) * scale
            position = transform.world_to_viewport(WorldPosition(x, y), size)
            x_inside = position.x < size.width
            y_inside = position.y < size.height
            if not (x_inside or y_inside):
                break
            if joint or x_inside:
                lines.append(GridLine(Orientation.VERTICAL, position.x, x, x == 0))
            if joint or y_inside:
                lines.append(GridLine(Orientation.HORIZONTAL, position.y, y, y == 0))
            offset += 1

        # Negative direction
        offset = 1
        while True:
            x = (index_x - offset) * scale
            y = (index_y - offset) * scale
            position = transform.world_to_viewport(WorldPosition(x, y), size)
            x_inside = position.x > 0
            y_inside = position.y > 0
            if not (x_inside or y_inside):
                break
            if joint or x_inside:
                lines.append(GridLine(Orientation.VERTICAL, position.x, x, x == 0))
            if joint or y_inside:
                lines.append(GridLine(Orientation.HORIZONTAL, position.y, y, y == 0))
            offset += 1

        return lines

    def _vertical_line(self, transform: ViewTransform, size: ViewportSize, world_x: float) -> GridLine:
        viewport_x = transform.world_to_viewport(WorldPosition(world_x, 0.0), size).x
        return GridLine(Orientation.VERTICAL, viewport_x, world_x, world_x == 0)

    def _horizontal_line(self, transform: ViewTransform, size: ViewportSize, world_y: float) -> GridLine:
        viewport_y = transform.world_to_viewport(WorldPosition(0.0, world_y), size).y
        return GridLine(Orientation.HORIZONTAL, viewport_y, world_y, world_y == 0)

    def draw(self, painter: QPainter, transform: ViewTransform, size: ViewportSize) -> int:
        """Clear the surface and draw the grid.

        Args:
            painter: Active painter on the target surface
            transform: Current view transform
            size: Surface size in pixels

        Returns:
            Number of lines drawn
        """
        painter.fillRect(QRectF(0, 0, size.width, size.height), self.background)

        lines = self.compute_lines(transform, size)
        for line in lines:
            painter.setPen(self.axis_pen if line.is_axis else self.line_pen)
            coord = line.viewport_coordinate
            if line.orientation is Orientation.VERTICAL:
                painter.drawLine(QLineF(coord, 0, coord, size.height))
            else:
                painter.drawLine(QLineF(0, coord, size.width, coord))

        return len(lines)

    def render_image(self, transform: ViewTransform, size: ViewportSize) -> QImage:
        """Render the grid to an offscreen image.

        Args:
            transform: Current view transform
            size: Image size in pixels

        Returns:
            ARGB32 image with the grid drawn on it

        Raises:
            SurfaceUnavailableError: If a painter cannot be opened on the image
        """
        image = QImage(int(size.width), int(size.height), QImage.Format.Format_ARGB32)
        painter = QPainter(image)
        if not painter.isActive():
            raise SurfaceUnavailableError(
                f"Cannot paint on a {int(size.width)}x{int(size.height)} image"
            )
        try:
            count = self.draw(painter, transform, size)
        finally:
            painter.end()
        self.logger.debug(f"Rendered {count} grid lines to image")
        return image
