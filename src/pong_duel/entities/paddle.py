"""
Paddle entity for Pong Duel.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from pong_duel.constants import WHITE


@dataclass
class Paddle:
    """
    Paddle entity. Only the vertical position changes during play.

    :ivar position (Position2D): Top-left corner of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar color (tuple[int, int, int]): Fill color used when drawing.
    """

    position: Position2D
    size: Size2D
    color: tuple[int, int, int] = WHITE

    @property
    def left(self) -> float:
        """Left edge."""
        return self.position.x

    @property
    def right(self) -> float:
        """Right edge."""
        return self.position.x + self.size.width

    @property
    def top(self) -> float:
        """Top edge."""
        return self.position.y

    @property
    def bottom(self) -> float:
        """Bottom edge."""
        return self.position.y + self.size.height

    @property
    def center_y(self) -> float:
        """Vertical center."""
        return self.position.y + self.size.height / 2

    def move_by(self, dy: float, surface_height: float):
        """
        Move the paddle vertically and keep it on the surface.

        :param dy: Vertical displacement (positive is down).
        :type dy: float

        :param surface_height: Height of the playing surface.
        :type surface_height: float
        """
        self.position.y += dy
        self.clamp(surface_height)

    def move_to(self, y: float, surface_height: float):
        """
        Place the paddle's top edge at ``y`` and keep it on the surface.

        :param y: New top edge.
        :type y: float

        :param surface_height: Height of the playing surface.
        :type surface_height: float
        """
        self.position.y = y
        self.clamp(surface_height)

    def clamp(self, surface_height: float):
        """Clamp the paddle into ``[0, surface_height - height]``."""
        if self.position.y < 0:
            self.position.y = 0.0
        if self.position.y + self.size.height > surface_height:
            self.position.y = surface_height - self.size.height
