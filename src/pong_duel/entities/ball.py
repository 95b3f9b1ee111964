"""
Ball entity for Pong Duel.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from pong_duel.constants import BALL_COLOR, BALL_SPEED


@dataclass
class Ball:
    """
    Ball entity.

    :ivar position (Position2D): Center of the ball.
    :ivar radius (float): Radius of the ball.
    :ivar velocity (Velocity2D): Per-tick displacement (dx, dy).
    :ivar speed (float): Base speed; horizontal speed after a serve and
        the scale of paddle deflection.
    :ivar color (tuple[int, int, int]): Fill color used when drawing.
    """

    position: Position2D
    radius: float
    velocity: Velocity2D
    speed: float = BALL_SPEED
    color: tuple[int, int, int] = BALL_COLOR

    @property
    def left(self) -> float:
        """Left edge of the bounding box."""
        return self.position.x - self.radius

    @property
    def right(self) -> float:
        """Right edge of the bounding box."""
        return self.position.x + self.radius

    @property
    def top(self) -> float:
        """Top edge of the bounding box."""
        return self.position.y - self.radius

    @property
    def bottom(self) -> float:
        """Bottom edge of the bounding box."""
        return self.position.y + self.radius
