"""
Simulation tuning for Pong Duel.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_duel.constants import (
    BALL_RADIUS,
    BALL_SPEED,
    PADDLE_MARGIN,
    PADDLE_SIZE,
    PLAYER_PADDLE_STEP,
    RESET_DY_RANGE,
    SERVE_DY,
    WINDOW_SIZE,
    WINNING_SCORE,
)


# Justification: one flat record of tuning values is easier to override
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class PongConfig:
    """
    Tuning values for a Pong Duel simulation.

    :ivar width (float): Width of the playing surface.
    :ivar height (float): Height of the playing surface.
    :ivar paddle_width (float): Width of both paddles.
    :ivar paddle_height (float): Height of both paddles.
    :ivar paddle_margin (float): Distance between each paddle and its wall.
    :ivar ball_radius (float): Radius of the ball.
    :ivar ball_speed (float): Base speed of the ball, per tick.
    :ivar serve_dy (float): Vertical speed of the very first serve.
    :ivar reset_dy_range (tuple[float, float]): Range of the vertical speed
        drawn after every point.
    :ivar player_step (float): Distance the player paddle moves per tick
        while a direction key is held.
    :ivar winning_score (int): Points needed to win a match.
    """

    width: float = float(WINDOW_SIZE[0])
    height: float = float(WINDOW_SIZE[1])
    paddle_width: float = float(PADDLE_SIZE[0])
    paddle_height: float = float(PADDLE_SIZE[1])
    paddle_margin: float = float(PADDLE_MARGIN)
    ball_radius: float = float(BALL_RADIUS)
    ball_speed: float = BALL_SPEED
    serve_dy: float = SERVE_DY
    reset_dy_range: tuple[float, float] = RESET_DY_RANGE
    player_step: float = PLAYER_PADDLE_STEP
    winning_score: int = WINNING_SCORE

    @property
    def center(self) -> tuple[float, float]:
        """Center of the playing surface."""
        return self.width / 2, self.height / 2


# pylint: enable=too-many-instance-attributes
