"""
Reactive CPU paddle controller for Pong Duel.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_duel.constants import CPU_DEAD_ZONE, CPU_STEP
from pong_duel.entities import Ball, Paddle


@dataclass(frozen=True)
class CpuConfig:
    """
    CPU settings.

    - dead_zone: how far the paddle center may drift from the ball before
      the CPU reacts
    - step: how far the paddle moves per tick
    """

    dead_zone: float = CPU_DEAD_ZONE
    step: float = CPU_STEP


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's center Y every tick.
    - Moves the paddle one fixed step towards it when outside the dead zone.
    - No prediction, no reaction delay.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        *,
        config: CpuConfig | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.config = config or CpuConfig()

    def compute_move(self) -> float:
        """
        Decide paddle move direction:
            -1.0 = up
            0.0 = stay
            +1.0 = down
        """
        center = self.paddle.center_y
        target = self.ball.position.y
        dead_zone = self.config.dead_zone

        if center < target - dead_zone:
            return 1.0
        if center > target + dead_zone:
            return -1.0
        return 0.0

    def update(self, surface_height: float) -> float:
        """
        Move the paddle for this tick and clamp it to the surface.

        :param surface_height: Height of the playing surface.
        :type surface_height: float

        :return: The direction that was applied.
        :rtype: float
        """
        move = self.compute_move()
        self.paddle.move_by(move * self.config.step, surface_height)
        return move
