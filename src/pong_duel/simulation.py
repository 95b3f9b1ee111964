"""
The Pong Duel simulation: one owned context advanced one tick at a time.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from pong_duel.config import PongConfig
from pong_duel.constants import AI_COLOR, PLAYER_COLOR
from pong_duel.controllers.cpu import CpuConfig, CpuPaddleController
from pong_duel.entities import Ball, Paddle
from pong_duel.history import HistoryStore, HistoryStoreError
from pong_duel.match import CompletedMatch, MatchState, Scorer
from pong_duel.physics import (
    Side,
    bounce_walls,
    deflect,
    detect_goal,
    integrate,
)


class RandomSource(Protocol):
    """The subset of :class:`random.Random` the simulation draws from."""

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""

    def uniform(self, a: float, b: float) -> float:
        """Uniform float between ``a`` and ``b``."""


@dataclass(frozen=True)
class InputSnapshot:
    """
    Player input read once at the start of a tick.

    :ivar target_y (Optional[float]): Pointer y; the paddle is centered on
        it. None when the pointer did not move.
    :ivar move_up (bool): Up key held.
    :ivar move_down (bool): Down key held.
    """

    target_y: Optional[float] = None
    move_up: bool = False
    move_down: bool = False

    @classmethod
    def pointer(cls, y: float) -> InputSnapshot:
        """Pointer-style input aiming the paddle center at ``y``."""
        return cls(target_y=y)

    @classmethod
    def keys(cls, up: bool = False, down: bool = False) -> InputSnapshot:
        """Key-hold style input."""
        return cls(move_up=up, move_down=down)


@dataclass
class TickEvents:
    """
    What happened during one tick.

    :ivar wall_bounce (bool): The ball bounced off the top or bottom wall.
    :ivar paddle_hit (Optional[Side]): Last paddle that deflected the ball.
    :ivar scorer (Optional[Scorer]): Side that won a point this tick.
    :ivar completed (Optional[CompletedMatch]): Match finished this tick.
    """

    wall_bounce: bool = False
    paddle_hit: Optional[Side] = None
    scorer: Optional[Scorer] = None
    completed: Optional[CompletedMatch] = None


@dataclass(frozen=True)
class PaddleView:
    """Read-only paddle state for drawing."""

    x: float
    y: float
    width: float
    height: float
    color: tuple[int, int, int]


@dataclass(frozen=True)
class BallView:
    """Read-only ball state for drawing."""

    x: float
    y: float
    radius: float
    color: tuple[int, int, int]


@dataclass(frozen=True)
class WorldView:
    """Read-only snapshot of everything the presentation layer draws."""

    width: float
    height: float
    player: PaddleView
    ai: PaddleView
    ball: BallView
    player_score: int
    ai_score: int


def _paddle_view(paddle: Paddle) -> PaddleView:
    return PaddleView(
        x=paddle.position.x,
        y=paddle.position.y,
        width=paddle.size.width,
        height=paddle.size.height,
        color=paddle.color,
    )


def _sign(rng: RandomSource) -> float:
    return 1.0 if rng.random() > 0.5 else -1.0


# Justification: the context owns every piece of simulation state
# pylint: disable=too-many-instance-attributes
class Simulation:
    """
    Ball, paddles, score and opponent for one game session.

    Create it with :meth:`create`, then call :meth:`step` once per tick.
    """

    def __init__(
        self,
        config: PongConfig,
        player_paddle: Paddle,
        ai_paddle: Paddle,
        ball: Ball,
        match: MatchState,
        *,
        rng: RandomSource,
        history: Optional[HistoryStore] = None,
        cpu_config: Optional[CpuConfig] = None,
    ):
        """
        :param config: Simulation tuning.
        :type config: PongConfig

        :param player_paddle: Left paddle, driven by input.
        :type player_paddle: Paddle

        :param ai_paddle: Right paddle, driven by the CPU.
        :type ai_paddle: Paddle

        :param ball: The ball.
        :type ball: Ball

        :param match: Score keeping for the running match.
        :type match: MatchState

        :param rng: Random source for serves.
        :type rng: RandomSource

        :param history: Where finished matches are stored.
        :type history: HistoryStore, optional

        :param cpu_config: Opponent tuning.
        :type cpu_config: CpuConfig, optional
        """
        self.config = config
        self.player_paddle = player_paddle
        self.ai_paddle = ai_paddle
        self.ball = ball
        self.match = match
        self.rng = rng
        self.history = history
        self.cpu = CpuPaddleController(ai_paddle, ball, config=cpu_config)

    @classmethod
    def create(
        cls,
        config: Optional[PongConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        history: Optional[HistoryStore] = None,
        cpu_config: Optional[CpuConfig] = None,
        match: Optional[MatchState] = None,
    ) -> Simulation:
        """
        Build a simulation with centered paddles and a fresh serve.

        :return: A ready-to-step simulation.
        :rtype: Simulation
        """
        config = config or PongConfig()
        rng = rng or random.Random()
        cx, cy = config.center
        paddle_y = cy - config.paddle_height / 2

        player_paddle = Paddle(
            position=Position2D(config.paddle_margin, paddle_y),
            size=Size2D(config.paddle_width, config.paddle_height),
            color=PLAYER_COLOR,
        )
        ai_paddle = Paddle(
            position=Position2D(
                config.width - config.paddle_width - config.paddle_margin,
                paddle_y,
            ),
            size=Size2D(config.paddle_width, config.paddle_height),
            color=AI_COLOR,
        )
        ball = Ball(
            position=Position2D(cx, cy),
            radius=config.ball_radius,
            velocity=Velocity2D(
                config.ball_speed * _sign(rng), config.serve_dy * _sign(rng)
            ),
            speed=config.ball_speed,
        )
        match = match or MatchState(winning_score=config.winning_score)

        return cls(
            config,
            player_paddle,
            ai_paddle,
            ball,
            match,
            rng=rng,
            history=history,
            cpu_config=cpu_config,
        )

    def step(self, snapshot: Optional[InputSnapshot] = None) -> TickEvents:
        """
        Advance the simulation by one tick.

        :param snapshot: Player input for this tick.
        :type snapshot: InputSnapshot, optional

        :return: What happened during the tick.
        :rtype: TickEvents
        """
        snapshot = snapshot or InputSnapshot()
        events = TickEvents()
        ball = self.ball

        # 1) Movement and top / bottom walls
        integrate(ball)
        events.wall_bounce = bounce_walls(ball, self.config.height)

        # 2) Paddles; both are checked even though one hit is the norm
        if deflect(ball, self.player_paddle, "PLAYER"):
            events.paddle_hit = "PLAYER"
        if deflect(ball, self.ai_paddle, "AI"):
            events.paddle_hit = "AI"

        # 3) Goals
        scorer = detect_goal(ball, self.config.width)
        if scorer is not None:
            events.scorer = scorer
            events.completed = self._award_point(scorer)
            self.reset_ball()

        # 4) Player paddle, then CPU
        self._move_player(snapshot)
        self.cpu.update(self.config.height)

        return events

    def _award_point(self, scorer: Scorer) -> Optional[CompletedMatch]:
        outcome = self.match.on_score(scorer)
        if outcome.record is not None and self.history is not None:
            try:
                self.history.append(outcome.record)
            except HistoryStoreError as exc:
                logger.warning(f"Match result not saved: {exc}")
        return outcome.record

    def _move_player(self, snapshot: InputSnapshot):
        paddle = self.player_paddle
        height = self.config.height

        if snapshot.target_y is not None:
            paddle.move_to(snapshot.target_y - paddle.size.height / 2, height)

        dy = 0.0
        if snapshot.move_up:
            dy -= self.config.player_step
        if snapshot.move_down:
            dy += self.config.player_step
        paddle.move_by(dy, height)

    def reset_ball(self):
        """Put the ball back in the center with a random velocity."""
        low, high = self.config.reset_dy_range
        cx, cy = self.config.center

        self.ball.position = Position2D(cx, cy)
        dx = self.ball.speed * _sign(self.rng)
        dy = self.rng.uniform(low, high) * _sign(self.rng)
        self.ball.velocity = Velocity2D(dx, dy)

    def reset(self):
        """Start a new match: zero the scores and serve again."""
        logger.info("Match reset")
        self.match.reset()
        self.reset_ball()

    def close(self):
        """Release the history store; play can go on without it."""
        if self.history is None:
            return
        try:
            self.history.close()
        except HistoryStoreError as exc:
            logger.warning(f"Match history not closed cleanly: {exc}")
        self.history = None

    def view(self) -> WorldView:
        """Read-only snapshot for drawing."""
        ball = self.ball
        return WorldView(
            width=self.config.width,
            height=self.config.height,
            player=_paddle_view(self.player_paddle),
            ai=_paddle_view(self.ai_paddle),
            ball=BallView(
                x=ball.position.x,
                y=ball.position.y,
                radius=ball.radius,
                color=ball.color,
            ),
            player_score=self.match.player_score,
            ai_score=self.match.ai_score,
        )


# pylint: enable=too-many-instance-attributes
