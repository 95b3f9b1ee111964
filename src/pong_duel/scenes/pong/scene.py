"""
Pong Duel scene: player vs CPU on mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.utils import logger

from pong_duel.config import PongConfig
from pong_duel.constants import (
    AI_LABEL,
    DIM,
    HISTORY_DB_PATH,
    NET_COLOR,
    PLAYER_LABEL,
    WHITE,
)
from pong_duel.history import HistoryStoreError, SqliteHistoryStore
from pong_duel.scenes.commands import PauseGameCommand, ResetMatchCommand
from pong_duel.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
)
from pong_duel.simulation import InputSnapshot, PaddleView, Simulation


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Process input and update intent."""
        frame = ctx.input_frame
        down = frame.keys_down
        pressed = frame.keys_pressed

        # the pointer only steers the paddle on frames where it moved
        target_y = None
        if tuple(frame.mouse_delta) != (0, 0):
            target_y = float(frame.mouse_pos[1])

        return PongIntent(
            target_y=target_y,
            move_up=Key.UP in down or Key.W in down,
            move_down=Key.DOWN in down or Key.S in down,
            pause=Key.ESCAPE in pressed,
            reset=Key.R in pressed,
        )


def snapshot_from_intent(intent: PongIntent) -> InputSnapshot:
    """
    Turn the scene intent into the simulation's per-tick input.

    :param intent: Intent built from this frame's input.
    :type intent: PongIntent

    :return: Pointer target and held keys for the simulation.
    :rtype: InputSnapshot
    """
    return InputSnapshot(
        target_y=intent.target_y,
        move_up=intent.move_up,
        move_down=intent.move_down,
    )


@dataclass
class PongPauseSystem:
    """System to handle pausing the Pong game."""

    name: str = "pong_pause"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Pause the game if pause intent is triggered."""
        if not ctx.intent or not ctx.intent.pause:
            return

        # avoid re-triggering every frame
        if ctx.world.paused:
            return

        ctx.world.paused = True
        ctx.commands.push(PauseGameCommand())


@dataclass
class PongResetSystem:
    """Starts a new match on request."""

    name: str = "pong_reset"
    order: int = 14

    def step(self, ctx: PongTickContext):
        """Queue a match reset if reset intent is triggered."""
        if ctx.intent is None or not ctx.intent.reset:
            return

        ctx.commands.push(ResetMatchCommand())


@dataclass
class PongSimulationSystem:
    """
    Run as many simulation ticks as the elapsed frame time allows.
    """

    name: str = "pong_simulation"
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Advance the simulation."""
        if ctx.world.paused:
            return

        snapshot = snapshot_from_intent(ctx.intent or PongIntent())

        ticks = ctx.world.timestep.advance(ctx.dt)
        for _ in range(ticks):
            ctx.world.last_events = ctx.world.simulation.step(snapshot)


class DrawNet(Drawable[PongTickContext]):
    """
    Drawable to render the dashed net.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        view = ctx.world.simulation.view()

        x = int(view.width / 2) - 1
        dash_w = 2
        dash_h = 10
        gap = 15

        y = 0
        while y < view.height:
            backend.render.draw_rect(
                x, int(y), dash_w, dash_h, color=NET_COLOR
            )
            y += dash_h + gap


def _draw_paddle(backend: Backend, paddle: PaddleView):
    backend.render.draw_rect(
        int(paddle.x),
        int(paddle.y),
        int(paddle.width),
        int(paddle.height),
        color=paddle.color,
    )


class DrawPlayerPaddle(Drawable[PongTickContext]):
    """
    Drawable to render the player paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_paddle(backend, ctx.world.simulation.view().player)


class DrawAiPaddle(Drawable[PongTickContext]):
    """
    Drawable to render the CPU paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_paddle(backend, ctx.world.simulation.view().ai)


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.simulation.view().ball
        size = int(ball.radius * 2)
        backend.render.draw_rect(
            int(ball.x - ball.radius),
            int(ball.y - ball.radius),
            size,
            size,
            color=ball.color,
        )


class DrawScore(Drawable[PongTickContext]):
    """
    Drawable to render both scores with their labels.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        view = ctx.world.simulation.view()

        left_x = int(view.width / 4)
        right_x = int(3 * view.width / 4)

        for x, score, label in (
            (left_x, view.player_score, PLAYER_LABEL),
            (right_x, view.ai_score, AI_LABEL),
        ):
            score_text = str(score)
            score_w, _ = backend.text.measure(score_text)
            label_w, _ = backend.text.measure(label)
            backend.text.draw(x - score_w // 2, 16, score_text, color=WHITE)
            backend.text.draw(x - label_w // 2, 48, label, color=DIM)


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawNet(), ctx=ctx),
            DrawCall(drawable=DrawScore(), ctx=ctx),
            DrawCall(drawable=DrawPlayerPaddle(), ctx=ctx),
            DrawCall(drawable=DrawAiPaddle(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    Player (left) against the CPU (right) until the window closes.
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        try:
            history = SqliteHistoryStore(HISTORY_DB_PATH)
        except HistoryStoreError as exc:
            logger.warning(f"Match history disabled: {exc}")
            history = None

        simulation = Simulation.create(
            PongConfig(width=float(vw), height=float(vh)),
            history=history,
        )
        self.world = PongWorld(simulation=simulation)
        logger.info(f"Pong started on a {vw}x{vh} surface")

        self.systems.extend(
            [
                PongInputSystem(),
                PongPauseSystem(),
                PongResetSystem(),
                PongSimulationSystem(),
                PongRenderSystem(),
            ]
        )

    def on_exit(self):
        self.world.simulation.close()
        super().on_exit()
