from __future__ import annotations

from types import SimpleNamespace

from mini_arcade_core.backend.keys import Key

from pong_duel.scenes.pong.models import PongIntent
from pong_duel.scenes.pong.scene import (
    PongInputSystem,
    PongSimulationSystem,
    snapshot_from_intent,
)
from pong_duel.timestep import FixedTimestep


def input_ctx(keys_down=(), keys_pressed=(), mouse_pos=(0, 0), mouse_delta=(0, 0)):
    frame = SimpleNamespace(
        keys_down=set(keys_down),
        keys_pressed=set(keys_pressed),
        mouse_pos=mouse_pos,
        mouse_delta=mouse_delta,
    )
    return SimpleNamespace(input_frame=frame)


def sim_ctx(sim, intent, paused=False):
    world = SimpleNamespace(
        simulation=sim,
        timestep=FixedTimestep(tick_rate=4),
        paused=paused,
        last_events=None,
    )
    return SimpleNamespace(world=world, intent=intent, dt=0.25)


def test_moving_mouse_sets_pointer_target():
    intent = PongInputSystem().build_intent(
        input_ctx(mouse_pos=(120, 250), mouse_delta=(3, -4))
    )
    assert intent.target_y == 250.0


def test_still_mouse_leaves_keys_in_control():
    intent = PongInputSystem().build_intent(
        input_ctx(keys_down=[Key.UP], mouse_pos=(120, 250))
    )
    assert intent.target_y is None
    assert intent.move_up
    assert not intent.move_down


def test_held_keys_and_hotkeys_map_to_intent():
    intent = PongInputSystem().build_intent(
        input_ctx(keys_down=[Key.S], keys_pressed=[Key.ESCAPE, Key.R])
    )
    assert intent.move_down
    assert intent.pause
    assert intent.reset


def test_snapshot_carries_pointer_and_keys():
    snapshot = snapshot_from_intent(PongIntent(target_y=80.0, move_up=True))

    assert snapshot.target_y == 80.0
    assert snapshot.move_up
    assert not snapshot.move_down


def test_pointer_moves_player_paddle_in_scene(sim):
    sim.player_paddle.position.y = 0

    PongSimulationSystem().step(sim_ctx(sim, PongIntent(target_y=300.0)))

    assert sim.player_paddle.position.y == 250


def test_paused_scene_ignores_pointer(sim):
    sim.player_paddle.position.y = 0

    PongSimulationSystem().step(
        sim_ctx(sim, PongIntent(target_y=300.0), paused=True)
    )

    assert sim.player_paddle.position.y == 0
