from __future__ import annotations

import random

import pytest

from conftest import FIXED_TIME, ScriptedRandom, place_ball
from pong_duel.config import PongConfig
from pong_duel.constants import AI_COLOR, PLAYER_COLOR
from pong_duel.history import HistoryStoreError, MemoryHistoryStore
from pong_duel.match import CompletedMatch
from pong_duel.simulation import InputSnapshot, Simulation


class FailingStore:
    def append(self, record):
        raise HistoryStoreError("disk full")

    def load_recent(self, n):
        raise HistoryStoreError("disk full")


def test_create_centers_everything(sim):
    assert (sim.ball.position.x, sim.ball.position.y) == (400, 300)
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (5, 4)
    assert sim.player_paddle.position.x == 10
    assert sim.ai_paddle.position.x == 775
    assert sim.player_paddle.position.y == sim.ai_paddle.position.y == 250
    assert sim.match.scores == (0, 0)


def test_create_serve_direction_follows_random_source():
    sim = Simulation.create(rng=ScriptedRandom(randoms=[0.1, 0.3]))
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (-5, -4)


def test_free_flight(sim):
    place_ball(sim, 400, 300, 5, 4)

    events = sim.step()

    assert (sim.ball.position.x, sim.ball.position.y) == (405, 304)
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (5, 4)
    assert not events.wall_bounce
    assert events.paddle_hit is None
    assert events.scorer is None


def test_bounce_off_top_wall(sim):
    place_ball(sim, 400, 12, 3, -5)

    events = sim.step()

    assert events.wall_bounce
    assert sim.ball.position.y == 10
    assert sim.ball.velocity.vy == 5


def test_bounce_off_bottom_wall(sim):
    place_ball(sim, 400, 588, 3, 5)

    events = sim.step()

    assert events.wall_bounce
    assert sim.ball.position.y == 590
    assert sim.ball.velocity.vy == -5


def test_center_hit_on_player_paddle_goes_straight(sim):
    place_ball(sim, 38, 296, -5, 4)

    events = sim.step()

    assert events.paddle_hit == "PLAYER"
    assert sim.ball.position.x == 35  # paddle right edge + radius
    assert sim.ball.velocity.vx == 5
    assert sim.ball.velocity.vy == 0


def test_off_center_hit_curves_ball(sim):
    place_ball(sim, 38, 325, -5, 0)

    sim.step()

    assert sim.ball.velocity.vy == pytest.approx(5 * 0.5)


def test_hit_on_ai_paddle(sim):
    place_ball(sim, 762, 275, 5, 0)

    events = sim.step()

    assert events.paddle_hit == "AI"
    assert sim.ball.position.x == 765  # paddle left edge - radius
    assert sim.ball.velocity.vx == -5
    assert sim.ball.velocity.vy == pytest.approx(-2.5)


def test_ball_leaving_left_side_scores_for_ai(sim):
    rng = ScriptedRandom(randoms=[0.2, 0.7], uniforms=[3.5])
    sim.rng = rng
    place_ball(sim, 12, 100, -5, 0)

    events = sim.step()

    assert events.scorer == "AI"
    assert events.completed is None
    assert sim.match.scores == (0, 1)
    assert (sim.ball.position.x, sim.ball.position.y) == (400, 300)
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (-5, 3.5)
    assert rng.uniform_calls == [(2.0, 6.0)]


def test_ball_leaving_right_side_scores_for_player(sim):
    sim.rng = ScriptedRandom(randoms=[0.9, 0.2], uniforms=[6.0])
    place_ball(sim, 786, 100, 5, 0)

    events = sim.step()

    assert events.scorer == "PLAYER"
    assert sim.match.scores == (1, 0)
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (5, -6.0)


def test_winning_point_records_match_and_restarts(sim, history):
    sim.rng = ScriptedRandom(randoms=[0.9, 0.9], uniforms=[2.0])
    sim.match.player_score = 9
    sim.match.ai_score = 7
    place_ball(sim, 786, 100, 5, 0)

    events = sim.step()

    expected = CompletedMatch(
        player_score=10, ai_score=7, winner="Player 1", timestamp=FIXED_TIME
    )
    assert events.completed == expected
    assert history.load_recent(10) == [expected]
    assert sim.match.scores == (0, 0)
    assert (sim.ball.position.x, sim.ball.position.y) == (400, 300)


def test_history_failure_does_not_stop_play(sim):
    sim.history = FailingStore()
    sim.rng = ScriptedRandom(randoms=[0.9, 0.9], uniforms=[2.0])
    sim.match.ai_score = 9
    place_ball(sim, 12, 100, -5, 0)

    events = sim.step()

    assert events.completed.winner == "Player 2 (AI)"
    assert sim.match.scores == (0, 0)


def test_simulation_without_history_store():
    sim = Simulation.create(
        PongConfig(winning_score=1), rng=ScriptedRandom([0.9] * 4, [2.0])
    )
    place_ball(sim, 786, 100, 5, 0)

    assert sim.step().completed is not None


@pytest.mark.parametrize(
    "target, expected_y", [(300, 250), (10, 0), (590, 500), (120, 70)]
)
def test_pointer_centers_paddle_and_clamps(sim, target, expected_y):
    sim.step(InputSnapshot.pointer(target))
    assert sim.player_paddle.position.y == expected_y


@pytest.mark.parametrize(
    "up, down, expected_y", [(True, False, 243), (False, True, 257), (True, True, 250)]
)
def test_held_keys_step_paddle(sim, up, down, expected_y):
    sim.step(InputSnapshot.keys(up=up, down=down))
    assert sim.player_paddle.position.y == expected_y


def test_held_key_stops_at_wall(sim):
    place_ball(sim, 400, 300, 0, 0)
    for _ in range(100):
        sim.step(InputSnapshot.keys(down=True))
    assert sim.player_paddle.position.y == 500


def test_pointer_and_keys_in_same_tick(sim):
    sim.step(InputSnapshot(target_y=300, move_up=True))
    assert sim.player_paddle.position.y == 243


def test_ai_paddle_follows_ball(sim):
    sim.ai_paddle.position.y = 150  # center 200
    place_ball(sim, 400, 100, 0, 0)

    sim.step()

    assert sim.ai_paddle.position.y == 145


def test_reset_zeroes_scores_and_reserves(sim):
    sim.rng = ScriptedRandom(randoms=[0.8, 0.1], uniforms=[2.5])
    sim.match.player_score = 4
    sim.match.ai_score = 6
    place_ball(sim, 100, 50, -5, 3)

    sim.reset()

    assert sim.match.scores == (0, 0)
    assert (sim.ball.position.x, sim.ball.position.y) == (400, 300)
    assert (sim.ball.velocity.vx, sim.ball.velocity.vy) == (5, -2.5)


def test_view_exposes_drawable_state(sim):
    sim.match.player_score = 3

    view = sim.view()

    assert (view.width, view.height) == (800, 600)
    assert view.player.color == PLAYER_COLOR
    assert view.ai.color == AI_COLOR
    assert (view.ai.x, view.ai.y, view.ai.height) == (775, 250, 100)
    assert (view.ball.x, view.ball.y, view.ball.radius) == (400, 300, 10)
    assert (view.player_score, view.ai_score) == (3, 0)


def test_long_random_game_keeps_invariants():
    rng = random.Random(7)
    inputs = random.Random(11)
    history = MemoryHistoryStore()
    sim = Simulation.create(rng=rng, history=history)
    completions = 0

    for _ in range(5000):
        choice = inputs.random()
        if choice < 0.25:
            snapshot = InputSnapshot.pointer(inputs.uniform(-100, 700))
        elif choice < 0.5:
            snapshot = InputSnapshot.keys(up=True)
        elif choice < 0.75:
            snapshot = InputSnapshot.keys(down=True)
        else:
            snapshot = InputSnapshot()

        before = sim.match.scores
        events = sim.step(snapshot)
        after = sim.match.scores

        for paddle in (sim.player_paddle, sim.ai_paddle):
            assert 0 <= paddle.position.y <= 500

        if events.wall_bounce and events.scorer is None:
            assert sim.ball.position.y in (10, 590)

        if events.completed is not None:
            completions += 1
            assert after == (0, 0)
            assert 10 in (
                events.completed.player_score,
                events.completed.ai_score,
            )
        elif events.scorer == "PLAYER":
            assert after == (before[0] + 1, before[1])
        elif events.scorer == "AI":
            assert after == (before[0], before[1] + 1)
        else:
            assert after == before
        assert max(after) < 10

    assert len(history.load_recent(1000)) == completions


class RecordingStore(MemoryHistoryStore):
    def __init__(self, fail_on_close=False):
        super().__init__()
        self.closed = False
        self.fail_on_close = fail_on_close

    def close(self):
        self.closed = True
        if self.fail_on_close:
            raise HistoryStoreError("already gone")


def test_close_releases_history_store(sim):
    store = RecordingStore()
    sim.history = store
    sim.rng = ScriptedRandom(randoms=[0.9, 0.9], uniforms=[2.0])
    sim.match.player_score = 9

    sim.close()
    place_ball(sim, 786, 100, 5, 0)
    events = sim.step()

    assert store.closed
    assert sim.history is None
    assert events.completed is not None
    assert store.records == []


def test_close_tolerates_store_failure(sim):
    sim.history = RecordingStore(fail_on_close=True)

    sim.close()
    sim.close()

    assert sim.history is None
