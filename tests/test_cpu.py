from __future__ import annotations

import pytest

from conftest import make_ball, make_paddle
from pong_duel.controllers.cpu import CpuConfig, CpuPaddleController

SURFACE_HEIGHT = 600.0


def controller(paddle_y, ball_y, config=None):
    paddle = make_paddle(775, paddle_y)
    ball = make_ball(400, ball_y)
    return CpuPaddleController(paddle, ball, config=config)


def test_moves_towards_ball_above():
    # paddle center 200, ball at 100
    cpu = controller(150, 100)

    assert cpu.update(SURFACE_HEIGHT) == -1.0
    assert cpu.paddle.position.y == 145
    assert cpu.paddle.center_y == 195


def test_moves_towards_ball_below():
    cpu = controller(150, 300)

    assert cpu.update(SURFACE_HEIGHT) == 1.0
    assert cpu.paddle.position.y == 155


@pytest.mark.parametrize("ball_y", [165, 200, 230, 235])
def test_holds_inside_dead_zone(ball_y):
    cpu = controller(150, ball_y)

    assert cpu.update(SURFACE_HEIGHT) == 0.0
    assert cpu.paddle.position.y == 150


def test_reacts_just_outside_dead_zone():
    cpu = controller(150, 235.5)
    assert cpu.compute_move() == 1.0


def test_clamps_at_top_wall():
    cpu = controller(2, 0)

    cpu.update(SURFACE_HEIGHT)

    assert cpu.paddle.position.y == 0


def test_clamps_at_bottom_wall():
    cpu = controller(498, 600)

    cpu.update(SURFACE_HEIGHT)

    assert cpu.paddle.position.y == 500


def test_config_changes_step_and_dead_zone():
    cpu = controller(150, 180, config=CpuConfig(dead_zone=10, step=3))

    cpu.update(SURFACE_HEIGHT)

    assert cpu.paddle.position.y == 147


def test_compute_move_does_not_mutate():
    cpu = controller(150, 100)

    cpu.compute_move()

    assert cpu.paddle.position.y == 150
