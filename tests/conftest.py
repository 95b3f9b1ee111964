from __future__ import annotations

from datetime import datetime

import pytest
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from pong_duel.entities import Ball, Paddle
from pong_duel.history import MemoryHistoryStore
from pong_duel.simulation import Simulation


class ScriptedRandom:
    """Random source replaying fixed values."""

    def __init__(self, randoms=(), uniforms=()):
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.uniform_calls = []

    def random(self) -> float:
        return self.randoms.pop(0)

    def uniform(self, a: float, b: float) -> float:
        self.uniform_calls.append((a, b))
        return self.uniforms.pop(0)


def make_ball(x, y, dx=0.0, dy=0.0, radius=10.0, speed=5.0) -> Ball:
    return Ball(
        position=Position2D(x, y),
        radius=radius,
        velocity=Velocity2D(dx, dy),
        speed=speed,
    )


def make_paddle(x, y, width=15.0, height=100.0) -> Paddle:
    return Paddle(position=Position2D(x, y), size=Size2D(width, height))


FIXED_TIME = datetime(2024, 5, 1, 12, 30)


@pytest.fixture
def history():
    return MemoryHistoryStore()


@pytest.fixture
def sim(history):
    """800x600 simulation; the first serve goes right and down."""
    simulation = Simulation.create(
        rng=ScriptedRandom(randoms=[0.9, 0.9]), history=history
    )
    simulation.match.clock = lambda: FIXED_TIME
    return simulation


def place_ball(simulation, x, y, dx, dy):
    simulation.ball.position = Position2D(x, y)
    simulation.ball.velocity = Velocity2D(dx, dy)
