"""
Entities package for Pong Duel.
This package contains the mutable state of the ball and both paddles.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle

__all__ = [
    "Ball",
    "Paddle",
]
