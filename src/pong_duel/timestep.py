"""
Fixed-timestep driver that turns frame time into simulation ticks.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_duel.constants import FPS


@dataclass
class FixedTimestep:
    """
    Accumulates frame time and hands out whole simulation ticks.

    :ivar tick_rate (int): Simulation ticks per second.
    :ivar max_ticks (int): Most ticks handed out for a single frame; any
        extra time is dropped so a long stall cannot snowball.
    :ivar accumulator (float): Time not yet consumed by a tick.
    """

    tick_rate: int = FPS
    max_ticks: int = 5
    accumulator: float = 0.0

    @property
    def tick_time(self) -> float:
        """Length of one tick in seconds."""
        return 1.0 / self.tick_rate

    def advance(self, dt: float) -> int:
        """
        Add elapsed frame time and return the number of ticks to run.

        :param dt: Seconds since the previous frame.
        :type dt: float

        :return: Ticks to run this frame.
        :rtype: int
        """
        self.accumulator += max(0.0, dt)
        ticks = int(self.accumulator // self.tick_time)
        if ticks > self.max_ticks:
            self.accumulator = 0.0
            return self.max_ticks
        self.accumulator -= ticks * self.tick_time
        return ticks

    def reset(self):
        """Forget any accumulated time (e.g. after a pause)."""
        self.accumulator = 0.0
