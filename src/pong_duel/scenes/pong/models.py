"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from pong_duel.simulation import Simulation, TickEvents
from pong_duel.timestep import FixedTimestep


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar simulation (Simulation): The running game.
    :ivar timestep (FixedTimestep): Converts frame time into ticks.
    :ivar paused (bool): Whether the simulation is frozen.
    :ivar last_events (Optional[TickEvents]): Events of the latest tick.
    """

    simulation: Simulation
    timestep: FixedTimestep = field(default_factory=FixedTimestep)
    paused: bool = False
    last_events: Optional[TickEvents] = None


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar target_y (Optional[float]): Pointer y when the pointer moved.
    :ivar move_up (bool): Up key held.
    :ivar move_down (bool): Down key held.
    :ivar pause (bool): Whether to pause the game.
    :ivar reset (bool): Whether to start a new match.
    """

    target_y: Optional[float] = None
    move_up: bool = False
    move_down: bool = False
    pause: bool = False
    reset: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    """
