"""
Module defining game commands for Pong Duel.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger


class StartGameCommand(Command):
    """BaseCommand to start the game."""

    def execute(
        self,
        context: CommandContext,
    ):
        context.services.scenes.change("pong")


class ShowHistoryCommand(Command):
    """BaseCommand to open the match history."""

    def execute(
        self,
        context: CommandContext,
    ):
        context.services.scenes.change("history")


class PauseGameCommand(Command):
    """
    Command to pause the game.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.push("pause", as_overlay=True)


class ResetMatchCommand(Command):
    """
    Command to throw away the running match and serve a new one.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        world.simulation.reset()


class ContinueCommand(Command):
    """
    Command to continue the game from pause.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is not None:
            world.paused = False
            # frame time spent in the pause menu must not be simulated
            world.timestep.reset()
            logger.info("Resuming game from pause")

        context.services.scenes.pop()


class ResetFromPauseCommand(Command):
    """
    Command to reset the match and leave the pause menu.
    """

    def execute(self, context: CommandContext):
        ResetMatchCommand().execute(context)
        ContinueCommand().execute(context)


class BackToMenuCommand(Command):
    """
    Command to return to the main menu.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.change("menu")
