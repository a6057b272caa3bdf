"""
Module defining game commands for Pong Arena.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger

from pong_arena import difficulty as levels
from pong_arena.theme import toggled


class StartGameCommand(Command):
    """BaseCommand to start the game."""

    def execute(
        self,
        context: CommandContext,
    ):
        context.services.scenes.change("pong")


class CycleDifficultyCommand(Command):
    """BaseCommand to cycle the game difficulty."""

    def execute(
        self,
        context: CommandContext,
    ):
        current = getattr(context.settings, "difficulty", None)
        context.settings.difficulty = levels.cycle(current)
        logger.info(f"Difficulty set to {context.settings.difficulty}")


class ToggleThemeCommand(Command):
    """Switch between the light and dark palettes."""

    def execute(self, context: CommandContext):
        theme = toggled(getattr(context.settings, "theme", None))
        context.settings.theme = theme

        # in game, the world keeps its own copy
        world = context.world
        if world is not None and hasattr(world, "theme"):
            world.theme = theme


class PauseGameCommand(Command):
    """
    Command to pause the game.
    """

    def execute(self, context: CommandContext):
        logger.info("Game paused")
        context.services.scenes.push("pause", as_overlay=True)


class ContinueCommand(Command):
    """
    Command to continue the game from pause.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is not None:
            world.paused = False
            logger.info("Resuming game from pause")

        context.services.scenes.pop()


class RestartMatchCommand(Command):
    """
    Command to start the paused match over, scores included.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is not None:
            world.simulation.restart()
            world.simulation.skip_next_tick()
            world.paused = False

        context.services.scenes.pop()


class BackToMenuCommand(Command):
    """
    Command to return to the main menu from pause.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.change("menu")
