"""
Simulation configuration.

A single :class:`SimulationConfig` is built when a match starts and handed
down to the simulation, instead of entities reading module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_arena.constants import (
    ARENA_MAX,
    BALL_RADIUS,
    BALL_SPEED,
    BOT_CENTER_DURATION,
    PADDLE_SIZE,
    PLAYER_PADDLE_SPEED,
)
from pong_arena.controllers.cpu import BotConfig
from pong_arena.difficulty import normalize, preset_for


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunables of a match.

    :ivar ball_speed (float): Ball speed in percent per second.
    :ivar ball_radius (float): Ball radius in percent, used for drawing and
        proximity checks.
    :ivar paddle_size (tuple[float, float]): Paddle width and height.
    :ivar player_speed (float): Player paddle speed in percent per second.
    :ivar difficulty (str): Starting difficulty level.
    :ivar bot_center_duration (float): Glide time back to center (ms).
    """

    ball_speed: float = BALL_SPEED
    ball_radius: float = BALL_RADIUS
    paddle_size: tuple[float, float] = PADDLE_SIZE
    player_speed: float = PLAYER_PADDLE_SPEED
    difficulty: str = "normal"
    bot_center_duration: float = BOT_CENTER_DURATION

    def validate(self):
        """Raise ValueError for settings the simulation cannot run with."""
        width, height = self.paddle_size
        if self.ball_speed <= 0:
            raise ValueError(f"ball_speed must be > 0, got {self.ball_speed}")
        if self.player_speed <= 0:
            raise ValueError(
                f"player_speed must be > 0, got {self.player_speed}"
            )
        if not 0 < width <= ARENA_MAX or not 0 < height <= ARENA_MAX:
            raise ValueError(
                f"paddle_size must fit in the arena, got {self.paddle_size}"
            )
        if self.ball_radius < 0:
            raise ValueError(
                f"ball_radius must be >= 0, got {self.ball_radius}"
            )

    @classmethod
    def for_difficulty(cls, difficulty: str | None, **overrides):
        """Config for a difficulty level name, unknown names fall back."""
        return cls(difficulty=normalize(difficulty), **overrides)

    def bot_config(self) -> BotConfig:
        """CPU settings for the configured difficulty."""
        config = preset_for(self.difficulty)
        config.center_duration = self.bot_center_duration
        return config
