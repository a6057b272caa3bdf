"""
Per-frame simulation of a Pong Arena match.

:class:`PongSimulation` owns the ball, the paddles and the score. Entities
never hold references to each other; the ball receives the paddles, and the
paddles receive the ball, as arguments of their update calls.
"""

from __future__ import annotations

import random

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.utils import logger

from pong_arena import difficulty as levels
from pong_arena.config import SimulationConfig
from pong_arena.constants import ARENA_CENTER, ARENA_MAX, ARENA_MIN, FULL_TURN
from pong_arena.entities.ball import Ball
from pong_arena.entities.paddle import BotPaddle, Paddle, PlayerPaddle
from pong_arena.interfaces import InputSource, LogicalKey, ScoreState


class PongSimulation:
    """
    Player on the left, CPU on the right, one ball.
    """

    def __init__(
        self,
        input_source: InputSource,
        config: SimulationConfig | None = None,
        *,
        rng: random.Random | None = None,
    ):
        """
        :param input_source: Polled once per tick for paddle and
            difficulty keys.
        :type input_source: InputSource

        :param config: Match settings.
        :type config: SimulationConfig, optional

        :param rng: Random source for serves and CPU aim error.
        :type rng: random.Random, optional
        """
        self.config = config or SimulationConfig()
        self.config.validate()
        self.input = input_source
        self.rng = rng or random.Random()
        self.difficulty = levels.normalize(self.config.difficulty)
        self.score = ScoreState()

        self._skip_tick = False
        self._held: dict[LogicalKey, bool] = {}

        pad_w, pad_h = self.config.paddle_size
        pad_y = ARENA_CENTER - pad_h / 2

        self.player = PlayerPaddle(
            Position2D(ARENA_MIN, pad_y),
            Size2D(pad_w, pad_h),
            self.input,
            speed=self.config.player_speed,
        )
        self.bot = BotPaddle(
            Position2D(ARENA_MAX - pad_w, pad_y),
            Size2D(pad_w, pad_h),
            config=self.config.bot_config(),
            rng=self.rng,
        )
        self.paddles: list[Paddle] = [self.player, self.bot]

        self.ball = Ball(
            Position2D(ARENA_CENTER, ARENA_CENTER),
            self.config.ball_speed,
            self.rng.uniform(0, FULL_TURN),
            radius=self.config.ball_radius,
            rng=self.rng,
        )

    def skip_next_tick(self):
        """Ignore the next update, e.g. after the game was paused."""
        self._skip_tick = True

    def set_difficulty(self, name: str):
        """Switch difficulty; the CPU's current glide is kept."""
        name = levels.normalize(name)
        if name == self.difficulty:
            return

        self.difficulty = name
        self.bot.inaccuracy = levels.preset_for(name).inaccuracy
        logger.info(f"Difficulty set to {name.upper()}")

    def _pressed_now(self, key: LogicalKey) -> bool:
        """True only on the tick a key goes down."""
        pressed = bool(self.input.is_pressed(key))
        was_pressed = self._held.get(key, False)
        self._held[key] = pressed
        return pressed and not was_pressed

    def _poll_difficulty(self):
        if self._pressed_now(LogicalKey.INCREASE_DIFFICULTY):
            self.set_difficulty(levels.next_level(self.difficulty))
        if self._pressed_now(LogicalKey.DECREASE_DIFFICULTY):
            self.set_difficulty(levels.previous_level(self.difficulty))

    def update(self, delta_time: float):
        """
        Advance the match by ``delta_time`` milliseconds.

        The ball drives the paddles so both move with the same sub-steps.
        """
        if self._skip_tick:
            self._skip_tick = False
            logger.debug("Skipped one simulation tick")
            return

        if delta_time < 0:
            logger.warning(f"Negative delta time {delta_time}, ignoring it")
            delta_time = 0.0

        self._poll_difficulty()
        self.ball.update_position(delta_time, self.paddles, self.score)

    def restart(self):
        """New match with the same settings."""
        self.score.reset()
        self.ball.reset()
        logger.info("Match restarted")
