"""
CPU paddle targeting for Pong Arena.

The CPU paddle does not chase the ball frame by frame. It glides along a
trajectory toward where the ball is predicted to end up, or back to the
center of the arena while the ball travels away from it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.utils import logger

from pong_arena.constants import ARENA_CENTER, BOT_CENTER_DURATION
from pong_arena.trajectory import Trajectory

if TYPE_CHECKING:
    from pong_arena.entities.ball import Ball
    from pong_arena.entities.paddle import PaddleBody


class BotTarget(Enum):
    """What the CPU paddle is currently following."""

    NONE = "none"
    BALL = "ball"
    CENTER = "center"


@dataclass
class BotConfig:
    """
    Basic CPU difficulty settings.

    - inaccuracy: bound of the random aim error, in arena percent
      (larger = easier)
    - center_duration: how long the glide back to the center takes (ms)
    """

    inaccuracy: float = 7.0
    center_duration: float = BOT_CENTER_DURATION

    def validate(self):
        """Raise ValueError on settings the CPU cannot work with."""
        if self.inaccuracy < 0:
            raise ValueError(
                f"inaccuracy must be >= 0, got {self.inaccuracy}"
            )
        if self.center_duration < 0:
            raise ValueError(
                f"center_duration must be >= 0, got {self.center_duration}"
            )


def closing_rate(ball: Ball, paddle_position: Position2D) -> float:
    """
    Relative X velocity projected on the relative X position.

    Negative means the ball is approaching the paddle, positive means it is
    moving away. The Y axis is left out on purpose: the paddle only needs to
    know whether the ball comes toward its side.
    """
    # Paddles never move horizontally, so their own vx is 0.
    return (ball.velocity.vx - 0.0) * (ball.position.x - paddle_position.x)


class CpuTargeting:
    """
    Decides where the CPU paddle should glide to.

    Target selection is a small state machine over :class:`BotTarget`
    driven by :func:`closing_rate`. A new trajectory is only built when the
    target, or the ball trajectory being aimed at, actually changes, so a
    glide in progress is not restarted every tick.
    """

    def __init__(
        self,
        config: BotConfig | None = None,
        *,
        rng: random.Random | None = None,
    ):
        """
        :param config: The CPU configuration settings.
        :type config: BotConfig, optional

        :param rng: Random source for the aim error.
        :type rng: random.Random, optional
        """
        self.config = config or BotConfig()
        self.config.validate()
        self.rng = rng or random.Random()
        self.target = BotTarget.NONE
        self._aim_key: tuple | None = None

    @property
    def inaccuracy(self) -> float:
        """Current aim error bound."""
        return self.config.inaccuracy

    @inaccuracy.setter
    def inaccuracy(self, value: float):
        if value < 0:
            raise ValueError(f"inaccuracy must be >= 0, got {value}")
        self.config.inaccuracy = value

    def _new_offset(self) -> float:
        # vertical error in [-inaccuracy, inaccuracy]
        m = self.config.inaccuracy
        return self.rng.uniform(-m, m) if m > 0 else 0.0

    def choose_target(self, ball: Ball, paddle_position: Position2D):
        """Update :attr:`target` from the current closing rate."""
        rate = closing_rate(ball, paddle_position)

        if rate < 0:
            self.target = BotTarget.BALL
        elif rate > 0:
            self.target = BotTarget.CENTER
        # rate == 0 keeps the current target

        return self.target

    def _aim_key_for(self, ball: Ball) -> tuple | None:
        if self.target is BotTarget.BALL:
            destination = ball.trajectory.destination
            return (
                BotTarget.BALL,
                destination.x,
                destination.y,
                ball.trajectory.duration,
            )
        if self.target is BotTarget.CENTER:
            return (
                BotTarget.CENTER,
                ARENA_CENTER,
                self.config.center_duration,
            )
        return None

    def plan(self, ball: Ball, body: PaddleBody) -> Trajectory | None:
        """
        Build a new trajectory for the paddle, if one is needed.

        :param ball: The ball to track (read only).
        :type ball: Ball

        :param body: The paddle being steered.
        :type body: PaddleBody

        :return: A fresh trajectory, or None when the current one still
            holds.
        :rtype: Trajectory | None
        """
        self.choose_target(ball, body.position)

        key = self._aim_key_for(ball)
        if key is None or key == self._aim_key:
            return None
        self._aim_key = key

        half_height = body.size.height / 2
        origin = Position2D(body.position.x, body.position.y)

        if self.target is BotTarget.BALL:
            aim_y = (
                ball.trajectory.destination.y - half_height + self._new_offset()
            )
            duration = ball.trajectory.duration
        else:
            aim_y = ARENA_CENTER - half_height
            duration = self.config.center_duration

        logger.debug(
            f"CPU paddle retargeted to {self.target.value}: "
            f"y={aim_y:.2f} in {duration:.0f}ms"
        )
        return Trajectory(
            origin=origin,
            destination=Position2D(body.position.x, aim_y),
            elapsed=0.0,
            duration=duration,
        )
