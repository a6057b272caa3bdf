"""
Paddle entities for Pong Arena.

Both paddle kinds share the same shape (:class:`PaddleBody`) and only differ
in how they move vertically each tick.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from pong_arena.constants import ARENA_MAX, ARENA_MIN, MS_PER_SECOND
from pong_arena.controllers.cpu import BotConfig, BotTarget, CpuTargeting
from pong_arena.geometry import Box, clamp
from pong_arena.interfaces import InputSource, LogicalKey
from pong_arena.trajectory import Trajectory

if TYPE_CHECKING:
    from pong_arena.entities.ball import Ball


@dataclass
class PaddleBody:
    """
    Shape of a paddle.

    :ivar position (Position2D): Top-left corner of the paddle.
    :ivar size (Size2D): Size of the paddle.
    """

    position: Position2D
    size: Size2D

    @property
    def box(self) -> Box:
        """Collidable box of the paddle."""
        return Box.from_position_size(self.position, self.size)

    def move_to(self, x: float, y: float):
        """Place the paddle, keeping the whole box inside the arena."""
        self.position = Position2D(
            clamp(x, ARENA_MIN, ARENA_MAX - self.size.width),
            clamp(y, ARENA_MIN, ARENA_MAX - self.size.height),
        )


class Paddle(Protocol):
    """What the ball and the simulation need from a paddle."""

    body: PaddleBody

    @property
    def position(self) -> Position2D:
        """Top-left corner."""

    @property
    def size(self) -> Size2D:
        """Width and height."""

    @property
    def box(self) -> Box:
        """Collidable box."""

    def update_position(self, delta_time: float, ball: Ball):
        """Move the paddle across ``delta_time`` milliseconds."""


class PlayerPaddle:
    """
    Paddle moved by the player at a fixed vertical speed.
    """

    def __init__(
        self,
        position: Position2D,
        size: Size2D,
        input_source: InputSource,
        *,
        speed: float,
    ):
        """
        :param position: Initial top-left corner.
        :type position: Position2D

        :param size: Paddle size.
        :type size: Size2D

        :param input_source: Where held keys are read from.
        :type input_source: InputSource

        :param speed: Vertical speed in percent per second.
        :type speed: float
        """
        self.body = PaddleBody(position, size)
        self.body.move_to(position.x, position.y)
        self.input = input_source
        self.speed = speed

    @property
    def position(self) -> Position2D:
        """Top-left corner."""
        return self.body.position

    @property
    def size(self) -> Size2D:
        """Width and height."""
        return self.body.size

    @property
    def box(self) -> Box:
        """Collidable box."""
        return self.body.box

    def update_position(self, delta_time: float, ball: Ball | None = None):
        """
        Move up and/or down while the keys are held.

        Holding both keys cancels the movement out.
        """
        variation = self.speed * max(0.0, delta_time) / MS_PER_SECOND
        x, y = self.position.to_tuple()

        if self.input.is_pressed(LogicalKey.MOVE_UP):
            y -= variation
        if self.input.is_pressed(LogicalKey.MOVE_DOWN):
            y += variation

        self.body.move_to(x, y)


class BotPaddle:
    """
    Paddle controlled by the CPU.

    It follows its own :class:`Trajectory`, rebuilt by
    :class:`CpuTargeting` whenever the ball changes course.
    """

    def __init__(
        self,
        position: Position2D,
        size: Size2D,
        *,
        config: BotConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.body = PaddleBody(position, size)
        self.body.move_to(position.x, position.y)
        self.targeting = CpuTargeting(config, rng=rng)
        self.trajectory = Trajectory.stationary(self.body.position)

    @property
    def position(self) -> Position2D:
        """Top-left corner."""
        return self.body.position

    @property
    def size(self) -> Size2D:
        """Width and height."""
        return self.body.size

    @property
    def box(self) -> Box:
        """Collidable box."""
        return self.body.box

    @property
    def target(self) -> BotTarget:
        """What the paddle currently follows."""
        return self.targeting.target

    @property
    def inaccuracy(self) -> float:
        """Aim error bound, in arena percent."""
        return self.targeting.inaccuracy

    @inaccuracy.setter
    def inaccuracy(self, value: float):
        self.targeting.inaccuracy = value

    def update_position(self, delta_time: float, ball: Ball):
        """
        Retarget if needed, then glide along the trajectory.

        :param delta_time: Time to advance, in milliseconds.
        :type delta_time: float

        :param ball: The ball to track (read only).
        :type ball: Ball
        """
        planned = self.targeting.plan(ball, self.body)
        if planned is not None:
            self.trajectory = planned

        self.trajectory.advance(delta_time)
        current = self.trajectory.position_at()
        # X never changes; only Y follows the glide.
        self.body.move_to(self.position.x, current.y)
