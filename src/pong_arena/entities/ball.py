"""
Ball entity for Pong Arena.

The ball never integrates its velocity directly. It predicts the next
border it will reach, stores that as a :class:`Trajectory` and walks along
it, splitting each frame into sub-steps so that no border or paddle event
is skipped.
"""

from __future__ import annotations

import math
import random
from typing import Iterable

from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from pong_arena.constants import (
    ARENA_CENTER,
    ARENA_MAX,
    ARENA_MIN,
    BALL_RADIUS,
    FULL_TURN,
    MIN_TRAJECTORY_DURATION,
    MS_PER_SECOND,
)
from pong_arena.entities.paddle import Paddle
from pong_arena.geometry import (
    Circle,
    Segment,
    circle_intersects_box,
    clamp,
    segment_intersects_box,
)
from pong_arena.interfaces import Scoreboard, Side
from pong_arena.trajectory import Trajectory


class Ball:
    """
    Ball entity for the Pong scene.

    :ivar position (Position2D): Center of the ball.
    :ivar speed (float): Speed in percent per second.
    :ivar direction (float): Heading in radians, in [0, 2*pi).
    :ivar radius (float): Radius, only used for drawing and proximity.
    :ivar trajectory (Trajectory): Current motion toward the next border.
    """

    def __init__(
        self,
        position: Position2D,
        speed: float,
        direction: float,
        *,
        radius: float = BALL_RADIUS,
        rng: random.Random | None = None,
    ):
        self.position = Position2D(
            clamp(position.x, ARENA_MIN, ARENA_MAX),
            clamp(position.y, ARENA_MIN, ARENA_MAX),
        )
        self.speed = speed
        self.direction = direction % FULL_TURN
        self.radius = radius
        self.rng = rng or random.Random()
        self.trajectory = Trajectory.stationary(self.position)

        self.predict()

    @property
    def velocity(self) -> Velocity2D:
        """Velocity derived from speed and direction (Y grows downward)."""
        return Velocity2D(
            self.speed * math.cos(self.direction),
            self.speed * math.sin(self.direction),
        )

    def predict(self):
        """
        Compute the trajectory until the next arena border.

        Times toward borders the ball is moving away from, or sitting on,
        are discarded so the border just left cannot trigger again.
        """
        x, y = self.position.to_tuple()
        velocity = self.velocity

        remaining_times = []
        if velocity.vx != 0:
            remaining_times.append((ARENA_MIN - x) / velocity.vx)
            remaining_times.append((ARENA_MAX - x) / velocity.vx)
        if velocity.vy != 0:
            remaining_times.append((ARENA_MIN - y) / velocity.vy)
            remaining_times.append((ARENA_MAX - y) / velocity.vy)

        positive_times = [t for t in remaining_times if t > 0]
        origin = Position2D(x, y)

        if not positive_times:
            logger.warning(
                f"Ball at ({x:.2f}, {y:.2f}) with speed {self.speed} "
                "cannot reach any border, holding position"
            )
            self.trajectory = Trajectory(
                origin=origin,
                destination=Position2D(x, y),
                elapsed=0.0,
                duration=MIN_TRAJECTORY_DURATION,
            )
            return self.trajectory

        lowest = min(positive_times)
        # Rounding snaps the destination exactly onto the border it hits.
        destination = Position2D(
            clamp(round(x + velocity.vx * lowest), ARENA_MIN, ARENA_MAX),
            clamp(round(y + velocity.vy * lowest), ARENA_MIN, ARENA_MAX),
        )
        self.trajectory = Trajectory(
            origin=origin,
            destination=destination,
            elapsed=0.0,
            duration=max(lowest * MS_PER_SECOND, MIN_TRAJECTORY_DURATION),
        )
        logger.debug(
            f"Ball trajectory: ({x:.2f}, {y:.2f}) -> "
            f"({destination.x}, {destination.y}) "
            f"in {self.trajectory.duration:.0f}ms"
        )
        return self.trajectory

    def reflect(self, flip_x: bool, flip_y: bool):
        """
        Change course on the requested axes.

        ``flip_x`` turns the ball around by half a turn, ``flip_y`` mirrors
        the heading over the X axis. Both together bounce it back
        horizontally, which is what a paddle hit does.
        """
        if flip_x:
            self.direction += math.pi
        if flip_y:
            self.direction = FULL_TURN - self.direction

        self.direction %= FULL_TURN

    def reset(self):
        """Serve again from the center in a random direction."""
        self.position = Position2D(ARENA_CENTER, ARENA_CENTER)
        self.direction = self.rng.uniform(0, FULL_TURN) % FULL_TURN
        self.predict()

    def touches(self, paddle: Paddle) -> bool:
        """Whether the ball, as a circle, currently overlaps ``paddle``."""
        circle = Circle(self.position.x, self.position.y, self.radius)
        return circle_intersects_box(circle, paddle.box)

    def find_collision(
        self,
        start: Position2D,
        end: Position2D,
        paddles: Iterable[Paddle],
    ) -> Paddle | None:
        """
        First paddle whose edges the path from ``start`` to ``end`` crosses.

        Later paddles are not looked at once one is found.
        """
        if start.x == end.x and start.y == end.y:
            return None

        path = Segment(start, end)
        for paddle in paddles:
            if segment_intersects_box(path, paddle.box):
                return paddle
        return None

    def _check_borders(self, scoreboard: Scoreboard):
        x, y = self.position.to_tuple()

        if x == ARENA_MIN:
            logger.info("Ball crossed the left border, point for RIGHT")
            scoreboard.score(Side.RIGHT)
            self.reset()
        elif x == ARENA_MAX:
            logger.info("Ball crossed the right border, point for LEFT")
            scoreboard.score(Side.LEFT)
            self.reset()
        elif y in (ARENA_MIN, ARENA_MAX):
            self.reflect(False, True)
            self.predict()

    def update_position(
        self,
        delta_time: float,
        paddles: list[Paddle],
        scoreboard: Scoreboard,
    ):
        """
        Move the ball across ``delta_time`` milliseconds.

        The time is consumed in sub-steps that never go past the end of the
        current trajectory. Paddles are moved by the same sub-steps, then
        the swept path is checked against them and, if nothing was hit,
        the landing point is checked against the borders.

        :param delta_time: Time to advance, in milliseconds.
        :type delta_time: float

        :param paddles: Paddles the ball can bounce on.
        :type paddles: list[Paddle]

        :param scoreboard: Notified when the ball leaves through a side.
        :type scoreboard: Scoreboard
        """
        time_left = max(0.0, delta_time)

        while time_left > 0:
            if self.trajectory.is_complete():
                self.predict()

            step = min(self.trajectory.remaining, time_left)
            start = self.position
            future = self.trajectory.position_at(self.trajectory.elapsed + step)

            for paddle in paddles:
                paddle.update_position(step, self)

            hit = self.find_collision(start, future, paddles)
            if hit is not None:
                logger.debug(
                    f"Ball hit paddle at x={hit.position.x:.2f} "
                    f"from ({start.x:.2f}, {start.y:.2f})"
                )
                self.reflect(True, True)
                self.predict()
                self.trajectory.advance(step)
                self.position = self.trajectory.position_at()
            else:
                self.trajectory.advance(step)
                self.position = future

            self._check_borders(scoreboard)
            time_left -= step

        self.position = self.trajectory.position_at()
