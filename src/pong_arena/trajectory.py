"""
Linear motion plans shared by the ball and the CPU paddle.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D


@dataclass
class Trajectory:
    """
    Planned linear motion from ``origin`` to ``destination``.

    Times are in milliseconds. ``elapsed`` is always kept within
    ``[0, duration]``; a zero ``duration`` is an instant trajectory that is
    already complete.

    :ivar origin (Position2D): Where the motion starts.
    :ivar destination (Position2D): Where the motion ends.
    :ivar elapsed (float): Time already spent on the motion.
    :ivar duration (float): Total time of the motion.
    """

    origin: Position2D
    destination: Position2D
    elapsed: float = 0.0
    duration: float = 0.0

    def __post_init__(self):
        self.duration = max(0.0, self.duration)
        self.elapsed = min(max(0.0, self.elapsed), self.duration)

    @classmethod
    def stationary(cls, position: Position2D) -> Trajectory:
        """Instant trajectory that keeps an entity where it is."""
        return cls(
            origin=Position2D(position.x, position.y),
            destination=Position2D(position.x, position.y),
        )

    @property
    def remaining(self) -> float:
        """Time left until the destination is reached."""
        return self.duration - self.elapsed

    @property
    def progress(self) -> float:
        """Completed fraction of the motion, in [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, self.elapsed / self.duration))

    def is_complete(self) -> bool:
        """Whether the destination has been reached."""
        return self.elapsed >= self.duration

    def advance(self, delta_time: float) -> float:
        """
        Move ``elapsed`` forward, never past ``duration``.

        :param delta_time: Time to advance, negative values are ignored.
        :type delta_time: float

        :return: The time actually consumed.
        :rtype: float
        """
        step = min(max(0.0, delta_time), self.remaining)
        self.elapsed += step
        return step

    def position_at(self, elapsed: float | None = None) -> Position2D:
        """
        Position along the motion after ``elapsed`` milliseconds.

        Defaults to the current ``elapsed``. The destination is returned
        as-is once the motion is complete so that border checks can compare
        coordinates exactly.
        """
        if elapsed is None:
            elapsed = self.elapsed

        if self.duration <= 0 or elapsed >= self.duration:
            return Position2D(self.destination.x, self.destination.y)

        progress = max(0.0, elapsed) / self.duration
        return Position2D(
            self.origin.x + (self.destination.x - self.origin.x) * progress,
            self.origin.y + (self.destination.y - self.origin.y) * progress,
        )

    def copy(self) -> Trajectory:
        """Detached copy, safe to hand to other entities."""
        return Trajectory(
            origin=Position2D(self.origin.x, self.origin.y),
            destination=Position2D(self.destination.x, self.destination.y),
            elapsed=self.elapsed,
            duration=self.duration,
        )
