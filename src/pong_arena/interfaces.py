"""
Contracts between the simulation and the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Side(Enum):
    """Side of the arena a point is awarded to."""

    LEFT = "left"
    RIGHT = "right"


class LogicalKey(Enum):
    """Keys the simulation polls, independent of the physical layout."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    INCREASE_DIFFICULTY = "increase_difficulty"
    DECREASE_DIFFICULTY = "decrease_difficulty"


class InputSource(Protocol):
    """Anything that can tell whether a logical key is held."""

    def is_pressed(self, key: LogicalKey) -> bool:
        """Whether ``key`` is currently held down."""


class Scoreboard(Protocol):
    """Receives scoring events."""

    def score(self, side: Side):
        """Award one point to ``side``."""


class NoInput:
    """Input source with nothing ever pressed."""

    def is_pressed(self, key: LogicalKey) -> bool:
        """Always False."""
        return False


@dataclass
class ScoreState:
    """
    Score state for a match.

    :ivar left (int): Score for the left player.
    :ivar right (int): Score for the right player.
    """

    left: int = 0
    right: int = 0

    def score(self, side: Side):
        """Award one point to ``side``."""
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self):
        """Back to 0 - 0."""
        self.left = 0
        self.right = 0
