"""
Shared fixtures for the Pong Arena tests.
"""

from __future__ import annotations

import random

import pytest

from pong_arena.interfaces import LogicalKey, Side


class FakeInput:
    """Input source whose held keys are set by the test."""

    def __init__(self, *held: LogicalKey):
        self.held = set(held)

    def is_pressed(self, key: LogicalKey) -> bool:
        return key in self.held

    def press(self, key: LogicalKey):
        self.held.add(key)

    def release(self, key: LogicalKey):
        self.held.discard(key)


class RecordingScoreboard:
    """Scoreboard that remembers every point awarded."""

    def __init__(self):
        self.sides: list[Side] = []

    def score(self, side: Side):
        self.sides.append(side)


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def scoreboard():
    return RecordingScoreboard()


@pytest.fixture
def rng():
    return random.Random(1234)
