from __future__ import annotations

import pytest
from mini_arcade_core.spaces.geometry.bounds import Position2D

from pong_arena.trajectory import Trajectory


def make(duration=1000.0, elapsed=0.0):
    return Trajectory(
        origin=Position2D(0, 0),
        destination=Position2D(100, 50),
        elapsed=elapsed,
        duration=duration,
    )


def test_position_at_interpolates_linearly():
    trajectory = make()

    middle = trajectory.position_at(500)

    assert middle.x == pytest.approx(50)
    assert middle.y == pytest.approx(25)


def test_position_at_end_is_exactly_the_destination():
    trajectory = Trajectory(
        origin=Position2D(0.1, 0.3),
        destination=Position2D(100, 7),
        duration=123.4,
    )

    end = trajectory.position_at(123.4)

    assert (end.x, end.y) == (100, 7)


def test_advance_is_clamped_to_duration():
    trajectory = make(duration=300)

    assert trajectory.advance(200) == 200
    assert trajectory.advance(200) == 100
    assert trajectory.elapsed == 300
    assert trajectory.is_complete()
    assert trajectory.progress == 1.0


def test_advance_ignores_negative_time():
    trajectory = make(elapsed=100)

    assert trajectory.advance(-50) == 0
    assert trajectory.elapsed == 100


def test_elapsed_is_clamped_on_creation():
    assert make(duration=100, elapsed=250).elapsed == 100
    assert make(duration=100, elapsed=-5).elapsed == 0


def test_zero_duration_is_instant():
    trajectory = make(duration=0)

    assert trajectory.progress == 1.0
    assert trajectory.is_complete()
    end = trajectory.position_at()
    assert (end.x, end.y) == (100, 50)


def test_stationary_keeps_position():
    trajectory = Trajectory.stationary(Position2D(3, 4))

    assert trajectory.duration == 0
    here = trajectory.position_at()
    assert (here.x, here.y) == (3, 4)


def test_copy_is_detached():
    trajectory = make(elapsed=10)
    copied = trajectory.copy()
    copied.advance(100)

    assert trajectory.elapsed == 10
    assert copied.destination is not trajectory.destination
