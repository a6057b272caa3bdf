from __future__ import annotations

import math

import pytest
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from pong_arena.entities.ball import Ball
from pong_arena.entities.paddle import PaddleBody, PlayerPaddle
from pong_arena.interfaces import NoInput, Side


class RecordingPaddle:
    """Paddle that stays put and remembers the sub-steps it was given."""

    def __init__(self, x=0.0, y=0.0, width=0.5, height=1.0):
        self.body = PaddleBody(Position2D(x, y), Size2D(width, height))
        self.steps = []

    @property
    def position(self):
        return self.body.position

    @property
    def size(self):
        return self.body.size

    @property
    def box(self):
        return self.body.box

    def update_position(self, delta_time, ball):
        self.steps.append(delta_time)


def left_paddle(y=45.0):
    return PlayerPaddle(
        Position2D(0, y), Size2D(0.5, 10), NoInput(), speed=100.0
    )


def test_predict_straight_to_the_right():
    ball = Ball(Position2D(50, 50), 25, 0)

    trajectory = ball.trajectory
    assert (trajectory.origin.x, trajectory.origin.y) == (50, 50)
    assert (trajectory.destination.x, trajectory.destination.y) == (100, 50)
    assert trajectory.duration == pytest.approx(2000)
    assert trajectory.elapsed == 0


def test_predict_rounds_destination_onto_the_border():
    ball = Ball(Position2D(50, 50), 25, math.pi / 4)

    destination = ball.trajectory.destination
    assert destination.x == 100
    assert destination.y == 100
    assert ball.trajectory.duration == pytest.approx(50 / (25 * math.cos(math.pi / 4)) * 1000)


def test_predict_with_zero_speed_stays_finite():
    ball = Ball(Position2D(30, 40), 0, 1.0)

    trajectory = ball.trajectory
    assert 0 < trajectory.duration < math.inf
    assert (trajectory.destination.x, trajectory.destination.y) == (30, 40)


def test_zero_speed_ball_does_not_move(scoreboard):
    ball = Ball(Position2D(30, 40), 0, 1.0)

    ball.update_position(50, [], scoreboard)

    assert (ball.position.x, ball.position.y) == (30, 40)
    assert scoreboard.sides == []


def test_velocity_follows_direction():
    ball = Ball(Position2D(50, 50), 10, math.pi / 2)

    assert ball.velocity.vx == pytest.approx(0, abs=1e-9)
    # Y grows toward the bottom of the arena
    assert ball.velocity.vy == pytest.approx(10)


def test_reflect_y_mirrors_direction():
    ball = Ball(Position2D(50, 50), 25, 1.0)

    ball.reflect(False, True)

    assert ball.direction == pytest.approx(2 * math.pi - 1.0)


def test_reflect_x_turns_around():
    ball = Ball(Position2D(50, 50), 25, 1.0)

    ball.reflect(True, False)

    assert ball.direction == pytest.approx(1.0 + math.pi)


def test_reflect_both_reverses_horizontal_motion_only():
    ball = Ball(Position2D(50, 50), 25, 0.5)
    vx, vy = ball.velocity.vx, ball.velocity.vy

    ball.reflect(True, True)

    assert ball.velocity.vx == pytest.approx(-vx)
    assert ball.velocity.vy == pytest.approx(vy)
    assert 0 <= ball.direction < 2 * math.pi


def test_top_border_reflects_downward(scoreboard):
    ball = Ball(Position2D(50, 10), 25, 3 * math.pi / 2)
    assert ball.velocity.vy < 0

    ball.update_position(ball.trajectory.duration, [], scoreboard)

    assert ball.position.y == 0
    assert ball.direction == pytest.approx(math.pi / 2)
    assert ball.velocity.vy > 0
    assert ball.trajectory.duration > 0
    assert ball.trajectory.elapsed == 0
    assert scoreboard.sides == []


def test_left_border_scores_for_right(scoreboard, rng):
    ball = Ball(Position2D(10, 50), 25, math.pi, rng=rng)

    ball.update_position(400, [], scoreboard)

    assert scoreboard.sides == [Side.RIGHT]
    assert (ball.position.x, ball.position.y) == (50, 50)
    assert ball.trajectory.duration > 0


def test_right_border_scores_for_left(scoreboard, rng):
    ball = Ball(Position2D(90, 50), 25, 0, rng=rng)

    ball.update_position(500, [], scoreboard)

    assert scoreboard.sides == [Side.LEFT]


def test_scoring_happens_once_per_crossing(scoreboard, rng):
    ball = Ball(Position2D(10, 50), 25, math.pi, rng=rng)

    # 100ms past the crossing is far too short to reach another border
    ball.update_position(500, [], scoreboard)

    assert scoreboard.sides == [Side.RIGHT]


def test_reset_recenters_ball(rng):
    ball = Ball(Position2D(10, 20), 25, 1.0, rng=rng)

    ball.reset()

    assert (ball.position.x, ball.position.y) == (50, 50)
    assert 0 <= ball.direction < 2 * math.pi
    assert ball.trajectory.elapsed == 0
    assert ball.trajectory.duration > 0


def test_paddle_bounces_ball_back(scoreboard):
    ball = Ball(Position2D(10, 50), 25, math.pi)

    ball.update_position(400, [left_paddle()], scoreboard)

    assert scoreboard.sides == []
    assert ball.velocity.vx > 0
    # bounced from x=10 and travelled 400ms back to the right
    assert ball.position.x == pytest.approx(20)
    assert ball.position.y == pytest.approx(50)


def test_ball_passes_a_paddle_that_is_elsewhere(scoreboard, rng):
    ball = Ball(Position2D(10, 50), 25, math.pi, rng=rng)

    ball.update_position(400, [left_paddle(y=0)], scoreboard)

    assert scoreboard.sides == [Side.RIGHT]


def test_missed_paddle_does_not_repredict(scoreboard):
    ball = Ball(Position2D(10, 50), 25, 0)
    before = ball.trajectory
    direction = ball.direction

    ball.update_position(100, [left_paddle()], scoreboard)

    assert ball.trajectory is before
    assert ball.direction == direction
    assert ball.trajectory.elapsed == pytest.approx(100)


def test_first_paddle_wins_the_tie():
    ball = Ball(Position2D(10, 50), 25, math.pi)
    first = left_paddle()
    second = left_paddle(y=46)

    hit = ball.find_collision(Position2D(10, 50), Position2D(0, 50), [first, second])

    assert hit is first


def test_no_collision_without_movement():
    ball = Ball(Position2D(0.5, 50), 25, math.pi)

    assert ball.find_collision(
        Position2D(0.5, 50), Position2D(0.5, 50), [left_paddle()]
    ) is None


def test_paddles_share_the_ball_sub_steps(scoreboard):
    ball = Ball(Position2D(50, 10), 25, 3 * math.pi / 2)
    paddle = RecordingPaddle(x=99.5, y=99)

    ball.update_position(1000, [paddle], scoreboard)

    assert paddle.steps[0] == pytest.approx(400)
    assert sum(paddle.steps) == pytest.approx(1000)


def test_single_sub_step_when_no_border_is_reached(scoreboard):
    ball = Ball(Position2D(50, 50), 25, 0)
    paddle = RecordingPaddle()

    ball.update_position(16, [paddle], scoreboard)

    assert paddle.steps == [16]
    assert ball.position.x == pytest.approx(50.4)


def test_touches_uses_the_radius():
    paddle = left_paddle()

    assert Ball(Position2D(1.4, 50), 25, 0, radius=1).touches(paddle)
    assert not Ball(Position2D(1.6, 50), 25, 0, radius=1).touches(paddle)


def test_negative_delta_time_is_ignored(scoreboard):
    ball = Ball(Position2D(50, 50), 25, 0)

    ball.update_position(-100, [], scoreboard)

    assert ball.trajectory.elapsed == 0
    assert (ball.position.x, ball.position.y) == (50, 50)
