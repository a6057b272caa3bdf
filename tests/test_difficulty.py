from __future__ import annotations

import pytest

from pong_arena import difficulty as levels
from pong_arena.config import SimulationConfig
from pong_arena.difficulty import DIFFICULTY_PRESETS, Difficulty
from pong_arena.theme import DARK_PALETTE, LIGHT_PALETTE, palette_for, toggled


def test_presets_get_harder():
    inaccuracies = [DIFFICULTY_PRESETS[name].inaccuracy for name in levels.DIFFICULTY_LEVELS]

    assert inaccuracies == sorted(inaccuracies, reverse=True)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("hard", "hard"),
        ("HARD", "hard"),
        (Difficulty.EASY, "easy"),
        (None, "normal"),
        ("impossible", "normal"),
    ],
)
def test_normalize(name, expected):
    assert levels.normalize(name) == expected


def test_next_and_previous_are_clamped():
    assert levels.next_level("normal") == "hard"
    assert levels.next_level("expert") == "expert"
    assert levels.previous_level("normal") == "easy"
    assert levels.previous_level("easy") == "easy"


def test_cycle_wraps_around():
    assert levels.cycle("hard") == "expert"
    assert levels.cycle("expert") == "easy"


def test_preset_for_returns_a_copy():
    preset = levels.preset_for("easy")
    preset.inaccuracy = 0

    assert DIFFICULTY_PRESETS["easy"].inaccuracy != 0


def test_simulation_config_for_difficulty():
    config = SimulationConfig.for_difficulty("HARD", ball_speed=40)

    assert config.difficulty == "hard"
    assert config.ball_speed == 40
    assert config.bot_config().inaccuracy == DIFFICULTY_PRESETS["hard"].inaccuracy
    assert config.bot_config().center_duration == config.bot_center_duration


def test_theme_toggle():
    assert palette_for("light") is LIGHT_PALETTE
    assert palette_for("unknown") is DARK_PALETTE
    assert toggled("dark") == "light"
    assert toggled("light") == "dark"
    assert toggled(None) == "light"
