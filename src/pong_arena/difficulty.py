"""
Difficulty presets for the CPU paddle.
"""

from __future__ import annotations

from enum import Enum

from pong_arena.controllers.cpu import BotConfig


class Difficulty(str, Enum):
    """Difficulty levels, ordered from easiest to hardest."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    EXPERT = "expert"


DIFFICULTY_PRESETS: dict[str, BotConfig] = {
    Difficulty.EASY.value: BotConfig(inaccuracy=10.0),
    Difficulty.NORMAL.value: BotConfig(inaccuracy=7.0),
    Difficulty.HARD.value: BotConfig(inaccuracy=4.0),
    Difficulty.EXPERT.value: BotConfig(inaccuracy=1.0),
}

DIFFICULTY_LEVELS = list(DIFFICULTY_PRESETS.keys())
DEFAULT_DIFFICULTY = Difficulty.NORMAL.value


def normalize(name: str | None) -> str:
    """Known level name for ``name``, falling back to the default."""
    if name is None:
        return DEFAULT_DIFFICULTY
    name = str(getattr(name, "value", name)).lower()
    return name if name in DIFFICULTY_PRESETS else DEFAULT_DIFFICULTY


def preset_for(name: str | None) -> BotConfig:
    """Fresh copy of the CPU settings for a level."""
    preset = DIFFICULTY_PRESETS[normalize(name)]
    return BotConfig(
        inaccuracy=preset.inaccuracy,
        center_duration=preset.center_duration,
    )


def next_level(name: str | None) -> str:
    """One level harder, staying on the hardest one."""
    idx = DIFFICULTY_LEVELS.index(normalize(name))
    return DIFFICULTY_LEVELS[min(idx + 1, len(DIFFICULTY_LEVELS) - 1)]


def previous_level(name: str | None) -> str:
    """One level easier, staying on the easiest one."""
    idx = DIFFICULTY_LEVELS.index(normalize(name))
    return DIFFICULTY_LEVELS[max(idx - 1, 0)]


def cycle(name: str | None) -> str:
    """Next level, wrapping around to the easiest one."""
    idx = DIFFICULTY_LEVELS.index(normalize(name))
    return DIFFICULTY_LEVELS[(idx + 1) % len(DIFFICULTY_LEVELS)]
