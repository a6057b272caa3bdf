"""
Entities package for Pong Arena.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import BotPaddle, Paddle, PaddleBody, PlayerPaddle

__all__ = [
    "Ball",
    "BotPaddle",
    "Paddle",
    "PaddleBody",
    "PlayerPaddle",
]
