"""
Light and dark color palettes.
"""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """
    Colors used to draw a match.

    :ivar name (str): Palette name shown in menus.
    :ivar background (Color): Arena background.
    :ivar paddle (Color): Paddle fill.
    :ivar ball (Color): Ball fill.
    :ivar text (Color): Score and label color.
    :ivar line (Color): Center line color.
    """

    name: str
    background: Color
    paddle: Color
    ball: Color
    text: Color
    line: Color


DARK_PALETTE = Palette(
    name="dark",
    background=(20, 20, 24),
    paddle=(240, 240, 240),
    ball=(255, 210, 90),
    text=(200, 200, 200),
    line=(70, 70, 80),
)

LIGHT_PALETTE = Palette(
    name="light",
    background=(236, 236, 230),
    paddle=(30, 30, 36),
    ball=(200, 60, 60),
    text=(60, 60, 70),
    line=(180, 180, 175),
)

PALETTES = {p.name: p for p in (DARK_PALETTE, LIGHT_PALETTE)}


def palette_for(name: str | None) -> Palette:
    """Palette by name, dark when unknown."""
    return PALETTES.get((name or "").lower(), DARK_PALETTE)


def toggled(name: str | None) -> str:
    """Name of the other palette."""
    return "light" if palette_for(name).name == "dark" else "dark"
