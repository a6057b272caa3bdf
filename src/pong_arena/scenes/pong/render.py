"""
Drawing in arena percentages on top of the mini-arcade-core backend.
"""

from __future__ import annotations

from mini_arcade_core.backend import Backend
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from pong_arena.constants import ARENA_MAX
from pong_arena.theme import Color


class PercentRenderer:
    """
    Converts arena percentages into viewport pixels.

    Only axis-aligned segments are supported, which is all the arena needs.
    """

    def __init__(self, backend: Backend, viewport: tuple[float, float]):
        """
        :param backend: Backend that does the actual drawing.
        :type backend: Backend

        :param viewport: Viewport size in pixels (width, height).
        :type viewport: tuple[float, float]
        """
        self.backend = backend
        self.viewport = viewport

    def to_pixels(self, x: float, y: float) -> tuple[int, int]:
        """Pixel coordinates of an arena point."""
        vw, vh = self.viewport
        return int(x * vw / ARENA_MAX), int(y * vh / ARENA_MAX)

    def clear(self, color: Color):
        """Fill the whole viewport."""
        vw, vh = self.viewport
        self.backend.render.draw_rect(0, 0, int(vw), int(vh), color=color)

    def rectangle(self, position: Position2D, size: Size2D, color: Color):
        """Draw a box given its top-left corner and size."""
        x, y = self.to_pixels(position.x, position.y)
        w, h = self.to_pixels(size.width, size.height)
        self.backend.render.draw_rect(x, y, max(1, w), max(1, h), color=color)

    def circle(self, position: Position2D, radius: float, color: Color):
        """Draw a ball-sized square centered on ``position``."""
        vw, vh = self.viewport
        side = max(2, int(2 * radius * min(vw, vh) / ARENA_MAX))
        x, y = self.to_pixels(position.x, position.y)
        self.backend.render.draw_rect(
            x - side // 2, y - side // 2, side, side, color=color
        )

    def segment(
        self,
        start: Position2D,
        end: Position2D,
        color: Color,
        thickness: int = 2,
    ):
        """Draw a horizontal or vertical segment."""
        x0, y0 = self.to_pixels(min(start.x, end.x), min(start.y, end.y))
        x1, y1 = self.to_pixels(max(start.x, end.x), max(start.y, end.y))
        self.backend.render.draw_rect(
            x0 - thickness // 2,
            y0 - thickness // 2,
            max(thickness, x1 - x0),
            max(thickness, y1 - y0),
            color=color,
        )

    def text(
        self,
        position: Position2D,
        contents: str,
        color: Color,
        *,
        centered: bool = False,
    ):
        """Draw text anchored at ``position``."""
        x, y = self.to_pixels(position.x, position.y)
        if centered:
            width, _ = self.backend.text.measure(contents)
            x -= width // 2
        self.backend.text.draw(x, y, contents, color=color)
