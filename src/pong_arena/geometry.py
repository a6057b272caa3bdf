"""
Geometry and collision helpers for the arena.

All functions are pure and work in arena percentages.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D


class Segment(NamedTuple):
    """Line segment between two points."""

    start: Position2D
    end: Position2D


class Circle(NamedTuple):
    """Circle given by its center and radius."""

    x: float
    y: float
    radius: float


@dataclass
class Box:
    """
    Axis-aligned box.

    :ivar left (float): Smallest X coordinate.
    :ivar top (float): Smallest Y coordinate.
    :ivar right (float): Largest X coordinate.
    :ivar bottom (float): Largest Y coordinate.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_position_size(cls, position: Position2D, size: Size2D) -> Box:
        """Build a box from a top-left position and a size."""
        return cls(
            left=position.x,
            top=position.y,
            right=position.x + size.width,
            bottom=position.y + size.height,
        )

    @property
    def width(self) -> float:
        """Width of the box."""
        return abs(self.right - self.left)

    @property
    def height(self) -> float:
        """Height of the box."""
        return abs(self.bottom - self.top)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def segments_intersect(
    a: Position2D, b: Position2D, c: Position2D, d: Position2D
) -> bool:
    """
    Whether segment AB intersects segment CD, touching included.

    Parallel segments are reported as intersecting only when both
    numerators vanish, which also holds for collinear segments that do not
    overlap at all. That case is an accepted approximation.

    :param a: Start of the first segment.
    :type a: Position2D

    :param b: End of the first segment.
    :type b: Position2D

    :param c: Start of the second segment.
    :type c: Position2D

    :param d: End of the second segment.
    :type d: Position2D

    :return: True if the segments intersect.
    :rtype: bool
    """
    denominator = (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)
    numerator_r = (a.y - c.y) * (d.x - c.x) - (a.x - c.x) * (d.y - c.y)
    numerator_s = (a.y - c.y) * (b.x - a.x) - (a.x - c.x) * (b.y - a.y)

    if denominator == 0:
        return numerator_r == 0 and numerator_s == 0

    r = numerator_r / denominator
    s = numerator_s / denominator

    return 0 <= r <= 1 and 0 <= s <= 1


def circle_intersects_box(circle: Circle, box: Box) -> bool:
    """
    Whether a circle touches or overlaps a box.

    The circle center is clamped to the box, and the distance to that
    closest point is compared against the radius.
    """
    test_x = clamp(circle.x, box.left, box.right)
    test_y = clamp(circle.y, box.top, box.bottom)

    distance = math.hypot(circle.x - test_x, circle.y - test_y)
    return distance <= circle.radius


def rectangle_to_segments(
    box: Box,
) -> tuple[Segment, Segment, Segment, Segment]:
    """
    Decompose a box into its boundary segments.

    :return: Left, top, right and bottom segments, in that order.
    :rtype: tuple[Segment, Segment, Segment, Segment]
    """
    top_left = Position2D(box.left, box.top)
    top_right = Position2D(box.right, box.top)
    bottom_right = Position2D(box.right, box.bottom)
    bottom_left = Position2D(box.left, box.bottom)

    return (
        Segment(bottom_left, top_left),
        Segment(top_left, top_right),
        Segment(top_right, bottom_right),
        Segment(bottom_right, bottom_left),
    )


def segment_intersects_box(segment: Segment, box: Box) -> bool:
    """Whether a segment crosses or touches any edge of a box."""
    return any(
        segments_intersect(segment.start, segment.end, edge.start, edge.end)
        for edge in rectangle_to_segments(box)
    )
