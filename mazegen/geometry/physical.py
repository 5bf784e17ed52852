"""
Grid and physical coordinates.

Rooms are addressed by a discrete ``Pos`` (column, row). When a maze is laid
out in the plane, room centres and wall corners are ``PhysicalPos`` values,
and rectangular regions of the plane are ``ViewBox`` values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, order=True)
class Pos:
    """A room position in a maze grid, ordered by (col, row)."""
    col: int
    row: int

    def __add__(self, other: Union[Pos, Tuple[int, int]]) -> Pos:
        dcol, drow = _delta(other)
        return Pos(self.col + dcol, self.row + drow)

    def __sub__(self, other: Union[Pos, Tuple[int, int]]) -> Pos:
        dcol, drow = _delta(other)
        return Pos(self.col - dcol, self.row - drow)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.col, self.row)

    def manhattan(self, other: Pos) -> int:
        return abs(self.col - other.col) + abs(self.row - other.row)


def _delta(other) -> Tuple[int, int]:
    if isinstance(other, Pos):
        return other.col, other.row
    dcol, drow = other
    return dcol, drow


@dataclass(frozen=True)
class PhysicalPos:
    """A point in the plane the maze is laid out in."""
    x: float
    y: float

    def __add__(self, other) -> PhysicalPos:
        # An Angle contributes its unit vector
        if hasattr(other, 'dx'):
            return PhysicalPos(self.x + other.dx, self.y + other.dy)
        return PhysicalPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: PhysicalPos) -> PhysicalPos:
        return PhysicalPos(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> PhysicalPos:
        return PhysicalPos(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def value(self) -> float:
        """Squared distance from the origin."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.value())


@dataclass(frozen=True)
class ViewBox:
    """
    An axis aligned rectangle described by one corner and its size.

    The remaining corners are found by adding ``width`` and ``height`` to the
    corner coordinates.
    """
    corner: PhysicalPos
    width: float
    height: float

    @classmethod
    def centered_at(cls, pos: PhysicalPos, width: float, height: float) -> ViewBox:
        return cls(PhysicalPos(pos.x - 0.5 * width, pos.y - 0.5 * height), width, height)

    @classmethod
    def from_points(cls, points) -> ViewBox:
        """Returns the smallest view box containing every point."""
        points = list(points)
        if not points:
            raise ValueError("Cannot build a view box from no points")
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return cls(PhysicalPos(min_x, min_y), max_x - min_x, max_y - min_y)

    @property
    def right(self) -> float:
        return self.corner.x + self.width

    @property
    def bottom(self) -> float:
        return self.corner.y + self.height

    def tuple(self) -> Tuple[float, float, float, float]:
        return (self.corner.x, self.corner.y, self.width, self.height)

    def expand(self, d: float) -> ViewBox:
        return ViewBox(
            PhysicalPos(self.corner.x - d, self.corner.y - d),
            self.width + 2.0 * d,
            self.height + 2.0 * d,
        )

    def center(self) -> PhysicalPos:
        return PhysicalPos(self.corner.x + 0.5 * self.width, self.corner.y + 0.5 * self.height)

    def contains(self, pos: PhysicalPos) -> bool:
        """Whether a point lies inside this view box, edges included."""
        return (self.corner.x <= pos.x <= self.right
                and self.corner.y <= pos.y <= self.bottom)

    def union(self, other: ViewBox) -> ViewBox:
        left = min(self.corner.x, other.corner.x)
        top = min(self.corner.y, other.corner.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return ViewBox(PhysicalPos(left, top), right - left, bottom - top)

    def split_vertical(self, x: float) -> Tuple[ViewBox, ViewBox]:
        """Splits along the vertical line at ``x``; returns (left, right)."""
        left_width = x - self.corner.x
        return (
            ViewBox(self.corner, left_width, self.height),
            ViewBox(PhysicalPos(x, self.corner.y), self.width - left_width, self.height),
        )

    def split_horizontal(self, y: float) -> Tuple[ViewBox, ViewBox]:
        """Splits along the horizontal line at ``y``; returns (top, bottom)."""
        top_height = y - self.corner.y
        return (
            ViewBox(self.corner, self.width, top_height),
            ViewBox(PhysicalPos(self.corner.x, y), self.width, self.height - top_height),
        )

    def __mul__(self, factor: float) -> ViewBox:
        return ViewBox(self.corner * factor, self.width * factor, self.height * factor)

    __rmul__ = __mul__


def partition(x: float) -> Tuple[int, float]:
    """Splits a value into its integral floor and the fractional remainder."""
    whole = math.floor(x)
    return int(whole), x - whole
