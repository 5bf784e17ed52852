"""
Wall descriptors shared by all room shapes.

Every shape owns a static catalog of ``Wall`` instances. A wall records the
direction to the room on its other side, the angular span it covers as seen
from the room centre, and the walls meeting it at its first corner. The
catalogs are built once at import time and never mutated afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import total_ordering
from typing import NamedTuple, Optional, Sequence, Tuple

from .physical import Pos

TAU = 2.0 * math.pi

# Tolerance used when matching span end points between walls
ANGLE_EPSILON = 1e-6


def normalized_angle(a: float) -> float:
    """Maps an angle in radians to the range [0, 2π)."""
    result = a % TAU
    # a tiny negative angle rounds up to exactly TAU
    return 0.0 if result >= TAU else result


@dataclass(frozen=True)
class Angle:
    """An angle with its precomputed cosine and sine."""
    a: float
    dx: float
    dy: float

    @classmethod
    def of(cls, a: float) -> Angle:
        return cls(a, math.cos(a), math.sin(a))


@total_ordering
@dataclass(eq=False)
class Wall:
    """
    A wall slot of a room shape.

    Two walls are equal when they share index and direction; the name and
    span are descriptive only. Walls are ordered by index.
    """
    name: str
    index: int
    dir: Tuple[int, int]
    span: Tuple[Angle, Angle]
    corner_wall_offsets: Tuple[Tuple[int, int, int], ...]
    previous: Optional[Wall] = field(default=None, repr=False)
    next: Optional[Wall] = field(default=None, repr=False)

    @property
    def mask(self) -> int:
        return 1 << self.index

    def in_span(self, angle: float) -> bool:
        """Whether an angle falls inside the half open span of this wall."""
        a = normalized_angle(angle)
        start, end = self.span[0].a, self.span[1].a
        if start < end:
            return start <= a < end
        return a >= start or a < end

    def __eq__(self, other) -> bool:
        if not isinstance(other, Wall):
            return NotImplemented
        return self.index == other.index and self.dir == other.dir

    def __lt__(self, other: Wall) -> bool:
        if not isinstance(other, Wall):
            return NotImplemented
        return self.index < other.index

    def __hash__(self) -> int:
        return hash((self.index, self.dir))

    def __str__(self) -> str:
        return self.name


class WallPos(NamedTuple):
    """A wall in a specific room."""
    pos: Pos
    wall: Wall


def make_wall(name: str, index: int, dir: Tuple[int, int], span: Tuple[float, float],
              corner_wall_offsets: Sequence[Tuple[int, int, int]]) -> Wall:
    """Builds a wall, normalizing both span angles into [0, 2π)."""
    return Wall(
        name=name,
        index=index,
        dir=dir,
        span=(Angle.of(normalized_angle(span[0])), Angle.of(normalized_angle(span[1]))),
        corner_wall_offsets=tuple(corner_wall_offsets),
    )


def wall_towards(walls: Sequence[Wall], dx: float, dy: float) -> Wall:
    """Returns the wall whose span contains the direction (dx, dy)."""
    a = math.atan2(dy, dx)
    for wall in walls:
        if wall.in_span(a):
            return wall
    raise ValueError(f"Walls do not cover angle {a}")


def _same_angle(a: float, b: float) -> bool:
    d = abs(normalized_angle(a) - normalized_angle(b))
    return d < ANGLE_EPSILON or abs(d - TAU) < ANGLE_EPSILON


def link_walls(walls: Sequence[Wall]) -> None:
    """
    Links the walls of one room variant clockwise.

    ``next`` is the wall whose span starts where this one ends, ``previous``
    the wall whose span ends where this one starts.

    Raises:
        ValueError: If the spans do not form a closed ring
    """
    for wall in walls:
        following = [w for w in walls if _same_angle(w.span[0].a, wall.span[1].a)]
        if len(following) != 1:
            raise ValueError(f"Wall {wall.name} has no unique clockwise neighbour")
        wall.next = following[0]
        following[0].previous = wall
