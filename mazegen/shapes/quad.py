"""
Square rooms.

Every room has the same four walls. Rooms are laid out on a regular grid
where adjacent centres are ``MULTIPLICATOR`` apart, which places every wall
corner at unit distance from its room centre.
"""

import math
from typing import Optional, Tuple

from ..geometry.physical import PhysicalPos, Pos
from ..geometry.wall import Wall, WallPos, link_walls, make_wall

# A span step angle
D = math.pi / 4.0

# The distance between the centres of two adjacent rooms
MULTIPLICATOR = 2.0 / math.sqrt(2.0)

LEFT, UP, RIGHT, DOWN = range(4)

ALL: Tuple[Wall, ...] = (
    make_wall("quad:LEFT", LEFT, (-1, 0), (3 * D, 5 * D),
              [(-1, 0, DOWN), (-1, 1, RIGHT), (0, 1, UP)]),
    make_wall("quad:UP", UP, (0, -1), (5 * D, 7 * D),
              [(0, -1, LEFT), (-1, -1, DOWN), (-1, 0, RIGHT)]),
    make_wall("quad:RIGHT", RIGHT, (1, 0), (7 * D, 1 * D),
              [(1, 0, UP), (1, -1, LEFT), (0, -1, DOWN)]),
    make_wall("quad:DOWN", DOWN, (0, 1), (1 * D, 3 * D),
              [(0, 1, RIGHT), (1, 1, UP), (1, 0, LEFT)]),
)

link_walls(ALL)


def back_index(index: int) -> int:
    return index ^ 0b0010


def opposite(wall_pos: WallPos) -> Optional[Wall]:
    return ALL[(wall_pos.wall.index + len(ALL) // 2) % len(ALL)]


def walls(pos: Pos) -> Tuple[Wall, ...]:
    return ALL


def center(pos: Pos) -> PhysicalPos:
    return PhysicalPos((pos.col + 0.5) * MULTIPLICATOR, (pos.row + 0.5) * MULTIPLICATOR)


def room_at(pos: PhysicalPos) -> Pos:
    return Pos(math.floor(pos.x / MULTIPLICATOR), math.floor(pos.y / MULTIPLICATOR))


def wall_pos_at(pos: PhysicalPos) -> WallPos:
    room = room_at(pos)
    c = center(room)
    dx, dy = pos.x - c.x, pos.y - c.y

    # The diagonals through the centre separate the four walls
    if dx > dy:
        wall = ALL[RIGHT] if dy > -dx else ALL[UP]
    else:
        wall = ALL[DOWN] if dy > -dx else ALL[LEFT]
    return WallPos(room, wall)


def minimal_dimensions(width: float, height: float) -> Tuple[int, int]:
    return (
        int(math.ceil(max(width, MULTIPLICATOR) / MULTIPLICATOR)),
        int(math.ceil(max(height, MULTIPLICATOR) / MULTIPLICATOR)),
    )
