"""
Hexagonal rooms.

Hexagons stand on a corner, so every row is shifted half a room relative to
its neighbours: even rows are shifted to the right. The catalog holds one
set of six walls for even rows (suffix 0) and one for odd rows (suffix 1),
indexed so that a wall and its back differ only in the lowest bit.
"""

import math
from typing import Optional, Tuple

from ..geometry.physical import PhysicalPos, Pos, partition
from ..geometry.wall import Wall, WallPos, link_walls, make_wall, wall_towards

# A span step angle
D = math.pi / 6.0

COS_30 = math.cos(D)
SIN_30 = 0.5

# The distance between the centres of two adjacent rooms in the same row
HORIZONTAL_MULTIPLICATOR = 2.0 * COS_30

# The distance between two rows
VERTICAL_MULTIPLICATOR = 2.0 - SIN_30

# The ratio of row height to the height of the pointed top of a room
TOP_HEIGHT = 1.5

(LEFT0, RIGHT0, LEFT1, RIGHT1,
 UP_LEFT0, DOWN_RIGHT1, UP_LEFT1, DOWN_RIGHT0,
 UP_RIGHT0, DOWN_LEFT1, UP_RIGHT1, DOWN_LEFT0) = range(12)

ALL: Tuple[Wall, ...] = (
    make_wall("hex:LEFT0", LEFT0, (-1, 0), (5 * D, 7 * D),
              [(-1, 0, DOWN_RIGHT0), (0, 1, UP_RIGHT1)]),
    make_wall("hex:RIGHT0", RIGHT0, (1, 0), (11 * D, 13 * D),
              [(1, 0, UP_LEFT0), (1, -1, DOWN_LEFT1)]),
    make_wall("hex:LEFT1", LEFT1, (-1, 0), (5 * D, 7 * D),
              [(-1, 0, DOWN_RIGHT1), (-1, 1, UP_RIGHT0)]),
    make_wall("hex:RIGHT1", RIGHT1, (1, 0), (11 * D, 13 * D),
              [(1, 0, UP_LEFT1), (0, -1, DOWN_LEFT0)]),
    make_wall("hex:UP_LEFT0", UP_LEFT0, (0, -1), (7 * D, 9 * D),
              [(0, -1, DOWN_LEFT1), (-1, 0, UP_RIGHT0)]),
    make_wall("hex:DOWN_RIGHT1", DOWN_RIGHT1, (0, 1), (1 * D, 3 * D),
              [(0, 1, UP_RIGHT0), (1, 0, LEFT1)]),
    make_wall("hex:UP_LEFT1", UP_LEFT1, (-1, -1), (7 * D, 9 * D),
              [(-1, -1, DOWN_LEFT0), (-1, 0, RIGHT1)]),
    make_wall("hex:DOWN_RIGHT0", DOWN_RIGHT0, (1, 1), (1 * D, 3 * D),
              [(1, 1, UP_RIGHT1), (1, 0, LEFT0)]),
    make_wall("hex:UP_RIGHT0", UP_RIGHT0, (1, -1), (9 * D, 11 * D),
              [(1, -1, LEFT1), (0, -1, DOWN_RIGHT1)]),
    make_wall("hex:DOWN_LEFT1", DOWN_LEFT1, (-1, 1), (3 * D, 5 * D),
              [(-1, 1, RIGHT0), (0, 1, UP_LEFT0)]),
    make_wall("hex:UP_RIGHT1", UP_RIGHT1, (0, -1), (9 * D, 11 * D),
              [(0, -1, LEFT0), (-1, -1, DOWN_RIGHT0)]),
    make_wall("hex:DOWN_LEFT0", DOWN_LEFT0, (0, 1), (3 * D, 5 * D),
              [(0, 1, RIGHT1), (1, 1, UP_LEFT1)]),
)

# Walls of rooms on even rows
ALL0: Tuple[Wall, ...] = tuple(ALL[i] for i in (
    LEFT0, UP_LEFT0, UP_RIGHT0, RIGHT0, DOWN_RIGHT0, DOWN_LEFT0))

# Walls of rooms on odd rows
ALL1: Tuple[Wall, ...] = tuple(ALL[i] for i in (
    LEFT1, UP_LEFT1, UP_RIGHT1, RIGHT1, DOWN_RIGHT1, DOWN_LEFT1))

link_walls(ALL0)
link_walls(ALL1)


def back_index(index: int) -> int:
    return index ^ 0b0001


def opposite(wall_pos: WallPos) -> Optional[Wall]:
    index = wall_pos.wall.index

    # The left and right walls are back-to-back in the catalog
    if index & ~0b0011 == 0:
        return ALL[index ^ 0b0001]
    return ALL[index ^ 0b0011]


def walls(pos: Pos) -> Tuple[Wall, ...]:
    return ALL1 if pos.row & 1 == 1 else ALL0


def center(pos: Pos) -> PhysicalPos:
    return PhysicalPos(
        (pos.col + (0.5 if pos.row & 1 == 1 else 1.0)) * HORIZONTAL_MULTIPLICATOR,
        pos.row * VERTICAL_MULTIPLICATOR + 1.0,
    )


def room_at(pos: PhysicalPos) -> Pos:
    row, rel_y = partition(pos.y / VERTICAL_MULTIPLICATOR)
    odd_row = row & 1 == 1
    col, rel_x = partition(pos.x / HORIZONTAL_MULTIPLICATOR - (0.0 if odd_row else 0.5))

    # Points above the slanted top edges belong to the previous row
    past_center_x = rel_x > 0.5
    corner = abs(rel_x - 0.5) / TOP_HEIGHT > rel_y
    past_center_y = rel_y > 0.5

    if corner and odd_row and not past_center_x:
        col -= 1
    elif corner and not odd_row and past_center_x:
        col += 1

    if corner:
        row += 1 if past_center_y else -1
    return Pos(col, row)


def wall_pos_at(pos: PhysicalPos) -> WallPos:
    room = room_at(pos)
    c = center(room)
    return WallPos(room, wall_towards(walls(room), pos.x - c.x, pos.y - c.y))


def minimal_dimensions(width: float, height: float) -> Tuple[int, int]:
    rows = int(math.ceil(max(height, VERTICAL_MULTIPLICATOR) / VERTICAL_MULTIPLICATOR))

    # With more than one row, the shifted rows add half a room of width
    hoffset = 0.5 * HORIZONTAL_MULTIPLICATOR if rows > 1 else 0.0
    cols = int(math.ceil(max(width - hoffset, HORIZONTAL_MULTIPLICATOR) / HORIZONTAL_MULTIPLICATOR))
    return cols, rows
