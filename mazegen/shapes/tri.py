"""
Triangular rooms.

Rooms alternate between pointing down and pointing up; a room is *reversed*
(pointing up) when the sum of its column and row is odd. Each variant has its
own three walls, so the catalog holds six.
"""

import math
from typing import Optional, Tuple

from ..geometry.physical import PhysicalPos, Pos, partition
from ..geometry.wall import Wall, WallPos, link_walls, make_wall, wall_towards

# A span step angle
D = math.pi / 6.0

# The horizontal distance between the centres of two adjacent rooms
HORIZONTAL_MULTIPLICATOR = math.cos(D)

# The height of a row of rooms
VERTICAL_MULTIPLICATOR = 2.0 - 1.0 / 2.0

# The vertical offset of a room centre from the middle of its row
OFFSET = 1.0 / 4.0

LEFT0, RIGHT1, LEFT1, RIGHT0, UP, DOWN = range(6)

ALL: Tuple[Wall, ...] = (
    make_wall("tri:LEFT0", LEFT0, (-1, 0), (3 * D, 7 * D),
              [(-1, 0, DOWN), (-1, 1, RIGHT0), (0, 1, RIGHT1), (1, 1, UP), (1, 0, LEFT1)]),
    make_wall("tri:RIGHT1", RIGHT1, (1, 0), (9 * D, 13 * D),
              [(1, 0, UP), (1, -1, LEFT1), (0, -1, LEFT0), (-1, -1, DOWN), (-1, 0, RIGHT0)]),
    make_wall("tri:LEFT1", LEFT1, (-1, 0), (5 * D, 9 * D),
              [(-1, 0, LEFT0), (-2, 0, DOWN), (-2, 1, RIGHT0), (-1, 1, RIGHT1), (0, 1, UP)]),
    make_wall("tri:RIGHT0", RIGHT0, (1, 0), (11 * D, 15 * D),
              [(1, 0, RIGHT1), (2, 0, UP), (2, -1, LEFT1), (1, -1, LEFT0), (0, -1, DOWN)]),
    make_wall("tri:UP", UP, (0, -1), (7 * D, 11 * D),
              [(0, -1, LEFT1), (-1, -1, LEFT0), (-2, -1, DOWN), (-2, 0, RIGHT0), (-1, 0, RIGHT1)]),
    make_wall("tri:DOWN", DOWN, (0, 1), (1 * D, 5 * D),
              [(0, 1, RIGHT0), (1, 1, RIGHT1), (2, 1, UP), (2, 0, LEFT1), (1, 0, LEFT0)]),
)

# Walls of rooms pointing down
ALL0: Tuple[Wall, ...] = (ALL[LEFT0], ALL[RIGHT0], ALL[UP])

# Walls of rooms pointing up
ALL1: Tuple[Wall, ...] = (ALL[LEFT1], ALL[DOWN], ALL[RIGHT1])

link_walls(ALL0)
link_walls(ALL1)


def is_reversed(pos: Pos) -> bool:
    return (pos.col + pos.row) & 1 != 0


def back_index(index: int) -> int:
    return index ^ 0b0001


def opposite(wall_pos: WallPos) -> Optional[Wall]:
    # A room with an odd number of walls has no opposite wall
    return None


def walls(pos: Pos) -> Tuple[Wall, ...]:
    return ALL1 if is_reversed(pos) else ALL0


def center(pos: Pos) -> PhysicalPos:
    return PhysicalPos(
        (pos.col + 0.5) * HORIZONTAL_MULTIPLICATOR,
        (pos.row + 0.5) * VERTICAL_MULTIPLICATOR + (OFFSET if is_reversed(pos) else -OFFSET),
    )


def room_at(pos: PhysicalPos) -> Pos:
    row, rel_y = partition(pos.y / VERTICAL_MULTIPLICATOR)
    col, rel_x = partition(pos.x / HORIZONTAL_MULTIPLICATOR)

    # The slanted edges of the approximate room decide whether the point
    # belongs to one of its horizontal neighbours
    if is_reversed(Pos(col, row)):
        left_edge, right_edge = 0.5 - rel_y, 0.5 + rel_y
    else:
        left_edge, right_edge = rel_y - 0.5, 1.5 - rel_y

    if rel_x < left_edge:
        col -= 1
    elif rel_x > right_edge:
        col += 1
    return Pos(col, row)


def wall_pos_at(pos: PhysicalPos) -> WallPos:
    room = room_at(pos)
    c = center(room)
    return WallPos(room, wall_towards(walls(room), pos.x - c.x, pos.y - c.y))


def minimal_dimensions(width: float, height: float) -> Tuple[int, int]:
    # A row of n rooms is n + 1 half edges wide
    return (
        int(math.ceil(max(width, 2.0 * HORIZONTAL_MULTIPLICATOR) / HORIZONTAL_MULTIPLICATOR)) - 1,
        int(math.ceil(max(height, VERTICAL_MULTIPLICATOR) / VERTICAL_MULTIPLICATOR)),
    )
