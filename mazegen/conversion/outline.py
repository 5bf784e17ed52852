"""
Vector outlines of maze walls.

Walks every closed wall of the carved part of a maze exactly once and
produces a list of move/line drawing operations, joining walls that share a
corner into continuous polylines. ``to_path_d`` renders the operations as
the ``d`` attribute of an SVG path element.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from ..geometry.physical import PhysicalPos, Pos
from ..geometry.wall import WallPos
from ..layout.matrix import Matrix

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    MOVE = "M"
    LINE = "L"


@dataclass(frozen=True)
class Operation:
    """A single drawing operation to an absolute position."""
    kind: OperationKind
    pos: PhysicalPos

    def command(self, precision: int = 4) -> str:
        return f"{self.kind.value}{round(self.pos.x, precision):g} {round(self.pos.y, precision):g}"


class Visitor:
    """
    Tracks which walls have been drawn.

    A wall and its back are always marked together. Only rooms reached by an
    initialization method are scanned for undrawn walls.
    """

    def __init__(self, maze: Maze):
        self.maze = maze
        self.walls = Matrix(maze.width, maze.height, 0, dtype=np.int64)
        self.index = 0

    def visit(self, wall_pos: WallPos):
        for pos, wall in (wall_pos, self.maze.back(wall_pos)):
            if self.walls.is_inside(pos):
                self.walls[pos] |= wall.mask

    def visited(self, wall_pos: WallPos) -> bool:
        mask = self.walls.get(wall_pos.pos, 0)
        return mask & wall_pos.wall.mask != 0

    def next_wall(self) -> Optional[WallPos]:
        """The first closed, undrawn wall of a carved room, in row-major order."""
        width = self.maze.width
        while self.index < width * self.maze.height:
            pos = Pos(self.index % width, self.index // width)
            if self.maze.room(pos).visited:
                for wall_pos in self.maze.wall_positions(pos):
                    if not self.maze.is_open(wall_pos) and not self.visited(wall_pos):
                        return wall_pos
            self.index += 1
        return None


def _midpoint(maze: Maze, wall_pos: WallPos) -> PhysicalPos:
    start, end = maze.corners(wall_pos)
    return (start + end) * 0.5


def _corners_from(maze: Maze, wall_pos: WallPos,
                  origin: PhysicalPos) -> Tuple[PhysicalPos, PhysicalPos]:
    """The corners of a wall, nearest to ``origin`` first."""
    first, second = maze.corners(wall_pos)
    if (first - origin).value() < (second - origin).value():
        return first, second
    return second, first


def outline(maze: Maze) -> List[Operation]:
    """
    Build the drawing operations tracing every closed wall of a maze.

    Args:
        maze: The maze to outline

    Returns:
        Operations forming one polyline per run of connected walls; empty
        for a maze never initialized
    """
    visitor = Visitor(maze)
    operations: List[Operation] = []
    polylines = 0

    while True:
        start = visitor.next_wall()
        if start is None:
            break
        polylines += 1

        for i, (current, following) in enumerate(maze.follow_wall(start)):
            if visitor.visited(current):
                break
            visitor.visit(current)

            # Start at the corner away from the next wall
            if i == 0:
                if following is not None:
                    _, pos = _corners_from(maze, current, _midpoint(maze, following))
                else:
                    pos, _ = maze.corners(current)
                operations.append(Operation(OperationKind.MOVE, pos))

            _, pos = _corners_from(maze, current, operations[-1].pos)
            operations.append(Operation(OperationKind.LINE, pos))

            # Walls beyond the edge belong to no room
            if following is not None and not maze.is_inside(following.pos):
                break

    logger.debug("Outlined %r with %d polylines", maze, polylines)
    return operations


def to_path_d(maze: Maze, precision: int = 4) -> str:
    """The outline of a maze as SVG path data."""
    return ' '.join(operation.command(precision) for operation in outline(maze))
