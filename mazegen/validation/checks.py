"""
Structural checks of a maze.

``validate_maze`` verifies the wall symmetry invariant and reports on the
connectivity of the rooms selected by an optional filter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from ..geometry.physical import Pos
from ..layout import matrix
from ..layout.matrix import Matrix
from .core import ValidationResult
from .rules import CONN_001, CONN_002, CONN_003, WALL_001, WALL_002, WALL_003

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


def check_walls(maze: Maze) -> ValidationResult:
    """Checks that every wall agrees with its back and belongs to its room."""
    result = ValidationResult()
    for pos in maze.positions():
        room = maze.room(pos)

        own_mask = 0
        for wall_pos in maze.wall_positions(pos):
            own_mask |= wall_pos.wall.mask
            back = maze.back(wall_pos)
            is_open = maze.is_open(wall_pos)
            if not maze.is_inside(back.pos):
                if is_open:
                    result.add_issue(WALL_003.issue(str(pos), wall=wall_pos.wall))
            elif is_open != maze.is_open(back):
                result.add_issue(WALL_001.issue(
                    str(pos), wall=wall_pos.wall,
                    state="open" if is_open else "closed",
                    back=f"{back.wall} of {back.pos}"))

        if room.walls & ~own_mask:
            result.add_issue(WALL_002.issue(str(pos), mask=room.walls & ~own_mask))
    return result


def check_connectivity(maze: Maze, candidates: Matrix) -> ValidationResult:
    """Counts areas, unvisited rooms and loops among the candidate rooms."""
    result = ValidationResult()

    def is_candidate(pos: Pos) -> bool:
        return bool(candidates.get(pos, False))

    areas = Matrix(maze.width, maze.height, 0, dtype=np.int64)
    count = 0
    rooms = 0
    doors = 0
    unvisited = 0
    for pos in maze.positions():
        if not candidates[pos]:
            continue
        rooms += 1
        if not maze.room(pos).visited:
            unvisited += 1
        doors += sum(1 for n in maze.neighbors(pos) if is_candidate(n))
        if areas[pos] == 0:
            count += 1
            areas.fill(pos, count, lambda p: (n for n in maze.neighbors(p) if is_candidate(n)))

    if count > 1:
        result.add_issue(CONN_001.issue(count=count))
    if unvisited:
        result.add_issue(CONN_002.issue(count=unvisited))

    # Every door was counted from both sides
    loops = doors // 2 - rooms + count
    if loops > 0:
        result.add_issue(CONN_003.issue(count=loops))
    return result


def validate_maze(maze: Maze,
                  filter: Optional[Callable[[Pos], bool]] = None) -> ValidationResult:
    """
    Validate a maze.

    Args:
        maze: The maze to check
        filter: Selects the rooms expected to form the carved area; all rooms
            when omitted

    Returns:
        The combined result of all checks
    """
    _, candidates = matrix.filter(
        maze.width, maze.height, filter if filter is not None else (lambda pos: True))

    result = check_walls(maze).merge(check_connectivity(maze, candidates))
    logger.debug("Validated %r: %d issue(s), passed=%s",
                 maze, len(result.issues), result.passed)
    return result
