"""
Braid initialization.

Starts from a cleared area and closes walls in random order as long as
neither room would become a dead end, producing a maze with loops and
no dead ends. A final pass reconnects areas split off by the closing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Set

from ..geometry.wall import WallPos
from ..layout.matrix import Matrix
from .initialize import connect_all, is_candidate, open_inner_walls
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix) -> Maze:
    open_inner_walls(maze, candidates)

    # Every inner wall once, seen from the room above or to the left
    unique: Set[WallPos] = set()
    for pos in maze.positions():
        if not candidates[pos]:
            continue
        for wall_pos in maze.wall_positions(pos):
            back = maze.back(wall_pos)
            if not is_candidate(candidates, back.pos):
                continue
            dx, dy = (wall_pos.pos - back.pos).as_tuple()
            unique.add(wall_pos if dy < 0 or (dy == 0 and dx < 0) else back)

    walls: List[WallPos] = sorted(unique)
    for i in range(len(walls)):
        j = rng.range(0, len(walls))
        walls[i], walls[j] = walls[j], walls[i]

    closed = 0
    for wall_pos in walls:
        back = maze.back(wall_pos)
        if (maze.room(wall_pos.pos).open_walls > 2
                and maze.room(back.pos).open_walls > 2):
            maze.close(wall_pos)
            closed += 1
    logger.debug("Braid closed %d of %d walls", closed, len(walls))

    connect_all(maze, rng, candidates)
    return maze
