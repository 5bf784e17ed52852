"""
Depth-first backtracking ("winding") initialization.

Walks from a random room into a random unvisited neighbour for as long as
one exists, backtracking along the walked path when stuck. Long corridors
with few branches result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..geometry.physical import Pos
from ..layout.matrix import Matrix
from .initialize import is_candidate, random_room
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix) -> Maze:
    candidates = candidates.copy()
    path: List[Pos] = []

    current = random_room(rng, candidates)
    regions = 1
    while current is not None:
        candidates[current] = False

        walls = [wall_pos for wall_pos in maze.wall_positions(current)
                 if is_candidate(candidates, maze.back(wall_pos).pos)]
        if walls:
            wall_pos = walls[rng.range(0, len(walls))]
            maze.open(wall_pos)
            path.append(current)
            current = maze.back(wall_pos).pos
        elif path:
            current = path.pop()
        else:
            # The filter may have split the candidates into several regions
            current = random_room(rng, candidates)
            if current is not None:
                regions += 1

    logger.debug("Carved %d regions depth first", regions)
    return maze
