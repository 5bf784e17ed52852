"""
Randomized Prim ("branching") initialization.

Grows a spanning tree from a random room by repeatedly opening a random
frontier wall leading to an unvisited candidate. When the frontier runs dry
while candidates remain (a filter produced several disjoint regions), the
tree is restarted from a new random candidate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..geometry.wall import WallPos
from ..layout.matrix import Matrix
from .initialize import is_candidate, random_room
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix) -> Maze:
    """
    Carve a perfect maze through every candidate region.

    Args:
        maze: The maze to carve
        rng: The source of randomness
        candidates: Rooms allowed to take part; consumed by a working copy

    Returns:
        The maze
    """
    candidates = candidates.copy()
    trees = 0

    while True:
        start = random_room(rng, candidates)
        if start is None:
            break

        # A room without candidate neighbours is a region of its own
        candidates[start] = False
        trees += 1

        walls: List[WallPos] = [
            wall_pos for wall_pos in maze.wall_positions(start)
            if maze.is_inside(maze.back(wall_pos).pos)]

        while walls:
            wall_pos = walls.pop(rng.range(0, len(walls)))
            following = maze.back(wall_pos).pos
            if not candidates[following]:
                continue

            candidates[following] = False
            maze.open(wall_pos)

            walls.extend(
                wall_pos for wall_pos in maze.wall_positions(following)
                if is_candidate(candidates, maze.back(wall_pos).pos))

    logger.debug("Grew %d spanning trees", trees)
    return maze
