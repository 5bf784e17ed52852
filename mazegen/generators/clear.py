"""
Clear initialization: every wall between two candidate rooms is opened.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..layout.matrix import Matrix
from .initialize import open_inner_walls
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix) -> Maze:
    open_inner_walls(maze, candidates)
    return maze
