"""
Maze initialization.

An initialization method opens walls in a fully closed maze to make it
navigable. All methods share the same calling convention: a ``Randomizer``
and a boolean *candidate* matrix built from an optional room filter. Rooms
that are not candidates are never touched.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidMethodError
from ..geometry.physical import Pos
from ..geometry.wall import WallPos
from ..layout import matrix
from ..layout.matrix import Matrix
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)

RoomFilter = Callable[[Pos], bool]


class Method(Enum):
    """Available initialization methods."""
    BRAID = "braid"
    BRANCHING = "branching"
    CLEAR = "clear"
    DIVIDING = "dividing"
    SPELUNKER = "spelunker"
    WINDING = "winding"

    def __str__(self) -> str:
        return self.value


DEFAULT_METHOD = Method.BRANCHING

SPELUNKER_PREFIX = "spelunker("
SPELUNKER_SUFFIX = ")"


def parse_method(text: str) -> Tuple[Method, Optional[str]]:
    """
    Parse a method description.

    Plain names map to their method; ``spelunker(<program>)`` selects the
    spelunker with an explicit instruction program.

    Returns:
        The method and, for a spelunker with a program, the program text

    Raises:
        InvalidMethodError: If the text names no method
        InvalidInstructionError: If a spelunker program is malformed
    """
    text = text.strip()
    if text.startswith(SPELUNKER_PREFIX) and text.endswith(SPELUNKER_SUFFIX):
        from .spelunker import parse_instructions

        program = text[len(SPELUNKER_PREFIX):-len(SPELUNKER_SUFFIX)]
        parse_instructions(program)
        return Method.SPELUNKER, program
    try:
        return Method(text.lower()), None
    except ValueError:
        raise InvalidMethodError(f"Unknown initialization method: {text!r}") from None


def initialize(maze: Maze, method: Union[Method, str], rng: Randomizer,
               filter: Optional[RoomFilter] = None,
               instructions: Optional[str] = None) -> Maze:
    """
    Open walls of a maze using an initialization method.

    Args:
        maze: The maze to initialize; it is modified in place
        method: The method, or its textual description
        rng: The source of randomness
        filter: Selects the rooms taking part; all rooms when omitted
        instructions: The spelunker program, if any

    Returns:
        The maze, unchanged when the filter accepts no room
    """
    if isinstance(method, str):
        method, parsed = parse_method(method)
        instructions = instructions if instructions is not None else parsed

    count, candidates = matrix.filter(
        maze.width, maze.height, filter if filter is not None else (lambda pos: True))
    if count == 0:
        logger.debug("No candidate rooms for %s, maze left unchanged", method)
        return maze

    logger.debug("Initializing %r with %s over %d rooms", maze, method, count)
    _initializer(method)(maze, rng, candidates, instructions)
    return maze


def _initializer(method: Method):
    from . import braid, clear, depth_first, dividing, prim, spelunker

    initializers: Dict[Method, Callable] = {
        Method.BRAID: lambda maze, rng, candidates, _: braid.initialize(maze, rng, candidates),
        Method.BRANCHING: lambda maze, rng, candidates, _: prim.initialize(maze, rng, candidates),
        Method.CLEAR: lambda maze, rng, candidates, _: clear.initialize(maze, rng, candidates),
        Method.DIVIDING: lambda maze, rng, candidates, _: dividing.initialize(maze, rng, candidates),
        Method.SPELUNKER: spelunker.initialize,
        Method.WINDING: lambda maze, rng, candidates, _: depth_first.initialize(maze, rng, candidates),
    }
    return initializers[method]


# ---------------------------------------------------------------------------
# Helpers shared by the initializers
# ---------------------------------------------------------------------------

def is_candidate(candidates: Matrix, pos: Pos) -> bool:
    return bool(candidates.get(pos, False))


def random_room(rng: Randomizer, candidates: Matrix) -> Optional[Pos]:
    """A uniformly chosen candidate room, or None when none remain."""
    count = matrix.candidate_count(candidates)
    if count == 0:
        return None
    return matrix.nth_set(candidates, rng.range(0, count))


def random_wall(rng: Randomizer, candidates: Matrix, pos: Pos,
                maze: Maze) -> Optional[WallPos]:
    """A uniformly chosen wall of ``pos`` leading to a candidate room."""
    walls = [wall_pos for wall_pos in maze.wall_positions(pos)
             if is_candidate(candidates, maze.back(wall_pos).pos)]
    if not walls:
        return None
    return walls[rng.range(0, len(walls))]


def open_inner_walls(maze: Maze, candidates: Matrix):
    """Opens every wall between two candidate rooms."""
    for pos in maze.positions():
        if not candidates[pos]:
            continue
        for wall_pos in maze.wall_positions(pos):
            back = maze.back(wall_pos)
            if is_candidate(candidates, back.pos):
                maze.open(back)


def connect_all(maze: Maze, rng: Randomizer, candidates: Matrix):
    """
    Join every pair of touching but disconnected candidate areas.

    Areas are found by flood filling through open walls; for every pair of
    areas sharing at least one wall, one of the shared walls is opened at
    random.
    """
    areas = Matrix(maze.width, maze.height, 0, dtype=np.int64)
    index = 0
    for pos in maze.positions():
        if not candidates[pos] or areas[pos] > 0:
            continue
        index += 1
        areas.fill(pos, index, lambda p: (
            n for n in maze.neighbors(p) if is_candidate(candidates, n)))

    opened = 0
    edges = areas.edges(maze.adjacent)
    for key in sorted(edges):
        source, _ = key
        if source <= 0:
            continue
        walls: List[WallPos] = []
        for pos1, pos2 in sorted(edges[key]):
            wall_pos = maze.connecting_wall(pos1, pos2)
            if wall_pos is not None:
                walls.append(wall_pos)
        maze.open(walls[rng.range(0, len(walls))])
        opened += 1
    logger.debug("Connected %d areas with %d walls", index, opened)
