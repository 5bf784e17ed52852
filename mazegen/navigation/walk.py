"""
Paths through a maze.

``walk`` runs an A* search over the graph of open walls. The search runs
backwards, from the target room to the source room, so that following the
recorded predecessors from the source yields the path in walking order.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from ..geometry.physical import Pos
from ..geometry.wall import WallPos
from ..layout.matrix import Matrix

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


class Path:
    """
    A path between two rooms, both included.

    Iterating a path follows the predecessor map recorded by the search, so
    a path can be iterated any number of times.
    """

    def __init__(self, start: Pos, end: Pos, came_from: Dict[Pos, Pos]):
        self.start = start
        self.end = end
        self._came_from = came_from

    def __iter__(self) -> Iterator[Pos]:
        current = self.start
        yield current
        while current != self.end:
            try:
                current = self._came_from[current]
            except KeyError:
                raise RuntimeError("Attempted to backtrace an incomplete path") from None
            yield current

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Path({self.start} -> {self.end}, {len(self)} rooms)"


class OpenSet:
    """
    Positions pending evaluation, popped lowest score first.

    Ties are broken by insertion order. ``contains`` reports whether a
    position was pushed and not yet popped.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, Pos]] = []
        self._present: Set[Pos] = set()
        self._counter = itertools.count()

    def push(self, priority: int, pos: Pos):
        heapq.heappush(self._heap, (priority, next(self._counter), pos))
        self._present.add(pos)

    def pop(self) -> Optional[Pos]:
        if not self._heap:
            return None
        _, _, pos = heapq.heappop(self._heap)
        self._present.discard(pos)
        return pos

    def contains(self, pos: Pos) -> bool:
        return pos in self._present

    def __len__(self) -> int:
        return len(self._heap)


def walk(maze: Maze, start: Pos, end: Pos) -> Optional[Path]:
    """
    Find a path between two rooms through open walls.

    In a maze without loops this is the only path; with loops it is usually,
    but not always, a shortest one.

    Args:
        maze: The maze to walk
        start: The first room of the path
        end: The last room of the path

    Returns:
        The path, or None if the rooms are not connected
    """
    if not (maze.is_inside(start) and maze.is_inside(end)):
        return None

    # Search from the end so that predecessors point towards it
    source, target = end, start

    def h(pos: Pos) -> int:
        return pos.manhattan(target)

    g: Dict[Pos, int] = {source: 0}
    came_from: Dict[Pos, Pos] = {}
    visited: Set[Pos] = set()

    open_set = OpenSet()
    open_set.push(h(source), source)

    while True:
        current = open_set.pop()
        if current is None:
            return None
        if current == target:
            return Path(start, end, came_from)
        visited.add(current)
        for wall in maze.doors(current):
            following = maze.back(WallPos(current, wall)).pos
            cost = g[current] + 1

            # Skip rooms outside the maze, and rooms already evaluated at a
            # cost no worse than this one
            if not maze.is_inside(following) or (
                    following in visited and g[following] <= cost):
                continue

            # The predecessor is only replaced while the room just popped is
            # no longer pending; this fixes which path wins on ties
            current_pending = open_set.contains(current)
            if not current_pending or cost < g[current]:
                g[following] = cost
                came_from[following] = current
                if not current_pending:
                    open_set.push(cost + h(following), following)


def heatmap(maze: Maze, pairs: Iterable[Tuple[Pos, Pos]]) -> Matrix:
    """
    Count how many paths pass through every room.

    Args:
        maze: The maze to walk
        pairs: (start, end) room pairs; pairs without a path are ignored

    Returns:
        An integer matrix of visit counts
    """
    result = Matrix(maze.width, maze.height, 0, dtype=np.int64)
    walked = 0
    for start, end in pairs:
        path = walk(maze, start, end)
        if path is None:
            continue
        walked += 1
        for pos in path:
            result[pos] += 1
    logger.debug("Heat map built from %d paths", walked)
    return result
