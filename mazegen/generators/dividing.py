"""
Recursive division ("dividing") initialization.

The candidate area is cleared, then its view box is cut in two at a random
point along its longer side. Every wall crossing the cut line is closed, and
each half is cut again until it becomes too small. A final pass opens one
door between every pair of areas separated by the cuts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ..geometry.physical import PhysicalPos, Pos, ViewBox
from ..layout.matrix import Matrix
from .initialize import connect_all, is_candidate, open_inner_walls
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)

# Cuts are placed in the last 80 % of a side
MIN_CUT = 0.2


@dataclass
class Split:
    """A cut of a view box along a line at ``at``."""
    viewbox: ViewBox
    at: float
    vertical: bool

    @classmethod
    def from_viewbox(cls, viewbox: ViewBox, rng: Randomizer) -> Split:
        cut = (1.0 - MIN_CUT) * rng.random() + MIN_CUT
        if viewbox.width > viewbox.height:
            return cls(viewbox, viewbox.corner.x + cut * viewbox.width, True)
        return cls(viewbox, viewbox.corner.y + cut * viewbox.height, False)

    def contains(self, pos: PhysicalPos) -> bool:
        """Whether a point lies before the cut line."""
        return pos.x < self.at if self.vertical else pos.y < self.at

    def ends(self) -> Tuple[PhysicalPos, PhysicalPos]:
        """The end points of the cut line."""
        if self.vertical:
            return (PhysicalPos(self.at, self.viewbox.corner.y),
                    PhysicalPos(self.at, self.viewbox.bottom))
        return (PhysicalPos(self.viewbox.corner.x, self.at),
                PhysicalPos(self.viewbox.right, self.at))

    def split(self, rng: Randomizer) -> Tuple[Split, Split]:
        if self.vertical:
            first, second = self.viewbox.split_vertical(self.at)
        else:
            first, second = self.viewbox.split_horizontal(self.at)
        return Split.from_viewbox(first, rng), Split.from_viewbox(second, rng)


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix) -> Maze:
    open_inner_walls(maze, candidates)

    viewbox = ViewBox.from_points(
        maze.corners(wall_pos)[0]
        for pos in maze.positions() for wall_pos in maze.wall_positions(pos))

    # Stop when a side is shorter than about two rooms
    threshold = 2.0 * (maze.center(Pos(0, 0)) - maze.center(Pos(1, 1))).length()

    cuts = _apply(maze, rng, candidates, Split.from_viewbox(viewbox, rng), threshold)
    logger.debug("Divided area with %d cuts", cuts)

    connect_all(maze, rng, candidates)
    return maze


def _apply(maze: Maze, rng: Randomizer, candidates: Matrix, split: Split,
           threshold: float) -> int:
    start, end = split.ends()
    a, b = maze.room_at(start), maze.room_at(end)

    # The rooms along the cut line, with a margin of one room either side
    cols = range(min(a.col, b.col) - 1, max(a.col, b.col) + 2)
    rows = range(min(a.row, b.row) - 1, max(a.row, b.row) + 2)
    for row in rows:
        for col in cols:
            pos = Pos(col, row)
            if not is_candidate(candidates, pos):
                continue
            for wall_pos in maze.wall_positions(pos):
                back = maze.back(wall_pos)
                if is_candidate(candidates, back.pos) and (
                        split.contains(maze.center(pos))
                        != split.contains(maze.center(back.pos))):
                    maze.close(wall_pos)

    cuts = 1
    for part in split.split(rng):
        if all(side > threshold * (1.0 + rng.random())
               for side in (part.viewbox.width, part.viewbox.height)):
            cuts += _apply(maze, rng, candidates, part, threshold)
    return cuts
