"""
Wall following.

Starting from a closed wall, a ``Follower`` hugs the closed walls of a cavity
clockwise without passing through any open wall, until it returns to the
starting wall.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from ..geometry.wall import WallPos

if TYPE_CHECKING:
    from ..layout.maze import Maze

FollowWallItem = Tuple[WallPos, Optional[WallPos]]


class Follower:
    """
    Iterates the walls of a cavity as ``(from, to)`` pairs.

    The final pair, leading back to the starting wall, has ``to`` set to
    ``None``. Following an open wall yields nothing.
    """

    def __init__(self, maze: Maze, start: WallPos):
        self.maze = maze
        self.start = start
        self.current = start
        self.finished = maze.is_open(start)

    def next_wall_pos(self, wall_pos: WallPos) -> WallPos:
        """
        The next closed wall clockwise sharing a corner with ``wall_pos``.

        The walls meeting at the far corner of ``wall_pos`` are scanned in
        order; if all of them are open, the follower turns around through the
        back of the wall.
        """
        pos, wall = wall_pos
        for candidate in self.maze.corner_walls(WallPos(pos, wall.next)):
            if not self.maze.is_open(candidate):
                return candidate
        return self.maze.back(wall_pos)

    def __iter__(self) -> Iterator[FollowWallItem]:
        return self

    def __next__(self) -> FollowWallItem:
        if self.finished:
            raise StopIteration
        previous = self.current
        self.current = self.next_wall_pos(self.current)
        self.finished = self.current == self.start
        return previous, None if self.finished else self.current


def follow_wall(maze: Maze, start: WallPos) -> Follower:
    return Follower(maze, start)
