"""
The maze aggregate.

A ``Maze`` binds a ``Shape`` to a matrix of rooms. All wall mutations go
through ``set_open``, which writes both sides of a wall so that a wall and
its back always agree. Geometry queries are delegated to the shape.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..geometry.physical import PhysicalPos, Pos, ViewBox
from ..geometry.wall import Wall, WallPos
from ..shapes import Shape, surround
from .matrix import Matrix
from .room import Room

logger = logging.getLogger(__name__)


class Maze:
    """A grid of rooms of a single shape, connected by open walls."""

    def __init__(self, shape: Shape, width: int, height: int, data: Any = None):
        """
        Create a maze with every wall closed.

        Args:
            shape: The room shape
            width: Number of columns
            height: Number of rows
            data: Initial room payload; a callable is called with each room
                position, any other value is copied into every room
        """
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self.shape = shape

        def make_room(pos: Pos) -> Room:
            return Room(data=data(pos) if callable(data) else copy.copy(data))

        self.rooms = Matrix.new_with_data(width, height, make_room)
        logger.debug("Created %s maze %dx%d", shape, width, height)

    @classmethod
    def from_rooms(cls, shape: Shape, rooms: Matrix) -> Maze:
        maze = cls.__new__(cls)
        maze.shape = shape
        maze.rooms = rooms
        return maze

    @property
    def width(self) -> int:
        return self.rooms.width

    @property
    def height(self) -> int:
        return self.rooms.height

    # -- rooms --

    def is_inside(self, pos: Pos) -> bool:
        return self.rooms.is_inside(pos)

    def room(self, pos: Pos) -> Optional[Room]:
        return self.rooms.get(pos)

    def data(self, pos: Pos) -> Any:
        room = self.rooms.get(pos)
        return room.data if room is not None else None

    def set_data(self, pos: Pos, value: Any) -> bool:
        """Replace the payload of a room; returns False outside the maze."""
        room = self.rooms.get(pos)
        if room is None:
            return False
        room.data = value
        return True

    def positions(self) -> Iterator[Pos]:
        return self.rooms.positions()

    # -- walls --

    def is_open(self, wall_pos: WallPos) -> bool:
        room = self.rooms.get(wall_pos.pos)
        return room is not None and room.is_open(wall_pos.wall)

    def set_open(self, wall_pos: WallPos, value: bool):
        """Open or close a wall from both sides."""
        room = self.rooms.get(wall_pos.pos)
        if room is not None:
            room.set_open(wall_pos.wall, value)

        back = self.back(wall_pos)
        back_room = self.rooms.get(back.pos)
        if back_room is not None:
            back_room.set_open(back.wall, value)

    def open(self, wall_pos: WallPos):
        self.set_open(wall_pos, True)

    def close(self, wall_pos: WallPos):
        self.set_open(wall_pos, False)

    def connecting_wall(self, pos1: Pos, pos2: Pos) -> Optional[WallPos]:
        """The wall of ``pos1`` leading to ``pos2``, if they are adjacent."""
        for wall in self.walls(pos1):
            if pos1 + wall.dir == pos2:
                return WallPos(pos1, wall)
        return None

    def connected(self, pos1: Pos, pos2: Pos) -> bool:
        if pos1 == pos2:
            return True
        wall_pos = self.connecting_wall(pos1, pos2)
        return wall_pos is not None and self.is_open(wall_pos)

    def doors(self, pos: Pos) -> Iterator[Wall]:
        """Yield the open walls of a room."""
        return (wall for wall in self.walls(pos) if self.is_open(WallPos(pos, wall)))

    def neighbors(self, pos: Pos) -> Iterator[Pos]:
        """Yield the rooms reachable through the open walls of a room."""
        return (pos + wall.dir for wall in self.doors(pos))

    def adjacent(self, pos: Pos) -> Iterator[Pos]:
        """Yield every position sharing a wall with a room, inside or not."""
        return (pos + wall.dir for wall in self.walls(pos))

    def wall_positions(self, pos: Pos) -> Iterator[WallPos]:
        return (WallPos(pos, wall) for wall in self.walls(pos))

    # -- shape delegates --

    def all_walls(self) -> Tuple[Wall, ...]:
        return self.shape.all_walls()

    def walls(self, pos: Pos) -> Tuple[Wall, ...]:
        return self.shape.walls(pos)

    def back(self, wall_pos: WallPos) -> WallPos:
        return self.shape.back(wall_pos)

    def opposite(self, wall_pos: WallPos) -> Optional[Wall]:
        return self.shape.opposite(wall_pos)

    def center(self, pos: Pos) -> PhysicalPos:
        return self.shape.center(pos)

    def room_at(self, pos: PhysicalPos) -> Pos:
        return self.shape.room_at(pos)

    def wall_pos_at(self, pos: PhysicalPos) -> WallPos:
        return self.shape.wall_pos_at(pos)

    def corner_walls(self, wall_pos: WallPos) -> Iterator[WallPos]:
        return self.shape.corner_walls(wall_pos)

    # -- physical layout --

    def corners(self, wall_pos: WallPos) -> Tuple[PhysicalPos, PhysicalPos]:
        """The physical end points of a wall, in span order."""
        center = self.center(wall_pos.pos)
        start, end = wall_pos.wall.span
        return center + start, center + end

    def viewbox(self) -> ViewBox:
        return self.shape.viewbox(self.width, self.height)

    def rooms_touched_by(self, viewbox: ViewBox) -> List[Pos]:
        """
        Collect the rooms whose centre or a corner lies inside a view box.

        Rings around the room under the view box centre are searched until a
        ring adds nothing, so a small view box touching neither centre nor
        corner of a room will not find it.
        """
        start = self.room_at(viewbox.center())
        result: List[Pos] = []
        distance = 0
        while True:
            before = len(result)
            for pos in surround(start, distance):
                center = self.center(pos)
                if viewbox.contains(center) or any(
                        viewbox.contains(center + wall.span[0]) for wall in self.walls(pos)):
                    result.append(pos)
            if len(result) == before:
                break
            distance += 1
        return result

    # -- navigation --

    def walk(self, start: Pos, end: Pos):
        """A path between two rooms, or ``None``."""
        from ..navigation.walk import walk
        return walk(self, start, end)

    def follow_wall(self, wall_pos: WallPos):
        from ..navigation.follow import follow_wall
        return follow_wall(self, wall_pos)

    def initialize(self, method, rng, filter: Optional[Callable[[Pos], bool]] = None,
                   instructions: Optional[str] = None) -> Maze:
        """Open walls with an initialization method; see ``generators.initialize``."""
        from ..generators.initialize import initialize
        return initialize(self, method, rng, filter, instructions)

    # -- snapshots --

    def copy(self) -> Maze:
        """A deep copy of this maze, suitable as a snapshot before mutating."""
        return Maze.from_rooms(self.shape, copy.deepcopy(self.rooms))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.shape == other.shape and self.rooms == other.rooms

    def __repr__(self) -> str:
        return f"Maze({self.shape}, {self.width}x{self.height})"
