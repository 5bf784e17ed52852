"""
Room shapes and their geometry.

``Shape`` tags a maze with one of the three supported tilings and dispatches
every geometric query to the module implementing that tiling. The wall
catalogs in those modules are static; only the tag is ever stored or
serialized.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..errors import InvalidShapeError
from ..geometry.physical import PhysicalPos, Pos, ViewBox
from ..geometry.wall import Wall, WallPos
from . import hex, quad, tri


class Shape(Enum):
    """The supported room shapes, valued by their wall count."""
    TRI = 3
    QUAD = 4
    HEX = 6

    @classmethod
    def from_wall_count(cls, count: int) -> Shape:
        try:
            return cls(count)
        except ValueError:
            raise InvalidShapeError(f"No shape has {count} walls") from None

    @classmethod
    def parse(cls, name: str) -> Shape:
        """
        Parse a shape name.

        Args:
            name: One of "tri", "quad" or "hex"

        Raises:
            InvalidShapeError: If the name is unknown
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidShapeError(f"Unknown shape: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def wall_count(self) -> int:
        return self.value

    @property
    def module(self):
        return _MODULES[self]

    def create(self, width: int, height: int, data=None):
        """Create a maze of this shape with all walls closed.

        ``data`` is either a callable receiving each room position, or a value
        copied into every room.
        """
        from ..layout.maze import Maze
        return Maze(self, width, height, data)

    def minimal_dimensions(self, width: float, height: float) -> Tuple[int, int]:
        """Smallest (cols, rows) whose view box covers a physical size."""
        return self.module.minimal_dimensions(width, height)

    def all_walls(self) -> Tuple[Wall, ...]:
        return self.module.ALL

    def walls(self, pos: Pos) -> Tuple[Wall, ...]:
        return self.module.walls(pos)

    def back(self, wall_pos: WallPos) -> WallPos:
        """The same wall seen from the room on its other side."""
        pos, wall = wall_pos
        module = self.module
        return WallPos(pos + wall.dir, module.ALL[module.back_index(wall.index)])

    def opposite(self, wall_pos: WallPos) -> Optional[Wall]:
        return self.module.opposite(wall_pos)

    def center(self, pos: Pos) -> PhysicalPos:
        return self.module.center(pos)

    def room_at(self, pos: PhysicalPos) -> Pos:
        return self.module.room_at(pos)

    def wall_pos_at(self, pos: PhysicalPos) -> WallPos:
        return self.module.wall_pos_at(pos)

    def corner_walls(self, wall_pos: WallPos) -> Iterator[WallPos]:
        """
        Yield the walls meeting at the first corner of a wall.

        The wall itself comes first, followed by one wall of every other room
        sharing the corner, anticlockwise.
        """
        yield wall_pos
        pos, wall = wall_pos
        all_walls = self.module.ALL
        for dcol, drow, index in wall.corner_wall_offsets:
            yield WallPos(Pos(pos.col + dcol, pos.row + drow), all_walls[index])

    def viewbox(self, cols: int, rows: int) -> ViewBox:
        """
        The bounding box of a maze of this shape.

        Only the first and last column of every row are considered, since the
        extremes of a regular tiling lie on those.
        """
        corners: List[PhysicalPos] = []
        for row in range(rows):
            for col in {0, cols - 1}:
                pos = Pos(col, row)
                center = self.center(pos)
                corners.extend(center + wall.span[0] for wall in self.walls(pos))
        return ViewBox.from_points(corners)


_MODULES = {
    Shape.TRI: tri,
    Shape.QUAD: quad,
    Shape.HEX: hex,
}


def surround(pos: Pos, distance: int) -> Iterator[Pos]:
    """
    Yield the ring of positions at a Chebyshev distance from a position.

    A distance of 0 yields only ``pos``.
    """
    if distance == 0:
        yield pos
        return
    top, bottom = pos.row - distance, pos.row + distance
    left, right = pos.col - distance, pos.col + distance
    for col in range(left, right + 1):
        yield Pos(col, top)
    for row in range(top + 1, bottom):
        yield Pos(right, row)
    for col in range(right, left - 1, -1):
        yield Pos(col, bottom)
    for row in range(bottom - 1, top, -1):
        yield Pos(left, row)


__all__ = ['Shape', 'surround', 'tri', 'quad', 'hex']
