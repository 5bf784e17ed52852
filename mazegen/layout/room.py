"""
A single room of a maze.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..geometry.wall import Wall


@dataclass
class Room:
    """
    The wall state of one room.

    ``walls`` is a bit mask of open walls indexed by ``Wall.index``. A room
    becomes visited the first time any of its walls is opened, and stays
    visited when walls are closed again.
    """
    walls: int = 0
    visited: bool = False
    data: Any = None

    def is_open(self, wall: Wall) -> bool:
        return self.walls & wall.mask != 0

    def set_open(self, wall: Wall, value: bool):
        if value:
            self.open(wall)
        else:
            self.close(wall)

    def open(self, wall: Wall):
        self.walls |= wall.mask
        self.visited = True

    def close(self, wall: Wall):
        self.walls &= ~wall.mask

    @property
    def open_walls(self) -> int:
        return bin(self.walls).count('1')

    def with_data(self, data: Any) -> Room:
        return replace(self, data=data)
