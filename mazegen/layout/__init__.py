"""
Maze layout: the generic matrix, rooms and the maze aggregate binding them
to a shape.
"""

from .matrix import Matrix, filter
from .room import Room
from .maze import Maze

__all__ = [
    'Matrix',
    'filter',
    'Room',
    'Maze',
]
