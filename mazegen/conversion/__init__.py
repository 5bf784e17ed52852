"""
Conversion of mazes to drawing operations and to storage documents.
"""

from .outline import Operation, OperationKind, Visitor, outline, to_path_d
from .maze_storage import maze_to_dict, maze_from_dict, save_maze, load_maze

__all__ = [
    'Operation',
    'OperationKind',
    'Visitor',
    'outline',
    'to_path_d',
    'maze_to_dict',
    'maze_from_dict',
    'save_maze',
    'load_maze',
]
