"""
mazegen - maze generation over triangular, square and hexagonal rooms.

Mazes are grids of rooms connected by open walls. This package provides the
geometry of the three tilings, the maze data model, generation methods, A*
path finding, wall following for outlines, persistence and validation.
"""

from .errors import (
    MazeError,
    InvalidShapeError,
    InvalidMethodError,
    InvalidInstructionError,
    MazeStorageError,
    PipelineError,
)
from .geometry import Pos, PhysicalPos, ViewBox, Angle, Wall, WallPos
from .shapes import Shape
from .layout import Matrix, Room, Maze
from .navigation import Path, walk, heatmap, follow_wall
from .generators import (
    Randomizer,
    PythonRandomizer,
    SystemRandomizer,
    LFSR,
    Method,
    initialize,
    randomized_prim,
)
from .conversion import outline, to_path_d, save_maze, load_maze
from .validation import validate_maze
from .pipeline import MazeSettings, MazePipeline, PipelineResult, generate_maze

__version__ = '1.0.0'

__all__ = [
    'MazeError',
    'InvalidShapeError',
    'InvalidMethodError',
    'InvalidInstructionError',
    'MazeStorageError',
    'PipelineError',
    'Pos',
    'PhysicalPos',
    'ViewBox',
    'Angle',
    'Wall',
    'WallPos',
    'Shape',
    'Matrix',
    'Room',
    'Maze',
    'Path',
    'walk',
    'heatmap',
    'follow_wall',
    'Randomizer',
    'PythonRandomizer',
    'SystemRandomizer',
    'LFSR',
    'Method',
    'initialize',
    'randomized_prim',
    'outline',
    'to_path_d',
    'save_maze',
    'load_maze',
    'validate_maze',
    'MazeSettings',
    'MazePipeline',
    'PipelineResult',
    'generate_maze',
]
