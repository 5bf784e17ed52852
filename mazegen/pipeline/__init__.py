"""
Maze generation pipeline: settings in, validated maze out.
"""

from .settings import MazeSettings
from .maze_pipeline import (
    PipelineStage,
    PipelineResult,
    MazePipeline,
    GenerationCancelledException,
    generate_maze,
)

__all__ = [
    'MazeSettings',
    'PipelineStage',
    'PipelineResult',
    'MazePipeline',
    'GenerationCancelledException',
    'generate_maze',
]
