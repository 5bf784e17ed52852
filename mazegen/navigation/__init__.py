"""
Navigation through mazes: paths, heat maps and wall following.
"""

from .walk import Path, walk, heatmap
from .follow import Follower, follow_wall

__all__ = [
    'Path',
    'walk',
    'heatmap',
    'Follower',
    'follow_wall',
]
