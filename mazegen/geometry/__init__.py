"""
Geometry primitives: grid positions, physical positions, view boxes and the
wall descriptors the shape catalogs are built from.
"""

from .physical import Pos, PhysicalPos, ViewBox, partition
from .wall import Angle, Wall, WallPos, normalized_angle, TAU

__all__ = [
    'Pos',
    'PhysicalPos',
    'ViewBox',
    'partition',
    'Angle',
    'Wall',
    'WallPos',
    'normalized_angle',
    'TAU',
]
