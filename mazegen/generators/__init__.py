"""
Maze generation: sources of randomness and initialization methods.
"""

from .randomizer import Randomizer, PythonRandomizer, SystemRandomizer, LFSR
from .initialize import (
    Method,
    DEFAULT_METHOD,
    parse_method,
    initialize,
    random_room,
    random_wall,
    connect_all,
)
from .spelunker import Instruction, parse_instructions, format_instructions


def randomized_prim(maze, rng, filter=None):
    """Carve a perfect maze with the randomized Prim method."""
    return initialize(maze, Method.BRANCHING, rng, filter)


__all__ = [
    'Randomizer',
    'PythonRandomizer',
    'SystemRandomizer',
    'LFSR',
    'Method',
    'DEFAULT_METHOD',
    'parse_method',
    'initialize',
    'randomized_prim',
    'random_room',
    'random_wall',
    'connect_all',
    'Instruction',
    'parse_instructions',
    'format_instructions',
]
