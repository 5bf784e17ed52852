"""
Spelunker initialization.

A spelunker carves through the maze by running a small program over and
over. The program is a string of instructions:

    ``|``  move forward through the wall ahead, opening it
    ``<``  turn left, to the previous wall of the room
    ``>``  turn right, to the next wall of the room
    ``}``  fork left; a new spelunker starts at the previous wall later
    ``{``  fork right; a new spelunker starts at the next wall later

A spelunker stops as soon as it cannot move forward into an unvisited
candidate room. Pending forks are run next, then new spelunkers start in
random unvisited rooms until none remain. The areas carved by separate
spelunkers are finally joined with single doors.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..errors import InvalidInstructionError
from ..geometry.wall import WallPos
from ..layout.matrix import Matrix
from .initialize import connect_all, is_candidate, random_room, random_wall
from .randomizer import Randomizer

if TYPE_CHECKING:
    from ..layout.maze import Maze

logger = logging.getLogger(__name__)


class Instruction(Enum):
    FORWARD = '|'
    LEFT = '<'
    RIGHT = '>'
    FORK_LEFT = '}'
    FORK_RIGHT = '{'

    def __str__(self) -> str:
        return self.value


Instructions = Tuple[Instruction, ...]

DEFAULT_INSTRUCTIONS = '||>||<}|||{'


def parse_instructions(text: str) -> Instructions:
    """
    Parse a spelunker program.

    Raises:
        InvalidInstructionError: If the program contains an unknown
            character, or never moves forward
    """
    result = []
    for i, char in enumerate(text):
        try:
            result.append(Instruction(char))
        except ValueError:
            raise InvalidInstructionError(
                f"Invalid instruction {char!r} at position {i} of {text!r}") from None

    # A program that never moves would repeat forever
    if Instruction.FORWARD not in result:
        raise InvalidInstructionError(
            f"Spelunker program {text!r} contains no forward instruction")
    return tuple(result)


def format_instructions(instructions: Sequence[Instruction]) -> str:
    return ''.join(str(i) for i in instructions)


def initialize(maze: Maze, rng: Randomizer, candidates: Matrix,
               instructions: Optional[str] = None) -> Maze:
    """
    Carve a maze with spelunkers.

    Args:
        maze: The maze to carve
        rng: The source of randomness
        candidates: Rooms allowed to take part
        instructions: The program text; a default program when omitted
    """
    program = parse_instructions(
        instructions if instructions is not None else DEFAULT_INSTRUCTIONS)
    mask = candidates
    candidates = candidates.copy()

    origins: List[WallPos] = []
    start = random_room(rng, candidates)
    if start is not None:
        wall_pos = random_wall(rng, candidates, start, maze)
        if wall_pos is not None:
            origins.append(wall_pos)

    spelunkers = 0
    while True:
        if origins:
            wall_pos = origins.pop()
        else:
            pos = random_room(rng, candidates)
            if pos is None:
                break
            candidates[pos] = False
            wall_pos = random_wall(rng, candidates, pos, maze)
            if wall_pos is None:
                continue

        spelunkers += 1
        _run(maze, candidates, program, wall_pos, origins)

    logger.debug("Ran %d spelunkers with program %s",
                 spelunkers, format_instructions(program))

    connect_all(maze, rng, mask)
    return maze


def _run(maze: Maze, candidates: Matrix, program: Instructions,
         wall_pos: WallPos, origins: List[WallPos]):
    # Rooms without an opposite wall leave alternately to either side
    zig = False
    while True:
        for instruction in program:
            if instruction is Instruction.FORWARD:
                candidates[wall_pos.pos] = False
                back = maze.back(wall_pos)
                if not is_candidate(candidates, back.pos) or maze.room(back.pos).visited:
                    return
                maze.open(wall_pos)

                ahead = maze.opposite(back)
                if ahead is None:
                    ahead = back.wall.next if zig else back.wall.previous
                    zig = not zig
                wall_pos = WallPos(back.pos, ahead)
                candidates[back.pos] = False
            elif instruction is Instruction.LEFT:
                wall_pos = WallPos(wall_pos.pos, wall_pos.wall.previous)
            elif instruction is Instruction.RIGHT:
                wall_pos = WallPos(wall_pos.pos, wall_pos.wall.next)
            elif instruction is Instruction.FORK_LEFT:
                origins.append(WallPos(wall_pos.pos, wall_pos.wall.previous))
            elif instruction is Instruction.FORK_RIGHT:
                origins.append(WallPos(wall_pos.pos, wall_pos.wall.next))
