"""
Settings for the maze generation pipeline.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..geometry.physical import Pos
from ..generators.initialize import DEFAULT_METHOD, Method
from ..shapes import Shape


@dataclass
class MazeSettings:
    # Layout
    shape: Union[Shape, str] = Shape.QUAD
    width: int = 10
    height: int = 10

    # Physical size to cover; overrides width and height when both are set
    target_width: Optional[float] = None
    target_height: Optional[float] = None

    # Initialization
    method: Union[Method, str] = DEFAULT_METHOD
    instructions: Optional[str] = None  # spelunker program
    filter: Optional[Callable[[Pos], bool]] = None

    # Seeding for reproducible generation
    seed: Optional[int] = None  # None = random seed, otherwise deterministic

    # Output
    validate: bool = True
    build_outline: bool = False
    output_file: Optional[str] = None

    @property
    def uses_target_size(self) -> bool:
        return self.target_width is not None and self.target_height is not None
