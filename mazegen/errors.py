"""
Exception types raised by mazegen.

Predictable empty results (no path, no candidate rooms, no opposite wall) are
reported as ``None`` or an unchanged maze; exceptions are reserved for bad
external input and broken invariants.
"""


class MazeError(Exception):
    pass


class InvalidShapeError(MazeError, ValueError):
    """Raised when a wall count or shape name does not name a known shape."""


class InvalidMethodError(MazeError, ValueError):
    """Raised for an unknown initialization method."""


class InvalidInstructionError(MazeError, ValueError):
    """Raised when a spelunker program contains an unknown instruction."""


class MazeStorageError(MazeError):
    pass


class PipelineError(MazeError):
    pass
