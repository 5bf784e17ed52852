"""
Maze persistence.

A maze is stored as its shape name, its dimensions and the state of every
room in row-major order. Wall catalogs are static and never stored.

    {
      "shape": "quad",
      "width": 2,
      "height": 1,
      "rooms": [[4, true, null], [1, true, null]]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import InvalidShapeError, MazeStorageError
from ..layout.matrix import Matrix
from ..layout.maze import Maze
from ..layout.room import Room
from ..shapes import Shape

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def maze_to_dict(maze: Maze) -> Dict[str, Any]:
    """Convert a maze to a JSON-serializable dictionary."""
    return {
        "version": FORMAT_VERSION,
        "shape": str(maze.shape),
        "width": maze.width,
        "height": maze.height,
        "rooms": [[room.walls, room.visited, room.data] for room in maze.rooms.values()],
    }


def maze_from_dict(data: Dict[str, Any]) -> Maze:
    """
    Create a maze from a dictionary.

    Raises:
        MazeStorageError: If the dictionary does not describe a maze
    """
    try:
        shape = Shape.parse(data["shape"])
        width, height = int(data["width"]), int(data["height"])
        rooms = data["rooms"]
    except (KeyError, TypeError, ValueError, AttributeError, InvalidShapeError) as e:
        raise MazeStorageError(f"Invalid maze document: {e}") from e

    if width < 1 or height < 1:
        raise MazeStorageError(f"Invalid maze dimensions {width}x{height}")
    if not isinstance(rooms, list) or len(rooms) != width * height:
        raise MazeStorageError(
            f"Expected {width * height} rooms, found "
            f"{len(rooms) if isinstance(rooms, list) else type(rooms).__name__}")

    valid_mask = 0
    for wall in shape.all_walls():
        valid_mask |= wall.mask

    matrix = Matrix(width, height)
    for pos, entry in zip(matrix.positions(), rooms):
        try:
            walls, visited, room_data = entry
            walls = int(walls)
        except (TypeError, ValueError) as e:
            raise MazeStorageError(f"Invalid room {pos}: {entry!r}") from e
        if walls & ~valid_mask:
            raise MazeStorageError(f"Room {pos} opens walls unknown to {shape}: {walls:#x}")
        matrix[pos] = Room(walls=walls, visited=bool(visited), data=room_data)

    return Maze.from_rooms(shape, matrix)


def save_maze(maze: Maze, file_path: Union[str, Path]) -> Path:
    """
    Save a maze as JSON.

    Args:
        maze: The maze to save; room data must be JSON serializable
        file_path: Destination file

    Returns:
        Path to the saved file

    Raises:
        IOError: If the file cannot be written
    """
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(maze_to_dict(maze), f, indent=2, ensure_ascii=False)

    logger.info("Saved %r to %s", maze, file_path)
    return file_path


def load_maze(file_path: Union[str, Path]) -> Maze:
    """
    Load a maze saved by ``save_maze``.

    Raises:
        MazeStorageError: If the file is not valid JSON or not a maze
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MazeStorageError(f"{file_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MazeStorageError(f"{file_path} does not contain a maze")
    maze = maze_from_dict(data)
    logger.debug("Loaded %r from %s", maze, file_path)
    return maze
