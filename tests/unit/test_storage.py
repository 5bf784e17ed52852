"""
Unit tests for maze persistence.
"""

import json

import pytest

from mazegen.conversion import load_maze, maze_from_dict, maze_to_dict, save_maze
from mazegen.errors import MazeStorageError
from mazegen.geometry import Pos
from mazegen.shapes import Shape

from conftest import Navigator


class TestMazeToDict:
    """Test conversion to documents."""

    def test_document(self):
        maze = Shape.QUAD.create(2, 1)
        Navigator(maze).right()
        data = maze_to_dict(maze)
        assert data["version"] == 1
        assert data["shape"] == "quad"
        assert data["width"] == 2
        assert data["height"] == 1
        assert data["rooms"] == [[4, True, None], [1, True, None]]

    def test_is_json_serializable(self, maze, rng):
        maze.initialize('branching', rng)
        json.dumps(maze_to_dict(maze))


class TestMazeFromDict:
    """Test conversion from documents."""

    def test_round_trip(self, maze, rng):
        maze.initialize('braid', rng)
        assert maze_from_dict(maze_to_dict(maze)) == maze

    def test_room_data(self):
        maze = Shape.HEX.create(2, 2, lambda pos: pos.col + pos.row)
        restored = maze_from_dict(maze_to_dict(maze))
        assert restored.data(Pos(1, 1)) == 2

    @pytest.mark.parametrize("data", [
        {},
        {"shape": "quad", "width": 2, "height": 1},
        {"shape": "octagon", "width": 1, "height": 1, "rooms": [[0, False, None]]},
        {"shape": "quad", "width": "wide", "height": 1, "rooms": []},
        {"shape": 4, "width": 1, "height": 1, "rooms": [[0, False, None]]},
    ])
    def test_malformed_document(self, data):
        with pytest.raises(MazeStorageError):
            maze_from_dict(data)

    def test_invalid_dimensions(self):
        with pytest.raises(MazeStorageError):
            maze_from_dict({"shape": "quad", "width": 0, "height": 1, "rooms": []})

    def test_room_count_mismatch(self):
        with pytest.raises(MazeStorageError, match="Expected 2 rooms"):
            maze_from_dict({"shape": "quad", "width": 2, "height": 1,
                            "rooms": [[0, False, None]]})

    def test_malformed_room(self):
        with pytest.raises(MazeStorageError):
            maze_from_dict({"shape": "quad", "width": 1, "height": 1, "rooms": [[0]]})

    def test_unknown_wall_bits(self):
        with pytest.raises(MazeStorageError):
            maze_from_dict({"shape": "quad", "width": 1, "height": 1,
                            "rooms": [[1 << 5, True, None]]})


class TestFiles:
    """Test saving and loading files."""

    def test_save_and_load(self, maze, rng, tmp_path):
        maze.initialize('winding', rng)
        path = save_maze(maze, tmp_path / "maze.json")
        assert path.exists()
        assert load_maze(path) == maze

    def test_load_accepts_str(self, tmp_path):
        maze = Shape.TRI.create(3, 2)
        save_maze(maze, str(tmp_path / "maze.json"))
        assert load_maze(str(tmp_path / "maze.json")) == maze

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MazeStorageError):
            load_maze(path)

    def test_not_a_document(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(MazeStorageError):
            load_maze(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_maze(tmp_path / "missing.json")
