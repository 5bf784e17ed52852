"""
Pytest configuration and shared fixtures for the mazegen test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import pytest

from mazegen.geometry import Pos, WallPos
from mazegen.generators import LFSR
from mazegen.shapes import Shape

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath).replace("\\", "/")

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Helpers
# =============================================================================


class Navigator:
    """Opens walls by walking through a maze in grid directions."""

    DIRECTIONS = {
        'up': (0, -1),
        'down': (0, 1),
        'left': (-1, 0),
        'right': (1, 0),
    }

    def __init__(self, maze, pos=(0, 0)):
        self.maze = maze
        self.pos = Pos(*pos)

    def move(self, direction):
        dir = self.DIRECTIONS[direction]
        wall = next(w for w in self.maze.walls(self.pos) if w.dir == dir)
        self.maze.open(WallPos(self.pos, wall))
        self.pos = self.pos + dir
        return self

    def up(self):
        return self.move('up')

    def down(self):
        return self.move('down')

    def left(self):
        return self.move('left')

    def right(self):
        return self.move('right')


def wall_pos(shape, col, row, index):
    """The wall with a catalog index in a room."""
    return WallPos(Pos(col, row), shape.all_walls()[index])


def path_is_connected(maze, path):
    """Whether every pair of consecutive rooms shares an open wall."""
    rooms = list(path)
    return all(maze.connected(a, b) for a, b in zip(rooms, rooms[1:]))


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture(params=[Shape.TRI, Shape.QUAD, Shape.HEX], ids=str)
def shape(request):
    """Every room shape."""
    return request.param


@pytest.fixture
def maze(shape):
    """A small closed maze of every shape."""
    return shape.create(10, 8)


@pytest.fixture
def quad_maze():
    return Shape.QUAD.create(10, 5)


@pytest.fixture
def rng():
    """A deterministic randomizer."""
    return LFSR(12345)
