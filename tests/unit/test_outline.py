"""
Unit tests for maze outlines.
"""

import pytest

from mazegen.conversion import Operation, OperationKind, Visitor, outline, to_path_d
from mazegen.geometry import PhysicalPos
from mazegen.shapes import Shape, quad

from conftest import Navigator, wall_pos


def _closed_walls(maze):
    """Distinct closed walls touching a visited room, each counted once."""
    result = set()
    for pos in maze.positions():
        if not maze.room(pos).visited:
            continue
        for wall_pos in maze.wall_positions(pos):
            if not maze.is_open(wall_pos):
                back = maze.back(wall_pos)
                result.add(min(wall_pos, back, key=lambda w: (w.pos, w.wall.index)))
    return result


class TestOperation:
    """Test drawing operations."""

    def test_command(self):
        op = Operation(OperationKind.MOVE, PhysicalPos(1.41421356, 0.5))
        assert op.command() == "M1.4142 0.5"

    def test_command_precision(self):
        op = Operation(OperationKind.LINE, PhysicalPos(2.0, 3.333333))
        assert op.command(precision=1) == "L2 3.3"


class TestVisitor:
    """Test drawn wall tracking."""

    def test_visit_marks_back(self):
        maze = Shape.QUAD.create(3, 3)
        visitor = Visitor(maze)
        start = wall_pos(Shape.QUAD, 1, 1, quad.RIGHT)
        visitor.visit(start)
        assert visitor.visited(start)
        assert visitor.visited(maze.back(start))
        assert not visitor.visited(wall_pos(Shape.QUAD, 1, 1, quad.LEFT))

    def test_visit_outer_wall(self):
        maze = Shape.QUAD.create(3, 3)
        visitor = Visitor(maze)
        start = wall_pos(Shape.QUAD, 0, 0, quad.LEFT)
        visitor.visit(start)
        assert visitor.visited(start)

    def test_next_wall_skips_unvisited_rooms(self):
        maze = Shape.QUAD.create(3, 3)
        Navigator(maze, (1, 1)).right()
        assert Visitor(maze).next_wall() == wall_pos(Shape.QUAD, 1, 1, quad.LEFT)

    def test_next_wall_resumes_scan(self):
        maze = Shape.QUAD.create(3, 3)
        Navigator(maze, (0, 2)).right()
        visitor = Visitor(maze)
        assert visitor.next_wall() == wall_pos(Shape.QUAD, 0, 2, quad.LEFT)
        assert visitor.index == 6

    def test_next_wall_indexes_rooms_directly(self, monkeypatch):
        maze = Shape.QUAD.create(3, 3)
        Navigator(maze, (1, 2)).right()
        monkeypatch.setattr(maze, "positions", lambda: pytest.fail("rooms enumerated"))
        assert Visitor(maze).next_wall() == wall_pos(Shape.QUAD, 1, 2, quad.LEFT)

    def test_next_wall_without_visited_rooms(self):
        assert Visitor(Shape.QUAD.create(3, 3)).next_wall() is None


class TestOutline:
    """Test outline generation."""

    def test_fresh_maze_is_empty(self, maze):
        assert outline(maze) == []
        assert to_path_d(maze) == ""

    def test_two_rooms(self):
        maze = Shape.QUAD.create(3, 1)
        Navigator(maze).right()
        operations = outline(maze)

        assert [op.kind for op in operations] == [OperationKind.MOVE] + [OperationKind.LINE] * 6
        first, last = operations[0].pos, operations[-1].pos
        assert last.x == pytest.approx(first.x)
        assert last.y == pytest.approx(first.y)

    def test_every_closed_wall_drawn_once(self, maze, rng):
        maze.initialize('branching', rng)
        operations = outline(maze)
        lines = [op for op in operations if op.kind is OperationKind.LINE]
        assert operations[0].kind is OperationKind.MOVE
        assert len(lines) == len(_closed_walls(maze))

    def test_lines_join_corners(self, maze, rng):
        maze.initialize('winding', rng)
        operations = outline(maze)
        corners = set()
        for pos in maze.positions():
            for wall_pos in maze.wall_positions(pos):
                for corner in maze.corners(wall_pos):
                    corners.add((round(corner.x, 6), round(corner.y, 6)))
        for op in operations:
            assert (round(op.pos.x, 6), round(op.pos.y, 6)) in corners

    def test_path_d(self):
        maze = Shape.QUAD.create(2, 2)
        Navigator(maze).right().down()
        d = to_path_d(maze)
        assert d.startswith("M")
        assert d.count("M") == 1
        assert " L" in d

    def test_cleared_area_draws_only_the_border(self, rng):
        maze = Shape.QUAD.create(3, 2)
        maze.initialize('clear', rng)
        operations = outline(maze)
        assert [op.kind for op in operations].count(OperationKind.MOVE) == 1
        assert len(operations) == 1 + 2 * (3 + 2)
