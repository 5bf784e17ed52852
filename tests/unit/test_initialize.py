"""
Unit tests for maze initialization methods.
"""

import pytest

from mazegen.errors import InvalidInstructionError, InvalidMethodError
from mazegen.generators import (
    LFSR,
    Instruction,
    Method,
    connect_all,
    format_instructions,
    initialize,
    parse_instructions,
    parse_method,
    random_room,
    random_wall,
    randomized_prim,
)
from mazegen.geometry import Pos
from mazegen.layout import matrix
from mazegen.shapes import Shape, quad

from conftest import Navigator, path_is_connected

ALL_METHODS = list(Method)


def _symmetric(maze):
    for pos in maze.positions():
        for wall_pos in maze.wall_positions(pos):
            back = maze.back(wall_pos)
            if maze.is_inside(back.pos) and maze.is_open(wall_pos) != maze.is_open(back):
                return False
    return True


def _open_to_outside(maze):
    return any(
        maze.is_open(wall_pos) and not maze.is_inside(maze.back(wall_pos).pos)
        for pos in maze.positions() for wall_pos in maze.wall_positions(pos))


def _door_count(maze):
    return sum(maze.room(pos).open_walls for pos in maze.positions()) // 2


class TestParseMethod:
    """Test method descriptions."""

    @pytest.mark.parametrize("text,expected", [
        ("braid", Method.BRAID),
        ("branching", Method.BRANCHING),
        ("clear", Method.CLEAR),
        ("dividing", Method.DIVIDING),
        ("spelunker", Method.SPELUNKER),
        ("winding", Method.WINDING),
        (" Winding ", Method.WINDING),
    ])
    def test_names(self, text, expected):
        assert parse_method(text) == (expected, None)

    def test_spelunker_program(self):
        assert parse_method("spelunker(|<|>)") == (Method.SPELUNKER, "|<|>")

    def test_unknown_name(self):
        with pytest.raises(InvalidMethodError):
            parse_method("kruskal")

    def test_invalid_program(self):
        with pytest.raises(InvalidInstructionError):
            parse_method("spelunker(|x)")

    def test_str(self):
        assert str(Method.DIVIDING) == "dividing"


class TestInstructions:
    """Test spelunker programs."""

    def test_parse(self):
        assert parse_instructions("|<>}{") == (
            Instruction.FORWARD, Instruction.LEFT, Instruction.RIGHT,
            Instruction.FORK_LEFT, Instruction.FORK_RIGHT)

    def test_format(self):
        assert format_instructions(parse_instructions("||>||<}|||{")) == "||>||<}|||{"

    def test_unknown_character(self):
        with pytest.raises(InvalidInstructionError, match="position 1"):
            parse_instructions("|?")

    def test_program_without_forward(self):
        with pytest.raises(InvalidInstructionError):
            parse_instructions("<>")

    def test_empty_program(self):
        with pytest.raises(InvalidInstructionError):
            parse_instructions("")


class TestHelpers:
    """Test shared initialization helpers."""

    def test_random_room_without_candidates(self, rng):
        _, candidates = matrix.filter(4, 4, lambda pos: False)
        assert random_room(rng, candidates) is None

    def test_random_room_is_candidate(self, rng):
        _, candidates = matrix.filter(6, 6, lambda pos: pos.col == 2)
        for _ in range(20):
            assert random_room(rng, candidates).col == 2

    def test_random_wall_leads_to_candidate(self, rng):
        maze = Shape.QUAD.create(3, 3)
        _, candidates = matrix.filter(3, 3, lambda pos: pos != Pos(1, 0))
        for _ in range(20):
            wall_pos = random_wall(rng, candidates, Pos(0, 0), maze)
            assert wall_pos.wall == quad.ALL[quad.DOWN]

    def test_random_wall_without_candidates(self, rng):
        maze = Shape.QUAD.create(3, 3)
        _, candidates = matrix.filter(3, 3, lambda pos: pos == Pos(1, 1))
        assert random_wall(rng, candidates, Pos(1, 1), maze) is None

    def test_connect_all_joins_areas(self, rng):
        maze = Shape.QUAD.create(4, 1)
        Navigator(maze).right()
        Navigator(maze, (2, 0)).right()
        _, candidates = matrix.filter(4, 1, lambda pos: True)
        connect_all(maze, rng, candidates)
        assert maze.connected(Pos(1, 0), Pos(2, 0))
        assert _door_count(maze) == 3


class TestInitialize:
    """Test properties shared by every method."""

    @pytest.mark.parametrize("method", ALL_METHODS, ids=str)
    def test_keeps_walls_symmetric(self, maze, method, rng):
        initialize(maze, method, rng)
        assert _symmetric(maze)
        assert not _open_to_outside(maze)

    @pytest.mark.parametrize("method", ALL_METHODS, ids=str)
    def test_connects_every_room(self, maze, method, rng):
        initialize(maze, method, rng)
        end = Pos(maze.width - 1, maze.height - 1)
        for start in [Pos(0, 0), Pos(3, 5), Pos(8, 1)]:
            path = maze.walk(start, end)
            assert path is not None
            assert path_is_connected(maze, path)

    @pytest.mark.parametrize("method", ALL_METHODS, ids=str)
    def test_no_candidates_leaves_maze_unchanged(self, maze, method, rng):
        before = maze.copy()
        initialize(maze, method, rng, lambda pos: False)
        assert maze == before

    @pytest.mark.parametrize("method", ALL_METHODS, ids=str)
    def test_rooms_outside_filter_untouched(self, method, rng):
        maze = Shape.QUAD.create(10, 8)
        initialize(maze, method, rng, lambda pos: pos.col > pos.row)
        for pos in maze.positions():
            room = maze.room(pos)
            if pos.col > pos.row:
                assert room.visited
            else:
                assert room.walls == 0
                assert not room.visited

    @pytest.mark.parametrize("method", ALL_METHODS, ids=str)
    def test_same_seed_same_maze(self, shape, method):
        first = initialize(shape.create(8, 6), method, LFSR(99))
        second = initialize(shape.create(8, 6), method, LFSR(99))
        assert first == second

    def test_method_from_text(self, maze, rng):
        initialize(maze, "winding", rng)
        assert maze.room(Pos(0, 0)).visited

    def test_maze_initialize_delegates(self, maze, rng):
        assert maze.initialize(Method.CLEAR, rng) is maze
        assert maze.room(Pos(0, 0)).visited


class TestBranching:
    """Test the randomized Prim method."""

    def test_perfect_maze(self, maze, rng):
        randomized_prim(maze, rng)
        assert _door_count(maze) == maze.width * maze.height - 1

    def test_disconnected_regions(self, rng):
        maze = Shape.QUAD.create(10, 8)

        def in_region(pos):
            return pos.col != 5 and pos.row != 4

        randomized_prim(maze, rng, in_region)
        assert maze.walk(Pos(0, 0), Pos(4, 3)) is not None
        assert maze.walk(Pos(9, 7), Pos(6, 5)) is not None
        assert maze.walk(Pos(0, 0), Pos(9, 7)) is None
        assert maze.walk(Pos(0, 0), Pos(9, 0)) is None
        assert not maze.room(Pos(5, 0)).visited

    def test_isolated_room_is_not_visited(self, rng):
        maze = Shape.QUAD.create(5, 5)
        randomized_prim(maze, rng, lambda pos: pos == Pos(2, 2))
        assert not maze.room(Pos(2, 2)).visited


class TestWinding:
    """Test the depth-first method."""

    def test_perfect_maze(self, maze, rng):
        initialize(maze, Method.WINDING, rng)
        assert _door_count(maze) == maze.width * maze.height - 1


class TestClear:
    """Test the clear method."""

    def test_opens_every_inner_wall(self, rng):
        maze = Shape.QUAD.create(4, 3)
        initialize(maze, Method.CLEAR, rng)
        # 3 horizontal doors per row, 4 vertical doors per row boundary
        assert _door_count(maze) == 3 * 3 + 4 * 2


class TestBraid:
    """Test the braid method."""

    def test_no_dead_ends(self, quad_maze, rng):
        initialize(quad_maze, Method.BRAID, rng)
        for pos in quad_maze.positions():
            assert quad_maze.room(pos).open_walls >= 2

    def test_has_loops(self, quad_maze, rng):
        initialize(quad_maze, Method.BRAID, rng)
        rooms = quad_maze.width * quad_maze.height
        assert _door_count(quad_maze) >= rooms


class TestDividing:
    """Test the recursive division method."""

    def test_closes_walls(self, quad_maze, rng):
        initialize(quad_maze, Method.DIVIDING, rng)
        cleared = Shape.QUAD.create(10, 5)
        initialize(cleared, Method.CLEAR, rng)
        assert _door_count(quad_maze) < _door_count(cleared)


class TestSpelunker:
    """Test the spelunker method."""

    def test_explicit_program(self, maze, rng):
        initialize(maze, Method.SPELUNKER, rng, instructions="|<|>|")
        for pos in maze.positions():
            assert maze.room(pos).visited

    def test_program_in_method_text(self, maze, rng):
        initialize(maze, "spelunker(|||{)", rng)
        assert maze.walk(Pos(0, 0), Pos(9, 7)) is not None

    def test_straight_corridor(self, rng):
        maze = Shape.QUAD.create(6, 1)
        initialize(maze, Method.SPELUNKER, rng, instructions="|")
        assert _door_count(maze) == 5
        assert _symmetric(maze)

    def test_invalid_program(self, maze, rng):
        with pytest.raises(InvalidInstructionError):
            initialize(maze, Method.SPELUNKER, rng, instructions="<<")
