"""
Unit tests for maze validation.
"""

import pytest

from mazegen.geometry import Pos
from mazegen.layout import matrix
from mazegen.shapes import Shape, quad
from mazegen.validation import (
    Severity,
    ValidationError,
    ValidationIssue,
    ValidationResult,
    check_connectivity,
    check_walls,
    validate_maze,
)
from mazegen.validation.rules import CONN_001, WALL_001

from conftest import Navigator


class TestValidationResult:
    """Test result aggregation."""

    def test_empty_result_passes(self):
        result = ValidationResult()
        assert result.passed
        assert not result.failed
        assert result.report() == "Validation passed: No issues found"

    def test_severity_buckets(self):
        result = ValidationResult()
        result.add_issue(ValidationIssue(Severity.INFO, "X-1", "info"))
        result.add_issue(ValidationIssue(Severity.WARN, "X-2", "warn"))
        result.add_issue(ValidationIssue(Severity.FAIL, "X-3", "fail"))
        assert [i.code for i in result.infos] == ["X-1"]
        assert [i.code for i in result.warnings] == ["X-2"]
        assert [i.code for i in result.errors] == ["X-3"]
        assert result.failed

    def test_merge(self):
        first = ValidationResult([ValidationIssue(Severity.WARN, "A", "a")])
        second = ValidationResult([ValidationIssue(Severity.INFO, "B", "b")])
        assert first.merge(second) is first
        assert first.codes() == ["A", "B"]

    def test_to_dict(self):
        result = ValidationResult([WALL_001.issue("(0, 0)", wall="quad:LEFT",
                                                  state="open", back="x")])
        data = result.to_dict()
        assert data["passed"] is False
        assert data["fail_count"] == 1
        assert data["issues"][0]["severity"] == "FAIL"
        assert data["issues"][0]["location"] == "(0, 0)"

    def test_report_groups_by_severity(self):
        result = ValidationResult([CONN_001.issue(count=3)])
        report = result.report()
        assert report.startswith("Validation PASSED: 1 issue(s)")
        assert "WARN (1):" in report
        assert "3 disconnected areas" in report

    def test_error_carries_result(self):
        result = ValidationResult([ValidationIssue(Severity.FAIL, "X", "broken")])
        error = ValidationError(result)
        assert error.result is result
        assert "broken" in str(error)


class TestRules:
    """Test rule issue creation."""

    def test_issue_formats_templates(self):
        issue = CONN_001.issue(count=2)
        assert issue.code == "CONN-001"
        assert issue.severity is Severity.WARN
        assert issue.message == "Candidate rooms form 2 disconnected areas"
        assert issue.remediation is not None

    def test_format(self):
        issue = ValidationIssue(Severity.INFO, "CONN-003", "loops")
        assert issue.format() == "[INFO] CONN-003 at=- :: loops :: fix=N/A"


class TestCheckWalls:
    """Test wall consistency checks."""

    def test_generated_maze_is_consistent(self, maze, rng):
        maze.initialize('dividing', rng)
        assert check_walls(maze).issues == []

    def test_asymmetric_wall(self):
        maze = Shape.QUAD.create(3, 3)
        maze.room(Pos(0, 0)).open(quad.ALL[quad.RIGHT])
        result = check_walls(maze)
        assert result.codes() == ["WALL-001", "WALL-001"]
        assert result.failed

    def test_foreign_wall_bits(self):
        maze = Shape.QUAD.create(3, 3)
        maze.room(Pos(1, 1)).walls |= 1 << 5
        result = check_walls(maze)
        assert result.codes() == ["WALL-002"]
        assert result.errors[0].location == str(Pos(1, 1))

    def test_open_to_outside(self):
        maze = Shape.HEX.create(3, 3)
        maze.open(next(maze.wall_positions(Pos(0, 0))))
        result = check_walls(maze)
        assert result.codes() == ["WALL-003"]
        assert result.passed


class TestCheckConnectivity:
    """Test connectivity checks."""

    def test_perfect_maze(self, maze, rng):
        maze.initialize('branching', rng)
        _, candidates = matrix.filter(maze.width, maze.height, lambda pos: True)
        assert check_connectivity(maze, candidates).issues == []

    def test_fresh_maze(self):
        maze = Shape.QUAD.create(3, 2)
        _, candidates = matrix.filter(3, 2, lambda pos: True)
        result = check_connectivity(maze, candidates)
        assert result.codes() == ["CONN-001", "CONN-002"]
        assert "6 disconnected areas" in result.warnings[0].message
        assert result.warnings[1].message.startswith("6 candidate room(s)")

    def test_loops(self):
        maze = Shape.QUAD.create(2, 2)
        Navigator(maze).right().down().left().up()
        _, candidates = matrix.filter(2, 2, lambda pos: True)
        result = check_connectivity(maze, candidates)
        assert result.codes() == ["CONN-003"]
        assert result.infos[0].message == "Carved area contains 1 loop(s)"


class TestValidateMaze:
    """Test the combined validation."""

    @pytest.mark.parametrize("method", ["braid", "clear", "dividing", "spelunker", "winding"])
    def test_generated_mazes_pass(self, maze, rng, method):
        maze.initialize(method, rng)
        result = validate_maze(maze)
        assert result.passed
        assert result.warnings == []

    def test_filter_limits_connectivity_check(self, rng):
        maze = Shape.QUAD.create(6, 6)

        def in_region(pos):
            return pos.row < 3

        maze.initialize('branching', rng, in_region)
        assert validate_maze(maze, in_region).issues == []
        assert "CONN-002" in validate_maze(maze).codes()
