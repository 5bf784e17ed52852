"""
Maze validation: wall consistency and connectivity checks.
"""

from .core import Severity, ValidationIssue, ValidationResult, ValidationError
from .rules import ValidationRule
from .checks import check_walls, check_connectivity, validate_maze

__all__ = [
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    'ValidationRule',
    'check_walls',
    'check_connectivity',
    'validate_maze',
]
