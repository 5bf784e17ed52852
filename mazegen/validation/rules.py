"""
Validation rule definitions.

Rules are organized by category:
- WALL: Wall state consistency
- CONN: Connectivity of the carved area
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule.

    Attributes:
        code: Unique rule code (e.g., "WALL-001")
        severity: Default severity for this rule
        message_template: Template for error message (use {placeholders})
        remediation_template: Template for suggested fix
    """
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None

    def issue(self, location: Optional[str] = None, **kwargs) -> ValidationIssue:
        """Create an issue for this rule with formatted message and fix."""
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.message_template.format(**kwargs),
            remediation=(self.remediation_template.format(**kwargs)
                         if self.remediation_template else None),
            location=location,
        )


# =============================================================================
# WALL RULES (WALL)
# =============================================================================

WALL_001 = ValidationRule(
    code="WALL-001",
    severity=Severity.FAIL,
    message_template="Wall {wall} is {state} but its back {back} is not",
    remediation_template="Change walls through Maze.set_open, which updates both sides",
)

WALL_002 = ValidationRule(
    code="WALL-002",
    severity=Severity.FAIL,
    message_template="Room opens walls {mask:#x} not belonging to its shape",
    remediation_template="Only open walls returned by Maze.walls(pos)",
)

WALL_003 = ValidationRule(
    code="WALL-003",
    severity=Severity.WARN,
    message_template="Wall {wall} opens to the outside of the maze",
)

# =============================================================================
# CONNECTIVITY RULES (CONN)
# =============================================================================

CONN_001 = ValidationRule(
    code="CONN-001",
    severity=Severity.WARN,
    message_template="Candidate rooms form {count} disconnected areas",
    remediation_template="Use a filter selecting a single connected region",
)

CONN_002 = ValidationRule(
    code="CONN-002",
    severity=Severity.WARN,
    message_template="{count} candidate room(s) were never visited",
)

CONN_003 = ValidationRule(
    code="CONN-003",
    severity=Severity.INFO,
    message_template="Carved area contains {count} loop(s)",
)
