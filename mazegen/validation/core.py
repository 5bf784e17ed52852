"""
Core data structures for maze validation.

- Severity: Issue severity levels (INFO, WARN, FAIL)
- ValidationIssue: Individual validation finding
- ValidationResult: Collection of issues with pass/fail status
- ValidationError: Exception raised when validation fails
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from ..errors import MazeError


class Severity(Enum):
    """Validation issue severity levels.

    - INFO: Informational, logged but doesn't affect pass/fail
    - WARN: Warning, the maze is usable but probably not what was asked for
    - FAIL: Error, a structural invariant of the maze is broken
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class ValidationIssue:
    """Represents a single validation finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Rule code (e.g., "WALL-001")
        message: Human-readable description
        remediation: Optional suggested fix
        location: Optional room or wall position
    """
    severity: Severity
    code: str
    message: str
    remediation: Optional[str] = None
    location: Optional[str] = None

    def format(self) -> str:
        location = self.location or '-'
        fix = self.remediation or 'N/A'
        return f"[{self.severity}] {self.code} at={location} :: {self.message} :: fix={fix}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Collection of validation issues with pass/fail determination.

    Properties:
        passed: True if no FAIL severity issues
        failed: True if any FAIL severity issues
        warnings: List of WARN severity issues
        errors: List of FAIL severity issues
        infos: List of INFO severity issues
    """
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failed

    @property
    def failed(self) -> bool:
        return any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one.

        Returns:
            Self for chaining
        """
        self.issues.extend(other.issues)
        return self

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def report(self) -> str:
        """Generate a formatted report of all issues.

        Returns:
            Multi-line string with all issues formatted
        """
        if not self.issues:
            return "Validation passed: No issues found"

        status = "PASSED" if self.passed else "FAILED"
        lines = [f"Validation {status}: {len(self.issues)} issue(s)", "-" * 60]

        # Group by severity
        for severity in [Severity.FAIL, Severity.WARN, Severity.INFO]:
            severity_issues = [i for i in self.issues if i.severity == severity]
            if severity_issues:
                lines.append(f"\n{severity.name} ({len(severity_issues)}):")
                lines.extend(issue.format() for issue in severity_issues)

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'passed': self.passed,
            'issue_count': len(self.issues),
            'fail_count': len(self.errors),
            'warn_count': len(self.warnings),
            'info_count': len(self.infos),
            'issues': [
                {
                    'severity': str(issue.severity),
                    'code': issue.code,
                    'message': issue.message,
                    'remediation': issue.remediation,
                    'location': issue.location,
                }
                for issue in self.issues
            ]
        }


class ValidationError(MazeError):
    """Exception raised when validation fails with FAIL severity issues.

    Attributes:
        result: The ValidationResult that caused the failure
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.report())
