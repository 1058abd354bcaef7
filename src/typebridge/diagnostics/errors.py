"""Diagnostic issue types reported while bridging a model to data-sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DiagnosticSeverity(Enum):
    """Severity level for diagnostic issues."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class DiagnosticLocation:
    """Location in the mapping document (or data-set output) of an issue."""

    path: str
    """XPath-like path to the offending node (e.g., 'model/struct[@id=12]')."""

    def __str__(self) -> str:
        """Format location as string."""
        return self.path


@dataclass(frozen=True)
class DiagnosticIssue:
    """A single diagnostic issue."""

    code: str
    """Unique code (e.g., 'E002', 'W001')."""

    message: str
    """Human-readable message."""

    severity: DiagnosticSeverity
    """Severity level."""

    location: DiagnosticLocation | None = None
    """Location in the mapping document."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class DiagnosticLog:
    """Ordered collection of every issue raised during one bridge run."""

    issues: list[DiagnosticIssue] = field(default_factory=list)

    @property
    def infos(self) -> list[DiagnosticIssue]:
        """Get only info-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.INFO]

    @property
    def warnings(self) -> list[DiagnosticIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.WARNING]

    @property
    def errors(self) -> list[DiagnosticIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.ERROR]

    @property
    def criticals(self) -> list[DiagnosticIssue]:
        """Get only critical-level issues."""
        return [i for i in self.issues if i.severity == DiagnosticSeverity.CRITICAL]

    @property
    def has_errors(self) -> bool:
        """Check if any error or critical issue was reported."""
        return bool(self.errors or self.criticals)

    def with_code(self, code: str) -> list[DiagnosticIssue]:
        """Get all issues carrying the given code."""
        return [i for i in self.issues if i.code == code]

    def add(self, issue: DiagnosticIssue) -> None:
        """Add an issue to the log."""
        self.issues.append(issue)

    def report(
        self,
        severity: DiagnosticSeverity,
        code: str,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an issue of the given severity."""
        self.add(
            DiagnosticIssue(
                code=code,
                message=message,
                severity=severity,
                location=DiagnosticLocation(path=path) if path else None,
                suggestion=suggestion,
                context=context,
            )
        )

    def info(self, code: str, message: str, path: str | None = None, **context: Any) -> None:
        """Add an info issue."""
        self.report(DiagnosticSeverity.INFO, code, message, path, **context)

    def warning(
        self,
        code: str,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self.report(DiagnosticSeverity.WARNING, code, message, path, suggestion, **context)

    def error(
        self,
        code: str,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self.report(DiagnosticSeverity.ERROR, code, message, path, suggestion, **context)

    def critical(
        self,
        code: str,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a critical issue."""
        self.report(DiagnosticSeverity.CRITICAL, code, message, path, suggestion, **context)

    def merge(self, other: DiagnosticLog) -> None:
        """Merge another log into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard diagnostic codes."""

    # E0xx - Catalogue and graph errors
    E001_ID_OUT_OF_RANGE = "E001"
    E002_DUPLICATE_ID = "E002"
    E003_SELF_REFERENCE = "E003"
    E004_UNKNOWN_PRIMITIVE = "E004"
    E005_NAME_CONFLICT = "E005"
    E006_UNDEFINED_ID = "E006"
    E007_UNRESOLVED_REFERENCE = "E007"
    E008_ARRAY_OF_ARRAY = "E008"
    E009_REFERENCE_CYCLE = "E009"

    # F0xx - Operator resolution failures
    F001_OPERATOR_NOT_FOUND = "F001"
    F002_OPERATOR_AMBIGUOUS = "F002"
    F003_OPERATOR_UNDEFINED = "F003"
    F004_PACKAGE_NOT_FOUND = "F004"

    # W0xx - Warnings
    W001_INVALID_ATTRIBUTE = "W001"
    W002_MISSING_ATTRIBUTE = "W002"
    W003_NO_COMPOSITE_PARAMETERS = "W003"
    W004_MISSING_SECTION = "W004"

    # I0xx - Confirmations
    I001_ROOT_NAME = "I001"
    I002_OPERATOR_RESOLVED = "I002"
    I003_CATALOGUE_SUMMARY = "I003"
    I004_INTERFACE_SUMMARY = "I004"
