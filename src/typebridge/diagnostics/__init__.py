"""Diagnostics channel shared by all bridge stages."""

from typebridge.diagnostics.errors import (
    DiagnosticIssue,
    DiagnosticLocation,
    DiagnosticLog,
    DiagnosticSeverity,
    ErrorCodes,
)

__all__ = [
    "DiagnosticIssue",
    "DiagnosticLocation",
    "DiagnosticLog",
    "DiagnosticSeverity",
    "ErrorCodes",
]
