"""CLI support module for typebridge.

The typer application itself lives in ``typebridge.cli_main``.
"""

from typebridge.cli.error_formatter import DiagnosticFormatter, DiagnosticTable
from typebridge.cli.exception_handler import handle_exceptions

__all__ = [
    "DiagnosticFormatter",
    "DiagnosticTable",
    "handle_exceptions",
]
