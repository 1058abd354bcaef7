"""Diagnostic formatting with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typebridge.diagnostics.errors import DiagnosticSeverity

if TYPE_CHECKING:
    from typebridge.diagnostics.errors import DiagnosticIssue, DiagnosticLog


# Tag and colour per severity, in the style of the classic "[ OK ]" logs
SEVERITY_STYLES: dict[DiagnosticSeverity, tuple[str, str]] = {
    DiagnosticSeverity.INFO: ("INFO", "green"),
    DiagnosticSeverity.WARNING: ("WARN", "yellow"),
    DiagnosticSeverity.ERROR: ("ERR ", "red"),
    DiagnosticSeverity.CRITICAL: ("CRIT", "magenta"),
}


class DiagnosticFormatter:
    """Formats a diagnostic log for terminal display, in report order."""

    def __init__(
        self,
        console: Console | None = None,
        show_info: bool = True,
        show_context: bool = False,
    ) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.
            show_info: Whether to print info-level confirmations.
            show_context: Whether to print locations and hints.

        """
        self.console = console or Console(stderr=True)
        self.show_info = show_info
        self.show_context = show_context

    def format_log(self, log: DiagnosticLog) -> None:
        """Print every issue, then a one-line count of problems."""
        for issue in log.issues:
            if issue.severity == DiagnosticSeverity.INFO and not self.show_info:
                continue
            self._print_issue(issue)

        problems = [
            (len(log.criticals), "critical", "magenta"),
            (len(log.errors), "error(s)", "red"),
            (len(log.warnings), "warning(s)", "yellow"),
        ]
        counts = [f"[{color}]{n} {label}[/{color}]" for n, label, color in problems if n]
        if counts:
            self.console.print(", ".join(counts))

    def _print_issue(self, issue: DiagnosticIssue) -> None:
        tag, color = SEVERITY_STYLES[issue.severity]
        self.console.print(
            f"[{color} bold]\\[{tag}][/{color} bold] "
            f"[dim]{issue.code}[/dim] {escape(issue.message)}",
            highlight=False,
        )

        if not self.show_context:
            return
        if issue.location:
            self.console.print(f"  [dim]at {escape(str(issue.location))}[/dim]")
        if issue.suggestion:
            self.console.print(f"  [green]💡 {escape(issue.suggestion)}[/green]")


class DiagnosticTable:
    """Display diagnostics as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize diagnostic table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_log(self, log: DiagnosticLog) -> None:
        """Print the diagnostic log as table."""
        table = Table(title="Diagnostics")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in log.issues:
            _, color = SEVERITY_STYLES[issue.severity]
            severity = f"[{color}]{issue.severity.value.upper()}[/{color}]"

            location = escape(str(issue.location)) if issue.location else "-"

            table.add_row(
                issue.code,
                severity,
                location,
                escape(issue.message),
            )

        self.console.print(table)
