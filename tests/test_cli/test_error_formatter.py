"""Tests for diagnostic formatting."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console
from typebridge.cli.error_formatter import DiagnosticFormatter, DiagnosticTable
from typebridge.diagnostics import DiagnosticLog, ErrorCodes


@pytest.fixture
def output() -> StringIO:
    """Return a buffer capturing console output."""
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    """Return a wide, colourless console writing to the buffer."""
    return Console(file=output, width=200, no_color=True)


@pytest.fixture
def log() -> DiagnosticLog:
    """Return a log with one issue per severity."""
    log = DiagnosticLog()
    log.info(ErrorCodes.I001_ROOT_NAME, "Identified root name: Pkg::Root")
    log.warning(
        ErrorCodes.W003_NO_COMPOSITE_PARAMETERS,
        '"Pkg::Root" has  0 DS-outputs out of  1',
        suggestion="Wrap scalar parameters in a structure or an array",
    )
    log.error(
        ErrorCodes.E007_UNRESOLVED_REFERENCE,
        "reference to undefined model id=99",
        path="data-set[@id=1020]/element[@name=x]",
    )
    log.critical(ErrorCodes.E002_DUPLICATE_ID, "Model id=5 not defined again.")
    return log


class TestDiagnosticFormatter:
    """Tests for DiagnosticFormatter."""

    def test_all_issues_in_order(
        self, console: Console, output: StringIO, log: DiagnosticLog
    ) -> None:
        """Should print tagged issues in report order."""
        DiagnosticFormatter(console).format_log(log)

        lines = output.getvalue().splitlines()
        assert lines[0] == "[INFO] I001 Identified root name: Pkg::Root"
        assert lines[1].startswith("[WARN] W003")
        assert lines[2].startswith("[ERR ] E007")
        assert lines[3].startswith("[CRIT] E002")
        assert lines[4] == "1 critical, 1 error(s), 1 warning(s)"

    def test_hide_info(self, console: Console, output: StringIO, log: DiagnosticLog) -> None:
        """Info issues can be suppressed."""
        DiagnosticFormatter(console, show_info=False).format_log(log)

        assert "I001" not in output.getvalue()
        assert "W003" in output.getvalue()

    def test_context(self, console: Console, output: StringIO, log: DiagnosticLog) -> None:
        """Locations and hints are shown on request."""
        DiagnosticFormatter(console, show_context=True).format_log(log)

        text = output.getvalue()
        assert "at data-set[@id=1020]/element[@name=x]" in text
        assert "Wrap scalar parameters in a structure or an array" in text

    def test_markup_escaped(self, console: Console, output: StringIO) -> None:
        """Square brackets in messages are printed literally."""
        log = DiagnosticLog()
        log.error(ErrorCodes.E008_ARRAY_OF_ARRAY, "Check (DS=1020) S->m[3][4]")
        DiagnosticFormatter(console).format_log(log)

        assert "S->m[3][4]" in output.getvalue()

    def test_empty_log(self, console: Console, output: StringIO) -> None:
        """An empty log prints nothing."""
        DiagnosticFormatter(console).format_log(DiagnosticLog())
        assert output.getvalue() == ""


class TestDiagnosticTable:
    """Tests for DiagnosticTable."""

    def test_table(self, console: Console, output: StringIO, log: DiagnosticLog) -> None:
        """Should list every issue with code and severity."""
        DiagnosticTable(console).print_log(log)

        text = output.getvalue()
        assert "Diagnostics" in text
        for code in ("I001", "W003", "E007", "E002"):
            assert code in text
        assert "CRITICAL" in text
