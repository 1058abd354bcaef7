"""Command-line interface for the SCADE to TRDP type bridge."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from typebridge import __version__
from typebridge.cli.error_formatter import DiagnosticFormatter, DiagnosticTable
from typebridge.cli.exception_handler import handle_exceptions
from typebridge.converters import DataSetWriter, MappingReaderError, read_mapping
from typebridge.diagnostics import DiagnosticLog
from typebridge.ir.datasets import DataSetList
from typebridge.models import load_config

# Unreadable or unparsable mapping: an empty data-set list is still written.
EXIT_INPUT_ERROR = 3

SCADE_MAP_DEFAULT = "mapping.xml"

# Create Typer app
app = typer.Typer(
    name="typebridge",
    help="Convert the type map of a generated SCADE model to TRDP data-set descriptions.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output. Data-sets may go to stdout, so progress goes to stderr.
console = Console()
log_console = Console(stderr=True)
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"typebridge version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Map the I/O types of a SCADE model onto TRDP data-sets.

    Reads the mapping.xml generated by KCG, finds the root operator and
    writes one TRDP data-set per structure used by its inputs and outputs.
    """


@app.command()
@handle_exceptions()
def convert(
    operators: Annotated[
        list[str] | None,
        typer.Argument(
            help="Operator name(s), e.g. Pkg::Root. Defaults to the mapping's root operator.",
            show_default=False,
        ),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help=f"Generated {SCADE_MAP_DEFAULT} to read. Reads stdin if omitted or '-'.",
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output data-set XML file. Writes stdout if omitted or '-'.",
            dir_okay=False,
        ),
    ] = None,
    include_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Dump all known data-sets, not only those used by the operator.",
        ),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML/JSON file with bridge settings.",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for diagnostics: text, table.",
        ),
    ] = "text",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report problems, no confirmations.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show locations and hints for each diagnostic.",
        ),
    ] = False,
) -> None:
    """Convert a KCG mapping file to a TRDP data-set list.

    Examples
    --------
        typebridge convert -i mapping.xml -o datasets.xml
        typebridge convert -i mapping.xml Pkg::Root
        typebridge convert --all < mapping.xml > datasets.xml
        typebridge convert -i mapping.xml --config bridge.yaml

    """
    from typebridge.transform import MappingToDataSetTransformer

    if output_format not in ("text", "table"):
        error_console.print(
            f"\n[bold red]✗ Invalid format: {output_format}[/bold red]\nSupported: text, table"
        )
        raise typer.Exit(code=1)

    config = load_config(config_file)
    writer = DataSetWriter()

    if include_all and not quiet:
        log_console.print("[green]\\[INFO][/green] Dumping all known data-sets.")

    try:
        doc = read_mapping(input_file)
    except MappingReaderError as e:
        error_console.print(f"✗ {escape(str(e))}")
        writer.write(DataSetList(), output)
        raise typer.Exit(code=EXIT_INPUT_ERROR) from None

    if not quiet:
        source = input_file if input_file and str(input_file) != "-" else "<stdin>"
        log_console.print(f'[green]\\[ OK ][/green] < "{source}"', highlight=False)

    diagnostics = DiagnosticLog()
    transformer = MappingToDataSetTransformer(config, diagnostics)
    data_sets = transformer.transform(doc, operators or (), include_all=include_all)

    if output_format == "table":
        DiagnosticTable(log_console).print_log(diagnostics)
    else:
        DiagnosticFormatter(log_console, show_info=not quiet, show_context=verbose).format_log(
            diagnostics
        )

    if data_sets.is_empty:
        log_console.print("[yellow]\\[WARN][/yellow] No data-sets to export.")

    writer.write(data_sets, output)
    if quiet:
        return
    if output is None or str(output) == "-":
        log_console.print("[green]\\[ OK ][/green] Written to stdout pipe.")
    else:
        log_console.print(
            f'[green]\\[ OK ][/green] Finished writing {len(data_sets)} data-set(s) to "{output}".',
            highlight=False,
        )


@app.command()
@handle_exceptions()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help=f"Generated {SCADE_MAP_DEFAULT} to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML/JSON file with bridge settings.",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Display the type catalogue and operators of a mapping file.

    Examples
    --------
        typebridge info mapping.xml

    """
    from typebridge.ir.store import TypeStore
    from typebridge.transform import CatalogueScanner, OperatorLocator

    config = load_config(config_file)

    try:
        doc = read_mapping(input_file)
    except MappingReaderError as e:
        error_console.print(f"\n✗ Failed to read file: {escape(str(e))}\n")
        raise typer.Exit(code=EXIT_INPUT_ERROR) from None

    diagnostics = DiagnosticLog()
    store = TypeStore(config, diagnostics)
    summary = CatalogueScanner(store, diagnostics).scan(doc)
    locator = OperatorLocator(config, diagnostics)

    console.print(
        Panel.fit(
            f"[bold]KCG Type Mapping[/bold]\nFile: {input_file}",
            title="File Info",
        )
    )

    table = Table(title="Catalogue Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Root operator", locator.root_name(doc) or "-")
    table.add_row("", "")  # Spacer
    table.add_row("Predefined types", str(summary.primitives))
    table.add_row("Arrays", str(summary.arrays))
    table.add_row("Structs", str(summary.structs))
    table.add_row("Type instantiations", str(summary.type_refs))
    table.add_row("Named data-sets", str(summary.named))
    table.add_row("Packages", str(summary.packages))
    table.add_row("Model ids in use", str(len(store)))
    console.print(table)

    operators = locator.operators(doc)
    if operators:
        ops_table = Table(title="Operators")
        ops_table.add_column("#", style="dim")
        ops_table.add_column("Operator", style="cyan")
        ops_table.add_column("Inputs", justify="right")
        ops_table.add_column("Outputs", justify="right")

        for i, located in enumerate(operators):
            ops_table.add_row(
                str(i),
                located.qualified_name(config.scope_separator),
                str(len(located.node.findall("input"))),
                str(len(located.node.findall("output"))),
            )

        console.print(ops_table)

    if diagnostics.has_errors or diagnostics.warnings:
        DiagnosticFormatter(log_console, show_info=False).format_log(diagnostics)


if __name__ == "__main__":
    app()
