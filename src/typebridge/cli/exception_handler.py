"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from typebridge.models.loader import ConfigError

T = TypeVar("T")

console = Console(stderr=True)

# Exit code for configuration and other usage problems. Unreadable input
# has its own code, see cli_main.EXIT_INPUT_ERROR.
EXIT_FAILURE = 1


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except (typer.Exit, typer.Abort):
                raise
            except ConfigError as e:
                _handle_config_error(e, verbose)
                raise typer.Exit(EXIT_FAILURE) from None
            except OSError as e:
                _handle_os_error(e, verbose)
                raise typer.Exit(EXIT_FAILURE) from None
            except Exception as e:
                _handle_generic_error(e, verbose)
                raise typer.Exit(EXIT_FAILURE) from None

        return wrapper

    return decorator


def _handle_config_error(error: ConfigError, verbose: bool) -> None:
    """Handle configuration file errors."""
    console.print(
        Panel(
            f"[red]{escape(str(error))}[/red]",
            title="Configuration Error",
            border_style="red",
        )
    )
    if verbose and error.__cause__ is not None:
        console.print(f"[dim]{error.__cause__}[/dim]")


def _handle_os_error(error: OSError, verbose: bool) -> None:
    """Handle file system errors, typically while writing the data-set list."""
    if isinstance(error, FileNotFoundError):
        hint = "Check that the directory exists and the path is spelled correctly."
    elif isinstance(error, PermissionError):
        hint = "Check file permissions, or write to stdout with -o -."
    else:
        hint = "The output location may be full or read-only."
    console.print(
        Panel(
            f"[red]{error.strerror or error}: {error.filename or '<unknown>'}[/red]\n\n{hint}",
            title="I/O Error",
            border_style="red",
        )
    )
    if verbose:
        console.print(f"[dim]errno={error.errno}[/dim]")


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    console.print(
        Panel(
            f"[red]{type(error).__name__}: {escape(str(error))}[/red]",
            title="Conversion Aborted",
            border_style="red",
        )
    )
    if verbose:
        console.print("[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
