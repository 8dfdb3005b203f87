"""Main CLI application for the session log parser."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from tvslog.cli.display import (
    console,
    display_actions,
    display_error,
    display_info,
    display_row_errors,
    display_summary,
)
from tvslog.config import get_settings
from tvslog.exceptions import RowError, RowSourceError
from tvslog.observability import NullHook, ParseHook, RichConsoleObserver
from tvslog.parser.log_reader import parse_log_file

app = typer.Typer(
    name="tvslog",
    help="Turn TVS session logs into typed actions",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def parse(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Session log CSV"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Abort on the first bad row"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print every row as it is read"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="File encoding"),
) -> None:
    """Parse a session log and list the actions it contains."""
    _configure_logging(verbose)
    settings = get_settings()

    # Skipped rows are shown once: inline when verbose, otherwise in a table
    hook: ParseHook = NullHook()
    if verbose:
        hook = RichConsoleObserver(console=console, show_ignored=settings.show_ignored)

    try:
        result = parse_log_file(
            path,
            encoding=encoding,
            hook=hook,
            strict=strict,
        )
    except RowSourceError as e:
        display_error(str(e))
        raise typer.Exit(1)
    except RowError as e:
        display_error(f"line {e.row_number}: {e}")
        raise typer.Exit(1)

    if not result.actions:
        display_info("No actions found")
    else:
        display_actions(result.actions, title=path.name)

    if result.has_errors and not verbose:
        display_row_errors(result.errors)

    display_summary(result)


@app.callback()
def main() -> None:
    """TVS log parser.

    Use 'tvslog parse FILE' to list the actions in a session log.
    """
    pass


if __name__ == "__main__":
    app()
