"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tvslog.actions.types import Action
from tvslog.exceptions import RowError
from tvslog.parser.log_reader import ParseResult


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{escape(message)}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{escape(message)}[/dim]")


def display_actions(actions: list[Action], title: str = "Actions") -> None:
    """Display parsed actions as a table.

    Args:
        actions: Actions in log order.
        title: Table title.
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Turn", justify="right", style="cyan")
    table.add_column("Type", style="yellow")
    table.add_column("Sector", style="white")
    table.add_column("Details", style="white")

    for action in actions:
        table.add_row(
            str(action.turn),
            action.action_type.value,
            escape(action.sector),
            escape(action.summary()),
        )

    console.print(table)


def display_row_errors(errors: list[RowError]) -> None:
    """Display skipped rows and why they were skipped.

    Args:
        errors: Row errors collected by the reader.
    """
    table = Table(title="Skipped rows", box=box.ROUNDED)
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Reason", style="red")

    for error in errors:
        line = str(error.row_number) if error.row_number is not None else "?"
        table.add_row(line, escape(str(error)))

    console.print(table)


def display_summary(result: ParseResult) -> None:
    """Display counts for a parsed log.

    Args:
        result: The parse result.
    """
    counts = result.action_counts()
    breakdown = ", ".join(
        f"{action_type.value}={count}" for action_type, count in sorted(counts.items())
    )
    console.print()
    console.print(
        f"[bold]{len(result.actions)} actions[/bold], "
        f"{result.ignored} ignored, {len(result.errors)} skipped "
        f"from {result.rows} rows"
    )
    if breakdown:
        console.print(f"[dim]{breakdown}[/dim]")
