"""Rich console observer for row-by-row parse output.

Uses the Rich library to print each row's outcome as it is read.
"""

from rich.console import Console
from rich.markup import escape

from tvslog.actions.types import ActionType
from tvslog.observability.events import (
    ActionParsedEvent,
    RowErrorEvent,
    RowIgnoredEvent,
)


class RichConsoleObserver:
    """Pretty console output using Rich."""

    # Colours for visual distinction
    ACTION_STYLES = {
        ActionType.ADDED: "bold cyan",
        ActionType.SELECT_SHIP: "cyan",
        ActionType.ATTACK: "red",
        ActionType.LEVEL_UP: "bold green",
        ActionType.REPAIR: "green",
        ActionType.SELF_REPAIR: "green",
    }

    def __init__(
        self,
        console: Console | None = None,
        show_ignored: bool = False,
        indent: str = "  ",
    ) -> None:
        """Initialize the console observer.

        Args:
            console: Rich Console instance. Creates new one if not provided.
            show_ignored: Also print rows that were ignored.
            indent: Indentation string for each line.
        """
        self.console = console or Console()
        self.show_ignored = show_ignored
        self.indent = indent

    def on_action(self, event: ActionParsedEvent) -> None:
        """Render a parsed action."""
        action = event.action
        style = self.ACTION_STYLES.get(action.action_type, "white")
        self.console.print(
            f"{self.indent}[dim]{event.row_number:>5}[/] "
            f"[{style}]{action.action_type.value}[/] {escape(action.summary())}"
        )

    def on_ignored(self, event: RowIgnoredEvent) -> None:
        """Render an ignored row, if enabled."""
        if self.show_ignored:
            self.console.print(
                f"{self.indent}[dim]{event.row_number:>5} ignored {escape(','.join(event.row))}[/]"
            )

    def on_row_error(self, event: RowErrorEvent) -> None:
        """Render a skipped row."""
        self.console.print(
            f"{self.indent}[dim]{event.row_number:>5}[/] [red]x[/] {escape(event.reason)}"
        )
