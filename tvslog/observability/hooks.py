"""Parse hook protocol and implementations.

The ParseHook protocol defines the interface for receiving per-row
events from the log reader. Implementations can log, render to the
console, or collect diagnostics.
"""

import logging
from typing import Protocol, runtime_checkable

from tvslog.observability.events import (
    ActionParsedEvent,
    RowErrorEvent,
    RowIgnoredEvent,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class ParseHook(Protocol):
    """Protocol for parse hooks.

    Implement this protocol to receive events from the log reader.
    """

    def on_action(self, event: ActionParsedEvent) -> None:
        """Called when a row produced an action."""
        ...

    def on_ignored(self, event: RowIgnoredEvent) -> None:
        """Called when a row was ignorable."""
        ...

    def on_row_error(self, event: RowErrorEvent) -> None:
        """Called when a row was skipped because of an error."""
        ...


class NullHook:
    """No-op hook for when no reporting is wanted.

    This is the default hook - it does nothing but satisfies the protocol.
    """

    def on_action(self, event: ActionParsedEvent) -> None:
        pass

    def on_ignored(self, event: RowIgnoredEvent) -> None:
        pass

    def on_row_error(self, event: RowErrorEvent) -> None:
        pass


class LoggingHook:
    """Reports skipped rows through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Initialize the hook.

        Args:
            log: Logger to write to. Defaults to this module's logger.
        """
        self.log = log or logger

    def on_action(self, event: ActionParsedEvent) -> None:
        self.log.debug(
            f"Row {event.row_number}: {event.action.action_type.value} {event.action.summary()}"
        )

    def on_ignored(self, event: RowIgnoredEvent) -> None:
        self.log.debug(f"Row {event.row_number}: ignored {','.join(event.row)}")

    def on_row_error(self, event: RowErrorEvent) -> None:
        self.log.warning(
            f"Failed to parse CSV record {','.join(event.row)} "
            f"(line {event.row_number}); {event.reason}"
        )


class CompositeHook:
    """Combines multiple hooks into one.

    Events are dispatched to all hooks in order.
    """

    def __init__(self, hooks: list[ParseHook]) -> None:
        """Initialize with a list of hooks.

        Args:
            hooks: List of hooks to dispatch events to.
        """
        self.hooks = hooks

    def on_action(self, event: ActionParsedEvent) -> None:
        for hook in self.hooks:
            hook.on_action(event)

    def on_ignored(self, event: RowIgnoredEvent) -> None:
        for hook in self.hooks:
            hook.on_ignored(event)

    def on_row_error(self, event: RowErrorEvent) -> None:
        for hook in self.hooks:
            hook.on_row_error(event)
