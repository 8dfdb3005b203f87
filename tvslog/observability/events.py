"""Event dataclasses for parse hooks.

These events are emitted by the log reader once per row to provide
visibility into what happened to it.
"""

from dataclasses import dataclass, field
from datetime import datetime

from tvslog.actions.types import Action
from tvslog.exceptions import RowError


@dataclass
class ActionParsedEvent:
    """Emitted when a row produced an action."""

    row_number: int
    row: list[str]
    action: Action
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RowIgnoredEvent:
    """Emitted when a row matched the ignore list."""

    row_number: int
    row: list[str]
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RowErrorEvent:
    """Emitted when a row was skipped because of an error."""

    row_number: int
    row: list[str]
    error: RowError
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def reason(self) -> str:
        return str(self.error)
