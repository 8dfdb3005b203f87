"""Observability module for log parsing.

Provides hooks and observers for per-row visibility into what the
reader produced, ignored, or skipped.
"""

from tvslog.observability.events import (
    ActionParsedEvent,
    RowIgnoredEvent,
    RowErrorEvent,
)
from tvslog.observability.hooks import (
    ParseHook,
    NullHook,
    LoggingHook,
    CompositeHook,
)
from tvslog.observability.console_observer import RichConsoleObserver

__all__ = [
    # Events
    "ActionParsedEvent",
    "RowIgnoredEvent",
    "RowErrorEvent",
    # Hooks
    "ParseHook",
    "NullHook",
    "LoggingHook",
    "CompositeHook",
    # Observers
    "RichConsoleObserver",
]
