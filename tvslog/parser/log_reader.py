"""Reading whole session logs.

The log is CSV with a header line. Rows are classified in order by a
single SessionClassifier; per-row failures are reported and skipped,
while a failing source aborts the run.
"""

import csv
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from tvslog.actions.types import Action, ActionType
from tvslog.config import get_settings
from tvslog.exceptions import RowError, RowSourceError
from tvslog.observability.events import (
    ActionParsedEvent,
    RowErrorEvent,
    RowIgnoredEvent,
)
from tvslog.observability.hooks import LoggingHook, ParseHook
from tvslog.parser.session import SessionClassifier

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """The outcome of reading one log.

    Attributes:
        actions: Actions in the order their rows appeared.
        errors: Recoverable errors for rows that were skipped.
        ignored: Number of ignorable rows.
        rows: Number of data rows read, excluding the header and blank lines.
    """

    actions: list[Action] = field(default_factory=list)
    errors: list[RowError] = field(default_factory=list)
    ignored: int = 0
    rows: int = 0

    @property
    def has_errors(self) -> bool:
        """Whether any row was skipped because of an error."""
        return len(self.errors) > 0

    def action_counts(self) -> Counter[ActionType]:
        """Number of actions of each type."""
        return Counter(action.action_type for action in self.actions)


def parse_log(
    source: Iterable[str],
    hook: ParseHook | None = None,
    strict: bool = False,
) -> ParseResult:
    """Parse a session log into actions.

    Args:
        source: Lines of CSV text, e.g. an open file.
        hook: Receives one event per row. Defaults to LoggingHook.
        strict: Re-raise the first row error instead of skipping the row.

    Returns:
        ParseResult with actions and skipped-row errors.

    Raises:
        RowSourceError: If the source can't be read or has no header.
        RowError: In strict mode, for the first bad row.
    """
    hook = hook or LoggingHook()
    reader = csv.reader(source)
    classifier = SessionClassifier()
    result = ParseResult()

    # First line is headings, just discard
    try:
        next(reader)
    except StopIteration:
        raise RowSourceError("failed to parse session log: missing header row") from None
    except (csv.Error, OSError, UnicodeDecodeError) as e:
        raise RowSourceError(f"failed to parse session log: {e}") from e

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except (csv.Error, OSError, UnicodeDecodeError) as e:
            raise RowSourceError(
                f"failed to parse session log at line {reader.line_num}: {e}"
            ) from e

        if not row:
            continue

        row_number = reader.line_num
        result.rows += 1

        try:
            action = classifier.classify(row)
        except RowError as e:
            e.row_number = row_number
            if strict:
                raise
            result.errors.append(e)
            hook.on_row_error(RowErrorEvent(row_number=row_number, row=row, error=e))
            continue

        if action is None:
            # considered inconsequential (e.g. sector damage)
            result.ignored += 1
            hook.on_ignored(RowIgnoredEvent(row_number=row_number, row=row))
            continue

        result.actions.append(action)
        hook.on_action(ActionParsedEvent(row_number=row_number, row=row, action=action))

    logger.info(
        f"Parsed {result.rows} rows: {len(result.actions)} actions, "
        f"{result.ignored} ignored, {len(result.errors)} skipped"
    )
    return result


def parse_log_file(
    path: str | Path,
    encoding: str | None = None,
    hook: ParseHook | None = None,
    strict: bool | None = None,
) -> ParseResult:
    """Open a session log file and parse it.

    Args:
        path: Path to the CSV log.
        encoding: File encoding. Defaults to the configured encoding.
        hook: Per-row event hook.
        strict: Abort on the first bad row. Defaults to the configured value.

    Returns:
        ParseResult for the file.
    """
    settings = get_settings()
    if encoding is None:
        encoding = settings.encoding
    if strict is None:
        strict = settings.strict

    try:
        handle = open(path, encoding=encoding, newline="")
    except OSError as e:
        raise RowSourceError(f"failed to open session log {path}: {e}") from e

    with handle:
        return parse_log(handle, hook=hook, strict=strict)
