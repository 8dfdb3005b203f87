"""Session log parser for TVS game logs.

Quick Start:
    from tvslog import parse_log_file

    result = parse_log_file("session.csv")
    for action in result.actions:
        print(action.action_type, action.summary())
"""

from tvslog.actions import Action, ActionType
from tvslog.exceptions import (
    MalformedFieldError,
    RowError,
    RowSourceError,
    TVSLogError,
    UnexpectedRecordShapeError,
    UnrecognizedActionError,
)
from tvslog.parser import (
    ParseResult,
    SessionClassifier,
    SessionState,
    parse_log,
    parse_log_file,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionType",
    "SessionClassifier",
    "SessionState",
    "ParseResult",
    "parse_log",
    "parse_log_file",
    # Errors
    "TVSLogError",
    "RowSourceError",
    "RowError",
    "UnexpectedRecordShapeError",
    "MalformedFieldError",
    "UnrecognizedActionError",
]
