"""Session log parser.

Main Components:
    - SessionClassifier: Classifies rows in order, carrying session state
    - SessionState: Pilot name, ship type and ship level seen so far
    - IGNORE_PATTERNS / ACTION_PATTERNS: Ordered description tables
    - parse_log / parse_log_file: Read a whole CSV log into a ParseResult
"""

from tvslog.parser.patterns import (
    ACTION_PATTERNS,
    IGNORE_PATTERNS,
    DescriptionPattern,
    MatchMode,
    is_ignorable,
    match_action,
)
from tvslog.parser.session import SessionClassifier, SessionState
from tvslog.parser.log_reader import ParseResult, parse_log, parse_log_file

__all__ = [
    # Patterns
    "ACTION_PATTERNS",
    "IGNORE_PATTERNS",
    "DescriptionPattern",
    "MatchMode",
    "is_ignorable",
    "match_action",
    # Classifier
    "SessionClassifier",
    "SessionState",
    # Reading
    "ParseResult",
    "parse_log",
    "parse_log_file",
]
