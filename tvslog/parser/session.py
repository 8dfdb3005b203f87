"""Session classifier: row to action dispatch with carried-forward state.

The classifier is the primary interface for turning raw rows into
actions. It remembers the pilot name, ship type and ship level seen so
far, because Attack and Repair rows do not carry them.
"""

import logging
from dataclasses import dataclass, replace
from typing import assert_never

from tvslog.actions.builders import DESCRIPTION_INDEX, RECORD_FIELD_COUNT
from tvslog.actions.types import (
    CRUISER_SHIP_TYPE,
    Action,
    Added,
    Attack,
    Hyper,
    LevelUp,
    Pickup,
    Repair,
    Scrap,
    SelectShip,
    SelfRepair,
)
from tvslog.exceptions import UnexpectedRecordShapeError, UnrecognizedActionError
from tvslog.parser.patterns import is_ignorable, match_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Context carried from earlier rows.

    Attributes:
        pilot_name: Set by the most recent Added action.
        ship_type: Set by SelectShip, or forced to cruiser/carrier at level 6.
        ship_level: Set by the most recent LevelUp action.
    """

    pilot_name: str = ""
    ship_type: str = ""
    ship_level: int = 0

    def apply(self, action: Action) -> "SessionState":
        """Return the state that follows this action.

        Last write wins; nothing is validated against game rules.
        """
        if isinstance(action, Added):
            return replace(self, pilot_name=action.pilot_name)
        elif isinstance(action, SelectShip):
            return replace(self, ship_type=action.ship_type)
        elif isinstance(action, LevelUp):
            if action.is_cruiser:
                return replace(self, ship_level=action.level, ship_type=CRUISER_SHIP_TYPE)
            return replace(self, ship_level=action.level)
        elif isinstance(action, (Pickup, Hyper, Attack, Scrap, SelfRepair, Repair)):
            return self
        else:
            assert_never(action)


class SessionClassifier:
    """Classifies rows of one session log, in order.

    Example:
        classifier = SessionClassifier()
        classifier.classify(["1", "00:00", "A1", "Added to the game", "", "Alice"])
        # -> Added(pilot_name="Alice", ...)
        classifier.classify(["2", "00:01", "A1", "Entered carrier", "", ""])
        # -> None

    One instance per log; rows must be fed in the order they were logged.
    """

    def __init__(self, state: SessionState | None = None) -> None:
        """Initialize the classifier.

        Args:
            state: Starting state. Defaults to an empty session.
        """
        self.state = state or SessionState()

    def classify(self, row: list[str]) -> Action | None:
        """Turn one row into an action.

        Args:
            row: Raw log fields.

        Returns:
            The action, or None if the row is ignorable.

        Raises:
            UnexpectedRecordShapeError: If the row does not have 6 fields.
            MalformedFieldError: If a field the action needs is bad.
            UnrecognizedActionError: If the description matches nothing.
        """
        if len(row) != RECORD_FIELD_COUNT:
            raise UnexpectedRecordShapeError(len(row), row)

        description = row[DESCRIPTION_INDEX]
        if is_ignorable(description):
            logger.debug(f"Ignoring row: {description}")
            return None

        builder = match_action(description)
        if builder is None:
            raise UnrecognizedActionError(description, row)

        action = builder(row, self.state)
        self.state = self.state.apply(action)
        return action

    def reset(self) -> None:
        """Forget everything learned from earlier rows."""
        self.state = SessionState()
