"""Description patterns for classifying session log rows.

Both tables are ordered and evaluated first match wins, so entries
that overlap must stay in the order given here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from tvslog.actions.builders import (
    added_from_row,
    attack_from_row,
    hyper_from_row,
    level_up_from_row,
    pickup_from_row,
    repair_from_row,
    scrap_from_row,
    select_ship_from_row,
    self_repair_from_row,
)
from tvslog.actions.types import Action

if TYPE_CHECKING:
    from tvslog.parser.session import SessionState


class MatchMode(str, Enum):
    """How a pattern's text is compared with a description."""

    PREFIX = "prefix"
    EXACT = "exact"
    CONTAINS = "contains"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class DescriptionPattern:
    """A literal text matched against a row description."""

    text: str
    mode: MatchMode

    def matches(self, description: str) -> bool:
        """Whether the description matches this pattern."""
        if self.mode == MatchMode.PREFIX:
            return description.startswith(self.text)
        if self.mode == MatchMode.EXACT:
            return description == self.text
        if self.mode == MatchMode.CONTAINS:
            return self.text in description
        return description.endswith(self.text)


RowBuilder = Callable[[list[str], "SessionState"], Action]


# Benign rows that carry nothing of interest
IGNORE_PATTERNS: list[DescriptionPattern] = [
    DescriptionPattern("Set autopilot to", MatchMode.PREFIX),
    DescriptionPattern("Unset autopilot", MatchMode.PREFIX),
    DescriptionPattern("Entered carrier", MatchMode.PREFIX),
    DescriptionPattern("Taken sector damage", MatchMode.EXACT),
    DescriptionPattern("Earned domination bonus", MatchMode.EXACT),
    DescriptionPattern("Hit by atmospheric anomaly", MatchMode.EXACT),
    DescriptionPattern("Exited carrier", MatchMode.EXACT),
    DescriptionPattern("Hit by base explosion", MatchMode.EXACT),
]


def _attack(row: list[str], state: "SessionState") -> Action:
    return attack_from_row(row, state.pilot_name, state.ship_type, state.ship_level)


def _repair(row: list[str], state: "SessionState") -> Action:
    return repair_from_row(row, state.pilot_name, state.ship_level)


def _stateless(builder: Callable[[list[str]], Action]) -> RowBuilder:
    def build(row: list[str], state: "SessionState") -> Action:
        return builder(row)

    build.__name__ = builder.__name__
    return build


# Recognised actions, in evaluation order
ACTION_PATTERNS: list[tuple[DescriptionPattern, RowBuilder]] = [
    (DescriptionPattern("Pickup", MatchMode.PREFIX), _stateless(pickup_from_row)),
    (DescriptionPattern("Added to the game", MatchMode.EXACT), _stateless(added_from_row)),
    (DescriptionPattern("Selected to pilot a", MatchMode.PREFIX), _stateless(select_ship_from_row)),
    (DescriptionPattern("Hypered to ", MatchMode.PREFIX), _stateless(hyper_from_row)),
    (DescriptionPattern("attacked", MatchMode.CONTAINS), _attack),
    (DescriptionPattern("Achieved level", MatchMode.PREFIX), _stateless(level_up_from_row)),
    (DescriptionPattern("Awarded cruiser", MatchMode.PREFIX), _stateless(level_up_from_row)),
    (DescriptionPattern("scrap", MatchMode.SUFFIX), _stateless(scrap_from_row)),
    # Must precede the general "repaired" entry
    (DescriptionPattern("Self repaired", MatchMode.EXACT), _stateless(self_repair_from_row)),
    (DescriptionPattern("repaired", MatchMode.CONTAINS), _repair),
]


def is_ignorable(description: str) -> bool:
    """Whether a description matches the ignore list."""
    return any(pattern.matches(description) for pattern in IGNORE_PATTERNS)


def match_action(description: str) -> RowBuilder | None:
    """Find the builder for a description.

    Args:
        description: Row description text.

    Returns:
        Builder of the first matching pattern, or None if nothing matches.
    """
    for pattern, builder in ACTION_PATTERNS:
        if pattern.matches(description):
            return builder
    return None
