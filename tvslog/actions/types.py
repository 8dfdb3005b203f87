"""Action types and dataclasses for parsed session logs.

This module defines the closed set of actions a session log row can
describe. Every action is an immutable dataclass carrying the common
row fields plus its own payload.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

# Ship class forced on a pilot once they reach the cruiser level
CRUISER_SHIP_TYPE = "cruiser/carrier"
CRUISER_LEVEL = 6


class ActionType(str, Enum):
    """Types of actions recognised in a session log."""

    ADDED = "added"  # Pilot joined the game
    SELECT_SHIP = "select_ship"  # Pilot chose a ship
    PICKUP = "pickup"  # Collected an item
    HYPER = "hyper"  # Jumped to another sector
    ATTACK = "attack"  # Combat hit
    LEVEL_UP = "level_up"  # Ship level increased
    SCRAP = "scrap"  # Scrap collected
    SELF_REPAIR = "self_repair"  # Repaired own ship
    REPAIR = "repair"  # Repaired another ship


@dataclass(frozen=True)
class BaseAction:
    """Fields shared by every action.

    Attributes:
        turn: Turn number the row was logged in.
        time: Timestamp text as logged.
        sector: Sector the event happened in.
        description: The raw description the row was classified by.
    """

    action_type: ClassVar[ActionType]

    turn: int
    time: str
    sector: str
    description: str

    def summary(self) -> str:
        """Short human-readable payload description."""
        return self.description


@dataclass(frozen=True)
class Added(BaseAction):
    """Pilot was added to the game."""

    action_type: ClassVar[ActionType] = ActionType.ADDED

    pilot_name: str

    def summary(self) -> str:
        return f"{self.pilot_name} joined"


@dataclass(frozen=True)
class SelectShip(BaseAction):
    """Pilot selected a ship type."""

    action_type: ClassVar[ActionType] = ActionType.SELECT_SHIP

    ship_type: str

    def summary(self) -> str:
        return f"piloting {self.ship_type}"


@dataclass(frozen=True)
class Pickup(BaseAction):
    """Item collected from a sector."""

    action_type: ClassVar[ActionType] = ActionType.PICKUP

    item: str
    amount: int

    def summary(self) -> str:
        return f"{self.amount} x {self.item}"


@dataclass(frozen=True)
class Hyper(BaseAction):
    """Hyperspace jump to another sector."""

    action_type: ClassVar[ActionType] = ActionType.HYPER

    destination: str

    def summary(self) -> str:
        return f"to {self.destination}"


@dataclass(frozen=True)
class Attack(BaseAction):
    """An attack, enriched with the pilot's state at the time.

    Attributes:
        pilot_name: Pilot known when the row was read.
        ship_type: Ship the pilot was flying.
        ship_level: Ship level at the time of the attack.
        attacker: Text before "attacked" in the description (may be empty).
        target: Text after "attacked".
        damage: Damage dealt.
    """

    action_type: ClassVar[ActionType] = ActionType.ATTACK

    pilot_name: str
    ship_type: str
    ship_level: int
    attacker: str
    target: str
    damage: int

    def summary(self) -> str:
        who = self.attacker or self.pilot_name or "?"
        return f"{who} -> {self.target} ({self.damage})"


@dataclass(frozen=True)
class LevelUp(BaseAction):
    """Ship level increased."""

    action_type: ClassVar[ActionType] = ActionType.LEVEL_UP

    level: int

    @property
    def is_cruiser(self) -> bool:
        """Whether this level promotes the ship to a cruiser/carrier."""
        return self.level == CRUISER_LEVEL

    def summary(self) -> str:
        return f"level {self.level}"


@dataclass(frozen=True)
class Scrap(BaseAction):
    """Scrap collected."""

    action_type: ClassVar[ActionType] = ActionType.SCRAP

    amount: int

    def summary(self) -> str:
        return f"{self.amount} scrap"


@dataclass(frozen=True)
class SelfRepair(BaseAction):
    """Pilot repaired their own ship."""

    action_type: ClassVar[ActionType] = ActionType.SELF_REPAIR

    amount: int

    def summary(self) -> str:
        return f"+{self.amount} hp"


@dataclass(frozen=True)
class Repair(BaseAction):
    """Pilot repaired another ship."""

    action_type: ClassVar[ActionType] = ActionType.REPAIR

    pilot_name: str
    ship_level: int
    target: str
    amount: int

    def summary(self) -> str:
        return f"{self.target} +{self.amount} hp"


Action = Union[
    Added,
    SelectShip,
    Pickup,
    Hyper,
    Attack,
    LevelUp,
    Scrap,
    SelfRepair,
    Repair,
]
