"""Action model for session logs.

Main Components:
    - ActionType: Enum tagging every action kind
    - Action: Union of the immutable action dataclasses
    - *_from_row: Builders turning a raw row into one action
"""

from tvslog.actions.types import (
    CRUISER_LEVEL,
    CRUISER_SHIP_TYPE,
    Action,
    ActionType,
    Added,
    Attack,
    BaseAction,
    Hyper,
    LevelUp,
    Pickup,
    Repair,
    Scrap,
    SelectShip,
    SelfRepair,
)
from tvslog.actions.builders import (
    DESCRIPTION_INDEX,
    RECORD_FIELD_COUNT,
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

__all__ = [
    # Types
    "Action",
    "ActionType",
    "BaseAction",
    "Added",
    "SelectShip",
    "Pickup",
    "Hyper",
    "Attack",
    "LevelUp",
    "Scrap",
    "SelfRepair",
    "Repair",
    "CRUISER_LEVEL",
    "CRUISER_SHIP_TYPE",
    # Builders
    "RECORD_FIELD_COUNT",
    "DESCRIPTION_INDEX",
    "added_from_row",
    "select_ship_from_row",
    "pickup_from_row",
    "hyper_from_row",
    "attack_from_row",
    "level_up_from_row",
    "scrap_from_row",
    "self_repair_from_row",
    "repair_from_row",
]
