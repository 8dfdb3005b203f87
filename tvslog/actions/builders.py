"""Constructors that build actions from raw log rows.

Each builder takes a row that already has the expected number of fields
and returns one action. Builders never look at session state: context
needed by Attack and Repair is passed in as plain values.

Column layout: Turn, Time, Sector, Action, Value, Detail
"""

import re

from tvslog.actions.types import (
    CRUISER_LEVEL,
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
from tvslog.exceptions import MalformedFieldError

RECORD_FIELD_COUNT = 6

TURN_INDEX = 0
TIME_INDEX = 1
SECTOR_INDEX = 2
DESCRIPTION_INDEX = 3
VALUE_INDEX = 4
DETAIL_INDEX = 5

COLUMN_NAMES = ("Turn", "Time", "Sector", "Action", "Value", "Detail")

# "... for 25" at the end of an attack description
DAMAGE_SUFFIX = re.compile(r"\s+for\s+(?P<damage>[\d,]+)\s*[.!]?\s*$", re.IGNORECASE | re.ASCII)
LEVEL_NUMBER = re.compile(r"^Achieved level\s+(?P<level>\S+?)[.!]?\s*$")
# Optional minus sign, ASCII digits only
INTEGER = re.compile(r"^-?\d+$", re.ASCII)


def _parse_int(row: list[str], index: int) -> int:
    """Parse an integer column, raising MalformedFieldError on failure."""
    value = row[index]
    text = value.strip().replace(",", "")
    if not text:
        raise MalformedFieldError(COLUMN_NAMES[index], value, "missing value", row)
    if not INTEGER.match(text):
        raise MalformedFieldError(COLUMN_NAMES[index], value, "not an integer", row)
    return int(text)


def _require(row: list[str], field: str, value: str) -> str:
    """Return the stripped value, raising if it is empty."""
    value = value.strip()
    if not value:
        raise MalformedFieldError(field, value, "missing value", row)
    return value


def _common(row: list[str]) -> dict:
    return {
        "turn": _parse_int(row, TURN_INDEX),
        "time": row[TIME_INDEX],
        "sector": row[SECTOR_INDEX],
        "description": row[DESCRIPTION_INDEX],
    }


def _text_after(row: list[str], marker: str) -> str:
    """Description text after marker, falling back to the Detail column.

    Surrounding whitespace, quotes and a leading colon are stripped.
    """
    description = row[DESCRIPTION_INDEX]
    _, found, rest = description.partition(marker)
    text = rest.strip().lstrip(":").strip().strip("\"'") if found else ""
    return text or row[DETAIL_INDEX].strip()


def added_from_row(row: list[str]) -> Added:
    """Build an Added action; the pilot name is in the Detail column."""
    pilot_name = _require(row, "Detail", row[DETAIL_INDEX])
    return Added(**_common(row), pilot_name=pilot_name)


def select_ship_from_row(row: list[str]) -> SelectShip:
    """Build a SelectShip action from "Selected to pilot a <ship>".

    Handles both "a" and "an" articles.
    """
    description = row[DESCRIPTION_INDEX]
    rest = description.partition("Selected to pilot a")[2]
    if re.match(r"n\b", rest):
        rest = rest[1:]
    ship_type = rest.strip().strip("\"'") or row[DETAIL_INDEX].strip()
    ship_type = _require(row, "Action", ship_type)
    return SelectShip(**_common(row), ship_type=ship_type)


def pickup_from_row(row: list[str]) -> Pickup:
    """Build a Pickup action. The amount is in the Value column."""
    item = _require(row, "Action", _text_after(row, "Pickup"))
    return Pickup(**_common(row), item=item, amount=_parse_int(row, VALUE_INDEX))


def hyper_from_row(row: list[str]) -> Hyper:
    """Build a Hyper action from "Hypered to <destination>"."""
    destination = _require(row, "Action", _text_after(row, "Hypered to "))
    return Hyper(**_common(row), destination=destination)


def attack_from_row(
    row: list[str],
    pilot_name: str,
    ship_type: str,
    ship_level: int,
) -> Attack:
    """Build an Attack action from "<attacker> attacked <target> [for <damage>]".

    Args:
        row: Raw log row.
        pilot_name: Pilot known at the time of the row.
        ship_type: Ship type the pilot is flying.
        ship_level: Current ship level.

    Returns:
        Attack carrying the pilot context.

    Raises:
        MalformedFieldError: If the target is missing or damage is not an integer.
    """
    description = row[DESCRIPTION_INDEX]
    attacker, _, rest = description.partition("attacked")

    damage_match = DAMAGE_SUFFIX.search(rest)
    if damage_match:
        damage_text = damage_match.group("damage").replace(",", "")
        try:
            damage = int(damage_text)
        except ValueError:
            raise MalformedFieldError(
                "Action", damage_match.group("damage"), "not an integer", row
            ) from None
        rest = rest[: damage_match.start()]
    else:
        damage = _parse_int(row, VALUE_INDEX)

    target = _require(row, "Action", rest.strip().strip("\"'"))

    return Attack(
        **_common(row),
        pilot_name=pilot_name,
        ship_type=ship_type,
        ship_level=ship_level,
        attacker=attacker.strip(),
        target=target,
        damage=damage,
    )


def level_up_from_row(row: list[str]) -> LevelUp:
    """Build a LevelUp action.

    "Achieved level N" carries the level in the description;
    "Awarded cruiser" always means the cruiser level.
    """
    description = row[DESCRIPTION_INDEX]
    if description.startswith("Awarded cruiser"):
        return LevelUp(**_common(row), level=CRUISER_LEVEL)

    match = LEVEL_NUMBER.match(description)
    if not match:
        raise MalformedFieldError("Action", description, "missing level number", row)
    if not INTEGER.match(match.group("level")):
        raise MalformedFieldError(
            "Action", match.group("level"), "level is not an integer", row
        )
    level = int(match.group("level"))
    return LevelUp(**_common(row), level=level)


def scrap_from_row(row: list[str]) -> Scrap:
    """Build a Scrap action. The amount is in the Value column."""
    return Scrap(**_common(row), amount=_parse_int(row, VALUE_INDEX))


def self_repair_from_row(row: list[str]) -> SelfRepair:
    """Build a SelfRepair action. Hit points repaired are in the Value column."""
    return SelfRepair(**_common(row), amount=_parse_int(row, VALUE_INDEX))


def repair_from_row(row: list[str], pilot_name: str, ship_level: int) -> Repair:
    """Build a Repair action from "... repaired <target>".

    Args:
        row: Raw log row.
        pilot_name: Pilot doing the repair.
        ship_level: Repairer's ship level.

    Returns:
        Repair carrying the repairer context.
    """
    target = _require(row, "Action", _text_after(row, "repaired"))
    return Repair(
        **_common(row),
        pilot_name=pilot_name,
        ship_level=ship_level,
        target=target,
        amount=_parse_int(row, VALUE_INDEX),
    )
