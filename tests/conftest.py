"""Core test fixtures for session log parser tests."""

import pytest

from tvslog.config import get_settings
from tvslog.parser.session import SessionClassifier

HEADER = "Turn,Time,Sector,Action,Value,Detail"


def build_row(
    description: str,
    value: str = "",
    detail: str = "",
    turn: str = "1",
    time: str = "12:00:00",
    sector: str = "A1",
) -> list[str]:
    """Build a raw 6-field row in log column order."""
    return [turn, time, sector, description, value, detail]


@pytest.fixture
def make_row():
    """Factory for raw log rows."""
    return build_row


@pytest.fixture
def classifier() -> SessionClassifier:
    """A fresh classifier with empty session state."""
    return SessionClassifier()


@pytest.fixture
def sample_log() -> str:
    """A short session log with one unrecognised row."""
    return "\n".join(
        [
            HEADER,
            "1,12:00:00,A1,Added to the game,,Alice",
            "1,12:00:05,A1,Selected to pilot a fighter,,",
            "2,12:01:00,A1,Alice attacked Bob for 10,,",
            "2,12:01:30,A1,Entered carrier,,",
            "3,12:02:00,A1,unknown frobnicated,,",
        ]
    ) + "\n"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
