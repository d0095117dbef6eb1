"""
Pytest configuration for the asciijack tests.

Provides card and asset fixtures shared by the test packages.
"""

import pytest

from asciijack.blackjack.constants import ASSET_FILE_NAMES, BLACKJACK_POINTS
from asciijack.common.card import Card, Rank
from asciijack.common.deck import Deck
from asciijack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def make_card(rank: Rank) -> Card:
    """A glyphless card of the given rank with its blackjack points."""
    return Card(rank, BLACKJACK_POINTS[rank])


def stacked_deck(*ranks: Rank) -> Deck:
    """A deck that deals exactly the given ranks, in order."""
    return Deck([make_card(rank) for rank in ranks])


def glyph_text(rank: Rank, width: int = 7, height: int = 5) -> str:
    """A rectangular card face with the rank in its top-left corner."""
    border = "+" + "-" * (width - 2) + "+"
    label = ("|" + str(rank)).ljust(width - 1) + "|"
    middle = "|" + " " * (width - 2) + "|"
    rows = [border, label] + [middle] * (height - 3) + [border]
    return "\n".join(rows) + "\n"


def write_assets(directory, width: int = 7, height: int = 5):
    """Write a valid set of thirteen card images into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for rank, name in ASSET_FILE_NAMES.items():
        (directory / name).write_text(glyph_text(rank, width, height), encoding="utf-8")
    return directory


@pytest.fixture
def asset_dir(tmp_path):
    """A directory holding valid 7x5 card images."""
    return write_assets(tmp_path / "cards")


@pytest.fixture
def card():
    """Factory for glyphless cards: card(Rank.ACE)."""
    return make_card


@pytest.fixture
def stack():
    """Factory for decks that deal the given ranks in order: stack(Rank.ACE, ...)."""
    return stacked_deck


@pytest.fixture
def assets():
    """Writer for card image directories: assets(path, width=7, height=5)."""
    return write_assets
