"""
asciijack: blackjack against the dealer in a text terminal, with card faces
drawn from ASCII-art files.
"""

from asciijack.blackjack.action import Action
from asciijack.blackjack.engine import GameEngine
from asciijack.blackjack.hand import BlackjackHand
from asciijack.blackjack.state import GameStage, Outcome, Seat
from asciijack.common.assets import GlyphSet, load_glyphs
from asciijack.common.card import Card, Glyph, Rank
from asciijack.common.deck import Deck
from asciijack.common.errors import (
    AsciiJackError,
    AssetAllocationError,
    AssetError,
    AssetFormatError,
    AssetIOError,
    DeckError,
    DeckExhaustedError,
    DeckStateError,
    GameOverError,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AsciiJackError",
    "AssetAllocationError",
    "AssetError",
    "AssetFormatError",
    "AssetIOError",
    "BlackjackHand",
    "Card",
    "Deck",
    "DeckError",
    "DeckExhaustedError",
    "DeckStateError",
    "GameEngine",
    "GameOverError",
    "GameStage",
    "Glyph",
    "GlyphSet",
    "Outcome",
    "Rank",
    "Seat",
    "load_glyphs",
]
