"""
Exception hierarchy shared by the asciijack modules.

Asset errors abort a session before any game starts, deck and game errors
signal programming mistakes in the caller. Invalid player input is never an
error; the engine just asks again.
"""

from typing import Optional, Union
from pathlib import Path


class AsciiJackError(Exception):
    """Base class for every error raised by asciijack."""


class AssetError(AsciiJackError):
    """
    Raised when the card face assets cannot be used.

    :param message: Human-readable description of the problem
    :param path: The asset file (or directory) that caused it, if known
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{message} ({self.path})"
        return message


class AssetFormatError(AssetError):
    """A glyph file is not rectangular or disagrees with the other glyphs."""


class AssetIOError(AssetError):
    """A glyph file is missing or unreadable."""


class AssetAllocationError(AssetError):
    """Memory ran out while loading the glyphs."""


class DeckError(AsciiJackError):
    """Base class for deck misuse."""


class DeckExhaustedError(DeckError):
    """Raised when more cards are requested than remain undealt."""

    def __init__(self, requested: int, remaining: int):
        super().__init__(
            f"Cannot deal {requested} card(s), only {remaining} remaining."
        )
        self.requested = requested
        self.remaining = remaining


class DeckStateError(DeckError):
    """Raised when the deck is shuffled after dealing has begun."""


class GameOverError(AsciiJackError):
    """Raised when a finished game is asked to make another transition."""
