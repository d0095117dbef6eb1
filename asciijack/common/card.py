"""
This module defines the `Rank`, `Glyph`, and `Card` classes used to represent
the ASCII-art playing cards of an asciijack game.

- `Rank`: An enum of the thirteen ranks, declared in deck construction order:
Ace, King, Queen, Jack, Ten, and Nine down to Two.

- `Glyph`: An immutable, rectangular block of text rows holding the face of one
rank. A glyph is shared by all four cards of its rank.

- `Card`: An immutable card with a rank, its blackjack points and the shared
glyph of its rank.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional, Tuple


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, in construction order.
    """

    ACE = "A"
    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Glyph:
    """
    The ASCII-art face of a rank.

    >>> glyph = Glyph(("+--+", "|A |", "+--+"))
    >>> glyph.width, glyph.height
    (4, 3)
    """

    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        """Number of characters in each row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def __str__(self) -> str:
        return "\n".join(self.rows)


class Card:
    """
    Class representing a playing card. Cards never change after the deck is
    built.

    >>> card = Card(Rank.ACE, 11)
    >>> print(card)
    A (11)
    """

    __slots__ = ("_rank", "_points", "_glyph")

    def __init__(self, rank: Rank, points: int, glyph: Optional[Glyph] = None):
        """
        Initialize a Card instance.

        :param rank: Rank of the card (one of the Rank enums)
        :param points: Blackjack points of the card; 11 denotes an Ace
        :param glyph: The shared face of the rank, if assets are loaded
        """
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        if not 2 <= points <= 11:
            raise ValueError(f"Invalid points for {rank.name}: {points}")
        object.__setattr__(self, "_rank", rank)
        object.__setattr__(self, "_points", points)
        object.__setattr__(self, "_glyph", glyph)

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def points(self) -> int:
        return self._points

    @property
    def glyph(self) -> Optional[Glyph]:
        return self._glyph

    @property
    def is_ace(self) -> bool:
        """True if the card is scored with the ace rule."""
        return self._points == 11

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and points, False otherwise.
        """
        if isinstance(other, Card):
            return self.rank == other.rank and self.points == other.points
        return NotImplemented

    def __hash__(self):
        return hash((self.rank, self.points))

    def __repr__(self) -> str:
        return f"Card(Rank.{self.rank.name}, {self.points})"

    def __str__(self) -> str:
        return f"{self.rank.rank_str} ({self.points})"
