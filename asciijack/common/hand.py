"""
This module contains classes to represent a hand of cards.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
Hands only ever grow: cards are appended as they are dealt and the hand is
discarded at the end of the round.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""
from abc import ABC
from typing import Tuple

from asciijack.common.card import Card


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    Subclasses extend `add_card` to keep derived values such as a score in
    step with the cards.
    """

    def __init__(self):
        self._cards = []

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Returns the cards in the hand, in the order they were dealt."""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def __len__(self) -> int:
        return len(self._cards)


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.
    """

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"Hand({list(self._cards)!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "A (11), 10 (10)".
        """
        return ", ".join(str(card) for card in self._cards)
