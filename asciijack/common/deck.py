"""
This module contains the Deck class, which represents the 52-card deck of an
asciijack game.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal(2)
[Card(Rank.ACE, 11), Card(Rank.ACE, 11)]
>>> deck.size
50
"""

import logging
import random
from typing import List, Mapping, Optional

from asciijack.blackjack.constants import (
    BLACKJACK_POINTS,
    COPIES_PER_RANK,
    RANK_ORDER,
)
from asciijack.common.card import Card, Glyph, Rank
from asciijack.common.errors import DeckExhaustedError, DeckStateError

logger = logging.getLogger(__name__)


class Deck:
    """
    A class representing a deck of cards dealt from the front.

    The deck keeps every card it was built with; dealing only advances a
    cursor, so the dealt prefix stays inspectable.
    """

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck without glyphs is built.
        """
        if cards is None:
            self.cards: List[Card] = self.build_cards()
        else:
            self.cards = list(cards)
        self._cursor = 0

    @classmethod
    def from_glyphs(cls, glyphs: Mapping[Rank, Glyph]) -> "Deck":
        """
        Construct a deck whose cards share the glyph of their rank.

        :param glyphs: Glyph for each of the thirteen ranks.
        :return: An unshuffled 52-card deck.
        """
        return cls(cls.build_cards(glyphs))

    @staticmethod
    def build_cards(glyphs: Optional[Mapping[Rank, Glyph]] = None) -> List[Card]:
        """
        Build the 52 cards, four per rank, in rank declaration order.

        :param glyphs: Optional glyph for each rank.
        :return: A list of Card instances.
        """
        cards = []
        for rank in RANK_ORDER:
            glyph = glyphs[rank] if glyphs is not None else None
            points = BLACKJACK_POINTS[rank]
            for _ in range(COPIES_PER_RANK):
                cards.append(Card(rank, points, glyph))
        return cards

    def shuffle(self, seed: int) -> "Deck":
        """
        Shuffle the deck in place with the Fisher-Yates algorithm.

        The same seed always produces the same order.

        :param seed: Seed for the pseudo-random generator.
        :raises DeckStateError: If cards have already been dealt.
        """
        if self._cursor:
            raise DeckStateError("Cannot shuffle a deck after dealing has begun.")

        rng = random.Random(seed)
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

        logger.debug("Shuffled %d cards with seed %d", len(cards), seed)
        return self

    def deal(self, count: int = 1) -> List[Card]:
        """
        Deal cards from the front of the deck.

        Either all requested cards are dealt or none are.

        :param count: Number of cards to deal (default is 1)
        :return: The dealt cards, in deal order.
        :raises DeckExhaustedError: If fewer than `count` cards remain.
        """
        if count < 1:
            raise ValueError(f"Number of cards to deal must be positive, got {count}")
        if count > self.size:
            raise DeckExhaustedError(count, self.size)

        start = self._cursor
        self._cursor += count
        return self.cards[start : self._cursor]

    @property
    def cursor(self) -> int:
        """Index of the next undealt card."""
        return self._cursor

    @property
    def size(self) -> int:
        """
        Return the number of undealt cards in the deck.

        :return: The number of remaining cards.
        """
        return len(self.cards) - self._cursor

    def is_empty(self) -> bool:
        """
        Check if every card has been dealt.

        :return: True if the deck is empty, False otherwise.
        """
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards[self._cursor:]]})"

    def __str__(self) -> str:
        return f"Deck of {self.size} cards"
