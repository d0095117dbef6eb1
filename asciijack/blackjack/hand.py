"""
BlackjackHand keeps a running score using the greedy ace rule.
"""

from asciijack.blackjack.constants import BLACKJACK, SOFT_ACE_THRESHOLD
from asciijack.blackjack.state import Seat
from asciijack.common.card import Card
from asciijack.common.hand import Hand


class BlackjackHand(Hand):
    """
    A hand in the game of Blackjack belonging to one seat.

    The score is updated as each card arrives. An ace counts 11 unless the
    score before it is already above 10, in which case it counts 1. An ace
    counted as 11 is never revalued later, even if the hand then busts.

    >>> from asciijack.common.card import Rank
    >>> hand = BlackjackHand(Seat.PLAYER)
    >>> hand.add_card(Card(Rank.ACE, 11))
    >>> hand.add_card(Card(Rank.ACE, 11))
    >>> hand.score
    12
    """

    __slots__ = ("_cards", "_score", "seat")

    def __init__(self, seat: Seat):
        super().__init__()
        self.seat = seat
        self._score = 0

    def add_card(self, card: Card) -> None:
        """Add a card and fold its points into the score."""
        super().add_card(card)
        if card.is_ace:
            self._score += 1 if self._score > SOFT_ACE_THRESHOLD else card.points
        else:
            self._score += card.points

    @property
    def score(self) -> int:
        """The running score of the hand."""
        return self._score

    @property
    def is_bust(self) -> bool:
        """True if the score exceeds 21."""
        return self._score > BLACKJACK

    @property
    def is_natural(self) -> bool:
        """True for an initial two-card hand scoring exactly 21."""
        return len(self._cards) == 2 and self._score == BLACKJACK

    def __repr__(self) -> str:
        return f"BlackjackHand({self.seat.name}, {list(self._cards)!r}, score={self._score})"
