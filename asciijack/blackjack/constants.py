"""Blackjack-specific constants and rank mappings."""

from typing import Dict, Tuple

from asciijack.common.card import Rank

# Deck construction order, one group of four cards per rank
RANK_ORDER: Tuple[Rank, ...] = tuple(Rank)

BLACKJACK_POINTS: Dict[Rank, int] = {
    Rank.ACE: 11,  # Softened to 1 by the ace rule when needed
    Rank.KING: 10,
    Rank.QUEEN: 10,
    Rank.JACK: 10,
    Rank.TEN: 10,
    Rank.NINE: 9,
    Rank.EIGHT: 8,
    Rank.SEVEN: 7,
    Rank.SIX: 6,
    Rank.FIVE: 5,
    Rank.FOUR: 4,
    Rank.THREE: 3,
    Rank.TWO: 2,
}

ASSET_FILE_NAMES: Dict[Rank, str] = {
    Rank.ACE: "ace.txt",
    Rank.KING: "king.txt",
    Rank.QUEEN: "queen.txt",
    Rank.JACK: "jack.txt",
    Rank.TEN: "10.txt",
    Rank.NINE: "9.txt",
    Rank.EIGHT: "8.txt",
    Rank.SEVEN: "7.txt",
    Rank.SIX: "6.txt",
    Rank.FIVE: "5.txt",
    Rank.FOUR: "4.txt",
    Rank.THREE: "3.txt",
    Rank.TWO: "2.txt",
}

ACE_POINTS = 11
SOFT_ACE_THRESHOLD = 10  # An ace counts 1 once the score is above this
BLACKJACK = 21
COPIES_PER_RANK = 4
DECK_SIZE = COPIES_PER_RANK * len(RANK_ORDER)


def get_blackjack_points(rank: Rank) -> int:
    """Get the blackjack points for a given rank."""
    return BLACKJACK_POINTS[rank]
