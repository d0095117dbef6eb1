import pytest

from asciijack.blackjack.hand import BlackjackHand
from asciijack.blackjack.state import Seat
from asciijack.common.card import Rank


def hand_of(card, *ranks):
    hand = BlackjackHand(Seat.PLAYER)
    for rank in ranks:
        hand.add_card(card(rank))
    return hand


def test_empty_hand(card):
    hand = hand_of(card)
    assert hand.score == 0
    assert hand.size == 0
    assert hand.seat == Seat.PLAYER


def test_single_ace_scores_eleven(card):
    assert hand_of(card, Rank.ACE).score == 11


def test_second_ace_scores_one(card):
    assert hand_of(card, Rank.ACE, Rank.ACE).score == 12


def test_ace_and_ten_value_is_twenty_one(card):
    hand = hand_of(card, Rank.ACE, Rank.KING)
    assert hand.score == 21
    assert hand.is_natural


def test_ten_ten_two_busts(card):
    hand = hand_of(card, Rank.TEN, Rank.TEN, Rank.TWO)
    assert hand.score == 22
    assert hand.is_bust


@pytest.mark.parametrize(
    "ranks, score",
    [
        ((Rank.FIVE, Rank.FIVE, Rank.ACE), 21),  # ten before the ace: still 11
        ((Rank.SIX, Rank.FIVE, Rank.ACE), 12),  # eleven before the ace: 1
        ((Rank.ACE, Rank.ACE, Rank.ACE), 13),
        ((Rank.NINE, Rank.ACE), 20),
    ],
)
def test_ace_depends_on_score_before_it(card, ranks, score):
    assert hand_of(card, *ranks).score == score


def test_ace_is_never_revalued(card):
    # Greedy scoring: the first ace stays at 11 and the hand busts
    hand = hand_of(card, Rank.ACE, Rank.FIVE, Rank.NINE)
    assert hand.score == 25
    assert hand.is_bust


def test_three_card_twenty_one_is_not_natural(card):
    hand = hand_of(card, Rank.SEVEN, Rank.SEVEN, Rank.SEVEN)
    assert hand.score == 21
    assert not hand.is_natural


def test_cards_keep_deal_order(card):
    hand = hand_of(card, Rank.TWO, Rank.ACE)
    assert [c.rank for c in hand.cards] == [Rank.TWO, Rank.ACE]


def test_repr(card):
    hand = BlackjackHand(Seat.DEALER)
    hand.add_card(card(Rank.NINE))
    assert repr(hand) == "BlackjackHand(DEALER, [Card(Rank.NINE, 9)], score=9)"
