from asciijack.blackjack.hand import BlackjackHand
from asciijack.blackjack.presenter import RULE, Presenter
from asciijack.blackjack.state import Seat
from asciijack.common.card import Card, Glyph, Rank
from asciijack.common.io_interface import TestIOInterface


ACE_GLYPH = Glyph(("+-+", "|A|", "+-+"))
NINE_GLYPH = Glyph(("+-+", "|9|", "+-+"))


def dealt_hand(seat=Seat.PLAYER):
    hand = BlackjackHand(seat)
    hand.add_card(Card(Rank.ACE, 11, ACE_GLYPH))
    hand.add_card(Card(Rank.NINE, 9, NINE_GLYPH))
    return hand


def test_render_lines_side_by_side():
    presenter = Presenter(TestIOInterface(), width=3, height=3)
    lines = presenter.render_lines(dealt_hand())
    assert lines == [
        "YOUR CARDS:",
        "",
        RULE,
        "+-+  +-+  ",
        "|A|  |9|  ",
        "+-+  +-+  ",
        "score:20",
        "",
        RULE,
    ]


def test_dealer_header():
    presenter = Presenter(TestIOInterface(), width=3, height=3)
    assert presenter.render_lines(dealt_hand(Seat.DEALER))[0] == "DEALERS CARDS:"


def test_render_visible_cards_and_score():
    presenter = Presenter(TestIOInterface(), width=3, height=3)
    lines = presenter.render_lines(dealt_hand(Seat.DEALER), visible=1, score=11)
    assert lines[3:7] == ["+-+  ", "|A|  ", "+-+  ", "score:11"]


def test_render_writes_one_message():
    io = TestIOInterface()
    presenter = Presenter(io, width=3, height=3)
    hand = dealt_hand()
    presenter.render(hand)
    assert io.sent_messages == ["\n".join(presenter.render_lines(hand))]


def test_render_does_not_change_hand():
    presenter = Presenter(TestIOInterface(), width=3, height=3)
    hand = dealt_hand()
    presenter.render(hand, visible=1, score=0)
    assert hand.size == 2
    assert hand.score == 20


def test_cards_without_glyphs_show_rank():
    presenter = Presenter(TestIOInterface(), width=6, height=2)
    hand = BlackjackHand(Seat.PLAYER)
    hand.add_card(Card(Rank.TEN, 10))
    lines = presenter.render_lines(hand)
    assert lines[3] == "[10]    "
    assert lines[4] == "        "
