"""
Rendering of hands for a text terminal.

The presenter is a read-only projection of a hand: it lays the card glyphs
out side by side, row by row, and follows them with the score.
"""

from typing import List, Optional

from asciijack.blackjack.hand import BlackjackHand
from asciijack.blackjack.state import Seat
from asciijack.common.card import Card
from asciijack.common.io_interface import IOInterface

RULE = "_" * 60
CARD_GAP = "  "

HEADERS = {
    Seat.PLAYER: "YOUR CARDS:",
    Seat.DEALER: "DEALERS CARDS:",
}


class Presenter:
    """
    Writes hands to an IO interface.

    :param io_interface: Where rendered hands are written
    :param width: Width of every glyph row
    :param height: Number of rows in every glyph
    """

    def __init__(self, io_interface: IOInterface, width: int, height: int):
        self.io_interface = io_interface
        self.width = width
        self.height = height

    def _card_row(self, card: Card, row: int) -> str:
        if card.glyph is not None:
            return card.glyph.rows[row]
        # Cards built without assets show their rank on the top row
        label = f"[{card.rank}]" if row == 0 else ""
        return label.ljust(self.width)[: self.width]

    def render_lines(
        self,
        hand: BlackjackHand,
        visible: Optional[int] = None,
        score: Optional[int] = None,
    ) -> List[str]:
        """
        Lay out a hand without writing it.

        :param hand: The hand to show
        :param visible: Show only the first `visible` cards (default all)
        :param score: Score to print (default the hand's score)
        :return: The rendered lines
        """
        cards = hand.cards if visible is None else hand.cards[:visible]
        shown_score = hand.score if score is None else score

        lines = [HEADERS[hand.seat], "", RULE]
        for row in range(self.height):
            lines.append(
                "".join(self._card_row(card, row) + CARD_GAP for card in cards)
            )
        lines.extend([f"score:{shown_score}", "", RULE])
        return lines

    def render(
        self,
        hand: BlackjackHand,
        visible: Optional[int] = None,
        score: Optional[int] = None,
    ) -> None:
        """Render a hand and write it to the IO interface."""
        self.io_interface.output("\n".join(self.render_lines(hand, visible, score)))
