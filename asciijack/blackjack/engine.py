"""
The asciijack game engine.

`GameEngine` runs one round of blackjack between a player and an automated
dealer as an explicit state machine:

    DEALING -> PLAYER_TURN -> DEALER_TURN -> FINISHED

A natural blackjack for the player goes straight from DEALING to FINISHED.
`step` is the single transition function; `play` drives it with intents read
from the IO interface until the round is finished.

Two rules are kept exactly as the game has always played them, even though
they differ from casino blackjack: aces are scored greedily (see
`BlackjackHand`), and a dealer natural beats a player who reached 21 by
hitting.
"""

import logging
import uuid
from typing import List, Optional

from asciijack.blackjack.action import Action
from asciijack.blackjack.constants import BLACKJACK
from asciijack.blackjack.hand import BlackjackHand
from asciijack.blackjack.presenter import Presenter
from asciijack.blackjack.state import GameStage, Outcome, Seat
from asciijack.common.assets import GlyphSet
from asciijack.common.card import Card
from asciijack.common.deck import Deck
from asciijack.common.errors import GameOverError
from asciijack.common.io_interface import IOInterface
from asciijack.events import EngineEventType, EventBus

logger = logging.getLogger(__name__)

PROMPT = "HIT (h) or STAND (s)"
DEALERS_TURN = "DEALERS TURN"
DEALER_DRAWS = "DEALER GETS ANOTHER CARD.."
NATURAL_PUSH = "BLACKJACK! PUSH!"
DEALER_BUSTED = "BUST! YOU WIN!"


class GameEngine:
    """
    One round of blackjack over a prepared deck.

    The engine owns the deck and both hands for the length of the round.
    Every change to a hand is rendered through the presenter and published
    on the event bus.

    :param deck: A shuffled deck; dealing starts at its cursor
    :param io_interface: Source of player intents and sink for game output
    :param presenter: Renders hands; built from the deck's glyphs if omitted
    """

    def __init__(
        self,
        deck: Deck,
        io_interface: IOInterface,
        presenter: Optional[Presenter] = None,
    ):
        self.deck = deck
        self.io_interface = io_interface
        self.presenter = presenter or self._default_presenter(deck, io_interface)
        self.event_bus = EventBus.get_instance()
        self.game_id = str(uuid.uuid4())

        self.player_hand = BlackjackHand(Seat.PLAYER)
        self.dealer_hand = BlackjackHand(Seat.DEALER)
        self.stage = GameStage.DEALING
        self.outcome: Optional[Outcome] = None
        self.message: Optional[str] = None

    @classmethod
    def from_glyphs(
        cls, glyph_set: GlyphSet, seed: int, io_interface: IOInterface
    ) -> "GameEngine":
        """
        Build a fresh deck from loaded glyphs, shuffle it and set up a round.

        :param glyph_set: The loaded card faces
        :param seed: Shuffle seed; the same seed deals the same round
        :param io_interface: Source of intents and sink for output
        """
        deck = Deck.from_glyphs(glyph_set.glyphs).shuffle(seed)
        presenter = Presenter(io_interface, glyph_set.width, glyph_set.height)
        engine = cls(deck, io_interface, presenter)
        engine.event_bus.emit(
            EngineEventType.SHUFFLE,
            {"game_id": engine.game_id, "seed": seed, "cards": deck.size},
        )
        return engine

    @staticmethod
    def _default_presenter(deck: Deck, io_interface: IOInterface) -> Presenter:
        glyph = deck.cards[0].glyph if deck.cards else None
        if glyph is None:
            return Presenter(io_interface, width=6, height=1)
        return Presenter(io_interface, glyph.width, glyph.height)

    @property
    def is_finished(self) -> bool:
        return self.stage is GameStage.FINISHED

    def step(self, action: Optional[Action] = None) -> GameStage:
        """
        Advance the round by one transition.

        In DEALING the opening cards are dealt. In PLAYER_TURN the action is
        applied; None (an unrecognized reply) changes nothing. DEALER_TURN
        plays the dealer's whole turn and needs no action.

        :param action: The player's intent, used only in PLAYER_TURN
        :return: The stage after the transition
        :raises GameOverError: If the round is already finished
        """
        if self.stage is GameStage.DEALING:
            self._deal_opening()
        elif self.stage is GameStage.PLAYER_TURN:
            self._player_turn(action)
        elif self.stage is GameStage.DEALER_TURN:
            self._dealer_turn()
        else:
            raise GameOverError(f"Round already finished: {self.outcome.name}")
        return self.stage

    def play(self) -> Outcome:
        """
        Play the round to its end.

        Prompts for an intent whenever it is the player's turn and repeats the
        prompt after unrecognized replies.

        :return: The outcome of the round
        """
        self.event_bus.emit(EngineEventType.GAME_STARTED, {"game_id": self.game_id})
        while not self.is_finished:
            if self.stage is GameStage.PLAYER_TURN:
                self.step(self.io_interface.get_player_action(PROMPT))
            else:
                self.step()
        return self.outcome

    def _deal_opening(self) -> None:
        self._deal_to(self.player_hand, 2)
        self._deal_to(self.dealer_hand, 2)

        # Only the dealer's first card is face up, scored at its raw points
        up_card = self.dealer_hand.cards[0]
        self.presenter.render(self.dealer_hand, visible=1, score=up_card.points)
        self.presenter.render(self.player_hand)

        if self.player_hand.score == BLACKJACK:
            self.presenter.render(self.dealer_hand)
            if self.dealer_hand.score == BLACKJACK:
                self._finish(Outcome.PUSH, NATURAL_PUSH)
            else:
                self._finish(Outcome.PLAYER_BLACKJACK)
        else:
            self._set_stage(GameStage.PLAYER_TURN)

    def _player_turn(self, action: Optional[Action]) -> None:
        if action is None:
            logger.debug("Ignoring unrecognized player input")
            return

        self.event_bus.emit(
            EngineEventType.PLAYER_ACTION,
            {"game_id": self.game_id, "action": action.name},
        )

        if action is Action.STAND:
            self._set_stage(GameStage.DEALER_TURN)
            return

        self._deal_to(self.player_hand, 1)
        self.presenter.render(self.player_hand)
        if self.player_hand.score == BLACKJACK:
            self._set_stage(GameStage.DEALER_TURN)
        elif self.player_hand.is_bust:
            self._publish_bust(self.player_hand)
            self._finish(Outcome.PLAYER_BUST)

    def _dealer_turn(self) -> None:
        dealer = self.dealer_hand
        player_score = self.player_hand.score

        self.io_interface.output(DEALERS_TURN)
        self.presenter.render(dealer)

        # Only the card count is checked, so this also beats a player 21
        if dealer.score == BLACKJACK and dealer.size == 2:
            self._finish(Outcome.DEALER_BLACKJACK)
            return

        while dealer.score < player_score:
            self.io_interface.output(DEALER_DRAWS)
            self._deal_to(dealer, 1)
            self.presenter.render(dealer)

        if dealer.score == BLACKJACK:
            self._finish(Outcome.PUSH if player_score == BLACKJACK else Outcome.DEALER_WIN)
        elif dealer.is_bust:
            self._publish_bust(dealer)
            self._finish(Outcome.PLAYER_WIN, DEALER_BUSTED)
        elif dealer.score > player_score:
            self._finish(Outcome.DEALER_WIN)
        else:
            self._finish(Outcome.PUSH)

    def _deal_to(self, hand: BlackjackHand, count: int) -> List[Card]:
        cards = self.deck.deal(count)
        for card in cards:
            hand.add_card(card)
            self.event_bus.emit(
                EngineEventType.CARD_DEALT,
                {
                    "game_id": self.game_id,
                    "seat": hand.seat.name,
                    "card": str(card),
                    "points": card.points,
                    "score": hand.score,
                },
            )
        return cards

    def _publish_bust(self, hand: BlackjackHand) -> None:
        self.event_bus.emit(
            EngineEventType.HAND_BUSTED,
            {"game_id": self.game_id, "seat": hand.seat.name, "score": hand.score},
        )

    def _set_stage(self, stage: GameStage) -> None:
        logger.debug("Stage %s -> %s", self.stage.name, stage.name)
        self.stage = stage
        self.event_bus.emit(
            EngineEventType.STAGE_CHANGED,
            {"game_id": self.game_id, "stage": stage.name},
        )

    def _finish(self, outcome: Outcome, message: Optional[str] = None) -> None:
        self.outcome = outcome
        self.message = message or outcome.message
        self._set_stage(GameStage.FINISHED)
        self.io_interface.output(self.message)

        logger.info(
            "Round finished: %s (player %d, dealer %d)",
            outcome.name,
            self.player_hand.score,
            self.dealer_hand.score,
        )
        self.event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "game_id": self.game_id,
                "outcome": outcome.name,
                "result": outcome.result,
                "player_score": self.player_hand.score,
                "dealer_score": self.dealer_hand.score,
            },
        )
