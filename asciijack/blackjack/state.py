"""
State values for a round of asciijack.

A round moves through four stages: dealing, the player's turn, the
dealer's turn, and finished. The finished stage is paired with an `Outcome`
describing how the round ended.
"""

from enum import Enum, auto


class Seat(Enum):
    """Who a hand belongs to."""

    PLAYER = auto()
    DEALER = auto()


class GameStage(Enum):
    """Possible stages of a round."""

    DEALING = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    FINISHED = auto()


class Outcome(Enum):
    """
    Terminal results of a round.

    Each member carries the message announced to the player and the result
    from the player's point of view: "win", "loss" or "push".
    """

    PLAYER_BLACKJACK = ("BLACKJACK! YOU WIN!", "win")
    DEALER_BLACKJACK = ("BLACKJACK! YOU LOSE!", "loss")
    PUSH = ("PUSH!", "push")
    PLAYER_WIN = ("YOU WIN!", "win")
    DEALER_WIN = ("YOU LOSE!", "loss")
    PLAYER_BUST = ("BUST! YOU LOSE!", "loss")
    # Not produced by the engine: a dealer bust ends as PLAYER_WIN
    DEALER_BUST = ("BUST! YOU WIN!", "win")

    def __init__(self, message: str, result: str):
        self.message = message
        self.result = result

    @property
    def player_wins(self) -> bool:
        return self.result == "win"

    @property
    def is_push(self) -> bool:
        return self.result == "push"

    def __str__(self) -> str:
        return self.message
