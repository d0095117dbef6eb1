"""Defines the Action enum for the intents a player can send during their turn."""
from enum import Enum
from typing import Optional


class Action(Enum):
    """Enum for the possible actions a player can take in a game of blackjack."""

    HIT = "h"
    STAND = "s"

    @classmethod
    def parse(cls, text: str) -> Optional["Action"]:
        """
        Map a line of player input to an action.

        Accepts the short key or the full name, case-insensitively. Anything
        else yields None so the caller can ask again.
        """
        choice = text.strip().lower()
        for action in cls:
            if choice in (action.value, action.name.lower()):
                return action
        return None
