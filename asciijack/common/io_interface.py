"""
This module contains the IOInterface abstract base class and its implementations.

An IO interface is the engine's only contact with the outside world: game
output goes out through `output`, and player intents come in through
`get_player_action`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from asciijack.blackjack.action import Action


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(self, prompt: str) -> Optional[Action]:
        """
        Ask the player for their next intent.

        Returns None when the reply is not a recognized action; the caller is
        expected to ask again.
        """
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Methods
    -------
    def output(self, message):
        Simulates output operation.

    def input(self, prompt):
        Simulates input operation.

    def get_player_action(self, prompt) -> Action:
        Always stands.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_player_action(self, prompt: str) -> Optional[Action]:
        return Action.STAND


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued player replies.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return a queued input response.

    def add_player_action(self, action):
        Queue an Action, or a raw line of text to be parsed.

    def get_player_action(self, prompt):
        Pop the next queued reply.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.prompts = []
        self.player_actions = []
        self.input_responses = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, action: Union[Action, str]):
        """Add a player action, or an unparsed line of input, to the queue."""
        self.player_actions.append(action)

    def get_player_action(self, prompt: str) -> Optional[Action]:
        self.prompts.append(prompt)
        if not self.player_actions:
            raise ValueError("No more actions left in TestIOInterface queue.")
        reply = self.player_actions.pop(0)
        if isinstance(reply, Action):
            return reply
        return Action.parse(reply)

    @property
    def transcript(self) -> str:
        """Everything written so far, one message per line."""
        return "\n".join(self.sent_messages)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive play in a terminal.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(self, prompt: str) -> Optional[Action]:
        """
        Print the prompt and read one line.

        Raises EOFError when standard input is closed.
        """
        self.output(prompt)
        return Action.parse(self.input(""))


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface that records a transcript of the game to a file.

    When wrapping another interface, every call is passed through to it and
    the exchange is appended to the transcript. On its own, it records output
    and always stands.
    """

    def __init__(
        self,
        log_file_path: Union[str, Path],
        io_interface: Optional[IOInterface] = None,
    ):
        self.log_file_path = Path(log_file_path)
        self.io_interface = io_interface

    def _record(self, line: str) -> None:
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(line + "\n")

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        if self.io_interface is not None:
            self.io_interface.output(message)
        self._record(message)

    def input(self, prompt: str) -> str:
        self._record(f"[INPUT PROMPT] {prompt}")
        if self.io_interface is not None:
            return self.io_interface.input(prompt)
        return ""

    def get_player_action(self, prompt: str) -> Optional[Action]:
        """Get the player action from the wrapped interface and record it."""
        self._record(prompt)
        if self.io_interface is None:
            action = Action.STAND
        else:
            action = self.io_interface.get_player_action(prompt)
        self._record(f"[ACTION] {action.name if action else 'INVALID'}")
        return action

