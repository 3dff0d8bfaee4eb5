"""Console prompts that turn typed commands into engine actions."""

import logging
from typing import Callable, TypeVar

from pazaak.game.actions import Action, ActionType
from pazaak.game.engine import PazaakGame
from terminal_ui.render import Renderer, player_label

logger = logging.getLogger(__name__)

T = TypeVar("T")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

ACTION_HELP = "Unknown command. Type one of: stand, play, end"


class InputClosedError(Exception):
    """The input stream ended while a player was being prompted."""


class InputAttemptsExceededError(Exception):
    """Too many invalid entries in a row for one prompt."""


def parse_action_token(text: str) -> ActionType | None:
    """Return the action for an exact token (case-sensitive, trimmed)."""
    token = text.strip()
    for action_type in ActionType:
        if action_type.value == token:
            return action_type
    return None


def parse_card_index(text: str, hand_len: int) -> int | None:
    """Return a hand index in [0, hand_len - 1], or None if invalid."""
    try:
        index = int(text.strip())
    except ValueError:
        return None
    if not 0 <= index < hand_len:
        return None
    return index


class ActionPrompt:
    """
    Action provider backed by a console.

    Invalid entries are re-prompted in a bounded loop.
    """

    def __init__(
        self,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        max_attempts: int = 5,
        renderer: Renderer | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.max_attempts = max_attempts
        self.renderer = renderer

    def __call__(self, game: PazaakGame, player_index: int) -> Action:
        """Ask a player for their next action."""
        if self.renderer is not None:
            self.output_fn(self.renderer.table(game, player_index))

        hand = game.players[player_index].hand
        for _ in range(self.max_attempts):
            kind = self._read(
                f"{player_label(player_index)}> ",
                parse_action_token,
                ACTION_HELP,
            )
            if kind != ActionType.PLAY:
                return Action(kind)
            if not hand:
                self.output_fn("You have no cards left in your hand.")
                continue

            last = len(hand) - 1
            index = self._read(
                f"Card [0-{last}]> ",
                lambda text: parse_card_index(text, len(hand)),
                f"Enter a card number between 0 and {last}",
            )
            return Action.play(index)

        raise InputAttemptsExceededError(
            f"No playable action after {self.max_attempts} attempts"
        )

    def _read(self, prompt: str, parse: Callable[[str], T | None], error: str) -> T:
        for _ in range(self.max_attempts):
            try:
                text = self.input_fn(prompt)
            except EOFError as exc:
                raise InputClosedError("Input closed") from exc
            value = parse(text)
            if value is not None:
                return value
            logger.debug("Rejected input %r for prompt %r", text, prompt)
            self.output_fn(error)
        raise InputAttemptsExceededError(
            f"No valid input after {self.max_attempts} attempts"
        )
