"""Main entry point for the terminal Pazaak driver."""

import sys
import time
from random import Random

from config import AppConfig, config
from pazaak.cards import Deck
from pazaak.game.events import EventType, GameEvent
from pazaak.game.match import Match
from terminal_ui.deck_loader import DeckFileError, load_deck
from terminal_ui.logging_utils import get_logger, setup_logging
from terminal_ui.prompts import (
    ActionPrompt,
    InputAttemptsExceededError,
    InputClosedError,
    OutputFn,
)
from terminal_ui.render import Renderer

USAGE = "usage: pazaak <player_deck_file> <opponent_deck_file>"

logger = get_logger(__name__)


class ConsoleReporter:
    """Prints engine events as they happen and paces turn-cycles."""

    def __init__(self, renderer: Renderer, output_fn: OutputFn, turn_delay: float = 0.0):
        self.renderer = renderer
        self.output_fn = output_fn
        self.turn_delay = turn_delay

    def __call__(self, event: GameEvent) -> None:
        message = self.renderer.describe(event)
        if message is not None:
            self.output_fn(message)
        if event.event_type == EventType.TURN_CYCLE_COMPLETED and self.turn_delay > 0:
            time.sleep(self.turn_delay)


def play_match(
    match: Match,
    player_deck: Deck,
    opponent_deck: Deck,
    prompt: ActionPrompt,
    output_fn: OutputFn,
    renderer: Renderer,
) -> int:
    """
    Play rounds until someone wins the match.

    Returns:
        Index of the match winner
    """
    winner = match.check_win()
    while winner is None:
        game = match.new_game(player_deck, opponent_deck)
        while not game.is_over:
            output_fn(renderer.banner(match))
            game.play_turn(prompt)
        match.award(game.resolve())
        winner = match.check_win()
    return winner


def main(
    argv: list[str] | None = None,
    input_fn=input,
    output_fn: OutputFn = print,
    app_config: AppConfig = config,
) -> int:
    """
    Run a match between two deck files.

    Returns:
        Process exit code: 0 after a finished match, 1 on usage, deck or
        input errors
    """
    args = sys.argv[1:] if argv is None else argv
    level = "DEBUG" if app_config.debug else app_config.logging.level
    setup_logging(level, app_config.logging.format)

    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1

    rng = Random(app_config.seed)
    rules = app_config.game.ruleset()

    try:
        player_deck = load_deck(args[0], rng=rng, min_cards=rules.hand_size)
        opponent_deck = load_deck(args[1], rng=rng, min_cards=rules.hand_size)
    except DeckFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    renderer = Renderer(color=app_config.display.color)
    match = Match(rules=rules, rng=rng)
    match.subscribe(ConsoleReporter(renderer, output_fn, app_config.display.turn_delay))
    prompt = ActionPrompt(
        input_fn=input_fn,
        output_fn=output_fn,
        max_attempts=app_config.prompt.max_attempts,
        renderer=renderer,
    )

    try:
        winner = play_match(match, player_deck, opponent_deck, prompt, output_fn, renderer)
    except (InputClosedError, InputAttemptsExceededError) as exc:
        logger.info("Match abandoned in round %d: %s", match.round, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("Match won by player %d after %d rounds", winner, match.round)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
