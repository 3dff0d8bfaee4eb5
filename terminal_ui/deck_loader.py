"""Load a private deck from a plain-text file, one card value per line."""

from pathlib import Path
from random import Random
from typing import Iterable

from pazaak.cards import Card, Deck
from pazaak.errors import InvalidCardValueError


class DeckFileError(Exception):
    """A deck file is missing, unreadable or malformed."""


def parse_deck_lines(lines: Iterable[str], source: str = "<deck>") -> list[Card]:
    """
    Parse card values from text lines.

    Blank lines are skipped. Every other line must hold one integer in the
    standard card range.

    Raises:
        DeckFileError: naming the source and line of the first bad entry
    """
    cards: list[Card] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            value = int(text)
        except ValueError:
            raise DeckFileError(
                f"{source}:{line_number}: expected an integer, got {text!r}"
            ) from None
        try:
            cards.append(Card(value))
        except InvalidCardValueError as exc:
            raise DeckFileError(f"{source}:{line_number}: {exc}") from exc
    return cards


def load_deck(
    path: str | Path,
    rng: Random | None = None,
    min_cards: int = 0,
) -> Deck:
    """
    Read a deck file.

    Args:
        path: Text file with one card value per line
        rng: Random number generator the deck shuffles with
        min_cards: Fewest cards the deck may hold (usually the hand size)

    Raises:
        DeckFileError: if the file is missing, malformed or too small
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeckFileError(f"Deck file not found: {path}") from None
    except OSError as exc:
        raise DeckFileError(f"Cannot read deck file {path}: {exc}") from exc

    cards = parse_deck_lines(text.splitlines(), source=str(path))
    if len(cards) < min_cards:
        raise DeckFileError(
            f"{path}: deck has {len(cards)} cards, needs at least {min_cards}"
        )
    return Deck(cards, rng=rng)
