"""Hand and Board containers."""

from dataclasses import dataclass, field
from typing import Iterator

from pazaak.cards import Card
from pazaak.effects import has_tie_breaker, resolve_total
from pazaak.errors import InvalidCardIndexError


@dataclass
class Hand:
    """Cards a player may commit to their board, in display order."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def play_card(self, index: int) -> Card:
        """
        Remove and return the card at a hand position.

        Raises:
            InvalidCardIndexError: if index is outside 0 <= index < len(hand)
        """
        if not 0 <= index < len(self.cards):
            raise InvalidCardIndexError(
                f"Card index {index} out of range for hand of {len(self.cards)}"
            )
        return self.cards.pop(index)

    def summary(self, revealed: bool = True) -> list[int | None]:
        """
        Return the hand as plain values.

        A hidden hand yields one None placeholder per card.
        """
        if revealed:
            return [card.value for card in self.cards]
        return [None] * len(self.cards)

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"


@dataclass
class Board:
    """Cards a player has committed to the current game. Boards only grow."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Commit a card to the board."""
        self.cards.append(card)

    @property
    def total(self) -> int:
        """Return the board total with special effects resolved."""
        return resolve_total(self.cards)

    @property
    def has_tie_breaker(self) -> bool:
        """Check if a tie-breaker card is on the board."""
        return has_tie_breaker(self.cards)

    @property
    def values(self) -> list[int]:
        """Return the plain card values in board order."""
        return [card.value for card in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Board({self.cards!r}, total={self.total})"
