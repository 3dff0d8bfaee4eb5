"""Card and Deck classes - immutable card values and ordered card piles."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from pazaak.errors import EmptyDeckError, InvalidCardValueError

MIN_CARD_VALUE = 1
MAX_CARD_VALUE = 10
MAX_SPECIAL_MAGNITUDE = 10


class SpecialType(Enum):
    """Special card kinds that change how a board total is resolved."""

    FLIP = auto()
    SWAP = auto()
    DOUBLE = auto()
    TIE_BREAKER = auto()

    def __str__(self) -> str:
        symbols = {
            SpecialType.FLIP: "F",
            SpecialType.SWAP: "S",
            SpecialType.DOUBLE: "D",
            SpecialType.TIE_BREAKER: "T",
        }
        return symbols[self]


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable Pazaak card."""

    value: int
    special: SpecialType | None = None

    def __post_init__(self) -> None:
        if self.special is None:
            if not MIN_CARD_VALUE <= self.value <= MAX_CARD_VALUE:
                raise InvalidCardValueError(
                    f"Card value must be between {MIN_CARD_VALUE} and "
                    f"{MAX_CARD_VALUE}, got {self.value}"
                )
        elif not -MAX_SPECIAL_MAGNITUDE <= self.value <= MAX_SPECIAL_MAGNITUDE:
            raise InvalidCardValueError(
                f"Special card value must be between {-MAX_SPECIAL_MAGNITUDE} and "
                f"{MAX_SPECIAL_MAGNITUDE}, got {self.value}"
            )

    def __str__(self) -> str:
        if self.special is None:
            return str(self.value)
        return f"{self.value}{self.special}"

    def __repr__(self) -> str:
        if self.special is None:
            return f"Card({self.value})"
        return f"Card({self.value}, {self.special.name})"

    @property
    def is_special(self) -> bool:
        """Check if this card carries a special effect."""
        return self.special is not None


class Deck:
    """An ordered pile of cards. Cards are drawn from the end."""

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            cards: Initial cards, bottom first
            rng: Random number generator for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = list(cards) if cards is not None else []

    @classmethod
    def from_values(cls, values: Iterable[int], rng: Random | None = None) -> "Deck":
        """Create a deck of standard cards from plain integer values."""
        return cls((Card(value) for value in values), rng=rng)

    def fill_standard(self, copies: int = 4, max_value: int = MAX_CARD_VALUE) -> None:
        """Append `copies` runs of the values 1..max_value, in order."""
        for _ in range(copies):
            for value in range(MIN_CARD_VALUE, max_value + 1):
                self._cards.append(Card(value))

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top (end) of the deck."""
        if not self._cards:
            raise EmptyDeckError("Cannot draw from empty deck")
        return self._cards.pop()

    def add(self, card: Card) -> None:
        """Place a card on top of the deck."""
        self._cards.append(card)

    def copy(self) -> "Deck":
        """Return an independent deck holding the same cards."""
        return Deck(self._cards, rng=self._rng)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards, bottom first."""
        return tuple(self._cards)

    @property
    def values(self) -> list[int]:
        """Return the plain card values, bottom first."""
        return [card.value for card in self._cards]

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"
