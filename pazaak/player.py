"""Player status and per-player state."""

from dataclasses import dataclass, field
from enum import Enum, auto

from pazaak.cards import Deck
from pazaak.errors import InvalidStatusTransitionError
from pazaak.hand import Hand


class Status(Enum):
    """
    Player status within one game.

    Flow: PLAYING → STANDING or PLAYING → BUSTED. Both are terminal.
    """

    PLAYING = auto()
    STANDING = auto()
    BUSTED = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Player:
    """A player's hand, private deck, and status for one game."""

    hand: Hand = field(default_factory=Hand)
    deck: Deck = field(default_factory=Deck)
    status: Status = Status.PLAYING

    def stand(self) -> None:
        """Stop playing for the rest of the game."""
        self._leave_play(Status.STANDING)

    def bust(self) -> None:
        """Mark the player as busted for the rest of the game."""
        self._leave_play(Status.BUSTED)

    def _leave_play(self, status: Status) -> None:
        if self.status != Status.PLAYING:
            raise InvalidStatusTransitionError(
                f"Cannot move from {self.status} to {status}"
            )
        self.status = status

    def deal(self, count: int) -> None:
        """Move `count` cards from the private deck into the hand."""
        for _ in range(count):
            self.hand.add_card(self.deck.draw())

    @property
    def is_playing(self) -> bool:
        """Check if the player still acts this game."""
        return self.status == Status.PLAYING

    @property
    def is_done(self) -> bool:
        """Check if the player is standing or busted."""
        return self.status != Status.PLAYING

    @property
    def card_count(self) -> int:
        """Return the number of cards held in hand and private deck."""
        return len(self.hand) + len(self.deck)
