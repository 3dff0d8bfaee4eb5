"""Player actions accepted by the game engine."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pazaak.game.engine import PazaakGame


class ActionType(Enum):
    """The three things a player can do on their turn."""

    STAND = "stand"
    PLAY = "play"
    END = "end"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Action:
    """A validated player action. PLAY carries the hand index to play."""

    kind: ActionType
    card_index: int | None = None

    def __post_init__(self) -> None:
        if self.kind == ActionType.PLAY and self.card_index is None:
            raise ValueError("PLAY action requires a card_index")
        if self.kind != ActionType.PLAY and self.card_index is not None:
            raise ValueError(f"{self.kind.name} action takes no card_index")

    @classmethod
    def stand(cls) -> "Action":
        return cls(ActionType.STAND)

    @classmethod
    def play(cls, card_index: int) -> "Action":
        return cls(ActionType.PLAY, card_index)

    @classmethod
    def end(cls) -> "Action":
        return cls(ActionType.END)


# Called with (game, player_index) whenever the engine needs the next action
ActionProvider = Callable[["PazaakGame", int], Action]
