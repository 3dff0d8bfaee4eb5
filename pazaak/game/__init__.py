"""Game engine, match orchestration and state management."""

from pazaak.game.actions import Action, ActionProvider, ActionType
from pazaak.game.events import GameEvent, EventEmitter, EventType
from pazaak.game.state import GameState
from pazaak.game.engine import PazaakGame
from pazaak.game.match import Match

__all__ = [
    "Action",
    "ActionProvider",
    "ActionType",
    "GameEvent",
    "EventEmitter",
    "EventType",
    "GameState",
    "PazaakGame",
    "Match",
]
