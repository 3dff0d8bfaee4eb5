"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Match flow events
    ROUND_STARTED = auto()
    SCORE_UPDATED = auto()
    MATCH_WON = auto()

    # Game flow events
    GAME_STARTED = auto()
    GAME_RESOLVED = auto()
    TURN_CYCLE_COMPLETED = auto()

    # Card events
    DECK_SHUFFLED = auto()
    CARD_DEALT = auto()
    CARD_DRAWN = auto()
    DECK_EXHAUSTED = auto()

    # Player action events
    CARD_PLAYED = auto()
    PLAYER_STOOD = auto()
    PLAYER_BUSTED = auto()
    TURN_ENDED = auto()
    TURN_SKIPPED = auto()

    # Rejections
    PLAY_REJECTED = auto()
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer. Drivers use them to report rejections and
    to pace the game for a human audience.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Publishes engine events to subscribers and keeps an ordered history.

    Handlers registered for a specific type run before catch-all handlers.
    A match and all of its games share one emitter, so the history is the
    full record of the match.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Register a handler for one event type, or for every event when None."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Unsubscribe a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record an event, then hand it to typed and catch-all handlers."""
        self._event_history.append(event)

        # Call type-specific handlers
        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        # Call catch-all handlers
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """Build an event from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        """Return the recorded events of one type, oldest first."""
        return [e for e in self._event_history if e.event_type == event_type]

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
