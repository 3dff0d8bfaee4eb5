"""Tests for the event emitter and game state helpers."""

from pazaak.game.events import EventEmitter, EventType, GameEvent
from pazaak.game.state import GameState, is_valid_transition


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_subscription(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.CARD_DRAWN)

        emitter.emit_new(EventType.CARD_DRAWN, player=0)
        emitter.emit_new(EventType.TURN_ENDED, player=0)

        assert [e.event_type for e in received] == [EventType.CARD_DRAWN]

    def test_catch_all_subscription(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)

        emitter.emit_new(EventType.CARD_DRAWN)
        emitter.emit_new(EventType.TURN_ENDED)

        assert len(received) == 2

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.CARD_DRAWN)
        emitter.unsubscribe(received.append, EventType.CARD_DRAWN)
        emitter.unsubscribe(received.append, EventType.TURN_ENDED)

        emitter.emit_new(EventType.CARD_DRAWN)
        assert received == []

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.PLAYER_STOOD, player=1, total=18)

        assert emitter.history == [event]
        assert emitter.of_type(EventType.PLAYER_STOOD) == [event]
        assert event.data == {"player": 1, "total": 18}

        emitter.clear_history()
        assert emitter.history == []

    def test_history_is_a_copy(self):
        emitter = EventEmitter()
        emitter.emit_new(EventType.GAME_STARTED)
        emitter.history.clear()
        assert len(emitter.history) == 1

    def test_event_str(self):
        event = GameEvent(EventType.TURN_ENDED, {"player": 0})
        assert str(event) == "TURN_ENDED: {'player': 0}"


class TestGameState:
    """Tests for state transition table."""

    def test_valid_transitions(self):
        assert is_valid_transition(GameState.WAITING_FOR_TURN, GameState.PLAYER_TURN)
        assert is_valid_transition(GameState.PLAYER_TURN, GameState.WAITING_FOR_TURN)
        assert is_valid_transition(GameState.WAITING_FOR_TURN, GameState.RESOLVED)

    def test_invalid_transitions(self):
        assert not is_valid_transition(GameState.PLAYER_TURN, GameState.RESOLVED)
        assert not is_valid_transition(GameState.RESOLVED, GameState.WAITING_FOR_TURN)

    def test_str(self):
        assert str(GameState.WAITING_FOR_TURN) == "Waiting For Turn"
