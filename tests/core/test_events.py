"""Tests for the event emitter."""

from blackjack_core.game.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_subscription(self):
        """Test that handlers only see their event type."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_STAND)
        emitter.emit_new(EventType.PLAYER_HIT, hand_value=15)

        assert [e.event_type for e in seen] == [EventType.PLAYER_HIT]
        assert seen[0].data == {"hand_value": 15}

    def test_catch_all_subscription(self):
        """Test that a handler without a type sees everything."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)

        emitter.emit_new(EventType.ROUND_STARTED)
        emitter.emit_new(EventType.ROUND_ENDED)

        assert len(seen) == 2

    def test_unsubscribe(self):
        """Test removing a handler."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PUSH)

        assert emitter.unsubscribe(seen.append, EventType.PUSH)
        assert not emitter.unsubscribe(seen.append, EventType.PUSH)

        emitter.emit_new(EventType.PUSH)
        assert seen == []

    def test_history_is_a_copy(self):
        """Test that callers cannot rewrite the history."""
        emitter = EventEmitter()
        emitter.emit(GameEvent(EventType.GAME_RESET))

        history = emitter.history
        history.clear()

        assert len(emitter.history) == 1
        emitter.clear_history()
        assert emitter.history == []

    def test_history_keeps_latest_events(self):
        """Test that the history drops the oldest events past its limit."""
        emitter = EventEmitter(history_limit=3)
        for index in range(5):
            emitter.emit_new(EventType.CARD_DEALT, index=index)

        assert [e.data["index"] for e in emitter.history] == [2, 3, 4]

    def test_event_str(self):
        """Test event string representation."""
        event = GameEvent(EventType.PLAYER_BUSTS, {"hand_index": 0})
        assert str(event) == "PLAYER_BUSTS: {'hand_index': 0}"
