"""Game engine and state management."""

from blackjack_core.game.actions import PlayerAction, available_actions
from blackjack_core.game.events import GameEvent, EventType
from blackjack_core.game.snapshot import GameState, HandSnapshot
from blackjack_core.game.state import GamePhase
from blackjack_core.game.engine import BlackjackGame

__all__ = [
    "PlayerAction",
    "available_actions",
    "GameEvent",
    "EventType",
    "GameState",
    "HandSnapshot",
    "GamePhase",
    "BlackjackGame",
]
