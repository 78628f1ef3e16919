"""Blackjack rules engine - 100% UI-agnostic."""

from blackjack_core.cards import Card, Shoe, Rank, Suit
from blackjack_core.config import GameOptions
from blackjack_core.errors import BlackjackError, DeckExhausted, InvalidBet, InvalidOptions
from blackjack_core.hand import HandResult, HandStatus, HandValue, PlayerHand, hand_value
from blackjack_core.game import (
    BlackjackGame,
    EventType,
    GameEvent,
    GamePhase,
    GameState,
    HandSnapshot,
    PlayerAction,
)

__all__ = [
    "Card",
    "Shoe",
    "Rank",
    "Suit",
    "GameOptions",
    "BlackjackError",
    "DeckExhausted",
    "InvalidBet",
    "InvalidOptions",
    "HandResult",
    "HandStatus",
    "HandValue",
    "PlayerHand",
    "hand_value",
    "BlackjackGame",
    "EventType",
    "GameEvent",
    "GamePhase",
    "GameState",
    "HandSnapshot",
    "PlayerAction",
]
