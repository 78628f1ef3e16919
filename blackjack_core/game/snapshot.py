"""Read-only snapshots of the engine state for presentation layers."""

from dataclasses import dataclass
from typing import Any, Sequence

from blackjack_core.cards import Card
from blackjack_core.game.actions import PlayerAction
from blackjack_core.game.state import GamePhase
from blackjack_core.hand import HandResult, HandStatus, HandValue, PlayerHand, hand_value


def _card_to_dict(card: Card) -> dict[str, int]:
    return {"rank": card.rank.value, "suit": card.suit.value}


@dataclass(frozen=True)
class HandSnapshot:
    """Frozen copy of a player hand."""

    cards: tuple[Card, ...]
    bet: int
    status: HandStatus
    result: HandResult

    @classmethod
    def of(cls, hand: PlayerHand) -> "HandSnapshot":
        """Copy a live hand. Cards are immutable, so a new tuple is enough."""
        return cls(
            cards=tuple(hand.cards),
            bet=hand.bet,
            status=hand.status,
            result=hand.result,
        )

    @property
    def value(self) -> HandValue:
        return hand_value(self.cards)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cards": [_card_to_dict(card) for card in self.cards],
            "bet": self.bet,
            "status": self.status.name,
            "result": self.result.name,
            "total": self.value.total,
            "is_soft": self.value.is_soft,
        }


@dataclass(frozen=True)
class GameState:
    """
    Immutable view of a game at one point in time.

    Nothing in a snapshot is shared with the live engine: hands and card
    sequences are rebuilt as tuples, and cards themselves are frozen.
    """

    deck_size: int
    player_hands: tuple[HandSnapshot, ...]
    dealer_hand: tuple[Card, ...]
    active_hand_index: int
    phase: GamePhase
    dealer_up_card_value: int
    available_actions: frozenset[PlayerAction]

    @classmethod
    def capture(
        cls,
        *,
        deck_size: int,
        player_hands: Sequence[PlayerHand],
        dealer_cards: Sequence[Card],
        active_hand_index: int,
        phase: GamePhase,
        available_actions: frozenset[PlayerAction],
    ) -> "GameState":
        """
        Build a snapshot from live engine data.

        The dealer's hole card stays hidden while the player is acting.
        """
        visible = dealer_cards[:1] if phase is GamePhase.PLAYER_TURN else dealer_cards
        up_card_value = hand_value(dealer_cards[:1]).total

        return cls(
            deck_size=deck_size,
            player_hands=tuple(HandSnapshot.of(hand) for hand in player_hands),
            dealer_hand=tuple(visible),
            active_hand_index=active_hand_index,
            phase=phase,
            dealer_up_card_value=up_card_value,
            available_actions=frozenset(available_actions),
        )

    @property
    def active_hand(self) -> HandSnapshot | None:
        """The hand awaiting a decision, only during the player turn."""
        if self.phase is not GamePhase.PLAYER_TURN:
            return None
        return self.player_hands[self.active_hand_index]

    def to_dict(self) -> dict[str, Any]:
        """Render the snapshot with built-in types only."""
        return {
            "deck_size": self.deck_size,
            "player_hands": [hand.to_dict() for hand in self.player_hands],
            "dealer_hand": [_card_to_dict(card) for card in self.dealer_hand],
            "active_hand_index": self.active_hand_index,
            "phase": self.phase.name,
            "dealer_up_card_value": self.dealer_up_card_value,
            "available_actions": sorted(action.name for action in self.available_actions),
        }
