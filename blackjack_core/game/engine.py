"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Any, Callable

from transitions import Machine

from blackjack_core.cards import Card, Shoe
from blackjack_core.config import GameOptions
from blackjack_core.errors import InvalidBet
from blackjack_core.game.actions import PlayerAction, available_actions
from blackjack_core.game.events import EventEmitter, EventType, GameEvent
from blackjack_core.game.snapshot import GameState
from blackjack_core.game.state import GamePhase
from blackjack_core.hand import (
    HandResult,
    HandStatus,
    HandValue,
    PlayerHand,
    hand_value,
    settle_hand,
)

logger = logging.getLogger(__name__)

_RESULT_EVENTS = {
    HandResult.PLAYER_WINS: EventType.PLAYER_WINS,
    HandResult.DEALER_WINS: EventType.PLAYER_LOSES,
    HandResult.PUSH: EventType.PUSH,
}


def dealer_should_hit(value: HandValue, hits_soft_17: bool) -> bool:
    """Dealer draws below 17, and on soft 17 when the table says so."""
    if value.total < 17:
        return True
    return value.total == 17 and value.is_soft and hits_soft_17


class BlackjackGame:
    """
    Blackjack game engine using a state machine.

    One instance owns the shoe, the player hands and the dealer hand of a
    single seat. Every public method runs to completion; callers must not
    share an instance between threads without their own serialization.

    Player actions that are not currently legal are ignored: the method
    returns False and leaves the state untouched. Consult
    ``get_available_actions()`` before acting.
    """

    # State machine states
    STATES = [p.name.lower() for p in GamePhase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": ["betting", "round_over"], "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "settle", "source": "dealer_turn", "dest": "round_over"},
        {"trigger": "reset", "source": "*", "dest": "betting"},
    ]

    hand_value = staticmethod(hand_value)

    def __init__(
        self,
        options: GameOptions | None = None,
        *,
        rng: Random | None = None,
        **overrides: Any,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            options: Table rules (defaults from the environment if not provided)
            rng: Random number generator for reproducible shuffles
            **overrides: Individual GameOptions fields merged over ``options``
        """
        base = options or GameOptions()
        self._options = base.merged(**overrides) if overrides else base
        self.shoe = Shoe(num_decks=self._options.num_decks, rng=rng)

        self.player_hands: list[PlayerHand] = []
        self.dealer_cards: list[Card] = []
        self.active_hand_index = 0
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def phase(self) -> GamePhase:
        """Get current game phase as enum."""
        return GamePhase[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def options(self) -> GameOptions:
        return self._options

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def reset_game(self) -> None:
        """Rebuild the shoe, discard all hands and event history, and return to betting."""
        self.shoe.build()
        self.player_hands = []
        self.dealer_cards = []
        self.active_hand_index = 0
        self.reset()
        self.events.clear_history()
        logger.debug("Game reset with a fresh %d-deck shoe", self.shoe.num_decks)
        self.events.emit_new(EventType.GAME_RESET, deck_size=self.shoe.remaining())

    def start_round(self, bet: int) -> bool:
        """
        Place a bet and deal a new round.

        Args:
            bet: Wager for the opening hand, a positive integer

        Returns:
            True if the round was dealt, False if a round is still in play
        """
        if self.phase not in (GamePhase.BETTING, GamePhase.ROUND_OVER):
            self._reject("start_round")
            return False

        if isinstance(bet, bool) or not isinstance(bet, int) or bet <= 0:
            raise InvalidBet(f"Bet amount must be a positive integer, got {bet!r}")

        if self.shoe.needs_reshuffle:
            self.shoe.build()
            logger.debug("Shoe reshuffled below threshold")
            self.events.emit_new(EventType.SHOE_SHUFFLED, deck_size=self.shoe.remaining())

        hand = PlayerHand(bet=bet)
        self.player_hands = [hand]
        self.dealer_cards = []
        self.active_hand_index = 0

        self._deal_card_to_hand(hand)
        self._deal_card_to_hand(hand)
        self._deal_card_to_hand(self.dealer_cards)
        self._deal_card_to_hand(self.dealer_cards, face_up=False)

        self.deal()
        logger.debug("Round started with bet %d: player %s", bet, hand)
        self.events.emit_new(EventType.ROUND_STARTED, bet=bet)

        if hand.total == 21:
            hand.status = HandStatus.BLACKJACK
            self.events.emit_new(EventType.PLAYER_BLACKJACK, hand_index=0)
            self._play_dealer()

        return True

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if not self._can_perform(PlayerAction.HIT):
            return False

        hand = self.player_hands[self.active_hand_index]
        self._deal_card_to_hand(hand)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            hand_index=self.active_hand_index,
            hand_value=hand.total,
        )

        if hand.is_busted:
            hand.status = HandStatus.BUST
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_index=self.active_hand_index)
            self._advance_to_next_hand()

        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if not self._can_perform(PlayerAction.STAND):
            return False

        hand = self.player_hands[self.active_hand_index]
        hand.status = HandStatus.STOOD
        self.events.emit_new(
            EventType.PLAYER_STAND,
            hand_index=self.active_hand_index,
            hand_value=hand.total,
        )
        self._advance_to_next_hand()
        return True

    def double_down(self) -> bool:
        """Player doubles the bet and takes exactly one more card."""
        if not self._can_perform(PlayerAction.DOUBLE_DOWN):
            return False

        hand = self.player_hands[self.active_hand_index]
        hand.bet *= 2
        self._deal_card_to_hand(hand)
        hand.status = HandStatus.BUST if hand.is_busted else HandStatus.STOOD

        self.events.emit_new(
            EventType.PLAYER_DOUBLE,
            hand_index=self.active_hand_index,
            hand_value=hand.total,
            new_bet=hand.bet,
        )
        if hand.status is HandStatus.BUST:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_index=self.active_hand_index)

        self._advance_to_next_hand()
        return True

    def split(self) -> bool:
        """
        Player splits a pair into two hands.

        The new hand is seated right after the active one and play continues
        on the active hand, which keeps its index. A 21 made this way is an
        ordinary stood 21, not a blackjack.
        """
        if not self._can_perform(PlayerAction.SPLIT):
            return False

        index = self.active_hand_index
        hand = self.player_hands[index]
        new_hand = PlayerHand(bet=hand.bet, cards=[hand.cards.pop()])
        self.player_hands.insert(index + 1, new_hand)

        self._deal_card_to_hand(hand)
        self._deal_card_to_hand(new_hand)

        self.events.emit_new(
            EventType.PLAYER_SPLIT,
            hand_index=index,
            hand1_value=hand.total,
            hand2_value=new_hand.total,
        )

        if hand.total == 21:
            # Stays the active hand; the player stands to move on
            hand.status = HandStatus.STOOD

        return True

    def get_available_actions(self) -> frozenset[PlayerAction]:
        """Return the actions the player may take right now."""
        return available_actions(self.phase, self._active_hand())

    def get_state(self) -> GameState:
        """Return an immutable snapshot of the game."""
        return GameState.capture(
            deck_size=self.shoe.remaining(),
            player_hands=self.player_hands,
            dealer_cards=self.dealer_cards,
            active_hand_index=self.active_hand_index,
            phase=self.phase,
            available_actions=self.get_available_actions(),
        )

    def _active_hand(self) -> PlayerHand | None:
        if self.phase is not GamePhase.PLAYER_TURN:
            return None
        return self.player_hands[self.active_hand_index]

    def _can_perform(self, action: PlayerAction) -> bool:
        if action in self.get_available_actions():
            return True
        self._reject(action.name.lower())
        return False

    def _reject(self, action: str) -> None:
        logger.debug("Ignored %s during %s", action, self.phase.name)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            action=action,
            phase=self.phase.name,
        )

    def _deal_card_to_hand(self, hand: PlayerHand | list[Card], face_up: bool = True) -> Card:
        """Deal a card to a player hand or the dealer's cards."""
        card = self.shoe.draw()
        is_dealer = hand is self.dealer_cards
        if is_dealer:
            self.dealer_cards.append(card)
        else:
            hand.add_card(card)  # type: ignore[union-attr]

        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
        )
        return card

    def _advance_to_next_hand(self) -> None:
        """Move to the next unfinished hand, or let the dealer play."""
        for index in range(self.active_hand_index + 1, len(self.player_hands)):
            if self.player_hands[index].is_active:
                self.active_hand_index = index
                return

        self._play_dealer()

    def _play_dealer(self) -> None:
        """Dealer reveals the hole card and draws out."""
        self.player_done()
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_cards[1]),
            hand_value=hand_value(self.dealer_cards).total,
        )

        while dealer_should_hit(hand_value(self.dealer_cards), self._options.dealer_hits_soft_17):
            self._deal_card_to_hand(self.dealer_cards)
            self.events.emit_new(
                EventType.DEALER_HITS,
                hand_value=hand_value(self.dealer_cards).total,
            )

        dealer_total = hand_value(self.dealer_cards).total
        if dealer_total > 21:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_total)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_total)

        self._resolve_round()

    def _resolve_round(self) -> None:
        """Settle every player hand against the dealer."""
        for index, hand in enumerate(self.player_hands):
            hand.result = settle_hand(hand, self.dealer_cards)
            self.events.emit_new(_RESULT_EVENTS[hand.result], hand_index=index, bet=hand.bet)

        self.settle()
        results = [hand.result.name for hand in self.player_hands]
        logger.debug("Round over: dealer %d, results %s", hand_value(self.dealer_cards).total, results)
        self.events.emit_new(EventType.ROUND_ENDED, results=results)
