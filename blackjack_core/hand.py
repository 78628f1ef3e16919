"""Hand evaluation and settlement for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, NamedTuple, Sequence

from blackjack_core.cards import Card


class HandStatus(Enum):
    """Progress of a player hand within a round."""

    ACTIVE = auto()
    STOOD = auto()
    BUST = auto()
    # Natural two-card 21 dealt at round start; a 21 made after a split is STOOD
    BLACKJACK = auto()


class HandResult(Enum):
    """Settled outcome of a player hand."""

    PENDING = auto()
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()


class HandValue(NamedTuple):
    """Total of a hand and whether an Ace still counts as 11."""

    total: int
    is_soft: bool


def hand_value(cards: Iterable[Card]) -> HandValue:
    """
    Calculate the best value of a set of cards.

    Aces start at 11 and are demoted to 1 one at a time while the total
    exceeds 21. The hand is soft when an undemoted Ace remains.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    while total > 21 and aces > 0:
        total -= 10
        aces -= 1

    return HandValue(total, aces > 0 and total <= 21)


def is_splittable(cards: Sequence[Card]) -> bool:
    """Check if two cards share a split value (tens and faces all pair)."""
    return len(cards) == 2 and cards[0].split_value == cards[1].split_value


def is_natural(cards: Sequence[Card]) -> bool:
    """Check if the cards are a two-card 21."""
    return len(cards) == 2 and hand_value(cards).total == 21


@dataclass
class PlayerHand:
    """A player hand with its wager and progress."""

    bet: int
    cards: list[Card] = field(default_factory=list)
    status: HandStatus = HandStatus.ACTIVE
    result: HandResult = HandResult.PENDING

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> HandValue:
        """Return the current hand value."""
        return hand_value(self.cards)

    @property
    def total(self) -> int:
        """Return the best hand total."""
        return self.value.total

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.total > 21

    @property
    def is_active(self) -> bool:
        """Check if the hand still awaits decisions."""
        return self.status is HandStatus.ACTIVE

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value = self.value
        value_str = f"(soft {value.total})" if value.is_soft else f"({value.total})"
        if self.status is HandStatus.BLACKJACK:
            value_str = "(BLACKJACK)"
        elif self.status is HandStatus.BUST:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"


def settle_hand(hand: PlayerHand, dealer_cards: Sequence[Card]) -> HandResult:
    """
    Compare a finished player hand against the dealer's final hand.

    Each hand is settled independently of the others.
    """
    if hand.status is HandStatus.BUST:
        return HandResult.DEALER_WINS

    if hand.status is HandStatus.BLACKJACK:
        # Blackjack payout multiplier is applied by the caller
        return HandResult.PUSH if is_natural(dealer_cards) else HandResult.PLAYER_WINS

    player_total = hand.total
    dealer_total = hand_value(dealer_cards).total

    if dealer_total > 21 or player_total > dealer_total:
        return HandResult.PLAYER_WINS
    if player_total < dealer_total:
        return HandResult.DEALER_WINS
    return HandResult.PUSH
