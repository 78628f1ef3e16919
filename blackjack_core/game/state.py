"""Game phase enumeration."""

from enum import Enum, auto


class GamePhase(Enum):
    """
    Game state machine phases.

    Flow: BETTING → PLAYER_TURN → DEALER_TURN → ROUND_OVER → PLAYER_TURN ...
    A natural blackjack passes through PLAYER_TURN without offering actions.
    """

    # Idle, waiting for the first bet
    BETTING = auto()

    # Player acts on the active hand
    PLAYER_TURN = auto()

    # Dealer draws out
    DEALER_TURN = auto()

    # Hands settled, ready for the next bet
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

