"""Player actions and the legal-action resolver."""

from enum import Enum, auto

from blackjack_core.game.state import GamePhase
from blackjack_core.hand import PlayerHand, is_splittable


class PlayerAction(Enum):
    """Actions a player may request."""

    HIT = auto()
    STAND = auto()
    DOUBLE_DOWN = auto()
    SPLIT = auto()
    # Reserved: never offered until insurance payout rules are defined
    INSURANCE = auto()


def available_actions(phase: GamePhase, hand: PlayerHand | None) -> frozenset[PlayerAction]:
    """
    Return the actions currently permitted on the active hand.

    Args:
        phase: Current game phase
        hand: The active player hand, if any

    Returns:
        Empty outside the player turn; otherwise HIT and STAND, plus
        DOUBLE_DOWN and SPLIT at a two-card decision point.
    """
    if phase is not GamePhase.PLAYER_TURN or hand is None:
        return frozenset()

    actions = {PlayerAction.HIT, PlayerAction.STAND}
    if len(hand.cards) == 2:
        actions.add(PlayerAction.DOUBLE_DOWN)
        if is_splittable(hand.cards):
            actions.add(PlayerAction.SPLIT)

    return frozenset(actions)
