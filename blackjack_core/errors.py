"""Exception hierarchy for the blackjack engine."""


class BlackjackError(Exception):
    """Base class for all engine errors."""


class InvalidOptions(BlackjackError, ValueError):
    """Game options failed validation."""


class InvalidBet(BlackjackError, ValueError):
    """A round was started with a bet that is not a positive integer."""


class DeckExhausted(BlackjackError, IndexError):
    """
    A card was drawn from an empty shoe.

    The reshuffle threshold keeps this unreachable in normal play, so it
    signals a broken invariant rather than an expected outcome.
    """
