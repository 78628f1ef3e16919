"""Game option management with environment variable support."""

import os
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any

from blackjack_core.errors import InvalidOptions


def _env_bool(name: str, default: str) -> bool:
    """Parse a boolean environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameOptions:
    """
    Table rules fixed for the lifetime of one engine.

    Defaults can be overridden per process through ``BLACKJACK_NUM_DECKS``,
    ``BLACKJACK_DEALER_HITS_SOFT_17`` and ``BLACKJACK_PAYOUT``.
    """

    num_decks: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_NUM_DECKS", "4"))
    )
    dealer_hits_soft_17: bool = field(
        default_factory=lambda: _env_bool("BLACKJACK_DEALER_HITS_SOFT_17", "true")
    )
    # 3:2 = 1.5, 6:5 = 1.2. Informational: payouts are computed by the caller.
    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PAYOUT", "1.5"))
    )

    def __post_init__(self) -> None:
        """Validate option values."""
        if isinstance(self.num_decks, bool) or not isinstance(self.num_decks, int):
            raise InvalidOptions("num_decks must be an integer")
        if self.num_decks < 1:
            raise InvalidOptions("num_decks must be at least 1")
        if not isinstance(self.dealer_hits_soft_17, bool):
            raise InvalidOptions("dealer_hits_soft_17 must be a boolean")
        if isinstance(self.blackjack_payout, bool) or not isinstance(self.blackjack_payout, Real):
            raise InvalidOptions("blackjack_payout must be a number")
        if self.blackjack_payout <= 0:
            raise InvalidOptions("blackjack_payout must be positive")

    def merged(self, **overrides: Any) -> "GameOptions":
        """Return a copy with the given fields replaced."""
        unknown = set(overrides) - set(self.__dataclass_fields__)
        if unknown:
            raise InvalidOptions(f"Unknown game options: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)
