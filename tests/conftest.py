"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from blackjack_core.cards import Card, Shoe, Rank, Suit
from blackjack_core.game import BlackjackGame
from blackjack_core.hand import PlayerHand

# Pads rigged shoes so a reshuffle is never triggered at round start
FILLER = Card(Rank.TWO, Suit.CLUBS)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 4-deck shoe."""
    return Shoe(num_decks=4, rng=rng)


@pytest.fixture
def game(rng):
    """A single-deck game with the default rules."""
    return BlackjackGame(num_decks=1, rng=rng)


@pytest.fixture
def s17_game(rng):
    """A single-deck game where the dealer stands on soft 17."""
    return BlackjackGame(num_decks=1, dealer_hits_soft_17=False, rng=rng)


@pytest.fixture
def stack_shoe():
    """
    Rig a game's shoe so the given cards are dealt first, in order.

    A round deals player, player, dealer up card, dealer hole card, then
    any further cards in request order. The rest of the shoe is twos.
    """

    def _stack(game: BlackjackGame, *cards: str) -> None:
        rigged = [Card.from_string(c) for c in cards]
        padding = max(0, game.shoe.total_cards - len(rigged))
        game.shoe._cards = [FILLER] * padding + list(reversed(rigged))

    return _stack


def make_hand(*cards: str, bet: int = 10) -> PlayerHand:
    """Build a player hand from card strings."""
    return PlayerHand(bet=bet, cards=[Card.from_string(c) for c in cards])


@pytest.fixture
def hand_factory():
    """Factory for player hands built from card strings."""
    return make_hand


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return make_hand("8S", "8H")
