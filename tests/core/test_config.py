"""Tests for game options."""

import os
import pytest
from dataclasses import FrozenInstanceError
from unittest.mock import patch

from blackjack_core.config import GameOptions
from blackjack_core.errors import InvalidOptions


class TestGameOptions:
    """Tests for the GameOptions class."""

    def test_defaults(self):
        """Test the default table rules."""
        with patch.dict(os.environ, {}, clear=True):
            options = GameOptions()

        assert options.num_decks == 4
        assert options.dealer_hits_soft_17 is True
        assert options.blackjack_payout == 1.5

    def test_env_overrides_defaults(self):
        """Test that defaults are read from the environment."""
        env = {
            "BLACKJACK_NUM_DECKS": "6",
            "BLACKJACK_DEALER_HITS_SOFT_17": "false",
            "BLACKJACK_PAYOUT": "1.2",
        }
        with patch.dict(os.environ, env, clear=True):
            options = GameOptions()

        assert options.num_decks == 6
        assert options.dealer_hits_soft_17 is False
        assert options.blackjack_payout == 1.2

    def test_explicit_values_win_over_env(self):
        """Test that constructor arguments ignore the environment."""
        with patch.dict(os.environ, {"BLACKJACK_NUM_DECKS": "8"}):
            options = GameOptions(num_decks=2)

        assert options.num_decks == 2

    def test_options_are_frozen(self):
        """Test that options cannot change after construction."""
        options = GameOptions()
        with pytest.raises(FrozenInstanceError):
            options.num_decks = 8

    @pytest.mark.parametrize("num_decks", [0, -1])
    def test_invalid_deck_count(self, num_decks):
        """Test that fewer than one deck is rejected."""
        with pytest.raises(InvalidOptions):
            GameOptions(num_decks=num_decks)

    def test_non_integer_deck_count(self):
        """Test that a fractional deck count is rejected."""
        with pytest.raises(InvalidOptions):
            GameOptions(num_decks=1.5)

    @pytest.mark.parametrize("payout", [0, -1.5])
    def test_invalid_payout(self, payout):
        """Test that a non-positive payout is rejected."""
        with pytest.raises(ValueError):
            GameOptions(blackjack_payout=payout)

    @pytest.mark.parametrize("flag", ["false", 0, None])
    def test_non_boolean_soft_17_flag(self, flag):
        """Test that the soft 17 rule only accepts a real boolean."""
        with pytest.raises(InvalidOptions, match="dealer_hits_soft_17"):
            GameOptions(dealer_hits_soft_17=flag)

    @pytest.mark.parametrize("payout", ["1.5", True, None])
    def test_non_numeric_payout(self, payout):
        """Test that a payout must be a number, not a string or a flag."""
        with pytest.raises(InvalidOptions, match="blackjack_payout"):
            GameOptions(blackjack_payout=payout)

    def test_merged_rejects_string_flag(self):
        """Test that overrides go through the same type checks."""
        with pytest.raises(InvalidOptions):
            GameOptions().merged(dealer_hits_soft_17="false")

    def test_merged(self):
        """Test merging overrides over existing options."""
        base = GameOptions(num_decks=6, dealer_hits_soft_17=True, blackjack_payout=1.5)
        merged = base.merged(dealer_hits_soft_17=False)

        assert merged == GameOptions(num_decks=6, dealer_hits_soft_17=False, blackjack_payout=1.5)
        assert base.dealer_hits_soft_17 is True

    def test_merged_validates(self):
        """Test that merged options are validated too."""
        with pytest.raises(InvalidOptions):
            GameOptions().merged(num_decks=0)

    def test_merged_unknown_option(self):
        """Test that unknown option names are rejected."""
        with pytest.raises(InvalidOptions, match="surrender"):
            GameOptions().merged(surrender="late")
