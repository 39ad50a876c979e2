"""Tests for ranks and rank values."""

import pytest

from advisor.cards import (
    RANKS,
    Rank,
    counting_weight,
    dealer_upcard_value,
    is_ten_valued,
    to_ranks,
)
from advisor.errors import AdvisorError, InvalidRankError


class TestRank:
    """Tests for the Rank enum."""

    def test_thirteen_symbols(self):
        """Test the alphabet has exactly 13 symbols in picker order."""
        assert [str(r) for r in RANKS] == [
            "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K",
        ]

    def test_blackjack_value(self):
        """Test rank blackjack values."""
        assert Rank.TWO.blackjack_value == 2
        assert Rank.NINE.blackjack_value == 9
        assert Rank.TEN.blackjack_value == 10
        assert Rank.JACK.blackjack_value == 10
        assert Rank.QUEEN.blackjack_value == 10
        assert Rank.KING.blackjack_value == 10
        assert Rank.ACE.blackjack_value == 11

    def test_is_ace(self):
        """Test ace detection."""
        assert Rank.ACE.is_ace
        assert not Rank.KING.is_ace

    def test_parse_symbols(self):
        """Test parsing table symbols."""
        assert Rank.parse("A") == Rank.ACE
        assert Rank.parse("10") == Rank.TEN
        assert Rank.parse("K") == Rank.KING

    def test_parse_passes_ranks_through(self):
        """Test that a Rank parses to itself."""
        assert Rank.parse(Rank.QUEEN) is Rank.QUEEN

    @pytest.mark.parametrize("bad", ["1", "11", "X", "", "AS", "T", "t", "k", " 7 ", "10 ", 10, None])
    def test_parse_rejects_unknown(self, bad):
        """Test out-of-alphabet values raise InvalidRankError."""
        with pytest.raises(InvalidRankError) as exc_info:
            Rank.parse(bad)
        assert exc_info.value.value == bad

    def test_invalid_rank_is_value_error(self):
        """Test InvalidRankError fits both hierarchies."""
        assert issubclass(InvalidRankError, ValueError)
        assert issubclass(InvalidRankError, AdvisorError)

    def test_to_ranks_preserves_order(self):
        """Test converting a sequence of symbols."""
        assert to_ranks(["K", "2", "A"]) == (Rank.KING, Rank.TWO, Rank.ACE)


class TestCountingWeight:
    """Tests for Hi-Lo weights."""

    @pytest.mark.parametrize("symbol", ["2", "3", "4", "5", "6"])
    def test_low_cards_positive(self, symbol):
        """Test low cards (2-6) are +1."""
        assert counting_weight(symbol) == 1

    @pytest.mark.parametrize("symbol", ["7", "8", "9"])
    def test_neutral_cards_zero(self, symbol):
        """Test neutral cards (7-9) are 0."""
        assert counting_weight(symbol) == 0

    @pytest.mark.parametrize("symbol", ["10", "J", "Q", "K", "A"])
    def test_high_cards_negative(self, symbol):
        """Test high cards (10-A) are -1."""
        assert counting_weight(symbol) == -1

    @pytest.mark.parametrize("bad", ["Z", "T", "t", "k", " 7 "])
    def test_unknown_rank_fails(self, bad):
        """Test near-miss symbols are not silently coerced."""
        with pytest.raises(InvalidRankError):
            counting_weight(bad)


class TestTenValuedAndUpcard:
    """Tests for ten-equivalence and dealer upcard values."""

    def test_ten_valued(self):
        """Test 10, J, Q, K are ten-valued and nothing else is."""
        assert {str(r) for r in Rank if is_ten_valued(r)} == {"10", "J", "Q", "K"}

    def test_dealer_upcard_values(self):
        """Test upcard values index the table from 2 to 11."""
        assert dealer_upcard_value("A") == 11
        assert dealer_upcard_value("K") == 10
        assert dealer_upcard_value("10") == 10
        assert dealer_upcard_value("6") == 6
        assert dealer_upcard_value(Rank.TWO) == 2
