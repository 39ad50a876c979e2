"""Card ranks and their blackjack values."""

from enum import Enum
from typing import Iterable

from advisor.errors import InvalidRankError


class Rank(Enum):
    """Card ranks, keyed by their table symbol."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.is_ten_value:
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self in _TEN_VALUED

    @classmethod
    def parse(cls, value: "Rank | str") -> "Rank":
        """
        Create a rank from one of the 13 exact symbols, e.g. 'A' or '10'.

        Raises:
            InvalidRankError: If the value is not one of the 13 symbols
        """
        if isinstance(value, Rank):
            return value
        if not isinstance(value, str):
            raise InvalidRankError(value)

        try:
            return cls(value)
        except ValueError:
            raise InvalidRankError(value) from None


_TEN_VALUED = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})

# Picker order used by the table UI
RANKS: tuple[Rank, ...] = tuple(Rank)

_HI_LO_WEIGHTS = {
    Rank.TWO: 1,
    Rank.THREE: 1,
    Rank.FOUR: 1,
    Rank.FIVE: 1,
    Rank.SIX: 1,
    Rank.SEVEN: 0,
    Rank.EIGHT: 0,
    Rank.NINE: 0,
    Rank.TEN: -1,
    Rank.JACK: -1,
    Rank.QUEEN: -1,
    Rank.KING: -1,
    Rank.ACE: -1,
}


def to_rank(value: Rank | str) -> Rank:
    """Coerce a symbol or Rank to a Rank."""
    return Rank.parse(value)


def to_ranks(values: Iterable[Rank | str]) -> tuple[Rank, ...]:
    """Coerce a sequence of symbols to a tuple of ranks, preserving order."""
    return tuple(Rank.parse(v) for v in values)


def counting_weight(rank: Rank | str) -> int:
    """Return the Hi-Lo weight of a rank: +1 for 2-6, 0 for 7-9, -1 for 10-A."""
    return _HI_LO_WEIGHTS[to_rank(rank)]


def is_ten_valued(rank: Rank | str) -> bool:
    """Check if a rank is 10, J, Q or K."""
    return to_rank(rank).is_ten_value


def dealer_upcard_value(rank: Rank | str) -> int:
    """Return the strategy-table index of a dealer upcard (2-11, Ace = 11)."""
    return to_rank(rank).blackjack_value
