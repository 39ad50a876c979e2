"""Hand evaluation for blackjack."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from advisor.cards import Rank, to_rank, to_ranks


@dataclass(frozen=True, slots=True)
class HandValue:
    """Best total of a hand and whether an ace still counts as 11."""

    total: int
    is_soft: bool


def evaluate(cards: Iterable[Rank | str]) -> HandValue:
    """
    Calculate the best hand value.

    Aces start at 11 and are demoted to 1 one at a time while the total is
    over 21. A busted total is returned as-is; callers check ``total > 21``.
    """
    total = 0
    aces = 0

    for rank in to_ranks(cards):
        if rank.is_ace:
            aces += 1
        total += rank.blackjack_value

    # Reduce aces from 11 to 1 as needed
    undemoted = aces
    while total > 21 and undemoted > 0:
        total -= 10
        undemoted -= 1

    return HandValue(total=total, is_soft=undemoted > 0 and total <= 21)


def is_pair(cards: Sequence[Rank | str]) -> bool:
    """
    Check if the hand is a splittable pair.

    Two different ten-valued ranks (e.g. K and Q) count as a pair.
    """
    if len(cards) != 2:
        return False
    first, second = to_rank(cards[0]), to_rank(cards[1])
    if first.is_ten_value and second.is_ten_value:
        return True
    return first == second


def pair_rank_key(cards: Sequence[Rank | str]) -> str | None:
    """Return the pair-table key: "10" for any ten-valued pair, else the symbol.

    Hands that are not a two-card pair have no key.
    """
    if not is_pair(cards):
        return None
    first, second = to_rank(cards[0]), to_rank(cards[1])
    if first.is_ten_value and second.is_ten_value:
        return "10"
    return str(first)


@dataclass(frozen=True)
class Hand:
    """An immutable blackjack hand; every fact is derived from its ranks."""

    cards: tuple[Rank, ...] = ()

    @classmethod
    def of(cls, *cards: Rank | str) -> "Hand":
        """Build a hand from ranks or symbols, e.g. ``Hand.of("A", "7")``."""
        return cls(to_ranks(cards))

    def with_card(self, card: Rank | str) -> "Hand":
        """Return a new hand with the card appended."""
        return Hand(self.cards + (to_rank(card),))

    @property
    def value(self) -> int:
        return evaluate(self.cards).total

    @property
    def is_soft(self) -> bool:
        return evaluate(self.cards).is_soft

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_busted(self) -> bool:
        return self.value > 21

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == 21

    @property
    def is_pair(self) -> bool:
        return is_pair(self.cards)

    @property
    def pair_key(self) -> str | None:
        """Return the pair-table key, or None if the hand is not a pair."""
        return pair_rank_key(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Rank]:
        return iter(self.cards)

    def __str__(self) -> str:
        if not self.cards:
            return "(none)"
        cards_str = " ".join(str(rank) for rank in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"
