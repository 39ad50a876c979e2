"""Running count, decks remaining and true count for a shoe."""

import math
from dataclasses import dataclass
from typing import Sequence

from advisor.cards import Rank
from advisor.counting.base import CountingSystem
from advisor.counting.hilo import HiLoSystem

CARDS_PER_DECK = 52
MIN_DECKS_REMAINING = 0.25


@dataclass(frozen=True)
class ShoeConfig:
    """Number of decks in the shoe, fixed for a round."""

    decks: int = 2

    def __post_init__(self) -> None:
        if not 1 <= self.decks <= 8:
            raise ValueError("decks must be between 1 and 8")

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self.decks * CARDS_PER_DECK


@dataclass(frozen=True)
class CountState:
    """Count derived from the cards seen so far."""

    running_count: int
    decks_remaining: float
    true_count: int
    cards_seen: int
    total_cards: int


def estimate_decks_remaining(cards_seen: int, shoe: ShoeConfig) -> float:
    """
    Estimate the decks left in the shoe.

    Clamped to [0.25, decks] so the true count never divides by zero and
    never exceeds the configured shoe size.
    """
    estimate = (shoe.total_cards - cards_seen) / CARDS_PER_DECK
    return max(MIN_DECKS_REMAINING, min(float(shoe.decks), estimate))


def true_count(running_count: int, decks_remaining: float) -> int:
    """Return running count / decks remaining, truncated toward zero."""
    return math.trunc(running_count / decks_remaining)


def compute_count(
    seen_cards: Sequence[Rank | str],
    shoe: ShoeConfig,
    system: CountingSystem | None = None,
) -> CountState:
    """
    Compute the count for every card seen so far this shoe.

    Args:
        seen_cards: Ordered cards observed at the table, own cards included
        shoe: Shoe configuration
        system: Counting system to use (Hi-Lo if None)

    Returns:
        The running count, decks remaining estimate and true count
    """
    system = system or HiLoSystem()
    running = system.running_count(seen_cards)
    decks_remaining = estimate_decks_remaining(len(seen_cards), shoe)
    return CountState(
        running_count=running,
        decks_remaining=decks_remaining,
        true_count=true_count(running, decks_remaining),
        cards_seen=len(seen_cards),
        total_cards=shoe.total_cards,
    )
