"""Caller-owned table state: setup, dealer upcard, seen cards and own hand.

Every mutation returns a new ``TableState``; the advisor functions only ever
see the full sequences passed in.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from advisor.advice import Recommendation, recommend
from advisor.cards import Rank, to_rank, to_ranks
from advisor.counting import CountState, ShoeConfig, compute_count
from advisor.errors import ShoeExhaustedError
from advisor.hand import HandValue, evaluate, is_pair

DEFAULT_DEALER_UP = Rank.TEN


@dataclass(frozen=True)
class TableSetup:
    """Table configuration chosen before play starts."""

    decks: int = 2
    players: int = 4  # Context only; the count does not depend on it

    def __post_init__(self) -> None:
        if not 1 <= self.decks <= 8:
            raise ValueError("decks must be between 1 and 8")
        if not 1 <= self.players <= 7:
            raise ValueError("players must be between 1 and 7")

    @property
    def shoe(self) -> ShoeConfig:
        return ShoeConfig(decks=self.decks)


@dataclass(frozen=True)
class TableSnapshot:
    """Everything the presentation layer shows for the current state."""

    count: CountState
    hand_value: HandValue
    is_pair: bool
    recommendation: Recommendation | None


@dataclass(frozen=True)
class TableState:
    """
    One round at the table.

    ``seen`` holds every visible card, the player's own cards included.
    """

    setup: TableSetup = field(default_factory=TableSetup)
    dealer_up: Rank = DEFAULT_DEALER_UP
    seen: tuple[Rank, ...] = ()
    hand: tuple[Rank, ...] = ()

    def _check_room(self) -> None:
        total_cards = self.setup.shoe.total_cards
        if len(self.seen) >= total_cards:
            raise ShoeExhaustedError(total_cards)

    def add_observed_card(self, card: Rank | str) -> "TableState":
        """Record a card seen at the table."""
        rank = to_rank(card)
        self._check_room()
        return replace(self, seen=self.seen + (rank,))

    def add_own_card(self, card: Rank | str) -> "TableState":
        """Add a card to the player's hand; it is counted as seen too."""
        rank = to_rank(card)
        self._check_room()
        return replace(self, hand=self.hand + (rank,), seen=self.seen + (rank,))

    def undo_observed(self) -> "TableState":
        """Remove the last seen card, if any."""
        return replace(self, seen=self.seen[:-1])

    def undo_own(self) -> "TableState":
        """Remove the last hand card and the last seen card."""
        if not self.hand:
            return self
        return replace(self, hand=self.hand[:-1], seen=self.seen[:-1])

    def clear_observed(self) -> "TableState":
        return replace(self, seen=())

    def clear_hand(self) -> "TableState":
        return replace(self, hand=())

    def set_dealer_up(self, card: Rank | str) -> "TableState":
        """Select the dealer's upcard; it is not counted unless also observed."""
        return replace(self, dealer_up=to_rank(card))

    def reset_round(self) -> "TableState":
        """Clear seen cards and hand, keeping the setup."""
        return TableState(setup=self.setup)

    def count(self) -> CountState:
        return compute_count(self.seen, self.setup.shoe)

    def snapshot(self) -> TableSnapshot:
        """Count, hand facts and (with a non-empty hand) a recommendation."""
        count = self.count()
        advice = None
        if self.hand:
            advice = recommend(self.hand, self.dealer_up, count.true_count)
        return TableSnapshot(
            count=count,
            hand_value=evaluate(self.hand),
            is_pair=is_pair(self.hand),
            recommendation=advice,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for session storage."""
        return {
            "decks": self.setup.decks,
            "players": self.setup.players,
            "dealer_up": str(self.dealer_up),
            "seen": [str(r) for r in self.seen],
            "hand": [str(r) for r in self.hand],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableState":
        """Restore from session storage."""
        return cls(
            setup=TableSetup(decks=data["decks"], players=data["players"]),
            dealer_up=to_rank(data["dealer_up"]),
            seen=to_ranks(data["seen"]),
            hand=to_ranks(data["hand"]),
        )
