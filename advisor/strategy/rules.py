"""Table rules and per-hand action availability."""

from dataclasses import dataclass
from typing import Literal, Sequence

from advisor.cards import Rank


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules the baseline strategy is built for.

    Only one rule set is supported: multi-deck, dealer stands on soft 17,
    double after split, late surrender. Validation rejects anything else.
    """

    dealer_hits_soft_17: bool = False  # H17 vs S17
    double_after_split: bool = True  # DAS
    surrender: Literal["none", "early", "late"] = "late"

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.dealer_hits_soft_17:
            raise ValueError("Only dealer-stands-on-soft-17 tables are supported")
        if not self.double_after_split:
            raise ValueError("Only double-after-split tables are supported")
        if self.surrender != "late":
            raise ValueError("Only late-surrender tables are supported")

    def badges(self) -> list[str]:
        """Short labels for the rules, as printed on a table felt."""
        return [
            "H17" if self.dealer_hits_soft_17 else "S17",
            "LS",
            "DAS",
        ]


BASELINE_RULES = RuleSet()


@dataclass(frozen=True)
class Capabilities:
    """Which actions the player may take on the current hand."""

    can_split: bool = True
    can_double: bool = True
    can_surrender: bool = True

    @classmethod
    def for_hand(cls, cards: Sequence[Rank | str]) -> "Capabilities":
        """
        Derive the flags from the hand.

        Splitting is always allowed (the pair table only fires on pairs);
        doubling and surrender need exactly two cards.
        """
        two_cards = len(cards) == 2
        return cls(
            can_split=True,
            can_double=two_cards,
            can_surrender=two_cards,
        )
