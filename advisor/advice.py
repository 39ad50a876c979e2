"""Baseline action, count deviations and insurance in one recommendation."""

from dataclasses import dataclass
from typing import Sequence

from advisor.cards import Rank
from advisor.strategy.basic import Action, resolve_baseline
from advisor.strategy.deviations import (
    InsuranceAdvice,
    insurance_advice,
    resolve_deviation,
)
from advisor.strategy.rules import Capabilities


@dataclass(frozen=True)
class Recommendation:
    """What to do with the current hand at the current count."""

    baseline_action: Action
    final_action: Action
    deviation_notes: tuple[str, ...]
    insurance_advice: InsuranceAdvice

    @property
    def deviated(self) -> bool:
        """Check if an index play overrode the baseline action."""
        return bool(self.deviation_notes)


def recommend(
    cards: Sequence[Rank | str],
    dealer_up: Rank | str,
    true_count: int,
    flags: Capabilities | None = None,
) -> Recommendation:
    """
    Recommend an action for a hand.

    Args:
        cards: The player's hand
        dealer_up: Dealer's upcard rank
        true_count: Current Hi-Lo true count
        flags: Allowed actions (derived from the hand if None)

    Returns:
        Baseline and final actions, deviation notes and insurance advice
    """
    flags = flags or Capabilities.for_hand(cards)
    baseline = resolve_baseline(cards, dealer_up, flags)
    deviation = resolve_deviation(baseline, cards, dealer_up, true_count, flags)
    return Recommendation(
        baseline_action=baseline,
        final_action=deviation.action,
        deviation_notes=deviation.notes,
        insurance_advice=insurance_advice(dealer_up, true_count),
    )
