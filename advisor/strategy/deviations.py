"""Strategy deviations based on the Hi-Lo true count."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from advisor.cards import Rank, dealer_upcard_value
from advisor.hand import evaluate
from advisor.strategy.basic import Action
from advisor.strategy.rules import Capabilities

logger = logging.getLogger(__name__)

INSURANCE_INDEX = 3


def _format_index(index: int) -> str:
    return f"+{index}" if index > 0 else str(index)


def _format_upcard(dealer_upcard: int) -> str:
    return "A" if dealer_upcard == 11 else str(dealer_upcard)


@dataclass(frozen=True)
class IndexPlay:
    """
    An index play (strategy deviation based on count).

    When the true count meets or exceeds the index on a hard total, play
    ``deviation_action`` instead of the baseline action.
    """

    player_total: int
    dealer_upcard: int  # 2-11 (11 = Ace)
    index: int
    deviation_action: Action
    requires_double: bool = False

    def matches(
        self,
        total: int,
        is_soft: bool,
        dealer_upcard: int,
        flags: Capabilities,
    ) -> bool:
        """Check whether this play covers the hand, ignoring the count."""
        if self.requires_double and not flags.can_double:
            return False
        return (
            not is_soft
            and total == self.player_total
            and dealer_upcard == self.dealer_upcard
        )

    def should_deviate(self, true_count: int) -> bool:
        """Check if the deviation should be taken at the given true count."""
        return true_count >= self.index

    @property
    def description(self) -> str:
        """Human-readable note, e.g. 'Deviation: 16 vs 10 → Stand at TC ≥ 0'."""
        return (
            f"Deviation: {self.player_total} vs {_format_upcard(self.dealer_upcard)}"
            f" → {self.deviation_action} at TC ≥ {_format_index(self.index)}"
        )


# Checked in order; the first play that fires wins.
INDEX_PLAYS: list[IndexPlay] = [
    IndexPlay(16, 10, 0, Action.STAND),
    IndexPlay(15, 10, 4, Action.STAND),
    IndexPlay(16, 9, 5, Action.STAND),
    IndexPlay(16, 11, 3, Action.STAND),
    IndexPlay(12, 3, 1, Action.STAND),
    IndexPlay(12, 2, 3, Action.STAND),
    IndexPlay(10, 10, 4, Action.DOUBLE, requires_double=True),
    IndexPlay(10, 11, 3, Action.DOUBLE, requires_double=True),
    IndexPlay(11, 11, 0, Action.DOUBLE, requires_double=True),
]


@dataclass(frozen=True)
class DeviationResult:
    """Final action after index plays, with a note naming the play that fired."""

    action: Action
    notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def deviated(self) -> bool:
        return bool(self.notes)


def find_deviation(
    baseline: Action,
    total: int,
    is_soft: bool,
    dealer_upcard: int,
    true_count: int,
    flags: Capabilities,
    plays: Sequence[IndexPlay] = INDEX_PLAYS,
) -> IndexPlay | None:
    """
    Find the first index play that overrides the baseline action.

    Returns:
        The applicable IndexPlay if found and TC meets threshold, else None
    """
    for play in plays:
        if (
            play.matches(total, is_soft, dealer_upcard, flags)
            and play.should_deviate(true_count)
            and play.deviation_action != baseline
        ):
            return play
    return None


def resolve_deviation(
    baseline: Action,
    cards: Sequence[Rank | str],
    dealer_up: Rank | str,
    true_count: int,
    flags: Capabilities | None = None,
) -> DeviationResult:
    """
    Apply the index plays to a baseline action.

    Soft hands never deviate. With no play firing, the baseline is returned
    with no notes.
    """
    flags = flags or Capabilities.for_hand(cards)
    hand_value = evaluate(cards)
    up = dealer_upcard_value(dealer_up)

    play = find_deviation(
        baseline, hand_value.total, hand_value.is_soft, up, true_count, flags
    )
    if play is None:
        return DeviationResult(action=baseline)

    logger.debug("%s (baseline %s, TC %d)", play.description, baseline, true_count)
    return DeviationResult(action=play.deviation_action, notes=(play.description,))


class InsuranceAdvice(Enum):
    """Whether to take insurance against a dealer Ace."""

    BUY = "Buy (TC ≥ +3)"
    DECLINE = "Do not buy"
    NOT_APPLICABLE = "N/A"

    def __str__(self) -> str:
        return self.value


def insurance_advice(dealer_up: Rank | str, true_count: int) -> InsuranceAdvice:
    """Insurance is only offered against an Ace; buy at TC +3 or higher."""
    if dealer_upcard_value(dealer_up) != 11:
        return InsuranceAdvice.NOT_APPLICABLE
    if true_count >= INSURANCE_INDEX:
        return InsuranceAdvice.BUY
    return InsuranceAdvice.DECLINE
