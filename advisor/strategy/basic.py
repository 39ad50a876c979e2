"""Basic strategy for the baseline rule set (multi-deck, S17, DAS, LS)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from advisor.cards import Rank, dealer_upcard_value, to_ranks
from advisor.hand import evaluate, is_pair, pair_rank_key
from advisor.strategy.rules import BASELINE_RULES, Capabilities, RuleSet


class Action(Enum):
    """Possible player actions."""

    STAND = "Stand"
    HIT = "Hit"
    DOUBLE = "Double"
    SPLIT = "Split"
    SURRENDER = "Surrender"

    def __str__(self) -> str:
        return self.value


# Type aliases for clarity
DealerUpcard = int  # 2-11 (11 = Ace)
Upcards = frozenset[DealerUpcard]


def upcards(*values: int) -> Upcards:
    return frozenset(values)


def upcard_range(low: int, high: int) -> Upcards:
    """Dealer upcards from low to high inclusive."""
    return frozenset(range(low, high + 1))


NONE: Upcards = frozenset()
ALL: Upcards = upcard_range(2, 11)


@dataclass(frozen=True)
class Situation:
    """Everything a strategy rule looks at, derived once per decision."""

    cards: tuple[Rank, ...]
    total: int
    is_soft: bool
    dealer_up: DealerUpcard
    flags: Capabilities

    @classmethod
    def build(
        cls,
        cards: Sequence[Rank | str],
        dealer_up: Rank | str,
        flags: Capabilities,
    ) -> "Situation":
        ranks = to_ranks(cards)
        hand_value = evaluate(ranks)
        return cls(
            cards=ranks,
            total=hand_value.total,
            is_soft=hand_value.is_soft,
            dealer_up=dealer_upcard_value(dealer_up),
            flags=flags,
        )

    @property
    def is_pair(self) -> bool:
        return is_pair(self.cards)

    @property
    def pair_key(self) -> str | None:
        return pair_rank_key(self.cards)


class StrategyRule(ABC):
    """One row of the priority-ordered strategy table."""

    @abstractmethod
    def applies(self, situation: Situation) -> bool:
        """Check whether this rule decides the situation."""
        ...

    @abstractmethod
    def action(self, situation: Situation) -> Action:
        """Return the action for a situation this rule applies to."""
        ...


@dataclass(frozen=True)
class SurrenderRule(StrategyRule):
    """Late surrender of a two-card hard total against strong upcards."""

    total: int
    against: Upcards

    def applies(self, situation: Situation) -> bool:
        return (
            situation.flags.can_surrender
            and len(situation.cards) == 2
            and not situation.is_soft
            and situation.total == self.total
            and situation.dealer_up in self.against
        )

    def action(self, situation: Situation) -> Action:
        return Action.SURRENDER


@dataclass(frozen=True)
class PairRule(StrategyRule):
    """
    Pair handling keyed by the pair-table key.

    Plays ``chosen`` against the listed upcards, ``otherwise`` elsewhere.
    A chosen Double needs doubling to be allowed.
    """

    key: str
    chosen: Action
    against: Upcards
    otherwise: Action

    def applies(self, situation: Situation) -> bool:
        return situation.flags.can_split and situation.pair_key == self.key

    def action(self, situation: Situation) -> Action:
        if situation.dealer_up in self.against:
            if self.chosen != Action.DOUBLE or situation.flags.can_double:
                return self.chosen
        return self.otherwise


@dataclass(frozen=True)
class TotalRule(StrategyRule):
    """
    A soft or hard total range.

    Branches are tried in order: Double (only if allowed), then Stand, then
    Hit, then ``otherwise``.
    """

    low: int
    high: int
    otherwise: Action
    double_vs: Upcards = NONE
    stand_vs: Upcards = NONE
    hit_vs: Upcards = NONE

    def covers(self, total: int) -> bool:
        return self.low <= total <= self.high

    def action(self, situation: Situation) -> Action:
        up = situation.dealer_up
        if situation.flags.can_double and up in self.double_vs:
            return Action.DOUBLE
        if up in self.stand_vs:
            return Action.STAND
        if up in self.hit_vs:
            return Action.HIT
        return self.otherwise


@dataclass(frozen=True)
class SoftRule(TotalRule):
    def applies(self, situation: Situation) -> bool:
        return situation.is_soft and self.covers(situation.total)


@dataclass(frozen=True)
class HardRule(TotalRule):
    def applies(self, situation: Situation) -> bool:
        return not situation.is_soft and self.covers(situation.total)


H = Action.HIT
S = Action.STAND
D = Action.DOUBLE
P = Action.SPLIT

# Any total a hand can reach; bounds for the open-ended rows
_LOWEST = 0
_HIGHEST = 99

# First matching rule wins: surrender, then pairs, then soft, then hard.
BASELINE_TABLE: tuple[StrategyRule, ...] = (
    # Late surrender
    SurrenderRule(16, upcards(9, 10, 11)),
    SurrenderRule(15, upcards(10)),
    # Pairs
    PairRule("A", P, ALL, P),
    PairRule("10", S, ALL, S),
    PairRule("9", P, upcards(2, 3, 4, 5, 6, 8, 9), S),
    PairRule("8", P, ALL, P),
    PairRule("7", P, upcard_range(2, 7), H),
    PairRule("6", P, upcard_range(2, 6), H),
    PairRule("5", D, upcard_range(2, 9), H),
    PairRule("4", P, upcards(5, 6), H),
    PairRule("3", P, upcard_range(2, 7), H),
    PairRule("2", P, upcard_range(2, 7), H),
    # Soft totals
    SoftRule(20, _HIGHEST, S),
    SoftRule(19, 19, S, double_vs=upcards(6)),
    SoftRule(18, 18, H, double_vs=upcard_range(3, 6), stand_vs=upcards(2, 7, 8)),
    SoftRule(17, 17, H, double_vs=upcard_range(3, 6)),
    SoftRule(15, 16, H, double_vs=upcard_range(4, 6)),
    SoftRule(13, 14, H, double_vs=upcards(5, 6)),
    SoftRule(_LOWEST, 12, H),
    # Hard totals
    HardRule(17, _HIGHEST, S),
    HardRule(_LOWEST, 8, H),
    HardRule(9, 9, H, double_vs=upcard_range(3, 6)),
    HardRule(10, 10, H, double_vs=upcard_range(2, 9)),
    # Without doubling, 11 still reads Double against everything but an Ace
    HardRule(11, 11, D, double_vs=upcard_range(2, 10), hit_vs=upcards(11)),
    HardRule(12, 12, H, stand_vs=upcard_range(4, 6)),
    HardRule(13, 16, H, stand_vs=upcard_range(2, 6)),
)


class BasicStrategy:
    """
    Basic strategy as a priority-ordered rule table.

    The table is fixed for the baseline rule set; the first rule that
    applies decides the action.
    """

    def __init__(
        self,
        table: Sequence[StrategyRule] = BASELINE_TABLE,
        rules: RuleSet = BASELINE_RULES,
    ) -> None:
        self.rules = rules
        self._table = tuple(table)

    def get_action(
        self,
        cards: Sequence[Rank | str],
        dealer_up: Rank | str,
        flags: Capabilities | None = None,
    ) -> Action:
        """
        Get the basic strategy action.

        Args:
            cards: The player's hand
            dealer_up: Dealer's upcard rank
            flags: Allowed actions (derived from the hand if None)

        Returns:
            The recommended action
        """
        situation = Situation.build(
            cards, dealer_up, flags or Capabilities.for_hand(cards)
        )
        rule = self.matching_rule(situation)
        if rule is None:
            return Action.HIT
        return rule.action(situation)

    def matching_rule(self, situation: Situation) -> StrategyRule | None:
        """Return the first rule that applies, or None."""
        for rule in self._table:
            if rule.applies(situation):
                return rule
        return None

    @property
    def table(self) -> tuple[StrategyRule, ...]:
        """Return the strategy rules in priority order."""
        return self._table


_BASIC_STRATEGY = BasicStrategy()


def resolve_baseline(
    cards: Sequence[Rank | str],
    dealer_up: Rank | str,
    flags: Capabilities | None = None,
) -> Action:
    """Resolve the baseline action for a hand against a dealer upcard."""
    return _BASIC_STRATEGY.get_action(cards, dealer_up, flags)
