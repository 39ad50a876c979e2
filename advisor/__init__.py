"""Blackjack decision engine - pure, UI-agnostic."""

from advisor.advice import Recommendation, recommend
from advisor.cards import Rank, counting_weight, dealer_upcard_value, is_ten_valued
from advisor.counting import CountState, ShoeConfig, compute_count
from advisor.errors import AdvisorError, InvalidRankError, ShoeExhaustedError
from advisor.hand import Hand, HandValue, evaluate, is_pair, pair_rank_key
from advisor.strategy import Action, Capabilities, resolve_baseline, resolve_deviation
from advisor.table import TableSetup, TableState

__all__ = [
    "Recommendation",
    "recommend",
    "Rank",
    "counting_weight",
    "dealer_upcard_value",
    "is_ten_valued",
    "CountState",
    "ShoeConfig",
    "compute_count",
    "AdvisorError",
    "InvalidRankError",
    "ShoeExhaustedError",
    "Hand",
    "HandValue",
    "evaluate",
    "is_pair",
    "pair_rank_key",
    "Action",
    "Capabilities",
    "resolve_baseline",
    "resolve_deviation",
    "TableSetup",
    "TableState",
]
