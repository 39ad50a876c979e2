"""Card counting."""

from advisor.counting.base import CountingSystem
from advisor.counting.hilo import HiLoSystem
from advisor.counting.estimator import (
    CountState,
    ShoeConfig,
    compute_count,
    estimate_decks_remaining,
    true_count,
)

__all__ = [
    "CountingSystem",
    "HiLoSystem",
    "CountState",
    "ShoeConfig",
    "compute_count",
    "estimate_decks_remaining",
    "true_count",
]
