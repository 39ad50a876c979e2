"""Hi-Lo card counting system."""

from typing import Mapping

from advisor.cards import Rank, counting_weight
from advisor.counting.base import CountingSystem


class HiLoSystem(CountingSystem):
    """
    Hi-Lo counting system.

    Tag values:
        2-6: +1 (low cards)
        7-9: 0  (neutral)
        10-A: -1 (high cards)

    Full deck sum: 0 (balanced)
    """

    _TAG_VALUES: Mapping[Rank, int] = {rank: counting_weight(rank) for rank in Rank}

    @property
    def name(self) -> str:
        return "Hi-Lo"

    @property
    def tag_values(self) -> Mapping[Rank, int]:
        return self._TAG_VALUES

    @property
    def is_balanced(self) -> bool:
        return True
