"""Abstract base class for card counting systems."""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

from advisor.cards import Rank, to_rank


class CountingSystem(ABC):
    """
    Abstract base class for card counting systems.

    Systems are stateless: the running count is always folded from the full
    sequence of cards seen so far, so callers own the accumulation.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the counting system."""
        ...

    @property
    @abstractmethod
    def tag_values(self) -> Mapping[Rank, int]:
        """
        Return the tag value mapping for this system.

        Maps each Rank to its count value.
        """
        ...

    @property
    @abstractmethod
    def is_balanced(self) -> bool:
        """
        Return whether this is a balanced counting system.

        A balanced system sums to 0 over a complete deck.
        """
        ...

    @property
    def full_deck_sum(self) -> int:
        """Calculate the sum of tag values for a full 52-card deck."""
        # Each rank appears 4 times in a deck (once per suit)
        return sum(self.tag_values[rank] * 4 for rank in Rank)

    def tag_value(self, card: Rank | str) -> int:
        """Return the tag value of a single card."""
        return self.tag_values[to_rank(card)]

    def running_count(self, cards: Iterable[Rank | str]) -> int:
        """
        Fold a sequence of cards into a running count.

        Args:
            cards: Every card seen so far, in any order

        Returns:
            The sum of the tag values
        """
        return sum(self.tag_value(card) for card in cards)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
