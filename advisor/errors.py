"""Exceptions raised by the advisor engine."""


class AdvisorError(Exception):
    """Base class for advisor errors."""


class InvalidRankError(AdvisorError, ValueError):
    """A rank outside the 13-symbol alphabet."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid rank: {value!r}")


class ShoeExhaustedError(AdvisorError):
    """More cards were observed than the shoe holds."""

    def __init__(self, total_cards: int) -> None:
        self.total_cards = total_cards
        super().__init__(f"All {total_cards} cards in the shoe have already been seen")
