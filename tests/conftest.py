"""Pytest fixtures for advisor tests."""

import pytest

from advisor.cards import Rank
from advisor.counting import HiLoSystem, ShoeConfig
from advisor.hand import Hand
from advisor.strategy import BasicStrategy, Capabilities
from advisor.table import TableSetup, TableState


@pytest.fixture
def full_deck() -> list[Rank]:
    """One 52-card deck, every rank four times, in suit order."""
    return [rank for _ in range(4) for rank in Rank]


@pytest.fixture
def two_deck_shoe():
    """A 2-deck shoe configuration."""
    return ShoeConfig(decks=2)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand.of("A", "6")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand.of("10", "6")


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return Hand.of("8", "8")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand.of("10", "6", "K")


@pytest.fixture
def hilo():
    """Hi-Lo counting system."""
    return HiLoSystem()


@pytest.fixture
def basic_strategy():
    """Basic strategy for the baseline rules."""
    return BasicStrategy()


@pytest.fixture
def all_allowed():
    """Every action allowed."""
    return Capabilities(can_split=True, can_double=True, can_surrender=True)


@pytest.fixture
def no_double():
    """Split allowed, double and surrender not (three or more cards)."""
    return Capabilities(can_split=True, can_double=False, can_surrender=False)


@pytest.fixture
def table():
    """A fresh 2-deck, 4-player table."""
    return TableState(setup=TableSetup(decks=2, players=4))

