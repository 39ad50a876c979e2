"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field

from advisor.advice import Recommendation
from advisor.counting import CountState
from advisor.hand import HandValue
from advisor.table import TableState


# Requests
class TableSetupRequest(BaseModel):
    """Request to start a table session."""

    decks: int | None = Field(default=None, ge=1, le=8, description="Decks in the shoe")
    players: int | None = Field(default=None, ge=1, le=7, description="Players incl. you")


class CardRequest(BaseModel):
    """A single card by rank symbol (A, 2-10, J, Q, K)."""

    rank: str = Field(..., min_length=1, max_length=3)


class CountRequest(BaseModel):
    """Stateless count request."""

    seen: list[str] = Field(default_factory=list)
    decks: int = Field(default=2, ge=1, le=8)


class HandRequest(BaseModel):
    """Stateless hand evaluation request."""

    hand: list[str]


class RecommendRequest(BaseModel):
    """Stateless recommendation request."""

    hand: list[str] = Field(..., min_length=1)
    dealer_up: str
    true_count: int = 0
    can_split: bool | None = None
    can_double: bool | None = None
    can_surrender: bool | None = None


# Responses
class CountResponse(BaseModel):
    """Running count, decks remaining and true count."""

    running_count: int
    decks_remaining: float
    true_count: int
    cards_seen: int
    total_cards: int

    @classmethod
    def from_state(cls, count: CountState) -> "CountResponse":
        return cls(
            running_count=count.running_count,
            decks_remaining=count.decks_remaining,
            true_count=count.true_count,
            cards_seen=count.cards_seen,
            total_cards=count.total_cards,
        )


class HandResponse(BaseModel):
    """Hand facts."""

    cards: list[str]
    total: int
    is_soft: bool
    is_pair: bool
    is_busted: bool

    @classmethod
    def from_cards(cls, cards: list[str], value: HandValue, pair: bool) -> "HandResponse":
        return cls(
            cards=cards,
            total=value.total,
            is_soft=value.is_soft,
            is_pair=pair,
            is_busted=value.total > 21,
        )


class RecommendationResponse(BaseModel):
    """Recommended action for the hand."""

    baseline_action: str
    final_action: str
    deviation_notes: list[str]
    insurance: str

    @classmethod
    def from_recommendation(cls, advice: Recommendation) -> "RecommendationResponse":
        return cls(
            baseline_action=str(advice.baseline_action),
            final_action=str(advice.final_action),
            deviation_notes=list(advice.deviation_notes),
            insurance=str(advice.insurance_advice),
        )


class TableStateResponse(BaseModel):
    """Full view of a table session."""

    decks: int
    players: int
    dealer_up: str
    seen: list[str]
    count: CountResponse
    hand: HandResponse
    recommendation: RecommendationResponse | None

    @classmethod
    def from_table(cls, table: TableState) -> "TableStateResponse":
        snapshot = table.snapshot()
        hand_cards = [str(r) for r in table.hand]
        return cls(
            decks=table.setup.decks,
            players=table.setup.players,
            dealer_up=str(table.dealer_up),
            seen=[str(r) for r in table.seen],
            count=CountResponse.from_state(snapshot.count),
            hand=HandResponse.from_cards(hand_cards, snapshot.hand_value, snapshot.is_pair),
            recommendation=(
                RecommendationResponse.from_recommendation(snapshot.recommendation)
                if snapshot.recommendation is not None
                else None
            ),
        )


class NewTableResponse(BaseModel):
    """Session token and the fresh table."""

    session_id: str
    table: TableStateResponse
