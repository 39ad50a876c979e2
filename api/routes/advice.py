"""Stateless advice endpoints: the caller sends the full sequences each time."""

from fastapi import APIRouter

from advisor.advice import recommend
from advisor.cards import to_ranks
from advisor.counting import ShoeConfig, compute_count
from advisor.hand import evaluate, is_pair
from advisor.strategy.rules import Capabilities
from api.schemas import (
    CountRequest,
    CountResponse,
    HandRequest,
    HandResponse,
    RecommendationResponse,
    RecommendRequest,
)

router = APIRouter()


@router.post("/count")
async def count(request: CountRequest) -> CountResponse:
    """Compute running count, decks remaining and true count."""
    seen = to_ranks(request.seen)
    return CountResponse.from_state(compute_count(seen, ShoeConfig(decks=request.decks)))


@router.post("/hand")
async def hand(request: HandRequest) -> HandResponse:
    """Evaluate a hand's total, softness and pair status."""
    cards = to_ranks(request.hand)
    return HandResponse.from_cards(
        [str(r) for r in cards], evaluate(cards), is_pair(cards)
    )


@router.post("/recommend")
async def recommend_action(request: RecommendRequest) -> RecommendationResponse:
    """Recommend an action; unset flags are derived from the hand."""
    cards = to_ranks(request.hand)
    defaults = Capabilities.for_hand(cards)
    flags = Capabilities(
        can_split=defaults.can_split if request.can_split is None else request.can_split,
        can_double=defaults.can_double if request.can_double is None else request.can_double,
        can_surrender=(
            defaults.can_surrender if request.can_surrender is None else request.can_surrender
        ),
    )
    advice = recommend(cards, request.dealer_up, request.true_count, flags)
    return RecommendationResponse.from_recommendation(advice)
