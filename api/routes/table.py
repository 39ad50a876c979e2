"""Session-backed table endpoints: one writer per session, state in the store."""

import logging
from typing import Annotated, Callable

from fastapi import APIRouter, Header, HTTPException

from advisor.table import TableSetup, TableState
from api.schemas import (
    CardRequest,
    NewTableResponse,
    TableSetupRequest,
    TableStateResponse,
)
from api.session import (
    create_table_session,
    extract_session_id,
    load_table,
    save_table,
    table_lock,
)
from config import config

logger = logging.getLogger(__name__)

router = APIRouter()

SessionHeader = Annotated[str, Header(alias="X-Session-ID")]


def _session_not_found(session_id: str) -> HTTPException:
    logger.info("No table for session %s", session_id[:8])
    return HTTPException(status_code=404, detail="Unknown or expired session")


async def _get_table(session_id: str) -> TableState:
    """Load the session's table or fail with 404."""
    table = await load_table(session_id)
    if table is None:
        raise _session_not_found(session_id)
    return table


async def _apply(
    session_id: str,
    change: Callable[[TableState], TableState],
) -> TableStateResponse:
    """Load, change and store the table under the session lock."""
    if extract_session_id(session_id) is None:
        raise _session_not_found(session_id)
    async with table_lock(session_id):
        table = change(await _get_table(session_id))
        await save_table(session_id, table)
    return TableStateResponse.from_table(table)


@router.post("/new")
async def new_table(request: TableSetupRequest | None = None) -> NewTableResponse:
    """Start a table session with the given (or default) setup."""
    request = request or TableSetupRequest()
    setup = TableSetup(
        decks=request.decks if request.decks is not None else config.table.decks,
        players=request.players if request.players is not None else config.table.players,
    )
    table = TableState(setup=setup)
    session_id = await create_table_session(table)
    return NewTableResponse(session_id=session_id, table=TableStateResponse.from_table(table))


@router.get("/state")
async def get_state(session_id: SessionHeader) -> TableStateResponse:
    """Get the current table view."""
    return TableStateResponse.from_table(await _get_table(session_id))


@router.post("/dealer")
async def set_dealer_up(request: CardRequest, session_id: SessionHeader) -> TableStateResponse:
    """Select the dealer's upcard."""
    return await _apply(session_id, lambda t: t.set_dealer_up(request.rank))


@router.post("/seen")
async def add_seen(request: CardRequest, session_id: SessionHeader) -> TableStateResponse:
    """Record a card visible at the table."""
    return await _apply(session_id, lambda t: t.add_observed_card(request.rank))


@router.post("/hand")
async def add_own(request: CardRequest, session_id: SessionHeader) -> TableStateResponse:
    """Add a card to your hand (also counted as seen)."""
    return await _apply(session_id, lambda t: t.add_own_card(request.rank))


@router.post("/seen/undo")
async def undo_seen(session_id: SessionHeader) -> TableStateResponse:
    return await _apply(session_id, TableState.undo_observed)


@router.post("/hand/undo")
async def undo_own(session_id: SessionHeader) -> TableStateResponse:
    return await _apply(session_id, TableState.undo_own)


@router.post("/seen/clear")
async def clear_seen(session_id: SessionHeader) -> TableStateResponse:
    return await _apply(session_id, TableState.clear_observed)


@router.post("/hand/clear")
async def clear_hand(session_id: SessionHeader) -> TableStateResponse:
    return await _apply(session_id, TableState.clear_hand)


@router.post("/reset")
async def reset_round(session_id: SessionHeader) -> TableStateResponse:
    """Clear seen cards and hand for a new shoe, keeping the setup."""
    return await _apply(session_id, TableState.reset_round)
