"""Player API endpoints."""

from typing import Dict, NoReturn, Type

import structlog
from fastapi import APIRouter, HTTPException, Query, status

from tarkov_stats.core.tarkov_api.constants import StatsSide
from tarkov_stats.core.tarkov_api.errors import (
    DecodingError,
    InvalidRequestError,
    NetworkError,
    PlayerNotFoundError,
    TarkovAPIError,
)
from .dependencies import PlayerServiceDep
from .schemas import PlayerProfileResponse, PlayerStatsResponse, SearchIndexEntry

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/players", tags=["players"])

ERROR_STATUS: Dict[Type[TarkovAPIError], int] = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    PlayerNotFoundError: status.HTTP_404_NOT_FOUND,
    DecodingError: status.HTTP_502_BAD_GATEWAY,
    NetworkError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_http_error(error: TarkovAPIError) -> NoReturn:
    """Re-raise a player API error as an HTTPException carrying its message."""
    status_code = ERROR_STATUS.get(type(error), status.HTTP_502_BAD_GATEWAY)
    raise HTTPException(status_code=status_code, detail=str(error)) from error


@router.get("/search", response_model=list[SearchIndexEntry])
async def search_players(
    service: PlayerServiceDep,
    q: str = Query(..., max_length=64, description="Nickname fragment"),
) -> list[SearchIndexEntry]:
    """Search players by nickname (case-insensitive substring)."""
    try:
        return await service.search_players(q)
    except TarkovAPIError as e:
        raise_http_error(e)


@router.get("/{account_id}", response_model=PlayerProfileResponse)
async def get_player_profile(
    account_id: str, service: PlayerServiceDep
) -> PlayerProfileResponse:
    """Get a player's profile with derived statistics, level and loadout."""
    try:
        return await service.get_profile_view(account_id)
    except TarkovAPIError as e:
        raise_http_error(e)


@router.get("/{account_id}/stats", response_model=PlayerStatsResponse)
async def get_player_stats(
    account_id: str,
    service: PlayerServiceDep,
    side: StatsSide = Query(StatsSide.PMC, description="pmc or scav"),
) -> PlayerStatsResponse:
    """Get aggregated PMC or Scav statistics for a player."""
    try:
        return await service.get_player_stats(account_id, side)
    except TarkovAPIError as e:
        raise_http_error(e)
