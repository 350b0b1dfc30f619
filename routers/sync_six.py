"""
SYNC_SIX.PY - Sync Six Router

Game/roster pass-through to API-Sports plus the scoring endpoint.

Endpoints:
    GET  /sync-six/games    - Games for a date, or a from/to range merged
    GET  /sync-six/roster   - Team roster for a season
    POST /sync-six/score    - Run the Sync Six engine over a roster
"""

import logging
from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from core.error_responses import ErrorCode, error_json
from core.structured_logging import log_error
from env_config import Config
from models.api_models import ScoreRequest
from services.api_sports import ApiSportsError, fetch_games, fetch_games_range, fetch_roster
from syncsix import run_sync_six_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync-six", tags=["sync-six"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
}


async def get_api_sports_client() -> AsyncIterator[httpx.AsyncClient]:
    """Per-request upstream client (overridden in tests)."""
    async with httpx.AsyncClient(timeout=Config.API_SPORTS_TIMEOUT) as client:
        yield client


def _bad_request(message: str, code: str = ErrorCode.MISSING_PARAMETER, field: str = None) -> JSONResponse:
    return error_json(400, code, message, field=field)


def _server_error(handler: str, exc: Exception) -> JSONResponse:
    log_error(logger, f"{handler} error: {exc}", handler=handler)
    return error_json(500, ErrorCode.API_ERROR, "Server error", details=str(exc))


@router.get("/games")
async def get_games(
    league: Optional[str] = None,
    season: Optional[str] = None,
    date: Optional[str] = None,
    from_date: Optional[str] = Query(None, alias="from"),
    to_date: Optional[str] = Query(None, alias="to"),
    client: httpx.AsyncClient = Depends(get_api_sports_client),
):
    """
    Games for one date, or for every day from..to (inclusive) merged.

    Returns the upstream {"results", "response"} payload.
    """
    has_range = bool(from_date and to_date)
    if not league or not season or not (date or has_range):
        return _bad_request("Missing parameters (league, season, or date)")

    try:
        if date:
            data = await fetch_games(league, season, date, client=client)
        else:
            data = await fetch_games_range(league, season, from_date, to_date, client=client)
    except ValueError as e:
        return _bad_request(str(e), code=ErrorCode.INVALID_DATE, field="from")
    except ApiSportsError as e:
        return _server_error("fetchGames", e)

    return JSONResponse(content=data, headers=CORS_HEADERS)


@router.get("/roster")
async def get_roster(
    team: Optional[str] = None,
    season: Optional[str] = None,
    client: httpx.AsyncClient = Depends(get_api_sports_client),
):
    """All players on a team for the season (upstream payload unchanged)."""
    if not team or not season:
        return _bad_request("Missing parameters (team or season)")

    try:
        data = await fetch_roster(team, season, client=client)
    except ApiSportsError as e:
        return _server_error("fetchRoster", e)

    return JSONResponse(content=data, headers=CORS_HEADERS)


@router.post("/score")
def score_roster(request: ScoreRequest):
    """
    Run the Sync Six engine for one game.

    Pass an explicit event.date.start for reproducible output; without it
    the current UTC date is used.
    """
    ranked = run_sync_six_engine(request.players, request.event)
    return JSONResponse(
        content={"count": len(ranked), "players": ranked},
        headers=CORS_HEADERS,
    )
