"""
API-Sports Client - American Football games + rosters
=====================================================
v1.0

Thin pass-through over https://v1.american-football.api-sports.io:
- GET /games?league=&season=&date=     one calendar day
- GET /players?team=&season=           team roster for a season

Upstream JSON ({"results": int, "response": [...]}) is returned unchanged.
The from/to variant fans out one /games call per day and merges the days.

No retries: a transport failure or a non-JSON body raises ApiSportsError and
the router turns it into a 500.
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

import httpx

from core.log_sanitizer import safe_log_request, safe_log_response
from core.structured_logging import log_info
from env_config import Config

logger = logging.getLogger(__name__)

# Header API-Sports reads the credential from
API_KEY_HEADER = "x-apisports-key"


class ApiSportsError(Exception):
    """Upstream call failed (network error or unreadable body)."""


# =============================================================================
# HTTP HELPERS
# =============================================================================

def _headers(api_key: Optional[str]) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    return headers


async def _fetch_api_sports(
    path: str,
    params: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None,
    api_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    GET an API-Sports endpoint and return its JSON body.

    Raises:
        ApiSportsError: transport failure or non-JSON body
    """
    url = f"{Config.API_SPORTS_BASE_URL}{path}"
    headers = _headers(api_key if api_key is not None else Config.API_SPORTS_KEY)

    logger.debug(safe_log_request("GET", url, params=params, headers=headers))

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=Config.API_SPORTS_TIMEOUT) as local_client:
                resp = await local_client.get(url, params=params, headers=headers)
        else:
            resp = await client.get(url, params=params, headers=headers)
        data = resp.json()
    except httpx.HTTPError as e:
        raise ApiSportsError(f"{type(e).__name__}: {e}") from e
    except ValueError as e:
        raise ApiSportsError(f"Invalid JSON from API-Sports: {e}") from e

    if not isinstance(data, dict):
        raise ApiSportsError(f"Unexpected API-Sports payload type: {type(data).__name__}")

    if resp.status_code != 200:
        logger.warning(safe_log_response(resp.status_code, url, resp.text))

    return data


# =============================================================================
# DATE RANGES
# =============================================================================

def iter_dates(from_date: str, to_date: str, max_days: int = None) -> List[str]:
    """
    Expand an inclusive YYYY-MM-DD range into day strings.

    Raises:
        ValueError: unparseable bound, reversed range, or range over max_days
    """
    max_days = max_days or Config.MAX_GAME_RANGE_DAYS

    start = date.fromisoformat(from_date)
    end = date.fromisoformat(to_date)

    if end < start:
        raise ValueError(f"'to' ({to_date}) is before 'from' ({from_date})")

    span = (end - start).days + 1
    if span > max_days:
        raise ValueError(f"Date range of {span} days exceeds {max_days}")

    return [(start + timedelta(days=i)).isoformat() for i in range(span)]


# =============================================================================
# PUBLIC API
# =============================================================================

async def fetch_games(
    league: str,
    season: str,
    game_date: str,
    client: Optional[httpx.AsyncClient] = None,
    api_key: Optional[str] = None,
) -> Dict[str, Any]:
    """Games for one calendar day, upstream payload unchanged."""
    data = await _fetch_api_sports(
        "/games",
        {"league": league, "season": season, "date": game_date},
        client=client,
        api_key=api_key,
    )
    log_info(logger, f"NFL games for {game_date}: {data.get('results')}",
             league=league, season=season, results=data.get("results"))
    return data


async def fetch_games_range(
    league: str,
    season: str,
    from_date: str,
    to_date: str,
    client: Optional[httpx.AsyncClient] = None,
    api_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Games across an inclusive date range, merged into one payload.

    response is the days' games concatenated in date order; results is
    recomputed from the merged list.
    """
    days = iter_dates(from_date, to_date)

    merged: List[Any] = []
    errors: List[Any] = []
    for day in days:
        data = await fetch_games(league, season, day, client=client, api_key=api_key)
        merged.extend(data.get("response") or [])
        if data.get("errors"):
            errors.append(data["errors"])

    return {
        "get": "games",
        "parameters": {"league": league, "season": season, "from": from_date, "to": to_date},
        "errors": errors,
        "results": len(merged),
        "response": merged,
    }


async def fetch_roster(
    team: str,
    season: str,
    client: Optional[httpx.AsyncClient] = None,
    api_key: Optional[str] = None,
) -> Dict[str, Any]:
    """All players on a team for the season, upstream payload unchanged."""
    data = await _fetch_api_sports(
        "/players",
        {"team": team, "season": season},
        client=client,
        api_key=api_key,
    )
    log_info(logger, f"Roster request for team {team}, season {season}: {data.get('results')}",
             team=team, season=season, results=data.get("results"))
    return data
