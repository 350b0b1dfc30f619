"""
Sync Six Engine wrapper: hand it players + game data and get the ranked
output directly.
"""

from typing import Any, Dict, List, Optional, Sequence
import logging

from core.dates import Clock, parse_calendar_date, utc_now

from .enrichment import normalize_player_game_data
from .numerology import get_sync_six
from .ranking import filter_and_rank
from .scoring import DEFAULT_SCORING_CONFIG, ScoringConfig, score_players

logger = logging.getLogger(__name__)

# Known nestings for the game start time, checked in order
START_TIME_PATHS = (
    ("date", "start"),
    ("game", "date", "start"),
)


def _dig(data: Any, path: Sequence[str]) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def resolve_event_date(game_data: Optional[Dict[str, Any]], clock: Clock = utc_now) -> str:
    """
    Pick the game start timestamp, e.g. "2025-10-26T10:00:00Z".

    Falls back to the clock when no start time is present or it cannot be
    parsed.
    """
    for path in START_TIME_PATHS:
        start = _dig(game_data, path)
        if not start:
            continue
        if parse_calendar_date(start) is not None:
            return start if isinstance(start, str) else start.isoformat()
        logger.warning("Unparseable game start %r at %s, using clock", start, ".".join(path))
        break

    return clock().isoformat()


def run_sync_six_engine(
    players: Sequence[Dict[str, Any]],
    game_data: Optional[Dict[str, Any]],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    clock: Clock = utc_now,
) -> List[Dict[str, Any]]:
    """
    Enrich, score, filter and sort players for one game.

    Args:
        players: Raw roster records
        game_data: Game record; only its start time is read
        config: Weights / multipliers / thresholds
        clock: Time source used when the game has no start time

    Returns:
        Ranked list of scored players (possibly empty)
    """
    game_date = resolve_event_date(game_data, clock)

    # Computed once from the date, so an empty roster is safe
    date_nums = get_sync_six(game_date)

    normalized = [normalize_player_game_data(p, game_data, game_date) for p in players]
    scored = score_players(normalized, date_nums, config)
    ranked = filter_and_rank(scored, config.min_score)

    logger.info(
        "SYNC SIX run: date=%s sync_six=%s players=%d ranked=%d",
        game_date, list(date_nums), len(players), len(ranked),
    )
    return ranked
