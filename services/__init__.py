# services/__init__.py
# Upstream data services for the Sync Six backend

from .api_sports import (
    ApiSportsError,
    fetch_games,
    fetch_games_range,
    fetch_roster,
    iter_dates,
)

__all__ = [
    "ApiSportsError",
    "fetch_games",
    "fetch_games_range",
    "fetch_roster",
    "iter_dates",
]
