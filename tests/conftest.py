"""
tests/conftest.py - Pytest configuration and fixtures

Every engine test pins the game date (or the clock) so output is
deterministic. Reference date 2025-10-26 gives SYNC SIX
[2061, 61, 36, 2035, 2051, 26]; 61 is the only prime in it.
"""

from datetime import datetime, timezone

import pytest


GAME_START = "2025-10-26T17:00:00Z"
GAME_SYNC_SIX = [2061, 61, 36, 2035, 2051, 26]


@pytest.fixture
def game_data():
    """API-Sports style game with the start time under date.start."""
    return {"id": 1001, "date": {"start": GAME_START}}


@pytest.fixture
def date_nums():
    return tuple(GAME_SYNC_SIX)


@pytest.fixture
def fixed_clock():
    """Clock pinned to the reference game day."""
    return lambda: datetime(2025, 10, 26, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def roster():
    """
    One player per scoring path on 2025-10-26.

    Gematria: Tom Brady 35, Mike Evans 36, Al Stone 23, Cooper 36,
    Joe Burrow 46, Josh Allen 33, Buccaneers 37, Cardinals 36, Bills 18.
    """
    return [
        {"name": "Tom Brady", "jersey": 12, "dob": "1977-08-03",
         "team": "Buccaneers", "opponent": "Bills"},                     # nothing -> 0
        {"name": "Mike Evans", "jersey": 13, "dob": "1993-08-21",
         "team": "Buccaneers", "opponent": "Cardinals"},                 # prime + player + opp -> 23
        {"name": "Al Stone", "jersey": 26, "team": "Bills"},             # jersey/date -> 25
        {"name": "Cooper", "jersey": 36, "position": "WR"},              # jersey + player -> 35
        {"name": "Joe Burrow", "jersey": 17},                            # prime only -> 5
        {"name": "Josh Allen", "jersey": 12, "dob": "1990-01-26"},       # life path, 0
    ]
