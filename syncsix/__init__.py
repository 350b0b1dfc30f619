"""
Sync Six Engine v1.2
====================
Unified Gematria + Numerology + Scoring core.

Modules:
- numerology.py: Pythagorean gematria, SYNC SIX date fingerprint, prime check
- enrichment.py: attach sync_six + gematria to raw roster records
- scoring.py: weighted rule table, multiplier tiers, labels
- ranking.py: difficulty gate + score ordering
- engine.py: run_sync_six_engine() wrapper

Usage:
    from syncsix import run_sync_six_engine

    ranked = run_sync_six_engine(
        players=[{"name": "Mike Evans", "jersey": 13, "team": "Buccaneers"}],
        game_data={"date": {"start": "2025-10-26T17:00:00Z"}},
    )
"""

from .numerology import (
    PYTHAGOREAN_GEMATRIA,
    as_jersey_number,
    get_gematria_value,
    get_sync_six,
    get_sync_six_components,
    is_prime,
)

from .enrichment import normalize_player_game_data

from .scoring import (
    DEFAULT_MULTIPLIERS,
    DEFAULT_SCORING_CONFIG,
    DEFAULT_WEIGHTS,
    ScoringConfig,
    check_dob_match,
    classify,
    evaluate_rules,
    round_score,
    score_player,
    score_players,
)

from .ranking import filter_and_rank

from .engine import resolve_event_date, run_sync_six_engine

__version__ = "1.2.0"

__all__ = [
    # Numerology
    "PYTHAGOREAN_GEMATRIA",
    "as_jersey_number",
    "get_gematria_value",
    "get_sync_six",
    "get_sync_six_components",
    "is_prime",
    # Enrichment
    "normalize_player_game_data",
    # Scoring
    "DEFAULT_MULTIPLIERS",
    "DEFAULT_SCORING_CONFIG",
    "DEFAULT_WEIGHTS",
    "ScoringConfig",
    "check_dob_match",
    "classify",
    "evaluate_rules",
    "round_score",
    "score_player",
    "score_players",
    # Ranking
    "filter_and_rank",
    # Engine
    "resolve_event_date",
    "run_sync_six_engine",
]
