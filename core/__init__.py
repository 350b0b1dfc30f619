"""
Core module - System invariants and single source of truth
"""

from .invariants import (
    # Date fingerprint
    SYNC_SIX_LENGTH,
    SYNC_SIX_COMPONENTS,
    RAW_DAY_INDEX,

    # Score bounds
    MAX_SYNC,
    MIN_SCORE,
    MIN_HITS,

    # Output contract
    SCORED_PLAYER_REQUIRED_FIELDS,

    # Validation functions
    validate_sync_six,
    validate_scored_player,
    passes_ranking_gate,
)

# Import dates (SINGLE SOURCE OF TRUTH for calendar parsing + clock)
from .dates import (
    utc_now,
    parse_calendar_date,
    format_as_of,
)

__all__ = [
    # Invariants
    'SYNC_SIX_LENGTH',
    'SYNC_SIX_COMPONENTS',
    'RAW_DAY_INDEX',
    'MAX_SYNC',
    'MIN_SCORE',
    'MIN_HITS',
    'SCORED_PLAYER_REQUIRED_FIELDS',
    'validate_sync_six',
    'validate_scored_player',
    'passes_ranking_gate',

    # Calendar handling (SINGLE SOURCE OF TRUTH)
    'utc_now',
    'parse_calendar_date',
    'format_as_of',
]
