"""
SYSTEM INVARIANTS - Single Source of Truth

This module defines all core system invariants that MUST hold true.
Any violation of these invariants should cause tests to fail.

These constants are used by:
1. Runtime code (scoring, ranking)
2. Tests (invariant validation)
"""

from typing import Dict, Any, List, Tuple
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATE FINGERPRINT (SYNC SIX)
# =============================================================================

# Exactly 6 numbers per date
SYNC_SIX_LENGTH = 6

# Stable names for indices 0-4; index 5 is the raw day-of-month
SYNC_SIX_COMPONENTS = [
    "full_component",      # M + D + Y
    "partial_reduction",   # M + D + (Y % 100)
    "life_path",           # M + D
    "simplified_comp",     # M + Y
    "simplified_root",     # D + Y
]
RAW_DAY_INDEX = 5


# =============================================================================
# SCORE BOUNDS
# =============================================================================

# Hard cap so we never claim "100% destiny"
MAX_SYNC = 98

# Ranking gate: keep score >= MIN_SCORE OR at least MIN_HITS hits
MIN_SCORE = 20
MIN_HITS = 2


# =============================================================================
# OUTPUT CONTRACT
# =============================================================================

# Every scored player carries these fields
SCORED_PLAYER_REQUIRED_FIELDS = [
    "sync_six",
    "player_gematria",
    "team_gematria",
    "opp_gematria",
    "score",
    "hits",
    "method_type",
    "category_hit",
    "jersey_match",
    "dob_match",
    "prime_match",
    "energy_phase",
]


# =============================================================================
# VALIDATION FUNCTIONS
# =============================================================================

def validate_sync_six(date_nums: List[int]) -> Tuple[bool, str]:
    """
    Validate a date fingerprint.

    Returns:
        (is_valid, error_message)
    """
    if len(date_nums) != SYNC_SIX_LENGTH:
        return False, f"SYNC SIX must have {SYNC_SIX_LENGTH} numbers, got {len(date_nums)}"

    day = date_nums[RAW_DAY_INDEX]
    if not 1 <= day <= 31:
        return False, f"raw day out of range: {day}"

    return True, ""


def validate_scored_player(player: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Validate a scored player against the output contract.

    Returns:
        (is_valid, list_of_errors)
    """
    errors = []

    for field in SCORED_PLAYER_REQUIRED_FIELDS:
        if field not in player:
            errors.append(f"missing field: {field}")

    score = player.get("score")
    if isinstance(score, (int, float)):
        if not 0 <= score <= MAX_SYNC:
            errors.append(f"score {score} outside [0, {MAX_SYNC}]")
        if round(score, 1) != score:
            errors.append(f"score {score} has more than one decimal")

    return len(errors) == 0, errors


def passes_ranking_gate(score: float, hits: List[str], min_score: float = MIN_SCORE) -> bool:
    """True if a scored player survives the ranking filter."""
    return score >= min_score or len(hits) >= MIN_HITS
