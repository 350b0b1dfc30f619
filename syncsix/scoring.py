"""
Sync Six: Scoring Module v1.2
=============================
Weighted rule checks for one enriched player against the game's date
fingerprint.

Rules (evaluated in this order, tag appended on hit):
- JERSEY_DATE_MATCH       jersey == raw day, or jersey in SYNC SIX   (counts toward multiplier)
- PRIME_RELATION          jersey prime AND some SYNC SIX number prime
- PLAYER_GEMATRIA_SYNC    player name gematria in SYNC SIX
- TEAM_GEMATRIA_SYNC      team name gematria in SYNC SIX
- OPPONENT_GEMATRIA_SYNC  opponent name gematria in SYNC SIX (team weight)

Only the jersey rule feeds the multiplier count, so with today's rules the
tier index is always 0. Tiers 1-4 stay in the table for future count rules.

Usage:
    from syncsix.scoring import score_players, DEFAULT_SCORING_CONFIG

    scored = score_players(enriched, date_nums)
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple
import logging

from core.dates import parse_calendar_date
from core.invariants import MAX_SYNC, MIN_SCORE

from .numerology import as_jersey_number, get_raw_day, get_sync_six_components, is_prime

logger = logging.getLogger(__name__)

# =============================================================================
# WEIGHTS / MULTIPLIERS CONFIG
# =============================================================================

DEFAULT_WEIGHTS = MappingProxyType({
    "JERSEY_DATE_MATCH": 25,
    "PRIME_RELATION": 5,
    "GEMATRIA_SYNC": 10,
    "TEAM_GEMATRIA_SYNC": 8,    # shared by team + opponent checks
})

# Multiplier tiers based on number of strong hits
DEFAULT_MULTIPLIERS = (1, 1.25, 1.5, 1.75, 2)

# Display placeholders so the frontend never sees a missing value
DASH = "—"
TBD = "TBD"
DISPLAY_DEFAULTS = (
    ("date", TBD),
    ("time", TBD),
    ("venue", DASH),
    ("position", DASH),
    ("dob", DASH),
    ("result", TBD),
)

# Category / method labels
CATEGORY_JERSEY_DATE = "Jersey-Date"
CATEGORY_LIFE_PATH = "Life Path"
CATEGORY_PRIME = "Prime Relation"
CATEGORY_GEMATRIA = "Gematria"

METHOD_HYBRID = "Hybrid Sync"
METHOD_JERSEY = "Jersey Alignment"
METHOD_LIFE_PATH = "Life Path Resonance"
METHOD_GEMATRIA_SYNC = "Gematria Sync"
METHOD_GEMATRIA = "Gematria"


@dataclass(frozen=True)
class ScoringConfig:
    """
    Immutable scoring configuration.

    Pass a custom instance to score with alternate weights; the default
    matches production.
    """
    weights: Mapping[str, float] = field(default_factory=lambda: DEFAULT_WEIGHTS)
    multipliers: Tuple[float, ...] = DEFAULT_MULTIPLIERS
    max_sync: float = MAX_SYNC
    min_score: float = MIN_SCORE

    def __post_init__(self):
        if not self.multipliers:
            raise ValueError("ScoringConfig needs at least one multiplier tier")
        # Freeze caller-supplied dicts / lists
        if not isinstance(self.weights, MappingProxyType):
            object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))
        object.__setattr__(self, "multipliers", tuple(self.multipliers))

    def weight(self, rule: str) -> float:
        return self.weights.get(rule, 0)

    def multiplier_for(self, count: int) -> float:
        """Tier lookup: index clamp(count - 1, 0, last)."""
        index = min(max(count - 1, 0), len(self.multipliers) - 1)
        return self.multipliers[index]


DEFAULT_SCORING_CONFIG = ScoringConfig()


# =============================================================================
# HELPERS
# =============================================================================

def round_score(value: float) -> float:
    """One decimal, half-up on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _gematria_in(value: Any, date_nums: Sequence[int]) -> bool:
    return bool(value) and value in date_nums


def check_dob_match(dob: Any, date_nums: Sequence[int]) -> bool:
    """True if the birth day-of-month appears in the fingerprint."""
    if not dob or dob == DASH:
        return False
    parsed = parse_calendar_date(dob)
    if parsed is None:
        return False
    return parsed.day in date_nums


def _display_fields(player: Dict[str, Any]) -> Dict[str, Any]:
    fields = {
        "team_name": player.get("team_name") or player.get("team") or DASH,
        "opponent_name": player.get("opponent_name") or player.get("opponent") or DASH,
    }
    for key, placeholder in DISPLAY_DEFAULTS:
        fields[key] = player.get(key) or placeholder
    return fields


# =============================================================================
# CORE SCORING
# =============================================================================

def evaluate_rules(
    player: Dict[str, Any],
    date_nums: Sequence[int],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> Tuple[float, int, List[str]]:
    """
    Run the rule table.

    Returns:
        (base, count, hits)
    """
    base = 0
    count = 0
    hits = []

    jersey = as_jersey_number(player.get("jersey"))

    if jersey is not None and (jersey == get_raw_day(date_nums) or jersey in date_nums):
        base += config.weight("JERSEY_DATE_MATCH")
        count += 1
        hits.append("JERSEY_DATE_MATCH")

    if is_prime(jersey) and any(is_prime(n) for n in date_nums):
        base += config.weight("PRIME_RELATION")
        hits.append("PRIME_RELATION")

    if _gematria_in(player.get("player_gematria"), date_nums):
        base += config.weight("GEMATRIA_SYNC")
        hits.append("PLAYER_GEMATRIA_SYNC")

    if _gematria_in(player.get("team_gematria"), date_nums):
        base += config.weight("TEAM_GEMATRIA_SYNC")
        hits.append("TEAM_GEMATRIA_SYNC")

    if _gematria_in(player.get("opp_gematria"), date_nums):
        base += config.weight("TEAM_GEMATRIA_SYNC")
        hits.append("OPPONENT_GEMATRIA_SYNC")

    return base, count, hits


def classify(
    player: Dict[str, Any],
    date_nums: Sequence[int],
) -> Dict[str, Any]:
    """Auto-match labels: jersey/dob flags, category_hit and method_type."""
    jersey = as_jersey_number(player.get("jersey"))
    jersey_match = jersey is not None and jersey in date_nums
    dob_match = check_dob_match(player.get("dob"), date_nums)
    gematria_sync = _gematria_in(player.get("player_gematria"), date_nums)

    if jersey_match:
        category_hit = CATEGORY_JERSEY_DATE
    elif dob_match:
        category_hit = CATEGORY_LIFE_PATH
    elif is_prime(jersey):
        category_hit = CATEGORY_PRIME
    else:
        category_hit = CATEGORY_GEMATRIA

    if jersey_match and gematria_sync:
        method_type = METHOD_HYBRID
    elif jersey_match:
        method_type = METHOD_JERSEY
    elif dob_match:
        method_type = METHOD_LIFE_PATH
    elif gematria_sync:
        method_type = METHOD_GEMATRIA_SYNC
    else:
        method_type = METHOD_GEMATRIA

    return {
        "jersey_match": jersey_match,
        "dob_match": dob_match,
        "category_hit": category_hit,
        "method_type": method_type,
    }


def score_player(
    player: Dict[str, Any],
    date_nums: Sequence[int],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> Dict[str, Any]:
    """
    Score one enriched player.

    Returns a new dict (does not mutate the original).
    """
    base, count, hits = evaluate_rules(player, date_nums, config)

    score = min(base * config.multiplier_for(count), config.max_sync)

    return {
        **player,
        **classify(player, date_nums),
        **get_sync_six_components(date_nums),
        **_display_fields(player),
        "score": round_score(score),
        "hits": hits,
        "prime_match": is_prime(player.get("jersey")),
        "energy_phase": False,  # reserved for moon/ritual phase signals
    }


def score_players(
    players: Sequence[Dict[str, Any]],
    date_nums: Sequence[int],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> List[Dict[str, Any]]:
    """Score every player. No filtering happens here."""
    date_nums = tuple(date_nums)
    scored = [score_player(p, date_nums, config) for p in players]
    logger.debug("Scored %d players against SYNC SIX %s", len(scored), list(date_nums))
    return scored
