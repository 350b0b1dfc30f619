"""
ranking.py - Post-Scoring Filter Layer

Runs AFTER players are scored to enforce:
- Difficulty gate (score >= 20 OR at least 2 hits)
- Highest-score-wins ordering (stable for ties)

This module does NOT change scores - only filters and re-orders.
"""

from typing import Any, Dict, List, Sequence
import logging

from core.invariants import MIN_SCORE, passes_ranking_gate

logger = logging.getLogger(__name__)


def filter_and_rank(
    scored_players: Sequence[Dict[str, Any]],
    min_score: float = MIN_SCORE,
) -> List[Dict[str, Any]]:
    """
    Apply the difficulty gate and sort by score, highest first.

    Players with equal scores keep their input order.
    """
    kept = [
        p for p in scored_players
        if passes_ranking_gate(p.get("score", 0), p.get("hits") or [], min_score)
    ]

    ranked = sorted(kept, key=lambda p: p.get("score", 0), reverse=True)

    logger.debug(
        "Ranking gate kept %d/%d players (min_score=%s)",
        len(ranked), len(scored_players), min_score,
    )
    return ranked
