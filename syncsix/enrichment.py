"""
Player enrichment: attach the date fingerprint and name gematria to a raw
roster record for one game context.
"""

from typing import Any, Dict, Optional

from .numerology import get_gematria_value, get_sync_six


def _first_present(player: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = player.get(key)
        if value:
            return value
    return ""


def normalize_player_game_data(
    player: Dict[str, Any],
    game_data: Optional[Dict[str, Any]],
    game_date: str,
) -> Dict[str, Any]:
    """
    Enrich a raw player with sync_six + gematria for the game date.

    game_data is accepted for call-site symmetry with the scorer; only the
    resolved game_date is read.

    Returns a new dict (does not mutate the original).
    """
    return {
        **player,
        "sync_six": list(get_sync_six(game_date)),
        "player_gematria": get_gematria_value(player.get("name")),
        "team_gematria": get_gematria_value(_first_present(player, "team_name", "team")),
        "opp_gematria": get_gematria_value(_first_present(player, "opponent_name", "opponent")),
    }
