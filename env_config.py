"""
Environment Configuration Helper - v1.2
=======================================
Centralized env var loading with fallbacks.

The API-Sports credential used to live under two names across the fetch
handlers. Both are read here, in priority order, into one setting:
Config.API_SPORTS_KEY.
"""

import os
import logging
from typing import Optional, Any

logger = logging.getLogger(__name__)


def get_env(*names: str, default: Any = None) -> Optional[str]:
    """
    Get environment variable with fallback names.

    Tries each name in order, returns first non-empty value.

    Example:
        get_env("API_SPORTS_KEY", "API_KEY")

    Args:
        *names: Variable names to try in order
        default: Default value if none found

    Returns:
        First non-empty value found, or default
    """
    for name in names:
        value = os.getenv(name)
        if value and str(value).strip():
            return value.strip()
    return default


def get_env_float(name: str, default: float) -> float:
    """Get float env var, falling back to default on junk."""
    value = get_env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Invalid float for %s=%r, using %s", name, value, default)
        return default


# ============================================================================
# CENTRALIZED CONFIG (loaded once at import)
# ============================================================================

class Config:
    """Centralized configuration from env vars."""

    # ============================================================================
    # VERSION CONSTANTS - Single source of truth for API versioning
    # ============================================================================
    ENGINE_VERSION = "v1.2"
    API_VERSION = "1.0"

    # API-Sports (American Football) - games + rosters
    API_SPORTS_KEY = get_env("API_SPORTS_KEY", "API_KEY")
    API_SPORTS_BASE_URL = get_env(
        "API_SPORTS_BASE_URL",
        default="https://v1.american-football.api-sports.io",
    )
    API_SPORTS_TIMEOUT = get_env_float("API_SPORTS_TIMEOUT", 10.0)

    # Longest from/to window the games endpoint will fan out over
    MAX_GAME_RANGE_DAYS = 31

    # Logging
    LOG_LEVEL = get_env("LOG_LEVEL", default="INFO").upper()
    LOG_FORMAT = get_env("LOG_FORMAT", default="json").lower()

    # Server
    PORT = int(get_env("PORT", default="8000"))

    @classmethod
    def log_status(cls):
        """Log config status at boot (no secrets, just availability)."""
        status = {
            "api_sports": bool(cls.API_SPORTS_KEY),
            "base_url": cls.API_SPORTS_BASE_URL,
            "timeout": cls.API_SPORTS_TIMEOUT,
            "log_format": cls.LOG_FORMAT,
        }

        status_str = " ".join(f"{k}={v}" for k, v in status.items())
        logger.info(f"ENV OK: {status_str}")

        return status

    @classmethod
    def validate_required(cls):
        """Check required vars are set."""
        missing = []

        if not cls.API_SPORTS_KEY:
            missing.append("API_SPORTS_KEY")

        if missing:
            logger.warning(f"Missing recommended env vars: {missing}")

        return len(missing) == 0
