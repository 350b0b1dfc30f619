"""
Pydantic models for API request/response validation.
Provides type safety, automatic validation, and OpenAPI documentation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


# ============================================================================
# SYNC SIX SCORING
# ============================================================================

class ScoreRequest(BaseModel):
    """Request model for scoring a roster against one game."""
    players: List[Dict[str, Any]] = Field(default_factory=list, description="Raw roster records (name, jersey, dob, team, opponent, ...)")
    event: Optional[Dict[str, Any]] = Field(None, description="Game record; date.start or game.date.start is read")


class HealthResponse(BaseModel):
    status: str = "healthy"
    engine_version: str
    api_sports_configured: bool
