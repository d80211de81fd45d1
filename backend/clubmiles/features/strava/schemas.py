"""
Strava API payloads.

Validated once at the HTTP boundary; sync logic only sees these models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class StravaAthlete(BaseModel):
    """Athlete object embedded in the code exchange response."""

    model_config = ConfigDict(extra="allow")

    id: int
    firstname: Optional[str] = None
    lastname: Optional[str] = None


class TokenResponse(BaseModel):
    """
    Response of POST /oauth/token.

    ``athlete`` is only present on the initial code exchange.
    """

    access_token: str
    refresh_token: str
    expires_at: int
    athlete: Optional[StravaAthlete] = None


class StravaActivitySummary(BaseModel):
    """One item of GET /athlete/activities (summary representation)."""

    id: int
    name: Optional[str] = None
    distance: Optional[float] = 0.0  # meters
    type: Optional[str] = None
    sport_type: Optional[str] = None
    start_date: str

    @property
    def raw_type(self) -> Optional[str]:
        """Legacy ``type`` with ``sport_type`` as fallback."""
        return self.type or self.sport_type
