"""
Strava integration module.

Usage:
    from clubmiles.features.strava import StravaContext, StravaOAuth, StravaClient
    from clubmiles.features.strava.sync import AthleteSyncService

Components:
- StravaContext: Credentials + HTTP settings passed to every Strava call
- StravaOAuth: OAuth flow (auth URL, code exchange, token refresh)
- StravaClient: Paginated activity listing
- AthleteSyncService: Per-athlete synchronization (see .sync)
"""

from .context import StravaContext
from .schemas import (
    StravaAthlete,
    TokenResponse,
    StravaActivitySummary,
)
from .oauth import (
    StravaOAuth,
    StravaOAuthError,
)
from .client import (
    StravaClient,
    StravaError,
    StravaAPIError,
    StravaAuthError,
    SYNC_CUTOFF,
    MAX_PER_PAGE,
)

__all__ = [
    # Context
    "StravaContext",
    # Schemas
    "StravaAthlete",
    "TokenResponse",
    "StravaActivitySummary",
    # OAuth
    "StravaOAuth",
    "StravaOAuthError",
    # Client
    "StravaClient",
    "StravaError",
    "StravaAPIError",
    "StravaAuthError",
    "SYNC_CUTOFF",
    "MAX_PER_PAGE",
]
