"""
Strava credentials and HTTP settings.

Built once from settings and passed explicitly to everything that talks
to Strava, so sync code never reaches for global configuration.
"""

from dataclasses import dataclass
from typing import Optional

import httpx

from clubmiles.config import Settings


@dataclass(frozen=True)
class StravaContext:
    """
    Everything needed to call Strava on behalf of the club app.

    ``transport`` is only set in tests (httpx.MockTransport).
    """

    client_id: str
    client_secret: str
    redirect_uri: Optional[str] = None
    timeout_seconds: float = 30.0
    transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "StravaContext":
        return cls(
            client_id=settings.strava_client_id or "",
            client_secret=settings.strava_client_secret or "",
            redirect_uri=settings.strava_redirect_uri,
            timeout_seconds=settings.strava_timeout_seconds,
        )

    def http_client(self) -> httpx.AsyncClient:
        """New AsyncClient for one Strava call or paging loop."""
        return httpx.AsyncClient(
            transport=self.transport,
            timeout=self.timeout_seconds,
        )
