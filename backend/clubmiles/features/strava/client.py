"""
Strava API client.

Lists athlete activities page by page.

Strava API Limits:
- 200 requests per 15 minutes
- 2,000 requests per day
- per_page is capped at 200
"""

import logging
from datetime import datetime, timezone

import httpx
from pydantic import TypeAdapter, ValidationError

from .context import StravaContext
from .schemas import StravaActivitySummary

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class StravaError(Exception):
    """Base Strava error."""
    pass


class StravaAPIError(StravaError):
    """Strava API error."""
    pass


class StravaAuthError(StravaError):
    """Authentication/authorization error."""
    pass


# =============================================================================
# Constants
# =============================================================================

# Club season start; nothing older is ever fetched
SYNC_CUTOFF = datetime(2025, 1, 1, tzinfo=timezone.utc)

MAX_PER_PAGE = 200

_activity_list = TypeAdapter(list[StravaActivitySummary])


# =============================================================================
# Strava Client
# =============================================================================

class StravaClient:
    """
    Async client for the Strava activities API.

    Usage:
        client = StravaClient(context)
        page = await client.get_activities_page(token, page=1)
        activities = await client.fetch_all_activities(token)
    """

    API_URL = "https://www.strava.com/api/v3"

    def __init__(self, context: StravaContext):
        self.context = context

    async def _get_page(
        self,
        http: httpx.AsyncClient,
        access_token: str,
        after: datetime,
        page: int,
        per_page: int
    ) -> list[StravaActivitySummary]:
        """
        Request one page of activities.

        Raises:
            StravaAuthError: If authentication fails
            StravaAPIError: If API returns error or an unexpected body
            httpx.HTTPError: On transport failure
        """
        response = await http.get(
            f"{self.API_URL}/athlete/activities",
            headers={"Authorization": f"Bearer {access_token}"},
            params={
                "after": int(after.timestamp()),
                "per_page": per_page,
                "page": page,
            }
        )

        # Log rate limit headers from Strava
        if "X-RateLimit-Limit" in response.headers:
            logger.debug(
                f"Strava rate limit: {response.headers.get('X-RateLimit-Usage')} "
                f"/ {response.headers.get('X-RateLimit-Limit')}"
            )

        if response.status_code == 401:
            raise StravaAuthError("Invalid or expired token")
        elif not response.is_success:
            raise StravaAPIError(
                f"API error: {response.status_code} - {response.text}"
            )

        try:
            return _activity_list.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise StravaAPIError(f"Unexpected activities payload: {e}") from e

    async def get_activities_page(
        self,
        access_token: str,
        after: datetime = SYNC_CUTOFF,
        page: int = 1,
        per_page: int = MAX_PER_PAGE
    ) -> list[StravaActivitySummary]:
        """
        Get one page of athlete activities.

        Args:
            access_token: Valid access token
            after: Only activities after this time
            page: Page number (1-based)
            per_page: Results per page (max 200)
        """
        async with self.context.http_client() as http:
            return await self._get_page(
                http, access_token, after, page, min(per_page, MAX_PER_PAGE)
            )

    async def fetch_all_activities(
        self,
        access_token: str,
        after: datetime = SYNC_CUTOFF
    ) -> list[StravaActivitySummary]:
        """
        Fetch every activity after ``after``, page by page.

        Stops at the first failed page (keeping what was already fetched),
        at an empty page, or at a short page. There is no retry: a failed
        page just truncates this run.

        Returns:
            All activities in fetch order
        """
        activities: list[StravaActivitySummary] = []
        page = 1

        async with self.context.http_client() as http:
            while True:
                try:
                    items = await self._get_page(
                        http, access_token, after, page, MAX_PER_PAGE
                    )
                except (StravaError, httpx.HTTPError) as e:
                    logger.warning(
                        f"Stopping activity fetch at page {page} "
                        f"({len(activities)} kept): {e}"
                    )
                    break

                if not items:
                    break

                activities.extend(items)

                if len(items) < MAX_PER_PAGE:
                    break
                page += 1

        return activities
