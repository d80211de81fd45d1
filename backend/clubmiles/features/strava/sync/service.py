"""
Strava sync orchestration.

Main entry point for syncing one athlete's activities.

Sync Flow:
1. Skip athletes without a refresh token (manual placeholders)
2. Refresh the access token if it is missing or about to expire
3. Fetch every activity since the club cutoff
4. Nothing fetched: stop here without writing
5. Classify, drop excluded types, convert to miles, bucket by week
6. Upsert in batches of 50 and record the sync time
"""

import logging
import time
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.features.activities import ActivityRepository
from clubmiles.features.users import AthleteRecord, UserRepository
from clubmiles.shared.activity_types import classify_activity_type, is_excluded_type
from clubmiles.shared.dates import week_start
from clubmiles.shared.units import meters_to_miles

from ..client import StravaClient
from ..context import StravaContext
from ..oauth import StravaOAuth
from ..schemas import StravaActivitySummary
from .config import SyncConfig

logger = logging.getLogger(__name__)


class ActiveSyncTracker:
    """
    Athletes whose sync is currently running in this process.

    A second sync for the same athlete is skipped instead of racing the
    first one on token refresh.
    """

    def __init__(self):
        self._active: set[str] = set()

    def claim(self, athlete_id: str) -> bool:
        if athlete_id in self._active:
            return False
        self._active.add(athlete_id)
        return True

    def release(self, athlete_id: str) -> None:
        self._active.discard(athlete_id)

    def is_active(self, athlete_id: str) -> bool:
        return athlete_id in self._active


# Global tracker instance
active_syncs = ActiveSyncTracker()


class AthleteSyncService:
    """
    Syncs one athlete's Strava activities into the activities table.

    Usage:
        service = AthleteSyncService(db, context)
        result = await service.sync_athlete(athlete)
    """

    def __init__(self, db: AsyncSession, context: StravaContext):
        self.db = db
        self.users = UserRepository(db)
        self.activities = ActivityRepository(db)
        self.oauth = StravaOAuth(context)
        self.client = StravaClient(context)

    async def sync_athlete(self, athlete: AthleteRecord) -> dict:
        """
        Sync activities for a single athlete.

        Never raises: errors are logged and reported in the result so a bulk
        run over many athletes keeps going.

        Returns dict with sync results.
        """
        if not athlete.refresh_token:
            return {"status": "skipped", "reason": "no_refresh_token"}

        if not active_syncs.claim(athlete.athlete_id):
            logger.info(f"Sync already running for {athlete.athlete_id}, skipping")
            return {"status": "skipped", "reason": "already_in_progress"}

        try:
            logger.info(f"Syncing: {athlete.firstname}")
            return await self._sync(athlete)
        except Exception as e:
            logger.exception(f"Error syncing user {athlete.athlete_id}")
            return {"status": "error", "error": str(e)}
        finally:
            active_syncs.release(athlete.athlete_id)

    async def _sync(self, athlete: AthleteRecord) -> dict:
        access_token = await self.ensure_access_token(athlete)
        if not access_token:
            return {"status": "failed", "reason": "token_refresh_failed"}

        activities = await self.client.fetch_all_activities(
            access_token, after=SyncConfig.FETCH_AFTER
        )
        if not activities:
            return {"status": "success", "fetched": 0, "synced": 0}

        rows = self.build_rows(athlete, activities)
        await self.save_rows(rows)
        await self.users.mark_fetched(athlete.athlete_id)
        await self.db.commit()

        logger.info(f"Synced {len(rows)} activities for {athlete.firstname}")
        return {"status": "success", "fetched": len(activities), "synced": len(rows)}

    async def ensure_access_token(self, athlete: AthleteRecord) -> Optional[str]:
        """
        Get a valid access token, refreshing and persisting it if needed.

        Returns None if the refresh failed.
        """
        now = time.time()
        if (
            athlete.access_token
            and athlete.expires_at
            and athlete.expires_at >= now + SyncConfig.TOKEN_REFRESH_BUFFER_SECONDS
        ):
            return athlete.access_token

        logger.info(f"Refreshing Strava token for {athlete.athlete_id}")
        tokens = await self.oauth.refresh_token(athlete.refresh_token)
        if tokens is None:
            logger.warning(f"Token refresh failed for {athlete.athlete_id}, skipping sync")
            return None

        await self.users.update_tokens(
            athlete.athlete_id,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            expires_at=tokens.expires_at,
        )
        await self.db.commit()
        return tokens.access_token

    def build_rows(
        self,
        athlete: AthleteRecord,
        activities: list[StravaActivitySummary]
    ) -> list[dict[str, Any]]:
        """
        Turn Strava summaries into activity rows.

        Excluded types and activities with an unparseable start date are dropped.
        """
        name = athlete.display_name
        rows = []

        for activity in activities:
            activity_type = classify_activity_type(activity.raw_type)
            if is_excluded_type(activity_type):
                continue

            try:
                week = week_start(activity.start_date)
            except ValueError:
                logger.warning(
                    f"Skipping activity {activity.id}: bad start_date {activity.start_date!r}"
                )
                continue

            rows.append({
                "id": str(activity.id),
                "athlete_id": athlete.athlete_id,
                "athlete_name": name,
                "activity_name": activity.name,
                "type": activity_type,
                "distance_miles": meters_to_miles(activity.distance),
                "start_date": activity.start_date,
                "week_commencing": week,
                "strava_link": SyncConfig.STRAVA_ACTIVITY_URL.format(id=activity.id),
                "manual_entry": False,
            })

        return rows

    async def save_rows(self, rows: list[dict[str, Any]]) -> None:
        """Upsert rows in fixed-size batches, one commit per batch."""
        batch_size = SyncConfig.UPSERT_BATCH_SIZE
        for i in range(0, len(rows), batch_size):
            await self.activities.upsert_synced(rows[i:i + batch_size])
            await self.db.commit()
