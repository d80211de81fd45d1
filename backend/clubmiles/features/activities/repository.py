"""
Activity repository.

Data access layer for the activities table.
"""

from typing import Any, Iterable, Sequence

from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.shared.repository import BaseRepository
from .models import Activity

# Columns refreshed when a synced activity already exists.
# Identity, owner, start date and manual_entry never change.
SYNC_MUTABLE_FIELDS = ("activity_name", "type", "distance_miles", "week_commencing")


class ActivityRepository(BaseRepository[Activity]):
    """Repository for activities."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Activity)

    async def get_by_id(self, activity_id: str) -> Activity | None:
        return await self.get_by(id=activity_id)

    async def list_recent_first(self) -> list[Activity]:
        """All activities, newest start date first."""
        return await self.get_all(desc(Activity.start_date))

    async def upsert_synced(self, rows: Sequence[dict[str, Any]]) -> int:
        """
        Upsert one batch of synced activities.

        Args:
            rows: Activity column dicts keyed by Strava activity ID

        Returns:
            Number of rows sent
        """
        return await self.upsert(
            rows,
            conflict_keys=["id"],
            update_fields=SYNC_MUTABLE_FIELDS,
        )

    async def delete_for_athlete(self, athlete_id: str) -> int:
        """Delete all activities of an athlete."""
        return await self.delete_where(Activity.athlete_id == athlete_id)

    async def delete_by_types(self, types: Iterable[str]) -> int:
        """
        Delete every activity (manual or imported) whose type is in ``types``.

        Returns:
            Number of activities deleted
        """
        return await self.delete_where(Activity.type.in_(list(types)))

    async def count_manual(self) -> int:
        return await self.count(manual_entry=True)
