"""
Manual activity management.

Admins can log activities that never went through Strava (club runs,
members without an account). Only these manual entries can be deleted.
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.features.users import UserRepository
from clubmiles.shared.dates import week_start
from .models import Activity
from .repository import ActivityRepository
from .schemas import ManualActivityCreate

logger = logging.getLogger(__name__)


class ActivityError(Exception):
    """Base activity error."""
    pass


class ActivityNotFoundError(ActivityError):
    """No activity with the given ID."""
    pass


class ActivityNotManualError(ActivityError):
    """Imported activities can't be deleted from the admin surface."""
    pass


class ManualActivityService:
    """
    Creates and deletes manual activities.

    Usage:
        service = ManualActivityService(db)
        activity = await service.create(payload)
        await service.delete(activity.id)
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)
        self.activities = ActivityRepository(db)

    async def create(self, payload: ManualActivityCreate) -> Activity:
        """
        Record a manual activity.

        The athlete is matched by full name; unknown names get a placeholder
        user so the activity still has an owner.
        """
        user = await self.users.find_by_full_name(payload.athlete_name)
        if user is None:
            user = await self.users.create_placeholder(payload.athlete_name.strip())
            logger.info(f"Created placeholder user {user.athlete_id} for '{payload.athlete_name}'")

        activity = await self.activities.create(
            id=str(uuid.uuid4()),
            athlete_id=user.athlete_id,
            athlete_name=payload.athlete_name,
            activity_name=payload.activity_name,
            type=payload.club,
            distance_miles=payload.miles,
            start_date=payload.date,
            week_commencing=week_start(payload.date),
            strava_link=None,
            manual_entry=True,
        )
        await self.db.commit()

        logger.info(f"Manual activity {activity.id} added for {user.athlete_id}")
        return activity

    async def delete(self, activity_id: str) -> None:
        """
        Delete a manual activity.

        Raises:
            ActivityNotFoundError: If the activity doesn't exist
            ActivityNotManualError: If the activity was imported from Strava
        """
        activity = await self.activities.get_by_id(activity_id)
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        if not activity.manual_entry:
            raise ActivityNotManualError(activity_id)

        await self.activities.delete(activity)
        await self.db.commit()
        logger.info(f"Manual activity {activity_id} deleted")
