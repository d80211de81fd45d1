"""
Stats Routes

Leaderboard payload: the current user plus every club activity.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.api.deps import get_current_user
from clubmiles.db.session import get_async_db
from clubmiles.features.activities import ActivityRepository, ActivityResponse
from clubmiles.features.users import CurrentUserResponse, User

router = APIRouter()


class StatsResponse(BaseModel):
    user: CurrentUserResponse
    activities: list[ActivityResponse]


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Current user with role flags, and all activities newest first."""
    activities = await ActivityRepository(db).list_recent_first()

    return StatsResponse(
        user=CurrentUserResponse(
            id=user.athlete_id,
            name=user.firstname,
            # Org admins are admins too
            is_admin=user.can_manage_activities,
            is_og_admin=user.is_org_admin,
        ),
        activities=[ActivityResponse.model_validate(a) for a in activities],
    )
