"""
Admin Routes (org admin only)

- GET /force-sync - start a full sync in the background
- GET /admin/debug-info - counters and last sync time
- GET /admin/users - list users
- DELETE /user - delete a user and their activities
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.api.deps import require_org_admin
from clubmiles.config import settings
from clubmiles.db.session import get_async_db
from clubmiles.features.activities import ActivityRepository
from clubmiles.features.strava.sync import trigger_full_sync, get_sync_stats
from clubmiles.features.users import (
    AdminUserResponse,
    DeleteUserRequest,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_org_admin)])


@router.get("/force-sync")
async def force_sync(db: AsyncSession = Depends(get_async_db)):
    """
    Sync every user in the background.

    Returns immediately; progress only shows up in logs.
    """
    user_count = await UserRepository(db).count()

    if not trigger_full_sync():
        raise HTTPException(
            status_code=503,
            detail="Strava integration not configured"
        )

    return {"success": True, "message": f"Sync started for {user_count} users."}


@router.get("/admin/debug-info")
async def debug_info(db: AsyncSession = Depends(get_async_db)):
    """Aggregate counters for the admin panel."""
    users = UserRepository(db)
    activities = ActivityRepository(db)

    last_sync = await users.last_sync_time()

    return {
        "status": "Active",
        "last_sync": last_sync or "Unknown",
        "database": {
            "users": await users.count(),
            "total_activities": await activities.count(),
            "manual_activities": await activities.count_manual(),
        },
        "sync": get_sync_stats(),
        "environment": settings.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/admin/users")
async def list_users(db: AsyncSession = Depends(get_async_db)):
    """All users ordered by first name."""
    users = await UserRepository(db).list_by_firstname()
    return {"users": [AdminUserResponse.model_validate(u) for u in users]}


@router.delete("/user")
async def delete_user(
    payload: DeleteUserRequest,
    current_user: User = Depends(require_org_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Delete a user together with all of their activities."""
    target_id = payload.id
    if not target_id:
        raise HTTPException(status_code=400, detail="Missing Target ID")
    if target_id == current_user.athlete_id:
        raise HTTPException(status_code=400, detail="Cannot delete yourself")

    # Activities first (foreign key)
    deleted = await ActivityRepository(db).delete_for_athlete(target_id)
    await UserRepository(db).delete_by_athlete_id(target_id)
    await db.commit()

    logger.info(f"Deleted user {target_id} and {deleted} activities")
    return {"success": True}
