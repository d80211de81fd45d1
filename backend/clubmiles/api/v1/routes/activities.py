"""
Manual Activity Routes

- POST /manual-activity - admins add an activity by hand
- DELETE /manual-activity - org admins remove a manual activity
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.api.deps import require_admin, require_org_admin
from clubmiles.db.session import get_async_db
from clubmiles.features.activities import (
    ManualActivityService,
    ManualActivityCreate,
    DeleteActivityRequest,
    ActivityNotFoundError,
    ActivityNotManualError,
)

router = APIRouter()


@router.post("/manual-activity", dependencies=[Depends(require_admin)])
async def create_manual_activity(
    payload: ManualActivityCreate,
    db: AsyncSession = Depends(get_async_db),
):
    """Add a manual activity, creating a placeholder athlete if needed."""
    await ManualActivityService(db).create(payload)
    return {"success": True}


@router.delete("/manual-activity", dependencies=[Depends(require_org_admin)])
async def delete_manual_activity(
    payload: DeleteActivityRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """Delete a manual activity. Imported Strava activities are refused."""
    if not payload.id:
        raise HTTPException(status_code=400, detail="Missing ID")

    try:
        await ManualActivityService(db).delete(payload.id)
    except ActivityNotFoundError:
        raise HTTPException(status_code=404, detail="Activity not found")
    except ActivityNotManualError:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete automated Strava activities."
        )

    return {"success": True}
