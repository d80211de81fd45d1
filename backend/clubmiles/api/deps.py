"""
Session and role dependencies.

The session cookie carries the athlete ID set by the OAuth callback.
Roles are looked up on every request.
"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.config import settings
from clubmiles.db.session import get_async_db
from clubmiles.features.users import User, UserRepository


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_db),
) -> User:
    """Resolve the session cookie to a user, or 401."""
    athlete_id = request.cookies.get(settings.session_cookie_name)
    if not athlete_id:
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = await UserRepository(db).get_by_athlete_id(athlete_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Admin or org admin, else 403."""
    if not user.can_manage_activities:
        raise HTTPException(status_code=403, detail="Forbidden")
    return user


async def require_org_admin(user: User = Depends(get_current_user)) -> User:
    """Org admin only, else 403."""
    if not user.is_org_admin:
        raise HTTPException(status_code=403, detail="Forbidden")
    return user
