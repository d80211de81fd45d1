"""
User repository.

Data access layer for the users table.
"""

import json
import time
import uuid
from typing import Any, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.shared.repository import BaseRepository
from .models import User

MANUAL_ATHLETE_PREFIX = "manual_"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_athlete_id(self, athlete_id: str) -> User | None:
        """
        Get user by athlete ID.

        Args:
            athlete_id: Strava athlete ID or manual placeholder ID

        Returns:
            User if found, None otherwise
        """
        return await self.get_by(athlete_id=athlete_id)

    async def list_by_firstname(self) -> list[User]:
        """All users ordered by first name (admin list)."""
        return await self.get_all(User.firstname)

    async def find_by_full_name(self, full_name: str) -> User | None:
        """
        Find a user whose "first last" name equals ``full_name``.

        Comparison is exact after trimming both sides.
        """
        wanted = full_name.strip()
        for user in await self.get_all():
            if user.full_name == wanted:
                return user
        return None

    async def upsert_strava_athlete(
        self,
        athlete_id: str,
        firstname: Optional[str],
        lastname: Optional[str],
        access_token: str,
        refresh_token: str,
        expires_at: int,
        profile: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Insert an athlete after OAuth, or refresh tokens of a known one.

        Names, roles and profile of an existing row are left untouched.
        """
        await self.upsert(
            [{
                "athlete_id": athlete_id,
                "firstname": firstname,
                "lastname": lastname,
                "access_token": access_token,
                "refresh_token": refresh_token,
                "expires_at": expires_at,
                "profile_json": json.dumps(profile) if profile is not None else None,
                "is_admin": 0,
                "is_og_admin": 0,
            }],
            conflict_keys=["athlete_id"],
            update_fields=["access_token", "refresh_token", "expires_at"],
        )

    async def create_placeholder(self, full_name: str) -> User:
        """
        Create a user without Strava linkage for manual entries.

        The first word becomes the first name, the rest the last name.
        """
        parts = full_name.split(" ")
        return await self.create(
            athlete_id=f"{MANUAL_ATHLETE_PREFIX}{uuid.uuid4()}",
            firstname=parts[0],
            lastname=" ".join(parts[1:]),
            is_admin=0,
            is_og_admin=0,
            last_fetch_time=now_ms(),
        )

    async def update_tokens(
        self,
        athlete_id: str,
        access_token: str,
        refresh_token: str,
        expires_at: int,
    ) -> None:
        """
        Persist a refreshed token pair.

        Args:
            athlete_id: Athlete whose tokens were refreshed
            access_token: New access token
            refresh_token: New refresh token
            expires_at: Token expiration timestamp
        """
        await self.db.execute(
            update(User)
            .where(User.athlete_id == athlete_id)
            .values(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_at=expires_at,
            )
        )

    async def mark_fetched(self, athlete_id: str, fetched_at_ms: int | None = None) -> None:
        """Record the time of a completed sync."""
        await self.db.execute(
            update(User)
            .where(User.athlete_id == athlete_id)
            .values(last_fetch_time=fetched_at_ms or now_ms())
        )

    async def delete_by_athlete_id(self, athlete_id: str) -> int:
        """Delete a user row. Activities must be removed first."""
        return await self.delete_where(User.athlete_id == athlete_id)

    async def last_sync_time(self) -> Optional[int]:
        """Most recent last_fetch_time across users."""
        result = await self.db.execute(select(func.max(User.last_fetch_time)))
        return result.scalar()
