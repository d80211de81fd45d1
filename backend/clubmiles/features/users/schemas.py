"""
User schemas.

Pydantic models for user records and admin responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AthleteRecord(BaseModel):
    """
    Snapshot of a user row handed to the sync service.

    Decoded once from the ORM object so sync can run in its own session.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    athlete_id: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None

    @property
    def display_name(self) -> str:
        return f"{self.firstname or ''} {self.lastname or ''}".strip()


class CurrentUserResponse(BaseModel):
    """User block of the stats payload."""

    id: str
    name: Optional[str]
    is_admin: bool
    is_og_admin: bool


class AdminUserResponse(BaseModel):
    """User row in the admin user list."""

    model_config = ConfigDict(from_attributes=True)

    athlete_id: str
    firstname: Optional[str]
    lastname: Optional[str]
    is_admin: int
    is_og_admin: int
    last_fetch_time: Optional[int]


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    id: Optional[str] = None
