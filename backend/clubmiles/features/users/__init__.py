"""
User management module.

Usage:
    from clubmiles.features.users import User, UserRepository, AthleteRecord

Models:
- User: Club member (Strava athlete or manual placeholder)

Repositories:
- UserRepository: Data access for users
"""

from .models import User
from .schemas import (
    AthleteRecord,
    CurrentUserResponse,
    AdminUserResponse,
    DeleteUserRequest,
)
from .repository import UserRepository, MANUAL_ATHLETE_PREFIX, now_ms

__all__ = [
    # Models
    "User",
    # Schemas
    "AthleteRecord",
    "CurrentUserResponse",
    "AdminUserResponse",
    "DeleteUserRequest",
    # Repositories
    "UserRepository",
    "MANUAL_ATHLETE_PREFIX",
    "now_ms",
]
