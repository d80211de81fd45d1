"""
User model.

One row per club member. Members who connected Strava carry OAuth tokens;
placeholders created from manual entries have none.
"""

from sqlalchemy import Column, String, Integer, BigInteger, Text

from clubmiles.db.base import Base


class User(Base):
    """
    Club member (Strava athlete or manual placeholder).

    A user without a refresh token is never synced automatically.
    """

    __tablename__ = "users"

    # Strava athlete ID, or "manual_<uuid>" for placeholders
    athlete_id = Column(String(64), primary_key=True)

    # Profile
    firstname = Column(String(100), nullable=True)
    lastname = Column(String(100), nullable=True)
    profile_json = Column(Text, nullable=True)  # Raw athlete object from OAuth

    # OAuth tokens
    access_token = Column(Text, nullable=True)
    refresh_token = Column(Text, nullable=True)
    expires_at = Column(Integer, nullable=True)  # Unix timestamp

    # Roles
    is_admin = Column(Integer, default=0, nullable=False)  # Boolean as int for SQLite
    is_og_admin = Column(Integer, default=0, nullable=False)  # Org admin

    # Epoch milliseconds of the last completed sync (or placeholder creation)
    last_fetch_time = Column(BigInteger, nullable=True)

    def __repr__(self):
        return f"<User {self.athlete_id} ({self.full_name})>"

    @property
    def full_name(self) -> str:
        return f"{self.firstname or ''} {self.lastname or ''}".strip()

    @property
    def is_org_admin(self) -> bool:
        return self.is_og_admin == 1

    @property
    def can_manage_activities(self) -> bool:
        """Admins and org admins may add manual entries."""
        return self.is_admin == 1 or self.is_og_admin == 1
