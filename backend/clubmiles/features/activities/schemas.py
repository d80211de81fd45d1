"""
Activity schemas.

Pydantic models for activity rows and manual entry requests.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clubmiles.shared.dates import parse_iso_datetime


class ActivityResponse(BaseModel):
    """Activity as returned by the stats endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    athlete_id: str
    athlete_name: Optional[str]
    activity_name: Optional[str]
    type: str
    distance_miles: float
    start_date: str
    week_commencing: str
    strava_link: Optional[str]
    manual_entry: bool


class ManualActivityCreate(BaseModel):
    """
    Manual activity submitted by an admin.

    ``club`` is stored as the activity type.
    """

    athlete_name: str
    activity_name: str
    club: str = Field(max_length=50)  # activities.type is String(50)
    miles: float
    date: str

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        parse_iso_datetime(v)
        return v

    @field_validator("athlete_name")
    @classmethod
    def validate_athlete_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("athlete_name must not be blank")
        return v


class DeleteActivityRequest(BaseModel):
    """Delete manual activity request."""

    id: Optional[str] = None
