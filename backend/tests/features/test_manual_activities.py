"""
Tests for ManualActivityService.
"""

import pytest
from pydantic import ValidationError

from clubmiles.features.activities import (
    ActivityNotFoundError,
    ActivityNotManualError,
    ActivityRepository,
    ManualActivityCreate,
    ManualActivityService,
)
from clubmiles.features.users import MANUAL_ATHLETE_PREFIX, UserRepository

from factories import add_activity, add_user


def payload(**fields) -> ManualActivityCreate:
    data = {
        "athlete_name": "Jane Doe",
        "activity_name": "Club 10k",
        "club": "Running",
        "miles": 6.2,
        "date": "2025-03-16",
    }
    data.update(fields)
    return ManualActivityCreate(**data)


# =============================================================================
# Test create
# =============================================================================

class TestCreateManualActivity:
    """Tests for ManualActivityService.create."""

    async def test_attached_to_existing_user(self, db, session_factory):
        await add_user(db, "100", firstname="Jane", lastname="Doe")

        activity = await ManualActivityService(db).create(payload())

        async with session_factory() as fresh:
            stored = await ActivityRepository(fresh).get_by_id(activity.id)
            assert stored.athlete_id == "100"
            assert stored.athlete_name == "Jane Doe"
            assert stored.activity_name == "Club 10k"
            assert stored.type == "Running"
            assert stored.distance_miles == 6.2
            assert stored.start_date == "2025-03-16"
            assert stored.week_commencing == "10/03/2025"
            assert stored.manual_entry is True
            assert stored.strava_link is None
            assert await UserRepository(fresh).count() == 1

    async def test_unknown_name_creates_placeholder(self, db, session_factory):
        activity = await ManualActivityService(db).create(payload(athlete_name="Walk In Guest"))

        async with session_factory() as fresh:
            user = await UserRepository(fresh).get_by_athlete_id(activity.athlete_id)
            assert user.athlete_id.startswith(MANUAL_ATHLETE_PREFIX)
            assert user.firstname == "Walk"
            assert user.lastname == "In Guest"
            assert user.refresh_token is None

    async def test_same_unknown_name_reuses_placeholder(self, db, session_factory):
        service = ManualActivityService(db)
        first = await service.create(payload(athlete_name="Sam Smith"))
        second = await service.create(payload(athlete_name="Sam Smith", date="2025-03-20"))

        assert first.athlete_id == second.athlete_id
        async with session_factory() as fresh:
            assert await UserRepository(fresh).count() == 1

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            payload(date="16th March")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            payload(athlete_name="   ")

    def test_club_longer_than_column_rejected(self):
        assert payload(club="x" * 50).club == "x" * 50
        with pytest.raises(ValidationError):
            payload(club="x" * 51)


# =============================================================================
# Test delete
# =============================================================================

class TestDeleteManualActivity:
    """Tests for ManualActivityService.delete."""

    async def test_deletes_manual(self, db, session_factory):
        await add_user(db, "100")
        await add_activity(db, "m1", "100", manual_entry=True)

        await ManualActivityService(db).delete("m1")

        async with session_factory() as fresh:
            assert await ActivityRepository(fresh).get_by_id("m1") is None

    async def test_missing(self, db):
        with pytest.raises(ActivityNotFoundError):
            await ManualActivityService(db).delete("nope")

    async def test_imported_activity_refused(self, db, session_factory):
        await add_user(db, "100")
        await add_activity(db, "12345", "100")

        with pytest.raises(ActivityNotManualError):
            await ManualActivityService(db).delete("12345")

        async with session_factory() as fresh:
            assert await ActivityRepository(fresh).get_by_id("12345") is not None
