"""
Tests for manual activity and admin routes.

Roles: "1" org admin, "2" admin, "3" member (see seed_club).
"""

from clubmiles.api.v1.routes import admin as admin_routes
from clubmiles.features.activities import ActivityRepository
from clubmiles.features.users import UserRepository

from factories import add_activity, seed_club

MANUAL_ENTRY = {
    "athlete_name": "Mia Member",
    "activity_name": "Club night",
    "club": "Running",
    "miles": 4.5,
    "date": "2025-03-12",
}


async def delete_json(client, url: str, body: dict):
    return await client.request("DELETE", url, json=body)


# =============================================================================
# Test POST /api/manual-activity
# =============================================================================

class TestCreateManualActivity:
    """Tests for POST /api/manual-activity."""

    async def test_member_forbidden(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "3")

        response = await api_client.post("/api/manual-activity", json=MANUAL_ENTRY)

        assert response.status_code == 403
        assert response.json() == {"detail": "Forbidden"}

    async def test_admin_creates(self, api_client, db, session_factory):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "2")

        response = await api_client.post("/api/manual-activity", json=MANUAL_ENTRY)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        async with session_factory() as fresh:
            [activity] = await ActivityRepository(fresh).get_all()
            assert activity.athlete_id == "3"
            assert activity.manual_entry is True
            assert activity.week_commencing == "10/03/2025"

    async def test_invalid_body(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await api_client.post("/api/manual-activity", json={"athlete_name": "X"})

        assert response.status_code == 422

    async def test_club_too_long(self, api_client, db, session_factory):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await api_client.post("/api/manual-activity", json={**MANUAL_ENTRY, "club": "R" * 51})

        assert response.status_code == 422
        async with session_factory() as fresh:
            assert await ActivityRepository(fresh).count() == 0


# =============================================================================
# Test DELETE /api/manual-activity
# =============================================================================

class TestDeleteManualActivity:
    """Tests for DELETE /api/manual-activity."""

    async def test_admin_forbidden(self, api_client, db):
        await seed_club(db)
        await add_activity(db, "m1", "3", manual_entry=True)
        api_client.cookies.set("athlete_id", "2")

        response = await delete_json(api_client, "/api/manual-activity", {"id": "m1"})

        assert response.status_code == 403

    async def test_missing_id(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/manual-activity", {})

        assert response.status_code == 400
        assert response.json() == {"detail": "Missing ID"}

    async def test_not_found(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/manual-activity", {"id": "nope"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Activity not found"}

    async def test_imported_activity_refused(self, api_client, db, session_factory):
        await seed_club(db)
        await add_activity(db, "98765", "3")
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/manual-activity", {"id": "98765"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Cannot delete automated Strava activities."}
        async with session_factory() as fresh:
            assert await ActivityRepository(fresh).get_by_id("98765") is not None

    async def test_org_admin_deletes(self, api_client, db, session_factory):
        await seed_club(db)
        await add_activity(db, "m1", "3", manual_entry=True)
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/manual-activity", {"id": "m1"})

        assert response.status_code == 200
        async with session_factory() as fresh:
            assert await ActivityRepository(fresh).get_by_id("m1") is None


# =============================================================================
# Test user administration
# =============================================================================

class TestUserAdmin:
    """Tests for GET /api/admin/users and DELETE /api/user."""

    async def test_list_users(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await api_client.get("/api/admin/users")

        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["firstname"] for u in users] == ["Adam", "Mia", "Olive"]
        assert set(users[0]) == {
            "athlete_id", "firstname", "lastname", "is_admin", "is_og_admin", "last_fetch_time",
        }

    async def test_list_users_admin_forbidden(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "2")

        response = await api_client.get("/api/admin/users")

        assert response.status_code == 403

    async def test_delete_user_cascades(self, api_client, db, session_factory):
        await seed_club(db)
        await add_activity(db, "a1", "3")
        await add_activity(db, "a2", "3", manual_entry=True)
        await add_activity(db, "b1", "2")
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/user", {"id": "3"})

        assert response.status_code == 200
        async with session_factory() as fresh:
            assert await UserRepository(fresh).get_by_athlete_id("3") is None
            remaining = await ActivityRepository(fresh).get_all()
            assert [a.id for a in remaining] == ["b1"]

    async def test_cannot_delete_self(self, api_client, db, session_factory):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/user", {"id": "1"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Cannot delete yourself"}
        async with session_factory() as fresh:
            assert await UserRepository(fresh).get_by_athlete_id("1") is not None

    async def test_missing_target(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "1")

        response = await delete_json(api_client, "/api/user", {})

        assert response.status_code == 400
        assert response.json() == {"detail": "Missing Target ID"}


# =============================================================================
# Test sync and diagnostics
# =============================================================================

class TestSyncAdmin:
    """Tests for GET /api/force-sync and GET /api/admin/debug-info."""

    async def test_force_sync(self, api_client, db, monkeypatch):
        await seed_club(db)
        calls = []
        monkeypatch.setattr(admin_routes, "trigger_full_sync", lambda: calls.append(1) or True)
        api_client.cookies.set("athlete_id", "1")

        response = await api_client.get("/api/force-sync")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Sync started for 3 users."}
        assert calls == [1]

    async def test_force_sync_not_configured(self, api_client, db, monkeypatch):
        await seed_club(db)
        monkeypatch.setattr(admin_routes, "trigger_full_sync", lambda: False)
        api_client.cookies.set("athlete_id", "1")

        response = await api_client.get("/api/force-sync")

        assert response.status_code == 503

    async def test_force_sync_member_forbidden(self, api_client, db):
        await seed_club(db)
        api_client.cookies.set("athlete_id", "3")

        response = await api_client.get("/api/force-sync")

        assert response.status_code == 403

    async def test_debug_info(self, api_client, db):
        await seed_club(db)
        await add_activity(db, "a1", "3")
        await add_activity(db, "a2", "3", manual_entry=True)
        api_client.cookies.set("athlete_id", "1")

        body = (await api_client.get("/api/admin/debug-info")).json()

        assert body["status"] == "Active"
        assert body["last_sync"] == "Unknown"
        assert body["database"] == {"users": 3, "total_activities": 2, "manual_activities": 1}
        assert set(body["sync"]) == {"scheduled", "pending_tasks"}
        assert "timestamp" in body

    async def test_debug_info_last_sync(self, api_client, db):
        await seed_club(db)
        await UserRepository(db).mark_fetched("3", fetched_at_ms=1_741_000_000_000)
        await db.commit()
        api_client.cookies.set("athlete_id", "1")

        body = (await api_client.get("/api/admin/debug-info")).json()

        assert body["last_sync"] == 1_741_000_000_000
