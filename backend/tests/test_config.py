"""
Tests for environment-driven settings.
"""

from clubmiles.config import Settings
from clubmiles.db.session import _get_async_url


class TestSettings:
    """Tests for Settings parsing."""

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://club.example, http://localhost:5173")

        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["https://club.example", "http://localhost:5173"]

    def test_strava_secret_alias(self, monkeypatch):
        monkeypatch.setenv("STRAVA_CLIENT_ID", "123")
        monkeypatch.setenv("STRAVA_SECRET", "shh")

        settings = Settings(_env_file=None)

        assert settings.strava_client_secret == "shh"
        assert settings.strava_configured

    def test_strava_not_configured_without_secret(self, monkeypatch):
        monkeypatch.setenv("STRAVA_CLIENT_ID", "123")
        monkeypatch.delenv("STRAVA_CLIENT_SECRET", raising=False)
        monkeypatch.delenv("STRAVA_SECRET", raising=False)

        assert not Settings(_env_file=None).strava_configured

    def test_postgres_url_fixed(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgres://u:p@host/db")

        assert Settings(_env_file=None).database_url == "postgresql://u:p@host/db"


class TestAsyncUrl:
    """Tests for the async driver URL mapping."""

    def test_sqlite(self):
        assert _get_async_url("sqlite:///./club_miles.db") == "sqlite+aiosqlite:///./club_miles.db"

    def test_postgres(self):
        assert _get_async_url("postgresql://u:p@host/db") == "postgresql+asyncpg://u:p@host/db"
