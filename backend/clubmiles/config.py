"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import Annotated, List, Optional
from pydantic_settings import BaseSettings, NoDecode
from pydantic import AliasChoices, Field, field_validator, ConfigDict

# Project root: club-miles/
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Deployment name")

    # === Database ===
    database_url: str = Field(
        default="sqlite:///./club_miles.db",
        description="Database connection URL"
    )

    # === CORS ===
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Strava ===
    strava_client_id: Optional[str] = Field(default=None)
    strava_client_secret: Optional[str] = Field(
        default=None,
        # Also accept STRAVA_SECRET
        validation_alias=AliasChoices("strava_client_secret", "strava_secret")
    )
    strava_redirect_uri: Optional[str] = Field(
        default=None,
        description="OAuth callback URL registered with Strava"
    )
    strava_timeout_seconds: float = Field(default=30.0)

    # === Session ===
    frontend_url: str = Field(default="/", description="Redirect after login")
    session_cookie_name: str = Field(default="athlete_id")
    session_cookie_max_age: int = Field(default=60 * 60 * 24 * 7)
    session_cookie_secure: bool = Field(default=True)

    # === Scheduled sync ===
    background_sync_enabled: bool = Field(default=True)
    sync_interval_seconds: int = Field(
        default=6 * 60 * 60,
        description="Period of the scheduled full sync + cleanup"
    )

    @field_validator('database_url')
    @classmethod
    def fix_postgres_url(cls, v: str) -> str:
        """Fix Render/Railway postgres:// URL to postgresql://"""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @property
    def strava_configured(self) -> bool:
        return bool(self.strava_client_id and self.strava_client_secret)

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Global settings instance
settings = Settings()
