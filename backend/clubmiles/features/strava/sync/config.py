"""
Strava sync configuration constants.

Contains all configuration values for sync behavior.
"""

from clubmiles.shared.constants import EXCLUDED_ACTIVITY_TYPES
from ..client import SYNC_CUTOFF


class SyncConfig:
    """Configuration for sync behavior."""

    # Only activities after this instant are fetched
    FETCH_AFTER = SYNC_CUTOFF

    # Rows per INSERT ... ON CONFLICT statement
    UPSERT_BATCH_SIZE = 50

    # Refresh the access token if it expires within this many seconds
    TOKEN_REFRESH_BUFFER_SECONDS = 300

    # Classified types never stored, and purged by the scheduled cleanup
    EXCLUDED_TYPES = EXCLUDED_ACTIVITY_TYPES

    # How long shutdown waits for running sync tasks before cancelling them
    SHUTDOWN_GRACE_SECONDS = 30

    STRAVA_ACTIVITY_URL = "https://www.strava.com/activities/{id}"
