"""
Strava sync services.

Provides:
- AthleteSyncService: Per-athlete sync (token refresh, fetch, upsert)
- BackgroundSyncRunner: Scheduled sync + supervised background tasks
"""

from .service import AthleteSyncService, ActiveSyncTracker, active_syncs
from .background import (
    BackgroundSyncRunner,
    background_sync,
    trigger_athlete_sync,
    trigger_full_sync,
    get_sync_stats,
)
from .config import SyncConfig

__all__ = [
    # Services
    "AthleteSyncService",
    "ActiveSyncTracker",
    "active_syncs",
    # Background
    "BackgroundSyncRunner",
    "background_sync",
    "trigger_athlete_sync",
    "trigger_full_sync",
    "get_sync_stats",
    # Config
    "SyncConfig",
]
