"""
Background sync runner.

Handles the scheduled full sync + cleanup, and supervises sync tasks
spawned from request handlers (OAuth callback, admin force-sync).
"""

import asyncio
import logging
from typing import Awaitable, Optional

from clubmiles.features.activities import ActivityRepository
from clubmiles.features.users import AthleteRecord, UserRepository

from ..context import StravaContext
from .config import SyncConfig
from .service import AthleteSyncService

logger = logging.getLogger(__name__)


class BackgroundSyncRunner:
    """
    Background task runner for activity sync.

    Call `configure()` to enable on-demand syncs, `start()` to also run
    the scheduled loop, and `stop()` to shut down gracefully.

    Usage:
        runner = BackgroundSyncRunner()
        await runner.start(db_factory, context, interval_seconds=3600)
        runner.spawn(runner.sync_all_athletes())
        # ... later ...
        await runner.stop()
    """

    def __init__(self):
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._db_factory = None
        self._context: Optional[StravaContext] = None
        self._interval_seconds = 0
        # Keep strong references to spawned tasks to prevent GC
        self._tasks: set[asyncio.Task] = set()

    def configure(self, db_factory, context: StravaContext):
        """Set the session factory and Strava context used by every sync."""
        self._db_factory = db_factory
        self._context = context

    @property
    def configured(self) -> bool:
        return self._db_factory is not None and self._context is not None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    async def start(self, db_factory, context: StravaContext, interval_seconds: int):
        """Start the scheduled sync loop."""
        if self._running:
            return

        self.configure(db_factory, context)
        self._interval_seconds = interval_seconds
        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Background sync started (every {interval_seconds}s)")

    async def stop(self):
        """Stop the loop and let spawned syncs finish (bounded by a grace period)."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._tasks:
            logger.info(f"Waiting for {len(self._tasks)} sync tasks to finish")
            done, pending = await asyncio.wait(
                set(self._tasks), timeout=SyncConfig.SHUTDOWN_GRACE_SECONDS
            )
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        logger.info("Background sync stopped")

    def spawn(self, coro: Awaitable, name: Optional[str] = None) -> asyncio.Task:
        """
        Run ``coro`` as a supervised background task.

        The caller never awaits it; the runner keeps it alive until it
        finishes and waits for it on shutdown.
        """
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background task {task.get_name()} failed: {exc!r}")

    async def _run_loop(self):
        """Scheduled trigger: full sync + cleanup, then wait."""
        while self._running:
            try:
                await self.run_scheduled_sync()
            except Exception as e:
                logger.error(f"Scheduled sync error: {e}")

            await asyncio.sleep(self._interval_seconds)

    # =========================================================================
    # Sync operations
    # =========================================================================

    async def load_athletes(self) -> list[AthleteRecord]:
        """Snapshot every user for a bulk sync."""
        async with self._db_factory() as db:
            users = await UserRepository(db).get_all()
            return [AthleteRecord.model_validate(user) for user in users]

    async def sync_one(self, athlete: AthleteRecord) -> dict:
        """Sync one athlete in its own database session."""
        async with self._db_factory() as db:
            service = AthleteSyncService(db, self._context)
            return await service.sync_athlete(athlete)

    async def sync_all_athletes(self) -> list[dict]:
        """
        Sync every user concurrently.

        Each athlete runs as its own task with its own session; a failure
        in one never affects the others.

        Returns:
            One result dict per athlete
        """
        athletes = await self.load_athletes()
        if not athletes:
            return []

        logger.info(f"Starting sync for {len(athletes)} users")
        outcomes = await asyncio.gather(
            *(self.sync_one(athlete) for athlete in athletes),
            return_exceptions=True
        )

        results = []
        for athlete, outcome in zip(athletes, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Error syncing user {athlete.athlete_id}: {outcome!r}")
                outcome = {"status": "error", "error": str(outcome)}
            results.append(outcome)
        return results

    async def cleanup_excluded_activities(self) -> int:
        """Delete every activity, manual or imported, with an excluded type."""
        async with self._db_factory() as db:
            deleted = await ActivityRepository(db).delete_by_types(
                SyncConfig.EXCLUDED_TYPES
            )
            await db.commit()
        logger.info(f"Cleanup removed {deleted} excluded activities")
        return deleted

    async def run_scheduled_sync(self):
        """Full sync across all users followed by the excluded-type cleanup."""
        logger.info("Starting scheduled sync...")
        await self.sync_all_athletes()
        await self.cleanup_excluded_activities()
        logger.info("Scheduled sync and cleanup complete.")


# Global runner instance
background_sync = BackgroundSyncRunner()


# =============================================================================
# Helper Functions
# =============================================================================

def trigger_athlete_sync(athlete: AthleteRecord) -> bool:
    """
    Start a background sync for one athlete (e.g. right after OAuth).

    Returns False if sync isn't configured.
    """
    if not background_sync.configured:
        logger.warning(f"Sync not configured, not syncing {athlete.athlete_id}")
        return False

    background_sync.spawn(
        background_sync.sync_one(athlete),
        name=f"sync-{athlete.athlete_id}"
    )
    logger.info(f"Triggered sync for athlete {athlete.athlete_id}")
    return True


def trigger_full_sync() -> bool:
    """
    Start a background sync of every user (admin force-sync).

    Returns False if sync isn't configured.
    """
    if not background_sync.configured:
        logger.warning("Sync not configured, ignoring full sync request")
        return False

    background_sync.spawn(background_sync.sync_all_athletes(), name="sync-all")
    logger.info("Triggered full sync")
    return True


def get_sync_stats() -> dict:
    """Get current sync runner state."""
    return {
        "scheduled": background_sync.running,
        "pending_tasks": background_sync.pending_tasks,
    }
