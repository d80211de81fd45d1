"""
Club Miles API

FastAPI application: Strava login, club leaderboard stats, admin tools
and the scheduled activity sync.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clubmiles import __version__
from clubmiles.config import settings
from clubmiles.db.session import init_db, AsyncSessionLocal
from clubmiles.api.v1.router import api_router, auth_router
from clubmiles.features.strava import StravaContext
from clubmiles.features.strava.sync import background_sync


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting Club Miles API...")
    await init_db()
    logger.info("Database initialized")

    if settings.strava_configured:
        context = StravaContext.from_settings(settings)
        if settings.background_sync_enabled:
            await background_sync.start(
                AsyncSessionLocal,
                context,
                interval_seconds=settings.sync_interval_seconds,
            )
            logger.info("Strava background sync started")
        else:
            background_sync.configure(AsyncSessionLocal, context)
            logger.info("Strava on-demand sync enabled (scheduled sync off)")
    else:
        logger.info("Strava sync skipped (STRAVA_CLIENT_ID or secret not set)")

    yield

    # Shutdown
    await background_sync.stop()
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Club Miles API",
    description="Strava-synced club mileage leaderboard",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(auth_router, prefix="/auth")
app.include_router(api_router, prefix="/api")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
