"""
Strava OAuth Routes

Endpoints:
- /auth/login - Redirect to Strava consent screen
- /auth/callback - Exchange code, store athlete, start first sync
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from clubmiles.config import settings
from clubmiles.db.session import get_async_db
from clubmiles.features.strava import StravaContext, StravaOAuth, StravaOAuthError
from clubmiles.features.strava.sync import trigger_athlete_sync
from clubmiles.features.users import AthleteRecord, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


def get_strava_context() -> StravaContext:
    """Dependency: Strava credentials from settings (503 if missing)."""
    if not settings.strava_configured:
        raise HTTPException(
            status_code=503,
            detail="Strava integration not configured"
        )
    return StravaContext.from_settings(settings)


@router.get("/login")
async def login(context: StravaContext = Depends(get_strava_context)):
    """Redirect to Strava authorization."""
    return RedirectResponse(url=StravaOAuth(context).get_authorization_url())


@router.get("/callback")
async def callback(
    code: str = Query(None),
    context: StravaContext = Depends(get_strava_context),
    db: AsyncSession = Depends(get_async_db),
):
    """
    Handle Strava OAuth callback.

    Exchanges code for tokens, upserts the athlete, sets the session
    cookie and syncs the athlete in the background.
    """
    if not code:
        return PlainTextResponse("Missing code", status_code=400)

    try:
        tokens = await StravaOAuth(context).exchange_code(code)
    except StravaOAuthError as e:
        logger.error(f"Token exchange failed: {e}")
        return PlainTextResponse("Failed to exchange token", status_code=500)

    athlete = tokens.athlete
    athlete_id = str(athlete.id)

    await UserRepository(db).upsert_strava_athlete(
        athlete_id=athlete_id,
        firstname=athlete.firstname,
        lastname=athlete.lastname,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        expires_at=tokens.expires_at,
        profile=athlete.model_dump(),
    )
    await db.commit()

    logger.info(f"Strava connected: athlete_id={athlete_id}")

    trigger_athlete_sync(AthleteRecord(
        athlete_id=athlete_id,
        firstname=athlete.firstname,
        lastname=athlete.lastname,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        expires_at=tokens.expires_at,
    ))

    response = RedirectResponse(url=settings.frontend_url, status_code=302)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=athlete_id,
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
    )
    return response
