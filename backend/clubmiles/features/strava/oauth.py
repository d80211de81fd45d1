"""
Strava OAuth flow.

Handles:
- Authorization URL generation
- Code exchange for tokens
- Token refresh
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from .context import StravaContext
from .schemas import TokenResponse

logger = logging.getLogger(__name__)


class StravaOAuthError(Exception):
    """OAuth-related error."""
    pass


class StravaOAuth:
    """
    Strava OAuth handler.

    Usage:
        oauth = StravaOAuth(context)
        auth_url = oauth.get_authorization_url()
        tokens = await oauth.exchange_code(code)
        tokens = await oauth.refresh_token(refresh_token)  # None on failure
    """

    AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
    TOKEN_URL = "https://www.strava.com/oauth/token"

    # Private activities count towards club miles too
    DEFAULT_SCOPE = "activity:read_all"

    def __init__(self, context: StravaContext):
        self.context = context

    def get_authorization_url(
        self,
        state: Optional[str] = None,
        scope: str = DEFAULT_SCOPE
    ) -> str:
        """
        Generate Strava OAuth authorization URL.

        Args:
            state: Optional state parameter for CSRF protection
            scope: OAuth scope (default: activity:read_all)

        Returns:
            Authorization URL string
        """
        params = {
            "client_id": self.context.client_id,
            "redirect_uri": self.context.redirect_uri,
            "response_type": "code",
            "approval_prompt": "force",
            "scope": scope,
        }
        if state:
            params["state"] = state

        return f"{self.AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> TokenResponse:
        """
        Exchange authorization code for tokens.

        Args:
            code: Authorization code from Strava callback

        Returns:
            TokenResponse including the athlete object

        Raises:
            StravaOAuthError: If token exchange fails
        """
        try:
            async with self.context.http_client() as client:
                response = await client.post(
                    self.TOKEN_URL,
                    data={
                        "client_id": self.context.client_id,
                        "client_secret": self.context.client_secret,
                        "code": code,
                        "grant_type": "authorization_code"
                    }
                )
        except httpx.HTTPError as e:
            raise StravaOAuthError(f"Token exchange request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Strava token exchange failed: {response.text}")
            raise StravaOAuthError(
                f"Token exchange failed: {response.status_code}"
            )

        try:
            tokens = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise StravaOAuthError(f"Unexpected token exchange response: {e}") from e

        if tokens.athlete is None:
            raise StravaOAuthError("Token exchange response has no athlete")
        return tokens

    async def refresh_token(self, refresh_token: str) -> Optional[TokenResponse]:
        """
        Refresh an expired access token.

        Failure is reported by returning None, never by raising, so the
        caller can simply skip this athlete.

        Args:
            refresh_token: Current refresh token

        Returns:
            New TokenResponse, or None if Strava refused or was unreachable
        """
        try:
            async with self.context.http_client() as client:
                response = await client.post(
                    self.TOKEN_URL,
                    data={
                        "client_id": self.context.client_id,
                        "client_secret": self.context.client_secret,
                        "grant_type": "refresh_token",
                        "refresh_token": refresh_token
                    }
                )
        except httpx.HTTPError as e:
            logger.warning(f"Strava token refresh request failed: {e}")
            return None

        if not response.is_success:
            logger.warning(
                f"Strava token refresh failed: {response.status_code} - {response.text}"
            )
            return None

        try:
            return TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Strava token refresh returned unexpected body: {e}")
            return None
