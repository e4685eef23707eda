"""Google OAuth 2.0 client: authorization URL, code exchange, profile lookup."""

from __future__ import annotations

from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from app.core.config import Settings, get_settings


class GoogleOAuthError(Exception):
    """The provider rejected the code or returned an unusable profile."""


class GoogleProfile(BaseModel):
    """Subset of the OpenID userinfo response we store."""

    sub: str
    email: str = ""
    name: str = ""
    picture: str | None = None


class GoogleOAuthClient:
    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings or get_settings()
        self._transport = transport

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.settings.google_client_id,
            "redirect_uri": self.settings.google_callback_url,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
            "access_type": "online",
            "prompt": "select_account",
        }
        return f"{self.settings.google_authorize_url}?{urlencode(params)}"

    async def fetch_profile(self, code: str) -> GoogleProfile:
        """Exchange an authorization code for an access token, then read the user's profile."""
        async with httpx.AsyncClient(timeout=30.0, transport=self._transport) as client:
            token_resp = await client.post(
                self.settings.google_token_url,
                data={
                    "client_id": self.settings.google_client_id,
                    "client_secret": self.settings.google_client_secret,
                    "code": code,
                    "grant_type": "authorization_code",
                    "redirect_uri": self.settings.google_callback_url,
                },
                headers={"Accept": "application/json"},
            )
            if token_resp.status_code != 200:
                raise GoogleOAuthError(f"token exchange failed with status {token_resp.status_code}")
            access_token = token_resp.json().get("access_token")
            if not access_token:
                raise GoogleOAuthError("token response had no access_token")

            info_resp = await client.get(
                self.settings.google_userinfo_url,
                headers={"Authorization": f"Bearer {access_token}", "Accept": "application/json"},
            )
            if info_resp.status_code != 200:
                raise GoogleOAuthError(f"userinfo failed with status {info_resp.status_code}")
            data = info_resp.json()

        if not data.get("sub"):
            raise GoogleOAuthError("profile had no subject id")
        profile = GoogleProfile.model_validate(data)
        if not profile.name:
            profile.name = profile.email.split("@")[0] if profile.email else "Athlete"
        return profile


def get_google_client() -> GoogleOAuthClient:
    """Dependency; overridden in tests."""
    return GoogleOAuthClient()
