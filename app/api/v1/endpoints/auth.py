"""Authentication: Google OAuth login, current user, logout."""

from __future__ import annotations

import logging
import secrets
from urllib.parse import urlencode

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import SESSION_USER_KEY, get_current_user
from app.core.config import get_settings
from app.core.constants import OAUTH_STATE_COOKIE, OAUTH_STATE_MAX_AGE_SECONDS
from app.core.security import create_access_token, new_oauth_state
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import MessageResponse, UserRead, UserResponse
from app.services.google_oauth import GoogleOAuthClient, GoogleOAuthError, GoogleProfile, get_google_client

logger = logging.getLogger(__name__)
router = APIRouter()


async def find_or_create_user(db: AsyncSession, profile: GoogleProfile) -> User:
    """Look up by Google subject id; create on first login, refresh name/avatar afterwards."""
    result = await db.execute(select(User).where(User.google_id == profile.sub))
    user = result.scalar_one_or_none()
    if user is None:
        user = User(
            google_id=profile.sub,
            email=profile.email,
            name=profile.name,
            avatar_url=profile.picture,
        )
        db.add(user)
    else:
        user.name = profile.name
        user.avatar_url = profile.picture
    await db.flush()
    await db.refresh(user)
    return user


def _failure_redirect() -> RedirectResponse:
    settings = get_settings()
    response = RedirectResponse(f"{settings.frontend_url}/login?error=auth_failed", status_code=302)
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response


@router.get("/google")
async def google_login(google: GoogleOAuthClient = Depends(get_google_client)):
    """Redirect to Google asking for profile + email."""
    settings = get_settings()
    state = new_oauth_state()
    response = RedirectResponse(google.authorization_url(state), status_code=302)
    response.set_cookie(
        OAUTH_STATE_COOKIE,
        state,
        max_age=OAUTH_STATE_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return response


@router.get("/google/callback")
async def google_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    db: AsyncSession = Depends(get_db),
    google: GoogleOAuthClient = Depends(get_google_client),
):
    """
    Finish the OAuth round trip: verify state, resolve the Google profile to a
    User, start a cookie session and hand a 30-day bearer token to the frontend.
    """
    expected_state = request.cookies.get(OAUTH_STATE_COOKIE)
    if error or not code or not state or not expected_state or not secrets.compare_digest(state, expected_state):
        logger.warning("Google callback rejected (error=%s, state present=%s)", error, bool(state))
        return _failure_redirect()

    try:
        profile = await google.fetch_profile(code)
    except (GoogleOAuthError, httpx.HTTPError) as e:
        logger.warning("Google login failed: %s", e)
        return _failure_redirect()

    user = await find_or_create_user(db, profile)
    request.session[SESSION_USER_KEY] = str(user.id)
    token = create_access_token(user.id, user.email, user.name, user.avatar_url)
    logger.info("User %s logged in", user.id)

    settings = get_settings()
    response = RedirectResponse(
        f"{settings.frontend_url}/auth/callback?{urlencode({'token': token})}",
        status_code=302,
    )
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response


@router.get("/me", response_model=UserResponse)
async def me(user: UserRead = Depends(get_current_user)):
    """The authenticated user."""
    return {"user": user}


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request):
    """End the cookie session. Bearer tokens are discarded client-side."""
    request.session.clear()
    return {"message": "Logged out successfully"}
