"""Request dependencies: current user from bearer token or cookie session."""

from __future__ import annotations

import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Unauthenticated
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import UserRead

bearer_scheme = HTTPBearer(auto_error=False)

SESSION_USER_KEY = "user_id"


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """
    Bearer token first (stateless, identity read from the claims); otherwise the
    user id stored in the cookie session at login.
    """
    if credentials is not None:
        claims = decode_access_token(credentials.credentials)
        try:
            user_id = uuid.UUID(claims["id"])
        except (KeyError, ValueError) as e:
            raise Unauthenticated("Invalid token") from e
        return UserRead(
            id=user_id,
            email=claims.get("email") or "",
            name=claims.get("name") or "",
            avatar_url=claims.get("avatarUrl"),
        )

    session_user_id = request.session.get(SESSION_USER_KEY) if "session" in request.scope else None
    if session_user_id:
        try:
            user = await db.get(User, uuid.UUID(session_user_id))
        except ValueError:
            user = None
        if user is not None:
            return UserRead.model_validate(user)
        request.session.pop(SESSION_USER_KEY, None)

    raise Unauthenticated("You must be logged in to access this resource")
