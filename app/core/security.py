"""Security utilities: signed bearer tokens (JWT) and OAuth state."""

import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.core.config import get_settings
from app.core.exceptions import Unauthenticated


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    name: str,
    avatar_url: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Sign a token carrying the user identity. Expires after jwt_expire_days by default."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_in or timedelta(days=settings.jwt_expire_days))
    payload = {
        "id": str(user_id),
        "email": email,
        "name": name,
        "avatarUrl": avatar_url,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Validate signature and expiry; raise Unauthenticated on any failure."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise Unauthenticated("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise Unauthenticated("Invalid token") from e
    if not payload.get("id"):
        raise Unauthenticated("Invalid token")
    return payload


def new_oauth_state() -> str:
    return secrets.token_urlsafe(24)
