"""Authenticated user schemas."""

from uuid import UUID

from app.schemas.base import CamelModel


class UserRead(CamelModel):
    id: UUID
    email: str
    name: str
    avatar_url: str | None = None


class UserResponse(CamelModel):
    user: UserRead


class MessageResponse(CamelModel):
    message: str
