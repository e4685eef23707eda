"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1 import api_router
from app.core.config import get_settings
from app.db.session import engine

settings = get_settings()


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Schema is managed by Alembic; shutdown disposes the pool."""
    yield
    await engine.dispose()


def create_application() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: credentials are sent cross-origin, so origins must be explicit
    cors_origins = [
        settings.frontend_url,
        *[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    ]
    if settings.environment == "development":
        cors_origins += ["http://localhost:3000", "http://127.0.0.1:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(dict.fromkeys(cors_origins)),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age_seconds,
        same_site="none" if settings.is_production else "lax",
        https_only=settings.is_production,
    )
    register_exception_handlers(app)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "Fitness Tracker API is running"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
