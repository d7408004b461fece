"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillswap.config import Settings
from skillswap.interface.api.routes import (
    admin,
    auth,
    feedback,
    health,
    notifications,
    swaps,
    users,
)
from skillswap.interface.error import register_exception_handlers
from skillswap.util.di.container import create_container, setup_di
from skillswap.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

API_PREFIX = "/api"


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a container built over
    mock providers.

    Args:
        settings: Application settings, loaded from environment if omitted
        container: DI container, the production container if omitted
    """
    settings = settings or Settings()
    instrumented = settings.environment != "test"

    # Instrument httpx for outbound HTTP requests (email and media providers)
    if instrumented:
        instrument_httpx()

    app_instance = FastAPI(
        title="SkillSwap API",
        description="Backend API for SkillSwap - a marketplace where people trade skills with each other",
        version="0.1.0",
    )

    if instrumented:
        instrument_fastapi(app_instance)

    # Credentials are needed for the auth cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    for router in (
        health.router,
        auth.router,
        users.router,
        swaps.router,
        feedback.router,
        notifications.router,
        admin.router,
    ):
        app_instance.include_router(router, prefix=API_PREFIX)

    return app_instance
