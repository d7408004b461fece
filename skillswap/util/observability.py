"""Observability configuration using Logfire.

Services open spans named after the operation and log structured events:

    import logfire

    with logfire.span("swap_service.accept", swap_id=str(swap_id)):
        ...
        logfire.info("Swap request accepted", swap_id=str(swap_id))
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from skillswap.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Cloud sending follows ``OBSERVABILITY__SEND_TO_LOGFIRE`` when set, and
    otherwise turns on whenever a Logfire token is present.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs: dict[str, Any] = {
        "service_name": observability.service_name,
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        has_token=bool(observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app."""

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if getattr(request, "client", None):
            result["client_host"] = request.client.host
        return result

    # Cookies carry the auth token
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound HTTP calls (email and media providers)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
