"""HTTP mapping of domain and adapter errors.

Every error leaves the API in the response envelope with ``success`` false
and a human-readable message. Internal details are logged, never returned.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from skillswap.adapter.error import AdapterError, MediaStorageError
from skillswap.domain.error import (
    AccountLockedError,
    AuthenticationError,
    ConflictError,
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from skillswap.util.logging import get_logger

logger = get_logger(__name__)

# Most specific classes first; the first match wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AccountLockedError, status.HTTP_423_LOCKED),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None},
    )


def status_for(error: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _first_validation_message(errors: list[dict]) -> str:
    if not errors:
        return "Validation failed"
    first = errors[0]
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")
    )
    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "Request failed with %s: %s %s -> %d",
        exc.__class__.__name__,
        request.method,
        request.url.path,
        status_code,
    )
    return error_response(status_code, str(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, _first_validation_message(list(exc.errors()))
    )


async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    logger.error(
        "Upstream failure on %s %s: %s", request.method, request.url.path, exc
    )
    if isinstance(exc, MediaStorageError):
        return error_response(status.HTTP_502_BAD_GATEWAY, "Error storing image")
    return error_response(status.HTTP_502_BAD_GATEWAY, "Upstream service error")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, request_validation_handler)
    app.add_exception_handler(AdapterError, adapter_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
