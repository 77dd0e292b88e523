"""
Domain errors raised by the user store and the handlers that turn them into
HTTP responses.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query")


class UserStoreError(Exception):
    """Base class for errors reported by the user store."""


class UserNotFoundError(UserStoreError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class EmailConflictError(UserStoreError):
    def __init__(self, email: str):
        super().__init__(f"Email {email} already registered")
        self.email = email


class StoreUnavailableError(UserStoreError):
    """The backing store failed; details stay in the log."""


def _field_name(error: Dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "body"
    loc = list(error.get("loc", ()))
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    return ".".join(str(part) for part in loc) or "body"


def validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    return [
        {"field": _field_name(error), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    logger.info(
        "Validation failed for %s %s: %s",
        request.method,
        request.url.path,
        ", ".join(sorted({error["field"] for error in errors})),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


async def not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "User not found"})


async def conflict_handler(request: Request, exc: EmailConflictError) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Email already registered"},
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def setup_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UserNotFoundError, not_found_handler)
    app.add_exception_handler(EmailConflictError, conflict_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
