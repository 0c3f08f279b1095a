# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the catalog API.
# Every error reaches the client as JSON with a human-readable "message".
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings

logger = logging.getLogger(__name__)


# Listed in the catch-all 404 so clients can discover the API
AVAILABLE_ENDPOINTS = [
    "GET /albums",
    "GET /albums/band/:band",
    "GET /albums/genre/:genre",
    "GET /albums/:id",
    "POST /albums",
    "PUT /albums/:id",
    "DELETE /albums/:id",
    "GET /stats",
]


class CatalogException(Exception):
    """
    Base exception for the album catalog.

    All custom exceptions inherit from this class. ``details`` are merged
    into the top level of the response body next to ``message``.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"message": self.message, **self.details}


# =============================================================================
# Album Exceptions
# =============================================================================

class AlbumValidationError(CatalogException):
    """Raised when a new album is missing band, title or year."""

    def __init__(self, missing: list[str]):
        super().__init__(
            message="Missing required fields. Required: band, title, year",
            status_code=400,
        )
        self.missing = missing


class DuplicateAlbumError(CatalogException):
    """Raised when an album with the same band and title already exists."""

    def __init__(self):
        super().__init__(
            message="Album already exists in the catalog.",
            status_code=409,
        )


class AlbumNotFoundError(CatalogException):
    """Raised when an album ID doesn't exist."""

    def __init__(self):
        super().__init__(
            message="Album not found.",
            status_code=404,
        )


class NoAlbumsFoundError(CatalogException):
    """Raised when a band or genre search matches nothing."""

    def __init__(self, message: str, search_term: str):
        super().__init__(
            message=message,
            status_code=404,
            details={"searchTerm": search_term},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def catalog_exception_handler(
    request: Request,
    exc: CatalogException
) -> JSONResponse:
    """Convert CatalogException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed JSON, wrong field types and non-numeric path IDs all land here
    and are reported as a 400 alongside the individual error messages.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "error": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request data.",
            "errors": errors,
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors raised by the framework.

    Unknown paths and unsupported methods both answer with the catch-all 404,
    which lists the available endpoints.
    """
    if exc.status_code in (404, 405):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return JSONResponse(
            status_code=404,
            content={
                "message": "Endpoint not found.",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            }
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Server error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error.",
            "error": "Something went wrong!" if settings.is_production else str(exc),
        }
    )
