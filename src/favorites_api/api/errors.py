"""Mapping of application errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from favorites_api.domain.errors import (
    ConflictError,
    FavoritesApiError,
    NotFoundError,
    TransientError,
    UnauthorizedError,
)

_logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[FavoritesApiError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (TransientError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: FavoritesApiError) -> int:
    """Return the HTTP status for an application error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int, message: str, errors: list[dict[str, str]] | None = None
) -> JSONResponse:
    """Build the standard error envelope."""
    body: dict[str, object] = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content={"error": body})


def install_error_handlers(app: FastAPI) -> None:
    """Register exception handlers translating failures into JSON errors."""

    @app.exception_handler(FavoritesApiError)
    async def handle_application_error(
        request: Request, exc: FavoritesApiError
    ) -> JSONResponse:
        status_code = status_for(exc)
        if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
            _logger.warning("Dependency unavailable on %s: %s", request.url.path, exc)
        elif status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            _logger.error("Unhandled application error on %s: %s", request.url.path, exc)
        return error_response(status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": str(error.get("msg", "")),
            }
            for error in exc.errors()
        ]
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Validation failed", errors=errors
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(exc.status_code, "Route not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception("Unexpected error on %s", request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )
