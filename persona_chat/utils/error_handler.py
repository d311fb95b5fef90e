"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from ..models.chat_response import ChatResponse
from ..models.enums import ChatErrorKind


class ChatError(Exception):
    """Exception raised when a chat operation fails."""

    pass


class CompletionError(ChatError):
    """Raised by completion clients when the provider cannot produce a reply.

    Covers timeouts, provider-side errors and empty or malformed output.
    The chat pipeline consumes this error itself and never lets it reach
    the HTTP layer.
    """

    pass


class ResourceNotFoundError(ChatError):
    """Raised when a requested resource does not exist."""

    pass


def error_body(request: Request, status_code: int, error: str, message: str) -> dict[str, Any]:
    """Build the JSON envelope shared by every error response."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
        "path": request.url.path,
    }


async def not_found_exception_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    """Convert a ResourceNotFoundError into an HTTP 404 response."""
    logger.warning("Resource not found: {}", exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(request, status.HTTP_404_NOT_FOUND, "Not Found", str(exc)),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Convert a malformed request body into an HTTP 400 response."""
    errors = exc.errors()
    logger.warning("Invalid request on {}: {} validation error(s)", request.url.path, len(errors))
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, status.HTTP_400_BAD_REQUEST, "Bad Request", detail or "Invalid request"),
    )


async def http_exception_handler(request: Request, exc: ChatError) -> JSONResponse:
    """Convert a ChatError into an HTTP 500 response."""
    logger.error("ChatError occurred: {}", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            str(exc),
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so clients always receive the JSON envelope."""
    logger.opt(exception=exc).error("Unhandled exception on {}", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "Internal server error, please try again later",
        ),
    )


# ---------------------------------------------------------------------------
# Decorators for synchronous service methods


def pipeline_boundary(func: Callable[..., ChatResponse]) -> Callable[..., ChatResponse]:
    """Decorator guaranteeing that a pipeline step never raises.

    Any exception escaping the wrapped function is logged with its
    traceback and converted into an ``INTERNAL_FAILURE`` response.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ChatResponse:
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception("Unexpected error in {}", func.__name__)
            return ChatResponse.fail(ChatErrorKind.INTERNAL_FAILURE)

    return wrapper
