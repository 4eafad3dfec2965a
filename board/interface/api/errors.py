"""Error translation for the HTTP interface.

Routes translate domain errors into ``HTTPException`` with a precise status
code; the application-wide handlers below render every error response as
``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from board.domain.error import (
    ConflictError,
    DomainError,
    InvalidReferenceError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error reported to the client.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the status code and client-facing message
    """
    if isinstance(error, NotAuthenticatedError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status.HTTP_403_FORBIDDEN,
            detail=f"You do not have permission to modify this {error.resource}",
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status.HTTP_404_NOT_FOUND, detail=f"{error.resource} not found"
        )
    if isinstance(error, InvalidReferenceError):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status.HTTP_409_CONFLICT, detail=str(error))
    # ValidationError and any other rule violation
    return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors in the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests as 400 with the first validation message."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{location}: {first['msg']}" if location else first["msg"]
    else:
        message = "Invalid request"

    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures as 500 without leaking internals.

    Registered on the outermost middleware, so the exception has already
    passed through the request scope and rolled back its transaction.
    """
    logfire.error(
        "Unhandled error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
