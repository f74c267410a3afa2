"""Error Handlers — global exception handlers for the LinkVault API.

Invariants:
    - Every failure response is a LinkVaultError envelope (code, message,
      category, severity, timestamp)
    - RequestValidationError → LinkValidationError (400) with field-level details
    - Any other exception → InternalError (500), original exception only logged

Design Decisions:
    - Framework errors are converted into the project's own error types, then
      rendered by the same function as domain errors
    - Client errors logged at WARNING, server errors at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from linkvault.core.errors import InternalError, LinkValidationError, LinkVaultError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(LinkVaultError, _handle_linkvault_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)


def _render(request: Request, exc: LinkVaultError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_linkvault_error(request: Request, exc: LinkVaultError):
    return _render(request, exc)


async def _handle_request_validation(request: Request, exc: RequestValidationError):
    """Malformed body or parameters: 400 with one entry per offending field."""
    details = field_errors(exc)
    field = details[0]["field"] if details else "body"
    return _render(
        request,
        LinkValidationError("Invalid request data", field, details=details),
    )


async def _handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}", exc_info=True,
    )
    return _render(request, InternalError())


def field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
