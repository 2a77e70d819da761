"""Error Handlers — global exception handlers for the storefront API.

Invariants:
    - Every error reply uses the StoreError envelope: code, message, category,
      severity, timestamp and context (entity, entity_id, operation)
    - context.operation names the route function that failed
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500 that never leaks internal details

Design Decisions:
    - Validation and unexpected failures are wrapped in a StoreError so one
      to_response() shapes all three layers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from storefront.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, StoreError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_store_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        """Handle all storefront domain errors."""
        if exc.context.operation is None:
            exc.context.operation = _operation(request)
        _log(request, exc)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        error = StoreError(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            ErrorContext(operation=_operation(request), debug_info={"details": details}),
            status.HTTP_400_BAD_REQUEST,
        )
        _log(request, error)
        content = error.to_response()
        content["error"]["details"] = details
        return JSONResponse(status_code=error.http_status, content=content)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. The reply carries no exception text."""
        logger.error(
            "Unhandled exception in %s on %s: %s",
            _operation(request), request.url.path, exc,
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path,
                   "operation": _operation(request)},
        )
        error = StoreError(
            "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(operation=_operation(request)),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _operation(request: Request) -> str:
    """Name of the matched route function, or the HTTP method if none matched."""
    endpoint = request.scope.get("endpoint")
    return getattr(endpoint, "__name__", request.method)


def _log(request: Request, error: StoreError) -> None:
    log = logger.warning if error.http_status < 500 else logger.error
    ctx = error.context
    log(
        "%s in %s: %s", error.code, ctx.operation, error.message,
        extra={"error_code": error.code, "path": request.url.path,
               "entity": ctx.entity, "entity_id": ctx.entity_id,
               "operation": ctx.operation},
    )
