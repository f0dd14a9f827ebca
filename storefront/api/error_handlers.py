"""Error Handlers — map storefront failures onto one JSON error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, timestamp,
      context, [details]}}, whether it came from the domain or from request parsing
    - Per-field details share one shape, {"field", "message", "type"}, with the
      request location ("body", "query", "path") stripped from the field name
    - 4xx logs WARNING, 5xx logs ERROR; the catch-all never echoes the exception

Design Decisions:
    - Session id read from the path so request-parsing errors carry the same
      context block as domain errors raised inside a shop session
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.errors import ErrorCategory, ErrorSeverity, StorefrontError

logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = ("body", "query", "path")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, _handle_storefront_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)


async def _handle_storefront_error(request: Request, exc: StorefrontError):
    if exc.context.session_id is None:
        exc.context.session_id = _session_id(request)
    _log(request, exc.http_status, exc.message, exc.code)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_request_validation(request: Request, exc: RequestValidationError):
    details = [_field_detail(e) for e in exc.errors()]
    _log(
        request, status.HTTP_400_BAD_REQUEST,
        f"Invalid request: {', '.join(d['field'] for d in details)}",
        "VALIDATION_ERROR",
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            request, "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, details,
        ),
    )


async def _handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}", exc_info=True,
        extra={"path": request.url.path, "session_id": _session_id(request)},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            request, "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


# ─── Helpers ─────────────────────────────────────────────────────

def _field_detail(error: dict) -> dict:
    """One pydantic error → the per-field shape CheckoutValidationError uses."""
    loc = list(error["loc"])
    if loc and loc[0] in _REQUEST_LOCATIONS:
        loc = loc[1:]
    return {
        "field": ".".join(str(part) for part in loc) or "body",
        "message": error["msg"],
        "type": error["type"],
    }


def _envelope(
    request: Request,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "context": {
            "session_id": _session_id(request),
            "product_id": request.path_params.get("product_id"),
            "attribute": None,
        },
    }
    if details is not None:
        body["details"] = details
    return {"error": body}


def _session_id(request: Request) -> str | None:
    session_id = request.path_params.get("session_id")
    return str(session_id) if session_id is not None else None


def _log(request: Request, http_status: int, message: str, code: str) -> None:
    log = logger.error if http_status >= 500 else logger.warning
    log(message, extra={
        "error_code": code,
        "path": request.url.path,
        "session_id": _session_id(request),
    })
