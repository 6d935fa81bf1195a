"""Error Handlers — map exceptions to status codes and the shared error envelope.

Invariants:
    - CongregationError -> its own http_status and to_response() body (400/404/500)
    - RequestValidationError (bad JSON, missing fields, unparseable ids or dates) -> 400
    - Anything else -> 500 INTERNAL_ERROR; the exception text is logged, never returned
    - Every error body has the shape {"error": {code, message, category, severity, ...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from congregation.core.errors import CongregationError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CongregationError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def _handle_domain_error(request: Request, exc: CongregationError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "entity": exc.context.entity,
            "operation": exc.context.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_request_validation(request: Request, exc: RequestValidationError):
    """Malformed body, path or query parameters."""
    details = [
        {
            "location": str(e["loc"][0]) if e["loc"] else "",
            "field": ".".join(str(part) for part in e["loc"][1:]),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request on {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    message = details[0]["message"] if details else "Invalid request data"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR",
            message,
            ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING,
            details=details,
        ),
    )


async def _handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
        ),
    )
