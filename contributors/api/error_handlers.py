"""Error Handlers: map sync and lookup failures onto the JSON error envelope.

Invariants:
    - ContributorsError -> its own http_status and to_response() body
    - Lock contention (WARNING) logs at warning level, everything else at error
    - Any other exception -> 500 with a fixed body, details only in the log
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from contributors.core.errors import ContributorsError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": "internal",
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContributorsError, contributors_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def contributors_error_handler(request: Request, exc: ContributorsError):
    level = logging.WARNING if exc.severity == ErrorSeverity.WARNING else logging.ERROR
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra={
            "error_code": exc.code,
            "repository": exc.context.repository,
            "object_id": exc.context.object_id,
            "lock_name": exc.context.lock_name,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )
