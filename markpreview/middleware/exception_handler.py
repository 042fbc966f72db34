"""Exception handler middleware for structured error responses."""

import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from ..exceptions import MarkupException

logger = logging.getLogger(__name__)


async def markup_exception_handler(request: Request, exc: MarkupException) -> JSONResponse:
    """
    Handle custom exceptions and return structured JSON responses.

    Client errors are logged at warning level, server-side failures at error.

    Args:
        request: FastAPI request object
        exc: MarkupException instance

    Returns:
        JSONResponse with error details
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"MarkupException: {exc.error_code.value}",
        extra={
            "error_code": exc.error_code.value,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details,
            "status_code": exc.status_code
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
