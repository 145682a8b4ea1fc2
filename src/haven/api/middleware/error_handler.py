"""
Error Handler Middleware

Provides consistent error handling and response formatting.
Logs errors with correlation IDs for debugging.

PRIVACY: Request bodies may contain the user's own words. They are
never echoed in error responses or logs.
"""

import traceback
from uuid import uuid4

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from haven.config.logging_config import bind_correlation_id, clear_context, get_logger

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Provides:
    - Correlation ID tracking for all requests
    - Sanitized 500 responses for unhandled exceptions
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        bind_correlation_id(correlation_id)

        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        except Exception as e:
            logger.error(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error_type=type(e).__name__,
                traceback=traceback.format_exc(),
            )

            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "correlation_id": correlation_id,
                    "message": "An unexpected error occurred. Please try again.",
                },
                headers={CORRELATION_HEADER: correlation_id},
            )

        finally:
            clear_context()
