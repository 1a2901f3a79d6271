"""
Error handling middleware for the logging service.

Turns publish failures and unexpected exceptions into ``ErrorResponse``
JSON bodies so callers never see the publish confirmation on failure.
"""

import logging
import traceback
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from logging_svc.domain.errors import PublishError
from logging_svc.schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized error handling.

    HTTP exceptions raised by endpoints are already rendered by FastAPI;
    this catches what escapes the routing layer.
    """

    def __init__(self, app, enable_error_logging: bool = True):
        """
        Initialize the error handling middleware.

        Args:
            app: FastAPI application instance
            enable_error_logging: Whether to log full tracebacks
        """
        super().__init__(app)
        self.enable_error_logging = enable_error_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except PublishError as e:
            return await self._handle_publish_error(request, e)

        except Exception as e:
            return await self._handle_unexpected_exception(request, e)

    async def _handle_publish_error(self, request: Request, exc: PublishError) -> JSONResponse:
        """
        Handle a failed hand-off to the broker.

        Args:
            request: HTTP request
            exc: Publish error raised by the stream bridge

        Returns:
            502 JSON error response
        """
        logger.warning(f"🚨 Publish failed for {request.method} {request.url.path}: {exc.detail}")

        error_response = ErrorResponse(
            error="Failed to publish log",
            error_code="PUBLISH_FAILED",
            details={
                "path": str(request.url.path),
                "method": request.method,
                "binding": exc.binding,
                "destination": exc.destination,
                "reason": exc.detail,
            },
        )

        return JSONResponse(status_code=502, content=error_response.model_dump(mode="json"))

    async def _handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"💥 Unexpected error for {request.method} {request.url.path}: {str(exc)}")

        if self.enable_error_logging:
            logger.error(f"📋 Full traceback:\n{traceback.format_exc()}")

        error_response = ErrorResponse(
            error="Internal server error",
            error_code="INTERNAL_ERROR",
            details={
                "path": str(request.url.path),
                "method": request.method,
                "error_type": type(exc).__name__,
            },
        )

        return JSONResponse(status_code=500, content=error_response.model_dump(mode="json"))
