"""
Request logging middleware for the logging service.

Logs every request and response with timing information.
"""

import json
import logging
import time
from datetime import datetime
from typing import Any, Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SKIP_PATHS = {"/health", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, enable_detailed_logging: bool = False):
        """
        Initialize the logging middleware.

        Args:
            app: FastAPI application instance
            enable_detailed_logging: Whether to log request/response details at DEBUG
        """
        super().__init__(app)
        self.enable_detailed_logging = enable_detailed_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        should_log = self._should_log_request(request)

        if should_log:
            client_ip = request.client.host if request.client else None
            logger.info(f"📥 {request.method} {request.url.path} - {client_ip}")
            if self.enable_detailed_logging:
                request_info = self._extract_request_info(request)
                logger.debug(f"📋 Request details: {json.dumps(request_info, indent=2)}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"💥 {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}"
            )
            raise

        process_time = time.time() - start_time
        if should_log:
            logger.info(
                f"📤 {request.method} {request.url.path} - {response.status_code} - "
                f"{process_time:.3f}s"
            )

        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Timestamp"] = datetime.now().isoformat()
        return response

    def _extract_request_info(self, request: Request) -> Dict[str, Any]:
        # Query values are left out: they carry the log message itself
        sensitive_headers = {"authorization", "cookie", "x-api-key", "x-auth-token"}
        return {
            "method": request.method,
            "path": str(request.url.path),
            "query_keys": sorted(request.query_params.keys()),
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "content_type": request.headers.get("content-type"),
            "headers": {
                k: v for k, v in request.headers.items() if k.lower() not in sensitive_headers
            },
            "timestamp": datetime.now().isoformat(),
        }

    def _should_log_request(self, request: Request) -> bool:
        return request.url.path not in SKIP_PATHS
