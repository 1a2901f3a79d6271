"""
Middleware package for the logging service.

Cross-cutting concerns applied to every request: request logging and
error response formatting.
"""

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
