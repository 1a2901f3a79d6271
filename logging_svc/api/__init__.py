"""
HTTP routers for the logging service:
- logs: publish endpoint (/logs/send)
- bindings: push ingress for broker deliveries (/bindings/{destination})
- health: liveness (/health)
"""

from .bindings import router as bindings_router
from .health import router as health_router
from .logs import router as logs_router

__all__ = ["bindings_router", "health_router", "logs_router"]
