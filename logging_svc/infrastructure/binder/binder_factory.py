"""
Binder factory.

Creates the process-wide binder selected by configuration. The binder is
the one long-lived broker handle; everything else borrows it.
"""

import logging
from typing import Optional

from logging_svc.config import settings
from logging_svc.infrastructure.binder.http_binder import HttpBinder
from logging_svc.infrastructure.binder.memory_binder import InMemoryBinder
from logging_svc.infrastructure.binder.message_binder import MessageBinder

logger = logging.getLogger(__name__)


class BinderFactory:
    """Single point of control for binder selection."""

    _instance: Optional[MessageBinder] = None

    @classmethod
    def get_binder(cls) -> MessageBinder:
        """
        Get the configured binder, creating it on first use.

        Returns:
            MessageBinder: The shared binder instance
        """
        if cls._instance is None:
            cls._instance = cls._create_binder()
        return cls._instance

    @classmethod
    def _create_binder(cls) -> MessageBinder:
        """
        Create a new binder instance based on configuration.

        Raises:
            ValueError: If the HTTP binder is selected without a broker URL
        """
        if cls.get_binder_type() == "http":
            if not settings.BINDER_HTTP_URL:
                raise ValueError("BINDER_HTTP_URL must be set when BINDER_TYPE is 'http'")
            logger.info(f"🌐 Creating HTTP binder for {settings.BINDER_HTTP_URL}")
            return HttpBinder(settings.BINDER_HTTP_URL, timeout=settings.BINDER_HTTP_TIMEOUT)
        logger.info("📡 Creating in-memory binder")
        return InMemoryBinder()

    @classmethod
    def reset(cls) -> None:
        """Drop the current binder so the next call creates a fresh one."""
        cls._instance = None
        logger.info("🔄 Binder instance reset")

    @classmethod
    def get_binder_type(cls) -> str:
        return settings.BINDER_TYPE
