"""Log Publisher - stamps log records and sends them to the producer binding"""
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from logging_svc.config import LOG_PRODUCER_BINDING
from logging_svc.domain.entities.log_message import LogMessage
from logging_svc.messaging.stream_bridge import StreamBridge

logger = logging.getLogger(__name__)

SERVICE_NAME = "logging-svc"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_instant(moment: datetime) -> str:
    """ISO-8601 instant in UTC with a ``Z`` suffix."""
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class LogPublisher:
    def __init__(self, stream_bridge: StreamBridge, clock: Optional[Callable[[], datetime]] = None):
        self.stream_bridge = stream_bridge
        self.clock = clock or _utc_now

    def build_log(self, level: str, message: str) -> LogMessage:
        return LogMessage(
            level=level,
            message=message,
            service_name=SERVICE_NAME,
            timestamp=format_instant(self.clock()),
        )

    async def publish(self, level: str, message: str) -> LogMessage:
        """Build a record for ``level``/``message`` and publish it.

        Raises:
            PublishError: If the record could not be handed to the broker
        """
        log = self.build_log(level, message)
        await self.publish_log(log)
        return log

    async def publish_log(self, log: LogMessage) -> None:
        await self.stream_bridge.send(LOG_PRODUCER_BINDING, log)
        logger.info(f"📤 Published log: {log}")
