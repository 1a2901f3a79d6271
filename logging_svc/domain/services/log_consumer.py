"""Log Consumer - receives published log records and writes them to a diagnostic sink"""
import logging
from typing import Callable, Optional

from logging_svc.domain.entities.log_message import LogMessage

logger = logging.getLogger(__name__)

LOG_CONSUMER_NAME = "logConsumer"

DiagnosticSink = Callable[[LogMessage], None]


def logging_sink(message: LogMessage) -> None:
    logger.info(f"📥 Received log: {message}")


def console_sink(message: LogMessage) -> None:
    print(f"Received log: {message}")


SINKS = {
    "log": logging_sink,
    "console": console_sink,
}


def log_consumer(sink: Optional[DiagnosticSink] = None) -> Callable[[LogMessage], None]:
    """Build the ``logConsumer`` callback.

    Each record is written once to the sink. Persisting records (database,
    search index) is left to downstream collectors.
    """
    emit = sink or logging_sink

    def consume(message: LogMessage) -> None:
        emit(message)

    return consume


def build_log_consumer(sink_name: str = "log") -> Callable[[LogMessage], None]:
    if sink_name not in SINKS:
        raise ValueError(f"Unknown consumer sink '{sink_name}'. Expected one of: {', '.join(SINKS)}")
    return log_consumer(SINKS[sink_name])
