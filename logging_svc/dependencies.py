from fastapi import Depends

from logging_svc.config import settings
from logging_svc.domain.services.log_publisher import LogPublisher
from logging_svc.infrastructure.binder.binder_factory import BinderFactory
from logging_svc.infrastructure.binder.message_binder import MessageBinder
from logging_svc.messaging.stream_bridge import StreamBridge


def get_binder() -> MessageBinder:
    return BinderFactory.get_binder()


def get_stream_bridge(binder: MessageBinder = Depends(get_binder)) -> StreamBridge:
    return StreamBridge(binder, settings.bindings)


def get_log_publisher(stream_bridge: StreamBridge = Depends(get_stream_bridge)) -> LogPublisher:
    return LogPublisher(stream_bridge)
