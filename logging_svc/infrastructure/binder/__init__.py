"""
Binder package.

Binders move serialized messages between the service and a broker:
- memory: in-process queues, for local runs and tests
- http: broker reachable over HTTP, inbound messages pushed to the service
"""

from .binder_factory import BinderFactory
from .http_binder import HttpBinder
from .memory_binder import InMemoryBinder
from .message_binder import Message, MessageBinder, MessageHandler

__all__ = [
    "BinderFactory",
    "HttpBinder",
    "InMemoryBinder",
    "Message",
    "MessageBinder",
    "MessageHandler",
]
