"""
Abstract base class for message binders.

A binder connects named destinations to a broker. Publishers hand it
serialized messages through ``send``; the messaging runtime registers
handlers through ``subscribe`` and the binder calls them once per inbound
message.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List

logger = logging.getLogger(__name__)


def _default_headers() -> Dict[str, str]:
    return {"contentType": "application/json", "id": str(uuid.uuid4())}


@dataclass(frozen=True)
class Message:
    """Serialized payload plus transport headers."""

    payload: bytes
    headers: Dict[str, str] = field(default_factory=_default_headers)


MessageHandler = Callable[[Message], Awaitable[None]]


class MessageBinder(ABC):
    """
    Base class for all binder implementations.

    Subclasses decide how ``send`` reaches the broker. Delivery of inbound
    messages to subscribers is shared and goes through ``dispatch``.
    """

    binder_type: str = "abstract"

    def __init__(self):
        self._subscribers: Dict[str, List[MessageHandler]] = defaultdict(list)

    @abstractmethod
    async def send(self, destination: str, message: Message) -> None:
        """
        Hand a message to the broker.

        Args:
            destination: Broker destination (topic/queue) name
            message: Serialized message

        Raises:
            BinderError: If the broker could not accept the message
        """
        pass

    def subscribe(self, destination: str, handler: MessageHandler) -> None:
        """
        Register a handler for messages arriving on a destination.

        Args:
            destination: Broker destination name
            handler: Coroutine function called once per message
        """
        self._subscribers[destination].append(handler)
        logger.info(f"🔗 Subscribed handler to destination '{destination}' ({self.binder_type})")

    def has_subscribers(self, destination: str) -> bool:
        return bool(self._subscribers.get(destination))

    async def dispatch(self, destination: str, message: Message) -> int:
        """
        Deliver a message to every handler subscribed on the destination.

        A failing handler is logged and does not stop delivery to the others.

        Returns:
            Number of handlers that processed the message without error
        """
        delivered = 0
        for handler in list(self._subscribers.get(destination, [])):
            try:
                await handler(message)
                delivered += 1
            except Exception as e:
                logger.error(
                    f"❌ Handler failed for message {message.headers.get('id')} "
                    f"on '{destination}': {e}"
                )
        return delivered

    async def start(self) -> None:
        """Start background delivery, if the binder has any."""
        pass

    async def close(self) -> None:
        """Release broker resources."""
        pass
