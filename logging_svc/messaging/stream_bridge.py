"""Stream bridge - sends payloads to output bindings by name."""
import logging
from typing import Dict

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from logging_svc.domain.errors import BinderError, PublishError
from logging_svc.infrastructure.binder.message_binder import Message, MessageBinder

logger = logging.getLogger(__name__)


class StreamBridge:
    """
    Send primitive used by publishers.

    Resolves a binding name (e.g. ``logProducer-out-0``) to its configured
    destination, serializes the payload as camelCase JSON and hands it to
    the binder. A binding with no configured destination is sent to a
    destination of the same name.
    """

    def __init__(self, binder: MessageBinder, bindings: Dict[str, str]):
        self.binder = binder
        self.bindings = bindings

    def resolve_destination(self, binding_name: str) -> str:
        return self.bindings.get(binding_name, binding_name)

    async def send(self, binding_name: str, payload: BaseModel) -> None:
        """
        Serialize and send a payload.

        Raises:
            PublishError: If serialization fails or the binder rejects the message
        """
        destination = self.resolve_destination(binding_name)

        try:
            body = payload.model_dump_json(by_alias=True).encode("utf-8")
        except PydanticSerializationError as e:
            raise PublishError(binding_name, f"serialization failed: {e}", destination) from e

        try:
            await self.binder.send(destination, Message(payload=body))
        except BinderError as e:
            logger.error(f"❌ Send to '{binding_name}' -> '{destination}' failed: {e}")
            raise PublishError(binding_name, str(e), destination) from e
