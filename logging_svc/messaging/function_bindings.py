"""
Function bindings - wires consumer functions to input bindings.

A consumer registered as ``logConsumer`` listens on the binding
``logConsumer-in-0``. Each inbound message is converted to the function's
payload type and the function is called with it.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel, ValidationError

from logging_svc.domain.errors import ConsumeError
from logging_svc.infrastructure.binder.message_binder import Message, MessageBinder

logger = logging.getLogger(__name__)


def input_binding_name(function_name: str, index: int = 0) -> str:
    return f"{function_name}-in-{index}"


class FunctionBindingRegistry:
    def __init__(self, binder: MessageBinder, bindings: Dict[str, str]):
        self.binder = binder
        self.bindings = bindings
        self.consumers: List[str] = []

    def register_consumer(
        self,
        name: str,
        consumer: Callable[[Any], Any],
        payload_type: Type[BaseModel],
    ) -> str:
        """
        Subscribe a consumer function on its input binding.

        Args:
            name: Function name; the input binding is ``<name>-in-0``
            consumer: Sync or async callable taking one payload
            payload_type: Model the message payload is converted to

        Returns:
            The destination the consumer was subscribed to
        """
        binding = input_binding_name(name)
        destination = self.bindings.get(binding, binding)

        async def handle(message: Message) -> None:
            try:
                payload = payload_type.model_validate_json(message.payload)
            except ValidationError as e:
                error = ConsumeError(binding, f"cannot convert payload to {payload_type.__name__}: {e}")
                logger.error(f"❌ {error}")
                raise error from e

            result = consumer(payload)
            if inspect.isawaitable(result):
                await result

        self.binder.subscribe(destination, handle)
        self.consumers.append(name)
        logger.info(f"✅ Bound consumer '{name}' to '{binding}' -> '{destination}'")
        return destination
