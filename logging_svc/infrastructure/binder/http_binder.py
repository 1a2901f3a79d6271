"""HTTP binder - publishes to a broker's REST ingress and receives pushed messages."""
import logging
from typing import Optional

import httpx

from logging_svc.domain.errors import BinderError
from logging_svc.infrastructure.binder.message_binder import Message, MessageBinder

logger = logging.getLogger(__name__)


class HttpBinder(MessageBinder):
    """
    Binder for brokers that expose an HTTP API.

    Outbound messages are POSTed to ``{base_url}/destinations/{destination}``.
    Inbound messages are pushed by the broker to the service's
    ``/bindings/{destination}`` endpoint, which calls ``dispatch``.
    """

    binder_type = "http"

    def __init__(self, base_url: str, timeout: float = 30.0, client: Optional[httpx.AsyncClient] = None):
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout)

    def _get_headers(self, message: Message) -> dict:
        headers = {"Content-Type": message.headers.get("contentType", "application/json")}
        if "id" in message.headers:
            headers["X-Message-Id"] = message.headers["id"]
        return headers

    async def send(self, destination: str, message: Message) -> None:
        url = f"{self.base_url}/destinations/{destination}"
        try:
            response = await self.client.post(url, content=message.payload, headers=self._get_headers(message))
        except httpx.HTTPError as e:
            logger.error(f"❌ Broker request to {url} failed: {e}")
            raise BinderError(f"Broker unreachable: {e}") from e

        if response.status_code >= 300:
            logger.warning(f"⚠️ Broker rejected message for '{destination}': HTTP {response.status_code}")
            raise BinderError(f"Broker responded with HTTP {response.status_code}")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
