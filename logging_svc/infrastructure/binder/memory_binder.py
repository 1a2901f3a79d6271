"""
In-process binder.

Each destination is an ``asyncio.Queue``. ``send`` enqueues and returns;
a worker task per subscribed destination drains the queue and dispatches
to subscribers. Messages sent to a destination nobody subscribes to stay
queued until a subscriber shows up.
"""

import asyncio
import logging
from typing import Dict, Set

from logging_svc.domain.errors import BinderError
from logging_svc.infrastructure.binder.message_binder import Message, MessageBinder, MessageHandler

logger = logging.getLogger(__name__)


class InMemoryBinder(MessageBinder):
    binder_type = "memory"

    def __init__(self):
        super().__init__()
        self._queues: Dict[str, asyncio.Queue] = {}
        self._workers: Dict[str, asyncio.Task] = {}
        self._unserved: Set[str] = set()
        self._started = False
        self._closed = False

    def _queue(self, destination: str) -> asyncio.Queue:
        if destination not in self._queues:
            self._queues[destination] = asyncio.Queue()
        return self._queues[destination]

    async def send(self, destination: str, message: Message) -> None:
        if self._closed:
            raise BinderError(f"Binder is closed, cannot send to '{destination}'")
        if not self.has_subscribers(destination) and destination not in self._unserved:
            self._unserved.add(destination)
            logger.warning(
                f"⚠️ No subscriber on '{destination}': messages stay queued until one subscribes"
            )
        await self._queue(destination).put(message)
        logger.debug(f"📨 Queued message {message.headers.get('id')} on '{destination}'")

    def subscribe(self, destination: str, handler: MessageHandler) -> None:
        super().subscribe(destination, handler)
        if self._started:
            self._ensure_worker(destination)

    async def start(self) -> None:
        if self._started:
            return
        self._started = True
        for destination in list(self._subscribers):
            self._ensure_worker(destination)
        logger.info(f"🚀 In-memory binder started with {len(self._workers)} destination worker(s)")

    def _ensure_worker(self, destination: str) -> None:
        if destination in self._workers:
            return
        queue = self._queue(destination)
        self._workers[destination] = asyncio.create_task(
            self._run_worker(destination, queue), name=f"binder-{destination}"
        )

    async def _run_worker(self, destination: str, queue: asyncio.Queue) -> None:
        while True:
            message = await queue.get()
            try:
                await self.dispatch(destination, message)
            finally:
                queue.task_done()

    async def join(self) -> None:
        """Wait until every queued message on a served destination has been dispatched."""
        for destination in list(self._workers):
            await self._queues[destination].join()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.join()
        for task in self._workers.values():
            task.cancel()
        for task in self._workers.values():
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._workers.clear()
        logger.info("🛑 In-memory binder closed")
