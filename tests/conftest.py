import httpx
import pytest
import pytest_asyncio

from logging_svc.domain.errors import BinderError
from logging_svc.infrastructure.binder.binder_factory import BinderFactory
from logging_svc.infrastructure.binder.message_binder import MessageBinder
from logging_svc.main import create_app


class RecordingBinder(MessageBinder):
    """Keeps every sent message instead of delivering it."""

    binder_type = "recording"

    def __init__(self):
        super().__init__()
        self.sent = []

    async def send(self, destination, message):
        self.sent.append((destination, message))


class FailingBinder(MessageBinder):
    binder_type = "failing"

    async def send(self, destination, message):
        raise BinderError("broker unreachable")


@pytest.fixture(autouse=True)
def reset_binder():
    BinderFactory.reset()
    yield
    BinderFactory.reset()


@pytest.fixture
def recording_binder():
    return RecordingBinder()


@pytest.fixture
def failing_binder():
    return FailingBinder()


@pytest.fixture
def received():
    """Records handed to the logConsumer callback."""
    return []


@pytest.fixture
def app(received):
    application = create_app(consumer=received.append)
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """HTTP client running inside the app's lifespan."""
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
