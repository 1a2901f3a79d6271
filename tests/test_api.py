"""End-to-end tests through the HTTP surface, inside the app lifespan."""

import json
import logging
from datetime import datetime, timezone

import httpx
import pytest

from logging_svc.api.logs import PUBLISHED_CONFIRMATION
from logging_svc.config import settings
from logging_svc.dependencies import get_binder, get_log_publisher
from logging_svc.infrastructure.binder.binder_factory import BinderFactory
from logging_svc.main import create_app


async def _drain():
    await BinderFactory.get_binder().join()


class TestSendLog:
    @pytest.mark.asyncio
    async def test_publishes_and_consumer_receives(self, client, received):
        start = datetime.now(timezone.utc)
        response = await client.post("/logs/send", params={"level": "INFO", "message": "hello"})
        end = datetime.now(timezone.utc)
        await _drain()

        assert response.status_code == 200
        assert response.text == "✅ Log published successfully!"
        assert response.text == PUBLISHED_CONFIRMATION
        assert response.headers["content-type"].startswith("text/plain")

        assert len(received) == 1
        record = received[0]
        assert (record.level, record.message, record.service_name) == ("INFO", "hello", "logging-svc")
        assert start <= datetime.fromisoformat(record.timestamp.replace("Z", "+00:00")) <= end

    @pytest.mark.asyncio
    async def test_empty_values_are_accepted(self, client, received):
        response = await client.post("/logs/send", params={"level": "", "message": ""})
        await _drain()

        assert response.text == PUBLISHED_CONFIRMATION
        assert (received[0].level, received[0].message) == ("", "")

    @pytest.mark.asyncio
    async def test_form_body_is_accepted(self, client, received):
        response = await client.post("/logs/send", data={"level": "WARN", "message": "from a form"})
        await _drain()

        assert response.text == PUBLISHED_CONFIRMATION
        assert received[0].message == "from a form"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params,missing", [({"message": "m"}, "level"), ({"level": "INFO"}, "message")])
    async def test_missing_parameter_is_rejected(self, client, received, params, missing):
        response = await client.post("/logs/send", params=params)
        await _drain()

        assert response.status_code == 400
        assert response.json()["detail"] == f"Required request parameter '{missing}' is not present"
        assert received == []

    @pytest.mark.asyncio
    async def test_only_post_is_allowed(self, client):
        response = await client.get("/logs/send", params={"level": "INFO", "message": "m"})
        assert response.status_code == 405

    @pytest.mark.asyncio
    async def test_send_failure_does_not_confirm(self, app, client, failing_binder, received):
        app.dependency_overrides[get_binder] = lambda: failing_binder

        response = await client.post("/logs/send", params={"level": "ERROR", "message": "disk full"})

        assert response.status_code == 502
        assert PUBLISHED_CONFIRMATION not in response.text
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "PUBLISH_FAILED"
        assert body["details"]["binding"] == "logProducer-out-0"
        assert received == []

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_internal_error(self, app, client, received):
        class BrokenPublisher:
            async def publish(self, level, message):
                raise RuntimeError("kaboom")

        app.dependency_overrides[get_log_publisher] = lambda: BrokenPublisher()

        response = await client.post("/logs/send", params={"level": "INFO", "message": "hello"})

        assert response.status_code == 500
        assert PUBLISHED_CONFIRMATION not in response.text
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["error_type"] == "RuntimeError"
        assert received == []

    @pytest.mark.asyncio
    async def test_sends_one_message_to_producer_binding(self, app, client, recording_binder):
        app.dependency_overrides[get_binder] = lambda: recording_binder

        await client.post("/logs/send", params={"level": "INFO", "message": "hello"})

        assert len(recording_binder.sent) == 1
        destination, message = recording_binder.sent[0]
        assert destination == "logs"
        assert json.loads(message.payload)["serviceName"] == "logging-svc"

    @pytest.mark.asyncio
    async def test_response_carries_timing_headers(self, client):
        response = await client.post("/logs/send", params={"level": "INFO", "message": "m"})
        await _drain()

        assert "x-process-time" in response.headers
        assert "x-timestamp" in response.headers


class TestPushIngress:
    @pytest.mark.asyncio
    async def test_pushed_message_reaches_consumer(self, client, received):
        payload = {
            "level": "ERROR",
            "message": "disk full",
            "serviceName": "inventory-svc",
            "timestamp": "2026-10-18T09:15:02Z",
        }

        response = await client.post("/bindings/logs", json=payload, headers={"X-Message-Id": "m-42"})

        assert response.status_code == 200
        assert response.json() == {"destination": "logs", "delivered": 1}
        assert received[0].service_name == "inventory-svc"
        assert received[0].message == "disk full"

    @pytest.mark.asyncio
    async def test_unbound_destination_is_not_found(self, client):
        response = await client.post("/bindings/nowhere", json={})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_push_is_not_delivered(self, client, received):
        response = await client.post("/bindings/logs", content=b"not json")

        assert response.json()["delivered"] == 0
        assert received == []


class TestAppWiring:
    @pytest.mark.asyncio
    async def test_console_sink_from_settings(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "CONSUMER_SINK", "console")
        application = create_app()

        async with application.router.lifespan_context(application):
            transport = httpx.ASGITransport(app=application)
            async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
                response = await ac.post("/logs/send", params={"level": "INFO", "message": "hello"})
            await _drain()

        assert response.text == PUBLISHED_CONFIRMATION
        out = capsys.readouterr().out.splitlines()
        received = [line for line in out if line.startswith("Received log:")]
        assert len(received) == 1
        assert "hello" in received[0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("log_level,detailed", [("DEBUG", True), ("INFO", False)])
    async def test_request_details_follow_log_level(self, monkeypatch, caplog, log_level, detailed):
        monkeypatch.setattr(settings, "LOG_LEVEL", log_level)
        application = create_app()

        transport = httpx.ASGITransport(app=application)
        with caplog.at_level(logging.DEBUG, logger="logging_svc.middleware.logging"):
            async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
                await ac.post("/bindings/nowhere", params={"secret": "value"})

        assert ("Request details" in caplog.text) is detailed
        assert "value" not in caplog.text


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "logging-svc",
        "version": "0.1.0",
        "binder": "memory",
    }
