"""Unit tests for request ID and timing middleware."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from catalog_service.app.middleware import RequestIDMiddleware, TimingMiddleware
from catalog_service.infra.logging import get_log_context


def _build_app(slow_threshold: float | None = None) -> FastAPI:
    app = FastAPI()

    @app.get("/echo")
    async def echo(request: Request) -> dict:
        return {
            "state": request.state.request_id,
            "context": get_log_context().get("request_id"),
        }

    app.add_middleware(TimingMiddleware, slow_threshold=slow_threshold)
    app.add_middleware(RequestIDMiddleware)
    return app


@pytest.fixture
async def make_client():
    clients: list[AsyncClient] = []

    def _make(**kwargs) -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=_build_app(**kwargs)), base_url="http://test")
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    async def test_generates_request_id(self, make_client):
        response = await make_client().get("/echo")

        request_id = response.headers["x-request-id"]
        assert len(request_id) == 36
        assert response.json() == {"state": request_id, "context": request_id}

    async def test_preserves_incoming_header(self, make_client):
        response = await make_client().get("/echo", headers={"X-Request-ID": "client-id-1"})

        assert response.headers["x-request-id"] == "client-id-1"
        assert response.json()["state"] == "client-id-1"

    async def test_ids_differ_between_requests(self, make_client):
        client = make_client()

        first = await client.get("/echo")
        second = await client.get("/echo")

        assert first.headers["x-request-id"] != second.headers["x-request-id"]


class TestTimingMiddleware:
    """Tests for TimingMiddleware."""

    async def test_adds_process_time_header(self, make_client):
        response = await make_client().get("/echo")

        assert float(response.headers["x-process-time"]) >= 0

    async def test_warns_on_slow_request(self, make_client, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="catalog_service.app.middleware.timing"):
            await make_client(slow_threshold=0.0).get("/echo")

        assert "Slow request" in caplog.text

    async def test_no_warning_without_threshold(self, make_client, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="catalog_service.app.middleware.timing"):
            await make_client().get("/echo")

        assert "Slow request" not in caplog.text
