from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from trendiwear_api.common.middleware import REQUEST_ID_HEADER, RequestLoggingMiddleware


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"status": "ok"}

    return app


@pytest.mark.asyncio
async def test_request_id_is_echoed_and_logged(caplog) -> None:
    transport = ASGITransport(app=_app())
    with caplog.at_level(logging.INFO, logger="trendiwear_api.request"):
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/ping", headers={REQUEST_ID_HEADER: "req-42"})

    assert response.headers[REQUEST_ID_HEADER] == "req-42"
    [record] = [r for r in caplog.records if r.getMessage() == "request.complete"]
    assert record.correlation_id == "req-42"
    assert record.status_code == 200
    assert record.path == "/ping"


@pytest.mark.asyncio
async def test_request_id_is_generated_when_missing() -> None:
    transport = ASGITransport(app=_app())
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        first = await client.get("/ping")
        second = await client.get("/ping")

    assert len(first.headers[REQUEST_ID_HEADER]) == 32
    assert first.headers[REQUEST_ID_HEADER] != second.headers[REQUEST_ID_HEADER]
