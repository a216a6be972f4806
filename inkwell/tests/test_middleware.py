"""Tests for middleware, health check, and CORS configuration."""

import logging

from httpx import ASGITransport, AsyncClient

from inkwell.middleware import RequestIDLogFilter, request_id_var


async def test_health_check(mock_settings):
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "inkwell-api"
    assert data["articles"] == 13


async def test_security_headers_present(mock_settings):
    """Every response includes security headers."""
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


async def test_request_id_echoed(mock_settings):
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        given = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
        generated = await client.get("/api/health")

    assert given.headers["X-Request-ID"] == "abc-123"
    assert len(generated.headers["X-Request-ID"]) == 36


async def test_cors_allows_explicit_methods(mock_settings):
    """CORS preflight returns explicit methods, not wildcard."""
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.options(
            "/api/articles",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )

    allowed = response.headers.get("Access-Control-Allow-Methods", "")
    assert "GET" in allowed
    assert "POST" in allowed
    assert "*" not in allowed
    assert response.headers["X-Frame-Options"] == "DENY"


def test_log_filter_adds_request_id():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_var.set("req-42")
    try:
        assert RequestIDLogFilter().filter(record) is True
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-42"


def test_log_filter_outside_request():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RequestIDLogFilter().filter(record)
    assert record.request_id == "-"
