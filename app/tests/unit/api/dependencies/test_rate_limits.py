"""Tests for the slowapi rate limiting helpers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from starlette.requests import Request

from api.dependencies.rate_limits import (
    client_address,
    limiter,
    rate_limit_handler,
    setup_rate_limiter,
)


def _request(headers=None, client=("10.0.0.1", 1234)):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/health",
        "query_string": b"",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "client": client,
    }
    return Request(scope)


@pytest.fixture(autouse=True)
def restore_limiter_state():
    enabled = limiter.enabled
    yield
    limiter.enabled = enabled


@pytest.mark.unit
class TestClientAddress:
    def test_uses_peer_address_without_forwarded_header(self):
        assert client_address(_request()) == "10.0.0.1"

    def test_uses_first_forwarded_hop(self):
        request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.2"})

        assert client_address(request) == "203.0.113.7"

    def test_blank_forwarded_header_falls_back_to_peer(self):
        request = _request({"X-Forwarded-For": "  "})

        assert client_address(request) == "10.0.0.1"


@pytest.mark.unit
class TestRateLimitHandler:
    async def test_returns_429_with_limit_detail(self):
        exc = MagicMock(spec=RateLimitExceeded)
        exc.detail = "50 per 1 minute"

        response = await rate_limit_handler(_request(), exc)

        assert response.status_code == 429
        assert json.loads(response.body) == {
            "message": "Rate limit exceeded",
            "limit": "50 per 1 minute",
        }

    async def test_other_exceptions_have_no_limit_detail(self):
        response = await rate_limit_handler(_request(), ValueError("boom"))

        assert response.status_code == 429
        assert json.loads(response.body)["limit"] is None


@pytest.mark.unit
class TestSetupRateLimiter:
    def test_attaches_shared_limiter(self):
        app = FastAPI()

        result = setup_rate_limiter(app)

        assert result is limiter
        assert app.state.limiter is limiter
        assert app.exception_handlers[RateLimitExceeded] is rate_limit_handler

    def test_can_disable_limiting(self):
        setup_rate_limiter(FastAPI(), enabled=False)

        assert limiter.enabled is False
