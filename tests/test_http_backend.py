"""Tests for the HTTP backend."""

import asyncio

import httpx
import pytest

from tenderwatch.core.backends import (
    BlockedError,
    FetchError,
    HttpBackend,
    RateLimitError,
    RequestSpec,
)


def _backend(handler, max_retries=3):
    return HttpBackend(
        max_retries=max_retries,
        retry_wait_min=0,
        retry_wait_max=0,
        transport=httpx.MockTransport(handler),
    )


def _fetch(backend, url="https://portal.test/page"):
    async def run():
        async with backend:
            return await backend.fetch(RequestSpec(url=url))

    return asyncio.run(run())


def test_fetch_returns_html():
    def handler(request):
        assert request.headers["User-Agent"]
        return httpx.Response(200, text="<html><body>ok</body></html>")

    result = _fetch(_backend(handler))
    assert result.elapsed_ms >= 0
    assert result.status_code == 200
    assert "ok" in result.html
    assert result.retry_count == 0


def test_retries_server_errors():
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(503)
        return httpx.Response(200, text="recovered")

    result = _fetch(_backend(handler))
    assert result.html == "recovered"
    assert result.retry_count == 2
    assert len(calls) == 3


def test_gives_up_after_max_retries():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(502)

    with pytest.raises(FetchError) as exc_info:
        _fetch(_backend(handler, max_retries=2))
    assert len(calls) == 2
    assert exc_info.value.status_code == 502


def test_transport_errors_become_fetch_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError):
        _fetch(_backend(handler, max_retries=2))


def test_not_found_is_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(404)

    with pytest.raises(FetchError) as exc_info:
        _fetch(_backend(handler))
    assert len(calls) == 1
    assert exc_info.value.status_code == 404


def test_blocked_status():
    with pytest.raises(BlockedError):
        _fetch(_backend(lambda request: httpx.Response(403)))


def test_rate_limit_after_retries():
    def handler(request):
        return httpx.Response(429, headers={"Retry-After": "7"})

    with pytest.raises(RateLimitError) as exc_info:
        _fetch(_backend(handler, max_retries=2))
    assert exc_info.value.retry_after == 7.0
