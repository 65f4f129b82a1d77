# ABOUTME: Unit tests for the HTTP client abstraction.
# ABOUTME: Tests the HttpClient protocol, ShelfnotesHttpClient, rate limiting, and error handling.

import time

import httpx
import pytest

from shelfnotes.metadata.http import (
    CoverFetchError,
    HttpClient,
    HttpResponse,
    ShelfnotesHttpClient,
)


class FakeTransport(httpx.BaseTransport):
    """Fake transport for httpx that returns canned responses."""

    def __init__(self, responses: list[httpx.Response] | None = None) -> None:
        self._responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, content=b"image")

    @property
    def call_count(self) -> int:
        return len(self.requests)


class FailingTransport(httpx.BaseTransport):
    def handle_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


class TestHttpClientProtocol:
    """Tests for HttpClient protocol compliance."""

    def test_shelfnotes_client_satisfies_protocol(self) -> None:
        client = ShelfnotesHttpClient(min_request_interval=0.0)
        assert isinstance(client, HttpClient)


class TestShelfnotesHttpClient:
    """Tests for ShelfnotesHttpClient concrete class."""

    def test_get_returns_status_and_bytes(self) -> None:
        transport = FakeTransport()
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=transport)
        assert client.get("https://example.com/cover.jpg") == HttpResponse(200, b"image")

    def test_error_status_is_returned_not_raised(self) -> None:
        """Status handling is left to the caller."""
        transport = FakeTransport([httpx.Response(404, content=b"not found")])
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=transport)
        response = client.get("https://example.com/missing.jpg")
        assert response.status_code == 404
        assert transport.call_count == 1

    def test_server_error_is_not_retried(self) -> None:
        transport = FakeTransport([httpx.Response(503), httpx.Response(200, content=b"image")])
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=transport)
        assert client.get("https://example.com/cover.jpg").status_code == 503
        assert transport.call_count == 1

    def test_redirects_are_followed(self) -> None:
        transport = FakeTransport(
            [
                httpx.Response(302, headers={"Location": "https://archive.example/cover.jpg"}),
                httpx.Response(200, content=b"image"),
            ]
        )
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=transport)
        response = client.get("https://example.com/cover.jpg")
        assert response.content == b"image"
        assert str(transport.requests[-1].url) == "https://archive.example/cover.jpg"

    def test_uses_httpx_default_timeout(self) -> None:
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=FakeTransport())
        assert client._client.timeout == httpx.Client().timeout

    def test_user_agent_header(self) -> None:
        transport = FakeTransport()
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=transport)
        client.get("https://example.com/cover.jpg")
        assert transport.requests[0].headers["user-agent"].startswith("shelfnotes/")

    def test_transport_error_raises_cover_fetch_error(self) -> None:
        client = ShelfnotesHttpClient(min_request_interval=0.0, transport=FailingTransport())
        with pytest.raises(CoverFetchError, match="Request failed"):
            client.get("https://example.com/cover.jpg")

    def test_rate_limiting_delays_requests(self) -> None:
        transport = FakeTransport()
        interval = 0.15
        client = ShelfnotesHttpClient(min_request_interval=interval, transport=transport)

        start = time.monotonic()
        client.get("https://example.com/1")
        client.get("https://example.com/2")
        elapsed = time.monotonic() - start

        assert elapsed >= interval
        assert transport.call_count == 2
