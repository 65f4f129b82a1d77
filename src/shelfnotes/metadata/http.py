# ABOUTME: HTTP client abstraction for fetching cover images.
# ABOUTME: Provides rate limiting and an injectable transport for testing; no retries.

import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


class CoverFetchError(Exception):
    """Raised when an HTTP request for a cover cannot be completed."""


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body of a completed GET request."""

    status_code: int
    content: bytes


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for raw HTTP GET operations."""

    def get(self, url: str) -> HttpResponse: ...


class ShelfnotesHttpClient:
    """HTTP client with a minimum interval between requests.

    Wraps httpx.Client. Redirects are followed since the cover service
    answers with a redirect to its storage backend. Any status code is
    returned to the caller; only transport failures raise.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "shelfnotes/0.1.0"},
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._last_request_time: float = 0.0

    def get(self, url: str) -> HttpResponse:
        """Send a GET request, honoring the minimum request interval.

        Raises:
            CoverFetchError: On connection, timeout, or protocol errors.
        """
        self._rate_limit()
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise CoverFetchError(f"Request failed: {url}: {exc}") from exc
        logger.debug("HTTP %d from %s (%d bytes)", response.status_code, url, len(response.content))
        return HttpResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self._client.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
