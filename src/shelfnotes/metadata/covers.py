# ABOUTME: Open Library cover lookup by ISBN.
# ABOUTME: Tries ISBN-13 then ISBN-10 and rejects error pages and placeholder images.

import logging

from shelfnotes.metadata.http import CoverFetchError, HttpClient
from shelfnotes.metadata.types import COVER_SIZE_DOWNLOAD, cover_url_for

logger = logging.getLogger(__name__)

# Open Library answers unknown ISBNs with a tiny placeholder image and a 200.
MIN_COVER_BYTES = 1000


class OpenLibraryCovers:
    """Cover resolver backed by covers.openlibrary.org.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    def resolve(self, isbn10: str | None, isbn13: str | None) -> bytes | None:
        """Fetch the large cover image for a book.

        The first identifier that yields an acceptable image wins; results
        are never merged. Returns None when no identifier produced a cover.
        """
        for isbn in (isbn13, isbn10):
            if not isbn:
                continue
            content = self._fetch(isbn)
            if content is not None:
                return content
        return None

    def _fetch(self, isbn: str) -> bytes | None:
        url = cover_url_for(None, isbn, size=COVER_SIZE_DOWNLOAD)
        try:
            response = self._http.get(url)
        except CoverFetchError as exc:
            logger.warning("Cover lookup failed for %s: %s", isbn, exc)
            return None

        if response.status_code != 200:
            logger.debug("No cover for %s: HTTP %d", isbn, response.status_code)
            return None
        if len(response.content) <= MIN_COVER_BYTES:
            logger.debug(
                "Ignoring placeholder cover for %s (%d bytes)", isbn, len(response.content)
            )
            return None
        return response.content
