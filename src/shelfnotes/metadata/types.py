# ABOUTME: Core book record structure built from one export row.
# ABOUTME: BookRecord carries the normalized fields plus pure derived values (cover URL, file name).

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

COVER_URL_TEMPLATE = "https://covers.openlibrary.org/b/isbn/{isbn}-{size}.jpg"
COVER_SIZE_METADATA = "M"
COVER_SIZE_DOWNLOAD = "L"

MAX_RATING = 5
FILLED_STAR = "★"
EMPTY_STAR = "☆"

_UPPER_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_dash(name: str) -> str:
    """Convert a CamelCase name to a lowercase dash-cased token.

    "CurrentlyReading" -> "currently-reading".
    """
    return _UPPER_BOUNDARY_RE.sub("-", name).lower()


def rating_to_symbol(rating: int, max_rating: int = MAX_RATING) -> str:
    """Render a rating as a fixed-width star string, clamped to the scale."""
    filled = max(0, min(rating, max_rating))
    return FILLED_STAR * filled + EMPTY_STAR * (max_rating - filled)


def cover_url_for(
    isbn10: str | None, isbn13: str | None, size: str = COVER_SIZE_METADATA
) -> str | None:
    """Build the Open Library cover URL for the preferred ISBN, if any."""
    isbn = isbn13 or isbn10
    if not isbn:
        return None
    return COVER_URL_TEMPLATE.format(isbn=isbn, size=size)


class ReadStatus(Enum):
    """Shelf a book sits on in the export."""

    READ = "Read"
    TO_READ = "ToRead"
    CURRENTLY_READING = "CurrentlyReading"

    @property
    def slug(self) -> str:
        return camel_to_dash(self.value)


@dataclass(frozen=True)
class BookRecord:
    """One book from the export, normalized and immutable.

    Only title and author are required. Everything derived from the stored
    fields (cover URL, note file name, rating stars) is computed on access,
    so two records with equal fields always produce the same output.
    """

    title: str
    author: str
    book_id: str = ""
    additional_authors: tuple[str, ...] = ()
    subtitle: str | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    personal_rating: int | None = None
    community_rating: float | None = None
    community_id: str | None = None
    page_count: int | None = None
    year_published: str | None = None
    date_read: date | None = None
    date_added: date | None = None
    read_status: ReadStatus | None = None

    @property
    def cover_url(self) -> str | None:
        return cover_url_for(self.isbn10, self.isbn13)

    @property
    def isbn(self) -> str | None:
        """Preferred ISBN: ISBN-13 when present, else ISBN-10."""
        return self.isbn13 or self.isbn10

    @property
    def file_name(self) -> str:
        """Note file name; path separators are replaced so it stays one path segment."""
        return f"{self.title} - {self.author}.md".replace("/", "%")

    @property
    def rating_symbol(self) -> str | None:
        if self.personal_rating is None:
            return None
        return rating_to_symbol(self.personal_rating)
