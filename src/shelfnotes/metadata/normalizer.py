# ABOUTME: Maps a raw Goodreads export row onto a BookRecord.
# ABOUTME: Applies ISBN cleaning, numeric coercion, date parsing, and shelf mapping.

import re
from collections.abc import Mapping

from shelfnotes.metadata.dates import DEFAULT_DATE_FORMAT, parse_date
from shelfnotes.metadata.types import BookRecord, ReadStatus

_NON_DIGIT_RE = re.compile(r"\D")

# Shelf names as they appear in the "Exclusive Shelf" column. The export spells
# the currently-reading shelf "currenlty-reading"; only that token is matched.
_SHELF_STATUS = {
    "read": ReadStatus.READ,
    "currenlty-reading": ReadStatus.CURRENTLY_READING,
}


class RecordParseError(Exception):
    """Raised when an export row cannot be turned into a BookRecord."""


class MissingFieldError(RecordParseError):
    """Raised when a required column is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


def _get(row: Mapping[str, str | None], key: str) -> str | None:
    """Return the stripped value for key, or None if absent or blank."""
    value = row.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _require(row: Mapping[str, str | None], key: str) -> str:
    value = _get(row, key)
    if value is None:
        raise MissingFieldError(key)
    return value


def clean_isbn(raw: str | None) -> str | None:
    """Strip everything but digits; an empty result means no ISBN.

    Goodreads wraps ISBNs as ="0441013597" to stop spreadsheets mangling them.
    """
    if raw is None:
        return None
    digits = _NON_DIGIT_RE.sub("", raw)
    return digits or None


def _to_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _to_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _personal_rating(raw: str | None) -> int | None:
    """Goodreads writes 0 for books the reader never rated."""
    rating = _to_int(raw)
    if rating == 0:
        return None
    return rating


def _split_authors(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def parse_read_status(raw: str | None) -> ReadStatus:
    """Map an "Exclusive Shelf" value to a ReadStatus, defaulting to TO_READ."""
    if raw is None:
        return ReadStatus.TO_READ
    return _SHELF_STATUS.get(raw, ReadStatus.TO_READ)


def normalize_row(
    row: Mapping[str, str | None], *, date_format: str = DEFAULT_DATE_FORMAT
) -> BookRecord:
    """Build a BookRecord from one export row.

    Title and Author are required. Malformed numbers and dates are dropped
    rather than rejected, so one odd column never costs the whole book.

    Args:
        row: Column name to raw value, as read from the export header.
        date_format: strptime pattern for the date columns.

    Returns:
        The normalized BookRecord.

    Raises:
        MissingFieldError: If Title or Author is missing or blank.
    """
    title = _require(row, "Title")
    author = _require(row, "Author")
    book_id = _get(row, "Book Id")

    rating_raw = _get(row, "My Rating")
    if rating_raw is None:
        rating_raw = _get(row, "Rating")

    return BookRecord(
        title=title,
        author=author,
        book_id=book_id or "",
        additional_authors=_split_authors(_get(row, "Additional Authors")),
        subtitle=_get(row, "Subtitle"),
        isbn10=clean_isbn(_get(row, "ISBN")),
        isbn13=clean_isbn(_get(row, "ISBN13")),
        personal_rating=_personal_rating(rating_raw),
        community_rating=_to_float(_get(row, "Average Rating")),
        community_id=book_id,
        page_count=_to_int(_get(row, "Number of Pages")),
        year_published=_get(row, "Year Published"),
        date_read=parse_date(_get(row, "Date Read"), date_format),
        date_added=parse_date(_get(row, "Date Added"), date_format),
        read_status=parse_read_status(_get(row, "Exclusive Shelf")),
    )
