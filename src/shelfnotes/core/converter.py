# ABOUTME: Conversion driver turning export rows into vault notes one row at a time.
# ABOUTME: Collects a RowResult per row so one bad book never stops the batch.

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from shelfnotes.core.writer import NoteWriter, WriteResult
from shelfnotes.metadata.dates import DEFAULT_DATE_FORMAT
from shelfnotes.metadata.normalizer import RecordParseError, normalize_row
from shelfnotes.metadata.types import BookRecord


@dataclass
class RowResult:
    """Outcome for one export row.

    Attributes:
        row_number: 1-based position of the row below the header.
        book: The normalized record, or None if the row could not be parsed.
        write: Result of writing the note, or None if nothing was written.
        error: Why the row failed, if it did.
    """

    row_number: int
    book: BookRecord | None = None
    write: WriteResult | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.write is not None and self.write.success

    @property
    def label(self) -> str:
        """Human-readable name for feedback lines."""
        if self.book is not None:
            return self.book.file_name
        return f"row {self.row_number}"


@dataclass
class ConvertResult:
    """Summary of a conversion run."""

    written: int = 0
    failed: int = 0
    rows: list[RowResult] = field(default_factory=list)

    @property
    def error_details(self) -> list[tuple[str, str]]:
        return [(r.label, r.error or "unknown error") for r in self.rows if not r.success]


def convert_row(
    row_number: int,
    row: Mapping[str, str | None],
    writer: NoteWriter,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RowResult:
    """Normalize and write a single row."""
    try:
        book = normalize_row(row, date_format=date_format)
    except RecordParseError as exc:
        return RowResult(row_number=row_number, error=str(exc))

    write = writer.write(book)
    return RowResult(row_number=row_number, book=book, write=write, error=write.error)


def convert_rows(
    rows: Iterable[Mapping[str, str | None]],
    writer: NoteWriter,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    on_result: Callable[[RowResult], None] | None = None,
) -> ConvertResult:
    """Convert every row in input order.

    Args:
        rows: Header-keyed export rows.
        writer: NoteWriter targeting the vault.
        date_format: strptime pattern for the date columns.
        on_result: Optional callback invoked with each RowResult as it completes.

    Returns:
        ConvertResult with counts and the per-row results.
    """
    result = ConvertResult()
    for row_number, row in enumerate(rows, start=1):
        row_result = convert_row(row_number, row, writer, date_format=date_format)
        if row_result.success:
            result.written += 1
        else:
            result.failed += 1
        result.rows.append(row_result)
        if on_result is not None:
            on_result(row_result)
    return result
