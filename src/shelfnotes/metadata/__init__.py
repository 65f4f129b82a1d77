# ABOUTME: Metadata package: book records, row normalization, and cover lookup.
# ABOUTME: Exports the core BookRecord dataclass used throughout shelfnotes.

from shelfnotes.metadata.covers import OpenLibraryCovers
from shelfnotes.metadata.normalizer import MissingFieldError, RecordParseError, normalize_row
from shelfnotes.metadata.types import BookRecord, ReadStatus

__all__ = [
    "BookRecord",
    "MissingFieldError",
    "OpenLibraryCovers",
    "ReadStatus",
    "RecordParseError",
    "normalize_row",
]
