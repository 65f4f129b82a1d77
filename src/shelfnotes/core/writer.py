# ABOUTME: Writes one book note (and its cover image) into the vault.
# ABOUTME: Failures are caught per book and reported in a WriteResult instead of raised.

import logging
import os
import time
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

from shelfnotes.core.vault import VaultLayout
from shelfnotes.formats.note import render_note
from shelfnotes.metadata.types import BookRecord

logger = logging.getLogger(__name__)


class CoverResolver(Protocol):
    def resolve(self, isbn10: str | None, isbn13: str | None) -> bytes | None: ...


@dataclass
class WriteResult:
    """Outcome of writing a single note."""

    path: Path | None
    success: bool
    cover_path: Path | None = None
    error: str | None = None


def cover_file_name(book: BookRecord) -> str:
    """Deterministic cover file name: ISBN based, else derived from the note name."""
    if book.isbn:
        return f"book%{book.isbn}.jpg"
    return f"{quote(book.file_name)}.png"


def note_timestamp(book: BookRecord) -> float:
    """Modification time for a note: date added, else date read, else now."""
    day: date | None = book.date_added or book.date_read
    if day is None:
        return time.time()
    return datetime(day.year, day.month, day.day).timestamp()


class NoteWriter:
    """Writes notes for books into a vault layout.

    Args:
        layout: Where notes and covers go. Directories must already exist
            (see VaultLayout.ensure).
        covers: Resolver used to download missing covers. None disables
            downloads; cover files already in the vault are still linked.
    """

    def __init__(self, layout: VaultLayout, covers: CoverResolver | None = None) -> None:
        self._layout = layout
        self._covers = covers

    def write(self, book: BookRecord) -> WriteResult:
        """Store the cover, render and write the note, then set its mtime.

        Never raises; any failure is logged and returned as an unsuccessful
        WriteResult.
        """
        note_path = self._layout.notes_dir / book.file_name
        try:
            cover_path = self._store_cover(book)
            text = render_note(book, cover_path)
            with note_path.open("w", encoding="utf-8") as handle:
                handle.write(text)
            mtime = note_timestamp(book)
            os.utime(note_path, (mtime, mtime))
        except Exception as exc:
            logger.exception("Failed to write note %s", book.file_name)
            return WriteResult(path=None, success=False, error=str(exc))

        return WriteResult(path=note_path, success=True, cover_path=cover_path)

    def _store_cover(self, book: BookRecord) -> Path | None:
        """Return the cover file for a book, downloading it if needed.

        An existing file wins over a fresh download.
        """
        cover_path = self._layout.resources_dir / cover_file_name(book)
        try:
            exists = cover_path.exists()
        except OSError as exc:
            # Percent-encoded names can outgrow NAME_MAX while the note name fits.
            logger.warning("Skipping cover for %s: %s", book.file_name, exc)
            return None
        if exists:
            logger.debug("Reusing cover %s", cover_path.name)
            return cover_path
        if self._covers is None:
            return None

        content = self._covers.resolve(book.isbn10, book.isbn13)
        if content is None:
            return None
        try:
            with cover_path.open("wb") as handle:
                handle.write(content)
        except OSError:
            _cleanup_cover(cover_path)
            raise
        return cover_path


def _cleanup_cover(cover_path: Path) -> None:
    """Remove a partially written cover so a later run fetches it again."""
    try:
        cover_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove partial cover %s: %s", cover_path.name, exc)
