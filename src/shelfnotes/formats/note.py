# ABOUTME: Renders a BookRecord into the Markdown text of an Obsidian book note.
# ABOUTME: Front-matter block, optional cover embed, and empty Description/Highlights sections.

from collections.abc import Callable
from pathlib import PurePath
from typing import TypeVar

from shelfnotes.formats.frontmatter import (
    Date,
    Float,
    FrontMatterValue,
    Integer,
    QuotedText,
    Sequence,
    Symbolic,
    Text,
    render_block,
)
from shelfnotes.metadata.types import BookRecord

BODY_SECTIONS = ("Description", "Highlights")

T = TypeVar("T")


def _opt(value: T | None, kind: Callable[[T], FrontMatterValue]) -> FrontMatterValue | None:
    return None if value is None else kind(value)


def note_fields(
    book: BookRecord, cover_name: str | None = None
) -> list[tuple[str, FrontMatterValue | None]]:
    """Ordered front-matter fields for a book; None marks an absent value."""
    return [
        ("title", QuotedText(book.title)),
        ("subtitle", _opt(book.subtitle, QuotedText)),
        ("author", QuotedText(book.author)),
        ("authors", Sequence(book.additional_authors)),
        ("total_page", _opt(book.page_count, Integer)),
        ("date_read", _opt(book.date_read, Date)),
        ("date_added", _opt(book.date_added, Date)),
        ("read_status", _opt(book.read_status, lambda status: Text(status.slug))),
        ("rating", _opt(book.rating_symbol, Symbolic)),
        ("isbn10", _opt(book.isbn10, QuotedText)),
        ("isbn13", _opt(book.isbn13, QuotedText)),
        ("goodreads_rating", _opt(book.community_rating, Float)),
        ("goodreads_id", _opt(book.community_id, QuotedText)),
        ("cover_url", _opt(book.cover_url, QuotedText)),
        ("cover_link", _opt(cover_name, QuotedText)),
    ]


def render_note(book: BookRecord, cover_path: str | PurePath | None = None) -> str:
    """Render the full note text for a book.

    Args:
        book: The record to render.
        cover_path: Location of the stored cover image, if one was resolved.
            Only its base name ends up in the note, since Obsidian resolves
            embeds by file name.

    Returns:
        The note text, ending with a newline.
    """
    cover_name = PurePath(cover_path).name if cover_path else None

    parts = [render_block(note_fields(book, cover_name))]
    if cover_name:
        parts.append(f"![[{cover_name}]]")
    parts.append("")
    for section in BODY_SECTIONS:
        parts.append(f"# {section}")
        parts.append("")
    return "\n".join(parts)
