# ABOUTME: Unit tests for rendering a BookRecord into note text.
# ABOUTME: Covers the full front-matter schema, omission of absent fields, and cover embeds.

from datetime import date
from pathlib import Path

from shelfnotes.formats.note import render_note
from shelfnotes.metadata import BookRecord, ReadStatus, normalize_row
from tests.fixtures.goodreads_rows import DUNE_ROW, GOOD_OMENS_ROW


def _front_matter(note: str) -> list[str]:
    lines = note.splitlines()
    assert lines[0] == "---"
    end = lines.index("---", 1)
    return lines[1:end]


class TestRenderNote:
    """Tests for render_note."""

    def test_minimal_record_has_only_title_and_author(self) -> None:
        note = render_note(BookRecord(title="Dune", author="Frank Herbert"))
        assert _front_matter(note) == ['title: "Dune"', 'author: "Frank Herbert"']

    def test_full_record(self) -> None:
        note = render_note(normalize_row(DUNE_ROW))
        assert note == (
            "---\n"
            'title: "Dune"\n'
            'author: "Frank Herbert"\n'
            "total_page: 688\n"
            "date_read: 2021-03-14\n"
            "date_added: 2020-12-01\n"
            "read_status: read\n"
            "rating: ★★★★★\n"
            'isbn10: "0441013597"\n'
            'isbn13: "9780441013593"\n'
            "goodreads_rating: 4.27\n"
            'goodreads_id: "234225"\n'
            'cover_url: "https://covers.openlibrary.org/b/isbn/9780441013593-M.jpg"\n'
            "---\n"
            "\n"
            "# Description\n"
            "\n"
            "# Highlights\n"
        )

    def test_additional_authors_and_status(self) -> None:
        lines = _front_matter(render_note(normalize_row(GOOD_OMENS_ROW)))
        assert 'authors: "Neil Gaiman"' in lines
        assert "read_status: currently-reading" in lines
        assert not any(line.startswith("rating:") for line in lines)
        assert not any(line.startswith("cover_url:") for line in lines)

    def test_key_order(self) -> None:
        book = BookRecord(
            title="Dune",
            subtitle="Deluxe Edition",
            author="Frank Herbert",
            additional_authors=("Brian Herbert",),
            date_added=date(2020, 12, 1),
            read_status=ReadStatus.TO_READ,
            personal_rating=2,
        )
        keys = [line.split(":", 1)[0] for line in _front_matter(render_note(book))]
        assert keys == ["title", "subtitle", "author", "authors", "date_added", "read_status", "rating"]

    def test_rating_is_clamped(self) -> None:
        book = BookRecord(title="Dune", author="Frank Herbert", personal_rating=7)
        assert "rating: ★★★★★" in _front_matter(render_note(book))

    def test_cover_link_and_embed(self) -> None:
        book = normalize_row(DUNE_ROW)
        cover = Path("/vault/Books/resources/book%9780441013593.jpg")
        note = render_note(book, cover)
        assert 'cover_link: "book%9780441013593.jpg"' in _front_matter(note)
        assert "---\n![[book%9780441013593.jpg]]\n\n# Description" in note

    def test_no_cover_no_link(self) -> None:
        note = render_note(normalize_row(DUNE_ROW))
        assert "cover_link" not in note
        assert "![[" not in note

    def test_deterministic(self) -> None:
        book = normalize_row(DUNE_ROW)
        assert render_note(book, "book%9780441013593.jpg") == render_note(book, "book%9780441013593.jpg")
