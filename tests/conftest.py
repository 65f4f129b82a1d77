# ABOUTME: Shared pytest fixtures for shelfnotes tests.
# ABOUTME: Provides a sample export CSV and a ready-to-use vault layout.

from pathlib import Path

import pytest

from shelfnotes.core.vault import VaultLayout
from tests.fixtures.fakes import write_export
from tests.fixtures.goodreads_rows import DUNE_ROW, GOOD_OMENS_ROW, MISSING_AUTHOR_ROW


@pytest.fixture
def export_csv(tmp_path: Path) -> Path:
    """Export with two good books and one row missing its author."""
    return write_export(
        tmp_path / "goodreads_library_export.csv",
        [DUNE_ROW, MISSING_AUTHOR_ROW, GOOD_OMENS_ROW],
    )


@pytest.fixture
def layout(tmp_path: Path) -> VaultLayout:
    """A vault layout whose directories already exist."""
    vault_layout = VaultLayout(vault=tmp_path / "vault")
    vault_layout.ensure()
    return vault_layout
