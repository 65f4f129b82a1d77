# ABOUTME: Reader for Goodreads "Export Library" CSV files.
# ABOUTME: Yields one header-keyed dict per book with whitespace-trimmed keys and values.

import csv
from collections.abc import Iterator
from pathlib import Path


class ExportReadError(Exception):
    """Raised when an export file cannot be opened or decoded."""


def read_export(path: Path) -> Iterator[dict[str, str]]:
    """Iterate over the rows of a CSV export.

    The file is decoded as utf-8-sig so a leading BOM does not end up in the
    first column name. Short rows leave their trailing columns out of the dict.

    Raises:
        ExportReadError: If the file cannot be opened, decoded, or parsed.
    """
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            for raw in reader:
                yield {
                    key.strip(): value.strip()
                    for key, value in raw.items()
                    if key is not None and value is not None
                }
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise ExportReadError(f"Cannot read export {path}: {exc}") from exc
