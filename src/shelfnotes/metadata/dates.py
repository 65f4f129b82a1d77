# ABOUTME: Tolerant date parsing for export columns like "Date Read" and "Date Added".
# ABOUTME: Returns None instead of raising when a value does not match the pattern.

from datetime import date, datetime

# Goodreads exports dates as 2021/03/14.
DEFAULT_DATE_FORMAT = "%Y/%m/%d"


def parse_date(raw: str | None, fmt: str = DEFAULT_DATE_FORMAT) -> date | None:
    """Parse a date string with a strptime-style pattern.

    Blank input and any value that does not match ``fmt`` yield None.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        return None
