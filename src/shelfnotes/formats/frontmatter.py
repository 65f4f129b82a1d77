# ABOUTME: Typed front-matter values and the block builder for note headers.
# ABOUTME: Each value class knows how to render itself; empty values drop their line.

from collections.abc import Iterable, Sequence as SequenceABC
from dataclasses import dataclass
from datetime import date
from typing import Protocol

DELIMITER = "---"
_DATE_FORMAT = "%Y-%m-%d"


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class FrontMatterValue(Protocol):
    def render(self) -> str: ...


@dataclass(frozen=True)
class Text:
    """Bare token, emitted as is (e.g. read status)."""

    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class QuotedText:
    value: str

    def render(self) -> str:
        return _quote(self.value)


@dataclass(frozen=True)
class Sequence:
    """List of strings flattened into one quoted, comma-joined string."""

    values: SequenceABC[str]

    def render(self) -> str:
        return _quote(",".join(self.values))


@dataclass(frozen=True)
class Integer:
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float:
    value: float

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Date:
    value: date

    def render(self) -> str:
        return self.value.strftime(_DATE_FORMAT)


@dataclass(frozen=True)
class Symbolic:
    """Pre-rendered symbol string such as a star rating."""

    symbols: str

    def render(self) -> str:
        return self.symbols


def _is_empty(rendered: str) -> bool:
    return not rendered.strip() or not rendered.strip().strip('"')


def render_line(key: str, value: FrontMatterValue | None) -> str | None:
    """Render one ``key: value`` line, or None when the value is absent or empty."""
    if value is None:
        return None
    rendered = value.render()
    if _is_empty(rendered):
        return None
    return f"{key}: {rendered}"


def render_block(fields: Iterable[tuple[str, FrontMatterValue | None]]) -> str:
    """Render an ordered set of fields as a delimited front-matter block.

    The result ends with the closing delimiter and no trailing newline.
    """
    lines = [DELIMITER]
    for key, value in fields:
        line = render_line(key, value)
        if line is not None:
            lines.append(line)
    lines.append(DELIMITER)
    return "\n".join(lines)
