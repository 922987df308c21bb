"""Heading recognition for `#`-prefixed lines."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from docquery.services.content.models import Heading

HEADING_MARKER = "#"
BYTE_ORDER_MARK = "\ufeff"
MAX_HEADING_LEVEL = 6


def split_lines(text: str) -> list[str]:
    """Split on newline only; a trailing newline yields a final empty line."""
    return text.split("\n")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and a byte order mark."""
    return line.strip().strip(BYTE_ORDER_MARK).strip()


def classify(line: str, line_index: int = 0) -> Optional[Heading]:
    """Return a Heading for `#{1,6}<whitespace><title>` lines, None for body text."""
    stripped = trim_line(line)
    level = 0
    length = len(stripped)
    while level < length and stripped[level] == HEADING_MARKER:
        level += 1
        if level > MAX_HEADING_LEVEL:
            return None
    if level == 0 or level >= length or not stripped[level].isspace():
        return None
    pos = level
    while pos < length and stripped[pos].isspace():
        pos += 1
    title = stripped[pos:]
    if not title:
        return None
    return Heading(level=level, title=title, line_index=line_index)


def iter_headings(lines: Iterable[str]) -> Iterator[Heading]:
    for idx, line in enumerate(lines):
        heading = classify(line, idx)
        if heading is not None:
            yield heading
