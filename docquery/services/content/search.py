"""Case-insensitive line search with per-hit context windows."""

from __future__ import annotations

from typing import List

from docquery.services.content.headings import split_lines
from docquery.services.content.models import SearchHit


def search(text: str, query: str, context_lines: int) -> List[SearchHit]:
    """Return one hit per matching line, in line order.

    Each hit carries its own window; overlapping windows are not merged.
    """
    span = max(0, context_lines)
    lines = split_lines(text)
    needle = query.lower()
    hits: List[SearchHit] = []
    for idx, line in enumerate(lines):
        if needle not in line.lower():
            continue
        start = max(0, idx - span)
        end = min(len(lines), idx + span + 1)
        hits.append(
            SearchHit(line_index=idx, context_start=start, context_end=end, lines=lines[start:end])
        )
    return hits
