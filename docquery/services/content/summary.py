"""Corpus statistics and table-of-contents outline."""

from __future__ import annotations

import re

from docquery.services.content.headings import iter_headings, split_lines
from docquery.services.content.models import ContentSummary, Heading

WHITESPACE_RUN = re.compile(r"\s+")
OUTLINE_INDENT = "  "


def outline_entry(heading: Heading) -> str:
    return f"{OUTLINE_INDENT * (heading.level - 1)}- {heading.title}"


def count_words(text: str) -> int:
    # Empty edge tokens from the split are counted, e.g. "" -> 1, " a " -> 3.
    return len(WHITESPACE_RUN.split(text))


def summarize(text: str) -> ContentSummary:
    outline = [outline_entry(h) for h in iter_headings(split_lines(text))]
    return ContentSummary(
        word_count=count_words(text),
        char_count=len(text),
        section_count=len(outline),
        outline=outline,
    )
