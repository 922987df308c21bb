"""Article records parsed from `### YYYY` year headers and `####` article entries.

Listing format::

    ### 2024
    #### "Post title" https://example.com/post (2024-01-02)

Lines that do not follow the format are skipped without error.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Any, Dict, List, Optional

from docquery.services.content.headings import split_lines, trim_line
from docquery.services.content.models import ArticleRecord

YEAR_PATTERN = re.compile(r"^### ([0-9]{4})$")
ARTICLE_PATTERN = re.compile(
    r'^#### "(?P<title>[^"]+)" (?P<url>https?://\S+) \((?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})\)$'
)
UNDATED_LABEL = "Undated"


def _valid_date(value: str) -> bool:
    try:
        dt.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_article_line(line: str, year: str) -> Optional[ArticleRecord]:
    match = ARTICLE_PATTERN.match(trim_line(line))
    if not match or not _valid_date(match.group("date")):
        return None
    return ArticleRecord(
        title=match.group("title"),
        url=match.group("url"),
        date=match.group("date"),
        year=year,
    )


def _scan(text: str) -> tuple[List[ArticleRecord], Dict[str, List[ArticleRecord]]]:
    records: List[ArticleRecord] = []
    buckets: Dict[str, List[ArticleRecord]] = {}
    current_year = ""
    for line in split_lines(text):
        stripped = trim_line(line)
        year_match = YEAR_PATTERN.match(stripped)
        if year_match:
            current_year = year_match.group(1)
            buckets.setdefault(current_year, [])
            continue
        record = parse_article_line(stripped, current_year)
        if record is None:
            continue
        records.append(record)
        buckets.setdefault(current_year, []).append(record)
    return records, buckets


def extract_articles(text: str) -> List[ArticleRecord]:
    """Return article records in document order."""
    records, _ = _scan(text)
    return records


def group_articles_by_year(text: str) -> Dict[str, List[ArticleRecord]]:
    """Return year buckets ordered newest first; empty year buckets are kept."""
    _, buckets = _scan(text)
    return {year: buckets[year] for year in sorted(buckets, reverse=True)}


def render_articles_summary(groups: Dict[str, List[ArticleRecord]]) -> str:
    total = sum(len(items) for items in groups.values())
    year_count = sum(1 for year in groups if year)
    lines = [
        "Blog Articles Summary:",
        "",
        f"Total: {total} articles across {year_count} years",
    ]
    for year, items in groups.items():
        lines.append("")
        lines.append(f"{year or UNDATED_LABEL} ({len(items)} articles):")
        lines.extend(f"  - {item.title}" for item in items)
    return "\n".join(lines)


def articles_listing(text: str) -> Dict[str, Any]:
    """JSON-ready listing: total count, records and distinct non-empty years (newest first)."""
    records = extract_articles(text)
    years = sorted({record.year for record in records if record.year}, reverse=True)
    return {
        "total": len(records),
        "articles": [record.to_dict() for record in records],
        "years": years,
    }
