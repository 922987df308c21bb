"""Query operations over the cached blog export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from docquery.config import Settings
from docquery.services.content.articles import (
    articles_listing,
    group_articles_by_year,
    render_articles_summary,
)
from docquery.services.content.cache import DocumentCache, FetchFn
from docquery.services.content.fetcher import HttpDocumentFetcher
from docquery.services.content.models import FetchFailure, OperationResult
from docquery.services.content.search import search
from docquery.services.content.sections import extract_section
from docquery.services.content.summary import summarize

TRUNCATION_MARKER = "... (content truncated)"


@dataclass(frozen=True)
class QueryDefaults:
    """Default argument values for each operation."""

    search_context_lines: int = 3
    include_subsections: bool = True
    max_length: int = 50000

    @classmethod
    def from_settings(cls, settings: Settings) -> "QueryDefaults":
        return cls(
            search_context_lines=settings.search_context_lines,
            include_subsections=settings.section_include_subsections,
            max_length=settings.full_content_max_length,
        )


class ContentEngine:
    """Resolves document text through the cache and renders operation results.

    Fetch failures are caught here and returned as error results; they never
    propagate to the transport.
    """

    def __init__(
        self,
        fetch: FetchFn,
        *,
        content_source: str,
        listing_source: str,
        site_name: str,
        cache: Optional[DocumentCache] = None,
        defaults: Optional[QueryDefaults] = None,
    ) -> None:
        self._fetch = fetch
        self.content_source = content_source
        self.listing_source = listing_source
        self.site_name = site_name
        self.cache = cache if cache is not None else DocumentCache()
        self.defaults = defaults or QueryDefaults()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentEngine":
        fetcher = HttpDocumentFetcher(
            user_agent=settings.fetch_user_agent, timeout_s=settings.fetch_timeout_seconds
        )
        return cls(
            fetcher.fetch,
            content_source=settings.content_url,
            listing_source=settings.listing_url,
            site_name=settings.site_name,
            cache=DocumentCache(ttl_seconds=settings.cache_ttl_seconds),
            defaults=QueryDefaults.from_settings(settings),
        )

    async def load_content(self) -> str:
        return await self.cache.get(self.content_source, self._fetch)

    async def load_listing(self) -> str:
        return await self.cache.get(self.listing_source, self._fetch)

    async def search_content(
        self, query: str, context_lines: Optional[int] = None
    ) -> OperationResult:
        if context_lines is None:
            context_lines = self.defaults.search_context_lines
        try:
            text = await self.load_content()
        except FetchFailure as exc:
            return _error("Error searching content", exc)

        hits = search(text, query, context_lines)
        if not hits:
            return OperationResult(f'No matches found for "{query}"')
        blocks = [f"--- Match at line {hit.line_number} ---\n{hit.context}\n" for hit in hits]
        return OperationResult(f'Found {len(hits)} matches for "{query}":\n\n' + "\n".join(blocks))

    async def get_section(
        self, section_title: str, include_subsections: Optional[bool] = None
    ) -> OperationResult:
        if include_subsections is None:
            include_subsections = self.defaults.include_subsections
        try:
            text = await self.load_content()
        except FetchFailure as exc:
            return _error("Error retrieving section", exc)

        lines = extract_section(text, section_title, include_subsections)
        if lines is None:
            return OperationResult(f'No section found with title containing "{section_title}"')
        return OperationResult("\n".join(lines))

    async def get_full_content(self, max_length: Optional[int] = None) -> OperationResult:
        if max_length is None:
            max_length = self.defaults.max_length
        max_length = max(0, max_length)
        try:
            text = await self.load_content()
        except FetchFailure as exc:
            return _error("Error retrieving content", exc)

        body = text
        if len(text) > max_length:
            body = f"{text[:max_length]}\n\n{TRUNCATION_MARKER}"
        return OperationResult(
            f"Content from {self.site_name} ({len(text)} characters):\n\n{body}"
        )

    async def get_content_summary(self) -> OperationResult:
        try:
            text = await self.load_content()
        except FetchFailure as exc:
            return _error("Error generating summary", exc)

        summary = summarize(text)
        return OperationResult(
            f"Content Summary from {self.site_name}:\n\n"
            f"Stats:\n"
            f"- {summary.word_count} words\n"
            f"- {summary.char_count} characters\n"
            f"- {summary.section_count} sections\n\n"
            f"Table of Contents:\n" + "\n".join(summary.outline)
        )

    async def get_articles(self) -> Dict[str, Any]:
        """Article listing as a JSON-ready dict.

        On fetch failure the listing is empty and carries an ``error`` message.
        """
        try:
            text = await self.load_listing()
        except FetchFailure as exc:
            failure = _error("Error retrieving articles", exc)
            return {"total": 0, "articles": [], "years": [], "error": failure.text}
        return articles_listing(text)

    async def get_articles_summary(self) -> OperationResult:
        try:
            text = await self.load_listing()
        except FetchFailure as exc:
            return _error("Error retrieving articles", exc)
        return OperationResult(render_articles_summary(group_articles_by_year(text)))


def _error(prefix: str, exc: FetchFailure) -> OperationResult:
    logger.warning("{}: {}", prefix, exc)
    return OperationResult(f"{prefix}: {exc}", is_error=True)
