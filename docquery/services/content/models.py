"""Typed records derived from the cached document text."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


class ContentError(Exception):
    """Base class for content engine errors."""


class FetchFailure(ContentError):
    """Raised when the upstream document could not be retrieved."""

    def __init__(
        self,
        source_id: str,
        *,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.source_id = source_id
        self.status = status
        self.cause = cause
        if status is not None:
            message = f"Failed to fetch content: {status}"
        else:
            message = f"Error fetching content: {cause}"
        super().__init__(message)


@dataclass(frozen=True)
class CacheEntry:
    text: str
    fetched_at: float


@dataclass(frozen=True)
class Heading:
    level: int
    title: str
    line_index: int = 0


@dataclass(frozen=True)
class SearchHit:
    line_index: int
    context_start: int
    context_end: int
    lines: List[str] = field(default_factory=list)

    @property
    def line_number(self) -> int:
        return self.line_index + 1

    @property
    def context(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class ContentSummary:
    word_count: int
    char_count: int
    section_count: int
    outline: List[str]


@dataclass(frozen=True)
class ArticleRecord:
    title: str
    url: str
    date: str
    year: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OperationResult:
    """Rendered outcome of one query operation."""

    text: str
    is_error: bool = False
