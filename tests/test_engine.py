import pytest

from docquery.services.content.engine import TRUNCATION_MARKER, ContentEngine, QueryDefaults
from docquery.services.content.models import FetchFailure

CONTENT = "https://example.com/llms-full.txt"
LISTING = "https://example.com/llms.txt"


def make_engine(documents: dict[str, str], defaults: QueryDefaults | None = None) -> ContentEngine:
    async def fetch(source_id: str) -> str:
        if source_id not in documents:
            raise FetchFailure(source_id, status=500)
        return documents[source_id]

    return ContentEngine(
        fetch,
        content_source=CONTENT,
        listing_source=LISTING,
        site_name="example.com",
        defaults=defaults,
    )


@pytest.fixture
def engine(blog_text: str, listing_text: str) -> ContentEngine:
    return make_engine({CONTENT: blog_text, LISTING: listing_text})


@pytest.mark.asyncio
async def test_search_renders_matches(engine: ContentEngine) -> None:
    result = await engine.search_content("caching", context_lines=0)
    assert not result.is_error
    assert result.text == (
        'Found 1 matches for "caching":\n\n'
        "--- Match at line 21 ---\n#### Caching strategies\n"
    )


@pytest.mark.asyncio
async def test_search_uses_configured_default_context() -> None:
    engine = make_engine(
        {CONTENT: "a\nb\nneedle\nc\nd", LISTING: ""},
        defaults=QueryDefaults(search_context_lines=1),
    )
    result = await engine.search_content("needle")
    assert "--- Match at line 3 ---\nb\nneedle\nc\n" in result.text


@pytest.mark.asyncio
async def test_search_without_matches(engine: ContentEngine) -> None:
    result = await engine.search_content("kubernetes")
    assert result.text == 'No matches found for "kubernetes"'
    assert not result.is_error


@pytest.mark.asyncio
async def test_get_section_and_not_found(engine: ContentEngine) -> None:
    result = await engine.get_section("about")
    assert result.text.startswith("## About\n")
    assert "### Contact" in result.text

    missing = await engine.get_section("nothing like this")
    assert missing.text == 'No section found with title containing "nothing like this"'
    assert not missing.is_error


@pytest.mark.asyncio
async def test_full_content_truncation() -> None:
    engine = make_engine({CONTENT: "0123456789", LISTING: ""})
    result = await engine.get_full_content(max_length=4)
    assert result.text == (
        f"Content from example.com (10 characters):\n\n0123\n\n{TRUNCATION_MARKER}"
    )


@pytest.mark.asyncio
async def test_full_content_not_truncated_when_within_limit() -> None:
    engine = make_engine({CONTENT: "0123456789", LISTING: ""})
    for limit in (10, 50000):
        result = await engine.get_full_content(max_length=limit)
        assert result.text == "Content from example.com (10 characters):\n\n0123456789"


@pytest.mark.asyncio
async def test_content_summary(engine: ContentEngine) -> None:
    result = await engine.get_content_summary()
    assert result.text.startswith("Content Summary from example.com:\n\nStats:\n- ")
    assert "- 9 sections\n\nTable of Contents:\n- Halans Blog\n  - About" in result.text


@pytest.mark.asyncio
async def test_articles_use_listing_source(engine: ContentEngine) -> None:
    listing = await engine.get_articles()
    assert listing["total"] == 4
    summary = await engine.get_articles_summary()
    assert "2024 (2 articles):\n  - Building an MCP server\n  - Caching strategies" in summary.text
    assert engine.cache.cached_sources() == [LISTING]


@pytest.mark.asyncio
async def test_fetch_failure_renders_error_result() -> None:
    engine = make_engine({})
    search = await engine.search_content("x")
    assert search.is_error
    assert search.text == "Error searching content: Failed to fetch content: 500"
    assert (await engine.get_section("x")).text.startswith("Error retrieving section:")
    assert (await engine.get_full_content()).text.startswith("Error retrieving content:")
    assert (await engine.get_content_summary()).text.startswith("Error generating summary:")
    assert (await engine.get_articles_summary()).is_error
    listing = await engine.get_articles()
    assert listing["total"] == 0
    assert listing["articles"] == []
    assert listing["error"] == "Error retrieving articles: Failed to fetch content: 500"


@pytest.mark.asyncio
async def test_repeated_operations_fetch_once(engine: ContentEngine) -> None:
    calls: list[str] = []
    inner = engine._fetch

    async def counting(source_id: str) -> str:
        calls.append(source_id)
        return await inner(source_id)

    engine._fetch = counting
    first = await engine.search_content("post")
    second = await engine.search_content("post")
    await engine.get_content_summary()
    assert first == second
    assert calls == [CONTENT]
