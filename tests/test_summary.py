from docquery.services.content.summary import count_words, summarize


def test_summary_outline_and_counts(blog_text: str) -> None:
    summary = summarize(blog_text)
    assert summary.section_count == 9
    assert summary.char_count == len(blog_text)
    assert summary.outline[0] == "- Halans Blog"
    assert summary.outline[1] == "  - About"
    assert summary.outline[2] == "    - Contact"
    assert "      - Hello world" in summary.outline


def test_summary_without_headings() -> None:
    summary = summarize("just words\nand more words")
    assert summary.section_count == 0
    assert summary.outline == []
    assert summary.word_count == 5


def test_word_count_keeps_edge_tokens() -> None:
    assert count_words("") == 1
    assert count_words("one two") == 2
    assert count_words(" one two\n") == 4


def test_summary_counts_heading_after_byte_order_mark() -> None:
    summary = summarize("\ufeff# Intro\ntext")
    assert summary.section_count == 1
    assert summary.outline == ["- Intro"]
