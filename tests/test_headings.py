from docquery.services.content.headings import classify, iter_headings, split_lines
from docquery.services.content.models import Heading


def test_classify_levels_and_titles() -> None:
    assert classify("# Title") == Heading(level=1, title="Title")
    assert classify("###### Deep one", 7) == Heading(level=6, title="Deep one", line_index=7)
    assert classify("   ##   Indented  ") == Heading(level=2, title="Indented")


def test_classify_rejects_body_text() -> None:
    assert classify("plain text") is None
    assert classify("") is None
    assert classify("#") is None
    assert classify("#   ") is None
    assert classify("#NoSpace") is None
    assert classify("####### seven hashes") is None
    assert classify("text # not a heading") is None


def test_classify_keeps_inner_hashes_in_title() -> None:
    heading = classify("## C# tips #1")
    assert heading is not None
    assert heading.title == "C# tips #1"


def test_iter_headings_reports_line_indexes(blog_text: str) -> None:
    headings = list(iter_headings(split_lines(blog_text)))
    assert [h.title for h in headings[:3]] == ["Halans Blog", "About", "Contact"]
    assert headings[0].line_index == 0
    assert headings[1].line_index == 4
    assert len(headings) == 9


def test_split_lines_keeps_trailing_empty_line() -> None:
    assert split_lines("a\nb\n") == ["a", "b", ""]


def test_classify_ignores_byte_order_mark() -> None:
    assert classify("\ufeff# Title") == Heading(level=1, title="Title")
    headings = list(iter_headings(split_lines("\ufeff# First\nbody\n## Second")))
    assert [h.title for h in headings] == ["First", "Second"]
