"""Heading-addressed section extraction."""

from __future__ import annotations

from typing import List, Optional

from docquery.services.content.headings import classify, split_lines


def extract_section(
    text: str, title_query: str, include_subsections: bool = True
) -> Optional[List[str]]:
    """Return the lines of the first section whose heading title contains `title_query`.

    The section runs from the matching heading up to (not including) the next
    heading of the same or a shallower level. With `include_subsections` off,
    only the section's own body and its immediate child headings are kept.
    Returns None when no heading matches.
    """
    query = title_query.lower()
    results: List[str] = []
    in_section = False
    in_subsection = False
    section_level = 0

    for idx, line in enumerate(split_lines(text)):
        heading = classify(line, idx)
        if heading is not None:
            if not in_section:
                if query in heading.title.lower():
                    in_section = True
                    section_level = heading.level
                    results.append(line)
                continue
            if heading.level <= section_level:
                break
            in_subsection = True
            if include_subsections or heading.level == section_level + 1:
                results.append(line)
        elif in_section and (include_subsections or not in_subsection):
            results.append(line)

    return results if in_section else None
