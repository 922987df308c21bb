"""CLI runner for one-off queries against the blog export."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from docquery.config import get_settings
from docquery.logging_setup import configure_logging
from docquery.services.content.engine import ContentEngine
from docquery.services.content.models import OperationResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the blog content export.")
    parser.add_argument("--log-level", default="WARNING", help="stderr log level.")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search for a term.")
    search.add_argument("query")
    search.add_argument("--context-lines", type=int, default=None)

    section = sub.add_parser("section", help="Print a section by heading title.")
    section.add_argument("title")
    section.add_argument(
        "--no-subsections",
        action="store_true",
        help="Only list immediate child headings, without their content.",
    )

    full = sub.add_parser("full", help="Print the full document.")
    full.add_argument("--max-length", type=int, default=None)

    sub.add_parser("summary", help="Print stats and table of contents.")
    sub.add_parser("articles", help="Print the article listing as JSON.")
    sub.add_parser("articles-summary", help="Print articles grouped by year.")
    return parser


async def run(engine: ContentEngine, args: argparse.Namespace) -> OperationResult:
    if args.command == "search":
        return await engine.search_content(args.query, args.context_lines)
    if args.command == "section":
        include = False if args.no_subsections else None
        return await engine.get_section(args.title, include)
    if args.command == "full":
        return await engine.get_full_content(args.max_length)
    if args.command == "summary":
        return await engine.get_content_summary()
    if args.command == "articles-summary":
        return await engine.get_articles_summary()
    listing = await engine.get_articles()
    if "error" in listing:
        return OperationResult(listing["error"], is_error=True)
    return OperationResult(json.dumps(listing, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    engine = ContentEngine.from_settings(get_settings())
    result = asyncio.run(run(engine, args))
    if result.is_error:
        print(result.text, file=sys.stderr)
        return 1
    print(result.text)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
