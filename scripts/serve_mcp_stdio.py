"""Run the content query MCP server over stdio."""

from __future__ import annotations

import argparse
import asyncio

from docquery.config import get_settings
from docquery.logging_setup import configure_logging
from docquery.mcp_server.stdio_server import run_stdio
from docquery.services.content.engine import ContentEngine


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve blog content queries over MCP stdio.")
    parser.add_argument("--content-url", default=settings.content_url, help="Primary document URL.")
    parser.add_argument("--listing-url", default=settings.listing_url, help="Article listing URL.")
    parser.add_argument("--log-level", default=settings.log_level, help="stderr log level.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    configure_logging(args.log_level)
    settings = get_settings().model_copy(
        update={"content_url": args.content_url, "listing_url": args.listing_url}
    )
    engine = ContentEngine.from_settings(settings)
    try:
        asyncio.run(run_stdio(engine))
    except KeyboardInterrupt:  # pragma: no cover - manual shutdown
        pass
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(main())
