"""MCP server exposing the content engine over stdio.

stdout carries JSON-RPC frames only; logging goes to stderr.
"""

from __future__ import annotations

import json
from typing import Any

import mcp.server.stdio
import mcp.types as types
from loguru import logger
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from pydantic import AnyUrl

from docquery.services.content.engine import ContentEngine
from docquery.services.content.models import OperationResult

SERVER_NAME = "docquery-content-server"
ARTICLES_URI = "blog://articles"
ARTICLES_SUMMARY_URI = "blog://articles/summary"


def tool_definitions(engine: ContentEngine) -> list[types.Tool]:
    defaults = engine.defaults
    site = engine.site_name
    return [
        types.Tool(
            name="search_content",
            description=f"Search for specific terms in {site} content",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {"type": "string", "description": "Search query to find content"},
                    "context_lines": {
                        "type": "integer",
                        "description": "Number of context lines around matches "
                        f"(default: {defaults.search_context_lines})",
                        "default": defaults.search_context_lines,
                        "minimum": 0,
                    },
                },
                "required": ["query"],
            },
        ),
        types.Tool(
            name="get_section",
            description="Retrieve a specific section by title/heading",
            inputSchema={
                "type": "object",
                "properties": {
                    "section_title": {
                        "type": "string",
                        "description": "Title or heading to find in the content",
                    },
                    "include_subsections": {
                        "type": "boolean",
                        "description": "Include content under subsections "
                        f"(default: {str(defaults.include_subsections).lower()})",
                        "default": defaults.include_subsections,
                    },
                },
                "required": ["section_title"],
            },
        ),
        types.Tool(
            name="get_full_content",
            description=f"Retrieve the complete content from {site}",
            inputSchema={
                "type": "object",
                "properties": {
                    "max_length": {
                        "type": "integer",
                        "description": "Maximum characters to return "
                        f"(default: {defaults.max_length})",
                        "default": defaults.max_length,
                        "minimum": 0,
                    },
                },
            },
        ),
        types.Tool(
            name="get_content_summary",
            description="Generate a summary and table of contents",
            inputSchema={"type": "object", "properties": {}},
        ),
    ]


async def call_tool(engine: ContentEngine, name: str, arguments: dict[str, Any]) -> OperationResult:
    """Dispatch one tool call to the engine."""
    if name == "search_content":
        return await engine.search_content(
            str(arguments["query"]), _optional_int(arguments.get("context_lines"))
        )
    if name == "get_section":
        include = arguments.get("include_subsections")
        return await engine.get_section(
            str(arguments["section_title"]), None if include is None else bool(include)
        )
    if name == "get_full_content":
        return await engine.get_full_content(_optional_int(arguments.get("max_length")))
    if name == "get_content_summary":
        return await engine.get_content_summary()
    raise ValueError(f"Unknown tool: {name}")


async def read_resource(engine: ContentEngine, uri: str) -> ReadResourceContents:
    if uri == ARTICLES_URI:
        listing = await engine.get_articles()
        return ReadResourceContents(
            content=json.dumps(listing, ensure_ascii=False, indent=2),
            mime_type="application/json",
        )
    if uri == ARTICLES_SUMMARY_URI:
        result = await engine.get_articles_summary()
        return ReadResourceContents(content=result.text, mime_type="text/plain")
    raise ValueError(f"Unknown resource: {uri}")


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def build_server(engine: ContentEngine) -> Server:
    server: Server = Server(SERVER_NAME)

    @server.list_tools()  # type: ignore[misc]
    async def handle_list_tools() -> list[types.Tool]:
        return tool_definitions(engine)

    @server.call_tool()  # type: ignore[misc]
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        result = await call_tool(engine, name, arguments or {})
        return [types.TextContent(type="text", text=result.text)]

    @server.list_resources()  # type: ignore[misc]
    async def handle_list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=AnyUrl(ARTICLES_URI),
                name="articles",
                description=f"All articles published on {engine.site_name} as JSON",
                mimeType="application/json",
            ),
            types.Resource(
                uri=AnyUrl(ARTICLES_SUMMARY_URI),
                name="articles-summary",
                description="Articles grouped by year, newest first",
                mimeType="text/plain",
            ),
        ]

    @server.read_resource()  # type: ignore[misc]
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        return [await read_resource(engine, str(uri))]

    return server


async def run_stdio(engine: ContentEngine) -> None:
    server = build_server(engine)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("{} running on stdio", SERVER_NAME)
        await server.run(read_stream, write_stream, server.create_initialization_options())
