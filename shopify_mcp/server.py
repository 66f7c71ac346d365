"""
MCP server exposing Shopify catalog search.

A single tool, ``fetch-products``, is registered. It takes a free-text
``product`` argument and answers with text blocks describing the matching
products of the configured store.
"""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import ConfigurationError, settings
from .logging_config import configure_logging
from .models import SearchRequest
from .search import search_products
from .shopify_client import CatalogClient, get_catalog_client

logger = logging.getLogger(__name__)

SERVER_NAME = "shopify-mcp"
SERVER_VERSION = "1.0.0"
FETCH_PRODUCTS = "fetch-products"

FETCH_PRODUCTS_TOOL = Tool(
    name=FETCH_PRODUCTS,
    description="Fetch products from a given shopify store",
    inputSchema={
        "type": "object",
        "properties": {
            "product": {"type": "string", "description": "the product to fetch"},
        },
        "required": ["product"],
    },
)


async def handle_fetch_products(client: CatalogClient, arguments: Dict[str, Any]) -> List[TextContent]:
    request = SearchRequest.model_validate(arguments)
    return await search_products(client, request.query)


def create_server(client: CatalogClient) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return [FETCH_PRODUCTS_TOOL]

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        if name == FETCH_PRODUCTS:
            return await handle_fetch_products(client, arguments or {})
        raise ValueError(f"Unknown tool: {name}")

    return server


async def serve(client: CatalogClient) -> None:
    server = create_server(client)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> int:
    configure_logging(settings.log_level)
    try:
        client = get_catalog_client()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Starting %s over stdio", SERVER_NAME)
    asyncio.run(serve(client))
    return 0


if __name__ == "__main__":
    sys.exit(main())
