"""Terminal client that reuses the in-process search pipeline."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Iterable, List

from mcp.types import TextContent

from shopify_mcp.config import ConfigurationError, settings
from shopify_mcp.logging_config import configure_logging
from shopify_mcp.search import search_products
from shopify_mcp.shopify_client import CatalogClient, get_catalog_client


async def perform_query(client: CatalogClient, query: str) -> List[TextContent]:
    return await search_products(client, query)


def print_envelope(content: List[TextContent]) -> None:
    for block in content:
        print(block.text)


def interactive_shell(client: CatalogClient) -> None:
    print("Interactive catalog search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not query:
            continue
        if query.lower() in {"exit", "quit"}:
            return
        print_envelope(asyncio.run(perform_query(client, query)))


def batch_mode(client: CatalogClient, file_path: Path) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            print(f"# {query}")
            print_envelope(asyncio.run(perform_query(client, query)))


def main(argv: Iterable[str] | None = None, client: CatalogClient | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search the configured Shopify catalog")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(settings.log_level)
    if client is None:
        try:
            client = get_catalog_client()
        except ConfigurationError as exc:
            print(exc, file=sys.stderr)
            return 2

    if args.batch:
        batch_mode(client, args.batch)
        return 0
    if args.query:
        print_envelope(asyncio.run(perform_query(client, args.query)))
        return 0
    interactive_shell(client)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
