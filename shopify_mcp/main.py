"""FastAPI application serving the catalog search over plain HTTP.

Useful for inspecting what the MCP tool would answer without an MCP host.
"""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query

from .config import ConfigurationError, settings
from .formatter import envelope_to_dict
from .logging_config import configure_logging
from .search import search_products
from .shopify_client import CatalogClient, get_catalog_client

logger = logging.getLogger(__name__)


def create_app(client: CatalogClient) -> FastAPI:
    app = FastAPI(title="Shopify Catalog Search")

    @app.get("/health")
    async def health() -> dict:
        return {
            "store": settings.shopify_store_domain,
            "apiVersion": settings.shopify_api_version,
            "endpoint": client.endpoint,
        }

    @app.get("/search")
    async def search(q: str = Query(..., description="Search query")) -> dict:
        if not q.strip():
            raise HTTPException(status_code=400, detail="Query must not be empty")
        content = await search_products(client, q)
        return envelope_to_dict(content)

    return app


def run() -> int:
    configure_logging(settings.log_level)
    try:
        client = get_catalog_client()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    uvicorn.run(create_app(client), host=settings.http_host, port=settings.http_port, log_config=None)
    return 0
