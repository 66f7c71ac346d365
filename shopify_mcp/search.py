"""Product search pipeline: build, send, branch, format."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import List

from mcp.types import TextContent

from .formatter import format_outcome
from .normalize import has_errors
from .query import build_products_query
from .shopify_client import CatalogClient, TransportFailure

logger = logging.getLogger(__name__)


def _outcome_label(outcome) -> str:
    if isinstance(outcome, TransportFailure):
        return "transport_error"
    if has_errors(outcome.body):
        return "application_error"
    return "ok"


async def search_products(client: CatalogClient, search_term: str) -> List[TextContent]:
    t0 = perf_counter()
    document, variables = build_products_query(search_term)
    outcome = await client.execute(document, variables)
    t1 = perf_counter()
    content = format_outcome(search_term, outcome)
    t2 = perf_counter()

    logger.info(
        "timing: total=%.2fms remote=%.2fms format=%.2fms q=%r outcome=%s",
        (t2 - t0) * 1000,
        (t1 - t0) * 1000,
        (t2 - t1) * 1000,
        search_term,
        _outcome_label(outcome),
    )
    return content
