"""Text envelopes returned to the MCP host."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from mcp.types import TextContent

from .models import Product
from .normalize import has_errors, normalize_products
from .shopify_client import CatalogOutcome, TransportFailure

ERROR_PREFIX = "Error fetching products:"


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def format_transport_failure(failure: TransportFailure) -> List[TextContent]:
    return [_text(f"{ERROR_PREFIX} {failure.message}")]


def format_application_errors(errors: Any) -> List[TextContent]:
    return [_text(f"{ERROR_PREFIX} {json.dumps(errors, ensure_ascii=False)}")]


def format_products(search_term: str, products: Sequence[Product]) -> List[TextContent]:
    if not products:
        return [_text(f'No products found matching "{search_term}"')]
    serialized = json.dumps([product.to_output() for product in products], indent=2, ensure_ascii=False)
    return [
        _text(f'Found {len(products)} products matching "{search_term}":'),
        _text(serialized),
    ]


def format_outcome(search_term: str, outcome: CatalogOutcome) -> List[TextContent]:
    """Map a remote outcome onto exactly one of the four result envelopes."""

    if isinstance(outcome, TransportFailure):
        return format_transport_failure(outcome)
    if has_errors(outcome.body):
        return format_application_errors(outcome.body["errors"])
    return format_products(search_term, normalize_products(outcome.body))


def envelope_to_dict(content: Sequence[TextContent]) -> Dict[str, Any]:
    return {"content": [block.model_dump(include={"type", "text"}) for block in content]}
