"""Flattening of Shopify connection-shaped responses.

Shopify wraps every list as ``{"edges": [{"node": ...}, ...]}``. The helpers
here remove that wrapping for products and their variants while leaving the
record values untouched. Any level of the path may be missing or ``null``;
that always degrades to an empty list.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from .models import Product, Variant

logger = logging.getLogger(__name__)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _nodes(connection: Any) -> List[Dict[str, Any]]:
    edges = _mapping(connection).get("edges")
    if not isinstance(edges, list):
        return []
    nodes = []
    for edge in edges:
        node = _mapping(edge).get("node")
        if isinstance(node, dict):
            nodes.append(node)
    return nodes


def has_errors(body: Dict[str, Any]) -> bool:
    return bool(body.get("errors"))


def _to_product(node: Dict[str, Any]) -> Product:
    fields = {key: value for key, value in node.items() if key != "variants"}
    variants = _nodes(node.get("variants"))
    try:
        return Product.model_validate({**fields, "variants": variants})
    except ValidationError as exc:
        # Keep the record as sent rather than dropping it from the results.
        logger.warning("Product %s has an unexpected shape: %s", node.get("id"), exc)
        return Product.model_construct(
            **fields, variants=[Variant.model_construct(**variant) for variant in variants]
        )


def normalize_products(body: Dict[str, Any]) -> List[Product]:
    """Return the products of a search response in the order Shopify ranked them."""

    products = _mapping(_mapping(body).get("data")).get("products")
    return [_to_product(node) for node in _nodes(products)]
