"""Shared fixtures: a catalog client wired to an in-memory Shopify stand-in."""

import json

import httpx
import pytest

from shopify_mcp.shopify_client import CatalogClient

ENDPOINT = "https://example.myshopify.com/admin/api/2024-10/graphql.json"
TOKEN = "shpat_test_token"


def product_node(pid, title, variants):
    return {
        "id": f"gid://shopify/Product/{pid}",
        "title": title,
        "handle": title.lower().replace(" ", "-"),
        "descriptionHtml": f"<p>{title}</p>",
        "productType": "Shoes",
        "vendor": "Acme",
        "tags": ["summer", "sale"],
        "status": "ACTIVE",
        "featuredImage": {"url": f"https://cdn.example.com/{pid}.png", "altText": None},
        "variants": {"edges": [{"node": variant} for variant in variants]},
    }


def variant_node(vid, title, price, sku=None, quantity=None):
    return {
        "id": f"gid://shopify/ProductVariant/{vid}",
        "title": title,
        "sku": sku,
        "price": price,
        "inventoryQuantity": quantity,
    }


def search_body(*nodes):
    return {"data": {"products": {"edges": [{"node": node} for node in nodes]}}}


@pytest.fixture
def two_products():
    return search_body(
        product_node(
            1,
            "Trail Runner",
            [
                variant_node(11, "Size 9", "89.90", sku="TR-9", quantity=4),
                variant_node(12, "Size 10", "89.90", sku="TR-10", quantity=0),
            ],
        ),
        product_node(2, "Canvas Slip On", []),
    )


@pytest.fixture
def client_for():
    """Build a client whose requests are answered by ``handler``.

    ``handler`` may be a dict (returned as the JSON body) or a callable taking
    the ``httpx.Request``. Sent requests are recorded on ``client.sent``.
    """

    def factory(handler):
        sent = []

        def respond(request):
            sent.append(request)
            if callable(handler):
                return handler(request)
            return httpx.Response(200, content=json.dumps(handler).encode("utf-8"))

        client = CatalogClient(ENDPOINT, TOKEN, transport=httpx.MockTransport(respond))
        client.sent = sent
        return client

    return factory
