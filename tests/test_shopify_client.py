"""Remote catalog client: request shape and failure collapsing."""

import asyncio
import json

import httpx

from conftest import ENDPOINT, TOKEN
from shopify_mcp.query import build_products_query
from shopify_mcp.shopify_client import CatalogClient, CatalogResponse, TransportFailure


def run(client, term="shoes"):
    document, variables = build_products_query(term)
    return asyncio.run(client.execute(document, variables))


def test_posts_query_and_variables_with_auth_headers(client_for):
    client = client_for({"data": {"products": {"edges": []}}})

    outcome = run(client, 'say "hi"')

    assert isinstance(outcome, CatalogResponse)
    request = client.sent[0]
    assert request.method == "POST"
    assert str(request.url) == ENDPOINT
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-Shopify-Access-Token"] == TOKEN
    payload = json.loads(request.content)
    assert payload["variables"] == {"searchQuery": 'say "hi"'}
    assert payload["query"].startswith("query SearchProducts")


def test_application_errors_are_returned_as_data(client_for):
    body = {"errors": [{"message": "Invalid search syntax"}]}

    outcome = run(client_for(body))

    assert outcome == CatalogResponse(body)


def test_error_status_with_json_body_is_not_raised(client_for):
    body = {"errors": "[API] Invalid API key or access token"}
    client = client_for(lambda request: httpx.Response(401, json=body))

    assert run(client) == CatalogResponse(body)


def test_network_exception_becomes_transport_failure(client_for):
    def reset(request):
        raise httpx.ConnectError("ECONNRESET", request=request)

    assert run(client_for(reset)) == TransportFailure("ECONNRESET")


def test_non_json_body_becomes_transport_failure(client_for):
    client = client_for(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    outcome = run(client)

    assert isinstance(outcome, TransportFailure)
    assert outcome.message


def test_non_object_json_becomes_transport_failure(client_for):
    client = client_for(lambda request: httpx.Response(200, json=["unexpected"]))

    assert run(client) == TransportFailure("Unexpected response body: list")


def test_exception_without_message_uses_its_type(client_for):
    def fail(request):
        raise httpx.ReadTimeout("", request=request)

    assert run(client_for(fail)) == TransportFailure("ReadTimeout")


def test_client_has_no_per_call_state():
    client = CatalogClient(ENDPOINT, TOKEN, transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))

    first = run(client, "a")
    second = run(client, "b")

    assert first == second == CatalogResponse({})
