"""Shopify Admin GraphQL client.

Every failure to obtain a decoded JSON object from the store (DNS, TLS,
connection resets, malformed bodies) is returned as a :class:`TransportFailure`
instead of being raised. GraphQL ``errors`` inside a decoded body are not a
transport concern and are handed back untouched in :class:`CatalogResponse`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional, Union

import httpx

from .config import settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"


@dataclass(frozen=True)
class CatalogResponse:
    body: Dict[str, Any]


@dataclass(frozen=True)
class TransportFailure:
    message: str


CatalogOutcome = Union[CatalogResponse, TransportFailure]


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class CatalogClient:
    """Posts GraphQL documents to one store; holds read-only connection settings."""

    def __init__(
        self,
        endpoint: str,
        access_token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint
        self._access_token = access_token
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            ACCESS_TOKEN_HEADER: self._access_token,
        }

    async def execute(self, document: str, variables: Dict[str, Any]) -> CatalogOutcome:
        payload = {"query": document, "variables": variables}
        try:
            # One AsyncClient per call; nothing is shared across invocations.
            async with httpx.AsyncClient(transport=self._transport) as http:
                response = await http.post(self.endpoint, json=payload, headers=self._headers())
            body = response.json()
        except Exception as exc:
            logger.warning("Shopify request to %s failed: %s", self.endpoint, _describe(exc))
            return TransportFailure(_describe(exc))

        if not isinstance(body, dict):
            logger.warning("Shopify returned a non-object body (status=%s)", response.status_code)
            return TransportFailure(f"Unexpected response body: {type(body).__name__}")
        logger.debug("Shopify responded status=%s keys=%s", response.status_code, sorted(body))
        return CatalogResponse(body)


@lru_cache(maxsize=1)
def get_catalog_client() -> CatalogClient:
    settings.validate()
    logger.info("Using Shopify endpoint %s", settings.graphql_endpoint)
    return CatalogClient(settings.graphql_endpoint, settings.shopify_access_token)
