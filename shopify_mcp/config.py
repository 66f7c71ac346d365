"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when required store settings are missing."""


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _bare_domain(domain: str) -> str:
    domain = domain.strip()
    for prefix in ("https://", "http://"):
        if domain.startswith(prefix):
            domain = domain[len(prefix):]
    return domain.rstrip("/")


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    shopify_store_domain: str = _get_env("SHOPIFY_STORE_DOMAIN", "")
    shopify_access_token: str = _get_env("SHOPIFY_ACCESS_TOKEN", "")
    shopify_api_version: str = _get_env("SHOPIFY_API_VERSION", "2024-10")
    http_host: str = _get_env("HTTP_HOST", "127.0.0.1")
    http_port: int = int(_get_env("HTTP_PORT", "8000"))
    log_level: str = _get_env("LOG_LEVEL", "INFO")

    @property
    def graphql_endpoint(self) -> str:
        domain = _bare_domain(self.shopify_store_domain)
        return f"https://{domain}/admin/api/{self.shopify_api_version}/graphql.json"

    def missing(self) -> List[str]:
        missing = []
        if not _bare_domain(self.shopify_store_domain):
            missing.append("SHOPIFY_STORE_DOMAIN")
        if not self.shopify_access_token.strip():
            missing.append("SHOPIFY_ACCESS_TOKEN")
        return missing

    def validate(self) -> None:
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )


settings = Settings()
