"""Pydantic models for tool input and normalized catalog records."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, alias="product", description="Free-text product search")


class CatalogRecord(BaseModel):
    """Base for platform records: unknown fields are kept, nothing is required."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class FeaturedImage(CatalogRecord):
    url: str | None = None
    altText: str | None = None


class Variant(CatalogRecord):
    id: str | None = None
    title: str | None = None
    sku: str | None = None
    # Decimal string as sent by Shopify; never converted to float.
    price: str | None = None
    inventoryQuantity: int | None = None


class Product(CatalogRecord):
    id: str | None = None
    title: str | None = None
    handle: str | None = None
    descriptionHtml: str | None = None
    productType: str | None = None
    vendor: str | None = None
    tags: list[str] | None = None
    status: str | None = None
    featuredImage: FeaturedImage | None = None
    variants: list[Variant] = Field(default_factory=list)

    def to_output(self) -> dict:
        return self.model_dump(exclude_unset=True)
