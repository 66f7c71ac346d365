"""GraphQL document for the product search.

The search term is bound through the ``$searchQuery`` variable and never
interpolated into the document, so quotes, braces or GraphQL keywords in user
input cannot change the shape of the query.
"""
from __future__ import annotations

from typing import Dict, Tuple

# Shopify page sizes; only the first page is ever requested.
PRODUCTS_PAGE_SIZE = 10
VARIANTS_PER_PRODUCT = 3

PRODUCTS_QUERY = f"""
query SearchProducts($searchQuery: String!) {{
  products(first: {PRODUCTS_PAGE_SIZE}, query: $searchQuery) {{
    edges {{
      node {{
        id
        title
        handle
        descriptionHtml
        productType
        vendor
        tags
        status
        featuredImage {{
          url
          altText
        }}
        variants(first: {VARIANTS_PER_PRODUCT}) {{
          edges {{
            node {{
              id
              title
              sku
              price
              inventoryQuantity
            }}
          }}
        }}
      }}
    }}
  }}
}}
""".strip()


def build_products_query(search_term: str) -> Tuple[str, Dict[str, str]]:
    return PRODUCTS_QUERY, {"searchQuery": search_term}
