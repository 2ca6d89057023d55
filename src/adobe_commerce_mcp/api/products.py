"""
Products API module.

Provides resource functions for catalog product operations:
- GET    /products                               - Search products
- GET    /products/{sku}                         - Retrieve a product by SKU
- POST   /products                               - Create a product
- PUT    /products/{sku}                         - Update a product
- DELETE /products/{sku}                         - Delete a product
- POST   /products/{sku}/websites                - Assign a product to a website
- DELETE /products/{sku}/websites/{websiteId}    - Remove a product from a website
"""

from typing import Any

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import (
    SearchCriteria,
    build_search_criteria_query,
    encode_component,
)
from adobe_commerce_mcp.types import (
    ApiResponse,
    ProductData,
    api_error_response,
    api_success_response,
)


def get_products(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[ProductData]]:
    """Search products with search criteria."""
    endpoint = f"/products?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_product_by_sku(
    client: AdobeCommerceClient, sku: str
) -> ApiResponse[ProductData]:
    """Retrieve a single product by SKU."""
    endpoint = f"/products/{encode_component(sku)}"
    if not sku:
        return ApiResponse(success=False, endpoint=endpoint, error="sku is required")
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def create_product(
    client: AdobeCommerceClient, product: ProductData
) -> ApiResponse[ProductData]:
    """Create a new product."""
    endpoint = "/products"
    try:
        data = client.post(endpoint, {"product": product})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_product(
    client: AdobeCommerceClient, sku: str, product: dict[str, Any]
) -> ApiResponse[ProductData]:
    """Update an existing product; only the given fields are changed."""
    endpoint = f"/products/{encode_component(sku)}"
    if not sku:
        return ApiResponse(success=False, endpoint=endpoint, error="sku is required")
    try:
        data = client.put(endpoint, {"product": {**product, "sku": sku}})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_product(client: AdobeCommerceClient, sku: str) -> ApiResponse[bool]:
    """Delete a product by SKU."""
    endpoint = f"/products/{encode_component(sku)}"
    if not sku:
        return ApiResponse(success=False, endpoint=endpoint, error="sku is required")
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def assign_product_to_website(
    client: AdobeCommerceClient, sku: str, website_id: int
) -> ApiResponse[bool]:
    """Make a product available on a website."""
    endpoint = f"/products/{encode_component(sku)}/websites"
    try:
        data = client.post(
            endpoint, {"productWebsiteLink": {"sku": sku, "website_id": website_id}}
        )
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def remove_product_from_website(
    client: AdobeCommerceClient, sku: str, website_id: int
) -> ApiResponse[bool]:
    """Remove a product from a website."""
    endpoint = f"/products/{encode_component(sku)}/websites/{website_id}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
