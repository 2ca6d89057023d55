"""
Categories API module.

Provides resource functions for catalog category operations:
- GET    /categories/list                          - Search categories
- GET    /categories/{id}                          - Retrieve a category
- GET    /categories                               - Retrieve the category tree
- POST   /categories                               - Create a category
- PUT    /categories/{id}                          - Update a category
- DELETE /categories/{id}                          - Delete a category
- PUT    /categories/{id}/move                     - Move a category
- GET    /categories/{id}/products                 - List products in a category
- POST   /categories/{id}/products                 - Assign a product to a category
- DELETE /categories/{id}/products/{sku}           - Remove a product from a category
"""

from typing import Any
from urllib.parse import urlencode

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import (
    SearchCriteria,
    build_search_criteria_query,
    encode_component,
)
from adobe_commerce_mcp.types import (
    ApiResponse,
    CategoryData,
    CategoryProductLinkData,
    api_error_response,
    api_success_response,
)


def get_categories(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[CategoryData]]:
    endpoint = f"/categories/list?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_category_by_id(
    client: AdobeCommerceClient, category_id: int
) -> ApiResponse[CategoryData]:
    endpoint = f"/categories/{category_id}"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_category_tree(
    client: AdobeCommerceClient,
    root_category_id: int | None = None,
    depth: int | None = None,
) -> ApiResponse[CategoryData]:
    """Retrieve the category tree, optionally from a root and to a depth."""
    params: dict[str, int] = {}
    if root_category_id is not None:
        params["rootCategoryId"] = root_category_id
    if depth is not None:
        params["depth"] = depth
    endpoint = f"/categories?{urlencode(params)}" if params else "/categories"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def create_category(
    client: AdobeCommerceClient, category: CategoryData
) -> ApiResponse[CategoryData]:
    endpoint = "/categories"
    try:
        data = client.post(endpoint, {"category": category})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_category(
    client: AdobeCommerceClient, category_id: int, category: dict[str, Any]
) -> ApiResponse[CategoryData]:
    endpoint = f"/categories/{category_id}"
    try:
        data = client.put(endpoint, {"category": {**category, "id": category_id}})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_category(client: AdobeCommerceClient, category_id: int) -> ApiResponse[bool]:
    endpoint = f"/categories/{category_id}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def move_category(
    client: AdobeCommerceClient,
    category_id: int,
    parent_id: int,
    after_id: int | None = None,
) -> ApiResponse[bool]:
    """Move a category under a new parent, optionally after a sibling."""
    endpoint = f"/categories/{category_id}/move"
    payload: dict[str, int] = {"parentId": parent_id}
    if after_id is not None:
        payload["afterId"] = after_id
    try:
        data = client.put(endpoint, payload)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_category_products(
    client: AdobeCommerceClient, category_id: int
) -> ApiResponse[list[CategoryProductLinkData]]:
    endpoint = f"/categories/{category_id}/products"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, data if isinstance(data, list) else [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def assign_product_to_category(
    client: AdobeCommerceClient,
    category_id: int,
    sku: str,
    position: int | None = None,
) -> ApiResponse[bool]:
    endpoint = f"/categories/{category_id}/products"
    link: dict[str, Any] = {"sku": sku, "category_id": str(category_id)}
    if position is not None:
        link["position"] = position
    try:
        data = client.post(endpoint, {"productLink": link})
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def remove_product_from_category(
    client: AdobeCommerceClient, category_id: int, sku: str
) -> ApiResponse[bool]:
    endpoint = f"/categories/{category_id}/products/{encode_component(sku)}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
