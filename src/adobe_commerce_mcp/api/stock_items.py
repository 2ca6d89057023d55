"""
Stock items API module (single-source inventory).

Provides resource functions for the legacy CatalogInventory endpoints:
- GET /stockItems/{sku}                        - Stock item of a product
- PUT /products/{sku}/stockItems/{itemId}      - Update a stock item
- GET /stockItems/lowStock/                    - Products below a quantity threshold
- GET /stockStatuses/{sku}                     - Stock status of a product
"""

from urllib.parse import urlencode

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import encode_component, format_value
from adobe_commerce_mcp.types import (
    ApiResponse,
    StockItemData,
    StockStatusData,
    api_error_response,
    api_success_response,
)


def _with_scope(endpoint: str, scope_id: int | None) -> str:
    if scope_id is None:
        return endpoint
    return f"{endpoint}?{urlencode({'scopeId': scope_id})}"


def get_stock_item(
    client: AdobeCommerceClient, sku: str, scope_id: int | None = None
) -> ApiResponse[StockItemData]:
    endpoint = _with_scope(f"/stockItems/{encode_component(sku)}", scope_id)
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_stock_item(
    client: AdobeCommerceClient, sku: str, item_id: int, stock_item: StockItemData
) -> ApiResponse[int]:
    """Update a stock item; returns the stock item id."""
    endpoint = f"/products/{encode_component(sku)}/stockItems/{item_id}"
    try:
        data = client.put(endpoint, {"stockItem": stock_item})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_low_stock_items(
    client: AdobeCommerceClient,
    qty: float,
    scope_id: int = 0,
    current_page: int | None = None,
    page_size: int | None = None,
) -> ApiResponse[dict]:
    params: dict[str, int | str] = {"scopeId": scope_id, "qty": format_value(qty)}
    if current_page is not None:
        params["currentPage"] = current_page
    if page_size is not None:
        params["pageSize"] = page_size

    endpoint = f"/stockItems/lowStock/?{urlencode(params)}"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_stock_status(
    client: AdobeCommerceClient, sku: str, scope_id: int | None = None
) -> ApiResponse[StockStatusData]:
    endpoint = _with_scope(f"/stockStatuses/{encode_component(sku)}", scope_id)
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
