"""
Inventory (Multi-Source Inventory) API module.

Provides resource functions for MSI stocks, sources, source items,
stock-source links, source selection and salability checks:
- /inventory/stocks, /inventory/stocks/{id}, /inventory/stock-resolver/{type}/{code}
- /inventory/sources, /inventory/sources/{code}
- /inventory/source-items, /inventory/source-items-delete
- /inventory/stock-source-links, /inventory/stock-source-links-delete
- /inventory/source-selection-algorithm-list, /inventory/source-selection-algorithm-result
- /inventory/are-products-salable, /inventory/are-product-salable-for-requested-qty
- /inventory/is-product-salable/{sku}/{stockId}
- /inventory/is-product-salable-for-requested-qty/{sku}/{stockId}/{qty}
- /inventory/get-product-salable-quantity/{sku}/{stockId}
"""

import logging
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
    SourceData,
    SourceItemData,
    SourceSelectionAlgorithmData,
    StockData,
    StockSourceLinkData,
    api_error_response,
    api_success_response,
)

logger = logging.getLogger(__name__)


def _search_items(
    client: AdobeCommerceClient,
    path: str,
    options: SearchCriteria | None,
    key: str = "items",
) -> ApiResponse[list[Any]]:
    endpoint = f"{path}?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint) or {}
        return api_success_response(endpoint, data.get(key) or data.get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def _get(client: AdobeCommerceClient, endpoint: str) -> ApiResponse[Any]:
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Stocks
# =============================================================================


def get_stocks(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[StockData]]:
    return _search_items(client, "/inventory/stocks", options)


def get_stock_by_id(client: AdobeCommerceClient, stock_id: int) -> ApiResponse[StockData]:
    return _get(client, f"/inventory/stocks/{stock_id}")


def create_stock(client: AdobeCommerceClient, stock: StockData) -> ApiResponse[int]:
    """Create a stock; returns the new stock id."""
    endpoint = "/inventory/stocks"
    try:
        return api_success_response(endpoint, client.post(endpoint, {"stock": stock}))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_stock(
    client: AdobeCommerceClient, stock_id: int, stock: StockData
) -> ApiResponse[int]:
    endpoint = f"/inventory/stocks/{stock_id}"
    try:
        return api_success_response(endpoint, client.put(endpoint, {"stock": stock}))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_stock(client: AdobeCommerceClient, stock_id: int) -> ApiResponse[bool]:
    endpoint = f"/inventory/stocks/{stock_id}"
    try:
        client.delete(endpoint)
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def resolve_stock(
    client: AdobeCommerceClient, sales_channel_type: str, code: str
) -> ApiResponse[StockData]:
    """Find the stock assigned to a sales channel (e.g. type "website", code "base")."""
    return _get(
        client,
        f"/inventory/stock-resolver/{encode_component(sales_channel_type)}"
        f"/{encode_component(code)}",
    )


# =============================================================================
# Sources
# =============================================================================


def get_sources(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[SourceData]]:
    return _search_items(client, "/inventory/sources", options)


def get_source_by_code(
    client: AdobeCommerceClient, source_code: str
) -> ApiResponse[SourceData]:
    return _get(client, f"/inventory/sources/{encode_component(source_code)}")


def create_source(client: AdobeCommerceClient, source: SourceData) -> ApiResponse[Any]:
    endpoint = "/inventory/sources"
    try:
        return api_success_response(endpoint, client.post(endpoint, {"source": source}))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_source(
    client: AdobeCommerceClient, source_code: str, source: SourceData
) -> ApiResponse[Any]:
    endpoint = f"/inventory/sources/{encode_component(source_code)}"
    try:
        return api_success_response(endpoint, client.put(endpoint, {"source": source}))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Source Items
# =============================================================================


def get_source_items(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[SourceItemData]]:
    return _search_items(client, "/inventory/source-items", options, key="sourceItems")


def create_source_item(
    client: AdobeCommerceClient, source_item: SourceItemData
) -> ApiResponse[bool]:
    endpoint = "/inventory/source-items"
    try:
        client.post(endpoint, {"sourceItems": [source_item]})
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_source_item(
    client: AdobeCommerceClient, sku: str, source_code: str
) -> ApiResponse[bool]:
    endpoint = "/inventory/source-items-delete"
    try:
        client.post(endpoint, {"sourceItems": [{"sku": sku, "source_code": source_code}]})
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Stock-Source Links
# =============================================================================


def get_stock_source_links(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[StockSourceLinkData]]:
    return _search_items(client, "/inventory/stock-source-links", options)


def create_stock_source_links(
    client: AdobeCommerceClient, links: list[StockSourceLinkData]
) -> ApiResponse[bool]:
    endpoint = "/inventory/stock-source-links"
    try:
        client.post(endpoint, {"links": links})
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_stock_source_links(
    client: AdobeCommerceClient, links: list[StockSourceLinkData]
) -> ApiResponse[bool]:
    endpoint = "/inventory/stock-source-links-delete"
    try:
        client.post(endpoint, {"links": links})
        return api_success_response(endpoint, True)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Source Selection
# =============================================================================


def get_source_selection_algorithms(
    client: AdobeCommerceClient,
) -> ApiResponse[list[SourceSelectionAlgorithmData]]:
    return _get(client, "/inventory/source-selection-algorithm-list")


def run_source_selection_algorithm(
    client: AdobeCommerceClient,
    inventory_request: dict[str, Any],
    algorithm_code: str,
) -> ApiResponse[dict[str, Any]]:
    """
    Run a source selection algorithm for an inventory request.

    inventory_request has the shape {"stockId": 1, "items": [{"sku": ..., "qty": ...}]}.
    """
    endpoint = "/inventory/source-selection-algorithm-result"
    payload = {"inventoryRequest": inventory_request, "algorithmCode": algorithm_code}
    logger.debug("Running source selection algorithm %s", algorithm_code)
    try:
        return api_success_response(endpoint, client.post(endpoint, payload))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


# =============================================================================
# Salability
# =============================================================================


def are_products_salable(
    client: AdobeCommerceClient, skus: list[str], stock_id: int
) -> ApiResponse[list[dict[str, Any]]]:
    params = [f"skus[{i}]={encode_component(sku)}" for i, sku in enumerate(skus)]
    params.append(f"stockId={stock_id}")
    return _get(client, "/inventory/are-products-salable?" + "&".join(params))


def are_products_salable_for_requested_qty(
    client: AdobeCommerceClient, sku_requests: list[dict[str, Any]], stock_id: int
) -> ApiResponse[list[dict[str, Any]]]:
    params = []
    for i, request in enumerate(sku_requests):
        params.append(f"skuRequests[{i}][sku]={encode_component(request['sku'])}")
        params.append(f"skuRequests[{i}][qty]={encode_component(request['qty'])}")
    params.append(f"stockId={stock_id}")
    return _get(
        client, "/inventory/are-product-salable-for-requested-qty/?" + "&".join(params)
    )


def is_product_salable(
    client: AdobeCommerceClient, sku: str, stock_id: int
) -> ApiResponse[bool]:
    return _get(client, f"/inventory/is-product-salable/{encode_component(sku)}/{stock_id}")


def is_product_salable_for_requested_qty(
    client: AdobeCommerceClient, sku: str, stock_id: int, requested_qty: float
) -> ApiResponse[dict[str, Any]]:
    return _get(
        client,
        f"/inventory/is-product-salable-for-requested-qty/{encode_component(sku)}"
        f"/{stock_id}/{encode_component(requested_qty)}",
    )


def get_product_salable_quantity(
    client: AdobeCommerceClient, sku: str, stock_id: int
) -> ApiResponse[float]:
    return _get(
        client,
        f"/inventory/get-product-salable-quantity/{encode_component(sku)}/{stock_id}",
    )
