"""
Inventory tools.

Multi-Source Inventory:
- search-stocks, get-stock-by-id, create-stock, update-stock, delete-stock, resolve-stock
- search-sources, get-source-by-code, create-source, update-source
- search-source-items, create-source-item, delete-source-item
- search-stock-source-links, create-stock-source-links, delete-stock-source-links
- get-source-selection-algorithms, run-source-selection-algorithm
- are-products-salable, are-products-salable-for-requested-qty, is-product-salable,
  is-product-salable-for-requested-qty, get-product-salable-quantity

Single-source stock items:
- get-stock-item, update-stock-item, get-low-stock-items, get-stock-status
"""

from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from adobe_commerce_mcp.api import inventory, stock_items
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response, search_text_response
from adobe_commerce_mcp.tools.schemas import (
    FiltersParam,
    PageParam,
    PageSizeParam,
    QueryParam,
    SkuQtyInput,
    Sku,
    SortOrdersParam,
    SourceCode,
    SourceInput,
    SourceItemInput,
    StockId,
    StockInput,
    StockSourceLinkInput,
    to_search_criteria,
)

Quantity = Annotated[float, Field(gt=0, description="Requested quantity.")]
ScopeId = Annotated[int | None, Field(ge=0, description="Scope (website) ID; 0 is global.")]


def stock_payload(stock: StockInput | dict) -> dict[str, Any]:
    """Convert stock input to the API shape, with sales channels as an extension attribute."""
    stock = StockInput.model_validate(stock)
    payload: dict[str, Any] = {"name": stock.name}
    if stock.sales_channels:
        payload["extension_attributes"] = {
            "sales_channels": [channel.model_dump() for channel in stock.sales_channels]
        }
    return payload


def _dump(model: BaseModel | dict, model_type: type[BaseModel]) -> dict[str, Any]:
    return model_type.model_validate(model).model_dump(exclude_none=True)


def register_inventory_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register Multi-Source Inventory tools on the server."""

    # -------------------------------------------------------------------------
    # Stocks
    # -------------------------------------------------------------------------

    @mcp.tool(name="search-stocks", title="Search Stocks", annotations={"readOnlyHint": True})
    def search_stocks(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search inventory stocks.

        Items have the shape:
        {"stock_id": int, "name": str,
         "extension_attributes": {"sales_channels": [{"type": str, "code": str}]}}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Stocks", criteria, inventory.get_stocks(client, criteria), query
        )

    @mcp.tool(name="get-stock-by-id", title="Get Stock by ID", annotations={"readOnlyHint": True})
    def get_stock_by_id(stock_id: StockId) -> str:
        """Get an inventory stock by its ID."""
        return item_text_response("Stock", inventory.get_stock_by_id(client, stock_id))

    @mcp.tool(name="create-stock", title="Create Stock", annotations={"readOnlyHint": False})
    def create_stock(stock: StockInput) -> str:
        """Create an inventory stock, optionally assigned to sales channels."""
        return item_text_response(
            "Create Stock", inventory.create_stock(client, stock_payload(stock))
        )

    @mcp.tool(name="update-stock", title="Update Stock", annotations={"readOnlyHint": False})
    def update_stock(stock_id: StockId, stock: StockInput) -> str:
        """Update an inventory stock."""
        payload = {"stock_id": stock_id, **stock_payload(stock)}
        return item_text_response(
            "Update Stock", inventory.update_stock(client, stock_id, payload)
        )

    @mcp.tool(name="delete-stock", title="Delete Stock", annotations={"readOnlyHint": False})
    def delete_stock(stock_id: StockId) -> str:
        """Delete an inventory stock."""
        return item_text_response("Delete Stock", inventory.delete_stock(client, stock_id))

    @mcp.tool(name="resolve-stock", title="Resolve Stock", annotations={"readOnlyHint": True})
    def resolve_stock(
        type: Annotated[str, Field(min_length=1, description="Sales channel type.")] = "website",
        code: Annotated[str, Field(min_length=1, description="Sales channel code.")] = "base",
    ) -> str:
        """Find the stock assigned to a sales channel."""
        return item_text_response("Resolve Stock", inventory.resolve_stock(client, type, code))

    # -------------------------------------------------------------------------
    # Sources
    # -------------------------------------------------------------------------

    @mcp.tool(name="search-sources", title="Search Sources", annotations={"readOnlyHint": True})
    def search_sources(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search inventory sources.

        Items have the shape:
        {"source_code": str, "name": str, "enabled": bool, "country_id": str,
         "postcode": str, "city": str, "latitude": number, "longitude": number}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Sources", criteria, inventory.get_sources(client, criteria), query
        )

    @mcp.tool(
        name="get-source-by-code", title="Get Source by Code", annotations={"readOnlyHint": True}
    )
    def get_source_by_code(source_code: SourceCode) -> str:
        """Get an inventory source by its code."""
        return item_text_response("Source", inventory.get_source_by_code(client, source_code))

    @mcp.tool(name="create-source", title="Create Source", annotations={"readOnlyHint": False})
    def create_source(source: SourceInput) -> str:
        """Create an inventory source (warehouse, store, drop-shipper)."""
        return item_text_response(
            "Create Source", inventory.create_source(client, _dump(source, SourceInput))
        )

    @mcp.tool(name="update-source", title="Update Source", annotations={"readOnlyHint": False})
    def update_source(source_code: SourceCode, source: SourceInput) -> str:
        """Update an inventory source."""
        return item_text_response(
            "Update Source",
            inventory.update_source(client, source_code, _dump(source, SourceInput)),
        )

    # -------------------------------------------------------------------------
    # Source Items
    # -------------------------------------------------------------------------

    @mcp.tool(
        name="search-source-items", title="Search Source Items", annotations={"readOnlyHint": True}
    )
    def search_source_items(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search source items: the quantity of a SKU at a source.

        Items have the shape:
        {"sku": str, "source_code": str, "quantity": number, "status": int}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Source Items", criteria, inventory.get_source_items(client, criteria), query
        )

    @mcp.tool(
        name="create-source-item", title="Create Source Item", annotations={"readOnlyHint": False}
    )
    def create_source_item(source_item: SourceItemInput) -> str:
        """Create or update the quantity of a SKU at a source."""
        return item_text_response(
            "Create Source Item",
            inventory.create_source_item(client, _dump(source_item, SourceItemInput)),
        )

    @mcp.tool(
        name="delete-source-item", title="Delete Source Item", annotations={"readOnlyHint": False}
    )
    def delete_source_item(sku: Sku, source_code: SourceCode) -> str:
        """Unassign a SKU from a source."""
        return item_text_response(
            "Delete Source Item", inventory.delete_source_item(client, sku, source_code)
        )

    # -------------------------------------------------------------------------
    # Stock-Source Links
    # -------------------------------------------------------------------------

    @mcp.tool(
        name="search-stock-source-links",
        title="Search Stock-Source Links",
        annotations={"readOnlyHint": True},
    )
    def search_stock_source_links(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search the links between stocks and sources.

        Items have the shape:
        {"stock_id": int, "source_code": str, "priority": int}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Stock-Source Links",
            criteria,
            inventory.get_stock_source_links(client, criteria),
            query,
        )

    @mcp.tool(
        name="create-stock-source-links",
        title="Create Stock-Source Links",
        annotations={"readOnlyHint": False},
    )
    def create_stock_source_links(
        links: Annotated[list[StockSourceLinkInput], Field(min_length=1)],
    ) -> str:
        """Assign sources to stocks with a priority."""
        return item_text_response(
            "Create Stock-Source Links",
            inventory.create_stock_source_links(
                client, [_dump(link, StockSourceLinkInput) for link in links]
            ),
        )

    @mcp.tool(
        name="delete-stock-source-links",
        title="Delete Stock-Source Links",
        annotations={"readOnlyHint": False},
    )
    def delete_stock_source_links(
        links: Annotated[list[StockSourceLinkInput], Field(min_length=1)],
    ) -> str:
        """Unassign sources from stocks."""
        return item_text_response(
            "Delete Stock-Source Links",
            inventory.delete_stock_source_links(
                client, [_dump(link, StockSourceLinkInput) for link in links]
            ),
        )

    # -------------------------------------------------------------------------
    # Source Selection
    # -------------------------------------------------------------------------

    @mcp.tool(
        name="get-source-selection-algorithms",
        title="Get Source Selection Algorithms",
        annotations={"readOnlyHint": True},
    )
    def get_source_selection_algorithms() -> str:
        """List the available source selection algorithms."""
        return item_text_response(
            "Source Selection Algorithms", inventory.get_source_selection_algorithms(client)
        )

    @mcp.tool(
        name="run-source-selection-algorithm",
        title="Run Source Selection Algorithm",
        annotations={"readOnlyHint": True},
    )
    def run_source_selection_algorithm(
        stock_id: StockId,
        items: Annotated[list[SkuQtyInput], Field(min_length=1)],
        algorithm_code: Annotated[str, Field(min_length=1)] = "priority",
    ) -> str:
        """Determine which sources should fulfil the requested quantities."""
        inventory_request = {
            "stockId": stock_id,
            "items": [_dump(item, SkuQtyInput) for item in items],
        }
        return item_text_response(
            "Source Selection Result",
            inventory.run_source_selection_algorithm(client, inventory_request, algorithm_code),
        )

    # -------------------------------------------------------------------------
    # Salability
    # -------------------------------------------------------------------------

    @mcp.tool(
        name="are-products-salable",
        title="Are Products Salable",
        annotations={"readOnlyHint": True},
    )
    def are_products_salable(
        skus: Annotated[list[Sku], Field(min_length=1)], stock_id: StockId
    ) -> str:
        """Check whether products are salable in a stock."""
        return item_text_response(
            "Are Products Salable", inventory.are_products_salable(client, skus, stock_id)
        )

    @mcp.tool(
        name="are-products-salable-for-requested-qty",
        title="Are Products Salable for Requested Quantity",
        annotations={"readOnlyHint": True},
    )
    def are_products_salable_for_requested_qty(
        sku_requests: Annotated[list[SkuQtyInput], Field(min_length=1)], stock_id: StockId
    ) -> str:
        """Check whether products are salable in the requested quantities."""
        return item_text_response(
            "Are Products Salable for Requested Quantity",
            inventory.are_products_salable_for_requested_qty(
                client, [_dump(r, SkuQtyInput) for r in sku_requests], stock_id
            ),
        )

    @mcp.tool(
        name="is-product-salable", title="Is Product Salable", annotations={"readOnlyHint": True}
    )
    def is_product_salable(sku: Sku, stock_id: StockId) -> str:
        """Check whether a product is salable in a stock."""
        return item_text_response(
            "Is Product Salable", inventory.is_product_salable(client, sku, stock_id)
        )

    @mcp.tool(
        name="is-product-salable-for-requested-qty",
        title="Is Product Salable for Requested Quantity",
        annotations={"readOnlyHint": True},
    )
    def is_product_salable_for_requested_qty(
        sku: Sku, stock_id: StockId, requested_qty: Quantity
    ) -> str:
        """Check whether a product is salable in the requested quantity."""
        return item_text_response(
            "Is Product Salable for Requested Quantity",
            inventory.is_product_salable_for_requested_qty(client, sku, stock_id, requested_qty),
        )

    @mcp.tool(
        name="get-product-salable-quantity",
        title="Get Product Salable Quantity",
        annotations={"readOnlyHint": True},
    )
    def get_product_salable_quantity(sku: Sku, stock_id: StockId) -> str:
        """Get the salable quantity of a product in a stock."""
        return item_text_response(
            "Product Salable Quantity",
            inventory.get_product_salable_quantity(client, sku, stock_id),
        )


def register_stock_item_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register single-source stock item tools on the server."""

    @mcp.tool(name="get-stock-item", title="Get Stock Item", annotations={"readOnlyHint": True})
    def get_stock_item(sku: Sku, scope_id: ScopeId = None) -> str:
        """Get the stock item (quantity, stock flags) of a product."""
        return item_text_response("Stock Item", stock_items.get_stock_item(client, sku, scope_id))

    @mcp.tool(
        name="update-stock-item", title="Update Stock Item", annotations={"readOnlyHint": False}
    )
    def update_stock_item(
        sku: Sku,
        item_id: Annotated[int, Field(gt=0, description="ID of the stock item.")],
        qty: Annotated[float | None, Field(ge=0)] = None,
        is_in_stock: bool | None = None,
        manage_stock: bool | None = None,
        min_qty: Annotated[float | None, Field(ge=0)] = None,
        notify_stock_qty: Annotated[float | None, Field(ge=0)] = None,
    ) -> str:
        """Update the stock item of a product. Only given fields change."""
        changes = {
            "qty": qty,
            "is_in_stock": is_in_stock,
            "manage_stock": manage_stock,
            "min_qty": min_qty,
            "notify_stock_qty": notify_stock_qty,
        }
        return item_text_response(
            "Update Stock Item",
            stock_items.update_stock_item(
                client, sku, item_id, {k: v for k, v in changes.items() if v is not None}
            ),
        )

    @mcp.tool(
        name="get-low-stock-items", title="Get Low Stock Items", annotations={"readOnlyHint": True}
    )
    def get_low_stock_items(
        qty: Annotated[float, Field(ge=0, description="Quantity threshold.")],
        scope_id: Annotated[int, Field(ge=0)] = 0,
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
    ) -> str:
        """List products whose quantity is below a threshold."""
        return item_text_response(
            "Low Stock Items",
            stock_items.get_low_stock_items(client, qty, scope_id, page, page_size),
        )

    @mcp.tool(
        name="get-stock-status", title="Get Stock Status", annotations={"readOnlyHint": True}
    )
    def get_stock_status(sku: Sku, scope_id: ScopeId = None) -> str:
        """Get the stock status of a product."""
        return item_text_response(
            "Stock Status", stock_items.get_stock_status(client, sku, scope_id)
        )
