"""
Customer, order and CMS search tools.

Registers: search-customers, search-orders, search-cms-blocks, search-cms-pages
"""

from fastmcp import FastMCP

from adobe_commerce_mcp.api import sales
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import search_text_response
from adobe_commerce_mcp.tools.schemas import (
    FiltersParam,
    PageParam,
    PageSizeParam,
    QueryParam,
    SortOrdersParam,
    to_search_criteria,
)


def register_sales_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register customer, order and CMS tools on the server."""

    @mcp.tool(
        name="search-customers",
        title="Search Customers",
        annotations={"readOnlyHint": True},
    )
    def search_customers(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search customers with flexible search filters.

        Items have the shape:
        {"id": int, "email": str, "firstname": str, "lastname": str,
         "group_id": int, "store_id": int, "website_id": int, "created_at": str}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Customers", criteria, sales.get_customers(client, criteria), query
        )

    @mcp.tool(
        name="search-orders",
        title="Search Orders",
        annotations={"readOnlyHint": True},
    )
    def search_orders(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search orders with flexible search filters.

        Items have the shape:
        {"entity_id": int, "increment_id": str, "status": str, "state": str,
         "customer_email": str, "grand_total": number, "created_at": str,
         "items": [...]}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response("Orders", criteria, sales.get_orders(client, criteria), query)

    @mcp.tool(
        name="search-cms-blocks",
        title="Search CMS Blocks",
        annotations={"readOnlyHint": True},
    )
    def search_cms_blocks(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search CMS blocks.

        Items have the shape:
        {"id": int, "identifier": str, "title": str, "content": str, "active": bool}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "CMS Blocks", criteria, sales.get_cms_blocks(client, criteria), query
        )

    @mcp.tool(
        name="search-cms-pages",
        title="Search CMS Pages",
        annotations={"readOnlyHint": True},
    )
    def search_cms_pages(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search CMS pages.

        Items have the shape:
        {"id": int, "identifier": str, "title": str, "page_layout": str,
         "content": str, "active": bool}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "CMS Pages", criteria, sales.get_cms_pages(client, criteria), query
        )
