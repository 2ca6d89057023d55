"""
Customers, orders and CMS API module.

Provides search-only resource functions:
- GET /customers/search  - Search customers
- GET /orders            - Search orders
- GET /cmsBlock/search   - Search CMS blocks
- GET /cmsPage/search    - Search CMS pages
"""

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import SearchCriteria, build_search_criteria_query
from adobe_commerce_mcp.types import (
    ApiResponse,
    CmsBlockData,
    CmsPageData,
    CustomerData,
    OrderData,
    api_error_response,
    api_success_response,
)


def _search(client: AdobeCommerceClient, path: str, options: SearchCriteria | None):
    endpoint = f"{path}?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_customers(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[CustomerData]]:
    return _search(client, "/customers/search", options)


def get_orders(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[OrderData]]:
    return _search(client, "/orders", options)


def get_cms_blocks(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[CmsBlockData]]:
    return _search(client, "/cmsBlock/search", options)


def get_cms_pages(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[CmsPageData]]:
    return _search(client, "/cmsPage/search", options)
