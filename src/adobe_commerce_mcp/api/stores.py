"""
Stores API module.

Provides resource functions for store structure lookups:
- GET /store/storeConfigs  - Store view configurations (optionally by store codes)
- GET /store/storeViews    - Store views
- GET /store/storeGroups   - Store groups
- GET /store/websites      - Websites
"""

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import encode_component
from adobe_commerce_mcp.types import (
    ApiResponse,
    StoreConfigData,
    StoreGroupData,
    StoreViewData,
    WebsiteData,
    api_error_response,
    api_success_response,
)


def get_store_configs(
    client: AdobeCommerceClient, store_codes: list[str] | None = None
) -> ApiResponse[list[StoreConfigData]]:
    endpoint = "/store/storeConfigs"
    if store_codes:
        endpoint += "?" + "&".join(
            f"storeCodes[]={encode_component(code)}" for code in store_codes
        )
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_store_views(client: AdobeCommerceClient) -> ApiResponse[list[StoreViewData]]:
    endpoint = "/store/storeViews"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_store_groups(client: AdobeCommerceClient) -> ApiResponse[list[StoreGroupData]]:
    endpoint = "/store/storeGroups"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_websites(client: AdobeCommerceClient) -> ApiResponse[list[WebsiteData]]:
    endpoint = "/store/websites"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
