"""
Configurable products API module.

Provides resource functions for configurable product options and children:
- POST   /configurable-products/{sku}/options              - Add an option
- GET    /configurable-products/{sku}/options/all          - List all options
- GET    /configurable-products/{sku}/options/{id}         - Retrieve an option
- PUT    /configurable-products/{sku}/options/{id}         - Update an option
- DELETE /configurable-products/{sku}/options/{id}         - Delete an option
- POST   /configurable-products/{sku}/child                - Link a child product
- DELETE /configurable-products/{sku}/children/{childSku}  - Unlink a child product
- GET    /configurable-products/{sku}/children             - List child products
"""

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.errors import AdobeCommerceError
from adobe_commerce_mcp.search_criteria import encode_component
from adobe_commerce_mcp.types import (
    ApiResponse,
    ConfigurableProductOptionData,
    ProductData,
    api_error_response,
    api_success_response,
)


def _base(sku: str) -> str:
    return f"/configurable-products/{encode_component(sku)}"


def add_configurable_product_option(
    client: AdobeCommerceClient, sku: str, option: ConfigurableProductOptionData
) -> ApiResponse[int]:
    endpoint = f"{_base(sku)}/options"
    try:
        data = client.post(endpoint, {"option": option})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_configurable_product_options_all(
    client: AdobeCommerceClient, sku: str
) -> ApiResponse[list[ConfigurableProductOptionData]]:
    endpoint = f"{_base(sku)}/options/all"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_configurable_product_option_by_id(
    client: AdobeCommerceClient, sku: str, option_id: int
) -> ApiResponse[ConfigurableProductOptionData]:
    endpoint = f"{_base(sku)}/options/{option_id}"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_configurable_product_option(
    client: AdobeCommerceClient,
    sku: str,
    option_id: int,
    option: ConfigurableProductOptionData,
) -> ApiResponse[int]:
    endpoint = f"{_base(sku)}/options/{option_id}"
    try:
        data = client.put(endpoint, {"option": option})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_configurable_product_option(
    client: AdobeCommerceClient, sku: str, option_id: int
) -> ApiResponse[bool]:
    endpoint = f"{_base(sku)}/options/{option_id}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def link_configurable_child(
    client: AdobeCommerceClient, sku: str, child_sku: str
) -> ApiResponse[bool]:
    endpoint = f"{_base(sku)}/child"
    try:
        data = client.post(endpoint, {"childSku": child_sku})
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def unlink_configurable_child(
    client: AdobeCommerceClient, sku: str, child_sku: str
) -> ApiResponse[bool]:
    endpoint = f"{_base(sku)}/children/{encode_component(child_sku)}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_configurable_product_children(
    client: AdobeCommerceClient, sku: str
) -> ApiResponse[list[ProductData]]:
    endpoint = f"{_base(sku)}/children"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
