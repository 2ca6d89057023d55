"""
Product attributes API module.

Provides resource functions for EAV product attribute operations:
- GET    /products/attributes                                - Search attributes
- GET    /products/attributes/{code}                         - Retrieve an attribute
- POST   /products/attributes                                - Create an attribute
- PUT    /products/attributes/{code}                         - Update an attribute
- DELETE /products/attributes/{code}                         - Delete an attribute
- GET    /products/attributes/{code}/options                 - List options
- POST   /products/attributes/{code}/options                 - Add an option
- PUT    /products/attributes/{code}/options/{optionId}      - Update an option
- DELETE /products/attributes/{code}/options/{optionId}      - Delete an option
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
    ProductAttributeData,
    ProductAttributeOptionData,
    api_error_response,
    api_success_response,
)

# Entity type of catalog products in eav_entity_type
PRODUCT_ENTITY_TYPE_ID = "4"

# Friendly attribute types and the backend/frontend pair each maps to
ATTRIBUTE_TYPES: dict[str, tuple[str, str]] = {
    "text": ("varchar", "text"),
    "textarea": ("text", "textarea"),
    "boolean": ("int", "boolean"),
    "date": ("datetime", "date"),
    "datetime": ("datetime", "datetime"),
    "integer": ("varchar", "text"),
    "decimal": ("varchar", "text"),
    "weight": ("varchar", "text"),
    "price": ("decimal", "price"),
    "singleselect": ("int", "select"),
    "multiselect": ("text", "multiselect"),
}


def build_attribute_payload(
    attribute_code: str,
    attribute_type: str,
    default_frontend_label: str,
    scope: str = "global",
    options: list[ProductAttributeOptionData] | None = None,
) -> dict[str, Any]:
    """
    Map a friendly attribute type onto the payload Adobe Commerce expects.

    Raises:
        ValueError: if attribute_type is not one of ATTRIBUTE_TYPES
    """
    if attribute_type not in ATTRIBUTE_TYPES:
        raise ValueError(f"Unknown attribute type: {attribute_type}")
    backend_type, frontend_input = ATTRIBUTE_TYPES[attribute_type]

    payload: dict[str, Any] = {
        "attribute_code": attribute_code,
        "entity_type_id": PRODUCT_ENTITY_TYPE_ID,
        "default_frontend_label": default_frontend_label,
        "scope": scope,
        "backend_type": backend_type,
        "frontend_input": frontend_input,
    }
    if options:
        payload["options"] = options
    return payload


def get_products_attributes(
    client: AdobeCommerceClient, options: SearchCriteria | None = None
) -> ApiResponse[list[ProductAttributeData]]:
    endpoint = f"/products/attributes?{build_search_criteria_query(options)}"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, (data or {}).get("items") or [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_product_attribute_by_code(
    client: AdobeCommerceClient, attribute_code: str
) -> ApiResponse[ProductAttributeData]:
    endpoint = f"/products/attributes/{encode_component(attribute_code)}"
    try:
        return api_success_response(endpoint, client.get(endpoint))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def create_product_attribute(
    client: AdobeCommerceClient, attribute: ProductAttributeData | dict[str, Any]
) -> ApiResponse[ProductAttributeData]:
    endpoint = "/products/attributes"
    try:
        data = client.post(endpoint, {"attribute": attribute})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_product_attribute(
    client: AdobeCommerceClient, attribute_code: str, attribute: dict[str, Any]
) -> ApiResponse[ProductAttributeData]:
    endpoint = f"/products/attributes/{encode_component(attribute_code)}"
    try:
        data = client.put(
            endpoint, {"attribute": {**attribute, "attribute_code": attribute_code}}
        )
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_product_attribute(
    client: AdobeCommerceClient, attribute_code: str
) -> ApiResponse[bool]:
    endpoint = f"/products/attributes/{encode_component(attribute_code)}"
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def get_product_attribute_options(
    client: AdobeCommerceClient, attribute_code: str
) -> ApiResponse[list[ProductAttributeOptionData]]:
    endpoint = f"/products/attributes/{encode_component(attribute_code)}/options"
    try:
        data = client.get(endpoint)
        return api_success_response(endpoint, data if isinstance(data, list) else [])
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def add_product_attribute_option(
    client: AdobeCommerceClient,
    attribute_code: str,
    option: ProductAttributeOptionData,
) -> ApiResponse[str]:
    """Add an option to a select/multiselect attribute; returns the new option id."""
    endpoint = f"/products/attributes/{encode_component(attribute_code)}/options"
    try:
        data = client.post(endpoint, {"option": option})
        return api_success_response(endpoint, data)
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def delete_product_attribute_option(
    client: AdobeCommerceClient, attribute_code: str, option_id: str
) -> ApiResponse[bool]:
    endpoint = (
        f"/products/attributes/{encode_component(attribute_code)}"
        f"/options/{encode_component(option_id)}"
    )
    try:
        data = client.delete(endpoint)
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)


def update_product_attribute_option(
    client: AdobeCommerceClient,
    attribute_code: str,
    option_id: str,
    option: ProductAttributeOptionData,
) -> ApiResponse[bool]:
    endpoint = (
        f"/products/attributes/{encode_component(attribute_code)}"
        f"/options/{encode_component(option_id)}"
    )
    try:
        data = client.put(endpoint, {"option": option})
        return api_success_response(endpoint, bool(data))
    except AdobeCommerceError as e:
        return api_error_response(endpoint, e)
