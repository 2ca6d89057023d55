"""
Type definitions for the Adobe Commerce MCP Server.

This module provides:
- ApiResponse: the uniform success/error envelope returned by every
  resource function, plus its success/error constructors
- TypedDict definitions for the Adobe Commerce entities the API returns
"""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypedDict, TypeVar

from adobe_commerce_mcp.errors import RequestError

T = TypeVar("T")


# =============================================================================
# Response Envelope
# =============================================================================


@dataclass
class ApiResponse(Generic[T]):
    """Uniform result of a resource function call."""

    success: bool
    endpoint: str
    data: T | None = None
    error: str | None = None


def api_success_response(endpoint: str, data: T) -> ApiResponse[T]:
    return ApiResponse(success=True, endpoint=endpoint, data=data)


def api_error_response(endpoint: str, error: BaseException | Any) -> ApiResponse[Any]:
    """
    Convert a caught error into a failed ApiResponse.

    When the error carries an upstream response body, the body is serialized
    and appended to the message:
        "Request failed with status code 404 | Response body: {"message":"Not found"}"
    """
    body = None
    if isinstance(error, RequestError):
        message = error.message
        if error.has_body:
            body = error.response_body
    elif isinstance(error, BaseException):
        message = str(error) or type(error).__name__
    else:
        message = str(error)

    if body is not None:
        message += f" | Response body: {json.dumps(body, separators=(',', ':'), default=str)}"

    return ApiResponse(success=False, endpoint=endpoint, error=message)


# =============================================================================
# Shared Types
# =============================================================================


class CustomAttributeData(TypedDict):
    """A custom attribute code/value pair."""

    attribute_code: str
    value: Any


# =============================================================================
# Product Types
# =============================================================================


class CategoryLinkData(TypedDict, total=False):
    position: int
    category_id: str


class ProductExtensionAttributesData(TypedDict, total=False):
    website_ids: list[int]
    category_links: list[CategoryLinkData]


class ProductData(TypedDict, total=False):
    """
    Catalog product.

    Required fields (always present):
        sku: Stock Keeping Unit
        name: Display name
        attribute_set_id: Attribute set the product belongs to
        type_id: Product type (simple, configurable, ...)

    Optional fields:
        id: Entity identifier
        price: Base price
        status: 1=enabled, 2=disabled
        visibility: 1=not visible, 2=catalog, 3=search, 4=catalog+search
        weight: Weight used for shipping
        created_at / updated_at: Timestamps (Y-m-d H:i:s)
        extension_attributes: Website ids, category links, stock item
        custom_attributes: Additional attribute values
    """

    id: int
    sku: str
    name: str
    attribute_set_id: int
    price: float
    status: int
    visibility: int
    type_id: str
    created_at: str
    updated_at: str
    weight: float
    extension_attributes: ProductExtensionAttributesData
    custom_attributes: list[CustomAttributeData]


class ProductAttributeOptionData(TypedDict, total=False):
    label: str
    value: str
    sort_order: int
    is_default: bool


class ProductAttributeData(TypedDict, total=False):
    """EAV product attribute definition."""

    attribute_id: int
    attribute_code: str
    frontend_input: str
    entity_type_id: str
    is_required: bool
    is_user_defined: bool
    default_frontend_label: str
    scope: str
    options: list[ProductAttributeOptionData]


class AttributeSetData(TypedDict, total=False):
    attribute_set_id: int
    attribute_set_name: str
    sort_order: int
    entity_type_id: int


class AttributeGroupData(TypedDict, total=False):
    attribute_group_id: str
    attribute_group_name: str
    attribute_set_id: int


class ConfigurableProductOptionValueData(TypedDict):
    value_index: int


class ConfigurableProductOptionData(TypedDict, total=False):
    id: int
    attribute_id: str
    label: str
    position: int
    is_use_default: bool
    values: list[ConfigurableProductOptionValueData]
    product_id: int


# =============================================================================
# Pricing Types
# =============================================================================


class BasePriceData(TypedDict, total=False):
    price: float
    store_id: int
    sku: str


class SpecialPriceData(TypedDict, total=False):
    price: float
    store_id: int
    sku: str
    price_from: str
    price_to: str


class TierPriceData(TypedDict, total=False):
    price: float
    price_type: str
    website_id: int
    sku: str
    customer_group: str
    quantity: float


class CostData(TypedDict, total=False):
    cost: float
    store_id: int
    sku: str


class PriceUpdateResultData(TypedDict, total=False):
    message: str
    parameters: list[str]


# =============================================================================
# Category / Customer / Order / CMS Types
# =============================================================================


class CategoryData(TypedDict, total=False):
    id: int
    parent_id: int
    name: str
    is_active: bool
    position: int
    level: int
    children: str
    include_in_menu: bool
    available_sort_by: list[str]
    children_data: list["CategoryData"]
    custom_attributes: list[CustomAttributeData]


class CategoryProductLinkData(TypedDict, total=False):
    sku: str
    position: int
    category_id: str


class CustomerData(TypedDict, total=False):
    id: int
    group_id: int
    email: str
    firstname: str
    lastname: str
    store_id: int
    website_id: int
    created_at: str
    updated_at: str


class OrderData(TypedDict, total=False):
    entity_id: int
    increment_id: str
    state: str
    status: str
    customer_email: str
    grand_total: float
    base_currency_code: str
    created_at: str
    items: list[dict[str, Any]]


class CmsBlockData(TypedDict, total=False):
    id: int
    identifier: str
    title: str
    content: str
    active: bool


class CmsPageData(TypedDict, total=False):
    id: int
    identifier: str
    title: str
    page_layout: str
    content: str
    active: bool


# =============================================================================
# Store Types
# =============================================================================


class WebsiteData(TypedDict, total=False):
    id: int
    code: str
    name: str
    default_group_id: int


class StoreGroupData(TypedDict, total=False):
    id: int
    website_id: int
    root_category_id: int
    default_store_id: int
    name: str
    code: str


class StoreViewData(TypedDict, total=False):
    id: int
    code: str
    name: str
    website_id: int
    store_group_id: int
    is_active: int


class StoreConfigData(TypedDict, total=False):
    id: int
    code: str
    website_id: int
    locale: str
    base_currency_code: str
    default_display_currency_code: str
    timezone: str
    weight_unit: str
    base_url: str
    secure_base_url: str


# =============================================================================
# Inventory Types
# =============================================================================


class StockData(TypedDict, total=False):
    stock_id: int
    name: str
    extension_attributes: dict[str, Any]


class SourceData(TypedDict, total=False):
    source_code: str
    name: str
    enabled: bool
    description: str
    latitude: float
    longitude: float
    country_id: str
    postcode: str


class SourceItemData(TypedDict, total=False):
    sku: str
    source_code: str
    quantity: float
    status: int


class StockSourceLinkData(TypedDict, total=False):
    stock_id: int
    source_code: str
    priority: int


class SourceSelectionAlgorithmData(TypedDict, total=False):
    code: str
    title: str
    description: str


class StockItemData(TypedDict, total=False):
    item_id: int
    product_id: int
    stock_id: int
    qty: float
    is_in_stock: bool
    manage_stock: bool
    min_qty: float
    min_sale_qty: float
    max_sale_qty: float
    notify_stock_qty: float
    backorders: int


class StockStatusData(TypedDict, total=False):
    product_id: int
    stock_id: int
    qty: float
    stock_status: int
    stock_item: StockItemData
