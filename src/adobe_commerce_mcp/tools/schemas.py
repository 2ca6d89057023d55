"""
Pydantic input models and annotated parameter types shared by the tools.

FastMCP derives each tool's JSON schema from its annotated parameters, so the
constraints declared here are what MCP clients see and what FastMCP validates
before a tool runs. Search tools additionally validate through
SearchCriteriaInput so the same rules hold when a tool function is called
directly.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from adobe_commerce_mcp.search_criteria import (
    CONDITION_TYPE_DESCRIPTIONS,
    ConditionType,
    SearchCriteria,
    build_search_criteria_from_input,
)

_CONDITION_HELP = ", ".join(
    f"{condition.value} ({description})"
    for condition, description in CONDITION_TYPE_DESCRIPTIONS.items()
)


# =============================================================================
# Search Criteria
# =============================================================================


class FilterInput(BaseModel):
    """A single search filter."""

    field: str = Field(
        min_length=1,
        description="Field to filter by (e.g., 'name', 'sku', 'price').",
    )
    value: str | int | float | bool = Field(description="Value to search for.")
    condition_type: ConditionType | None = Field(
        default=None,
        description=f"Condition type. Available options: {_CONDITION_HELP}. Default is 'eq'.",
    )


class SortOrderInput(BaseModel):
    """A sort field and direction."""

    field: str = Field(min_length=1, description="Sorting field.")
    direction: Literal["ASC", "DESC"] = Field(description="Sorting direction.")


class SearchCriteriaInput(BaseModel):
    """Validated pagination, filter and sort input of a search tool."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=10)
    filters: list[FilterInput] | None = None
    sort_orders: list[SortOrderInput] | None = None


PageParam = Annotated[int, Field(description="Page number to retrieve. Default 1.", ge=1)]
PageSizeParam = Annotated[
    int, Field(description="Number of results to retrieve per page. Max 10.", ge=1, le=10)
]
FiltersParam = Annotated[
    list[FilterInput] | None,
    Field(description="Filters to apply to the search. Multiple filters are combined with AND."),
]
SortOrdersParam = Annotated[
    list[SortOrderInput] | None,
    Field(description="Sort orders to apply. Each must specify a field and direction (ASC or DESC)."),
]


def to_search_criteria(
    page: int = 1,
    page_size: int = 10,
    filters: list[FilterInput] | list[dict] | None = None,
    sort_orders: list[SortOrderInput] | list[dict] | None = None,
) -> SearchCriteria:
    """
    Validate search tool arguments and convert them to SearchCriteria.

    Raises:
        pydantic.ValidationError: if any argument breaks the search input rules
    """
    validated = SearchCriteriaInput(
        page=page, page_size=page_size, filters=filters, sort_orders=sort_orders
    )
    return build_search_criteria_from_input(validated)


QueryParam = Annotated[
    str | None,
    Field(
        description=(
            "Optional JMESPath expression applied to the returned items. "
            "Custom functions: nvl(), int(), str(), regex_replace()."
        )
    ),
]


# =============================================================================
# Shared Field Types
# =============================================================================

Sku = Annotated[
    str,
    Field(
        min_length=1,
        pattern=r"^[a-zA-Z0-9_-]+$",
        description="Stock Keeping Unit - unique identifier for the product (e.g., 'PROD-001').",
    ),
]
AttributeCode = Annotated[
    str,
    Field(
        min_length=1,
        pattern=r"^[a-zA-Z0-9_]+$",
        description="Unique code for the attribute (e.g., 'color', 'size').",
    ),
]
EntityId = Annotated[int, Field(gt=0, description="Numeric entity ID.")]
StockId = Annotated[int, Field(gt=0, description="ID of the inventory stock.")]
SourceCode = Annotated[str, Field(min_length=1, description="Code of the inventory source.")]


class CustomAttributeInput(BaseModel):
    attribute_code: AttributeCode
    value: str | int | float | bool = Field(description="Value for the custom attribute.")


class CategoryLinkInput(BaseModel):
    category_id: str = Field(min_length=1, description="ID of the category to link.")
    position: int | None = Field(default=None, ge=0, description="Position within the category.")


class StoreLabelInput(BaseModel):
    store_id: int = Field(ge=0, description="Store ID for the label.")
    label: str = Field(min_length=1, description="Store-specific label.")


class AttributeOptionInput(BaseModel):
    label: str = Field(min_length=1, description="Option label.")
    value: str | None = Field(default=None, description="Option value.")
    sort_order: int | None = Field(default=None, ge=0)
    is_default: bool | None = None
    store_labels: list[StoreLabelInput] | None = Field(
        default=None, description="Labels per store view for multi-store setups."
    )


class ConfigurableOptionInput(BaseModel):
    attribute_id: str = Field(min_length=1, description="ID of the configurable attribute.")
    label: str = Field(min_length=1, description="Option label shown to shoppers.")
    position: int = Field(default=0, ge=0)
    is_use_default: bool = False
    values: list[int] = Field(
        min_length=1, description="Attribute option value indexes offered by this option."
    )


# =============================================================================
# Pricing
# =============================================================================


class BasePriceInput(BaseModel):
    sku: Sku
    price: float = Field(ge=0)
    store_id: int = Field(default=0, ge=0)


class SpecialPriceInput(BaseModel):
    sku: Sku
    price: float = Field(ge=0)
    store_id: int = Field(default=0, ge=0)
    price_from: str = Field(description="Start date, 'YYYY-MM-DD HH:MM:SS'.")
    price_to: str = Field(description="End date, 'YYYY-MM-DD HH:MM:SS'.")


class TierPriceInput(BaseModel):
    sku: Sku
    price: float = Field(ge=0)
    price_type: Literal["fixed", "discount"] = "fixed"
    website_id: int = Field(default=0, ge=0)
    customer_group: str = Field(default="ALL GROUPS")
    quantity: float = Field(gt=0)


class CostInput(BaseModel):
    sku: Sku
    cost: float = Field(ge=0)
    store_id: int = Field(default=0, ge=0)


# =============================================================================
# Inventory
# =============================================================================


class SalesChannelInput(BaseModel):
    type: str = Field(default="website", min_length=1)
    code: str = Field(min_length=1, description="Website code (e.g., 'base').")


class StockInput(BaseModel):
    name: str = Field(min_length=1)
    sales_channels: list[SalesChannelInput] | None = None


class SourceInput(BaseModel):
    source_code: SourceCode
    name: str = Field(min_length=1)
    enabled: bool = True
    country_id: str = Field(min_length=2, max_length=2, description="ISO country code.")
    postcode: str = Field(min_length=1)
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    region_id: int | None = None
    city: str | None = None
    street: str | None = None
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None


class SourceItemInput(BaseModel):
    sku: Sku
    source_code: SourceCode
    quantity: float = Field(ge=0)
    status: Literal[0, 1] = Field(default=1, description="1=in stock, 0=out of stock.")


class StockSourceLinkInput(BaseModel):
    stock_id: StockId
    source_code: SourceCode
    priority: int = Field(default=1, ge=0)


class SkuQtyInput(BaseModel):
    sku: Sku
    qty: float = Field(gt=0)
