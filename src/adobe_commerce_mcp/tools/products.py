"""
Product tools.

Registers:
- search-products, get-product-by-sku
- create-product, update-product, delete-product
- assign-product-to-website, remove-product-from-website
"""

from typing import Annotated, Any, Literal

from fastmcp import FastMCP
from pydantic import Field

from adobe_commerce_mcp.api import products
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response, search_text_response
from adobe_commerce_mcp.tools.schemas import (
    CategoryLinkInput,
    CustomAttributeInput,
    FiltersParam,
    PageParam,
    PageSizeParam,
    QueryParam,
    Sku,
    SortOrdersParam,
    to_search_criteria,
)

Status = Annotated[int, Field(ge=1, le=2, description="Product status: 1=enabled, 2=disabled.")]
Visibility = Annotated[
    int,
    Field(ge=1, le=4, description="1=not visible, 2=catalog, 3=search, 4=catalog+search."),
]
ProductType = Annotated[
    Literal["simple", "configurable"],
    Field(description="'simple'=basic product, 'configurable'=product with variants."),
]

DEFAULT_ATTRIBUTE_SET_ID = 4


def build_product_payload(**fields: Any) -> dict[str, Any]:
    """
    Assemble a product payload from tool arguments, dropping unset values.

    website_ids and category_links are moved under extension_attributes.
    """
    payload: dict[str, Any] = {}
    extension: dict[str, Any] = {}

    for key, value in fields.items():
        if value is None:
            continue
        if key == "website_ids":
            extension["website_ids"] = value
        elif key == "category_links":
            extension["category_links"] = [
                link.model_dump(exclude_none=True) if hasattr(link, "model_dump") else link
                for link in value
            ]
        elif key == "custom_attributes":
            payload[key] = [
                attr.model_dump() if hasattr(attr, "model_dump") else attr for attr in value
            ]
        else:
            payload[key] = value

    if extension:
        payload["extension_attributes"] = extension
    return payload


def register_product_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register product tools on the server."""

    @mcp.tool(
        name="search-products",
        title="Search Products",
        annotations={"readOnlyHint": True},
    )
    def search_products(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search for products in Adobe Commerce with flexible search filters.

        Each product is returned as one JSON object per line inside <data>.
        Items have the shape:
        {"id": int, "sku": str, "name": str, "price": number, "status": int,
         "visibility": int, "type_id": str, "attribute_set_id": int,
         "custom_attributes": [{"attribute_code": str, "value": any}],
         "extension_attributes": {"website_ids": [int], "category_links": [...]}}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Products", criteria, products.get_products(client, criteria), query
        )

    @mcp.tool(
        name="get-product-by-sku",
        title="Get Product by SKU",
        annotations={"readOnlyHint": True},
    )
    def get_product_by_sku(sku: Sku) -> str:
        """Get detailed information about a product by its SKU."""
        return item_text_response("Product", products.get_product_by_sku(client, sku))

    @mcp.tool(
        name="create-product",
        title="Create Product",
        annotations={"readOnlyHint": False},
    )
    def create_product(
        sku: Sku,
        name: Annotated[str, Field(min_length=1, description="Display name for the product.")],
        price: Annotated[float, Field(gt=0, description="Product price in the base currency.")],
        attribute_set_id: Annotated[int, Field(gt=0)] = DEFAULT_ATTRIBUTE_SET_ID,
        status: Status = 1,
        visibility: Visibility = 4,
        type_id: ProductType = "simple",
        weight: Annotated[float | None, Field(ge=0)] = None,
        custom_attributes: list[CustomAttributeInput] | None = None,
        website_ids: Annotated[list[int] | None, Field(description="Website IDs.")] = None,
        category_links: list[CategoryLinkInput] | None = None,
    ) -> str:
        """Create a new product in Adobe Commerce with the specified attributes."""
        payload = build_product_payload(
            sku=sku,
            name=name,
            price=price,
            attribute_set_id=attribute_set_id,
            status=status,
            visibility=visibility,
            type_id=type_id,
            weight=weight,
            custom_attributes=custom_attributes,
            website_ids=website_ids,
            category_links=category_links,
        )
        return item_text_response("Create Product", products.create_product(client, payload))

    @mcp.tool(
        name="update-product",
        title="Update Product",
        annotations={"readOnlyHint": False},
    )
    def update_product(
        sku: Sku,
        name: Annotated[str | None, Field(min_length=1)] = None,
        price: Annotated[float | None, Field(gt=0)] = None,
        attribute_set_id: Annotated[int | None, Field(gt=0)] = None,
        status: Status | None = None,
        visibility: Visibility | None = None,
        weight: Annotated[float | None, Field(ge=0)] = None,
        custom_attributes: list[CustomAttributeInput] | None = None,
        website_ids: list[int] | None = None,
        category_links: list[CategoryLinkInput] | None = None,
    ) -> str:
        """Update an existing product in Adobe Commerce. Only given fields change."""
        payload = build_product_payload(
            name=name,
            price=price,
            attribute_set_id=attribute_set_id,
            status=status,
            visibility=visibility,
            weight=weight,
            custom_attributes=custom_attributes,
            website_ids=website_ids,
            category_links=category_links,
        )
        return item_text_response(
            "Update Product", products.update_product(client, sku, payload)
        )

    @mcp.tool(
        name="delete-product",
        title="Delete Product",
        annotations={"readOnlyHint": False},
    )
    def delete_product(sku: Sku) -> str:
        """Delete a product from Adobe Commerce by SKU."""
        return item_text_response("Delete Product", products.delete_product(client, sku))

    @mcp.tool(
        name="assign-product-to-website",
        title="Assign Product to Website",
        annotations={"readOnlyHint": False},
    )
    def assign_product_to_website(
        sku: Sku,
        website_id: Annotated[int, Field(gt=0, description="ID of the website.")],
    ) -> str:
        """Make a product available on a website."""
        return item_text_response(
            "Assign Product to Website",
            products.assign_product_to_website(client, sku, website_id),
        )

    @mcp.tool(
        name="remove-product-from-website",
        title="Remove Product from Website",
        annotations={"readOnlyHint": False},
    )
    def remove_product_from_website(
        sku: Sku,
        website_id: Annotated[int, Field(gt=0, description="ID of the website.")],
    ) -> str:
        """Remove a product from a website."""
        return item_text_response(
            "Remove Product from Website",
            products.remove_product_from_website(client, sku, website_id),
        )
