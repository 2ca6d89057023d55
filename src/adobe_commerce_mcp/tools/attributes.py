"""
Product attribute and attribute set tools.

Registers:
- search-products-attributes, get-product-attribute-by-code
- create-product-attribute, update-product-attribute, delete-product-attribute
- get-product-attribute-options, add-product-attribute-option,
  update-product-attribute-option, delete-product-attribute-option
- search-attribute-sets, get-attribute-set-by-id, create-attribute-set,
  update-attribute-set, delete-attribute-set
- get-attributes-from-set, delete-attribute-from-set, assign-attribute-to-set-group
- search-attribute-groups, create-attribute-group, update-attribute-group,
  delete-attribute-group
"""

from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from adobe_commerce_mcp.api import attribute_sets, product_attributes
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response, search_text_response
from adobe_commerce_mcp.tools.schemas import (
    AttributeCode,
    AttributeOptionInput,
    EntityId,
    FiltersParam,
    PageParam,
    PageSizeParam,
    QueryParam,
    SortOrdersParam,
    to_search_criteria,
)

AttributeType = Literal[
    "text", "textarea", "boolean", "date", "datetime", "integer",
    "decimal", "price", "weight", "singleselect", "multiselect",
]
Scope = Literal["store", "website", "global"]
FrontendInput = Literal["text", "textarea", "boolean", "date", "select", "multiselect", "price"]
Label = Annotated[str, Field(min_length=1, description="Display label.")]
OptionId = Annotated[str, Field(min_length=1, description="The option ID.")]


def _option_payload(option: AttributeOptionInput | dict) -> dict:
    if isinstance(option, dict):
        option = AttributeOptionInput.model_validate(option)
    return option.model_dump(exclude_none=True)


def register_attribute_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register product attribute tools on the server."""

    @mcp.tool(
        name="search-products-attributes",
        title="Search Product Attributes",
        annotations={"readOnlyHint": True},
    )
    def search_products_attributes(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search product attributes with flexible search filters.

        Items have the shape:
        {"attribute_id": int, "attribute_code": str, "frontend_input": str,
         "default_frontend_label": str, "scope": str, "options": [...]}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Product Attributes",
            criteria,
            product_attributes.get_products_attributes(client, criteria),
            query,
        )

    @mcp.tool(
        name="get-product-attribute-by-code",
        title="Get Product Attribute by Code",
        annotations={"readOnlyHint": True},
    )
    def get_product_attribute_by_code(attribute_code: AttributeCode) -> str:
        """Get a product attribute by its code."""
        return item_text_response(
            "Product Attribute",
            product_attributes.get_product_attribute_by_code(client, attribute_code),
        )

    @mcp.tool(
        name="create-product-attribute",
        title="Create Product Attribute",
        annotations={"readOnlyHint": False},
    )
    def create_product_attribute(
        type: Annotated[AttributeType, Field(description="Logical type of the attribute.")],
        attribute_code: AttributeCode,
        default_frontend_label: Label,
        scope: Scope = "global",
        options: list[AttributeOptionInput] | None = None,
    ) -> str:
        """Create a product attribute. Options apply to select/multiselect types."""
        payload = product_attributes.build_attribute_payload(
            attribute_code,
            type,
            default_frontend_label,
            scope=scope,
            options=[_option_payload(o) for o in options] if options else None,
        )
        return item_text_response(
            "Create Product Attribute",
            product_attributes.create_product_attribute(client, payload),
        )

    @mcp.tool(
        name="update-product-attribute",
        title="Update Product Attribute",
        annotations={"readOnlyHint": False},
    )
    def update_product_attribute(
        attribute_code: AttributeCode,
        default_frontend_label: Label | None = None,
        frontend_input: Annotated[
            FrontendInput | None,
            Field(description="Admin input type. Commerce may refuse changes on existing attributes."),
        ] = None,
        scope: Scope | None = None,
        is_required: bool | None = None,
        is_filterable: bool | None = None,
        is_visible_on_front: bool | None = None,
        options: list[AttributeOptionInput] | None = None,
    ) -> str:
        """Update an existing product attribute. Only given fields change."""
        changes = {
            "default_frontend_label": default_frontend_label,
            "frontend_input": frontend_input,
            "scope": scope,
            "options": [_option_payload(o) for o in options] if options else None,
            "is_required": is_required,
            "is_filterable": is_filterable,
            "is_visible_on_front": is_visible_on_front,
        }
        return item_text_response(
            "Update Product Attribute",
            product_attributes.update_product_attribute(
                client,
                attribute_code,
                {k: v for k, v in changes.items() if v is not None},
            ),
        )

    @mcp.tool(
        name="delete-product-attribute",
        title="Delete Product Attribute",
        annotations={"readOnlyHint": False},
    )
    def delete_product_attribute(attribute_code: AttributeCode) -> str:
        """Delete a product attribute."""
        return item_text_response(
            "Delete Product Attribute",
            product_attributes.delete_product_attribute(client, attribute_code),
        )

    @mcp.tool(
        name="get-product-attribute-options",
        title="Get Product Attribute Options",
        annotations={"readOnlyHint": True},
    )
    def get_product_attribute_options(attribute_code: AttributeCode) -> str:
        """List the options of a select/multiselect product attribute."""
        return item_text_response(
            "Product Attribute Options",
            product_attributes.get_product_attribute_options(client, attribute_code),
        )

    @mcp.tool(
        name="add-product-attribute-option",
        title="Add Product Attribute Option",
        annotations={"readOnlyHint": False},
    )
    def add_product_attribute_option(
        attribute_code: AttributeCode, option: AttributeOptionInput
    ) -> str:
        """Add an option to a product attribute."""
        return item_text_response(
            "Add Product Attribute Option",
            product_attributes.add_product_attribute_option(
                client, attribute_code, _option_payload(option)
            ),
        )

    @mcp.tool(
        name="update-product-attribute-option",
        title="Update Product Attribute Option",
        annotations={"readOnlyHint": False},
    )
    def update_product_attribute_option(
        attribute_code: AttributeCode, option_id: OptionId, option: AttributeOptionInput
    ) -> str:
        """Update an existing option of a product attribute."""
        return item_text_response(
            "Update Product Attribute Option",
            product_attributes.update_product_attribute_option(
                client, attribute_code, option_id, _option_payload(option)
            ),
        )

    @mcp.tool(
        name="delete-product-attribute-option",
        title="Delete Product Attribute Option",
        annotations={"readOnlyHint": False},
    )
    def delete_product_attribute_option(
        attribute_code: AttributeCode, option_id: OptionId
    ) -> str:
        """Delete an option from a product attribute."""
        return item_text_response(
            "Delete Product Attribute Option",
            product_attributes.delete_product_attribute_option(
                client, attribute_code, option_id
            ),
        )


def register_attribute_set_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register attribute set and attribute group tools on the server."""

    @mcp.tool(
        name="search-attribute-sets",
        title="Search Attribute Sets",
        annotations={"readOnlyHint": True},
    )
    def search_attribute_sets(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search attribute sets.

        Items have the shape:
        {"attribute_set_id": int, "attribute_set_name": str, "sort_order": int,
         "entity_type_id": int}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Attribute Sets",
            criteria,
            attribute_sets.get_attribute_sets_list(client, criteria),
            query,
        )

    @mcp.tool(
        name="get-attribute-set-by-id",
        title="Get Attribute Set by ID",
        annotations={"readOnlyHint": True},
    )
    def get_attribute_set_by_id(attribute_set_id: EntityId) -> str:
        """Get an attribute set by its ID."""
        return item_text_response(
            "Attribute Set", attribute_sets.get_attribute_set_by_id(client, attribute_set_id)
        )

    @mcp.tool(
        name="create-attribute-set",
        title="Create Attribute Set",
        annotations={"readOnlyHint": False},
    )
    def create_attribute_set(
        attribute_set_name: Label,
        sort_order: Annotated[int, Field(ge=0)] = 0,
        skeleton_id: Annotated[
            int, Field(gt=0, description="Attribute set to copy groups from.")
        ] = attribute_sets.DEFAULT_ATTRIBUTE_SET_ID,
    ) -> str:
        """Create a product attribute set based on an existing one."""
        attribute_set = {
            "attribute_set_name": attribute_set_name,
            "sort_order": sort_order,
            "entity_type_id": 4,
        }
        return item_text_response(
            "Create Attribute Set",
            attribute_sets.create_attribute_set(client, attribute_set, skeleton_id),
        )

    @mcp.tool(
        name="update-attribute-set",
        title="Update Attribute Set",
        annotations={"readOnlyHint": False},
    )
    def update_attribute_set(
        attribute_set_id: EntityId,
        attribute_set_name: Label | None = None,
        sort_order: Annotated[int | None, Field(ge=0)] = None,
    ) -> str:
        """Rename or reorder an attribute set."""
        changes = {"attribute_set_name": attribute_set_name, "sort_order": sort_order}
        return item_text_response(
            "Update Attribute Set",
            attribute_sets.update_attribute_set(
                client,
                attribute_set_id,
                {k: v for k, v in changes.items() if v is not None},
            ),
        )

    @mcp.tool(
        name="delete-attribute-set",
        title="Delete Attribute Set",
        annotations={"readOnlyHint": False},
    )
    def delete_attribute_set(attribute_set_id: EntityId) -> str:
        """Delete an attribute set."""
        return item_text_response(
            "Delete Attribute Set", attribute_sets.delete_attribute_set(client, attribute_set_id)
        )

    @mcp.tool(
        name="get-attributes-from-set",
        title="Get Attributes from Set",
        annotations={"readOnlyHint": True},
    )
    def get_attributes_from_set(attribute_set_id: EntityId) -> str:
        """List the attributes assigned to an attribute set."""
        return item_text_response(
            "Attributes from Set",
            attribute_sets.get_attributes_from_set(client, attribute_set_id),
        )

    @mcp.tool(
        name="delete-attribute-from-set",
        title="Delete Attribute from Set",
        annotations={"readOnlyHint": False},
    )
    def delete_attribute_from_set(
        attribute_set_id: EntityId, attribute_code: AttributeCode
    ) -> str:
        """Remove an attribute from an attribute set."""
        return item_text_response(
            "Delete Attribute from Set",
            attribute_sets.delete_attribute_from_set(client, attribute_set_id, attribute_code),
        )

    @mcp.tool(
        name="assign-attribute-to-set-group",
        title="Assign Attribute to Set Group",
        annotations={"readOnlyHint": False},
    )
    def assign_attribute_to_set_group(
        attribute_set_id: EntityId,
        attribute_group_id: EntityId,
        attribute_code: AttributeCode,
        sort_order: Annotated[int, Field(ge=0)] = 0,
    ) -> str:
        """Assign an attribute to a group within an attribute set."""
        return item_text_response(
            "Assign Attribute to Set Group",
            attribute_sets.assign_attribute_to_set_group(
                client, attribute_set_id, attribute_group_id, attribute_code, sort_order
            ),
        )

    @mcp.tool(
        name="search-attribute-groups",
        title="Search Attribute Groups",
        annotations={"readOnlyHint": True},
    )
    def search_attribute_groups(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search attribute groups. Filter on attribute_set_id to list the groups of one set.

        Items have the shape:
        {"attribute_group_id": str, "attribute_group_name": str, "attribute_set_id": int}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Attribute Groups",
            criteria,
            attribute_sets.get_attribute_groups(client, criteria),
            query,
        )

    @mcp.tool(
        name="create-attribute-group",
        title="Create Attribute Group",
        annotations={"readOnlyHint": False},
    )
    def create_attribute_group(attribute_set_id: EntityId, attribute_group_name: Label) -> str:
        """Create a group inside an attribute set."""
        group = {"attribute_group_name": attribute_group_name, "attribute_set_id": attribute_set_id}
        return item_text_response(
            "Create Attribute Group", attribute_sets.create_attribute_group(client, group)
        )

    @mcp.tool(
        name="update-attribute-group",
        title="Update Attribute Group",
        annotations={"readOnlyHint": False},
    )
    def update_attribute_group(
        attribute_set_id: EntityId,
        attribute_group_id: EntityId,
        attribute_group_name: Label,
    ) -> str:
        """Rename a group of an attribute set."""
        group = {
            "attribute_group_id": str(attribute_group_id),
            "attribute_group_name": attribute_group_name,
            "attribute_set_id": attribute_set_id,
        }
        return item_text_response(
            "Update Attribute Group",
            attribute_sets.update_attribute_group(client, attribute_set_id, group),
        )

    @mcp.tool(
        name="delete-attribute-group",
        title="Delete Attribute Group",
        annotations={"readOnlyHint": False},
    )
    def delete_attribute_group(attribute_group_id: EntityId) -> str:
        """Delete an attribute group."""
        return item_text_response(
            "Delete Attribute Group",
            attribute_sets.delete_attribute_group(client, attribute_group_id),
        )
