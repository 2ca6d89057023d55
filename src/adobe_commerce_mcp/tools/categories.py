"""
Category tools.

Registers:
- search-categories, get-category-by-id, get-category-tree
- create-category, update-category, delete-category, move-category
- get-category-products, assign-product-to-category, remove-product-from-category
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from adobe_commerce_mcp.api import categories
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response, search_text_response
from adobe_commerce_mcp.tools.schemas import (
    EntityId,
    FiltersParam,
    PageParam,
    PageSizeParam,
    QueryParam,
    Sku,
    SortOrdersParam,
    to_search_criteria,
)

CategoryId = Annotated[int, Field(gt=0, description="ID of the category.")]
Position = Annotated[int | None, Field(ge=0, description="Position within the category.")]


def register_category_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register category tools on the server."""

    @mcp.tool(
        name="search-categories",
        title="Search Categories",
        annotations={"readOnlyHint": True},
    )
    def search_categories(
        page: PageParam = 1,
        page_size: PageSizeParam = 10,
        filters: FiltersParam = None,
        sort_orders: SortOrdersParam = None,
        query: QueryParam = None,
    ) -> str:
        """
        Search categories with flexible search filters.

        Items have the shape:
        {"id": int, "parent_id": int, "name": str, "is_active": bool,
         "position": int, "level": int, "path": str, "include_in_menu": bool}
        """
        criteria = to_search_criteria(page, page_size, filters, sort_orders)
        return search_text_response(
            "Categories", criteria, categories.get_categories(client, criteria), query
        )

    @mcp.tool(
        name="get-category-by-id",
        title="Get Category by ID",
        annotations={"readOnlyHint": True},
    )
    def get_category_by_id(category_id: CategoryId) -> str:
        """Get a category by its ID."""
        return item_text_response("Category", categories.get_category_by_id(client, category_id))

    @mcp.tool(
        name="get-category-tree",
        title="Get Category Tree",
        annotations={"readOnlyHint": True},
    )
    def get_category_tree(
        root_category_id: Annotated[int | None, Field(gt=0)] = None,
        depth: Annotated[int | None, Field(ge=1, description="Depth of the tree.")] = None,
    ) -> str:
        """Get the category tree, optionally rooted at a category and limited in depth."""
        return item_text_response(
            "Category Tree", categories.get_category_tree(client, root_category_id, depth)
        )

    @mcp.tool(
        name="create-category",
        title="Create Category",
        annotations={"readOnlyHint": False},
    )
    def create_category(
        name: Annotated[str, Field(min_length=1, description="Category name.")],
        parent_id: Annotated[int, Field(gt=0, description="ID of the parent category.")] = 2,
        is_active: bool = True,
        include_in_menu: bool = True,
        position: Position = None,
    ) -> str:
        """Create a new category."""
        category = {
            "name": name,
            "parent_id": parent_id,
            "is_active": is_active,
            "include_in_menu": include_in_menu,
        }
        if position is not None:
            category["position"] = position
        return item_text_response("Create Category", categories.create_category(client, category))

    @mcp.tool(
        name="update-category",
        title="Update Category",
        annotations={"readOnlyHint": False},
    )
    def update_category(
        category_id: CategoryId,
        name: Annotated[str | None, Field(min_length=1)] = None,
        is_active: bool | None = None,
        include_in_menu: bool | None = None,
        position: Position = None,
    ) -> str:
        """Update an existing category. Only given fields change."""
        changes = {
            "name": name,
            "is_active": is_active,
            "include_in_menu": include_in_menu,
            "position": position,
        }
        return item_text_response(
            "Update Category",
            categories.update_category(
                client, category_id, {k: v for k, v in changes.items() if v is not None}
            ),
        )

    @mcp.tool(
        name="delete-category",
        title="Delete Category",
        annotations={"readOnlyHint": False},
    )
    def delete_category(category_id: CategoryId) -> str:
        """Delete a category."""
        return item_text_response("Delete Category", categories.delete_category(client, category_id))

    @mcp.tool(
        name="move-category",
        title="Move Category",
        annotations={"readOnlyHint": False},
    )
    def move_category(
        category_id: CategoryId,
        parent_id: EntityId,
        after_id: Annotated[
            int | None, Field(gt=0, description="Place after this sibling category.")
        ] = None,
    ) -> str:
        """Move a category under a new parent."""
        return item_text_response(
            "Move Category", categories.move_category(client, category_id, parent_id, after_id)
        )

    @mcp.tool(
        name="get-category-products",
        title="Get Category Products",
        annotations={"readOnlyHint": True},
    )
    def get_category_products(category_id: CategoryId) -> str:
        """List the products assigned to a category."""
        return item_text_response(
            "Category Products", categories.get_category_products(client, category_id)
        )

    @mcp.tool(
        name="assign-product-to-category",
        title="Assign Product to Category",
        annotations={"readOnlyHint": False},
    )
    def assign_product_to_category(
        category_id: CategoryId, sku: Sku, position: Position = None
    ) -> str:
        """Assign a product to a category."""
        return item_text_response(
            "Assign Product to Category",
            categories.assign_product_to_category(client, category_id, sku, position),
        )

    @mcp.tool(
        name="remove-product-from-category",
        title="Remove Product from Category",
        annotations={"readOnlyHint": False},
    )
    def remove_product_from_category(category_id: CategoryId, sku: Sku) -> str:
        """Remove a product from a category."""
        return item_text_response(
            "Remove Product from Category",
            categories.remove_product_from_category(client, category_id, sku),
        )
