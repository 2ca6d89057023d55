"""
Configurable product tools.

Registers:
- add-configurable-product-option, get-configurable-product-options-all,
  get-configurable-product-option-by-id, update-configurable-product-option,
  delete-configurable-product-option
- link-configurable-child, unlink-configurable-child,
  get-configurable-product-children
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from adobe_commerce_mcp.api import configurable_products
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response
from adobe_commerce_mcp.tools.schemas import ConfigurableOptionInput, Sku

OptionId = Annotated[int, Field(gt=0, description="ID of the configurable option.")]


def option_payload(option: ConfigurableOptionInput | dict) -> dict:
    """Convert option input to the API shape, with values as value_index objects."""
    if isinstance(option, dict):
        option = ConfigurableOptionInput.model_validate(option)
    return {
        "attribute_id": option.attribute_id,
        "label": option.label,
        "position": option.position,
        "is_use_default": option.is_use_default,
        "values": [{"value_index": value} for value in option.values],
    }


def register_configurable_product_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register configurable product tools on the server."""

    @mcp.tool(
        name="add-configurable-product-option",
        title="Add Configurable Product Option",
        annotations={"readOnlyHint": False},
    )
    def add_configurable_product_option(sku: Sku, option: ConfigurableOptionInput) -> str:
        """Add a configurable option (e.g. color, size) to a configurable product."""
        return item_text_response(
            "Add Configurable Product Option",
            configurable_products.add_configurable_product_option(
                client, sku, option_payload(option)
            ),
        )

    @mcp.tool(
        name="get-configurable-product-options-all",
        title="Get All Configurable Product Options",
        annotations={"readOnlyHint": True},
    )
    def get_configurable_product_options_all(sku: Sku) -> str:
        """List all configurable options of a configurable product."""
        return item_text_response(
            "Configurable Product Options",
            configurable_products.get_configurable_product_options_all(client, sku),
        )

    @mcp.tool(
        name="get-configurable-product-option-by-id",
        title="Get Configurable Product Option by ID",
        annotations={"readOnlyHint": True},
    )
    def get_configurable_product_option_by_id(sku: Sku, option_id: OptionId) -> str:
        """Get one configurable option of a configurable product."""
        return item_text_response(
            "Configurable Product Option",
            configurable_products.get_configurable_product_option_by_id(client, sku, option_id),
        )

    @mcp.tool(
        name="update-configurable-product-option",
        title="Update Configurable Product Option",
        annotations={"readOnlyHint": False},
    )
    def update_configurable_product_option(
        sku: Sku, option_id: OptionId, option: ConfigurableOptionInput
    ) -> str:
        """Update a configurable option of a configurable product."""
        return item_text_response(
            "Update Configurable Product Option",
            configurable_products.update_configurable_product_option(
                client, sku, option_id, option_payload(option)
            ),
        )

    @mcp.tool(
        name="delete-configurable-product-option",
        title="Delete Configurable Product Option",
        annotations={"readOnlyHint": False},
    )
    def delete_configurable_product_option(sku: Sku, option_id: OptionId) -> str:
        """Delete a configurable option from a configurable product."""
        return item_text_response(
            "Delete Configurable Product Option",
            configurable_products.delete_configurable_product_option(client, sku, option_id),
        )

    @mcp.tool(
        name="link-configurable-child",
        title="Link Configurable Child",
        annotations={"readOnlyHint": False},
    )
    def link_configurable_child(sku: Sku, child_sku: Sku) -> str:
        """Link a simple product as a variant of a configurable product."""
        return item_text_response(
            "Link Configurable Child",
            configurable_products.link_configurable_child(client, sku, child_sku),
        )

    @mcp.tool(
        name="unlink-configurable-child",
        title="Unlink Configurable Child",
        annotations={"readOnlyHint": False},
    )
    def unlink_configurable_child(sku: Sku, child_sku: Sku) -> str:
        """Unlink a variant from a configurable product."""
        return item_text_response(
            "Unlink Configurable Child",
            configurable_products.unlink_configurable_child(client, sku, child_sku),
        )

    @mcp.tool(
        name="get-configurable-product-children",
        title="Get Configurable Product Children",
        annotations={"readOnlyHint": True},
    )
    def get_configurable_product_children(sku: Sku) -> str:
        """List the variants linked to a configurable product."""
        return item_text_response(
            "Configurable Product Children",
            configurable_products.get_configurable_product_children(client, sku),
        )
