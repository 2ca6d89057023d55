"""
Store structure tools.

Registers: get-store-configs, get-store-views, get-store-groups, get-websites
"""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from adobe_commerce_mcp.api import stores
from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.tools.response import item_text_response


def register_store_tools(mcp: FastMCP, client: AdobeCommerceClient) -> None:
    """Register store tools on the server."""

    @mcp.tool(
        name="get-store-configs",
        title="Get Store Configs",
        annotations={"readOnlyHint": True},
    )
    def get_store_configs(
        store_codes: Annotated[
            list[Annotated[str, Field(min_length=1)]] | None,
            Field(description="Store view codes to limit the result to (e.g., ['default'])."),
        ] = None,
    ) -> str:
        """Get store view configuration: locale, currencies, timezone and base URLs."""
        return item_text_response(
            "Store Configs", stores.get_store_configs(client, store_codes)
        )

    @mcp.tool(
        name="get-store-views",
        title="Get Store Views",
        annotations={"readOnlyHint": True},
    )
    def get_store_views() -> str:
        """List all store views."""
        return item_text_response("Store Views", stores.get_store_views(client))

    @mcp.tool(
        name="get-store-groups",
        title="Get Store Groups",
        annotations={"readOnlyHint": True},
    )
    def get_store_groups() -> str:
        """List all store groups."""
        return item_text_response("Store Groups", stores.get_store_groups(client))

    @mcp.tool(
        name="get-websites",
        title="Get Websites",
        annotations={"readOnlyHint": True},
    )
    def get_websites() -> str:
        """List all websites."""
        return item_text_response("Websites", stores.get_websites(client))
