"""
MCP tool modules.

Each module registers the tools of one API domain on a FastMCP server.
"""

from adobe_commerce_mcp.tools.attributes import (
    register_attribute_set_tools,
    register_attribute_tools,
)
from adobe_commerce_mcp.tools.categories import register_category_tools
from adobe_commerce_mcp.tools.configurable_products import register_configurable_product_tools
from adobe_commerce_mcp.tools.inventory import register_inventory_tools, register_stock_item_tools
from adobe_commerce_mcp.tools.pricing import register_pricing_tools
from adobe_commerce_mcp.tools.products import register_product_tools
from adobe_commerce_mcp.tools.sales import register_sales_tools
from adobe_commerce_mcp.tools.stores import register_store_tools

REGISTRARS = (
    register_category_tools,
    register_sales_tools,
    register_attribute_tools,
    register_attribute_set_tools,
    register_product_tools,
    register_configurable_product_tools,
    register_pricing_tools,
    register_store_tools,
    register_inventory_tools,
    register_stock_item_tools,
)

__all__ = [
    "REGISTRARS",
    "register_attribute_set_tools",
    "register_attribute_tools",
    "register_category_tools",
    "register_configurable_product_tools",
    "register_inventory_tools",
    "register_pricing_tools",
    "register_product_tools",
    "register_sales_tools",
    "register_stock_item_tools",
    "register_store_tools",
]
