"""
Adobe Commerce API modules.

Each module contains resource functions for a specific REST API domain.
"""

from adobe_commerce_mcp.api import (
    attribute_sets,
    categories,
    configurable_products,
    inventory,
    pricing,
    product_attributes,
    products,
    sales,
    stock_items,
    stores,
)

__all__ = [
    "products",
    "product_attributes",
    "attribute_sets",
    "configurable_products",
    "pricing",
    "categories",
    "sales",
    "stores",
    "inventory",
    "stock_items",
]
