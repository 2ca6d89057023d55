"""
Adobe Commerce MCP Server - Main Entry Point

This module builds the FastMCP server and registers the tools of every API
domain against one AdobeCommerceClient.

Tool results are rendered as text: a <meta> block describing the call and a
<data> block with the JSON payload (one item per line for searches). Search
tools accept an optional JMESPath 'query' that is applied to the returned
items before rendering, so their docstrings document the item shape.
"""

import logging
import os
import sys

from fastmcp import FastMCP

from adobe_commerce_mcp.client import AdobeCommerceClient
from adobe_commerce_mcp.config import env_flag, load_client_options, load_env_files
from adobe_commerce_mcp.tools import REGISTRARS

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
Adobe Commerce MCP Server provides tools for managing an Adobe Commerce
(Magento 2) store through its REST API.

## Tools

Key capabilities organized by domain:
- **Products**: Search, create, update and delete products; website assignment
- **Attributes**: Product attributes, their options, attribute sets and groups
- **Configurable products**: Options and child product links
- **Pricing**: Base, special and tier prices and costs
- **Categories**: Category tree, category CRUD and product assignment
- **Customers, Orders, CMS**: Search customers, orders, CMS blocks and pages
- **Stores**: Websites, store groups, store views and store configuration
- **Inventory**: MSI stocks, sources, source items, links, source selection,
  salability checks and single-source stock items

## Searching

Search tools take page (default 1), page_size (max 10), filters and
sort_orders. Filters are combined with AND; condition_type defaults to 'eq'.
Use 'like' with % wildcards for partial matches.

## JMESPath Queries

Search tools accept an optional JMESPath 'query' applied to the returned items.
Custom functions: nvl(), int(), str(), regex_replace()
"""


# =============================================================================
# Server Setup
# =============================================================================


def create_server(client: AdobeCommerceClient, mask_errors: bool = False) -> FastMCP:
    """Create a FastMCP server with every tool registered against client."""
    mcp = FastMCP(
        name="Adobe Commerce MCP Server",
        instructions=INSTRUCTIONS,
        mask_error_details=mask_errors,
        on_duplicate_tools="error",
    )
    for register in REGISTRARS:
        register(mcp, client)
    return mcp


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging to stderr.

    stdout carries the MCP stdio transport, so nothing may be logged there.
    Calling it again does not add a second handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is sys.stderr:
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root_logger.addHandler(handler)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Run the Adobe Commerce MCP Server over stdio."""
    load_env_files()
    setup_logging(os.getenv("ADOBE_COMMERCE_MCP_LOG_LEVEL", "INFO"))

    options = load_client_options()
    client = AdobeCommerceClient(options)
    logger.info(
        "Starting Adobe Commerce MCP Server for %s (auth: %s)", options.url, client.auth_type
    )

    mcp = create_server(client, mask_errors=env_flag("ADOBE_COMMERCE_MCP_MASK_ERRORS", False))
    mcp.run()


if __name__ == "__main__":
    main()
