"""
Adobe Commerce MCP Server

A Model Context Protocol (MCP) server for the Adobe Commerce REST API.
Enables AI assistants to manage catalog, pricing, inventory and store data.

See DESIGN.md for architecture and implementation notes.
"""

from adobe_commerce_mcp.server import main

if __name__ == "__main__":
    main()
