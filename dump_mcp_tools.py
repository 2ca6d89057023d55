#!/usr/bin/env python3
"""Dump the Adobe Commerce MCP tool list in a readable format.

The server is built against a client with placeholder credentials, so no
environment configuration or network access is needed.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

DEFAULT_OUTPUT_DIR = Path(__file__).parent / "test-output"


def build_placeholder_server():
    from adobe_commerce_mcp.auth import OAuth1aConfig
    from adobe_commerce_mcp.client import AdobeCommerceClient, ClientOptions
    from adobe_commerce_mcp.server import create_server

    options = ClientOptions(
        url="https://commerce.example.com/rest/",
        auth=OAuth1aConfig(
            consumer_key="placeholder",
            consumer_secret="placeholder",
            access_token="placeholder",
            access_token_secret="placeholder",
        ),
    )
    return create_server(AdobeCommerceClient(options))


async def get_tools() -> dict[str, Any]:
    """Fetch tools from the MCP server, keyed by tool name."""
    return await build_placeholder_server().get_tools()


def read_only(tool) -> bool:
    annotations = tool.annotations
    return bool(annotations and annotations.readOnlyHint)


def tool_record(tool) -> dict[str, Any]:
    return {
        "name": tool.name,
        "title": tool.title,
        "description": tool.description,
        "read_only": read_only(tool),
        "parameters": tool.parameters,
    }


def render_text(tools: list) -> str:
    lines = ["# MCP Tools List", f"# Total tools: {len(tools)}", ""]
    for i, tool in enumerate(tools):
        lines.append("=" * 80)
        lines.append(f"TOOL #{i + 1}: {tool.name}")
        lines.append("=" * 80)
        lines.append(f"title: {tool.title}")
        lines.append(f"read_only: {read_only(tool)}")
        lines.append("description: |")
        lines.extend(f"    {line}" for line in (tool.description or "").split("\n"))
        lines.append("parameters (inputSchema): |")
        params = json.dumps(tool.parameters, indent=4, default=str)
        lines.extend(f"    {line}" for line in params.split("\n"))
        lines.append("")
    return "\n".join(lines)


def render_markdown(tools: list) -> str:
    lines = [
        "# Adobe Commerce MCP Tools Reference",
        "",
        f"This document describes the {len(tools)} tools available in the Adobe Commerce MCP server.",
        "",
        "| Tool | Title | Read-only |",
        "|---|---|---|",
    ]
    lines.extend(f"| `{t.name}` | {t.title} | {'yes' if read_only(t) else 'no'} |" for t in tools)
    lines.append("")
    for i, tool in enumerate(tools):
        lines.append(f"## {i + 1}. `{tool.name}`")
        lines.append("")
        lines.append("```")
        lines.append(tool.description or "")
        lines.append("```")
        lines.append("")
        lines.append("```json")
        lines.append(json.dumps(tool.parameters, indent=2, default=str))
        lines.append("```")
        lines.append("")
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Dump MCP tools/list output in a readable format")
    parser.add_argument("-o", "--output", help="Output file (default: test-output/mcp_tools.<ext>)")
    parser.add_argument("--stdout", action="store_true", help="Write to stdout instead of file")
    parser.add_argument("-t", "--tool", help="Filter to a specific tool by name")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--markdown", "--md", action="store_true", help="Output as Markdown")
    args = parser.parse_args()

    logging.getLogger().setLevel(logging.CRITICAL)

    tools_dict = asyncio.run(get_tools())
    tools = sorted(tools_dict.values(), key=lambda t: t.name)

    if args.tool:
        if args.tool not in tools_dict:
            print(f"Error: Tool '{args.tool}' not found", file=sys.stderr)
            print(f"Available tools: {', '.join(sorted(tools_dict))}", file=sys.stderr)
            sys.exit(1)
        tools = [tools_dict[args.tool]]

    if args.json:
        output = json.dumps([tool_record(t) for t in tools], indent=2, default=str)
        output_ext = ".json"
    elif args.markdown:
        output = render_markdown(tools)
        output_ext = ".md"
    else:
        output = render_text(tools)
        output_ext = ".txt"

    if args.stdout:
        print(output)
        return

    output_path = Path(args.output) if args.output else DEFAULT_OUTPUT_DIR / f"mcp_tools{output_ext}"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output)
    print(f"Output written to {output_path}")


if __name__ == "__main__":
    main()
