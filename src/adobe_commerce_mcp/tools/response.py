"""
Text rendering of resource results for MCP tools.

Successful results render as a <meta> block describing the call followed by
a <data> block; failures render as a plain message naming the endpoint and
the error.
"""

import json
from typing import Any, Callable

from adobe_commerce_mcp.search_criteria import SearchCriteria
from adobe_commerce_mcp.types import ApiResponse
from adobe_commerce_mcp.utils.jmespath_extensions import apply_query


def failure_text(endpoint: str, error: str | None) -> str:
    return (
        "Failed to retrieve data from Adobe Commerce.\n"
        f"Endpoint: {endpoint}\n"
        f"Error: {error}"
    )


def tool_text_response(
    response: ApiResponse[Any],
    success_text: str | Callable[[ApiResponse[Any]], str],
) -> str:
    """Render a failure message, or the success text for a successful response."""
    if not response.success:
        return failure_text(response.endpoint, response.error)
    return success_text(response) if callable(success_text) else success_text


def _dumps(value: Any) -> str:
    return json.dumps(value, default=str)


def _meta(**fields: Any) -> str:
    lines = ["<meta>"]
    for tag, value in fields.items():
        lines.append(f"  <{tag}>{value}</{tag}>")
    lines.append("</meta>")
    return "\n".join(lines)


def search_text_response(
    name: str,
    criteria: SearchCriteria,
    response: ApiResponse[list[Any]],
    query: str | None = None,
) -> str:
    """
    Render a search result, one JSON item per line.

    When a JMESPath query is given it is applied to the returned items
    before rendering; an invalid expression renders as a failure.
    """
    if not response.success:
        return failure_text(response.endpoint, response.error)

    items: Any = response.data or []
    if query:
        items, error = apply_query(items, query)
        if error:
            return failure_text(response.endpoint, error)
        if not isinstance(items, list):
            items = [items]

    meta = _meta(
        name=name,
        page=criteria.page,
        pageSize=criteria.page_size,
        endpoint=response.endpoint,
        totalItems=len(items),
    )
    data = "\n".join(_dumps(item) for item in items)
    return f"{meta}\n\n<data>\n{data}\n</data>"


def item_text_response(name: str, response: ApiResponse[Any]) -> str:
    """Render a single-entity (or scalar) result."""
    return tool_text_response(
        response,
        lambda resp: (
            f"{_meta(name=name, endpoint=resp.endpoint)}\n\n"
            f"<data>\n{_dumps(resp.data)}\n</data>"
        ),
    )
