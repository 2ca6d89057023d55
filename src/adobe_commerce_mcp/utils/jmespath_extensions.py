"""
Custom JMESPath functions for querying Adobe Commerce search results.

This module provides custom JMESPath functions to enable:
- regex_replace(): Text transformation via regex find-and-replace
- int(): String to integer conversion with safe null handling
- str(): Convert any value to string
- nvl(): Provide default value when expression is null (like Oracle NVL)

Adobe Commerce returns many numeric values as strings (custom attribute
values, EAV option ids), so int() and regex_replace() let a query compare
them numerically. nvl() keeps filters on optional fields from failing with:
    "In function contains(), invalid type for value: None"

Example safe query using nvl():
    [?contains(nvl(name, ''), 'Backpack')]
"""

import re
from typing import Any, Optional, Union

import jmespath
from jmespath import functions


class CustomFunctions(functions.Functions):
    """Custom JMESPath functions for the Adobe Commerce MCP server."""

    @functions.signature(
        {'types': ['string']},
        {'types': ['string']},
        {'types': ['string', 'null']}
    )
    def _func_regex_replace(
        self,
        pattern: str,
        replacement: str,
        value: Optional[str]
    ) -> Optional[str]:
        """
        Perform regex find-and-replace on a string.

        Examples:
            regex_replace('^MB-', '', 'MB-01') → '01'
            regex_replace('[^0-9.]', '', '$45.00') → '45.00'
        """
        if value is None:
            return None
        try:
            return re.sub(pattern, replacement, value)
        except (re.error, TypeError):
            return value

    @functions.signature({'types': ['string', 'number', 'null']})
    def _func_int(self, value: Union[str, int, float, None]) -> Optional[int]:
        """
        Convert a value to an integer, or null if it cannot be converted.

        Decimal strings are truncated, so prices Commerce returns as text can
        be compared numerically.

        Examples:
            int('100') → 100
            int('45.0000') → 45
            int(42.7) → 42
            int('invalid') → null
        """
        if value is None:
            return None
        try:
            return int(value)
        except (ValueError, TypeError, OverflowError):
            pass
        try:
            return int(float(value))
        except (ValueError, TypeError, OverflowError):
            return None

    @functions.signature({'types': ['string', 'number', 'boolean', 'array', 'object', 'null']})
    def _func_str(self, value: Any) -> str:
        """
        Convert a value to a string.

        Examples:
            str(100) → '100'
            str(true) → 'true'
            str(null) → 'null'
        """
        if value is None:
            return 'null'
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return str(value)

    @functions.signature(
        {'types': ['string', 'number', 'boolean', 'array', 'object', 'null']},
        {'types': ['string', 'number', 'boolean', 'array', 'object']}
    )
    def _func_nvl(self, value: Any, default: Any) -> Any:
        """
        Return default if value is null.

        A null default is rejected by the signature, which catches queries
        written with [] instead of `[]`.

        Examples:
            nvl(null, 'N/A') → 'N/A'
            nvl(int(qty), `0`) → 0 when qty is not numeric
        """
        if value is None:
            return default
        return value


_custom_options = jmespath.Options(custom_functions=CustomFunctions())


def search_with_custom_functions(expression: str, data: Any) -> Any:
    """
    Execute a JMESPath query with the custom functions enabled.

    Examples:
        >>> data = [{"sku": "MB-01", "price": 34}, {"sku": "MB-02", "price": 59}]
        >>> search_with_custom_functions("[?price > `40`].sku", data)
        ['MB-02']
    """
    return jmespath.search(expression, data, options=_custom_options)


def apply_query(data: Any, expression: str) -> tuple[Any, str | None]:
    """
    Apply a JMESPath expression to data.

    Returns:
        Tuple of (result, error_message); error_message is None on success
    """
    try:
        result = search_with_custom_functions(expression, data)
        return (result if result is not None else [], None)
    except jmespath.exceptions.JMESPathError as e:
        return ([], f"Invalid query expression: {e}")
