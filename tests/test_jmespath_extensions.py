"""Tests for custom JMESPath functions."""

import jmespath
import pytest

from adobe_commerce_mcp.utils.jmespath_extensions import apply_query, search_with_custom_functions
from tests.fake_commerce import SAMPLE_PRODUCTS


class TestNvlFunction:
    """Tests for the nvl() custom function."""

    def test_nvl_returns_default_when_null(self):
        """nvl() should return default value when input is null."""
        data = {"value": None}
        result = search_with_custom_functions("nvl(value, 'default')", data)
        assert result == "default"

    def test_nvl_returns_value_when_not_null(self):
        """nvl() should return original value when not null."""
        data = {"value": "actual"}
        result = search_with_custom_functions("nvl(value, 'default')", data)
        assert result == "actual"

    def test_nvl_with_contains_null_safety(self):
        """nvl() keeps contains() working on products without a name."""
        data = [{"sku": "A", "name": "Duffle Bag"}, {"sku": "B", "name": None}]
        result = search_with_custom_functions("[?contains(nvl(name, ''), 'Bag')].sku", data)
        assert result == ["A"]

    def test_nvl_on_custom_attribute_values(self):
        """Products whose color attribute is null fall back to the default."""
        query = "[].{sku: sku, color: nvl(custom_attributes[?attribute_code=='color'] | [0].value, 'none')}"
        result = search_with_custom_functions(query, SAMPLE_PRODUCTS)

        assert result[0] == {"sku": "MB-01", "color": "49"}
        assert result[1] == {"sku": "MB-02", "color": "none"}
        assert result[2] == {"sku": "MH01", "color": "none"}

    def test_nvl_with_backtick_empty_array_default(self):
        """nvl() accepts a literal empty array default."""
        data = [{"ids": None}]
        result = search_with_custom_functions("[].nvl(ids, `[]`)", data)
        assert result == [[]]

    def test_nvl_rejects_null_default_value(self):
        """nvl() with a null default raises a type error."""
        with pytest.raises(jmespath.exceptions.JMESPathTypeError):
            search_with_custom_functions("nvl(value, `null`)", {"value": None})


class TestIntFunction:
    """Tests for the int() custom function."""

    def test_int_converts_string(self):
        """int() converts EAV option ids returned as strings."""
        data = [{"attribute_code": "color", "value": "49"}]
        result = search_with_custom_functions("[?int(value) > `40`].attribute_code", data)
        assert result == ["color"]

    def test_int_returns_null_for_invalid_string(self):
        assert search_with_custom_functions("int(value)", {"value": "abc"}) is None

    def test_int_parses_decimal_string(self):
        """Decimal strings such as prices are truncated to whole numbers."""
        assert search_with_custom_functions("int(value)", {"value": "45.0000"}) == 45
        assert search_with_custom_functions("int(value)", {"value": "12.9"}) == 12

    def test_int_after_regex_replace(self):
        """A formatted price can be stripped and compared numerically."""
        data = [{"sku": "MB-01", "label": "$45.00"}, {"sku": "MB-02", "label": "$9.50"}]
        query = "[?int(regex_replace('[^0-9.]', '', label)) > `10`].sku"
        assert search_with_custom_functions(query, data) == ["MB-01"]

    def test_int_keeps_long_integer_strings_exact(self):
        assert search_with_custom_functions("int(value)", {"value": "12345678901234567890"}) == (
            12345678901234567890
        )

    def test_int_returns_null_for_nan_string(self):
        assert search_with_custom_functions("int(value)", {"value": "nan"}) is None

    def test_int_truncates_number(self):
        assert search_with_custom_functions("int(value)", {"value": 42.7}) == 42

    def test_int_handles_null_input(self):
        assert search_with_custom_functions("int(value)", {"value": None}) is None


class TestStrFunction:
    """Tests for the str() custom function."""

    def test_str_converts_number(self):
        assert search_with_custom_functions("str(id)", {"id": 100}) == "100"

    def test_str_handles_null_and_bool(self):
        assert search_with_custom_functions("str(value)", {"value": None}) == "null"
        assert search_with_custom_functions("str(value)", {"value": True}) == "true"


class TestRegexReplaceFunction:
    """Tests for the regex_replace() custom function."""

    def test_regex_replace_basic(self):
        """regex_replace() strips a SKU prefix."""
        result = search_with_custom_functions("regex_replace('^MB-', '', sku)", {"sku": "MB-01"})
        assert result == "01"

    def test_regex_replace_handles_null(self):
        assert search_with_custom_functions("regex_replace('x', 'y', v)", {"v": None}) is None


class TestApplyQuery:
    """Tests for apply_query."""

    def test_projection(self):
        result, error = apply_query(SAMPLE_PRODUCTS, "[?price > `33`].sku")

        assert error is None
        assert result == ["MB-01", "MH01"]

    def test_null_result_becomes_empty_list(self):
        result, error = apply_query({"a": 1}, "missing")

        assert error is None
        assert result == []

    def test_invalid_expression(self):
        result, error = apply_query(SAMPLE_PRODUCTS, "[?price >")

        assert result == []
        assert error.startswith("Invalid query expression: ")
