"""
Search criteria support for Adobe Commerce list endpoints.

Adobe Commerce encodes search criteria as nested query parameters:
    searchCriteria[currentPage]=1
    searchCriteria[pageSize]=20
    searchCriteria[filter_groups][0][filters][0][field]=sku
    searchCriteria[filter_groups][0][filters][0][value]=MB-01
    searchCriteria[filter_groups][0][filters][0][condition_type]=eq
    searchCriteria[sortOrders][0][field]=created_at
    searchCriteria[sortOrders][0][direction]=DESC

Every filter is placed in its own filter group, so multiple filters are
combined with AND.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol, Sequence
from urllib.parse import quote

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
DEFAULT_INPUT_PAGE_SIZE = 10


class ConditionType(str, Enum):
    """Filter condition types understood by Adobe Commerce."""

    EQ = "eq"
    FINSET = "finset"
    FROM = "from"
    GT = "gt"
    GTEQ = "gteq"
    IN = "in"
    LIKE = "like"
    LT = "lt"
    LTEQ = "lteq"
    MOREQ = "moreq"
    NEQ = "neq"
    NFINSET = "nfinset"
    NIN = "nin"
    NLIKE = "nlike"
    NOTNULL = "notnull"
    NULL = "null"
    TO = "to"


CONDITION_TYPE_DESCRIPTIONS: dict[ConditionType, str] = {
    ConditionType.EQ: "Equals - exact match",
    ConditionType.FINSET: "A value within a set of values",
    ConditionType.FROM: "The beginning of a range. Must be used with 'to' condition",
    ConditionType.GT: "Greater than",
    ConditionType.GTEQ: "Greater than or equal",
    ConditionType.IN: "In - the value can contain a comma-separated list of values",
    ConditionType.LIKE: "Like - the value can contain SQL wildcard characters (% and _)",
    ConditionType.LT: "Less than",
    ConditionType.LTEQ: "Less than or equal",
    ConditionType.MOREQ: "More or equal",
    ConditionType.NEQ: "Not equal",
    ConditionType.NFINSET: "A value that is not within a set of values",
    ConditionType.NIN: "Not in - the value can contain a comma-separated list of values",
    ConditionType.NLIKE: "Not like - the value can contain SQL wildcard characters",
    ConditionType.NOTNULL: "Not null",
    ConditionType.NULL: "Null",
    ConditionType.TO: "The end of a range. Must be used with 'from' condition",
}


# =============================================================================
# Criteria Types
# =============================================================================


@dataclass(frozen=True)
class SearchCriteriaFilter:
    """A single field/value/condition filter."""

    field: str
    value: str | int | float | bool
    condition_type: ConditionType | None = None


@dataclass(frozen=True)
class SortOrder:
    """A sort field and direction."""

    field: str
    direction: Literal["ASC", "DESC"]


@dataclass
class SearchCriteria:
    """Pagination, filters and sort orders for a list endpoint."""

    page: int | None = None
    page_size: int | None = None
    filters: list[SearchCriteriaFilter] = field(default_factory=list)
    sort_orders: list[SortOrder] = field(default_factory=list)


class FilterLike(Protocol):
    field: str
    value: str | int | float
    condition_type: str | None


class SortLike(Protocol):
    field: str
    direction: str


class SearchCriteriaInputLike(Protocol):
    page: int | None
    page_size: int | None
    filters: Sequence[FilterLike] | None
    sort_orders: Sequence[SortLike] | None


# =============================================================================
# Query Building
# =============================================================================


def format_value(value: object) -> str:
    """
    Render a scalar for use in a URL.

    Booleans become 'true'/'false' and whole floats drop their fraction, so
    1.0 is sent as '1'. Other floats keep every digit.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def encode_component(value: object) -> str:
    """Percent-encode a value the way JavaScript's encodeURIComponent does."""
    return quote(format_value(value), safe="!~*'()")


def _condition_value(condition_type: ConditionType | str | None) -> str:
    if condition_type is None:
        return ConditionType.EQ.value
    if isinstance(condition_type, ConditionType):
        return condition_type.value
    return condition_type


def build_search_criteria_query(options: SearchCriteria | None = None) -> str:
    """
    Serialize search criteria into the Adobe Commerce query-string format.

    Args:
        options: Criteria to serialize. Missing page/page_size fall back to 1/20.

    Returns:
        Query string without the leading '?'.
    """
    options = options or SearchCriteria()
    page = options.page if options.page is not None else DEFAULT_PAGE
    page_size = options.page_size if options.page_size is not None else DEFAULT_PAGE_SIZE

    params = [
        f"searchCriteria[currentPage]={page}",
        f"searchCriteria[pageSize]={page_size}",
    ]

    for i, f in enumerate(options.filters or []):
        prefix = f"searchCriteria[filter_groups][{i}][filters][0]"
        params.append(f"{prefix}[field]={encode_component(f.field)}")
        params.append(f"{prefix}[value]={encode_component(f.value)}")
        params.append(
            f"{prefix}[condition_type]={encode_component(_condition_value(f.condition_type))}"
        )

    for i, sort in enumerate(options.sort_orders or []):
        prefix = f"searchCriteria[sortOrders][{i}]"
        params.append(f"{prefix}[field]={encode_component(sort.field)}")
        params.append(f"{prefix}[direction]={encode_component(sort.direction)}")

    return "&".join(params)


def to_condition_type(value: str | None) -> ConditionType | None:
    """Map a condition name (any case) onto ConditionType, or None if unknown."""
    if not value:
        return None
    try:
        return ConditionType[value.upper()]
    except KeyError:
        return None


def build_search_criteria_from_input(input: SearchCriteriaInputLike) -> SearchCriteria:
    """Convert validated tool input into SearchCriteria."""
    return SearchCriteria(
        page=input.page if input.page is not None else DEFAULT_PAGE,
        page_size=input.page_size if input.page_size is not None else DEFAULT_INPUT_PAGE_SIZE,
        filters=[
            SearchCriteriaFilter(
                field=f.field,
                value=f.value,
                condition_type=to_condition_type(f.condition_type),
            )
            for f in input.filters or []
        ],
        sort_orders=[
            SortOrder(field=s.field, direction=s.direction)
            for s in input.sort_orders or []
        ],
    )
