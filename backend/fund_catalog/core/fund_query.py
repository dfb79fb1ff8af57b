"""Fund Query Pipeline: filter, sort and paginate the fund collection.

Invariants:
    - Pure functions: no IO, no async; the input collection is never mutated
    - parse_fund_query never raises: unparseable input becomes "not specified"
    - Stage order is fixed: name, tags, currency, fund size, vintage, sort, page
    - Filters combine with AND; values inside one tag filter combine with OR
    - total counts post-filter records; total_pages >= 1 even when total == 0

Design Decisions:
    - Every filter is an optional typed value: None means the filter is not applied
    - Leading-number parsing ("12abc" -> 12) keeps query strings forgiving
    - sorted() is stable, so equal keys keep their filtered order in both directions
"""

import math
import re
import unicodedata
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from fund_catalog.core.domain_types import (
    ASCENDING_ALIASES, DEFAULT_PAGE, DEFAULT_PAGE_SIZE, TAG_FIELDS,
    SortDirection, SortField,
)

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


@dataclass(frozen=True)
class FundQuery:
    """Parsed list-endpoint criteria."""
    name: str | None = None
    tags: dict[str, tuple[str, ...]] = field(default_factory=dict)
    currency: str | None = None
    min_fund_size: float | None = None
    max_fund_size: float | None = None
    min_vintage: int | None = None
    max_vintage: int | None = None
    sort_by: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class FundPage:
    """One page of query results plus pagination metadata."""
    data: list[dict]
    page: int
    page_size: int
    total: int
    total_pages: int

    def to_response(self) -> dict:
        return {
            "data": self.data,
            "pagination": {
                "page": self.page,
                "pageSize": self.page_size,
                "total": self.total,
                "totalPages": self.total_pages,
            },
        }


# ─── Parsing ─────────────────────────────────────────────────────

def parse_float(raw: str | None) -> float | None:
    """Parse the leading number of raw. None when absent or not finite."""
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_int(raw: str | None) -> int | None:
    """Parse the leading integer of raw. None when there is none."""
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None


def _first(params: Mapping[str, Sequence[str]], key: str) -> str | None:
    values = params.get(key) or []
    for value in values:
        if value is not None and value.strip():
            return value
    return None


def _tag_values(params: Mapping[str, Sequence[str]], key: str) -> tuple[str, ...]:
    """Collect repeated and comma-separated values, blanks dropped."""
    collected: list[str] = []
    for value in params.get(key) or []:
        for part in value.split(","):
            part = part.strip()
            if part:
                collected.append(part)
    return tuple(collected)


def _positive_or(raw: str | None, default: int) -> int:
    value = parse_int(raw)
    return value if value is not None and value > 0 else default


def _parse_sort_field(raw: str | None) -> SortField | None:
    try:
        return SortField(raw.strip()) if raw is not None else None
    except ValueError:
        return None


def _parse_direction(raw: str | None) -> SortDirection:
    if raw is None or raw.strip().lower() in ASCENDING_ALIASES:
        return SortDirection.ASC
    return SortDirection.DESC


def parse_fund_query(params: Mapping[str, Sequence[str]]) -> FundQuery:
    """Build a FundQuery from multi-valued query parameters. Never raises."""
    tags = {key: values for key in TAG_FIELDS if (values := _tag_values(params, key))}
    return FundQuery(
        name=_first(params, "name"),
        tags=tags,
        currency=_first(params, "currency"),
        min_fund_size=parse_float(_first(params, "minFundSize")),
        max_fund_size=parse_float(_first(params, "maxFundSize")),
        min_vintage=parse_int(_first(params, "minVintage")),
        max_vintage=parse_int(_first(params, "maxVintage")),
        sort_by=_parse_sort_field(_first(params, "sortBy")),
        sort_direction=_parse_direction(_first(params, "sortOrder")),
        page=_positive_or(_first(params, "page"), DEFAULT_PAGE),
        page_size=_positive_or(_first(params, "pageSize"), DEFAULT_PAGE_SIZE),
    )


# ─── Predicates ──────────────────────────────────────────────────

def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches_name(fund: dict, needle: str) -> bool:
    name = fund.get("name")
    return isinstance(name, str) and needle.lower() in name.lower()


def _matches_any_tag(fund: dict, key: str, wanted: tuple[str, ...]) -> bool:
    values = fund.get(key)
    if not isinstance(values, list):
        return False
    return any(v in wanted for v in values)


def _in_range(value: object, low: float | None, high: float | None) -> bool:
    if not _is_number(value):
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


# ─── Sorting ─────────────────────────────────────────────────────

def collation_key(text: str) -> tuple[str, str]:
    """Locale-style ordering key: accent- and case-insensitive first,
    lowercase before uppercase on ties."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), text.swapcase())


def _sort_key(sort_by: SortField):
    if sort_by is SortField.NAME:
        def key(fund: dict):
            name = fund.get("name")
            return collation_key(name if isinstance(name, str) else "")
    else:
        def key(fund: dict):
            value = fund.get(sort_by.value)
            return value if _is_number(value) else 0
    return key


# ─── Pipeline ────────────────────────────────────────────────────

def run_fund_query(funds: Sequence[dict], query: FundQuery) -> FundPage:
    """Filter, sort and paginate funds. Returns a new list; funds is untouched."""
    result = list(funds)

    if query.name is not None:
        result = [f for f in result if _matches_name(f, query.name)]

    for key in TAG_FIELDS:
        wanted = query.tags.get(key)
        if wanted:
            result = [f for f in result if _matches_any_tag(f, key, wanted)]

    if query.currency is not None:
        result = [f for f in result if f.get("currency") == query.currency]

    if query.min_fund_size is not None or query.max_fund_size is not None:
        result = [
            f for f in result
            if _in_range(f.get("fundSize"), query.min_fund_size, query.max_fund_size)
        ]

    if query.min_vintage is not None or query.max_vintage is not None:
        result = [
            f for f in result
            if _in_range(f.get("vintage"), query.min_vintage, query.max_vintage)
        ]

    if query.sort_by is not None:
        result = sorted(
            result,
            key=_sort_key(query.sort_by),
            reverse=query.sort_direction is SortDirection.DESC,
        )

    total = len(result)
    total_pages = max(1, math.ceil(total / query.page_size))
    start = (query.page - 1) * query.page_size
    return FundPage(
        data=result[start:start + query.page_size],
        page=query.page,
        page_size=query.page_size,
        total=total,
        total_pages=total_pages,
    )
