"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - FundName wraps str: the only lookup key, no surrogate id
    - Sort fields and directions encoded as Enums: no raw string matching downstream
    - Paging defaults live here, not in the routes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

FundName = NewType("FundName", str)


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Record fields the list endpoint can sort by."""
    NAME = "name"
    FUND_SIZE = "fundSize"
    VINTAGE = "vintage"


class SortDirection(str, Enum):
    """Sort direction. Anything that is not ascending is descending."""
    ASC = "asc"
    DESC = "desc"


# Values the list endpoint accepts as "ascending"
ASCENDING_ALIASES = frozenset({"asc", "a-z"})

# Multi-valued fields filtered with any-of semantics
TAG_FIELDS = ("strategies", "geographies", "managers")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
