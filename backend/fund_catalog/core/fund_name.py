"""Fund Name Lookup: strict decoding of the name path segment and exact-match search.

Invariants:
    - decode_fund_name accepts exactly what decodeURIComponent accepts
    - A '%' not followed by two hex digits raises InvalidEncodingError
    - Decoded bytes must be valid UTF-8, otherwise InvalidEncodingError
    - Lookup is exact (case-sensitive, no trimming)
"""

import re
from collections.abc import Sequence
from urllib.parse import unquote_to_bytes

from fund_catalog.core.domain_types import FundName
from fund_catalog.core.errors import InvalidEncodingError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_fund_name(raw_segment: str) -> FundName:
    """Percent-decode a raw path segment into a fund name."""
    if _BAD_ESCAPE.search(raw_segment):
        raise InvalidEncodingError(raw_segment)
    try:
        return FundName(unquote_to_bytes(raw_segment).decode("utf-8"))
    except UnicodeDecodeError:
        raise InvalidEncodingError(raw_segment)


def find_fund_index(funds: Sequence[dict], name: str) -> int | None:
    """Index of the fund named exactly name, or None."""
    for index, fund in enumerate(funds):
        if fund.get("name") == name:
            return index
    return None
