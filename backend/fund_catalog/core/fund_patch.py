"""Fund Patch: shallow-merge update of a stored fund record.

Invariants:
    - Only fields present in the patch are written; all others are retained
    - The stored record is never mutated: a new dict is returned
    - The name is the lookup key and cannot be changed by a patch

Design Decisions:
    - Renames rejected rather than applied: a silent rename would orphan every
      link that still uses the old name
    - A patch that repeats the current name is accepted (edit forms submit the whole record)
"""

from collections.abc import Mapping

from fund_catalog.core.errors import FundNameImmutableError


def apply_fund_patch(fund: Mapping, patch: Mapping) -> dict:
    """Return fund with patch fields written over it."""
    current_name = fund.get("name")
    if "name" in patch and patch["name"] != current_name:
        raise FundNameImmutableError(str(current_name), str(patch["name"]))
    return {**fund, **patch}
