"""Filter Metadata: distinct option values for the list screen's filter controls.

Invariants:
    - Pure function: no IO, derived from the collection on every call
    - Each list is deduplicated by value equality and sorted ascending
    - Non-string and empty values never appear in the output
"""

from collections.abc import Iterable, Sequence


def _distinct_sorted(values: Iterable[object]) -> list[str]:
    return sorted({v for v in values if isinstance(v, str) and v})


def _flatten(funds: Sequence[dict], key: str) -> Iterable[object]:
    for fund in funds:
        values = fund.get(key)
        if isinstance(values, list):
            yield from values


def compute_filter_meta(funds: Sequence[dict]) -> dict[str, list[str]]:
    """Compute distinct strategies, geographies, currencies and managers."""
    return {
        "strategies": _distinct_sorted(_flatten(funds, "strategies")),
        "geographies": _distinct_sorted(_flatten(funds, "geographies")),
        "currencies": _distinct_sorted(f.get("currency") for f in funds),
        "managers": _distinct_sorted(_flatten(funds, "managers")),
    }
