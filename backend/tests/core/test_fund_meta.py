"""Filter Metadata tests: distinct, sorted option lists derived from the collection."""

from fund_catalog.core.fund_meta import compute_filter_meta


def test_empty_collection_yields_empty_lists():
    assert compute_filter_meta([]) == {
        "strategies": [], "geographies": [], "currencies": [], "managers": [],
    }


def test_values_are_deduplicated_and_sorted():
    funds = [
        {"strategies": ["Venture", "Buyout"], "geographies": ["Europe"],
         "currency": "USD", "managers": ["Zed", "Amy"]},
        {"strategies": ["Buyout"], "geographies": ["Asia", "Europe"],
         "currency": "EUR", "managers": ["Amy"]},
    ]
    meta = compute_filter_meta(funds)
    assert meta["strategies"] == ["Buyout", "Venture"]
    assert meta["geographies"] == ["Asia", "Europe"]
    assert meta["currencies"] == ["EUR", "USD"]
    assert meta["managers"] == ["Amy", "Zed"]


def test_sort_is_plain_lexicographic():
    funds = [{"strategies": ["b", "B", "a"]}]
    assert compute_filter_meta(funds)["strategies"] == ["B", "a", "b"]


def test_missing_and_malformed_fields_are_skipped():
    funds = [
        {"name": "No tags"},
        {"strategies": "not-a-list", "currency": None, "managers": ["", 7, "Kim"]},
    ]
    meta = compute_filter_meta(funds)
    assert meta["strategies"] == []
    assert meta["currencies"] == []
    assert meta["managers"] == ["Kim"]
