"""Fund Patch tests: shallow merge and the immutable name key."""

import pytest

from fund_catalog.core.errors import FundNameImmutableError
from fund_catalog.core.fund_patch import apply_fund_patch


STORED = {"name": "Alpha", "fundSize": 100, "vintage": 2020, "managers": ["M1"]}


def test_patch_overwrites_only_listed_fields():
    updated = apply_fund_patch(STORED, {"fundSize": 200})
    assert updated == {"name": "Alpha", "fundSize": 200, "vintage": 2020, "managers": ["M1"]}


def test_patch_replaces_lists_wholesale():
    updated = apply_fund_patch(STORED, {"managers": ["M2", "M3"]})
    assert updated["managers"] == ["M2", "M3"]


def test_stored_record_is_not_mutated():
    apply_fund_patch(STORED, {"vintage": 1999})
    assert STORED["vintage"] == 2020


def test_empty_patch_returns_equal_copy():
    updated = apply_fund_patch(STORED, {})
    assert updated == STORED
    assert updated is not STORED


def test_same_name_in_patch_is_accepted():
    assert apply_fund_patch(STORED, {"name": "Alpha", "vintage": 2022})["vintage"] == 2022


def test_rename_is_rejected():
    with pytest.raises(FundNameImmutableError) as exc_info:
        apply_fund_patch(STORED, {"name": "Alpha II"})
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "FUND_NAME_IMMUTABLE"
    assert exc_info.value.context.fund_name == "Alpha"
