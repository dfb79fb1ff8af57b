"""JSON File Store tests: lenient reads, pretty-printed atomic writes, write failures."""

import json

import pytest

from fund_catalog.core.errors import PersistenceError
from fund_catalog.infrastructure import json_store
from fund_catalog.infrastructure.json_store import (
    JsonFileFundStore, get_fund_store, init_store,
)

FUNDS = [
    {"name": "Alpha", "strategies": ["Buyout"], "fundSize": 100, "vintage": 2020},
    {"name": "Zürich Growth", "strategies": [], "fundSize": 50, "vintage": 2021},
]


async def test_load_reads_array(tmp_path):
    path = tmp_path / "funds.json"
    path.write_text(json.dumps(FUNDS), encoding="utf-8")
    assert await JsonFileFundStore(path).load() == FUNDS


async def test_load_missing_file_returns_empty(tmp_path):
    assert await JsonFileFundStore(tmp_path / "nope.json").load() == []


async def test_load_invalid_json_returns_empty(tmp_path):
    path = tmp_path / "funds.json"
    path.write_text("[{not json", encoding="utf-8")
    assert await JsonFileFundStore(path).load() == []


async def test_load_non_array_returns_empty(tmp_path):
    path = tmp_path / "funds.json"
    path.write_text(json.dumps({"funds": FUNDS}), encoding="utf-8")
    assert await JsonFileFundStore(path).load() == []


async def test_save_writes_pretty_printed_utf8(tmp_path):
    path = tmp_path / "funds.json"
    await JsonFileFundStore(path).save(FUNDS)
    text = path.read_text(encoding="utf-8")
    assert text == json.dumps(FUNDS, indent=2, ensure_ascii=False)
    assert "Zürich" in text


async def test_save_then_load(tmp_path):
    store = JsonFileFundStore(tmp_path / "funds.json")
    await store.save(FUNDS)
    assert await store.load() == FUNDS


async def test_save_empty_collection_writes_empty_array(tmp_path):
    path = tmp_path / "funds.json"
    await JsonFileFundStore(path).save([])
    assert json.loads(path.read_text(encoding="utf-8")) == []


async def test_save_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "data" / "funds.json"
    await JsonFileFundStore(path).save(FUNDS)
    assert path.exists()


async def test_save_leaves_no_temp_files(tmp_path):
    await JsonFileFundStore(tmp_path / "funds.json").save(FUNDS)
    assert [p.name for p in tmp_path.iterdir()] == ["funds.json"]


async def test_save_failure_raises_persistence_error(tmp_path):
    target = tmp_path / "funds.json"
    target.mkdir()
    with pytest.raises(PersistenceError) as exc_info:
        await JsonFileFundStore(target).save(FUNDS)
    assert exc_info.value.http_status == 500
    assert [p.name for p in tmp_path.iterdir()] == ["funds.json"]


async def test_save_unserializable_raises_persistence_error(tmp_path):
    with pytest.raises(PersistenceError):
        await JsonFileFundStore(tmp_path / "funds.json").save([{"name": object()}])


async def test_health_check(tmp_path):
    path = tmp_path / "funds.json"
    store = JsonFileFundStore(path)
    assert await store.health_check() is False
    path.write_text("[]", encoding="utf-8")
    assert await store.health_check() is True


def test_get_fund_store_requires_init(monkeypatch):
    monkeypatch.setattr(json_store, "fund_store", None)
    with pytest.raises(RuntimeError):
        get_fund_store()


def test_init_store_sets_singleton(tmp_path, monkeypatch):
    monkeypatch.setattr(json_store, "fund_store", None)
    store = init_store(tmp_path / "funds.json")
    assert get_fund_store() is store


async def test_load_drops_non_object_entries(tmp_path):
    path = tmp_path / "funds.json"
    path.write_text(json.dumps([1, "x", None, [], FUNDS[0]]), encoding="utf-8")
    assert await JsonFileFundStore(path).load() == [FUNDS[0]]
