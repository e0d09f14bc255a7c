import json
import os

import pytest

from courtbook.core.config import Settings
from courtbook.core.errors import StoreError
from courtbook.db import make_engine
from courtbook.services.record_store import (
    BOOKINGS,
    COUPONS,
    JsonFileStore,
    MemoryStore,
    SqlRecordStore,
    build_store,
)


@pytest.fixture(params=["json", "sql", "memory"])
def any_store(request, tmp_path):
    if request.param == "json":
        return JsonFileStore(str(tmp_path / "data"))
    if request.param == "sql":
        return SqlRecordStore(make_engine(f"sqlite:///{tmp_path / 'records.db'}"))
    return MemoryStore()


def test_missing_bookings_read_as_empty(any_store):
    assert any_store.read_all(BOOKINGS) == []


def test_missing_coupons_are_seeded(any_store):
    coupons = any_store.read_all(COUPONS)
    assert len(coupons) == 5
    assert all(c["type"] == "percent" and c["amount"] == 20 for c in coupons)
    assert all(c["used"] == 0 for c in coupons)
    assert len({c["code"] for c in coupons}) == 5
    # el sembrado se persiste una sola vez
    assert any_store.read_all(COUPONS) == coupons


def test_write_all_replaces_in_order(any_store):
    any_store.write_all(BOOKINGS, [{"id": "b"}, {"id": "a"}, {"id": "c"}])
    assert [r["id"] for r in any_store.read_all(BOOKINGS)] == ["b", "a", "c"]
    any_store.write_all(BOOKINGS, [{"id": "z", "history": [{"action": "created"}]}])
    assert any_store.read_all(BOOKINGS) == [{"id": "z", "history": [{"action": "created"}]}]


def test_read_returns_a_copy(any_store):
    any_store.write_all(BOOKINGS, [{"id": "a", "status": "pending"}])
    any_store.read_all(BOOKINGS)[0]["status"] = "cancelled"
    assert any_store.read_all(BOOKINGS)[0]["status"] == "pending"


def test_json_store_leaves_no_temp_files(tmp_path):
    store = JsonFileStore(str(tmp_path))
    store.write_all(BOOKINGS, [{"id": "a"}])
    store.write_all(BOOKINGS, [{"id": "a"}, {"id": "b"}])
    assert sorted(os.listdir(tmp_path)) == ["bookings.json"]
    with open(tmp_path / "bookings.json", encoding="utf-8") as f:
        assert [r["id"] for r in json.load(f)] == ["a", "b"]


def test_json_store_corrupt_file(tmp_path):
    (tmp_path / "bookings.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        JsonFileStore(str(tmp_path)).read_all(BOOKINGS)


def test_json_store_rejects_non_list(tmp_path):
    (tmp_path / "bookings.json").write_text('{"id": "a"}', encoding="utf-8")
    with pytest.raises(StoreError):
        JsonFileStore(str(tmp_path)).read_all(BOOKINGS)


def test_json_store_failed_write_keeps_previous(tmp_path):
    store = JsonFileStore(str(tmp_path))
    store.write_all(BOOKINGS, [{"id": "a"}])
    with pytest.raises(StoreError):
        store.write_all(BOOKINGS, [{"id": "b", "bad": object()}])
    assert store.read_all(BOOKINGS) == [{"id": "a"}]


def test_build_store(tmp_path):
    assert isinstance(build_store(Settings(store_backend="json", data_dir=str(tmp_path))), JsonFileStore)
    assert isinstance(build_store(Settings(store_backend="memory")), MemoryStore)
    sql = build_store(Settings(store_backend="sql", database_url=f"sqlite:///{tmp_path / 'x.db'}"))
    assert isinstance(sql, SqlRecordStore)
    with pytest.raises(ValueError):
        build_store(Settings(store_backend="redis"))
