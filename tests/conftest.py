import itertools

import pytest
from fastapi.testclient import TestClient

from courtbook.core.config import Settings
from courtbook.main import create_app
from courtbook.services.bookings import BookingManager
from courtbook.services.coupons import CouponEngine
from courtbook.core.errors import StoreError
from courtbook.services.record_store import JsonFileStore, MemoryStore


def _ticking_clock():
    counter = itertools.count()
    return lambda: f"2025-10-10T08:00:{next(counter):02d}+00:00"


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / "data"))


@pytest.fixture
def manager(store):
    return BookingManager(store, clock=_ticking_clock())


@pytest.fixture
def mock_manager(store):
    return BookingManager(store, mock_mode=True, clock=_ticking_clock())


@pytest.fixture
def coupons(store):
    return CouponEngine(store)


@pytest.fixture
def booking_fields():
    return {
        "serviceId": "svc-1",
        "serviceName": "Badminton Court",
        "unitId": "u-1",
        "unitName": "Badminton Court Unit 1",
        "date": "2025-10-10",
        "time": "09:00",
        "customerName": "Ana Cruz",
        "contact": "0917 000 0000",
        "price": 250,
        "couponCode": None,
    }


@pytest.fixture
def client(store):
    app = create_app(settings=Settings(), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_client(store):
    app = create_app(settings=Settings(mock_mode=True), store=store)
    with TestClient(app) as c:
        yield c


class BrokenWriteStore(MemoryStore):
    """Lee normal; cuando ``fail_writes`` está activo toda escritura falla."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False

    def _save(self, collection, records):
        if self.fail_writes:
            raise StoreError(f"could not write {collection}")
        super()._save(collection, records)


@pytest.fixture
def broken_store():
    return BrokenWriteStore()
