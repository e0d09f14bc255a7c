import concurrent.futures as cf
import threading

from courtbook.core.errors import ConflictError
from courtbook.services.bookings import BookingManager
from courtbook.services.record_store import JsonFileStore


def test_concurrent_creates_same_slot(tmp_path, booking_fields):
    store = JsonFileStore(str(tmp_path))
    manager = BookingManager(store)
    workers = 8
    barrier = threading.Barrier(workers)

    def attempt(i):
        barrier.wait()
        try:
            return manager.create(dict(booking_fields, customerName=f"Customer {i}"))
        except ConflictError:
            return None

    with cf.ThreadPoolExecutor(max_workers=workers) as ex:
        results = list(ex.map(attempt, range(workers)))

    assert sum(r is not None for r in results) == 1
    assert len(store.read_all("bookings")) == 1


def test_concurrent_reschedules_into_one_slot(tmp_path, booking_fields):
    store = JsonFileStore(str(tmp_path))
    manager = BookingManager(store)
    ids = [manager.create(dict(booking_fields, time=f"{h:02d}:00"))["id"] for h in range(10, 16)]
    barrier = threading.Barrier(len(ids))

    def attempt(bid):
        barrier.wait()
        try:
            return manager.reschedule(bid, "2025-10-20", "09:00")
        except ConflictError:
            return None

    with cf.ThreadPoolExecutor(max_workers=len(ids)) as ex:
        results = list(ex.map(attempt, ids))

    assert sum(r is not None for r in results) == 1
    taken = [b for b in manager.list() if (b["date"], b["time"]) == ("2025-10-20", "09:00")]
    assert len(taken) == 1
