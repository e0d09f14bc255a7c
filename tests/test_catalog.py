import pytest

from courtbook.core.errors import NotFoundError, ValidationError
from courtbook.services import catalog


def test_list_services():
    services = catalog.list_services()
    assert [s["name"] for s in services] == ["Badminton Court", "Tennis Court", "Basketball Court"]
    assert [s["hourlyRate"] for s in services] == [250, 400, 600]


def test_estimate():
    est = catalog.estimate("svc-2", 90)
    assert est == {
        "serviceId": "svc-2",
        "hourlyRate": 400,
        "durationMinutes": 90,
        "estimatedPrice": 600.0,
        "currency": "PHP",
    }
    assert catalog.estimate("svc-1", "45", currency="USD")["estimatedPrice"] == 187.5


@pytest.mark.parametrize("duration", [None, 29, 45.5, "abc", True, -60, 1441, 1e30, "1e400"])
def test_estimate_rejects_bad_duration(duration):
    with pytest.raises(ValidationError):
        catalog.estimate("svc-1", duration)


def test_estimate_unknown_service():
    with pytest.raises(NotFoundError):
        catalog.estimate("svc-9", 60)
    with pytest.raises(ValidationError):
        catalog.estimate("", 60)
