from typing import List

from ..core.errors import NotFoundError, ValidationError
from .coupons import money

MIN_DURATION = 30
MAX_DURATION = 24 * 60

SERVICES: List[dict] = [
    {"id": "svc-1", "name": "Badminton Court", "description": "Single court", "duration": 60, "price": 250},
    {"id": "svc-2", "name": "Tennis Court", "description": "Singles", "duration": 60, "price": 400},
    {"id": "svc-3", "name": "Basketball Court", "description": "Half-court", "duration": 60, "price": 600},
]


def list_services() -> List[dict]:
    return [dict(s, hourlyRate=s["price"] * 60 / s["duration"]) for s in SERVICES]


def get_service(service_id) -> dict:
    sid = str(service_id or "").strip()
    for s in list_services():
        if s["id"] == sid:
            return s
    raise NotFoundError(f"service {sid} not found")


def estimate(service_id, duration_minutes, currency: str = "PHP") -> dict:
    if service_id is None or not str(service_id).strip():
        raise ValidationError("serviceId is required")
    if duration_minutes is None:
        raise ValidationError("durationMinutes is required")
    if isinstance(duration_minutes, bool):
        raise ValidationError(f"durationMinutes must be integer >= {MIN_DURATION}")
    try:
        dur = float(duration_minutes)
    except (TypeError, ValueError):
        raise ValidationError(f"durationMinutes must be integer >= {MIN_DURATION}")
    if not dur.is_integer() or dur < MIN_DURATION:
        raise ValidationError(f"durationMinutes must be integer >= {MIN_DURATION}")
    if dur > MAX_DURATION:
        raise ValidationError(f"durationMinutes must not exceed {MAX_DURATION}")
    dur = int(dur)

    service = get_service(service_id)
    rate = service["hourlyRate"]
    return {
        "serviceId": service["id"],
        "hourlyRate": rate,
        "durationMinutes": dur,
        "estimatedPrice": float(money(rate * dur / 60)),
        "currency": currency,
    }
