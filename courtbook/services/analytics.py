import math
from decimal import Decimal
from typing import Iterable

from ..core.errors import ValidationError
from ..models.booking import CANCELLED, CONFIRMED, CONFIRMED_MOCK
from .coupons import money


def summarize(bookings: Iterable[dict]) -> dict:
    """
    Conteos y revenue sobre toda la colección.

    ``confirmed`` cuenta solo status 'confirmed' (no 'confirmed_mock');
    ``revenue`` suma todo precio no nulo, sin importar el estado.
    """
    total = confirmed = cancelled = 0
    revenue = Decimal(0)
    for b in bookings:
        total += 1
        status = b.get("status")
        if status == CONFIRMED:
            confirmed += 1
        elif status == CANCELLED:
            cancelled += 1
        if b.get("price") is not None:
            revenue += Decimal(str(b["price"]))
    return {
        "totalBookings": total,
        "confirmed": confirmed,
        "cancelled": cancelled,
        "revenue": float(money(revenue)),
    }


def loyalty_points(bookings: Iterable[dict], customer_name) -> dict:
    """1 unidad de moneda gastada en reservas confirmadas = 1 punto."""
    name = (customer_name or "").strip()
    if not name:
        raise ValidationError("customerName required")
    key = name.lower()
    spent = Decimal(0)
    for b in bookings:
        if (
            str(b.get("customerName") or "").strip().lower() == key
            and b.get("status") in (CONFIRMED, CONFIRMED_MOCK)
            and b.get("price") is not None
        ):
            spent += Decimal(str(b["price"]))
    return {
        "customerName": name,
        "totalSpent": float(money(spent)),
        "points": math.floor(spent),
    }
