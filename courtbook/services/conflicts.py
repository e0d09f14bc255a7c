from typing import Iterable, Optional

from ..models.booking import CANCELLED


def find_conflict(bookings: Iterable[dict], unit_id, date, time, exclude_id=None) -> Optional[dict]:
    """
    Devuelve la reserva activa que ocupa el slot (unit, date, time), o None.

    La comparación es por igualdad exacta de strings: no hay aritmética de
    calendario ni de duración. ``exclude_id`` ignora la reserva que se está moviendo.
    """
    unit_id, date, time = str(unit_id), str(date), str(time)
    exclude = str(exclude_id) if exclude_id is not None else None
    for b in bookings:
        if b.get("status") == CANCELLED:
            continue
        if exclude is not None and str(b.get("id")) == exclude:
            continue
        if (
            str(b.get("unitId")) == unit_id
            and str(b.get("date")) == date
            and str(b.get("time")) == time
        ):
            return b
    return None


def has_conflict(bookings: Iterable[dict], unit_id, date, time, exclude_id=None) -> bool:
    return find_conflict(bookings, unit_id, date, time, exclude_id) is not None
