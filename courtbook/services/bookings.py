"""
Ciclo de vida de reservas.

Estados: pending -> {confirmed | confirmed_mock, cancelled}; confirmed* -> cancelled;
cancelled es terminal. Reprogramar no cambia el estado.

Cada mutación es lectura-modificación-escritura de la colección completa y se
ejecuta con ``store.lock`` tomado, de modo que el chequeo de conflicto y la
escritura son atómicos respecto de otras mutaciones. Cada mutación exitosa
agrega exactamente una entrada al historial.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..core.errors import ConflictError, InvalidStateError, NotFoundError, ValidationError
from ..models.booking import (
    CANCELLED,
    CONFIRMED,
    CONFIRMED_MOCK,
    PENDING,
    Booking,
    HistoryEntry,
)
from .conflicts import find_conflict
from .coupons import to_price
from .record_store import BOOKINGS, RecordStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("serviceId", "unitId", "date", "time", "customerName")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _blank(v) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _text(v) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


class BookingManager:
    def __init__(
        self,
        store: RecordStore,
        mock_mode: bool = False,
        clock: Optional[Callable[[], str]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.store = store
        self.mock_mode = mock_mode
        self._now = clock or utc_now_iso
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)

    @property
    def confirmed_label(self) -> str:
        return CONFIRMED_MOCK if self.mock_mode else CONFIRMED

    # --- lectura ---
    def list(self) -> List[dict]:
        return self.store.read_all(BOOKINGS)

    def get(self, booking_id) -> dict:
        return self._locate(self.store.read_all(BOOKINGS), booking_id)

    def check_slot(self, unit_id, date, time) -> dict:
        missing = [n for n, v in (("unitId", unit_id), ("date", date), ("time", time)) if _blank(v)]
        if missing:
            raise ValidationError(f"{', '.join(missing)} required")
        blocking = find_conflict(self.store.read_all(BOOKINGS), unit_id, date, time)
        return {
            "unitId": str(unit_id),
            "date": str(date),
            "time": str(time),
            "isAvailable": blocking is None,
            "conflict": {"id": blocking["id"], "status": blocking["status"]} if blocking else None,
        }

    # --- mutaciones ---
    def create(self, fields: dict) -> dict:
        missing = [f for f in REQUIRED_FIELDS if _blank(fields.get(f))]
        if missing:
            raise ValidationError(f"{', '.join(missing)} required")
        price = fields.get("price")
        if price is not None:
            price = float(to_price(price, "price"))

        unit_id = str(fields["unitId"]).strip()
        date = str(fields["date"]).strip()
        time = str(fields["time"]).strip()
        coupon = _text(fields.get("couponCode"))

        with self.store.lock:
            bookings = self.store.read_all(BOOKINGS)
            if find_conflict(bookings, unit_id, date, time) is not None:
                logger.info("Slot taken: unit=%s %s %s", unit_id, date, time)
                raise ConflictError(f"slot {unit_id} {date} {time} is already booked")

            now = self._now()
            booking = Booking(
                id=self._new_id(),
                serviceId=str(fields["serviceId"]).strip(),
                serviceName=_text(fields.get("serviceName")),
                unitId=unit_id,
                unitName=_text(fields.get("unitName")),
                date=date,
                time=time,
                customerName=str(fields["customerName"]).strip(),
                contact=_text(fields.get("contact")),
                price=price,
                couponCode=coupon.upper() if coupon else None,
                status=CONFIRMED_MOCK if self.mock_mode else PENDING,
                confirmationCode=None,
                createdAt=now,
                updatedAt=now,
                history=[HistoryEntry(timestamp=now, actor="system", action="created", note="booking created")],
            ).model_dump()
            bookings.append(booking)
            self.store.write_all(BOOKINGS, bookings)

        logger.info("Booking %s created (%s)", booking["id"], booking["status"])
        return booking

    def confirm(self, booking_id) -> dict:
        def apply(b):
            if b["status"] == CANCELLED:
                raise InvalidStateError(f"booking {b['id']} is cancelled and cannot be confirmed")
            b["status"] = self.confirmed_label
            return "system", "confirmed", f"status {self.confirmed_label}"

        return self._mutate(booking_id, apply)

    def reschedule(self, booking_id, date, time) -> dict:
        if _blank(date) or _blank(time):
            raise ValidationError("date and time required")
        date, time = str(date).strip(), str(time).strip()

        def apply(b, bookings):
            if b["status"] == CANCELLED:
                raise InvalidStateError(f"booking {b['id']} is cancelled and cannot be rescheduled")
            if find_conflict(bookings, b["unitId"], date, time, exclude_id=b["id"]) is not None:
                logger.info("Reschedule of %s rejected: slot %s %s taken", b["id"], date, time)
                raise ConflictError(f"slot {b['unitId']} {date} {time} is already booked")
            note = f"{b['date']} {b['time']} -> {date} {time}"
            b["date"], b["time"] = date, time
            return "user", "rescheduled", note

        return self._mutate(booking_id, apply, needs_collection=True)

    def cancel(self, booking_id) -> dict:
        def apply(b):
            b["status"] = CANCELLED
            return "user", "cancelled", "booking cancelled"

        return self._mutate(booking_id, apply)

    # --- internos ---
    def _locate(self, bookings: List[dict], booking_id) -> dict:
        bid = str(booking_id or "").strip()
        for b in bookings:
            if str(b.get("id")) == bid:
                return b
        raise NotFoundError(f"booking {bid} not found")

    def _mutate(self, booking_id, apply, needs_collection: bool = False) -> dict:
        with self.store.lock:
            bookings = self.store.read_all(BOOKINGS)
            b = self._locate(bookings, booking_id)
            actor, action, note = apply(b, bookings) if needs_collection else apply(b)
            now = self._now()
            b["updatedAt"] = now
            b.setdefault("history", []).append(
                HistoryEntry(timestamp=now, actor=actor, action=action, note=note).model_dump()
            )
            self.store.write_all(BOOKINGS, bookings)

        logger.info("Booking %s %s", b["id"], action)
        return b
