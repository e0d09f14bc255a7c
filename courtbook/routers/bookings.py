from fastapi import APIRouter, Depends

from ..models.booking import BookingCreate, RescheduleBody, SlotCheck
from ..services.bookings import BookingManager
from .deps import get_bookings

router = APIRouter(prefix="/api", tags=["bookings"])


@router.post("/availability/check")
def check_availability(body: SlotCheck, mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, **mgr.check_slot(body.unitId, body.date, body.time)}


@router.post("/book", status_code=201)
def create_booking(body: BookingCreate, mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, "booking": mgr.create(body.model_dump())}


@router.get("/book/{booking_id}")
def get_booking(booking_id: str, mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, "booking": mgr.get(booking_id)}


@router.post("/book/{booking_id}/confirm")
def confirm_booking(booking_id: str, mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, "booking": mgr.confirm(booking_id)}


@router.post("/book/{booking_id}/reschedule")
def reschedule_booking(
    booking_id: str,
    body: RescheduleBody,
    mgr: BookingManager = Depends(get_bookings),
):
    return {"success": True, "booking": mgr.reschedule(booking_id, body.date, body.time)}


@router.post("/book/{booking_id}/cancel")
def cancel_booking(booking_id: str, mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, "booking": mgr.cancel(booking_id)}


@router.get("/bookings")
def list_bookings(mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, "bookings": mgr.list()}
