from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..services.analytics import loyalty_points, summarize
from ..services.bookings import BookingManager
from .deps import get_bookings

router = APIRouter(prefix="/api", tags=["reports"])


@router.get("/analytics")
def analytics(mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, **summarize(mgr.list())}


@router.get("/loyalty")
def loyalty(customerName: Optional[str] = Query(None), mgr: BookingManager = Depends(get_bookings)):
    return {"success": True, **loyalty_points(mgr.list(), customerName)}
