from fastapi import Request

from ..services.bookings import BookingManager
from ..services.coupons import CouponEngine


def get_bookings(request: Request) -> BookingManager:
    return request.app.state.bookings


def get_coupons(request: Request) -> CouponEngine:
    return request.app.state.coupons


def get_settings(request: Request):
    return request.app.state.settings
