from fastapi import APIRouter, Depends

from ..models.coupon import CouponValidateRequest
from ..services.coupons import CouponEngine
from .deps import get_coupons

router = APIRouter(prefix="/api/coupons", tags=["coupons"])


@router.get("")
def list_coupons(engine: CouponEngine = Depends(get_coupons)):
    return {"success": True, "coupons": engine.list_coupons()}


@router.post("/validate")
def validate_coupon(
    body: CouponValidateRequest,
    engine: CouponEngine = Depends(get_coupons),
):
    return {"success": True, **engine.validate(body.code, body.originalPrice)}


# Gancho administrativo: validate nunca incrementa ``used``
@router.post("/{coupon_id}/use")
def record_coupon_use(coupon_id: str, engine: CouponEngine = Depends(get_coupons)):
    return {"success": True, "coupon": engine.record_use(coupon_id)}
