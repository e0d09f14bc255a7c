"""
Motor de cupones: valida un código contra el catálogo y calcula el precio final.

Política de descuento:
- percent: final = original - original * amount / 100
- fixed:   final = max(0, original - amount)
- otro tipo: sin descuento
Redondeo a centavos con ROUND_HALF_UP (mitad se aleja de cero).

``validate`` NO incrementa ``used``; el conteo de usos se registra explícitamente
con ``record_use`` (gancho administrativo).
"""
from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import List

from ..core.errors import ExhaustedError, NotFoundError, ValidationError
from ..models.coupon import Coupon, CouponPublic
from .record_store import COUPONS, RecordStore

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# tope de precio aceptado en la entrada
MAX_PRICE = Decimal("1000000000")


def money(v) -> Decimal:
    if not isinstance(v, Decimal):
        v = Decimal(str(v))
    with localcontext() as ctx:
        # quantize falla si los dígitos enteros + 2 superan la precisión
        ctx.prec = max(ctx.prec, v.adjusted() + 3)
        return v.quantize(CENT, rounding=ROUND_HALF_UP)


def to_price(v, field: str = "originalPrice") -> Decimal:
    """Convierte un precio de entrada a Decimal; rechaza vacíos, no numéricos y negativos."""
    if v is None or isinstance(v, bool) or (isinstance(v, str) and not v.strip()):
        raise ValidationError(f"{field} is required")
    if isinstance(v, float) and not math.isfinite(v):
        raise ValidationError(f"{field} must be a number")
    try:
        d = Decimal(str(v).strip())
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number")
    if not d.is_finite():
        raise ValidationError(f"{field} must be a number")
    if d < 0:
        raise ValidationError(f"{field} must be non-negative")
    if d > MAX_PRICE:
        raise ValidationError(f"{field} must not exceed {MAX_PRICE}")
    return d


def apply_discount(coupon_type: str, amount, original) -> Decimal:
    original = Decimal(str(original))
    amount = Decimal(str(amount or 0))
    ctype = (coupon_type or "").lower()
    if ctype == "percent":
        final = original - original * amount / Decimal(100)
    elif ctype == "fixed":
        final = max(Decimal(0), original - amount)
    else:
        final = original
    return money(final)


def public_view(record: dict) -> dict:
    return CouponPublic(
        code=str(record.get("code", "")).upper(),
        type=str(record.get("type", "")),
        amount=float(record.get("amount") or 0),
    ).model_dump()


class CouponEngine:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_coupons(self) -> List[dict]:
        return [public_view(c) for c in self.store.read_all(COUPONS)]

    def _find(self, coupons: List[dict], code: str) -> dict | None:
        for c in coupons:
            if str(c.get("code", "")).upper() == code:
                return c
        return None

    def validate(self, code, original_price) -> dict:
        code = (code or "").strip().upper()
        if not code:
            raise ValidationError("coupon code is required")
        original = to_price(original_price)

        record = self._find(self.store.read_all(COUPONS), code)
        if record is None:
            logger.info("Coupon %s not found", code)
            raise NotFoundError(f"coupon {code} not found")

        coupon = Coupon.model_validate(record)
        if coupon.maxUses is not None and coupon.used >= coupon.maxUses:
            logger.info("Coupon %s exhausted (%d/%d)", code, coupon.used, coupon.maxUses)
            raise ExhaustedError(f"coupon {code} has reached its usage limit")

        final = apply_discount(coupon.type, coupon.amount, original)
        return {"finalPrice": float(final), "coupon": public_view(record)}

    def record_use(self, coupon_ref) -> dict:
        """Suma un uso al cupón (por id o por código) y persiste."""
        ref = str(coupon_ref or "").strip()
        if not ref:
            raise ValidationError("coupon id is required")
        with self.store.lock:
            coupons = self.store.read_all(COUPONS)
            record = next((c for c in coupons if str(c.get("id")) == ref), None)
            if record is None:
                record = self._find(coupons, ref.upper())
            if record is None:
                raise NotFoundError(f"coupon {ref} not found")
            record["used"] = int(record.get("used") or 0) + 1
            self.store.write_all(COUPONS, coupons)
        logger.info("Coupon %s used (%d)", record.get("code"), record["used"])
        return {**public_view(record), "used": record["used"], "maxUses": record.get("maxUses")}
