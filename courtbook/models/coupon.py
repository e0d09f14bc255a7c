from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# Techo "ilimitado" del catálogo sembrado
UNLIMITED_USES = 1_000_000


class Coupon(BaseModel):
    id: str
    code: str  # siempre en mayúsculas
    type: str  # 'percent' | 'fixed' (otro tipo = sin descuento)
    amount: float
    maxUses: Optional[int] = None
    used: int = 0


class CouponPublic(BaseModel):
    code: str
    type: str
    amount: float


class CouponValidateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: Optional[str] = None
    originalPrice: Optional[Any] = None
