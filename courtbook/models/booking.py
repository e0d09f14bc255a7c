"""
Esquemas de reservas (pydantic).

Los nombres de campo son camelCase porque así se persisten y así viajan por la API.
"""
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

BookingStatus = Literal["pending", "confirmed", "confirmed_mock", "cancelled"]

PENDING = "pending"
CONFIRMED = "confirmed"
CONFIRMED_MOCK = "confirmed_mock"
CANCELLED = "cancelled"


class HistoryEntry(BaseModel):
    timestamp: str
    actor: Literal["system", "user"]
    action: str
    note: Optional[str] = None


class Booking(BaseModel):
    id: str
    serviceId: str
    serviceName: Optional[str] = None
    unitId: str
    unitName: Optional[str] = None
    date: str  # YYYY-MM-DD
    time: str  # HH:mm
    customerName: str
    contact: Optional[str] = None
    price: Optional[float] = None
    couponCode: Optional[str] = None
    status: BookingStatus = PENDING
    confirmationCode: Optional[str] = None
    createdAt: str
    updatedAt: str
    history: List[HistoryEntry] = Field(default_factory=list)


# --- Cuerpos de request: todo opcional, las reglas las aplica el dominio ---
Scalar = Optional[Union[str, int, float]]


class BookingCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    serviceId: Scalar = None
    serviceName: Optional[str] = None
    unitId: Scalar = None
    unitName: Optional[str] = None
    date: Scalar = None
    time: Scalar = None
    customerName: Optional[str] = None
    contact: Optional[str] = None
    price: Optional[Any] = None
    couponCode: Optional[str] = None


class RescheduleBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: Scalar = None
    time: Scalar = None


class SlotCheck(BaseModel):
    model_config = ConfigDict(extra="ignore")

    unitId: Scalar = None
    date: Scalar = None
    time: Scalar = None
