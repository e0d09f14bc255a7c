"""
Errores del dominio de reservas.

Cada error lleva un ``kind`` estable (para que el cliente decida si reintentar
con otros datos) y un mensaje legible. La capa HTTP los traduce con un solo
exception handler; el dominio nunca lanza HTTPException.
"""
from __future__ import annotations


class BookingError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message, "kind": self.kind}


class ValidationError(BookingError):
    kind = "validation"
    status_code = 400


class ConflictError(BookingError):
    kind = "conflict"
    status_code = 409


class NotFoundError(BookingError):
    kind = "not_found"
    status_code = 404


class InvalidStateError(BookingError):
    kind = "invalid_state"
    status_code = 409


class ExhaustedError(BookingError):
    kind = "exhausted"
    status_code = 400


class StoreError(BookingError):
    kind = "store"
    status_code = 500
