"""
Almacén de registros: colecciones ordenadas con lectura completa y
reemplazo atómico completo.

Dos backends:
- JsonFileStore: un ``<coleccion>.json`` por colección, escrito con reemplazo atómico.
- SqlRecordStore: tabla ``record`` vía SQLAlchemy; cada write_all es una transacción.

Ambos exponen ``lock``: toda mutación de lectura-chequeo-escritura debe tomarlo
para que dos requests concurrentes no partan del mismo snapshot.
"""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Dict, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from ..core.errors import StoreError
from ..db import Base, make_engine, make_session_factory
from ..models.coupon import UNLIMITED_USES
from ..models.record import RecordRow
from ..utils.atomic_file import read_json, write_json_atomic

logger = logging.getLogger(__name__)

BOOKINGS = "bookings"
COUPONS = "coupons"

DEFAULT_COUPON_SPORTS = ("BADMINTON", "BASKETBALL", "TENNIS", "PICKLEBALL", "SOCCER")


def default_coupons() -> List[dict]:
    """Catálogo inicial: un 20% por deporte, usos prácticamente ilimitados."""
    return [
        {
            "id": f"cpn-{i}",
            "code": f"{sport}20",
            "type": "percent",
            "amount": 20,
            "maxUses": UNLIMITED_USES,
            "used": 0,
        }
        for i, sport in enumerate(DEFAULT_COUPON_SPORTS, start=1)
    ]


class RecordStore:
    def __init__(self):
        self.lock = threading.RLock()

    def read_all(self, collection: str) -> List[dict]:
        records = self._load(collection)
        if collection == COUPONS and not records:
            with self.lock:
                records = self._load(collection)
                if not records:
                    records = default_coupons()
                    self._save(collection, records)
                    logger.info("Seeded %d default coupons", len(records))
        return records or []

    def write_all(self, collection: str, records: List[dict]) -> None:
        self._save(collection, list(records))

    # backends
    def _load(self, collection: str) -> List[dict] | None:
        raise NotImplementedError

    def _save(self, collection: str, records: List[dict]) -> None:
        raise NotImplementedError


class MemoryStore(RecordStore):
    """Backend en memoria (tests y modo demo); copia profunda vía JSON."""

    def __init__(self):
        super().__init__()
        self._data: Dict[str, str] = {}

    def _load(self, collection):
        raw = self._data.get(collection)
        return json.loads(raw) if raw is not None else None

    def _save(self, collection, records):
        self._data[collection] = json.dumps(records)


class JsonFileStore(RecordStore):
    def __init__(self, data_dir: str):
        super().__init__()
        self.data_dir = data_dir

    def path_for(self, collection: str) -> str:
        return os.path.join(self.data_dir, f"{collection}.json")

    def _load(self, collection):
        path = self.path_for(collection)
        try:
            data = read_json(path)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %r", path, e)
            raise StoreError(f"could not read {collection}") from e
        if data is None:
            return None
        if not isinstance(data, list):
            raise StoreError(f"{collection} store is not a list")
        return data

    def _save(self, collection, records):
        path = self.path_for(collection)
        try:
            write_json_atomic(path, records)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Could not write %s: %r", path, e)
            raise StoreError(f"could not write {collection}") from e


class SqlRecordStore(RecordStore):
    def __init__(self, engine):
        super().__init__()
        self.engine = engine
        self.Session = make_session_factory(engine)
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            logger.error("metadata.create_all failed: %r", e)
            raise StoreError("could not initialize record table") from e

    def _load(self, collection):
        s = self.Session()
        try:
            rows = s.execute(
                select(RecordRow.payload)
                .where(RecordRow.collection == collection)
                .order_by(RecordRow.position)
            ).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Could not read %s: %r", collection, e)
            raise StoreError(f"could not read {collection}") from e
        finally:
            s.close()
        if not rows:
            return None
        return [json.loads(p) for p in rows]

    def _save(self, collection, records):
        s = self.Session()
        try:
            with s.begin():
                s.execute(delete(RecordRow).where(RecordRow.collection == collection))
                s.add_all(
                    RecordRow(
                        collection=collection,
                        position=i,
                        record_id=str(r.get("id")),
                        payload=json.dumps(r, ensure_ascii=False),
                    )
                    for i, r in enumerate(records)
                )
        except SQLAlchemyError as e:
            logger.error("Could not write %s: %r", collection, e)
            raise StoreError(f"could not write {collection}") from e
        finally:
            s.close()


def build_store(settings) -> RecordStore:
    backend = (settings.store_backend or "json").lower()
    if backend == "json":
        return JsonFileStore(settings.data_dir)
    if backend == "sql":
        return SqlRecordStore(make_engine(settings.database_url))
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"unknown STORE_BACKEND: {settings.store_backend!r}")
