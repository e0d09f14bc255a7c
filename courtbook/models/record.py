from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from ..db import Base


class RecordRow(Base):
    """Una fila por registro; el orden de la colección lo da ``position``."""

    __tablename__ = "record"
    __table_args__ = (UniqueConstraint("collection", "record_id", name="ux_record_collection_id"),)

    id = Column(Integer, primary_key=True)
    collection = Column(String, nullable=False, index=True)
    position = Column(Integer, nullable=False)
    record_id = Column(String, nullable=False)
    payload = Column(Text, nullable=False)  # JSON del registro completo
