# ecostay/infrastructure/database/models.py

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from ecostay.infrastructure.database.session import Base


class StateEntry(Base):
    """One key-value pair of ledger state. value holds the JSON-encoded record."""

    __tablename__ = "ledger_state"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
