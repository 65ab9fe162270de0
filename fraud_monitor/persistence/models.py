"""Table definitions for the fraud_monitor schema.

Queries in the repositories use raw SQL; these declarations exist so the
schema can be created from code and stay the single source for column types.
"""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, Numeric, Text, func
from sqlalchemy import Enum as SAEnum

from fraud_monitor.core.database import Base
from fraud_monitor.domain.models.transaction import TransactionStatus

SCHEMA = "fraud_monitor"


class TransactionRecord(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(Text, nullable=False, unique=True)
    user_id = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        SAEnum(
            TransactionStatus,
            name="transaction_status",
            schema=SCHEMA,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        server_default=TransactionStatus.PENDING.value,
    )
    is_suspicious = Column(Boolean, nullable=False, server_default="false")
    fraud_reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        # History window lookups filter on user and time
        Index("ix_transactions_user_id_timestamp", "user_id", "timestamp"),
        {"schema": SCHEMA},
    )
