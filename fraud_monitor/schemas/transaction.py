"""Transaction schemas for recording and reviewing transactions."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from fraud_monitor.domain.models.transaction import TransactionStatus


class TransactionCreate(BaseModel):
    """Schema for recording a new transaction (scored on creation)."""

    transaction_id: str = Field(..., min_length=1, max_length=255, description="Business transaction ID")
    user_id: str = Field(..., min_length=1, max_length=255, description="Owner of the transaction")
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Transaction amount")
    status: TransactionStatus = Field(default=TransactionStatus.PENDING)


class TransactionStatusUpdate(BaseModel):
    """Schema for a manual status change.

    Moving a transaction to ``flagged`` always marks it suspicious.
    """

    status: TransactionStatus
    fraud_reason: str | None = Field(None, max_length=10000, description="Replaces the stored reason")


class TransactionResponse(BaseModel):
    """Response schema for a stored transaction."""

    id: int
    transaction_id: str
    user_id: str
    amount: Decimal
    timestamp: datetime
    status: TransactionStatus
    is_suspicious: bool
    fraud_reason: str | None = None
    created_at: datetime


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    items: list[TransactionResponse]
    total: int
    limit: int
    offset: int


class UserTransactionSummary(BaseModel):
    """Aggregated activity for one user."""

    user_id: str
    total_transactions: int
    total_amount: Decimal
    suspicious_transactions: int
    last_transaction_at: datetime | None = None
