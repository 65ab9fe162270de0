"""Schemas package for request/response models."""

from fraud_monitor.schemas.fraud_detection import (
    FraudDetectionConfigInput,
    FraudDetectionRequest,
    FraudDetectionResponse,
)
from fraud_monitor.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatusUpdate,
    UserTransactionSummary,
)

__all__ = [
    # Transactions
    "TransactionCreate",
    "TransactionStatusUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "UserTransactionSummary",
    # Fraud detection
    "FraudDetectionConfigInput",
    "FraudDetectionRequest",
    "FraudDetectionResponse",
]
