"""Domain models."""

from fraud_monitor.domain.models.transaction import (
    SUSPICIOUS_SCORE_THRESHOLD,
    HistoricalTransaction,
    TransactionStatus,
    Verdict,
)

__all__ = [
    "SUSPICIOUS_SCORE_THRESHOLD",
    "HistoricalTransaction",
    "TransactionStatus",
    "Verdict",
]
