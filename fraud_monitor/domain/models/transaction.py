"""Transaction and verdict models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

SUSPICIOUS_SCORE_THRESHOLD = 50
MAX_RISK_SCORE = 100


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    FLAGGED = "flagged"


class HistoricalTransaction(BaseModel):
    """A stored transaction as seen by the scoring engine."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    amount: Decimal = Field(..., ge=0, decimal_places=2)
    timestamp: datetime


class Verdict(BaseModel):
    """Outcome of one scoring call."""

    model_config = ConfigDict(frozen=True)

    risk_score: int = Field(..., ge=0, le=MAX_RISK_SCORE)
    reasons: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_suspicious(self) -> bool:
        return self.risk_score >= SUSPICIOUS_SCORE_THRESHOLD

    @computed_field  # type: ignore[prop-decorator]
    @property
    def fraud_reason(self) -> str | None:
        return "; ".join(self.reasons) if self.reasons else None
