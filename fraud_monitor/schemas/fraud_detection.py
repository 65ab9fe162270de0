"""Schemas for on-demand fraud analysis."""

from decimal import Decimal

from pydantic import BaseModel, Field

from fraud_monitor.domain.scoring_config import (
    DEFAULT_FREQUENCY_THRESHOLD,
    DEFAULT_HIGH_AMOUNT_THRESHOLD,
    DEFAULT_TIME_WINDOW_MINUTES,
    ScoringConfig,
)


class FraudDetectionConfigInput(BaseModel):
    """Per-request threshold overrides; omitted knobs keep their defaults."""

    high_amount_threshold: Decimal = Field(default=DEFAULT_HIGH_AMOUNT_THRESHOLD, gt=0)
    frequency_threshold: int = Field(default=DEFAULT_FREQUENCY_THRESHOLD, gt=0)
    time_window_minutes: int = Field(default=DEFAULT_TIME_WINDOW_MINUTES, gt=0)

    def to_scoring_config(self) -> ScoringConfig:
        return ScoringConfig(**self.model_dump())


class FraudDetectionRequest(BaseModel):
    """Schema for scoring a candidate transaction without storing it."""

    user_id: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    config: FraudDetectionConfigInput | None = None


class FraudDetectionResponse(BaseModel):
    """Verdict returned by the scoring engine."""

    risk_score: int = Field(..., ge=0, le=100)
    is_suspicious: bool
    fraud_reason: str | None = None
    reasons: list[str] = Field(default_factory=list)
