"""Scoring configuration passed into every fraud scoring call."""

from datetime import timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HIGH_AMOUNT_THRESHOLD = Decimal("10000")
DEFAULT_FREQUENCY_THRESHOLD = 5
DEFAULT_TIME_WINDOW_MINUTES = 1


class ScoringConfig(BaseModel):
    """Immutable thresholds for one scoring operation.

    All fields must be positive; construction fails fast otherwise, so the
    scoring engine never has to re-check them.
    """

    model_config = ConfigDict(frozen=True)

    high_amount_threshold: Decimal = Field(
        default=DEFAULT_HIGH_AMOUNT_THRESHOLD,
        gt=0,
        description="Amounts strictly above this are high value",
    )
    frequency_threshold: int = Field(
        default=DEFAULT_FREQUENCY_THRESHOLD,
        gt=0,
        description="Transaction count in the window (candidate included) that is suspicious",
    )
    time_window_minutes: int = Field(
        default=DEFAULT_TIME_WINDOW_MINUTES,
        gt=0,
        description="Length of the trailing history window",
    )

    @property
    def window(self) -> timedelta:
        return timedelta(minutes=self.time_window_minutes)

    @property
    def large_amount_threshold(self) -> Decimal:
        """Half of the high amount threshold."""
        return self.high_amount_threshold / 2
