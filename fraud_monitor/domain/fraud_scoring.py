"""Fraud scoring engine.

Scores a candidate transaction against the user's recent history. The engine
is a pure, synchronous function: it performs no I/O, keeps no state and never
mutates its inputs, so identical inputs always yield identical verdicts.

Callers fetch the history window themselves. The window is
``[occurs_at - config.window, occurs_at]``; use ``window_start`` for the lower
bound.

Rules are evaluated independently and in a fixed order:

1. High amount: amount strictly above ``high_amount_threshold`` (+50)
2. High frequency: history size plus the candidate reaches
   ``frequency_threshold`` (+35)
3. Multiple large transactions: two or more amounts, candidate included,
   above half of ``high_amount_threshold`` (+50)
4. Rapid succession: two adjacent historical timestamps less than 30 seconds
   apart, checked only with at least two history entries (+20)

The score is the sum of the triggered contributions, capped at 100.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from fraud_monitor.domain.models.transaction import (
    MAX_RISK_SCORE,
    HistoricalTransaction,
    Verdict,
)
from fraud_monitor.domain.scoring_config import ScoringConfig

HIGH_AMOUNT_POINTS = 50
HIGH_FREQUENCY_POINTS = 35
MULTIPLE_LARGE_POINTS = 50
RAPID_SUCCESSION_POINTS = 20

RAPID_SUCCESSION_INTERVAL = timedelta(seconds=30)


@dataclass(frozen=True)
class ScoringContext:
    """Inputs shared by every rule in one scoring call."""

    user_id: str
    amount: Decimal
    occurs_at: datetime
    config: ScoringConfig
    history: tuple[HistoricalTransaction, ...]


RuleHit = tuple[int, str]
Rule = Callable[[ScoringContext], RuleHit | None]


def format_amount(value: Decimal) -> str:
    """Render a monetary value without trailing zeros or exponent."""
    return format(value.normalize(), "f")


def window_start(occurs_at: datetime, config: ScoringConfig) -> datetime:
    """Earliest timestamp a history entry may have to be part of the window."""
    return occurs_at - config.window


def within_window(
    history: Sequence[HistoricalTransaction],
    occurs_at: datetime,
    config: ScoringConfig,
) -> list[HistoricalTransaction]:
    """Keep entries inside ``[occurs_at - window, occurs_at]``, oldest first."""
    start = window_start(occurs_at, config)
    return sorted(
        (tx for tx in history if start <= tx.timestamp <= occurs_at),
        key=lambda tx: tx.timestamp,
    )


def _high_amount(ctx: ScoringContext) -> RuleHit | None:
    threshold = ctx.config.high_amount_threshold
    if ctx.amount <= threshold:
        return None
    return (
        HIGH_AMOUNT_POINTS,
        f"High transaction amount: ${format_amount(ctx.amount)} "
        f"exceeds threshold of ${format_amount(threshold)}",
    )


def _high_frequency(ctx: ScoringContext) -> RuleHit | None:
    # The candidate is not stored yet
    total = len(ctx.history) + 1
    if total < ctx.config.frequency_threshold:
        return None
    return (
        HIGH_FREQUENCY_POINTS,
        f"High transaction frequency: {total} transactions in "
        f"{ctx.config.time_window_minutes} minute(s), "
        f"threshold is {ctx.config.frequency_threshold}",
    )


def _multiple_large(ctx: ScoringContext) -> RuleHit | None:
    half_threshold = ctx.config.large_amount_threshold
    count = sum(1 for tx in ctx.history if tx.amount > half_threshold)
    if ctx.amount > half_threshold:
        count += 1
    if count < 2:
        return None
    return (
        MULTIPLE_LARGE_POINTS,
        f"Multiple large transactions detected: {count} transactions over "
        f"${format_amount(half_threshold)} in {ctx.config.time_window_minutes} minute(s)",
    )


def _rapid_succession(ctx: ScoringContext) -> RuleHit | None:
    if len(ctx.history) < 2:
        return None
    timestamps = sorted(tx.timestamp for tx in ctx.history)
    for previous, current in zip(timestamps, timestamps[1:]):
        if current - previous < RAPID_SUCCESSION_INTERVAL:
            return (
                RAPID_SUCCESSION_POINTS,
                "Rapid successive transactions detected within 30 seconds",
            )
    return None


RULES: tuple[Rule, ...] = (
    _high_amount,
    _high_frequency,
    _multiple_large,
    _rapid_succession,
)


def score_transaction(
    user_id: str,
    amount: Decimal,
    occurs_at: datetime,
    config: ScoringConfig,
    recent_history: Sequence[HistoricalTransaction],
) -> Verdict:
    """Score a candidate transaction against its history window.

    Args:
        user_id: Owner of the candidate and of every history entry
        amount: Candidate amount, positive
        occurs_at: When the candidate happens
        config: Thresholds for this call
        recent_history: The user's stored transactions inside the window

    Returns:
        Verdict with the capped risk score and the triggered reasons in rule order
    """
    ctx = ScoringContext(
        user_id=user_id,
        amount=amount if isinstance(amount, Decimal) else Decimal(str(amount)),
        occurs_at=occurs_at,
        config=config,
        history=tuple(recent_history),
    )

    total = 0
    reasons: list[str] = []
    for rule in RULES:
        hit = rule(ctx)
        if hit is None:
            continue
        points, reason = hit
        total += points
        reasons.append(reason)

    return Verdict(risk_score=min(total, MAX_RISK_SCORE), reasons=tuple(reasons))
