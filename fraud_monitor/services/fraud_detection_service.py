"""Fraud detection service: fetches the history window and scores it."""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from fraud_monitor.core.config import get_settings
from fraud_monitor.core.errors import ValidationError
from fraud_monitor.core.logging import LoggerMixin
from fraud_monitor.domain.fraud_scoring import score_transaction, window_start, within_window
from fraud_monitor.domain.models.transaction import Verdict
from fraud_monitor.domain.scoring_config import ScoringConfig
from fraud_monitor.persistence.transaction_repository import TransactionRepository

class FraudDetectionService(LoggerMixin):
    """Service running the scoring engine against stored history."""

    def __init__(self, session: AsyncSession, default_config: ScoringConfig | None = None):
        self.session = session
        self.repo = TransactionRepository(session)
        self.default_config = default_config or get_settings().fraud.scoring_config()

    async def analyze(
        self,
        user_id: str,
        amount: Decimal,
        config: ScoringConfig | None = None,
        occurs_at: datetime | None = None,
    ) -> Verdict:
        """Score a candidate transaction for a user.

        History fetch errors propagate: an unavailable store must never look
        like an empty window.
        """
        if amount <= 0:
            raise ValidationError("Amount must be positive", details={"amount": str(amount)})

        config = config or self.default_config
        occurs_at = occurs_at or datetime.now(UTC)

        history = await self.repo.fetch_recent(user_id, window_start(occurs_at, config))
        window = within_window(history, occurs_at, config)

        verdict = score_transaction(user_id, amount, occurs_at, config, window)

        if verdict.is_suspicious:
            self.logger.warning(
                "suspicious_transaction_detected",
                user_id=user_id,
                amount=str(amount),
                risk_score=verdict.risk_score,
                fraud_reason=verdict.fraud_reason,
            )
        else:
            self.logger.debug(
                "transaction_scored",
                user_id=user_id,
                risk_score=verdict.risk_score,
                history_size=len(window),
            )
        return verdict
