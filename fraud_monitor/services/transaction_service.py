"""Transaction service: recording, listing and manual review."""

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fraud_monitor.core.errors import ConflictError, NotFoundError
from fraud_monitor.core.logging import LoggerMixin
from fraud_monitor.domain.models.transaction import TransactionStatus
from fraud_monitor.persistence.transaction_repository import TransactionRepository
from fraud_monitor.schemas.transaction import TransactionCreate
from fraud_monitor.services.fraud_detection_service import FraudDetectionService


class TransactionService(LoggerMixin):
    """Service for transaction operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = TransactionRepository(session)
        self.fraud_detection = FraudDetectionService(session)

    async def create_transaction(self, request: TransactionCreate) -> dict:
        """Score a new transaction against the user's window and store it."""
        existing = await self.repo.get_by_transaction_id(request.transaction_id)
        if existing:
            raise ConflictError(
                "Transaction already exists",
                details={
                    "transaction_id": request.transaction_id,
                    "existing_id": existing["id"],
                },
            )

        occurs_at = datetime.now(UTC)
        verdict = await self.fraud_detection.analyze(
            user_id=request.user_id,
            amount=request.amount,
            occurs_at=occurs_at,
        )

        try:
            transaction = await self.repo.create(
                transaction_id=request.transaction_id,
                user_id=request.user_id,
                amount=request.amount,
                timestamp=occurs_at,
                status=request.status.value,
                is_suspicious=verdict.is_suspicious,
                fraud_reason=verdict.fraud_reason,
            )
        except IntegrityError as e:
            # A concurrent insert won the unique transaction_id constraint
            raise ConflictError(
                "Transaction already exists",
                details={"transaction_id": request.transaction_id},
            ) from e

        self.logger.info(
            "transaction_recorded",
            transaction_id=request.transaction_id,
            user_id=request.user_id,
            risk_score=verdict.risk_score,
            is_suspicious=verdict.is_suspicious,
        )
        return transaction

    async def list_transactions(
        self,
        user_id: str | None = None,
        is_suspicious: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> dict:
        """List transactions, newest first.

        total counts every row matching the filters, not just this page.
        """
        items = await self.repo.list(
            user_id=user_id,
            is_suspicious=is_suspicious,
            limit=limit,
            offset=offset,
        )
        total = await self.repo.count(user_id=user_id, is_suspicious=is_suspicious)
        return {
            "items": items,
            "total": total,
            "limit": limit,
            "offset": offset,
        }

    async def list_suspicious_transactions(self) -> list[dict]:
        """List all suspicious transactions for the monitoring dashboard."""
        return await self.repo.list_suspicious()

    async def update_transaction_status(
        self,
        id: int,
        status: TransactionStatus,
        fraud_reason: str | None = None,
    ) -> dict:
        """Apply a manual status change.

        Flagging always wins over the stored verdict; any other status keeps
        the computed is_suspicious value.
        """
        transaction = await self.repo.update_status(
            id=id,
            status=status.value,
            fraud_reason=fraud_reason,
            force_suspicious=status == TransactionStatus.FLAGGED,
        )
        if transaction is None:
            raise NotFoundError("Transaction not found", details={"id": id})

        self.logger.info("transaction_status_updated", id=id, status=status.value)
        return transaction

    async def get_user_summary(self, user_id: str) -> dict:
        """Get aggregated transaction activity for a user."""
        return await self.repo.get_user_summary(user_id)
