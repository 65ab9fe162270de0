"""API routes for recording and reviewing transactions."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fraud_monitor.core.database import get_session
from fraud_monitor.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatusUpdate,
    UserTransactionSummary,
)
from fraud_monitor.services.transaction_service import TransactionService

router = APIRouter(tags=["transactions"])


def get_transaction_service(session: AsyncSession = Depends(get_session)) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(session)


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    request: TransactionCreate,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> dict:
    """Record a transaction.

    The transaction is scored against the user's recent history before it is
    stored; the verdict is persisted as is_suspicious and fraud_reason.
    """
    return await transaction_service.create_transaction(request)


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    user_id: str | None = None,
    is_suspicious: bool | None = None,
    limit: int = Query(default=100, gt=0, le=1000),
    offset: int = Query(default=0, ge=0),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> dict:
    """List transactions, newest first."""
    return await transaction_service.list_transactions(
        user_id=user_id,
        is_suspicious=is_suspicious,
        limit=limit,
        offset=offset,
    )


@router.get("/transactions/suspicious", response_model=list[TransactionResponse])
async def list_suspicious_transactions(
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> list[dict]:
    """List every suspicious transaction, most recent first."""
    return await transaction_service.list_suspicious_transactions()


@router.patch("/transactions/{id}/status", response_model=TransactionResponse)
async def update_transaction_status(
    id: int,
    request: TransactionStatusUpdate,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> dict:
    """Update a transaction's status after manual review.

    Setting the status to ``flagged`` marks the transaction suspicious
    regardless of the computed verdict.
    """
    return await transaction_service.update_transaction_status(
        id=id,
        status=request.status,
        fraud_reason=request.fraud_reason,
    )


@router.get("/users/{user_id}/summary", response_model=UserTransactionSummary)
async def get_user_transaction_summary(
    user_id: str,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> dict:
    """Get aggregated transaction activity for a user."""
    return await transaction_service.get_user_summary(user_id)
