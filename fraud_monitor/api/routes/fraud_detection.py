"""API routes for on-demand fraud analysis."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fraud_monitor.core.database import get_session
from fraud_monitor.schemas.fraud_detection import FraudDetectionRequest, FraudDetectionResponse
from fraud_monitor.services.fraud_detection_service import FraudDetectionService

router = APIRouter(prefix="/fraud-detection", tags=["fraud-detection"])


def get_fraud_detection_service(
    session: AsyncSession = Depends(get_session),
) -> FraudDetectionService:
    """Get fraud detection service instance."""
    return FraudDetectionService(session)


@router.post("/analyze", response_model=FraudDetectionResponse)
async def analyze_transaction(
    request: FraudDetectionRequest,
    fraud_detection_service: FraudDetectionService = Depends(get_fraud_detection_service),
) -> FraudDetectionResponse:
    """Score a candidate transaction without storing it."""
    verdict = await fraud_detection_service.analyze(
        user_id=request.user_id,
        amount=request.amount,
        config=request.config.to_scoring_config() if request.config else None,
    )
    return FraudDetectionResponse(
        risk_score=verdict.risk_score,
        is_suspicious=verdict.is_suspicious,
        fraud_reason=verdict.fraud_reason,
        reasons=list(verdict.reasons),
    )
