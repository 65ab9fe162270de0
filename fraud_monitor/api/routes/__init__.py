"""API routes package."""

from fastapi import APIRouter

from fraud_monitor.api.routes.fraud_detection import router as fraud_detection_router
from fraud_monitor.api.routes.health import router as health_router
from fraud_monitor.api.routes.transactions import router as transactions_router

# Create API router with all sub-routers
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(transactions_router)
api_router.include_router(fraud_detection_router)


__all__ = [
    "api_router",
    "health_router",
    "transactions_router",
    "fraud_detection_router",
]
