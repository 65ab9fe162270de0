"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import structlog

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing the service
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OTEL_LOG_RECORD_FORMAT", "console")

from fraud_monitor.domain.models.transaction import HistoricalTransaction
from fraud_monitor.domain.scoring_config import ScoringConfig

SCORING_TIME = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed scoring instant."""
    return SCORING_TIME


@pytest.fixture
def default_config() -> ScoringConfig:
    """Default thresholds: 10000 / 5 / 1 minute."""
    return ScoringConfig()


@pytest.fixture
def make_history():
    """Build history entries from (seconds_before_now, amount) pairs."""

    def _make(*entries: tuple[int, str | int]) -> list[HistoricalTransaction]:
        return [
            HistoricalTransaction(
                id=index + 1,
                amount=Decimal(str(amount)),
                timestamp=SCORING_TIME - timedelta(seconds=seconds_ago),
            )
            for index, (seconds_ago, amount) in enumerate(entries)
        ]

    return _make


@pytest.fixture
def sample_transaction_row() -> dict:
    """Stored transaction dict as returned by the repository."""
    return {
        "id": 1,
        "transaction_id": "txn_test_001",
        "user_id": "user_1",
        "amount": Decimal("99.99"),
        "timestamp": SCORING_TIME,
        "status": "pending",
        "is_suspicious": False,
        "fraud_reason": None,
        "created_at": SCORING_TIME,
    }


@pytest.fixture
def mock_session():
    """Mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
