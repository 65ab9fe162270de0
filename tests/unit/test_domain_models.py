"""Unit tests for scoring configuration and verdict models."""

from datetime import timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from fraud_monitor.domain.models.transaction import (
    HistoricalTransaction,
    TransactionStatus,
    Verdict,
)
from fraud_monitor.domain.scoring_config import ScoringConfig


class TestScoringConfig:
    """Tests for ScoringConfig."""

    def test_defaults(self):
        """Test default thresholds."""
        config = ScoringConfig()
        assert config.high_amount_threshold == Decimal("10000")
        assert config.frequency_threshold == 5
        assert config.time_window_minutes == 1

    def test_each_knob_overrides_independently(self):
        """Test overriding one knob keeps the other defaults."""
        config = ScoringConfig(frequency_threshold=3)
        assert config.frequency_threshold == 3
        assert config.high_amount_threshold == Decimal("10000")
        assert config.time_window_minutes == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {"high_amount_threshold": Decimal("0")},
            {"high_amount_threshold": Decimal("-1")},
            {"frequency_threshold": 0},
            {"frequency_threshold": -5},
            {"time_window_minutes": 0},
        ],
    )
    def test_non_positive_values_rejected(self, overrides):
        """Test invalid configuration fails fast."""
        with pytest.raises(ValidationError):
            ScoringConfig(**overrides)

    def test_config_is_immutable(self):
        """Test configuration cannot change after construction."""
        config = ScoringConfig()
        with pytest.raises(ValidationError):
            config.frequency_threshold = 10

    def test_window_and_large_amount_threshold(self):
        """Test derived window values."""
        config = ScoringConfig(high_amount_threshold=Decimal("3000"), time_window_minutes=15)
        assert config.window == timedelta(minutes=15)
        assert config.large_amount_threshold == Decimal("1500")


class TestVerdict:
    """Tests for Verdict."""

    def test_empty_verdict(self):
        """Test a zero score verdict."""
        verdict = Verdict(risk_score=0)
        assert verdict.is_suspicious is False
        assert verdict.fraud_reason is None
        assert verdict.reasons == ()

    @pytest.mark.parametrize(
        ("score", "suspicious"),
        [(0, False), (20, False), (35, False), (49, False), (50, True), (55, True), (100, True)],
    )
    def test_is_suspicious_threshold(self, score, suspicious):
        """Test the suspicious flag follows the score."""
        reasons = ("reason",) if score else ()
        assert Verdict(risk_score=score, reasons=reasons).is_suspicious is suspicious

    def test_fraud_reason_joins_reasons(self):
        """Test reasons are joined with a semicolon."""
        verdict = Verdict(risk_score=70, reasons=("first", "second"))
        assert verdict.fraud_reason == "first; second"

    def test_serialized_fields(self):
        """Test computed fields are part of the dump."""
        dumped = Verdict(risk_score=50, reasons=("x",)).model_dump()
        assert dumped == {
            "risk_score": 50,
            "reasons": ("x",),
            "is_suspicious": True,
            "fraud_reason": "x",
        }

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_out_of_range_rejected(self, score):
        """Test the score must stay within 0-100."""
        with pytest.raises(ValidationError):
            Verdict(risk_score=score)


class TestHistoricalTransaction:
    """Tests for HistoricalTransaction."""

    def test_negative_amount_rejected(self, now):
        """Test stored amounts are non-negative."""
        with pytest.raises(ValidationError):
            HistoricalTransaction(amount=Decimal("-1.00"), timestamp=now)

    def test_id_is_optional(self, now):
        """Test the persisted identifier may be absent."""
        tx = HistoricalTransaction(amount=Decimal("10.00"), timestamp=now)
        assert tx.id is None


class TestTransactionStatus:
    """Tests for TransactionStatus."""

    def test_values(self):
        """Test status values match the stored enum."""
        assert [s.value for s in TransactionStatus] == [
            "pending",
            "completed",
            "failed",
            "flagged",
        ]
