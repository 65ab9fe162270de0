"""Transaction repository using asyncpg and SQLAlchemy 2.0 async.

Table: fraud_monitor.transactions

Rows are append-only apart from the review fields (status, is_suspicious,
fraud_reason), which analysts may change after the fact.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from fraud_monitor.domain.models.transaction import HistoricalTransaction

logger = logging.getLogger(__name__)

_COLUMNS = """
    id, transaction_id, user_id, amount, timestamp, status,
    is_suspicious, fraud_reason, created_at
"""


class TransactionRepository:
    """Repository for fraud_monitor.transactions data access."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int) -> dict[str, Any] | None:
        """Get transaction by primary key."""
        result = await self.session.execute(
            text(f"""
                SELECT {_COLUMNS}
                FROM fraud_monitor.transactions
                WHERE id = :id
            """),
            {"id": id},
        )
        row = result.fetchone()
        if row is None:
            return None
        return self._row_to_dict(row)

    async def get_by_transaction_id(self, transaction_id: str) -> dict[str, Any] | None:
        """Get transaction by business transaction ID."""
        result = await self.session.execute(
            text(f"""
                SELECT {_COLUMNS}
                FROM fraud_monitor.transactions
                WHERE transaction_id = :transaction_id
            """),
            {"transaction_id": transaction_id},
        )
        row = result.fetchone()
        if row is None:
            return None
        return self._row_to_dict(row)

    async def fetch_recent(self, user_id: str, since: datetime) -> list[HistoricalTransaction]:
        """Fetch all of a user's transactions with timestamp >= since.

        Results are ordered by timestamp ascending.
        """
        result = await self.session.execute(
            text("""
                SELECT id, amount, timestamp
                FROM fraud_monitor.transactions
                WHERE user_id = :user_id
                  AND timestamp >= :since
                ORDER BY timestamp ASC, id ASC
            """),
            {"user_id": user_id, "since": since},
        )
        return [
            HistoricalTransaction(id=row[0], amount=row[1], timestamp=row[2])
            for row in result.fetchall()
        ]

    async def create(
        self,
        transaction_id: str,
        user_id: str,
        amount: Decimal,
        timestamp: datetime,
        status: str,
        is_suspicious: bool,
        fraud_reason: str | None,
    ) -> dict[str, Any]:
        """Insert a transaction together with its fraud verdict."""
        result = await self.session.execute(
            text(f"""
                INSERT INTO fraud_monitor.transactions (
                    transaction_id, user_id, amount, timestamp, status,
                    is_suspicious, fraud_reason, created_at
                ) VALUES (
                    :transaction_id, :user_id, :amount, :timestamp, :status,
                    :is_suspicious, :fraud_reason, NOW()
                )
                RETURNING {_COLUMNS}
            """),
            {
                "transaction_id": transaction_id,
                "user_id": user_id,
                "amount": amount,
                "timestamp": timestamp,
                "status": status,
                "is_suspicious": is_suspicious,
                "fraud_reason": fraud_reason,
            },
        )
        return self._row_to_dict(result.fetchone())

    async def list(
        self,
        user_id: str | None = None,
        is_suspicious: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """List transactions, newest first."""
        where_clause, params = self._filters(user_id, is_suspicious)
        params.update({"limit": limit, "offset": offset})

        result = await self.session.execute(
            text(f"""
                SELECT {_COLUMNS}
                FROM fraud_monitor.transactions
                {where_clause}
                ORDER BY timestamp DESC, id DESC
                LIMIT :limit OFFSET :offset
            """),
            params,
        )
        return [self._row_to_dict(row) for row in result.fetchall()]

    async def count(
        self,
        user_id: str | None = None,
        is_suspicious: bool | None = None,
    ) -> int:
        """Count transactions matching the list filters."""
        where_clause, params = self._filters(user_id, is_suspicious)
        result = await self.session.execute(
            text(f"""
                SELECT COUNT(*)
                FROM fraud_monitor.transactions
                {where_clause}
            """),
            params,
        )
        return result.scalar_one()

    async def list_suspicious(self) -> list[dict[str, Any]]:
        """List every suspicious transaction, most recent first."""
        result = await self.session.execute(
            text(f"""
                SELECT {_COLUMNS}
                FROM fraud_monitor.transactions
                WHERE is_suspicious = TRUE
                ORDER BY timestamp DESC, id DESC
            """),
        )
        return [self._row_to_dict(row) for row in result.fetchall()]

    async def update_status(
        self,
        id: int,
        status: str,
        fraud_reason: str | None = None,
        force_suspicious: bool = False,
    ) -> dict[str, Any] | None:
        """Update review fields of a transaction.

        fraud_reason replaces the stored reason only when given. With
        force_suspicious the row is marked suspicious; otherwise the flag is
        left as it is.
        """
        update_fields = ["status = :status"]
        params: dict[str, Any] = {"id": id, "status": status}

        if fraud_reason is not None:
            update_fields.append("fraud_reason = :fraud_reason")
            params["fraud_reason"] = fraud_reason
        if force_suspicious:
            update_fields.append("is_suspicious = TRUE")

        result = await self.session.execute(
            text(f"""
                UPDATE fraud_monitor.transactions
                SET {", ".join(update_fields)}
                WHERE id = :id
                RETURNING {_COLUMNS}
            """),
            params,
        )
        row = result.fetchone()
        if row is None:
            return None
        return self._row_to_dict(row)

    async def get_user_summary(self, user_id: str) -> dict[str, Any]:
        """Aggregate a user's transaction activity."""
        result = await self.session.execute(
            text("""
                SELECT COUNT(*),
                       COALESCE(SUM(amount), 0),
                       COUNT(*) FILTER (WHERE is_suspicious),
                       MAX(timestamp)
                FROM fraud_monitor.transactions
                WHERE user_id = :user_id
            """),
            {"user_id": user_id},
        )
        row = result.fetchone()
        return {
            "user_id": user_id,
            "total_transactions": row[0],
            "total_amount": row[1],
            "suspicious_transactions": row[2],
            "last_transaction_at": row[3],
        }

    def _filters(
        self, user_id: str | None, is_suspicious: bool | None
    ) -> tuple[str, dict[str, Any]]:
        """Build the WHERE clause and params shared by list and count."""
        conditions: list[str] = []
        params: dict[str, Any] = {}

        if user_id is not None:
            conditions.append("user_id = :user_id")
            params["user_id"] = user_id
        if is_suspicious is not None:
            conditions.append("is_suspicious = :is_suspicious")
            params["is_suspicious"] = is_suspicious

        where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return where_clause, params

    def _row_to_dict(self, row) -> dict[str, Any]:
        """Convert a database row to a dictionary."""
        return {
            "id": row[0],
            "transaction_id": row[1],
            "user_id": row[2],
            "amount": row[3],
            "timestamp": row[4],
            "status": row[5],
            "is_suspicious": row[6],
            "fraud_reason": row[7],
            "created_at": row[8],
        }
