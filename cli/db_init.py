"""Create the fraud_monitor schema and tables.

Usage:
    uv run db-init

Connection settings come from the DATABASE_* environment variables.
"""

from __future__ import annotations

import asyncio
import sys

from fraud_monitor.core.config import get_settings
from fraud_monitor.core.database import create_async_engine, create_schema


async def _init() -> None:
    engine = create_async_engine(get_settings().database)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> None:
    """Initialise the database schema."""
    asyncio.run(_init())
    print("Schema fraud_monitor is ready")
    sys.exit(0)
