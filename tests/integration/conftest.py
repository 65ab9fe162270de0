"""Pytest configuration for integration tests.

These tests require DATABASE_URL to point at a PostgreSQL instance. Without
it the integration modules are not collected.
"""

import os

import pytest

if "DATABASE_URL" not in os.environ:
    collect_ignore_glob = ["test_*.py"]


@pytest.fixture
async def engine():
    """Create test database engine with the schema in place."""
    from fraud_monitor.core.config import get_settings
    from fraud_monitor.core.database import create_async_engine, create_schema

    engine = create_async_engine(get_settings().database)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    """Session whose work is rolled back after the test."""
    from fraud_monitor.core.database import create_session_factory

    async with create_session_factory(engine)() as s:
        yield s
        await s.rollback()


@pytest.fixture(autouse=True)
async def reset_database_engine():
    """Reset database engine before each test for fresh connections."""
    from fraud_monitor.core.database import reset_engine

    await reset_engine()
    yield
