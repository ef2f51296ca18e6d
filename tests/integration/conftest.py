"""
Shared fixtures for integration tests.

Database-backed tests use the PostgreSQL configured through the usual
DB_* settings. The schema from schema.sql is applied once per session and
the table is emptied before each test. When the database is unreachable
those tests are skipped.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import psycopg
import pytest
import pytest_asyncio
from psycopg_pool import AsyncConnectionPool

from src.config.settings import get_settings

SCHEMA_FILE = Path(__file__).parent.parent.parent / "schema.sql"


@pytest.fixture(scope="session")
def database() -> str:
    """Apply the schema and return the connection string, or skip."""
    conninfo = get_settings().conninfo
    try:
        with psycopg.connect(conninfo, connect_timeout=3) as conn:
            conn.execute(SCHEMA_FILE.read_text())
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return conninfo


@pytest.fixture
def clean_database(database: str) -> Generator[None, None, None]:
    """Empty the inscription table and reset its id sequence."""
    with psycopg.connect(database) as conn:
        conn.execute("TRUNCATE inscription RESTART IDENTITY")
    yield


@pytest_asyncio.fixture
async def pool(database: str) -> AsyncGenerator[AsyncConnectionPool, None]:
    """Open a connection pool for one test."""
    pool = AsyncConnectionPool(conninfo=database, min_size=1, max_size=10, open=False)
    await pool.open(wait=True)
    yield pool
    await pool.close()
