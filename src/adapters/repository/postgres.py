"""
PostgreSQL repository adapter - Implements InscriptionRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 (async) with raw SQL over an
AsyncConnectionPool. Every statement is parameterized; values are never
interpolated into SQL text.

Any psycopg error (including pool acquisition failures) is re-raised as the
domain StorageError chained to the driver exception, so nothing above this
module handles driver exceptions directly.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import psycopg
from psycopg.rows import class_row
from psycopg_pool import AsyncConnectionPool

from src.domain.exceptions import DatabaseUnavailable, StorageError
from src.domain.ports import Inscription

_COLUMNS = "id, name, contact, email"


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Translate psycopg errors raised inside the block into StorageError."""
    try:
        yield
    except psycopg.Error as e:
        raise StorageError(f"Database error during {action}") from e


class PostgresInscriptionRepository:
    """
    Implements InscriptionRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Each method runs a single statement on a pooled connection.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def insert(self, name: str, contact: str, email: str) -> int:
        sql = "INSERT INTO inscription (name, contact, email) VALUES (%s, %s, %s) RETURNING id"

        with _storage_errors("insert"):
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (name, contact, email))
                row = await cursor.fetchone()
                await conn.commit()
                return row[0]

    async def find_all(self, search: str | None = None) -> list[Inscription]:
        """
        List inscriptions ordered by id descending.

        The filter clause is only appended for a non-empty search; the same
        `%search%` pattern is matched against all three text columns.
        """
        sql = f"SELECT {_COLUMNS} FROM inscription"
        params: tuple[str, ...] = ()

        if search:
            sql += " WHERE name ILIKE %s OR contact ILIKE %s OR email ILIKE %s"
            pattern = f"%{search}%"
            params = (pattern, pattern, pattern)

        sql += " ORDER BY id DESC"

        with _storage_errors("list"):
            async with self._pool.connection() as conn, conn.cursor(
                row_factory=class_row(Inscription)
            ) as cursor:
                await cursor.execute(sql, params)
                return await cursor.fetchall()

    async def find_by_id(self, inscription_id: int) -> Inscription | None:
        sql = f"SELECT {_COLUMNS} FROM inscription WHERE id = %s"

        with _storage_errors("select"):
            async with self._pool.connection() as conn, conn.cursor(
                row_factory=class_row(Inscription)
            ) as cursor:
                await cursor.execute(sql, (inscription_id,))
                return await cursor.fetchone()

    async def update(self, inscription_id: int, name: str, contact: str, email: str) -> bool:
        sql = "UPDATE inscription SET name = %s, contact = %s, email = %s WHERE id = %s"

        with _storage_errors("update"):
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (name, contact, email, inscription_id))
                await conn.commit()
                # rowcount is the only existence check; no prior SELECT
                return cursor.rowcount > 0

    async def delete(self, inscription_id: int) -> bool:
        sql = "DELETE FROM inscription WHERE id = %s"

        with _storage_errors("delete"):
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (inscription_id,))
                await conn.commit()
                return cursor.rowcount > 0


async def check_connection(pool: AsyncConnectionPool, timeout: float | None = None) -> None:
    """
    Verify that the database accepts connections and queries.

    Args:
        pool: psycopg3 AsyncConnectionPool instance
        timeout: Seconds to wait for a connection; None uses the pool default

    Raises:
        DatabaseUnavailable: If no connection can be obtained or SELECT 1 fails
    """
    try:
        async with pool.connection(timeout=timeout) as conn:
            await conn.execute("SELECT 1")
    except psycopg.Error as e:
        raise DatabaseUnavailable("Database connection failed") from e
