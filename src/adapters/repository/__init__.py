"""Repository adapters - Database implementations."""

from .postgres import PostgresInscriptionRepository, check_connection

__all__ = ["PostgresInscriptionRepository", "check_connection"]
