"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the domain service and its infrastructure adapter into routes.
"""

from fastapi import Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresInscriptionRepository
from src.domain.inscription import InscriptionService


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresInscriptionRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresInscriptionRepository(pool)


def get_inscription_service(request: Request) -> InscriptionService:
    """Create inscription service over the PostgreSQL repository."""
    repository = get_repository(request)
    return InscriptionService(repository=repository)
