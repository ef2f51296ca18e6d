"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory repository standing in for PostgreSQL
- A test client whose routes use that repository
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_inscription_service
from src.api.main import app
from src.domain.inscription import InscriptionService
from src.domain.ports import Inscription


class InMemoryInscriptionRepository:
    """
    Implements InscriptionRepository protocol with a dict.

    Mirrors the PostgreSQL adapter: ids are generated sequentially and never
    reused, listing is newest first, search is a case-insensitive substring
    match on name, contact and email.
    """

    def __init__(self) -> None:
        self.rows: dict[int, Inscription] = {}
        self._next_id = 1

    async def insert(self, name: str, contact: str, email: str) -> int:
        inscription_id = self._next_id
        self._next_id += 1
        self.rows[inscription_id] = Inscription(inscription_id, name, contact, email)
        return inscription_id

    async def find_all(self, search: str | None = None) -> list[Inscription]:
        rows = sorted(self.rows.values(), key=lambda row: row.id, reverse=True)
        if search:
            needle = search.lower()
            rows = [
                row
                for row in rows
                if needle in row.name.lower()
                or needle in row.contact.lower()
                or needle in row.email.lower()
            ]
        return rows

    async def find_by_id(self, inscription_id: int) -> Inscription | None:
        return self.rows.get(inscription_id)

    async def update(self, inscription_id: int, name: str, contact: str, email: str) -> bool:
        if inscription_id not in self.rows:
            return False
        self.rows[inscription_id] = Inscription(inscription_id, name, contact, email)
        return True

    async def delete(self, inscription_id: int) -> bool:
        return self.rows.pop(inscription_id, None) is not None


@pytest.fixture
def repository() -> InMemoryInscriptionRepository:
    """Empty in-memory repository for each test."""
    return InMemoryInscriptionRepository()


@pytest.fixture
def service(repository: InMemoryInscriptionRepository) -> InscriptionService:
    return InscriptionService(repository=repository)


@pytest.fixture
def client(service: InscriptionService) -> Generator[TestClient, None, None]:
    """Test client for the application, backed by the in-memory repository."""
    app.dependency_overrides[get_inscription_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
