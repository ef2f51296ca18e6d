"""
Inscription domain service - CRUD orchestration over the repository port.

Create and update are two statements each: the write, then a read-back of
the affected row so callers always receive the persisted state. The pair
is not wrapped in a transaction; a failure after the write surfaces as a
StorageError even though the write committed.

Existence for update and delete is decided by the affected-row count of
the write alone, so a row deleted concurrently is reported as not found.
"""

from dataclasses import dataclass

from .exceptions import InscriptionNotFound, StorageError
from .ports import Inscription, InscriptionRepository


@dataclass
class InscriptionService:
    """Domain service for inscription records."""

    repository: InscriptionRepository

    async def create(self, name: str, contact: str, email: str) -> Inscription:
        """
        Persist a new inscription and return it as stored.

        Raises:
            StorageError: If either statement fails
        """
        inscription_id = await self.repository.insert(name, contact, email)
        inscription = await self.repository.find_by_id(inscription_id)
        if inscription is None:
            raise StorageError(f"Inscription {inscription_id} vanished after insert")
        return inscription

    async def list_all(self, search: str | None = None) -> list[Inscription]:
        """List inscriptions, newest first, optionally filtered by substring."""
        return await self.repository.find_all(search or None)

    async def get(self, inscription_id: int) -> Inscription:
        """
        Fetch one inscription.

        Raises:
            InscriptionNotFound: If no row has this id
        """
        inscription = await self.repository.find_by_id(inscription_id)
        if inscription is None:
            raise InscriptionNotFound(inscription_id)
        return inscription

    async def update(self, inscription_id: int, name: str, contact: str, email: str) -> Inscription:
        """
        Replace the fields of an inscription and return it as stored.

        Raises:
            InscriptionNotFound: If the update affected no row
        """
        updated = await self.repository.update(inscription_id, name, contact, email)
        if not updated:
            raise InscriptionNotFound(inscription_id)
        # The row can disappear between the write and this read.
        return await self.get(inscription_id)

    async def delete(self, inscription_id: int) -> None:
        """
        Delete an inscription.

        Raises:
            InscriptionNotFound: If the delete affected no row
        """
        deleted = await self.repository.delete(inscription_id)
        if not deleted:
            raise InscriptionNotFound(inscription_id)
