"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the record type the domain works with and the
interface (port) it requires from persistence. Adapters implement it.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Inscription:
    """
    A stored inscription row.

    `id` is assigned by the storage layer at creation and never changes.
    """

    id: int
    name: str
    contact: str
    email: str


class InscriptionRepository(Protocol):
    """Port interface for inscription persistence."""

    async def insert(self, name: str, contact: str, email: str) -> int:
        """
        Insert a new inscription.

        Returns:
            The id generated by the storage layer
        """
        ...

    async def find_all(self, search: str | None = None) -> list[Inscription]:
        """
        List inscriptions ordered by id descending.

        Args:
            search: Optional substring; when non-empty, only rows whose
                name, contact or email contain it (case-insensitive) match
        """
        ...

    async def find_by_id(self, inscription_id: int) -> Inscription | None:
        """Fetch one inscription, or None if the id does not exist."""
        ...

    async def update(self, inscription_id: int, name: str, contact: str, email: str) -> bool:
        """
        Replace name, contact and email of an inscription.

        Returns:
            True if a row was affected, False if the id does not exist
        """
        ...

    async def delete(self, inscription_id: int) -> bool:
        """
        Delete an inscription.

        Returns:
            True if a row was affected, False if the id does not exist
        """
        ...
