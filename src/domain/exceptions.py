"""
Domain exceptions - Semantic error types for inscriptions.

This module defines domain-specific exceptions that communicate
failures without leaking infrastructure details.
"""


class InscriptionError(Exception):
    """Base class for inscription domain errors."""

    pass


class InscriptionNotFound(InscriptionError):
    """No inscription exists with the requested id."""

    def __init__(self, inscription_id: int) -> None:
        super().__init__(f"Inscription {inscription_id} not found")
        self.inscription_id = inscription_id


class StorageError(InscriptionError):
    """The database rejected or failed to execute a statement."""

    pass


class DatabaseUnavailable(StorageError):
    """No connection to the database could be established."""

    pass
