"""
Domain layer - Pure business logic with zero framework imports.

This package contains the inscription record, the repository port it
depends on, and the service orchestrating CRUD operations over it.
"""

from .exceptions import DatabaseUnavailable, InscriptionError, InscriptionNotFound, StorageError
from .inscription import InscriptionService
from .ports import Inscription, InscriptionRepository

__all__ = [
    "DatabaseUnavailable",
    "Inscription",
    "InscriptionError",
    "InscriptionNotFound",
    "InscriptionRepository",
    "InscriptionService",
    "StorageError",
]
