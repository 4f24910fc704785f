"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional
import uuid

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        pass

    @abstractmethod
    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by its key.

        Args:
            key: Normalized license key

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_key_for_update(self, key: str) -> Optional[License]:
        """
        Find a license by its key and lock the row.

        Must be called inside a transaction. Other callers locking
        the same license wait until that transaction ends.

        Args:
            key: Normalized license key

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    def key_exists(self, key: str) -> bool:
        """
        Check if a key is already taken.

        Args:
            key: License key

        Returns:
            True if a license with this key exists
        """
        pass
