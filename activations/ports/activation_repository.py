"""
Activation repository port (interface).

This defines the contract for activation persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import uuid

from activations.domain.activation import Activation


class ActivationRepository(ABC):
    """
    Abstract repository for Activation entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, activation: Activation) -> Activation:
        """
        Save an activation entity.

        Args:
            activation: Activation entity to save

        Returns:
            Saved activation entity
        """
        pass

    @abstractmethod
    def find_by_instance_id(self, instance_id: str) -> Optional[Activation]:
        """
        Find an activation by the instance id handed to the device.

        Args:
            instance_id: Instance id

        Returns:
            Activation entity or None if not found
        """
        pass

    @abstractmethod
    def find_active_by_license_and_device(
        self, license_id: uuid.UUID, device_id: str
    ) -> Optional[Activation]:
        """
        Find the active activation of a device on a license.

        Args:
            license_id: License UUID
            device_id: Device identifier

        Returns:
            Active Activation entity or None if the device holds none
        """
        pass

    @abstractmethod
    def count_active_by_license(self, license_id: uuid.UUID) -> int:
        """
        Count active activations for a license.

        Args:
            license_id: License UUID

        Returns:
            Number of active activations
        """
        pass

    @abstractmethod
    def count_active_by_members(self, member_ids: List[uuid.UUID]) -> Dict[uuid.UUID, int]:
        """
        Count active activations per team member.

        Args:
            member_ids: TeamMember UUIDs

        Returns:
            Mapping of member UUID to active device count; members
            without devices are omitted
        """
        pass
