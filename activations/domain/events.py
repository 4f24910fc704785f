"""
Activation domain events.

Domain events represent something that happened in the activation domain.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from core.domain.events import DomainEvent


class LicenseActivated(DomainEvent):
    """Event raised when a device activates a license for the first time."""

    def __init__(
        self,
        activation_id: uuid.UUID,
        license_id: uuid.UUID,
        device_id: str,
        instance_id: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseActivated event.

        Args:
            activation_id: Activation UUID
            license_id: License UUID
            device_id: Device identifier
            instance_id: Instance id handed to the device
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="LicenseActivated",
        )
        self.activation_id = activation_id
        self.license_id = license_id
        self.device_id = device_id
        self.instance_id = instance_id


class DeviceDeactivated(DomainEvent):
    """Event raised when a device activation is released."""

    def __init__(
        self,
        activation_id: uuid.UUID,
        license_id: uuid.UUID,
        device_id: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize DeviceDeactivated event.

        Args:
            activation_id: Activation UUID
            license_id: License UUID
            device_id: Device identifier
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="DeviceDeactivated",
        )
        self.activation_id = activation_id
        self.license_id = license_id
        self.device_id = device_id
