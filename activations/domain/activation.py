"""
Activation domain entity.

This is the core domain entity representing a device activation.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Activation:
    """
    Activation domain entity.

    Binds one license to one device. The instance id is handed to the
    device and is how it refers to this activation later.
    """

    id: uuid.UUID
    license_id: uuid.UUID
    device_id: str
    device_name: str
    os: str
    app_version: str
    instance_id: str
    member_id: Optional[uuid.UUID]
    activated_at: datetime
    last_validated_at: datetime
    deactivated_at: Optional[datetime]
    is_active: bool

    def __post_init__(self):
        """Validate activation entity."""
        if not self.license_id:
            raise ValueError("License ID is required")
        if not self.device_id or not self.device_id.strip():
            raise ValueError("Device ID is required")

    @classmethod
    def create(
        cls,
        license_id: uuid.UUID,
        device_id: str,
        device_name: str,
        os: str,
        app_version: str,
        now: datetime,
        member_id: Optional[uuid.UUID] = None,
        activation_id: Optional[uuid.UUID] = None,
    ) -> "Activation":
        """
        Create a new Activation entity with a fresh instance id.

        Args:
            license_id: License UUID
            device_id: Stable device identifier reported by the client
            device_name: Human-readable device name
            os: Operating system
            app_version: Application version
            now: Activation timestamp
            member_id: Activating team member, for team licenses
            activation_id: Optional UUID (generated if not provided)

        Returns:
            Activation entity instance
        """
        return cls(
            id=activation_id or uuid.uuid4(),
            license_id=license_id,
            device_id=device_id,
            device_name=device_name,
            os=os,
            app_version=app_version,
            instance_id=str(uuid.uuid4()),
            member_id=member_id,
            activated_at=now,
            last_validated_at=now,
            deactivated_at=None,
            is_active=True,
        )

    def refresh(
        self,
        now: datetime,
        device_name: Optional[str] = None,
        app_version: Optional[str] = None,
        member_id: Optional[uuid.UUID] = None,
    ) -> "Activation":
        """
        Record another activation of the same device.

        On a shared device the last team member to activate owns the row.

        Args:
            now: Validation timestamp
            device_name: Updated device name, if reported
            app_version: Updated application version, if reported
            member_id: Activating team member, if any

        Returns:
            New Activation instance with the same instance id
        """
        return replace(
            self,
            last_validated_at=now,
            device_name=device_name or self.device_name,
            app_version=app_version or self.app_version,
            member_id=member_id or self.member_id,
        )

    def deactivate(self, now: datetime) -> "Activation":
        """
        Create a new Activation instance with deactivated status.

        Returns:
            New Activation instance with deactivated status
        """
        if not self.is_active:
            return self  # Already deactivated

        return replace(self, is_active=False, deactivated_at=now)
