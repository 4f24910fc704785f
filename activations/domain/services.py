"""
Activation domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import ActivationLimitExceededError
from licenses.domain.license import License


@dataclass(frozen=True)
class ActivationResult:
    """Outcome of an activation attempt that succeeded."""

    activation: Activation
    devices_used: int
    devices_allowed: int
    created: bool


class ActivationLedger:
    """
    Domain service for device activations.

    The active-device count is re-read from the repository on every
    call. Callers must hold the license row lock so the count and the
    insert happen as one step.
    """

    @staticmethod
    def activate(
        license: License,
        device_id: str,
        device_name: str,
        os: str,
        app_version: str,
        repository: ActivationRepository,
        now: datetime,
        member_id: Optional[uuid.UUID] = None,
    ) -> ActivationResult:
        """
        Activate a license on a device.

        Re-activating a device that already holds an active activation
        refreshes it and returns the same instance id without using
        another slot.

        Args:
            license: Locked license entity
            device_id: Stable device identifier
            device_name: Human-readable device name
            os: Operating system
            app_version: Application version
            repository: Activation repository
            now: Current time
            member_id: Activating team member, for team licenses

        Returns:
            ActivationResult with device usage after the call

        Raises:
            ActivationLimitExceededError: If all device slots are taken
        """
        existing = repository.find_active_by_license_and_device(license.id, device_id)
        if existing is not None:
            activation = repository.save(
                existing.refresh(
                    now,
                    device_name=device_name,
                    app_version=app_version,
                    member_id=member_id,
                )
            )
            return ActivationResult(
                activation=activation,
                devices_used=repository.count_active_by_license(license.id),
                devices_allowed=license.max_activations,
                created=False,
            )

        active_count = repository.count_active_by_license(license.id)
        if active_count >= license.max_activations:
            raise ActivationLimitExceededError(limit=license.max_activations)

        activation = repository.save(
            Activation.create(
                license_id=license.id,
                device_id=device_id,
                device_name=device_name,
                os=os,
                app_version=app_version,
                now=now,
                member_id=member_id,
            )
        )
        return ActivationResult(
            activation=activation,
            devices_used=active_count + 1,
            devices_allowed=license.max_activations,
            created=True,
        )

    @staticmethod
    def deactivate(
        activation: Activation,
        repository: ActivationRepository,
        now: datetime,
    ) -> Activation:
        """
        Release a device slot.

        Args:
            activation: Activation entity to deactivate
            repository: Activation repository
            now: Current time

        Returns:
            Deactivated activation entity
        """
        if not activation.is_active:
            return activation
        return repository.save(activation.deactivate(now))
