"""
DeactivateDeviceHandler.

Handler for releasing a device slot.
"""

from typing import Callable

from django.utils import timezone

from activations.application.commands.deactivate_device import DeactivateDeviceCommand
from activations.application.dto.activation_dto import DeactivationDTO
from activations.domain.events import DeviceDeactivated
from activations.domain.services import ActivationLedger
from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import ActivationNotFoundError, KeyNotFoundError
from core.infrastructure.database import store_transaction
from core.infrastructure.events import event_bus
from licenses.domain.license_key import normalize_license_key
from licenses.ports.license_repository import LicenseRepository


class DeactivateDeviceHandler:
    """Handler for DeactivateDeviceCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        activation_repository: ActivationRepository,
        clock: Callable = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.activation_repository = activation_repository
        self.clock = clock

    def handle(self, command: DeactivateDeviceCommand) -> DeactivationDTO:
        """
        Handle deactivate device command.

        Deactivating an already inactive activation is a no-op.

        Args:
            command: DeactivateDeviceCommand

        Returns:
            DeactivationDTO with device usage after the call

        Raises:
            KeyNotFoundError: If no license has this key
            ActivationNotFoundError: If the instance id is unknown for this license
        """
        key = normalize_license_key(command.license_key)

        with store_transaction():
            license = self.license_repository.find_by_key_for_update(key)
            if license is None:
                raise KeyNotFoundError()

            activation = self.activation_repository.find_by_instance_id(command.instance_id)
            if activation is None or activation.license_id != license.id:
                raise ActivationNotFoundError()

            was_active = activation.is_active
            activation = ActivationLedger.deactivate(
                activation, self.activation_repository, self.clock()
            )
            devices_used = self.activation_repository.count_active_by_license(license.id)

        if was_active:
            event_bus.publish(
                DeviceDeactivated(
                    activation_id=activation.id,
                    license_id=license.id,
                    device_id=activation.device_id,
                )
            )

        return DeactivationDTO(
            instance_id=activation.instance_id,
            devices_used=devices_used,
            devices_allowed=license.max_activations,
        )
