"""
Django implementation of ActivationRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Dict, List, Optional

from django.db.models import Count

from activations.domain.activation import Activation
from activations.infrastructure.models import Activation as ActivationModel
from activations.ports.activation_repository import ActivationRepository


class DjangoActivationRepository(ActivationRepository):
    """
    Django ORM implementation of ActivationRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ActivationModel) -> Activation:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Activation model

        Returns:
            Activation domain entity
        """
        return Activation(
            id=model.id,
            license_id=model.license_id,
            device_id=model.device_id,
            device_name=model.device_name,
            os=model.os,
            app_version=model.app_version,
            instance_id=model.instance_id,
            member_id=model.member_id,
            activated_at=model.activated_at,
            last_validated_at=model.last_validated_at,
            deactivated_at=model.deactivated_at,
            is_active=model.is_active,
        )

    def _to_model(self, activation: Activation) -> ActivationModel:
        """
        Convert domain entity to Django model.

        Args:
            activation: Activation domain entity

        Returns:
            Django Activation model
        """
        # pylint: disable=no-member
        model, created = ActivationModel.objects.get_or_create(
            id=activation.id,
            defaults={
                "license_id": activation.license_id,
                "device_id": activation.device_id,
                "device_name": activation.device_name,
                "os": activation.os,
                "app_version": activation.app_version,
                "instance_id": activation.instance_id,
                "member_id": activation.member_id,
                "activated_at": activation.activated_at,
                "last_validated_at": activation.last_validated_at,
                "deactivated_at": activation.deactivated_at,
                "is_active": activation.is_active,
            },
        )
        if not created:
            model.device_name = activation.device_name
            model.app_version = activation.app_version
            model.member_id = activation.member_id
            model.last_validated_at = activation.last_validated_at
            model.deactivated_at = activation.deactivated_at
            model.is_active = activation.is_active
        return model

    def save(self, activation: Activation) -> Activation:
        """
        Save an activation entity.

        Args:
            activation: Activation entity to save

        Returns:
            Saved activation entity
        """
        model = self._to_model(activation)
        model.save()
        return self._to_domain(model)

    def find_by_instance_id(self, instance_id: str) -> Optional[Activation]:
        """
        Find an activation by instance id.

        Args:
            instance_id: Instance id

        Returns:
            Activation entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = ActivationModel.objects.get(instance_id=instance_id)
            return self._to_domain(model)
        except ActivationModel.DoesNotExist:  # pylint: disable=no-member
            return None

    def find_active_by_license_and_device(
        self, license_id: uuid.UUID, device_id: str
    ) -> Optional[Activation]:
        """
        Find the active activation of a device on a license.

        Args:
            license_id: License UUID
            device_id: Device identifier

        Returns:
            Activation entity or None if not found
        """
        # pylint: disable=no-member
        model = ActivationModel.objects.filter(
            license_id=license_id, device_id=device_id, is_active=True
        ).first()
        return self._to_domain(model) if model else None

    def count_active_by_license(self, license_id: uuid.UUID) -> int:
        # pylint: disable=no-member
        return ActivationModel.objects.filter(license_id=license_id, is_active=True).count()

    def count_active_by_members(self, member_ids: List[uuid.UUID]) -> Dict[uuid.UUID, int]:
        # pylint: disable=no-member
        rows = (
            ActivationModel.objects.filter(member_id__in=member_ids, is_active=True)
            .values("member_id")
            .annotate(devices=Count("id"))
        )
        return {row["member_id"]: row["devices"] for row in rows}
