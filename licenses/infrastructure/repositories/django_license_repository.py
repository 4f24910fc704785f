"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import Optional

from core.domain.value_objects import LicenseStatus, Plan
from licenses.domain.license import License, TeamSeating
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        A seat-based row whose team is missing maps to ``seating=None``;
        callers that need the team reject such a license.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        seating = None
        if model.team_id is not None and model.seat_count is not None:
            seating = TeamSeating(team_id=model.team_id, seat_count=model.seat_count)

        return License(
            id=model.id,
            customer_id=model.customer_id,
            key=model.key,
            plan=Plan(model.plan),
            status=LicenseStatus(model.status),
            max_activations=model.max_activations,
            seating=seating,
            purchased_at=model.purchased_at,
            updates_until=model.updates_until,
            created_at=model.created_at,
        )

    def _to_model(self, license: License) -> LicenseModel:
        """
        Convert domain entity to Django model.

        Args:
            license: License domain entity

        Returns:
            Django License model
        """
        model, created = LicenseModel.objects.get_or_create(
            id=license.id,
            defaults={
                "customer_id": license.customer_id,
                "key": license.key,
                "plan": license.plan.value,
                "status": license.status.value,
                "max_activations": license.max_activations,
                "team_id": license.team_id,
                "seat_count": license.seat_count,
                "purchased_at": license.purchased_at,
                "updates_until": license.updates_until,
                "created_at": license.created_at,
            },
        )
        # Key, plan and purchaser never change after issuance
        if not created:
            model.status = license.status.value
            model.max_activations = license.max_activations
            model.team_id = license.team_id
            model.seat_count = license.seat_count
            model.updates_until = license.updates_until
        return model

    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        model = self._to_model(license)
        model.save()
        return self._to_domain(model)

    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.get(id=license_id)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by its key.

        Args:
            key: Normalized license key

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.get(key=key)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    def find_by_key_for_update(self, key: str) -> Optional[License]:
        """
        Find a license by its key and lock the row.

        Args:
            key: Normalized license key

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.select_for_update().get(key=key)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    def key_exists(self, key: str) -> bool:
        """
        Check if a key is already taken.

        Args:
            key: License key

        Returns:
            True if a license with this key exists
        """
        return LicenseModel.objects.filter(key=key).exists()
