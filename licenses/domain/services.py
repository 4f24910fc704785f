"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging

from core.domain.exceptions import InvalidSeatCountError, LicenseNotActiveError
from core.domain.value_objects import Plan
from licenses.domain import plans
from licenses.domain.license import License
from licenses.domain.license_key import generate_license_key
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

MAX_KEY_ATTEMPTS = 5


class LicenseKeyGenerator:
    """Domain service for license key generation."""

    @staticmethod
    def generate(plan: Plan) -> str:
        """
        Generate a license key for a plan.

        Args:
            plan: License plan

        Returns:
            Generated license key string
        """
        return generate_license_key(plans.prefix_for(plan))

    @staticmethod
    def generate_unique(plan: Plan, repository: LicenseRepository) -> str:
        """
        Generate a key that is not yet stored.

        Args:
            plan: License plan
            repository: License repository

        Returns:
            Unused license key

        Raises:
            RuntimeError: If every attempt collided
        """
        for attempt in range(1, MAX_KEY_ATTEMPTS + 1):
            key = LicenseKeyGenerator.generate(plan)
            if not repository.key_exists(key):
                return key
            logger.warning("License key collision", extra={"attempt": attempt, "plan": str(plan)})
        raise RuntimeError(
            f"Could not generate a unique license key after {MAX_KEY_ATTEMPTS} attempts"
        )


class LicenseValidator:
    """Domain service for license validation."""

    @staticmethod
    def ensure_active(license: License) -> None:
        """
        Check that a license may be used.

        Args:
            license: License entity to validate

        Raises:
            LicenseNotActiveError: If the license is revoked or expired
        """
        if not license.is_active:
            raise LicenseNotActiveError(status=license.status.value)


class LicenseLifecycleManager:
    """Domain service for managing license lifecycle."""

    @staticmethod
    def revoke_license(license: License, repository: LicenseRepository) -> License:
        """
        Revoke a license.

        Args:
            license: License entity to revoke
            repository: License repository

        Returns:
            Revoked license entity
        """
        return repository.save(license.revoke())

    @staticmethod
    def expire_license(license: License, repository: LicenseRepository) -> License:
        """
        Mark a license as expired.

        Args:
            license: License entity to expire
            repository: License repository

        Returns:
            Expired license entity
        """
        return repository.save(license.mark_expired())

    @staticmethod
    def change_seat_count(
        license: License,
        requested: int,
        active_members: int,
        repository: LicenseRepository,
    ) -> License:
        """
        Change the seat count of a team license.

        Args:
            license: Locked license entity
            requested: New seat count
            active_members: Active members currently occupying seats
            repository: License repository

        Returns:
            Updated license entity

        Raises:
            InvalidSeatCountError: If the count is outside the plan bounds
                or below the number of active members
        """
        seats = plans.validate_seat_count(license.plan, requested)
        if seats is None:
            raise InvalidSeatCountError()
        if seats < active_members:
            policy = plans.policy_for(license.plan)
            raise InvalidSeatCountError(
                min_seats=max(policy.min_seats, active_members),
                max_seats=policy.max_seats,
                message=f"Cannot reduce seats below the {active_members} active members",
            )
        return repository.save(license.change_seat_count(seats))
