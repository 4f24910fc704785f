"""
ActivateLicenseHandler.

Resolves a license key for activation and delegates to the ledger.
"""

import logging
from typing import Callable, Optional, Tuple
import uuid

from django.utils import timezone

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.dto.activation_dto import ResolvedActivationDTO, TeamInfoDTO
from activations.domain.events import LicenseActivated
from activations.domain.services import ActivationLedger
from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import (
    InvalidTeamLicenseError,
    KeyNotFoundError,
    NotATeamMemberError,
)
from core.domain.value_objects import Email
from core.infrastructure.database import store_transaction
from core.infrastructure.events import event_bus
from customers.ports.customer_repository import CustomerRepository
from licenses.domain.license import License
from licenses.domain.license_key import normalize_license_key
from licenses.domain.services import LicenseValidator
from licenses.ports.license_repository import LicenseRepository
from teams.domain.services import TeamMembershipManager, require_team_seating
from teams.ports.team_repository import TeamMemberRepository, TeamRepository

logger = logging.getLogger(__name__)


class ActivateLicenseHandler:
    """Handler for ActivateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        activation_repository: ActivationRepository,
        customer_repository: CustomerRepository,
        team_repository: TeamRepository,
        team_member_repository: TeamMemberRepository,
        clock: Callable = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.activation_repository = activation_repository
        self.customer_repository = customer_repository
        self.team_repository = team_repository
        self.team_member_repository = team_member_repository
        self.clock = clock

    def handle(self, command: ActivateLicenseCommand) -> ResolvedActivationDTO:
        """
        Handle activate license command.

        The license row stays locked from lookup until the activation
        is written, so concurrent activations of one license see each
        other's writes.

        Args:
            command: ActivateLicenseCommand

        Returns:
            ResolvedActivationDTO with activation and team details

        Raises:
            KeyNotFoundError: If no license has this key
            LicenseNotActiveError: If the license is revoked or expired
            InvalidTeamLicenseError: If a team license has no team
            InvalidEmailFormatError: If the caller email is malformed
            NotATeamMemberError: If the caller is not an active member
            ActivationLimitExceededError: If all device slots are taken
        """
        key = normalize_license_key(command.license_key)

        with store_transaction():
            license = self.license_repository.find_by_key_for_update(key)
            if license is None:
                raise KeyNotFoundError()
            LicenseValidator.ensure_active(license)

            now = self.clock()
            team_info = None
            member_id = None
            if license.is_seat_based:
                team_info, member_id = self._resolve_team_member(license, command.email)

            result = ActivationLedger.activate(
                license=license,
                device_id=command.device_id,
                device_name=command.device_name,
                os=command.os,
                app_version=command.app_version,
                repository=self.activation_repository,
                now=now,
                member_id=member_id,
            )

        activation = result.activation
        if result.created:
            event_bus.publish(
                LicenseActivated(
                    activation_id=activation.id,
                    license_id=license.id,
                    device_id=activation.device_id,
                    instance_id=activation.instance_id,
                )
            )
        else:
            logger.info(
                "Device re-activated",
                extra={"license_id": str(license.id), "instance_id": activation.instance_id},
            )

        return ResolvedActivationDTO(
            instance_id=activation.instance_id,
            license_key=license.key,
            device_name=activation.device_name,
            plan=license.plan.value,
            devices_used=result.devices_used,
            devices_allowed=result.devices_allowed,
            updates_available=license.updates_available(now),
            updates_until=license.updates_until,
            team=team_info,
        )

    def _resolve_team_member(
        self, license: License, email: Optional[str]
    ) -> Tuple[TeamInfoDTO, uuid.UUID]:
        """
        Check that the caller holds an active seat on the license's team.

        Args:
            license: Seat-based license
            email: Caller email

        Returns:
            Tuple of (team info, member UUID)
        """
        seating = require_team_seating(license)
        team = self.team_repository.find_by_id(seating.team_id)
        if team is None:
            raise InvalidTeamLicenseError()

        if not email:
            raise NotATeamMemberError()
        customer = self.customer_repository.get_or_create(Email(email))

        member = self.team_member_repository.find_by_team_and_customer(team.id, customer.id)
        if member is None or not member.is_active:
            raise NotATeamMemberError()

        team_info = TeamInfoDTO(
            team_id=team.id,
            team_name=team.name,
            seat_count=seating.seat_count,
            seats_used=TeamMembershipManager.seats_used(team.id, self.team_member_repository),
            role=member.role.value,
        )
        return team_info, member.id
