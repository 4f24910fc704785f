"""
ProvisionLicenseHandler.

Handles the provision license command.
"""

from typing import Callable

from django.utils import timezone

from core.domain.value_objects import Email, MemberRole, Plan
from core.infrastructure.database import store_transaction
from core.infrastructure.events import event_bus
from customers.ports.customer_repository import CustomerRepository
from licenses.application.commands.provision_license import ProvisionLicenseCommand
from licenses.application.dto.license_dto import LicenseDTO, ProvisionLicenseResponseDTO
from licenses.domain import plans
from licenses.domain.events import LicenseProvisioned
from licenses.domain.license import License, TeamSeating
from licenses.domain.services import LicenseKeyGenerator
from licenses.ports.license_repository import LicenseRepository
from teams.domain.team import Team, TeamMember
from teams.ports.team_repository import TeamMemberRepository, TeamRepository


class ProvisionLicenseHandler:
    """Handler for ProvisionLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        customer_repository: CustomerRepository,
        team_repository: TeamRepository,
        team_member_repository: TeamMemberRepository,
        clock: Callable = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.customer_repository = customer_repository
        self.team_repository = team_repository
        self.team_member_repository = team_member_repository
        self.clock = clock

    def handle(self, command: ProvisionLicenseCommand) -> ProvisionLicenseResponseDTO:
        """
        Handle provision license command.

        Args:
            command: ProvisionLicenseCommand

        Returns:
            ProvisionLicenseResponseDTO with the issued license

        Raises:
            InvalidEmailFormatError: If the purchaser email is malformed
            InvalidSeatCountError: If the seat count is outside the plan bounds
            ValueError: If the plan is unknown
        """
        email = Email(command.customer_email)
        plan = Plan(command.plan.strip().lower())
        seat_count = plans.validate_seat_count(plan, command.seat_count)
        purchased_at = command.purchased_at or self.clock()

        team = None
        with store_transaction():
            customer = self.customer_repository.get_or_create(email, name=command.customer_name)

            seating = None
            if plans.is_seat_based(plan):
                team = self.team_repository.save(
                    Team.create(
                        name=command.team_name or f"{email}'s Team",
                        owner_id=customer.id,
                        created_at=purchased_at,
                    )
                )
                # The owner occupies one of the seats
                self.team_member_repository.save(
                    TeamMember.create_active(
                        team_id=team.id,
                        customer_id=customer.id,
                        role=MemberRole.OWNER,
                        now=purchased_at,
                    )
                )
                seating = TeamSeating(team_id=team.id, seat_count=seat_count)

            key = LicenseKeyGenerator.generate_unique(plan, self.license_repository)
            license = self.license_repository.save(
                License.create(
                    customer_id=customer.id,
                    key=key,
                    plan=plan,
                    purchased_at=purchased_at,
                    seating=seating,
                )
            )

        event_bus.publish(
            LicenseProvisioned(
                license_id=license.id,
                license_key=license.key,
                plan=plan.value,
                customer_email=customer.email,
                seat_count=license.seat_count,
            )
        )

        return ProvisionLicenseResponseDTO(
            license=LicenseDTO.from_entity(license),
            customer_id=customer.id,
            customer_email=customer.email,
            team_name=team.name if team else None,
        )
