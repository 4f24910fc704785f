"""
Django management command to issue a license from the command line.

Used by support staff and for local development. Seat-based plans also
get a team owned by the purchaser.
"""

from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from customers.infrastructure.repositories.django_customer_repository import (
    DjangoCustomerRepository,
)
from licenses.application.commands.provision_license import ProvisionLicenseCommand
from licenses.application.handlers.provision_license_handler import ProvisionLicenseHandler
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from teams.infrastructure.repositories.django_team_member_repository import (
    DjangoTeamMemberRepository,
)
from teams.infrastructure.repositories.django_team_repository import DjangoTeamRepository


class Command(BaseCommand):
    """Command to provision a license."""

    help = "Issue a new license key (pro, team or enterprise)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("email", type=str, help="Purchaser email")
        parser.add_argument(
            "--plan",
            type=str,
            default="pro",
            choices=["pro", "team", "enterprise"],
            help="License plan (default: pro)",
        )
        parser.add_argument(
            "--seats",
            type=int,
            default=None,
            help="Seat count for team and enterprise plans",
        )
        parser.add_argument("--name", type=str, default=None, help="Purchaser name")
        parser.add_argument(
            "--team-name",
            type=str,
            default=None,
            help="Team name (default: derived from the purchaser email)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        handler = ProvisionLicenseHandler(
            license_repository=DjangoLicenseRepository(),
            customer_repository=DjangoCustomerRepository(),
            team_repository=DjangoTeamRepository(),
            team_member_repository=DjangoTeamMemberRepository(),
        )
        command = ProvisionLicenseCommand(
            customer_email=options["email"],
            plan=options["plan"],
            customer_name=options["name"],
            seat_count=options["seats"],
            team_name=options["team_name"],
        )

        try:
            result = handler.handle(command)
        except DomainException as e:
            raise CommandError(f"{e.code}: {e.message}")

        license = result.license
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"License key: {license.key}"))
        self.stdout.write(f"  Plan: {license.plan}")
        self.stdout.write(f"  Customer: {result.customer_email}")
        self.stdout.write(f"  Max activations: {license.max_activations}")
        if license.seat_count is not None:
            self.stdout.write(f"  Team: {result.team_name} ({license.seat_count} seats)")
        self.stdout.write(f"  Updates until: {license.updates_until:%Y-%m-%d}")
