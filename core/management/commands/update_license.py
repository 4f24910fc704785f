"""
Django management command to change an existing license.

Supports revoking, expiring and resizing a license by key.
"""

from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.application.commands.change_seat_count import ChangeSeatCountCommand
from licenses.application.commands.expire_license import ExpireLicenseCommand
from licenses.application.commands.revoke_license import RevokeLicenseCommand
from licenses.application.handlers.license_lifecycle_handlers import (
    ChangeSeatCountHandler,
    ExpireLicenseHandler,
    RevokeLicenseHandler,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from teams.infrastructure.repositories.django_team_member_repository import (
    DjangoTeamMemberRepository,
)


class Command(BaseCommand):
    """Command to revoke, expire or resize a license."""

    help = "Revoke, expire or change the seat count of a license"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("license_key", type=str, help="License key")
        action = parser.add_mutually_exclusive_group(required=True)
        action.add_argument("--revoke", action="store_true", help="Revoke the license")
        action.add_argument("--expire", action="store_true", help="Mark the license expired")
        action.add_argument("--seats", type=int, default=None, help="New seat count")
        parser.add_argument("--reason", type=str, default=None, help="Revocation reason")

    def handle(self, *args, **options):
        """Execute the command."""
        license_repository = DjangoLicenseRepository()
        key = options["license_key"]

        try:
            if options["revoke"]:
                result = RevokeLicenseHandler(license_repository).handle(
                    RevokeLicenseCommand(license_key=key, reason=options["reason"])
                )
            elif options["expire"]:
                result = ExpireLicenseHandler(license_repository).handle(
                    ExpireLicenseCommand(license_key=key)
                )
            else:
                handler = ChangeSeatCountHandler(
                    license_repository=license_repository,
                    team_member_repository=DjangoTeamMemberRepository(),
                )
                result = handler.handle(
                    ChangeSeatCountCommand(license_key=key, seat_count=options["seats"])
                )
        except DomainException as e:
            raise CommandError(f"{e.code}: {e.message}")

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"License {result.key} updated"))
        self.stdout.write(f"  Status: {result.status}")
        self.stdout.write(f"  Max activations: {result.max_activations}")
        if result.seat_count is not None:
            self.stdout.write(f"  Seats: {result.seat_count}")
