"""
License lifecycle handlers.

Handlers for revoke, expire and seat count change commands.
"""
import logging

from core.domain.exceptions import KeyNotFoundError
from core.infrastructure.database import store_transaction
from core.infrastructure.events import event_bus
from licenses.application.commands.change_seat_count import ChangeSeatCountCommand
from licenses.application.commands.expire_license import ExpireLicenseCommand
from licenses.application.commands.revoke_license import RevokeLicenseCommand
from licenses.application.dto.license_dto import LicenseDTO
from licenses.domain.events import LicenseExpired, LicenseRevoked, SeatCountChanged
from licenses.domain.license import License
from licenses.domain.license_key import normalize_license_key
from licenses.domain.services import LicenseLifecycleManager
from licenses.ports.license_repository import LicenseRepository
from teams.domain.services import TeamMembershipManager, require_team_seating
from teams.ports.team_repository import TeamMemberRepository

logger = logging.getLogger(__name__)


def _load_locked(repository: LicenseRepository, raw_key: str) -> License:
    license = repository.find_by_key_for_update(normalize_license_key(raw_key))
    if license is None:
        raise KeyNotFoundError()
    return license


class RevokeLicenseHandler:
    """Handler for RevokeLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    def handle(self, command: RevokeLicenseCommand) -> LicenseDTO:
        """
        Handle revoke license command.

        Args:
            command: RevokeLicenseCommand

        Returns:
            LicenseDTO of the revoked license

        Raises:
            KeyNotFoundError: If no license has this key
            InvalidLicenseStatusError: If the license is not active
        """
        with store_transaction():
            license = _load_locked(self.license_repository, command.license_key)
            revoked = LicenseLifecycleManager.revoke_license(license, self.license_repository)

        logger.info(
            "License revoked",
            extra={"license_id": str(revoked.id), "reason": command.reason},
        )
        event_bus.publish(LicenseRevoked(license_id=revoked.id))
        return LicenseDTO.from_entity(revoked)


class ExpireLicenseHandler:
    """Handler for ExpireLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repositories."""
        self.license_repository = license_repository

    def handle(self, command: ExpireLicenseCommand) -> LicenseDTO:
        """
        Handle expire license command.

        Args:
            command: ExpireLicenseCommand

        Returns:
            LicenseDTO of the expired license

        Raises:
            KeyNotFoundError: If no license has this key
            InvalidLicenseStatusError: If the license is not active
        """
        with store_transaction():
            license = _load_locked(self.license_repository, command.license_key)
            expired = LicenseLifecycleManager.expire_license(license, self.license_repository)

        event_bus.publish(LicenseExpired(license_id=expired.id))
        return LicenseDTO.from_entity(expired)


class ChangeSeatCountHandler:
    """Handler for ChangeSeatCountCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        team_member_repository: TeamMemberRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.team_member_repository = team_member_repository

    def handle(self, command: ChangeSeatCountCommand) -> LicenseDTO:
        """
        Handle change seat count command.

        Lowering the count never deactivates devices; activations above
        the new cap stay until they are released.

        Args:
            command: ChangeSeatCountCommand

        Returns:
            LicenseDTO with the new seat count and activation cap

        Raises:
            KeyNotFoundError: If no license has this key
            NotATeamLicenseError: If the license plan has no seats
            InvalidSeatCountError: If the count is out of bounds or below
                the number of active members
        """
        with store_transaction():
            license = _load_locked(self.license_repository, command.license_key)
            seating = require_team_seating(license)
            old_seat_count = seating.seat_count
            active_members = TeamMembershipManager.seats_used(
                seating.team_id, self.team_member_repository
            )
            updated = LicenseLifecycleManager.change_seat_count(
                license, command.seat_count, active_members, self.license_repository
            )

        event_bus.publish(
            SeatCountChanged(
                license_id=updated.id,
                old_seat_count=old_seat_count,
                new_seat_count=updated.seat_count,
            )
        )
        return LicenseDTO.from_entity(updated)
