"""
Team membership handlers.

Handlers for inviting, removing and listing team members. Invite and
remove lock the license row, then the team row, for the whole
check-then-act sequence.
"""
import uuid
from typing import Callable, Optional, Tuple

from django.utils import timezone

from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import (
    InvalidEmailFormatError,
    InvalidMemberRoleError,
    InvalidTeamLicenseError,
    KeyNotFoundError,
)
from core.domain.value_objects import Email, MemberRole
from core.infrastructure.database import store_transaction
from core.infrastructure.events import event_bus
from customers.ports.customer_repository import CustomerRepository
from licenses.domain.license import License, TeamSeating
from licenses.domain.license_key import normalize_license_key
from licenses.ports.license_repository import LicenseRepository
from teams.application.commands.invite_member import InviteMemberCommand
from teams.application.commands.remove_member import RemoveMemberCommand
from teams.application.dto.team_dto import (
    InviteResultDTO,
    RemoveResultDTO,
    TeamMemberDTO,
    TeamRosterDTO,
)
from teams.application.queries.list_team_members import ListTeamMembersQuery
from teams.domain.events import TeamMemberInvited, TeamMemberRemoved
from teams.domain.services import (
    InviteOutcome,
    TeamMembershipManager,
    require_team_seating,
)
from teams.domain.team import Team
from teams.ports.team_repository import TeamMemberRepository, TeamRepository


def _parse_role(raw_role: Optional[str]) -> Optional[MemberRole]:
    if not raw_role:
        return None
    try:
        return MemberRole(raw_role.strip().lower())
    except ValueError:
        raise InvalidMemberRoleError()


class _TeamLicenseMixin:
    """
    Shared lookup of a license and its team.

    With lock=True the license row is locked before the team row, the
    same order used by activation and seat changes.
    """

    license_repository: LicenseRepository
    team_repository: TeamRepository

    def _load_team(self, raw_key: str, lock: bool) -> Tuple[License, TeamSeating, Team]:
        key = normalize_license_key(raw_key)
        if lock:
            license = self.license_repository.find_by_key_for_update(key)
        else:
            license = self.license_repository.find_by_key(key)
        if license is None:
            raise KeyNotFoundError()
        seating = require_team_seating(license)
        if lock:
            team = self.team_repository.find_by_id_for_update(seating.team_id)
        else:
            team = self.team_repository.find_by_id(seating.team_id)
        if team is None:
            raise InvalidTeamLicenseError()
        return license, seating, team


class InviteTeamMemberHandler(_TeamLicenseMixin):
    """Handler for InviteMemberCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        team_repository: TeamRepository,
        team_member_repository: TeamMemberRepository,
        customer_repository: CustomerRepository,
        clock: Callable = timezone.now,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.team_repository = team_repository
        self.team_member_repository = team_member_repository
        self.customer_repository = customer_repository
        self.clock = clock

    def _resolve_inviter(self, raw_email: Optional[str]) -> Optional[uuid.UUID]:
        """Unknown or unparseable inviters are recorded as None."""
        if not raw_email:
            return None
        try:
            email = Email(raw_email)
        except InvalidEmailFormatError:
            return None
        inviter = self.customer_repository.find_by_email(email)
        return inviter.id if inviter else None

    def handle(self, command: InviteMemberCommand) -> InviteResultDTO:
        """
        Handle invite member command.

        Args:
            command: InviteMemberCommand

        Returns:
            InviteResultDTO with the member and new seat usage

        Raises:
            InvalidEmailFormatError: If the member email is malformed
            InvalidMemberRoleError: If the role is unknown or owner
            KeyNotFoundError: If no license has this key
            NotATeamLicenseError: If the license plan has no seats
            InvalidTeamLicenseError: If the team is missing
            SeatLimitExceededError: If every seat is taken
            AlreadyMemberError: If the customer is already active
        """
        email = Email(command.member_email)
        role = _parse_role(command.role)

        with store_transaction():
            license, seating, team = self._load_team(command.license_key, lock=True)
            customer = self.customer_repository.get_or_create(email)

            invited_by_id = self._resolve_inviter(command.inviter_email)

            result = TeamMembershipManager.invite(
                team=team,
                seat_count=seating.seat_count,
                customer_id=customer.id,
                repository=self.team_member_repository,
                now=self.clock(),
                role=role,
                invited_by_id=invited_by_id,
            )

        event_bus.publish(
            TeamMemberInvited(
                team_id=team.id,
                member_id=result.member.id,
                team_name=team.name,
                license_key=license.key,
                member_email=customer.email,
                reactivated=result.outcome == InviteOutcome.REACTIVATED,
            )
        )

        return InviteResultDTO(
            member_id=result.member.id,
            email=customer.email,
            role=result.member.role.value,
            outcome=result.outcome.value,
            team_name=team.name,
            seats_used=result.seats_used,
            seat_count=result.seat_count,
        )


class RemoveTeamMemberHandler(_TeamLicenseMixin):
    """Handler for RemoveMemberCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        team_repository: TeamRepository,
        team_member_repository: TeamMemberRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.team_repository = team_repository
        self.team_member_repository = team_member_repository

    def handle(self, command: RemoveMemberCommand) -> RemoveResultDTO:
        """
        Handle remove member command.

        Args:
            command: RemoveMemberCommand

        Returns:
            RemoveResultDTO with seat usage after removal

        Raises:
            KeyNotFoundError: If no license has this key
            NotATeamLicenseError: If the license plan has no seats
            MemberNotFoundError: If the member is not in this team
            CannotRemoveOwnerError: If the member is the owner
        """
        with store_transaction():
            _, seating, team = self._load_team(command.license_key, lock=True)
            member = TeamMembershipManager.remove(
                team, command.member_id, self.team_member_repository
            )
            seats_used = TeamMembershipManager.seats_used(team.id, self.team_member_repository)

        event_bus.publish(TeamMemberRemoved(team_id=team.id, member_id=member.id))

        return RemoveResultDTO(
            member_id=member.id,
            seats_used=seats_used,
            seat_count=seating.seat_count,
        )


class ListTeamMembersHandler(_TeamLicenseMixin):
    """Handler for ListTeamMembersQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        team_repository: TeamRepository,
        team_member_repository: TeamMemberRepository,
        customer_repository: CustomerRepository,
        activation_repository: ActivationRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.team_repository = team_repository
        self.team_member_repository = team_member_repository
        self.customer_repository = customer_repository
        self.activation_repository = activation_repository

    def handle(self, query: ListTeamMembersQuery) -> TeamRosterDTO:
        """
        Handle list team members query.

        Args:
            query: ListTeamMembersQuery

        Returns:
            TeamRosterDTO with every member, any status

        Raises:
            KeyNotFoundError: If no license has this key
            NotATeamLicenseError: If the license plan has no seats
            InvalidTeamLicenseError: If the team is missing
        """
        with store_transaction():
            _, seating, team = self._load_team(query.license_key, lock=False)
            members = self.team_member_repository.find_by_team(team.id)
            customers = self.customer_repository.find_by_ids([m.customer_id for m in members])
            devices = self.activation_repository.count_active_by_members([m.id for m in members])

        entries = []
        for member in members:
            customer = customers.get(member.customer_id)
            entries.append(
                TeamMemberDTO(
                    member_id=member.id,
                    customer_id=member.customer_id,
                    email=customer.email if customer else "",
                    name=customer.name if customer else None,
                    role=member.role.value,
                    status=member.status.value,
                    invited_at=member.invited_at,
                    joined_at=member.joined_at,
                    devices_used=devices.get(member.id, 0),
                )
            )

        return TeamRosterDTO(
            team_id=team.id,
            team_name=team.name,
            seat_count=seating.seat_count,
            seats_used=sum(1 for member in members if member.is_active),
            members=entries,
        )
