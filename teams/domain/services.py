"""
Team domain services.

Seat accounting counts only ACTIVE members and is always derived
from the store. Callers hold the team row lock while invite or
remove runs, so the count cannot change between check and write.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.domain.exceptions import (
    AlreadyMemberError,
    InvalidMemberRoleError,
    InvalidTeamLicenseError,
    MemberNotFoundError,
    NotATeamLicenseError,
    SeatLimitExceededError,
)
from core.domain.value_objects import MemberRole
from licenses.domain.license import License, TeamSeating
from teams.domain.team import Team, TeamMember
from teams.ports.team_repository import TeamMemberRepository


class InviteOutcome(Enum):
    """How an invitation was satisfied."""

    INVITED = "invited"
    REACTIVATED = "reactivated"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InviteResult:
    """Result of a successful invitation."""

    member: TeamMember
    outcome: InviteOutcome
    seats_used: int
    seat_count: int


def require_team_seating(license: License) -> TeamSeating:
    """
    Return the seating of a team license.

    Args:
        license: License entity

    Returns:
        Team seating of the license

    Raises:
        NotATeamLicenseError: If the plan has no seats
        InvalidTeamLicenseError: If a seat-based license has no team
    """
    if not license.is_seat_based:
        raise NotATeamLicenseError()
    if license.seating is None:
        raise InvalidTeamLicenseError()
    return license.seating


class TeamMembershipManager:
    """Domain service for team seats and membership."""

    @staticmethod
    def seats_used(team_id: uuid.UUID, repository: TeamMemberRepository) -> int:
        """
        Count members currently occupying a seat.

        Args:
            team_id: Team UUID
            repository: TeamMember repository

        Returns:
            Number of active members
        """
        return repository.count_active_by_team(team_id)

    @staticmethod
    def invite(
        team: Team,
        seat_count: int,
        customer_id: uuid.UUID,
        repository: TeamMemberRepository,
        now: datetime,
        role: Optional[MemberRole] = None,
        invited_by_id: Optional[uuid.UUID] = None,
    ) -> InviteResult:
        """
        Add a customer to a team, or bring a former member back.

        Args:
            team: Locked team entity
            seat_count: Seat count of the team license
            customer_id: Invited customer UUID
            repository: TeamMember repository
            now: Current time
            role: Requested role (admin or member); None keeps the
                existing role or defaults to member
            invited_by_id: Inviting customer UUID, if known

        Returns:
            InviteResult with the stored member and new seat usage

        Raises:
            InvalidMemberRoleError: If the owner role is requested
            SeatLimitExceededError: If every seat is taken
            AlreadyMemberError: If the customer is already active
        """
        if role == MemberRole.OWNER:
            raise InvalidMemberRoleError()

        seats_used = TeamMembershipManager.seats_used(team.id, repository)
        if seats_used >= seat_count:
            raise SeatLimitExceededError(seat_count=seat_count, seats_used=seats_used)

        existing = repository.find_by_team_and_customer(team.id, customer_id)
        if existing is not None and existing.is_active:
            raise AlreadyMemberError()

        if existing is not None:
            member = existing.reactivate(now, role=role, invited_by_id=invited_by_id)
            outcome = InviteOutcome.REACTIVATED
        else:
            member = TeamMember.create_active(
                team_id=team.id,
                customer_id=customer_id,
                role=role or MemberRole.MEMBER,
                now=now,
                invited_by_id=invited_by_id,
            )
            outcome = InviteOutcome.INVITED

        member = repository.save(member)
        return InviteResult(
            member=member,
            outcome=outcome,
            seats_used=seats_used + 1,
            seat_count=seat_count,
        )

    @staticmethod
    def remove(
        team: Team,
        member_id: uuid.UUID,
        repository: TeamMemberRepository,
    ) -> TeamMember:
        """
        Remove a member from a team, freeing their seat.

        Device activations of the member are left untouched.

        Args:
            team: Locked team entity
            member_id: TeamMember UUID
            repository: TeamMember repository

        Returns:
            Removed TeamMember entity

        Raises:
            MemberNotFoundError: If the member is not part of this team
            CannotRemoveOwnerError: If the member is the owner
        """
        member = repository.find_by_id(member_id)
        if member is None or member.team_id != team.id:
            raise MemberNotFoundError()
        return repository.save(member.remove())
