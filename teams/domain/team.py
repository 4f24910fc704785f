"""
Team and TeamMember domain entities.

A team belongs to one seat-based license. Members occupy a seat
only while their status is ACTIVE.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from core.domain.exceptions import CannotRemoveOwnerError
from core.domain.value_objects import MemberRole, MemberStatus


@dataclass(frozen=True)
class Team:
    """Team domain entity."""

    id: uuid.UUID
    name: str
    owner_id: uuid.UUID
    created_at: datetime

    def __post_init__(self):
        """Validate team entity."""
        if not self.name:
            raise ValueError("Team name is required")
        if not self.owner_id:
            raise ValueError("Owner ID is required")

    @classmethod
    def create(
        cls,
        name: str,
        owner_id: uuid.UUID,
        created_at: datetime,
        team_id: Optional[uuid.UUID] = None,
    ) -> "Team":
        """
        Create a new Team entity.

        Args:
            name: Team display name
            owner_id: Owning customer UUID
            created_at: Creation timestamp
            team_id: Optional UUID (generated if not provided)

        Returns:
            Team entity instance
        """
        return cls(
            id=team_id or uuid.uuid4(),
            name=name,
            owner_id=owner_id,
            created_at=created_at,
        )


@dataclass(frozen=True)
class TeamMember:
    """
    TeamMember domain entity.

    There is at most one row per (team, customer). Leaving and
    rejoining flips the status of that row instead of adding another.
    """

    id: uuid.UUID
    team_id: uuid.UUID
    customer_id: uuid.UUID
    role: MemberRole
    status: MemberStatus
    invited_by_id: Optional[uuid.UUID]
    invited_at: datetime
    joined_at: Optional[datetime]

    @classmethod
    def create_active(
        cls,
        team_id: uuid.UUID,
        customer_id: uuid.UUID,
        role: MemberRole,
        now: datetime,
        invited_by_id: Optional[uuid.UUID] = None,
        member_id: Optional[uuid.UUID] = None,
    ) -> "TeamMember":
        """
        Create a member that holds a seat immediately.

        Args:
            team_id: Team UUID
            customer_id: Customer UUID
            role: Member role
            now: Invitation and join timestamp
            invited_by_id: Inviting customer UUID, if known
            member_id: Optional UUID (generated if not provided)

        Returns:
            TeamMember entity instance
        """
        return cls(
            id=member_id or uuid.uuid4(),
            team_id=team_id,
            customer_id=customer_id,
            role=role,
            status=MemberStatus.ACTIVE,
            invited_by_id=invited_by_id,
            invited_at=now,
            joined_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    @property
    def is_owner(self) -> bool:
        return self.role == MemberRole.OWNER

    def reactivate(
        self,
        now: datetime,
        role: Optional[MemberRole] = None,
        invited_by_id: Optional[uuid.UUID] = None,
    ) -> "TeamMember":
        """
        Bring a removed or pending member back to ACTIVE.

        Args:
            now: Join timestamp
            role: New role, or None to keep the current one
            invited_by_id: Inviting customer UUID, or None to keep the current one

        Returns:
            New TeamMember instance with active status
        """
        return replace(
            self,
            status=MemberStatus.ACTIVE,
            role=role or self.role,
            invited_by_id=invited_by_id or self.invited_by_id,
            joined_at=now,
        )

    def remove(self) -> "TeamMember":
        """
        Create a new TeamMember instance with removed status.

        Returns:
            New TeamMember instance with removed status
        """
        if self.is_owner:
            raise CannotRemoveOwnerError()
        return replace(self, status=MemberStatus.REMOVED)
