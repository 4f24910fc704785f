"""
Team domain events.

Domain events represent something that happened to a team roster.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from core.domain.events import DomainEvent


class TeamMemberInvited(DomainEvent):
    """Event raised when a customer joins or rejoins a team."""

    def __init__(
        self,
        team_id: uuid.UUID,
        member_id: uuid.UUID,
        team_name: str,
        license_key: str,
        member_email: str,
        reactivated: bool = False,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize TeamMemberInvited event.

        Args:
            team_id: Team UUID
            member_id: TeamMember UUID
            team_name: Team display name
            license_key: Key of the team license
            member_email: Invited customer email
            reactivated: True if an earlier membership was restored
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(team_id),
            event_type="TeamMemberInvited",
        )
        self.team_id = team_id
        self.member_id = member_id
        self.team_name = team_name
        self.license_key = license_key
        self.member_email = member_email
        self.reactivated = reactivated


class TeamMemberRemoved(DomainEvent):
    """Event raised when a member is removed from a team."""

    def __init__(
        self,
        team_id: uuid.UUID,
        member_id: uuid.UUID,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(team_id),
            event_type="TeamMemberRemoved",
        )
        self.team_id = team_id
        self.member_id = member_id
