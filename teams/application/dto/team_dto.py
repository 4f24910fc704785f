"""
Team DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class InviteResultDTO:
    """DTO for invite member response."""

    member_id: uuid.UUID
    email: str
    role: str
    outcome: str
    team_name: str
    seats_used: int
    seat_count: int


@dataclass
class RemoveResultDTO:
    """DTO for remove member response."""

    member_id: uuid.UUID
    seats_used: int
    seat_count: int


@dataclass
class TeamMemberDTO:
    """DTO for one roster entry."""

    member_id: uuid.UUID
    customer_id: uuid.UUID
    email: str
    name: Optional[str]
    role: str
    status: str
    invited_at: datetime
    joined_at: Optional[datetime]
    devices_used: int = 0


@dataclass
class TeamRosterDTO:
    """DTO for the team roster with seat usage."""

    team_id: uuid.UUID
    team_name: str
    seat_count: int
    seats_used: int
    members: List[TeamMemberDTO] = field(default_factory=list)
