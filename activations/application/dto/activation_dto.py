"""
Activation DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class TeamInfoDTO:
    """Team context of a team activation."""

    team_id: uuid.UUID
    team_name: str
    seat_count: int
    seats_used: int
    role: str


@dataclass
class ResolvedActivationDTO:
    """
    DTO for a successful activation.

    Carries everything a client needs to render license state, so no
    second lookup is needed.
    """

    instance_id: str
    license_key: str
    device_name: str
    plan: str
    devices_used: int
    devices_allowed: int
    updates_available: bool
    updates_until: datetime
    team: Optional[TeamInfoDTO] = None


@dataclass
class DeactivationDTO:
    """DTO for deactivate device response."""

    instance_id: str
    devices_used: int
    devices_allowed: int
