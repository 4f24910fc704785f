"""
RemoveMemberCommand.

Command to remove a member from a team, freeing their seat.
"""
import uuid
from dataclasses import dataclass


@dataclass
class RemoveMemberCommand:
    """Command to remove a team member."""

    license_key: str
    member_id: uuid.UUID
