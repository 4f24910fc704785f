"""
InviteMemberCommand.

Command to add a customer to the team of a seat-based license.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class InviteMemberCommand:
    """Command to invite a member to a team."""

    license_key: str
    member_email: str
    role: Optional[str] = None
    inviter_email: Optional[str] = None
