"""
ProvisionLicenseCommand.

Command to issue a new license to a purchaser.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ProvisionLicenseCommand:
    """
    Command to provision a license.

    For seat-based plans this also creates the team and makes the
    purchaser its owner.
    """

    customer_email: str
    plan: str
    customer_name: Optional[str] = None
    seat_count: Optional[int] = None
    team_name: Optional[str] = None
    purchased_at: Optional[datetime] = None
