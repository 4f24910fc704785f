"""
RevokeLicenseCommand.

Command to revoke a license.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class RevokeLicenseCommand:
    """Command to revoke a license."""

    license_key: str
    reason: Optional[str] = None
