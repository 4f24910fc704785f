"""
ExpireLicenseCommand.

Command to mark a license as expired.
"""
from dataclasses import dataclass


@dataclass
class ExpireLicenseCommand:
    """Command to expire a license."""

    license_key: str
