"""
ActivateLicenseCommand.

Command to activate a license on a device.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ActivateLicenseCommand:
    """Command to activate a license on a device."""

    license_key: str
    device_id: str
    device_name: str = ""
    os: str = ""
    app_version: str = ""
    email: Optional[str] = None
