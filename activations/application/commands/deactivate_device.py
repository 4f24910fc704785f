"""
DeactivateDeviceCommand.

Command to release the device slot held by an activation.
"""
from dataclasses import dataclass


@dataclass
class DeactivateDeviceCommand:
    """Command to deactivate a device by its instance id."""

    license_key: str
    instance_id: str
