"""
ChangeSeatCountCommand.

Command to resize a team license.
"""
from dataclasses import dataclass


@dataclass
class ChangeSeatCountCommand:
    """Command to change the seat count of a team license."""

    license_key: str
    seat_count: int
