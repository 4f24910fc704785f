"""
License DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from licenses.domain.license import License


@dataclass
class LicenseDTO:
    """DTO for license information."""

    id: uuid.UUID
    key: str
    plan: str
    status: str
    max_activations: int
    seat_count: Optional[int]
    team_id: Optional[uuid.UUID]
    purchased_at: datetime
    updates_until: datetime

    @classmethod
    def from_entity(cls, license: License) -> "LicenseDTO":
        """Build the DTO from a License entity."""
        return cls(
            id=license.id,
            key=license.key,
            plan=license.plan.value,
            status=license.status.value,
            max_activations=license.max_activations,
            seat_count=license.seat_count,
            team_id=license.team_id,
            purchased_at=license.purchased_at,
            updates_until=license.updates_until,
        )


@dataclass
class ProvisionLicenseResponseDTO:
    """DTO for provision license response."""

    license: LicenseDTO
    customer_id: uuid.UUID
    customer_email: str
    team_name: Optional[str] = None
