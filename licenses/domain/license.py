"""
License domain entity.

This is the core domain entity representing a purchased license.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from core.domain.exceptions import InvalidLicenseStatusError
from core.domain.value_objects import LicenseStatus, Plan
from licenses.domain import plans


@dataclass(frozen=True)
class TeamSeating:
    """Team and seat count carried by a seat-based license."""

    team_id: uuid.UUID
    seat_count: int

    def __post_init__(self):
        if self.seat_count < 1:
            raise ValueError("Seat count must be at least 1")


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    A license is either individual (``seating`` is None) or team-based
    (``seating`` holds the team and its seat count). Only seat-based
    plans may carry seating.
    """

    id: uuid.UUID
    customer_id: uuid.UUID
    key: str
    plan: Plan
    status: LicenseStatus
    max_activations: int
    seating: Optional[TeamSeating]
    purchased_at: datetime
    updates_until: datetime
    created_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.key:
            raise ValueError("License key is required")
        if not self.customer_id:
            raise ValueError("Customer ID is required")
        if self.max_activations < 1:
            raise ValueError("Max activations must be at least 1")
        if self.seating is not None and not plans.is_seat_based(self.plan):
            raise ValueError(f"The {self.plan} plan cannot carry a team")

    @classmethod
    def create(
        cls,
        customer_id: uuid.UUID,
        key: str,
        plan: Plan,
        purchased_at: datetime,
        seating: Optional[TeamSeating] = None,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new active License.

        Args:
            customer_id: Purchasing customer UUID
            key: Generated license key
            plan: License plan
            purchased_at: Purchase timestamp
            seating: Team seating for seat-based plans
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance
        """
        seat_count = seating.seat_count if seating else None
        return cls(
            id=license_id or uuid.uuid4(),
            customer_id=customer_id,
            key=key,
            plan=plan,
            status=LicenseStatus.ACTIVE,
            max_activations=plans.max_activations_for(plan, seat_count),
            seating=seating,
            purchased_at=purchased_at,
            updates_until=plans.updates_until_for(purchased_at),
            created_at=purchased_at,
        )

    @property
    def is_active(self) -> bool:
        return self.status == LicenseStatus.ACTIVE

    @property
    def is_seat_based(self) -> bool:
        return plans.is_seat_based(self.plan)

    @property
    def team_id(self) -> Optional[uuid.UUID]:
        return self.seating.team_id if self.seating else None

    @property
    def seat_count(self) -> Optional[int]:
        return self.seating.seat_count if self.seating else None

    def updates_available(self, now: datetime) -> bool:
        """Check whether the license still receives updates at ``now``."""
        return now < self.updates_until

    def revoke(self) -> "License":
        """
        Create a new License instance with revoked status.

        Returns:
            New License instance with revoked status
        """
        if self.status != LicenseStatus.ACTIVE:
            raise InvalidLicenseStatusError(f"Cannot revoke a license that is {self.status}")
        return replace(self, status=LicenseStatus.REVOKED)

    def mark_expired(self) -> "License":
        """
        Create a new License instance with expired status.

        Returns:
            New License instance with expired status
        """
        if self.status != LicenseStatus.ACTIVE:
            raise InvalidLicenseStatusError(f"Cannot expire a license that is {self.status}")
        return replace(self, status=LicenseStatus.EXPIRED)

    def change_seat_count(self, seat_count: int) -> "License":
        """
        Create a new License instance with a different seat count.

        The activation cap follows the new seat count.

        Args:
            seat_count: Already validated seat count

        Returns:
            New License instance
        """
        if self.seating is None:
            raise ValueError("Only team licenses have a seat count")
        return replace(
            self,
            seating=TeamSeating(team_id=self.seating.team_id, seat_count=seat_count),
            max_activations=plans.max_activations_for(self.plan, seat_count),
        )
