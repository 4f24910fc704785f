"""
License domain events.

Domain events represent something that happened in the license domain.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from core.domain.events import DomainEvent


class LicenseProvisioned(DomainEvent):
    """Event raised when a license is issued to a customer."""

    def __init__(
        self,
        license_id: uuid.UUID,
        license_key: str,
        plan: str,
        customer_email: str,
        seat_count: Optional[int] = None,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseProvisioned event.

        Args:
            license_id: License UUID
            license_key: Issued license key
            plan: Plan value
            customer_email: Purchaser email
            seat_count: Seat count for team licenses
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="LicenseProvisioned",
        )
        self.license_id = license_id
        self.license_key = license_key
        self.plan = plan
        self.customer_email = customer_email
        self.seat_count = seat_count


class LicenseRevoked(DomainEvent):
    """Event raised when a license is revoked."""

    def __init__(self, license_id: uuid.UUID, occurred_at: Optional[datetime] = None):
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="LicenseRevoked",
        )
        self.license_id = license_id


class LicenseExpired(DomainEvent):
    """Event raised when a license is marked expired."""

    def __init__(self, license_id: uuid.UUID, occurred_at: Optional[datetime] = None):
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="LicenseExpired",
        )
        self.license_id = license_id


class SeatCountChanged(DomainEvent):
    """Event raised when the seat count of a team license changes."""

    def __init__(
        self,
        license_id: uuid.UUID,
        old_seat_count: int,
        new_seat_count: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize SeatCountChanged event.

        Args:
            license_id: License UUID
            old_seat_count: Seat count before the change
            new_seat_count: Seat count after the change
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(license_id),
            event_type="SeatCountChanged",
        )
        self.license_id = license_id
        self.old_seat_count = old_seat_count
        self.new_seat_count = new_seat_count
