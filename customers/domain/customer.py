"""
Customer domain entity.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.value_objects import Email


@dataclass(frozen=True)
class Customer:
    """
    Customer domain entity.

    Customers are created on first purchase, team invitation or
    team activation and are never deleted.
    """

    id: uuid.UUID
    email: str
    name: Optional[str]
    external_auth_id: Optional[str]
    payment_customer_id: Optional[str]
    created_at: datetime

    def __post_init__(self):
        """Validate customer entity."""
        if not self.email:
            raise ValueError("Email is required")

    @classmethod
    def create(
        cls,
        email: Email,
        created_at: datetime,
        name: Optional[str] = None,
        customer_id: Optional[uuid.UUID] = None,
    ) -> "Customer":
        """
        Create a new Customer entity.

        Args:
            email: Validated email
            created_at: Creation timestamp
            name: Optional display name
            customer_id: Optional UUID (generated if not provided)

        Returns:
            Customer entity instance
        """
        return cls(
            id=customer_id or uuid.uuid4(),
            email=email.value,
            name=name,
            external_auth_id=None,
            payment_customer_id=None,
            created_at=created_at,
        )
