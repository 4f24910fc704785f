"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from core.domain.exceptions import InvalidEmailFormatError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email value object with validation.

    Addresses are compared case-insensitively, so the stored value
    is always trimmed and lower-cased.
    """

    value: str

    def __post_init__(self):
        """Normalize and validate email format."""
        normalized = (self.value or "").strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailFormatError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


class Plan(Enum):
    """Commercial tier of a license."""

    PRO = "pro"
    TEAM = "team"
    ENTERPRISE = "enterprise"

    def __str__(self) -> str:
        """Return plan as string."""
        return self.value


class LicenseStatus(Enum):
    """License status value object."""

    ACTIVE = "active"
    REVOKED = "revoked"
    EXPIRED = "expired"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class MemberRole(Enum):
    """Role of a customer inside a team."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value


class MemberStatus(Enum):
    """Membership status; only ACTIVE members consume a seat."""

    PENDING = "pending"
    ACTIVE = "active"
    REMOVED = "removed"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
