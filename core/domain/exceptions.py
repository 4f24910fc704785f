"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. They are expected outcomes
that the caller can act on, and always carry a machine-readable code.

Infrastructure failures (store unavailable, transaction conflicts)
are modelled separately by InfrastructureError so callers can tell
"your request was invalid" apart from "try again later".
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Extra data the caller needs to render the failure
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for API responses."""
        return {"code": self.code, "message": self.message, **self.details}


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class KeyNotFoundError(LicenseException):
    """Raised when no license exists for a key."""

    def __init__(self, message: str = "License key not found"):
        super().__init__(message, code="KEY_NOT_FOUND")


class InvalidKeyFormatError(LicenseException):
    """Raised when a license key does not match the key format."""

    def __init__(self, message: str = "Invalid license key format"):
        super().__init__(message, code="INVALID_KEY_FORMAT")


class LicenseNotActiveError(LicenseException):
    """Raised when a license is revoked or expired."""

    def __init__(self, status: str, message: Optional[str] = None):
        super().__init__(
            message or f"License is {status}",
            code="LICENSE_NOT_ACTIVE",
            details={"status": status},
        )
        self.status = status


class InvalidLicenseStatusError(LicenseException):
    """Raised when a license operation is invalid for the current status."""

    def __init__(self, message: str = "Invalid license status"):
        super().__init__(message, code="INVALID_LICENSE_STATUS")


class InvalidSeatCountError(LicenseException):
    """Raised when a seat count falls outside the plan bounds."""

    def __init__(
        self,
        min_seats: Optional[int] = None,
        max_seats: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            if min_seats is not None and max_seats is not None:
                message = f"Seat count must be between {min_seats} and {max_seats}"
            else:
                message = "This plan does not support seats"
        super().__init__(
            message,
            code="INVALID_SEAT_COUNT",
            details={"min_seats": min_seats, "max_seats": max_seats},
        )
        self.min_seats = min_seats
        self.max_seats = max_seats


class InvalidTeamLicenseError(LicenseException):
    """Raised when a seat-based license has no team attached."""

    def __init__(self, message: str = "Team not found for this license"):
        super().__init__(message, code="INVALID_TEAM_LICENSE")


class NotATeamLicenseError(LicenseException):
    """Raised when a team operation targets an individual license."""

    def __init__(self, message: str = "This is not a team license"):
        super().__init__(message, code="NOT_A_TEAM_LICENSE")


class ActivationException(DomainException):
    """Base exception for activation-related errors."""

    pass


class ActivationLimitExceededError(ActivationException):
    """Raised when a license has no free device activations."""

    def __init__(self, limit: int, message: Optional[str] = None):
        super().__init__(
            message or f"Activation limit reached ({limit} devices)",
            code="ACTIVATION_LIMIT_EXCEEDED",
            details={"limit": limit},
        )
        self.limit = limit


class ActivationNotFoundError(ActivationException):
    """Raised when an activation is not found."""

    def __init__(self, message: str = "Activation not found"):
        super().__init__(message, code="ACTIVATION_NOT_FOUND")


class TeamException(DomainException):
    """Base exception for team membership errors."""

    pass


class SeatLimitExceededError(TeamException):
    """Raised when every seat of a team license is taken."""

    def __init__(self, seat_count: int, seats_used: int, message: Optional[str] = None):
        super().__init__(
            message
            or f"All {seat_count} seats are in use. Upgrade to add more members.",
            code="SEAT_LIMIT_EXCEEDED",
            details={"seat_count": seat_count, "seats_used": seats_used},
        )
        self.seat_count = seat_count
        self.seats_used = seats_used


class AlreadyMemberError(TeamException):
    """Raised when inviting someone who is already an active member."""

    def __init__(self, message: str = "This person is already a team member"):
        super().__init__(message, code="ALREADY_MEMBER")


class NotATeamMemberError(TeamException):
    """Raised when the caller has no active membership in the team."""

    def __init__(
        self,
        message: str = "You are not a member of this team. Ask the team owner to invite you.",
    ):
        super().__init__(message, code="NOT_A_TEAM_MEMBER")


class MemberNotFoundError(TeamException):
    """Raised when a member does not belong to the given team."""

    def __init__(self, message: str = "Team member not found"):
        super().__init__(message, code="MEMBER_NOT_FOUND")


class CannotRemoveOwnerError(TeamException):
    """Raised when trying to remove the team owner."""

    def __init__(self, message: str = "Cannot remove the team owner"):
        super().__init__(message, code="CANNOT_REMOVE_OWNER")


class InvalidMemberRoleError(TeamException):
    """Raised when an invitation asks for a role that cannot be granted."""

    def __init__(self, message: str = "Invitations can only grant the admin or member role"):
        super().__init__(message, code="INVALID_MEMBER_ROLE")


class InvalidEmailFormatError(DomainException):
    """Raised when an e-mail address fails the syntactic check."""

    def __init__(self, message: str = "Invalid email format"):
        super().__init__(message, code="INVALID_EMAIL_FORMAT")


class InfrastructureError(Exception):
    """
    Base class for failures outside the business rules.

    These are not DomainExceptions; the caller should retry later
    rather than change the request.
    """

    code = "INFRASTRUCTURE_ERROR"


class StoreUnavailableError(InfrastructureError):
    """Raised when the persistent store fails during an operation."""

    code = "STORE_UNAVAILABLE"
