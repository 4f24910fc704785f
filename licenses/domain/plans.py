"""
Plan policy.

Static table mapping each plan to its key prefix, activation limits and
seat bounds. Pure lookups, no state.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from core.domain.exceptions import InvalidSeatCountError
from core.domain.value_objects import Plan


@dataclass(frozen=True)
class PlanPolicy:
    """Limits attached to one plan."""

    plan: Plan
    prefix: str
    max_activations: Optional[int] = None
    activations_per_seat: Optional[int] = None
    default_seats: Optional[int] = None
    min_seats: Optional[int] = None
    max_seats: Optional[int] = None

    @property
    def is_seat_based(self) -> bool:
        return self.activations_per_seat is not None


PLAN_POLICIES: Dict[Plan, PlanPolicy] = {
    Plan.PRO: PlanPolicy(plan=Plan.PRO, prefix="DPRO", max_activations=3),
    Plan.TEAM: PlanPolicy(
        plan=Plan.TEAM,
        prefix="DTEAM",
        activations_per_seat=2,
        default_seats=5,
        min_seats=3,
        max_seats=100,
    ),
    Plan.ENTERPRISE: PlanPolicy(
        plan=Plan.ENTERPRISE,
        prefix="DENT",
        activations_per_seat=3,
        default_seats=10,
        min_seats=10,
        max_seats=1000,
    ),
}


def policy_for(plan: Plan) -> PlanPolicy:
    """Return the policy row for a plan."""
    return PLAN_POLICIES[plan]


def prefix_for(plan: Plan) -> str:
    """Return the license key prefix for a plan."""
    return PLAN_POLICIES[plan].prefix


def is_seat_based(plan: Plan) -> bool:
    """Check whether a plan's capacity scales with a seat count."""
    return PLAN_POLICIES[plan].is_seat_based


def max_activations_for(plan: Plan, seat_count: Optional[int] = None) -> int:
    """
    Compute the device activation cap for a plan.

    Args:
        plan: License plan
        seat_count: Seat count (seat-based plans only)

    Returns:
        Maximum number of simultaneously active devices
    """
    policy = PLAN_POLICIES[plan]
    if not policy.is_seat_based:
        return policy.max_activations
    if seat_count is None:
        raise ValueError(f"Seat count is required for the {plan} plan")
    return policy.activations_per_seat * seat_count


def validate_seat_count(plan: Plan, requested: Optional[int] = None) -> Optional[int]:
    """
    Check a requested seat count against the plan bounds.

    Args:
        plan: License plan
        requested: Requested seat count, or None for the plan default

    Returns:
        The accepted seat count (None for plans without seats)

    Raises:
        InvalidSeatCountError: If the count is outside the plan bounds
    """
    policy = PLAN_POLICIES[plan]
    if not policy.is_seat_based:
        if requested not in (None, 1):
            raise InvalidSeatCountError()
        return None

    seats = policy.default_seats if requested is None else requested
    if seats < policy.min_seats or seats > policy.max_seats:
        raise InvalidSeatCountError(min_seats=policy.min_seats, max_seats=policy.max_seats)
    return seats


def updates_until_for(purchased_at: datetime) -> datetime:
    """Updates are included for one calendar year after purchase."""
    try:
        return purchased_at.replace(year=purchased_at.year + 1)
    except ValueError:
        # Feb 29 purchase
        return purchased_at.replace(year=purchased_at.year + 1, day=28)
