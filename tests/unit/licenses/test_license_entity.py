"""
Unit tests for License domain entity.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import InvalidLicenseStatusError
from core.domain.value_objects import LicenseStatus, Plan
from licenses.domain.license import License, TeamSeating

PURCHASED_AT = datetime(2025, 1, 10, 9, 30, tzinfo=timezone.utc)


def _pro_license():
    return License.create(
        customer_id=uuid.uuid4(),
        key="DPRO-ABCD-EFGH-JKMN-PQRS",
        plan=Plan.PRO,
        purchased_at=PURCHASED_AT,
    )


def _team_license(seat_count=5):
    return License.create(
        customer_id=uuid.uuid4(),
        key="DTEAM-ABCD-EFGH-JKMN-PQRS",
        plan=Plan.TEAM,
        purchased_at=PURCHASED_AT,
        seating=TeamSeating(team_id=uuid.uuid4(), seat_count=seat_count),
    )


class TestLicenseEntity:
    """Tests for License domain entity."""

    def test_create_pro_license(self):
        """Test creating an individual license."""
        license = _pro_license()

        assert license.status == LicenseStatus.ACTIVE
        assert license.is_active
        assert license.max_activations == 3
        assert license.seating is None
        assert license.team_id is None
        assert license.seat_count is None
        assert not license.is_seat_based
        assert license.updates_until == datetime(2026, 1, 10, 9, 30, tzinfo=timezone.utc)

    def test_create_team_license(self):
        """Test creating a seat-based license."""
        license = _team_license(seat_count=5)

        assert license.is_seat_based
        assert license.seat_count == 5
        assert license.team_id is not None
        assert license.max_activations == 10

    def test_pro_cannot_carry_team(self):
        """Test an individual plan rejects seating."""
        with pytest.raises(ValueError, match="cannot carry a team"):
            License.create(
                customer_id=uuid.uuid4(),
                key="DPRO-ABCD-EFGH-JKMN-PQRS",
                plan=Plan.PRO,
                purchased_at=PURCHASED_AT,
                seating=TeamSeating(team_id=uuid.uuid4(), seat_count=3),
            )

    def test_seating_needs_a_seat(self):
        """Test seat count must be positive."""
        with pytest.raises(ValueError):
            TeamSeating(team_id=uuid.uuid4(), seat_count=0)

    def test_updates_available(self):
        """Test update eligibility follows updates_until."""
        license = _pro_license()
        assert license.updates_available(PURCHASED_AT + timedelta(days=30))
        assert not license.updates_available(PURCHASED_AT + timedelta(days=400))

    def test_revoke(self):
        """Test revoking returns a new revoked license."""
        license = _pro_license()
        revoked = license.revoke()

        assert revoked.status == LicenseStatus.REVOKED
        assert license.status == LicenseStatus.ACTIVE
        assert revoked.id == license.id

    def test_mark_expired(self):
        """Test expiring returns a new expired license."""
        assert _pro_license().mark_expired().status == LicenseStatus.EXPIRED

    def test_status_is_one_way(self):
        """Test revoked and expired licenses cannot change status again."""
        revoked = _pro_license().revoke()
        with pytest.raises(InvalidLicenseStatusError):
            revoked.revoke()
        with pytest.raises(InvalidLicenseStatusError):
            revoked.mark_expired()
        with pytest.raises(InvalidLicenseStatusError):
            _pro_license().mark_expired().revoke()

    def test_change_seat_count_recomputes_cap(self):
        """Test the activation cap follows the seat count."""
        license = _team_license(seat_count=5)
        resized = license.change_seat_count(8)

        assert resized.seat_count == 8
        assert resized.max_activations == 16
        assert resized.team_id == license.team_id

    def test_change_seat_count_on_pro_fails(self):
        """Test individual licenses have no seat count to change."""
        with pytest.raises(ValueError):
            _pro_license().change_seat_count(3)
