"""
Unit tests for TeamMembershipManager domain service.
"""
import uuid
from dataclasses import replace
from datetime import timedelta

import pytest

from core.domain.exceptions import (
    AlreadyMemberError,
    CannotRemoveOwnerError,
    InvalidMemberRoleError,
    InvalidTeamLicenseError,
    MemberNotFoundError,
    NotATeamLicenseError,
    SeatLimitExceededError,
)
from core.domain.value_objects import Email, MemberRole, MemberStatus, Plan
from teams.domain.services import InviteOutcome, TeamMembershipManager, require_team_seating
from teams.domain.team import Team, TeamMember
from teams.infrastructure.models import TeamMember as TeamMemberModel


@pytest.fixture
def team(db, db_customer, team_repository, now):
    """Fixture for a Team saved in database."""
    return team_repository.save(
        Team.create(name="Acme Team", owner_id=db_customer.id, created_at=now)
    )


@pytest.fixture
def make_customer(db, customer_repository):
    """Factory for customers by email."""

    def _make(email):
        return customer_repository.get_or_create(Email(email))

    return _make


def _invite(team, customer, repository, now, seat_count=5, role=None):
    return TeamMembershipManager.invite(
        team=team,
        seat_count=seat_count,
        customer_id=customer.id,
        repository=repository,
        now=now,
        role=role,
    )


@pytest.mark.django_db
class TestInvite:
    """Tests for TeamMembershipManager.invite."""

    def test_invite_new_member(self, team, make_customer, team_member_repository, now):
        """Test a fresh invite creates an active member."""
        result = _invite(team, make_customer("a@x.io"), team_member_repository, now)

        assert result.outcome == InviteOutcome.INVITED
        assert result.member.status == MemberStatus.ACTIVE
        assert result.member.role == MemberRole.MEMBER
        assert result.member.joined_at == now
        assert result.seats_used == 1
        assert result.seat_count == 5

    def test_invite_admin(self, team, make_customer, team_member_repository, now):
        """Test the requested role is kept."""
        result = _invite(
            team, make_customer("a@x.io"), team_member_repository, now, role=MemberRole.ADMIN
        )
        assert result.member.role == MemberRole.ADMIN

    def test_invite_owner_role_rejected(self, team, make_customer, team_member_repository, now):
        """Test invitations cannot create owners."""
        with pytest.raises(InvalidMemberRoleError):
            _invite(
                team, make_customer("a@x.io"), team_member_repository, now, role=MemberRole.OWNER
            )

    def test_seat_limit(self, team, make_customer, team_member_repository, now):
        """Test five invites fit in five seats and the sixth fails at 5/5."""
        for i in range(5):
            result = _invite(team, make_customer(f"m{i}@x.io"), team_member_repository, now)
        assert result.seats_used == 5

        with pytest.raises(SeatLimitExceededError) as exc_info:
            _invite(team, make_customer("m5@x.io"), team_member_repository, now)
        assert exc_info.value.seat_count == 5
        assert exc_info.value.seats_used == 5
        assert team_member_repository.count_active_by_team(team.id) == 5

    def test_already_member(self, team, make_customer, team_member_repository, now):
        """Test an active member cannot be invited again."""
        customer = make_customer("a@x.io")
        _invite(team, customer, team_member_repository, now)

        with pytest.raises(AlreadyMemberError):
            _invite(team, customer, team_member_repository, now)

    def test_full_team_reports_seats_before_membership(
        self, team, make_customer, team_member_repository, now
    ):
        """Test a full team reports the seat limit even for a current member."""
        customers = [make_customer(f"m{i}@x.io") for i in range(3)]
        for customer in customers:
            _invite(team, customer, team_member_repository, now, seat_count=3)

        with pytest.raises(SeatLimitExceededError):
            _invite(team, customers[0], team_member_repository, now, seat_count=3)

    def test_reactivation_reuses_row(self, team, make_customer, team_member_repository, now):
        """Test a removed member comes back on the same row."""
        customer = make_customer("a@x.io")
        first = _invite(
            team, customer, team_member_repository, now, role=MemberRole.ADMIN
        ).member
        TeamMembershipManager.remove(team, first.id, team_member_repository)

        later = now + timedelta(days=2)
        result = _invite(team, customer, team_member_repository, later)

        assert result.outcome == InviteOutcome.REACTIVATED
        assert result.member.id == first.id
        assert result.member.status == MemberStatus.ACTIVE
        assert result.member.role == MemberRole.ADMIN
        assert result.member.joined_at == later
        rows = TeamMemberModel.objects.filter(team_id=team.id, customer_id=customer.id)
        assert rows.count() == 1

    def test_reactivation_with_new_role(self, team, make_customer, team_member_repository, now):
        """Test a supplied role replaces the old one on reactivation."""
        customer = make_customer("a@x.io")
        first = _invite(team, customer, team_member_repository, now).member
        TeamMembershipManager.remove(team, first.id, team_member_repository)

        result = _invite(team, customer, team_member_repository, now, role=MemberRole.ADMIN)
        assert result.member.role == MemberRole.ADMIN


@pytest.mark.django_db
class TestRemove:
    """Tests for TeamMembershipManager.remove."""

    def test_remove_frees_seat(self, team, make_customer, team_member_repository, now):
        """Test removing a member lets the next invite through."""
        members = [
            _invite(team, make_customer(f"m{i}@x.io"), team_member_repository, now).member
            for i in range(5)
        ]

        removed = TeamMembershipManager.remove(team, members[2].id, team_member_repository)
        assert removed.status == MemberStatus.REMOVED
        assert TeamMembershipManager.seats_used(team.id, team_member_repository) == 4

        result = _invite(team, make_customer("late@x.io"), team_member_repository, now)
        assert result.seats_used == 5

    def test_owner_cannot_be_removed(
        self, team, db_customer, make_customer, team_member_repository, now
    ):
        """Test the owner stays regardless of seat usage."""
        owner = team_member_repository.save(
            TeamMember.create_active(
                team_id=team.id, customer_id=db_customer.id, role=MemberRole.OWNER, now=now
            )
        )
        with pytest.raises(CannotRemoveOwnerError):
            TeamMembershipManager.remove(team, owner.id, team_member_repository)

        for i in range(4):
            _invite(team, make_customer(f"m{i}@x.io"), team_member_repository, now)
        with pytest.raises(CannotRemoveOwnerError):
            TeamMembershipManager.remove(team, owner.id, team_member_repository)

        assert team_member_repository.find_by_id(owner.id).is_active

    def test_member_of_other_team(
        self, team, db_customer, make_customer, team_repository, team_member_repository, now
    ):
        """Test a member id from another team is not found."""
        other = team_repository.save(
            Team.create(name="Other", owner_id=db_customer.id, created_at=now)
        )
        member = _invite(other, make_customer("a@x.io"), team_member_repository, now).member

        with pytest.raises(MemberNotFoundError):
            TeamMembershipManager.remove(team, member.id, team_member_repository)

    def test_unknown_member(self, team, team_member_repository):
        """Test an unknown member id is not found."""
        with pytest.raises(MemberNotFoundError):
            TeamMembershipManager.remove(team, uuid.uuid4(), team_member_repository)


@pytest.mark.django_db
class TestRequireTeamSeating:
    """Tests for require_team_seating."""

    def test_team_license(self, team_license):
        """Test a team license exposes its seating."""
        assert require_team_seating(team_license).seat_count == 5

    def test_pro_license(self, pro_license):
        """Test individual licenses are not team licenses."""
        with pytest.raises(NotATeamLicenseError):
            require_team_seating(pro_license)

    def test_missing_team(self, pro_license):
        """Test a seat-based plan without a team is a data error."""
        broken = replace(pro_license, plan=Plan.TEAM)
        with pytest.raises(InvalidTeamLicenseError):
            require_team_seating(broken)
