"""
Integration tests for repository implementations.
"""

import uuid

import pytest
from django.db import IntegrityError, transaction

from activations.domain.activation import Activation
from activations.infrastructure.models import Activation as ActivationModel
from core.domain.value_objects import Email, LicenseStatus, MemberRole, Plan
from licenses.domain.license import License
from teams.domain.team import TeamMember


@pytest.mark.django_db
@pytest.mark.integration
class TestCustomerRepository:
    """Integration tests for CustomerRepository."""

    def test_get_or_create_is_case_insensitive(self, customer_repository):
        """Test one customer per address regardless of case."""
        first = customer_repository.get_or_create(Email("Jane@Example.com"), name="Jane")
        second = customer_repository.get_or_create(Email("jane@example.com"))

        assert first.id == second.id
        assert second.email == "jane@example.com"
        assert second.name == "Jane"

    def test_find_by_email(self, customer_repository):
        """Test lookup by email."""
        created = customer_repository.get_or_create(Email("a@example.com"))
        assert customer_repository.find_by_email(Email("A@example.com")).id == created.id
        assert customer_repository.find_by_email(Email("b@example.com")) is None

    def test_find_by_ids(self, customer_repository):
        """Test batch lookup keyed by id."""
        a = customer_repository.get_or_create(Email("a@example.com"))
        b = customer_repository.get_or_create(Email("b@example.com"))

        found = customer_repository.find_by_ids([a.id, b.id, uuid.uuid4()])
        assert set(found) == {a.id, b.id}
        assert customer_repository.find_by_ids([]) == {}


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseRepository:
    """Integration tests for LicenseRepository."""

    def test_round_trip_pro(self, license_repository, pro_license):
        """Test an individual license keeps no seating."""
        found = license_repository.find_by_key(pro_license.key)

        assert found == pro_license
        assert found.seating is None
        assert found.plan == Plan.PRO

    def test_round_trip_team(self, license_repository, team_license):
        """Test a team license keeps its seating."""
        found = license_repository.find_by_id(team_license.id)

        assert found.seating == team_license.seating
        assert found.max_activations == 10

    def test_update_status(self, license_repository, pro_license):
        """Test saving an existing license updates it."""
        license_repository.save(pro_license.revoke())
        assert license_repository.find_by_id(pro_license.id).status == LicenseStatus.REVOKED

    def test_find_by_key_for_update(self, license_repository, pro_license):
        """Test the locking lookup finds the row."""
        with transaction.atomic():
            assert license_repository.find_by_key_for_update(pro_license.key).id == pro_license.id
            assert license_repository.find_by_key_for_update("DPRO-ZZZZ-ZZZZ-ZZZZ-ZZZZ") is None

    def test_key_exists(self, license_repository, pro_license):
        """Test key existence checks."""
        assert license_repository.key_exists(pro_license.key)
        assert not license_repository.key_exists("DPRO-ZZZZ-ZZZZ-ZZZZ-ZZZZ")

    def test_key_is_unique(self, license_repository, pro_license, db_customer, now):
        """Test the store refuses a duplicate key."""
        duplicate = License.create(
            customer_id=db_customer.id, key=pro_license.key, plan=Plan.PRO, purchased_at=now
        )
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                license_repository.save(duplicate)


@pytest.mark.django_db
@pytest.mark.integration
class TestTeamRepositories:
    """Integration tests for TeamRepository and TeamMemberRepository."""

    def test_team_round_trip(self, team_repository, team_license):
        """Test the team of a license can be loaded."""
        team = team_repository.find_by_id(team_license.team_id)
        assert team.name == "Acme Team"
        with transaction.atomic():
            assert team_repository.find_by_id_for_update(team.id) == team

    def test_one_row_per_team_and_customer(
        self, team_license, customer_repository, team_member_repository, now
    ):
        """Test the store refuses a second row for the same pair."""
        customer = customer_repository.get_or_create(Email("dev@example.com"))
        team_member_repository.save(
            TeamMember.create_active(
                team_id=team_license.team_id,
                customer_id=customer.id,
                role=MemberRole.MEMBER,
                now=now,
            )
        )
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                team_member_repository.save(
                    TeamMember.create_active(
                        team_id=team_license.team_id,
                        customer_id=customer.id,
                        role=MemberRole.ADMIN,
                        now=now,
                    )
                )

    def test_count_active(self, team_license, customer_repository, team_member_repository, now):
        """Test only active members are counted."""
        for i in range(3):
            customer = customer_repository.get_or_create(Email(f"m{i}@example.com"))
            member = team_member_repository.save(
                TeamMember.create_active(
                    team_id=team_license.team_id,
                    customer_id=customer.id,
                    role=MemberRole.MEMBER,
                    now=now,
                )
            )
        team_member_repository.save(member.remove())

        assert team_member_repository.count_active_by_team(team_license.team_id) == 2
        assert len(team_member_repository.find_by_team(team_license.team_id)) == 3


@pytest.mark.django_db
@pytest.mark.integration
class TestActivationRepository:
    """Integration tests for ActivationRepository."""

    def _activation(self, license, device_id, now):
        return Activation.create(
            license_id=license.id,
            device_id=device_id,
            device_name="Laptop",
            os="Linux",
            app_version="1.0.0",
            now=now,
        )

    def test_save_and_find(self, activation_repository, pro_license, now):
        """Test saving and finding an activation."""
        saved = activation_repository.save(self._activation(pro_license, "d1", now))

        assert activation_repository.find_by_instance_id(saved.instance_id) == saved
        found = activation_repository.find_active_by_license_and_device(pro_license.id, "d1")
        assert found == saved

    def test_one_active_row_per_device(self, activation_repository, pro_license, now):
        """Test the store refuses two active rows for one device."""
        activation_repository.save(self._activation(pro_license, "d1", now))
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                activation_repository.save(self._activation(pro_license, "d1", now))

    def test_inactive_rows_do_not_conflict(self, activation_repository, pro_license, now):
        """Test a released device can be activated again."""
        first = activation_repository.save(self._activation(pro_license, "d1", now))
        activation_repository.save(first.deactivate(now))
        activation_repository.save(self._activation(pro_license, "d1", now))

        rows = ActivationModel.objects.filter(license_id=pro_license.id, device_id="d1")
        assert rows.count() == 2
        assert activation_repository.count_active_by_license(pro_license.id) == 1
