"""
Pytest configuration and shared fixtures.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from activations.application.handlers.activate_license_handler import ActivateLicenseHandler
from activations.application.handlers.deactivate_device_handler import DeactivateDeviceHandler
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from core.domain.value_objects import Email, Plan
from customers.infrastructure.repositories.django_customer_repository import (
    DjangoCustomerRepository,
)
from licenses.application.handlers.provision_license_handler import ProvisionLicenseHandler
from licenses.domain.license import License, TeamSeating
from licenses.domain.services import LicenseKeyGenerator
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from teams.application.handlers.team_membership_handlers import (
    InviteTeamMemberHandler,
    ListTeamMembersHandler,
    RemoveTeamMemberHandler,
)
from teams.domain.team import Team
from teams.infrastructure.repositories.django_team_member_repository import (
    DjangoTeamMemberRepository,
)
from teams.infrastructure.repositories.django_team_repository import DjangoTeamRepository

SCENARIO_TEAM_KEY = "DTEAM-AB12-CD34-EF56-GH78"


@pytest.fixture
def license_repository():
    """Fixture for LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def customer_repository():
    """Fixture for CustomerRepository."""
    return DjangoCustomerRepository()


@pytest.fixture
def team_repository():
    """Fixture for TeamRepository."""
    return DjangoTeamRepository()


@pytest.fixture
def team_member_repository():
    """Fixture for TeamMemberRepository."""
    return DjangoTeamMemberRepository()


@pytest.fixture
def activation_repository():
    """Fixture for ActivationRepository."""
    return DjangoActivationRepository()


@pytest.fixture
def now():
    """Fixed current time for one test."""
    return timezone.now()


@pytest.fixture
def db_customer(db, customer_repository):
    """Fixture for a Customer saved in database."""
    return customer_repository.get_or_create(Email("owner@example.com"), name="Olivia Owner")


@pytest.fixture
def make_pro_license(db, db_customer, license_repository, now):
    """Factory for pro licenses saved in database."""

    def _make(purchased_at=None):
        return license_repository.save(
            License.create(
                customer_id=db_customer.id,
                key=LicenseKeyGenerator.generate(Plan.PRO),
                plan=Plan.PRO,
                purchased_at=purchased_at or now,
            )
        )

    return _make


@pytest.fixture
def pro_license(make_pro_license):
    """Fixture for an active pro license (3 devices)."""
    return make_pro_license()


@pytest.fixture
def make_team_license(db, db_customer, license_repository, team_repository, now):
    """
    Factory for team licenses saved in database.

    The team has no member rows, so every seat is free. Licenses issued
    through ProvisionLicenseHandler also carry an active owner who takes
    one seat; use provision_handler when that matters.
    """

    def _make(key=None, seat_count=5, plan=Plan.TEAM, team_name="Acme Team"):
        team = team_repository.save(
            Team.create(name=team_name, owner_id=db_customer.id, created_at=now)
        )
        return license_repository.save(
            License.create(
                customer_id=db_customer.id,
                key=key or LicenseKeyGenerator.generate(plan),
                plan=plan,
                purchased_at=now,
                seating=TeamSeating(team_id=team.id, seat_count=seat_count),
            )
        )

    return _make


@pytest.fixture
def team_license(make_team_license):
    """Fixture for a 5-seat team license with generated key."""
    return make_team_license()


@pytest.fixture
def scenario_team_license(make_team_license):
    """Fixture for the 5-seat team license DTEAM-AB12-CD34-EF56-GH78."""
    return make_team_license(key=SCENARIO_TEAM_KEY)


@pytest.fixture
def expired_updates_license(make_pro_license):
    """Fixture for a pro license bought more than a year ago."""
    return make_pro_license(purchased_at=timezone.now() - timedelta(days=400))


@pytest.fixture
def provision_handler(
    license_repository, customer_repository, team_repository, team_member_repository
):
    """Fixture for ProvisionLicenseHandler."""
    return ProvisionLicenseHandler(
        license_repository=license_repository,
        customer_repository=customer_repository,
        team_repository=team_repository,
        team_member_repository=team_member_repository,
    )


@pytest.fixture
def activate_handler(
    license_repository,
    activation_repository,
    customer_repository,
    team_repository,
    team_member_repository,
):
    """Fixture for ActivateLicenseHandler."""
    return ActivateLicenseHandler(
        license_repository=license_repository,
        activation_repository=activation_repository,
        customer_repository=customer_repository,
        team_repository=team_repository,
        team_member_repository=team_member_repository,
    )


@pytest.fixture
def deactivate_handler(license_repository, activation_repository):
    """Fixture for DeactivateDeviceHandler."""
    return DeactivateDeviceHandler(
        license_repository=license_repository,
        activation_repository=activation_repository,
    )


@pytest.fixture
def invite_handler(
    license_repository, team_repository, team_member_repository, customer_repository
):
    """Fixture for InviteTeamMemberHandler."""
    return InviteTeamMemberHandler(
        license_repository=license_repository,
        team_repository=team_repository,
        team_member_repository=team_member_repository,
        customer_repository=customer_repository,
    )


@pytest.fixture
def remove_handler(license_repository, team_repository, team_member_repository):
    """Fixture for RemoveTeamMemberHandler."""
    return RemoveTeamMemberHandler(
        license_repository=license_repository,
        team_repository=team_repository,
        team_member_repository=team_member_repository,
    )


@pytest.fixture
def list_members_handler(
    license_repository,
    team_repository,
    team_member_repository,
    customer_repository,
    activation_repository,
):
    """Fixture for ListTeamMembersHandler."""
    return ListTeamMembersHandler(
        license_repository=license_repository,
        team_repository=team_repository,
        team_member_repository=team_member_repository,
        customer_repository=customer_repository,
        activation_repository=activation_repository,
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
