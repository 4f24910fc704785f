"""
Integration tests for License API endpoints.
"""

import pytest
from django.db import DatabaseError
from django.urls import reverse

from teams.application.commands.invite_member import InviteMemberCommand


def _activate_payload(key, device_id="device-1", **extra):
    payload = {
        "license_key": key,
        "device_id": device_id,
        "device_name": "Studio Mac",
        "os": "macOS 14.4",
        "app_version": "5.2.0",
    }
    payload.update(extra)
    return payload


@pytest.mark.django_db
@pytest.mark.integration
class TestActivateLicenseAPI:
    """Integration tests for POST /api/v1/license/activate."""

    def test_activate_success(self, api_client, pro_license):
        """Test successful license activation via API."""
        response = api_client.post(
            reverse("activate-license"), _activate_payload(pro_license.key), format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["instance_id"]
        assert data["license_key"] == pro_license.key
        assert data["plan"] == "pro"
        assert data["devices_used"] == 1
        assert data["devices_allowed"] == 3
        assert data["updates_available"] is True
        assert data["team"] is None
        assert response["X-Correlation-ID"]

    def test_activate_same_device_twice(self, api_client, pro_license):
        """Test re-activation returns the same instance id."""
        url = reverse("activate-license")
        first = api_client.post(url, _activate_payload(pro_license.key), format="json").json()
        second = api_client.post(url, _activate_payload(pro_license.key), format="json").json()

        assert first["instance_id"] == second["instance_id"]
        assert second["devices_used"] == 1

    def test_activation_limit(self, api_client, pro_license):
        """Test the fourth device gets 409 with the limit."""
        url = reverse("activate-license")
        for device in ("d1", "d2", "d3"):
            response = api_client.post(
                url, _activate_payload(pro_license.key, device), format="json"
            )
            assert response.status_code == 200

        response = api_client.post(url, _activate_payload(pro_license.key, "d4"), format="json")

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "ACTIVATION_LIMIT_EXCEEDED"
        assert body["error"]["limit"] == 3

    def test_invalid_key_format(self, api_client, db):
        """Test malformed keys are rejected before lookup."""
        response = api_client.post(
            reverse("activate-license"), _activate_payload("not-a-key"), format="json"
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_KEY_FORMAT"

    def test_lowercase_key_accepted(self, api_client, pro_license):
        """Test keys are normalized before the format check."""
        response = api_client.post(
            reverse("activate-license"),
            _activate_payload(f" {pro_license.key.lower()} "),
            format="json",
        )
        assert response.status_code == 200

    def test_unknown_key(self, api_client, db):
        """Test unknown keys return 404."""
        response = api_client.post(
            reverse("activate-license"),
            _activate_payload("DPRO-ABCD-EFGH-JKMN-PQRS"),
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "KEY_NOT_FOUND"

    def test_revoked_license(self, api_client, license_repository, pro_license):
        """Test a revoked license reports its status."""
        license_repository.save(pro_license.revoke())

        response = api_client.post(
            reverse("activate-license"), _activate_payload(pro_license.key), format="json"
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "LICENSE_NOT_ACTIVE"
        assert error["status"] == "revoked"

    def test_missing_fields(self, api_client, db):
        """Test required fields are enforced."""
        response = api_client.post(reverse("activate-license"), {}, format="json")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "license_key" in error["fields"]
        assert "device_id" in error["fields"]

    def test_team_member_activation(self, api_client, invite_handler, team_license):
        """Test a team member gets team info back."""
        invite_handler.handle(
            InviteMemberCommand(license_key=team_license.key, member_email="dev@example.com")
        )

        response = api_client.post(
            reverse("activate-license"),
            _activate_payload(team_license.key, email="dev@example.com"),
            format="json",
        )

        assert response.status_code == 200
        team = response.json()["team"]
        assert team["team_name"] == "Acme Team"
        assert team["seats_used"] == 1
        assert team["seat_count"] == 5
        assert team["role"] == "member"

    def test_team_non_member(self, api_client, team_license):
        """Test a non-member gets 403."""
        response = api_client.post(
            reverse("activate-license"),
            _activate_payload(team_license.key, email="stranger@example.com"),
            format="json",
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "NOT_A_TEAM_MEMBER"

    def test_store_failure_is_503(self, api_client, pro_license, monkeypatch):
        """Test store failures are reported as retryable."""
        from api.v1.license import views

        def broken(key):
            raise DatabaseError("connection lost")

        monkeypatch.setattr(views._license_repo, "find_by_key_for_update", broken)

        response = api_client.post(
            reverse("activate-license"), _activate_payload(pro_license.key), format="json"
        )

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"

    def test_correlation_id_is_echoed(self, api_client, db):
        """Test a caller-supplied correlation id comes back."""
        response = api_client.post(
            reverse("activate-license"),
            _activate_payload("DPRO-ABCD-EFGH-JKMN-PQRS"),
            format="json",
            HTTP_X_CORRELATION_ID="req-42",
        )
        assert response["X-Correlation-ID"] == "req-42"


@pytest.mark.django_db
@pytest.mark.integration
class TestDeactivateDeviceAPI:
    """Integration tests for POST /api/v1/license/deactivate."""

    def test_deactivate_success(self, api_client, pro_license):
        """Test a device can be released."""
        activated = api_client.post(
            reverse("activate-license"), _activate_payload(pro_license.key), format="json"
        ).json()

        response = api_client.post(
            reverse("deactivate-device"),
            {"license_key": pro_license.key, "instance_id": activated["instance_id"]},
            format="json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["devices_used"] == 0
        assert data["devices_allowed"] == 3

    def test_deactivate_unknown_instance(self, api_client, pro_license):
        """Test unknown instance ids return 404."""
        response = api_client.post(
            reverse("deactivate-device"),
            {"license_key": pro_license.key, "instance_id": "nope"},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ACTIVATION_NOT_FOUND"


@pytest.mark.django_db
class TestHealthEndpoints:
    """Tests for health endpoints."""

    def test_health(self, client):
        """Test liveness."""
        assert client.get("/health/").json()["status"] == "healthy"

    def test_health_db(self, client):
        """Test database check."""
        assert client.get("/health/db/").json()["database"] == "connected"

    def test_ready(self, client):
        """Test readiness."""
        response = client.get("/ready/")
        assert response.status_code == 200
        assert response.json()["checks"]["database"] is True
