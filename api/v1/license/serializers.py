"""
Serializers for License API endpoints.
"""

from rest_framework import serializers

from core.domain.exceptions import InvalidKeyFormatError
from licenses.domain.license_key import is_valid_license_key_format, normalize_license_key


class LicenseKeyRequestSerializer(serializers.Serializer):
    """Base serializer for requests that carry a license key."""

    license_key = serializers.CharField(required=True, max_length=40)

    def validate_license_key(self, value: str) -> str:
        """Normalize the key and reject malformed keys before any lookup."""
        key = normalize_license_key(value)
        if not is_valid_license_key_format(key):
            raise InvalidKeyFormatError()
        return key


class ActivateLicenseRequestSerializer(LicenseKeyRequestSerializer):
    """Serializer for activate license request."""

    device_id = serializers.CharField(required=True, max_length=255)
    device_name = serializers.CharField(required=True, max_length=255)
    os = serializers.CharField(required=False, allow_blank=True, max_length=100, default="")
    app_version = serializers.CharField(required=False, allow_blank=True, max_length=50, default="")
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)


class DeactivateDeviceRequestSerializer(LicenseKeyRequestSerializer):
    """Serializer for deactivate device request."""

    instance_id = serializers.CharField(required=True, max_length=64)


class TeamInfoSerializer(serializers.Serializer):
    """Serializer for TeamInfoDTO."""

    team_id = serializers.UUIDField()
    team_name = serializers.CharField()
    seat_count = serializers.IntegerField()
    seats_used = serializers.IntegerField()
    role = serializers.CharField()


class ActivateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for activate license response."""

    instance_id = serializers.CharField()
    license_key = serializers.CharField()
    device_name = serializers.CharField()
    plan = serializers.CharField()
    devices_used = serializers.IntegerField()
    devices_allowed = serializers.IntegerField()
    updates_available = serializers.BooleanField()
    updates_until = serializers.DateTimeField()
    team = TeamInfoSerializer(allow_null=True, required=False)


class DeactivateDeviceResponseSerializer(serializers.Serializer):
    """Serializer for deactivate device response."""

    instance_id = serializers.CharField()
    devices_used = serializers.IntegerField()
    devices_allowed = serializers.IntegerField()
