"""
Serializers for Team API endpoints.
"""

from rest_framework import serializers

from api.v1.license.serializers import LicenseKeyRequestSerializer


class InviteMemberRequestSerializer(LicenseKeyRequestSerializer):
    """Serializer for invite member request."""

    member_email = serializers.CharField(required=True, max_length=255)
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=20)
    inviter_email = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=255
    )


class RemoveMemberRequestSerializer(LicenseKeyRequestSerializer):
    """Serializer for remove member request."""

    member_id = serializers.UUIDField(required=True)


class ListMembersRequestSerializer(LicenseKeyRequestSerializer):
    """Serializer for list members request."""


class InviteMemberResponseSerializer(serializers.Serializer):
    """Serializer for invite member response."""

    member_id = serializers.UUIDField()
    email = serializers.CharField()
    role = serializers.CharField()
    outcome = serializers.CharField()
    team_name = serializers.CharField()
    seats_used = serializers.IntegerField()
    seat_count = serializers.IntegerField()


class RemoveMemberResponseSerializer(serializers.Serializer):
    """Serializer for remove member response."""

    member_id = serializers.UUIDField()
    seats_used = serializers.IntegerField()
    seat_count = serializers.IntegerField()


class TeamMemberSerializer(serializers.Serializer):
    """Serializer for TeamMemberDTO."""

    member_id = serializers.UUIDField()
    customer_id = serializers.UUIDField()
    email = serializers.CharField()
    name = serializers.CharField(allow_null=True)
    role = serializers.CharField()
    status = serializers.CharField()
    invited_at = serializers.DateTimeField()
    joined_at = serializers.DateTimeField(allow_null=True)
    devices_used = serializers.IntegerField()


class TeamRosterResponseSerializer(serializers.Serializer):
    """Serializer for team roster response."""

    team_id = serializers.UUIDField()
    team_name = serializers.CharField()
    seat_count = serializers.IntegerField()
    seats_used = serializers.IntegerField()
    members = TeamMemberSerializer(many=True)
