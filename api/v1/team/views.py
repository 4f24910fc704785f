"""
Team API views.

These endpoints are used by team owners and admins to:
- Invite members to a team license
- Remove members, freeing their seat
- List the roster with seat usage
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from api.v1.team.serializers import (
    InviteMemberRequestSerializer,
    InviteMemberResponseSerializer,
    ListMembersRequestSerializer,
    RemoveMemberRequestSerializer,
    RemoveMemberResponseSerializer,
    TeamRosterResponseSerializer,
)
from customers.infrastructure.repositories.django_customer_repository import (
    DjangoCustomerRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from teams.application.commands.invite_member import InviteMemberCommand
from teams.application.commands.remove_member import RemoveMemberCommand
from teams.application.handlers.team_membership_handlers import (
    InviteTeamMemberHandler,
    ListTeamMembersHandler,
    RemoveTeamMemberHandler,
)
from teams.application.queries.list_team_members import ListTeamMembersQuery
from teams.infrastructure.repositories.django_team_member_repository import (
    DjangoTeamMemberRepository,
)
from teams.infrastructure.repositories.django_team_repository import DjangoTeamRepository

# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()
_customer_repo = DjangoCustomerRepository()
_team_repo = DjangoTeamRepository()
_team_member_repo = DjangoTeamMemberRepository()
_activation_repo = DjangoActivationRepository()


class InviteMemberView(APIView):
    """View for inviting a member to a team."""

    @extend_schema(
        operation_id="invite_team_member",
        summary="Invite Team Member",
        description=(
            "Add a member to the team of a seat-based license. A member who "
            "was removed earlier is reactivated instead of added twice."
        ),
        tags=["Team API"],
        request=InviteMemberRequestSerializer,
        responses={
            201: InviteMemberResponseSerializer,
            400: {"description": "Invalid key, email, role, or not a team license"},
            404: {"description": "License key not found"},
            409: {"description": "All seats in use or already a member"},
        },
    )
    def post(self, request: Request) -> Response:
        """Invite a member."""
        serializer = InviteMemberRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        handler = InviteTeamMemberHandler(
            license_repository=_license_repo,
            team_repository=_team_repo,
            team_member_repository=_team_member_repo,
            customer_repository=_customer_repo,
        )
        result = handler.handle(
            InviteMemberCommand(
                license_key=data["license_key"],
                member_email=data["member_email"],
                role=data.get("role") or None,
                inviter_email=data.get("inviter_email") or None,
            )
        )

        response_serializer = InviteMemberResponseSerializer(result)
        return Response(
            {"success": True, **response_serializer.data}, status=status.HTTP_201_CREATED
        )


class RemoveMemberView(APIView):
    """View for removing a member from a team."""

    @extend_schema(
        operation_id="remove_team_member",
        summary="Remove Team Member",
        description=(
            "Remove a member from a team and free their seat. The owner "
            "cannot be removed. Device activations are left in place."
        ),
        tags=["Team API"],
        request=RemoveMemberRequestSerializer,
        responses={
            200: RemoveMemberResponseSerializer,
            400: {"description": "Owner cannot be removed, or not a team license"},
            404: {"description": "License key or member not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Remove a member."""
        serializer = RemoveMemberRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = RemoveTeamMemberHandler(
            license_repository=_license_repo,
            team_repository=_team_repo,
            team_member_repository=_team_member_repo,
        )
        result = handler.handle(
            RemoveMemberCommand(
                license_key=serializer.validated_data["license_key"],
                member_id=serializer.validated_data["member_id"],
            )
        )

        response_serializer = RemoveMemberResponseSerializer(result)
        return Response({"success": True, **response_serializer.data}, status=status.HTTP_200_OK)


class ListMembersView(APIView):
    """View for the team roster."""

    @extend_schema(
        operation_id="list_team_members",
        summary="List Team Members",
        description="Every member of the team, any status, with seat usage.",
        tags=["Team API"],
        request=ListMembersRequestSerializer,
        responses={
            200: TeamRosterResponseSerializer,
            400: {"description": "Not a team license"},
            404: {"description": "License key not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """List team members."""
        serializer = ListMembersRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = ListTeamMembersHandler(
            license_repository=_license_repo,
            team_repository=_team_repo,
            team_member_repository=_team_member_repo,
            customer_repository=_customer_repo,
            activation_repository=_activation_repo,
        )
        result = handler.handle(
            ListTeamMembersQuery(license_key=serializer.validated_data["license_key"])
        )

        response_serializer = TeamRosterResponseSerializer(result)
        return Response({"success": True, **response_serializer.data}, status=status.HTTP_200_OK)
