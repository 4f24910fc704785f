"""
License API views.

These endpoints are used by the desktop app to:
- Activate a license on a device
- Release a device slot
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.commands.deactivate_device import DeactivateDeviceCommand
from activations.application.handlers.activate_license_handler import ActivateLicenseHandler
from activations.application.handlers.deactivate_device_handler import DeactivateDeviceHandler
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from api.v1.license.serializers import (
    ActivateLicenseRequestSerializer,
    ActivateLicenseResponseSerializer,
    DeactivateDeviceRequestSerializer,
    DeactivateDeviceResponseSerializer,
)
from customers.infrastructure.repositories.django_customer_repository import (
    DjangoCustomerRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from teams.infrastructure.repositories.django_team_member_repository import (
    DjangoTeamMemberRepository,
)
from teams.infrastructure.repositories.django_team_repository import DjangoTeamRepository


# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()
_activation_repo = DjangoActivationRepository()
_customer_repo = DjangoCustomerRepository()
_team_repo = DjangoTeamRepository()
_team_member_repo = DjangoTeamMemberRepository()


class ActivateLicenseView(APIView):
    """View for activating a license on a device."""

    @extend_schema(
        operation_id="activate_license",
        summary="Activate License",
        description=(
            "Activate a license on a device. Re-activating a device that is "
            "already active returns the same instance id. Team licenses "
            "require the email of an active team member."
        ),
        tags=["License API"],
        request=ActivateLicenseRequestSerializer,
        responses={
            200: ActivateLicenseResponseSerializer,
            400: {"description": "Invalid key format, license not active, or bad request"},
            403: {"description": "Caller is not a member of the team"},
            404: {"description": "License key not found"},
            409: {"description": "Activation limit reached"},
        },
    )
    def post(self, request: Request) -> Response:
        """Activate a license on a device."""
        serializer = ActivateLicenseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        handler = ActivateLicenseHandler(
            license_repository=_license_repo,
            activation_repository=_activation_repo,
            customer_repository=_customer_repo,
            team_repository=_team_repo,
            team_member_repository=_team_member_repo,
        )
        result = handler.handle(
            ActivateLicenseCommand(
                license_key=data["license_key"],
                device_id=data["device_id"],
                device_name=data["device_name"],
                os=data.get("os", ""),
                app_version=data.get("app_version", ""),
                email=data.get("email") or None,
            )
        )

        response_serializer = ActivateLicenseResponseSerializer(result)
        return Response({"success": True, **response_serializer.data}, status=status.HTTP_200_OK)


class DeactivateDeviceView(APIView):
    """View for releasing a device slot."""

    @extend_schema(
        operation_id="deactivate_device",
        summary="Deactivate Device",
        description=(
            "Release the device slot held by an activation. The slot becomes "
            "available for activation on another device."
        ),
        tags=["License API"],
        request=DeactivateDeviceRequestSerializer,
        responses={
            200: DeactivateDeviceResponseSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "License key or activation not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Deactivate a device."""
        serializer = DeactivateDeviceRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = DeactivateDeviceHandler(
            license_repository=_license_repo,
            activation_repository=_activation_repo,
        )
        result = handler.handle(
            DeactivateDeviceCommand(
                license_key=serializer.validated_data["license_key"],
                instance_id=serializer.validated_data["instance_id"],
            )
        )

        response_serializer = DeactivateDeviceResponseSerializer(result)
        return Response({"success": True, **response_serializer.data}, status=status.HTTP_200_OK)
