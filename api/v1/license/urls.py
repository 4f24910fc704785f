"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.license import views

urlpatterns = [
    path(
        "activate",
        views.ActivateLicenseView.as_view(),
        name="activate-license",
    ),
    path(
        "deactivate",
        views.DeactivateDeviceView.as_view(),
        name="deactivate-device",
    ),
]
