"""
Django admin configuration for activations app.
"""

from django.contrib import admin
from django.utils.html import format_html

from activations.infrastructure.models import Activation


@admin.register(Activation)
class ActivationAdmin(admin.ModelAdmin):
    """Admin interface for Activation model."""

    list_display = [
        "license",
        "device_display",
        "os",
        "app_version",
        "is_active_display",
        "activated_at",
        "last_validated_at",
    ]
    list_filter = ["is_active", "os", "activated_at", "license__plan"]
    search_fields = [
        "device_id",
        "device_name",
        "instance_id",
        "license__key",
        "license__customer__email",
    ]
    readonly_fields = [
        "id",
        "instance_id",
        "activated_at",
        "last_validated_at",
        "deactivated_at",
    ]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "license", "instance_id", "member", "is_active"),
            },
        ),
        (
            "Device",
            {
                "fields": ("device_id", "device_name", "os", "app_version"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("activated_at", "last_validated_at", "deactivated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def device_display(self, obj):
        """Display device name, falling back to the truncated device id."""
        if obj.device_name:
            return obj.device_name
        if len(obj.device_id) > 40:
            return format_html(
                '<span title="{}">{}</span>',
                obj.device_id,
                obj.device_id[:37] + "...",
            )
        return obj.device_id

    device_display.short_description = "Device"

    def is_active_display(self, obj):
        """Display active status with color."""
        if obj.is_active:
            return format_html('<span style="color: green; font-weight: bold;">Active</span>')
        return format_html('<span style="color: red; font-weight: bold;">Inactive</span>')

    is_active_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("license", "member")
