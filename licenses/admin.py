"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "key",
        "customer",
        "plan",
        "status_display",
        "max_activations",
        "devices_used",
        "seat_count",
        "updates_until",
        "created_at",
    ]
    list_filter = ["plan", "status", "created_at"]
    search_fields = ["key", "customer__email", "team__name"]
    readonly_fields = ["id", "key", "created_at", "devices_used"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "key", "customer", "plan", "status"),
            },
        ),
        (
            "Limits",
            {
                "fields": ("max_activations", "devices_used", "team", "seat_count"),
            },
        ),
        (
            "Dates",
            {
                "fields": ("purchased_at", "updates_until", "created_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def status_display(self, obj):
        """Display status with color coding."""
        colors = {
            "active": "green",
            "revoked": "red",
            "expired": "gray",
        }
        color = colors.get(obj.status, "black")
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            obj.status.upper(),
        )

    status_display.short_description = "Status"

    def devices_used(self, obj):
        """Display number of active device activations."""
        return obj.activations.filter(is_active=True).count()

    devices_used.short_description = "Devices Used"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("customer", "team")
