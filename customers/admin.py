"""
Django admin configuration for customers app.
"""
from django.contrib import admin

from customers.infrastructure.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for Customer model."""

    list_display = ["email", "name", "license_count", "created_at"]
    search_fields = ["email", "name", "external_auth_id", "payment_customer_id"]
    readonly_fields = ["id", "created_at"]

    def license_count(self, obj):
        """Display number of licenses bought by this customer."""
        return obj.licenses.count()

    license_count.short_description = "Licenses"
