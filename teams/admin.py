"""
Django admin configuration for teams app.
"""
from django.contrib import admin

from teams.infrastructure.models import Team, TeamMember


class TeamMemberInline(admin.TabularInline):
    """Inline roster on the team page."""

    model = TeamMember
    fk_name = "team"
    extra = 0
    fields = ["customer", "role", "status", "invited_by", "invited_at", "joined_at"]
    readonly_fields = ["invited_at", "joined_at"]


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    """Admin interface for Team model."""

    list_display = ["name", "owner", "seats_used", "created_at"]
    search_fields = ["name", "owner__email"]
    readonly_fields = ["id", "created_at"]
    inlines = [TeamMemberInline]

    def seats_used(self, obj):
        """Display number of active members."""
        return obj.members.filter(status="active").count()

    seats_used.short_description = "Seats Used"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("owner")
