"""
Team and TeamMember models.
"""
import uuid

from django.db import models


class Team(models.Model):
    """A group of customers sharing one seat-based license."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    owner = models.ForeignKey(
        "customers.Customer", on_delete=models.PROTECT, related_name="owned_teams"
    )
    created_at = models.DateTimeField()

    class Meta:
        db_table = "teams"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class TeamMember(models.Model):
    """
    Membership of a customer in a team.

    Only members with status 'active' occupy a seat.
    """

    ROLE_CHOICES = [
        ("owner", "Owner"),
        ("admin", "Admin"),
        ("member", "Member"),
    ]

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("active", "Active"),
        ("removed", "Removed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="members")
    customer = models.ForeignKey(
        "customers.Customer", on_delete=models.PROTECT, related_name="memberships"
    )
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="member")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="active")
    invited_by = models.ForeignKey(
        "customers.Customer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sent_invitations",
    )
    invited_at = models.DateTimeField()
    joined_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "team_members"
        ordering = ["invited_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["team", "customer"], name="unique_team_customer"
            ),
        ]
        indexes = [
            models.Index(fields=["team", "status"]),
        ]

    def __str__(self):
        return f"{self.customer_id} in {self.team_id} ({self.role}, {self.status})"
