"""
License model.
"""
import uuid

from django.db import models


class License(models.Model):
    """
    A license bought by a customer.

    Individual licenses have no team and no seat count. Team and
    enterprise licenses have both.
    """

    PLAN_CHOICES = [
        ("pro", "Pro"),
        ("team", "Team"),
        ("enterprise", "Enterprise"),
    ]

    STATUS_CHOICES = [
        ("active", "Active"),
        ("revoked", "Revoked"),
        ("expired", "Expired"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        "customers.Customer", on_delete=models.PROTECT, related_name="licenses"
    )
    key = models.CharField(max_length=40, unique=True, db_index=True)
    plan = models.CharField(max_length=20, choices=PLAN_CHOICES)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="active")
    max_activations = models.PositiveIntegerField(help_text="Maximum simultaneously active devices")
    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="licenses",
    )
    seat_count = models.PositiveIntegerField(null=True, blank=True)
    purchased_at = models.DateTimeField()
    updates_until = models.DateTimeField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "status"]),
            models.Index(fields=["team"]),
        ]

    def __str__(self):
        return f"{self.key} ({self.plan})"
