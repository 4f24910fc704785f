"""
Activation Django ORM model.

This is the infrastructure layer model for activations.
Domain entities are in activations.domain.activation.
"""
import uuid

from django.db import models
from django.db.models import Q


class Activation(models.Model):
    """
    Represents one device on which a license is activated.
    Active rows count against the license's device limit.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    license = models.ForeignKey(
        "licenses.License",
        on_delete=models.CASCADE,
        related_name="activations",
    )
    device_id = models.CharField(max_length=255, help_text="Stable machine identifier")
    device_name = models.CharField(max_length=255, blank=True, default="")
    os = models.CharField(max_length=100, blank=True, default="")
    app_version = models.CharField(max_length=50, blank=True, default="")
    instance_id = models.CharField(max_length=64, unique=True, db_index=True)
    member = models.ForeignKey(
        "teams.TeamMember",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activations",
    )
    activated_at = models.DateTimeField()
    last_validated_at = models.DateTimeField()
    deactivated_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "activations"
        ordering = ["-activated_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["license", "device_id"],
                condition=Q(is_active=True),
                name="unique_active_device_per_license",
            ),
        ]
        indexes = [
            models.Index(fields=["license", "device_id"]),
            models.Index(fields=["license", "is_active"]),
            models.Index(fields=["member", "is_active"]),
        ]

    def __str__(self):
        return f"{self.license_id} @ {self.device_id}"
