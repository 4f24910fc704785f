"""
Customer model.
"""
import uuid

from django.db import models


class Customer(models.Model):
    """
    A person who buys or uses licenses.

    The email is stored trimmed and lower-cased, so the unique
    constraint is case-insensitive in practice.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, unique=True, db_index=True)
    name = models.CharField(max_length=255, null=True, blank=True)
    external_auth_id = models.CharField(max_length=255, unique=True, null=True, blank=True)
    payment_customer_id = models.CharField(max_length=255, unique=True, null=True, blank=True)
    created_at = models.DateTimeField()

    class Meta:
        db_table = "customers"
        ordering = ["email"]

    def __str__(self):
        return self.email
