"""
Django implementation of CustomerRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import Dict, List, Optional

from django.utils import timezone

from core.domain.value_objects import Email
from customers.domain.customer import Customer
from customers.infrastructure.models import Customer as CustomerModel
from customers.ports.customer_repository import CustomerRepository


class DjangoCustomerRepository(CustomerRepository):
    """Django ORM implementation of CustomerRepository."""

    def _to_domain(self, model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            email=model.email,
            name=model.name,
            external_auth_id=model.external_auth_id,
            payment_customer_id=model.payment_customer_id,
            created_at=model.created_at,
        )

    def save(self, customer: Customer) -> Customer:
        """
        Save a customer entity.

        Args:
            customer: Customer entity to save

        Returns:
            Saved customer entity
        """
        model, _ = CustomerModel.objects.update_or_create(
            id=customer.id,
            defaults={
                "email": customer.email,
                "name": customer.name,
                "external_auth_id": customer.external_auth_id,
                "payment_customer_id": customer.payment_customer_id,
                "created_at": customer.created_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        try:
            return self._to_domain(CustomerModel.objects.get(id=customer_id))
        except CustomerModel.DoesNotExist:
            return None

    def find_by_email(self, email: Email) -> Optional[Customer]:
        try:
            return self._to_domain(CustomerModel.objects.get(email=email.value))
        except CustomerModel.DoesNotExist:
            return None

    def get_or_create(self, email: Email, name: Optional[str] = None) -> Customer:
        """
        Return the customer for an email, creating it if needed.

        Concurrent creators of the same email end up with the same row:
        the loser of the unique-constraint race re-reads it.

        Args:
            email: Normalized email
            name: Display name used only when creating

        Returns:
            Existing or new Customer entity
        """
        model, _ = CustomerModel.objects.get_or_create(
            email=email.value,
            defaults={"name": name, "created_at": timezone.now()},
        )
        return self._to_domain(model)

    def find_by_ids(self, customer_ids: List[uuid.UUID]) -> Dict[uuid.UUID, Customer]:
        models = CustomerModel.objects.filter(id__in=customer_ids)
        return {model.id: self._to_domain(model) for model in models}
