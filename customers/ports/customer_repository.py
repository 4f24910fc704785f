"""
Customer repository port (interface).

This defines the contract for customer persistence operations.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import uuid

from core.domain.value_objects import Email
from customers.domain.customer import Customer


class CustomerRepository(ABC):
    """Abstract repository for Customer entities."""

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """
        Save a customer entity.

        Args:
            customer: Customer entity to save

        Returns:
            Saved customer entity
        """
        pass

    @abstractmethod
    def find_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        """
        Find a customer by ID.

        Args:
            customer_id: Customer UUID

        Returns:
            Customer entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[Customer]:
        """
        Find a customer by email.

        Args:
            email: Normalized email

        Returns:
            Customer entity or None if not found
        """
        pass

    @abstractmethod
    def get_or_create(self, email: Email, name: Optional[str] = None) -> Customer:
        """
        Return the customer for an email, creating it if needed.

        Args:
            email: Normalized email
            name: Display name used only when creating

        Returns:
            Existing or new Customer entity
        """
        pass

    @abstractmethod
    def find_by_ids(self, customer_ids: List[uuid.UUID]) -> Dict[uuid.UUID, Customer]:
        """
        Find several customers at once.

        Args:
            customer_ids: Customer UUIDs

        Returns:
            Mapping of customer UUID to Customer entity
        """
        pass
