"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into an API response.  Any other database failure
propagates unchanged.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def find_all(self) -> List[Customer]:
        return list(Customer.objects.all())

    def find_by_email(self, email_address: str) -> Optional[Customer]:
        return Customer.objects.filter(email_address=email_address).first()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "customer.saved",
            customer_id=str(entity.id),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        customer_id = str(entity.id)
        entity.delete()
        logger.info("customer.deleted", customer_id=customer_id)
