"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository`` and counting
creation requests on the injected ``IMetrics`` sink.

Business rules enforced here:
- Email address must be unique, checked before every create.  The check
  is a read followed by a separate write, so two concurrent creates with
  the same email can both pass it.  Updates do not re-check.
- Update/delete require an existing customer.
- Update replaces every mutable field; the id is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.core.metrics import IMetrics, NullMetrics
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerInputDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

CREATION_REQUESTS_METRIC = "customer.creation.requests"

MUTABLE_FIELDS = (
    "first_name",
    "middle_name",
    "last_name",
    "email_address",
    "phone_number",
)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` and, optionally, an ``IMetrics``
    sink via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        metrics: Optional[IMetrics] = None,
    ) -> None:
        self._repo = repository
        self._metrics = metrics if metrics is not None else NullMetrics()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerInputDTO) -> Customer:
        """Create a new customer after enforcing email uniqueness.

        The creation counter is incremented before the check, so rejected
        duplicates are counted too.

        Raises:
            CustomerAlreadyExists: if the email address is already taken.
        """
        self._metrics.increment(CREATION_REQUESTS_METRIC)

        if self._repo.find_by_email(dto.email_address):
            logger.warning("customer.duplicate_email", email=dto.email_address)
            raise CustomerAlreadyExists(dto.email_address)

        customer = Customer(**{field: getattr(dto, field) for field in MUTABLE_FIELDS})
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: CustomerInputDTO) -> Customer:
        """Replace every mutable field of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self.get_customer(id)

        for field in MUTABLE_FIELDS:
            setattr(customer, field, getattr(dto, field))

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        """Hard-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self.get_customer(id)
        self._repo.delete(customer)
        logger.info("customer.deleted", customer_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        """Return every customer, unfiltered and unsorted."""
        logger.info("customer.list_requested")
        return self._repo.find_all()

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.find_by_id(id)
        if not customer:
            logger.warning("customer.not_found", customer_id=str(id))
            raise CustomerNotFound(id)
        logger.info("customer.retrieved", customer_id=str(id))
        return customer
