"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-up required by
the email uniqueness rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_email(self, email_address: str) -> Optional[Customer]:
        """Retrieve the customer with exactly this email address."""
