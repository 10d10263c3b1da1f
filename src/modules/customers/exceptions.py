"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.  The exception message is the response
body, so it must stay client-safe.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """Another customer already uses the requested email address."""

    def __init__(self, email_address: str) -> None:
        self.email_address = email_address
        super().__init__(f"Email address must be unique: {email_address}")


class CustomerNotFound(Exception):
    """No customer exists with the requested ID."""

    def __init__(self, customer_id: object) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer not found with ID: {customer_id}")
