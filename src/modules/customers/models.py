"""Customer model.

Field constraints (lengths, phone pattern, email syntax) are validated on
the way in by ``CustomerInputDTO``; the model only mirrors the column
shapes.  ``email_address`` is indexed but deliberately NOT unique at the
database level: uniqueness is a service-layer rule (pre-write look-up).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel

NAME_MAX_LENGTH = 50
PHONE_MAX_LENGTH = 16


class Customer(BaseModel):
    """Customer aggregate root."""

    first_name = models.CharField(max_length=NAME_MAX_LENGTH)
    middle_name = models.TextField(null=True, blank=True, default=None)  # noqa: DJ001
    last_name = models.CharField(max_length=NAME_MAX_LENGTH)
    email_address = models.EmailField(max_length=254)
    phone_number = models.CharField(max_length=PHONE_MAX_LENGTH)

    class Meta:
        db_table = "customers"
        indexes = [
            models.Index(fields=["email_address"], name="customers_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email_address}>"
