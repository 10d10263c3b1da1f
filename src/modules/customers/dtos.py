"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CustomerInputDTO``: request body for create and full-replace update.

Each field has its own validator, and pydantic runs all of them before
raising, so one ``ValidationError`` carries every failing field.
``field_errors`` flattens it into the ``{field: message}`` map returned
to clients.  Keys are the camelCase JSON names.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from modules.customers.models import NAME_MAX_LENGTH

PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")

NON_FIELD_ERRORS = "non_field_errors"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_name(value: Optional[str], label: str) -> str:
    if _is_blank(value):
        raise PydanticCustomError("blank", f"{label} is mandatory")
    if len(value) > NAME_MAX_LENGTH:
        raise PydanticCustomError(
            "too_long", f"{label} must be at most {NAME_MAX_LENGTH} characters"
        )
    return value


class CustomerInputDTO(BaseModel):
    """Immutable DTO for customer create/update requests.

    Validates:
    - ``firstName`` / ``lastName``: non-blank, at most 50 characters.
    - ``emailAddress``: non-blank, a bare address (``email-validator``, no display name).
    - ``phoneNumber``: non-blank, optional ``+`` followed by 10-15 digits.
    - ``middleName``: unrestricted.

    Unknown keys, ``id`` included, are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        extra="ignore",
    )

    first_name: Optional[str] = Field(default=None, alias="firstName")
    middle_name: Optional[str] = Field(default=None, alias="middleName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")

    @field_validator("first_name")
    @classmethod
    def check_first_name(cls, v: Optional[str]) -> str:
        return _check_name(v, "First Name")

    @field_validator("last_name")
    @classmethod
    def check_last_name(cls, v: Optional[str]) -> str:
        return _check_name(v, "Last Name")

    @field_validator("email_address")
    @classmethod
    def check_email_address(cls, v: Optional[str]) -> str:
        if _is_blank(v):
            raise PydanticCustomError("blank", "Email address is mandatory")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email", "Invalid email address") from None
        # stored exactly as submitted, not normalised
        return v

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, v: Optional[str]) -> str:
        if _is_blank(v):
            raise PydanticCustomError("blank", "Phone Number is mandatory")
        if not PHONE_PATTERN.fullmatch(v):
            raise PydanticCustomError(
                "phone_pattern",
                "Phone Number must be valid and contain 10 to 15 digits",
            )
        return v


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map each failing field (camelCase) to its first violation message."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else NON_FIELD_ERRORS
        errors.setdefault(field, error["msg"])
    return errors
