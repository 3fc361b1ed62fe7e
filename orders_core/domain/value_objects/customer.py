"""Customer value objects - pure Python immutable types."""

import re
from dataclasses import dataclass

from ..errors import InvalidCustomerEmailError, InvalidCustomerNameError

MAX_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 320

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class CustomerName:
    """
    Customer display name.

    Stored trimmed; must be non-empty and at most 200 characters.
    """
    value: str

    @classmethod
    def create(cls, value: str) -> "CustomerName":
        trimmed = (value or "").strip()
        if not trimmed:
            raise InvalidCustomerNameError("Customer name cannot be empty")

        if len(trimmed) > MAX_NAME_LENGTH:
            raise InvalidCustomerNameError(
                f"Customer name cannot exceed {MAX_NAME_LENGTH} characters"
            )

        return cls(value=trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomerEmail:
    """
    Customer email address.

    Input is trimmed, checked against a lightweight address pattern and
    stored lower-cased so two spellings of the same address compare equal.
    """
    value: str

    @classmethod
    def create(cls, value: str) -> "CustomerEmail":
        trimmed = (value or "").strip()
        if not trimmed:
            raise InvalidCustomerEmailError("Customer email cannot be empty")

        if not _EMAIL_PATTERN.match(trimmed):
            raise InvalidCustomerEmailError(
                "Customer email must be a valid email address"
            )

        if len(trimmed) > MAX_EMAIL_LENGTH:
            raise InvalidCustomerEmailError(
                f"Customer email cannot exceed {MAX_EMAIL_LENGTH} characters"
            )

        return cls(value=trimmed.lower())

    def __str__(self) -> str:
        return self.value
