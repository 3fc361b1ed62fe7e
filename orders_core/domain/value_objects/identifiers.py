"""Identifier value objects."""

from dataclasses import dataclass
from uuid import uuid4

from ..errors import InvalidCustomerIdError, InvalidOrderIdError


@dataclass(frozen=True)
class OrderId:
    """
    Opaque order identifier.

    Build through ``OrderId.create`` which rejects empty or
    whitespace-only values.
    """
    value: str

    @classmethod
    def create(cls, value: str) -> "OrderId":
        if not value or not str(value).strip():
            raise InvalidOrderIdError("OrderId cannot be empty")
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomerId:
    """Opaque customer identifier."""
    value: str

    @classmethod
    def create(cls, value: str) -> "CustomerId":
        if not value or not str(value).strip():
            raise InvalidCustomerIdError("CustomerId cannot be empty")
        return cls(value=value)

    @classmethod
    def generate(cls) -> "CustomerId":
        """Generate a new random CustomerId."""
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value
