"""Customer aggregate."""
from dataclasses import dataclass, replace

from ..value_objects import CustomerEmail, CustomerId, CustomerName


@dataclass(frozen=True)
class Customer:
    """
    Registered customer.

    Immutable: ``update_name`` and ``update_email`` return new instances.
    """
    id: CustomerId
    name: CustomerName
    email: CustomerEmail

    @classmethod
    def create(
        cls, customer_id: CustomerId, name: CustomerName, email: CustomerEmail
    ) -> "Customer":
        """Create a new Customer from validated value objects."""
        return cls(id=customer_id, name=name, email=email)

    @classmethod
    def reconstitute(
        cls, customer_id: CustomerId, name: CustomerName, email: CustomerEmail
    ) -> "Customer":
        """Rebuild a Customer from persisted state."""
        return cls(id=customer_id, name=name, email=email)

    def update_name(self, new_name: CustomerName) -> "Customer":
        return replace(self, name=new_name)

    def update_email(self, new_email: CustomerEmail) -> "Customer":
        return replace(self, email=new_email)
