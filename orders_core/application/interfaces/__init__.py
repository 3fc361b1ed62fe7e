"""Application layer interfaces."""
from abc import ABC, abstractmethod


class CustomerValidator(ABC):
    """
    Interface for checking customer existence from the Order context.

    Only what the Order context needs from the Customer context, so the two
    contexts stay decoupled.
    """

    @abstractmethod
    async def customer_exists(self, customer_id: str) -> bool:
        """
        Check whether a customer exists.

        Args:
            customer_id: Customer identifier

        Returns:
            True if the customer exists, False otherwise
        """
        pass


__all__ = ["CustomerValidator"]
