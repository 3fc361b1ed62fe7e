"""Order item value object."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from ..errors import InvalidOrderItemError


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOrderItemError("Price per unit must be a number")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidOrderItemError(f"Price per unit must be a number, got: {value!r}")


@dataclass(frozen=True)
class OrderItem:
    """
    Individual line item within an order.

    Has no identity of its own; two items with the same attributes are
    equal. Prices are kept as Decimal, never float.
    """
    product_id: str
    product_name: str
    quantity: int
    price_per_unit: Decimal

    @classmethod
    def create(
        cls,
        product_id: str,
        product_name: str,
        quantity: int,
        price_per_unit: Any,
    ) -> "OrderItem":
        """
        Build a validated order item.

        Args:
            product_id: Product identifier (non-empty)
            product_name: Product display name (non-empty)
            quantity: Units ordered, a whole number greater than zero
            price_per_unit: Unit price, zero or more

        Returns:
            New OrderItem

        Raises:
            InvalidOrderItemError: If any attribute is invalid
        """
        if not product_id or not str(product_id).strip():
            raise InvalidOrderItemError("Product ID cannot be empty")

        if not product_name or not str(product_name).strip():
            raise InvalidOrderItemError("Product name cannot be empty")

        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidOrderItemError(
                f"Quantity must be a whole number, got: {quantity!r}"
            )

        if quantity <= 0:
            raise InvalidOrderItemError("Quantity must be greater than zero")

        price = _to_decimal(price_per_unit)
        if not price.is_finite():
            raise InvalidOrderItemError("Price per unit must be a finite number")
        if price < 0:
            raise InvalidOrderItemError("Price per unit cannot be negative")

        return cls(
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            price_per_unit=price,
        )

    @property
    def total(self) -> Decimal:
        """Line total: quantity times unit price."""
        return self.price_per_unit * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted item shape."""
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
            "pricePerUnit": str(self.price_per_unit),
        }
