"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from ..enums import OrderStatus
from ..errors import CannotCancelShippedOrderError, InvalidOrderError
from ..pricing import PricingStrategy, StandardPricing
from ..value_objects import OrderId, OrderItem


@dataclass(frozen=True)
class Order:
    """
    Order aggregate root.

    Owns its line items and enforces the order lifecycle rules:

    - an order always has at least one item
    - a shipped order can never be cancelled
    - cancelling a cancelled order is a no-op that returns the same instance

    Orders are immutable. Operations that change state return a new Order
    that shares the unchanged item tuple with the original.

    ``customer_id`` is a plain string so the Order context does not depend on
    Customer domain types.

    Use ``Order.create()`` for new orders and ``Order.reconstitute()`` when
    loading already-validated state from storage.
    """
    id: OrderId
    items: Tuple[OrderItem, ...]
    status: OrderStatus
    created_at: datetime
    customer_id: Optional[str] = None

    @classmethod
    def create(
        cls,
        order_id: OrderId,
        items: Iterable[OrderItem],
        customer_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "Order":
        """
        Factory method to create a new pending Order.

        Item-level validation is the caller's job (see ``OrderItem.create``).

        Args:
            order_id: Order identifier
            items: Line items, at least one
            customer_id: Optional reference to the ordering customer
            created_at: Creation timestamp, defaults to now (UTC)

        Returns:
            New Order in PENDING status

        Raises:
            InvalidOrderError: If ``items`` is empty
        """
        # Materialize first: generators are truthy even when empty
        items = tuple(items)
        if not items:
            raise InvalidOrderError("Order must have at least one item")

        return cls(
            id=order_id,
            items=items,
            status=OrderStatus.PENDING,
            created_at=created_at or datetime.now(timezone.utc),
            customer_id=customer_id,
        )

    @classmethod
    def reconstitute(
        cls,
        order_id: OrderId,
        items: Iterable[OrderItem],
        status: OrderStatus,
        created_at: datetime,
        customer_id: Optional[str] = None,
    ) -> "Order":
        """Rebuild an Order from persisted state without re-checking invariants."""
        return cls(
            id=order_id,
            items=tuple(items),
            status=status,
            created_at=created_at,
            customer_id=customer_id,
        )

    def cancel(self) -> "Order":
        """
        Business rule: cancel the order.

        Returns:
            A new cancelled Order, or ``self`` if already cancelled

        Raises:
            CannotCancelShippedOrderError: If the order has been shipped
        """
        if self.status == OrderStatus.SHIPPED:
            raise CannotCancelShippedOrderError(str(self.id))

        if self.status == OrderStatus.CANCELLED:
            return self

        return replace(self, status=OrderStatus.CANCELLED)

    @property
    def subtotal(self) -> Decimal:
        """Sum of all item totals."""
        return sum((item.total for item in self.items), Decimal("0"))

    @property
    def total_amount(self) -> Decimal:
        """Total under standard pricing (no discounts)."""
        return self.calculate_total(StandardPricing())

    def calculate_total(self, pricing_strategy: PricingStrategy) -> Decimal:
        """
        Apply a pricing strategy to the subtotal.

        The strategy is a parameter, not state: it is a calculation policy
        chosen by the caller, not a fact about the order.
        """
        return pricing_strategy.calculate_final_price(self.subtotal)
